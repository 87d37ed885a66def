"""
Gaussian quadrature engine.

Generates abscissas and weights of fixed-order Gaussian quadrature rules for
the Legendre, Laguerre, Hermite and Jacobi polynomial families.
"""

from quadrature_engine.core.exceptions import (
    InvalidOrderError,
    InvalidShapeParameterError,
    QuadratureError,
    RootNotFoundError,
)
from quadrature_engine.core.log_config import configure_logging
from quadrature_engine.core.settings import get_settings
from quadrature_engine.quadrature import (
    GaussianQuadratureIntegrator1D,
    QuadratureData,
    QuadratureFamily,
    generate,
)

configure_logging(get_settings().log_level)

__all__ = [
    "GaussianQuadratureIntegrator1D",
    "InvalidOrderError",
    "InvalidShapeParameterError",
    "QuadratureData",
    "QuadratureError",
    "QuadratureFamily",
    "RootNotFoundError",
    "generate",
]
