"""
Gaussian quadrature rule generation module.

Key components:
- QuadratureFamily: Closed set of polynomial families
- QuadratureData: Immutable abscissas and weights
- FamilyRule / get_rule: Family-specific guesses and weight formulas
- GaussianQuadratureGenerator / generate: Shared generation algorithm
- GaussianQuadratureIntegrator1D: Integration over intervals
- QuadratureConfig: Configuration for generation
"""

from quadrature_engine.quadrature.config import (
    QuadratureConfig,
    RootFinderConfig,
    default_config,
    load_config,
)
from quadrature_engine.quadrature.data_models import QuadratureData
from quadrature_engine.quadrature.enums import QuadratureFamily
from quadrature_engine.quadrature.families import (
    FamilyRule,
    get_rule,
    hermite_rule,
    jacobi_rule,
    laguerre_rule,
    legendre_rule,
)
from quadrature_engine.quadrature.generator import (
    GaussianQuadratureGenerator,
    generate,
)
from quadrature_engine.quadrature.integrators import (
    GaussianQuadratureIntegrator1D,
    normal_quadrature,
    weighted_sum,
)

__all__ = [
    "FamilyRule",
    "GaussianQuadratureGenerator",
    "GaussianQuadratureIntegrator1D",
    "QuadratureConfig",
    "QuadratureData",
    "QuadratureFamily",
    "RootFinderConfig",
    "default_config",
    "generate",
    "get_rule",
    "hermite_rule",
    "jacobi_rule",
    "laguerre_rule",
    "legendre_rule",
    "load_config",
    "normal_quadrature",
    "weighted_sum",
]
