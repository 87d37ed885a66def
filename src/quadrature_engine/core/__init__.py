"""
Core shared types and utilities for the quadrature engine.

This module provides the error hierarchy, environment settings and logging
setup used by the polynomial, root-finding and quadrature submodules.
"""

from quadrature_engine.core.exceptions import (
    InvalidOrderError,
    InvalidShapeParameterError,
    QuadratureError,
    RootNotFoundError,
)
from quadrature_engine.core.log_config import configure_logging
from quadrature_engine.core.settings import EngineSettings, get_settings

__all__ = [
    "EngineSettings",
    "InvalidOrderError",
    "InvalidShapeParameterError",
    "QuadratureError",
    "RootNotFoundError",
    "configure_logging",
    "get_settings",
]
