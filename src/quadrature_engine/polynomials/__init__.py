"""
Orthogonal polynomial families.

Each family evaluates its polynomials and first derivatives for degrees 0..n
through a three-term recurrence:
- LaguerrePolynomial: generalized Laguerre, shape parameter alpha
- LegendrePolynomial: Legendre
- OrthonormalHermitePolynomial: normalized physicists' Hermite
- JacobiPolynomial: Jacobi, shape parameters alpha and beta
"""

from quadrature_engine.polynomials.base import (
    OrthogonalPolynomial,
    PolynomialPair,
)
from quadrature_engine.polynomials.hermite import OrthonormalHermitePolynomial
from quadrature_engine.polynomials.jacobi import JacobiPolynomial
from quadrature_engine.polynomials.laguerre import LaguerrePolynomial
from quadrature_engine.polynomials.legendre import LegendrePolynomial

__all__ = [
    "JacobiPolynomial",
    "LaguerrePolynomial",
    "LegendrePolynomial",
    "OrthogonalPolynomial",
    "OrthonormalHermitePolynomial",
    "PolynomialPair",
]
