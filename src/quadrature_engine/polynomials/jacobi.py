"""
Jacobi polynomials P_k^(alpha, beta).

Orthogonal under (1-x)^alpha (1+x)^beta on [-1, 1].
"""

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from quadrature_engine.core.exceptions import InvalidShapeParameterError
from quadrature_engine.polynomials.base import OrthogonalPolynomial


@dataclass(frozen=True)
class JacobiPolynomial(OrthogonalPolynomial):
    """
    Jacobi polynomials.

    Recurrence, with t = 2k + alpha + beta:
        P_0 = 1
        P_1 = (alpha - beta + (alpha + beta + 2) x) / 2
        a_k P_k = b_k(x) P_{k-1} - c_k P_{k-2}
    where
        a_k = 2k (k + alpha + beta) (t - 2)
        b_k = (t - 1) (alpha^2 - beta^2 + t (t - 2) x)
        c_k = 2 (k - 1 + alpha) (k - 1 + beta) t

    Attributes:
        alpha: Exponent of (1 - x), must be finite and > -1.
        beta: Exponent of (1 + x), must be finite and > -1.
    """

    alpha: float = 0.0
    beta: float = 0.0

    def __post_init__(self) -> None:
        if not (math.isfinite(self.alpha) and self.alpha > -1.0):
            raise InvalidShapeParameterError("jacobi", "alpha", self.alpha)
        if not (math.isfinite(self.beta) and self.beta > -1.0):
            raise InvalidShapeParameterError("jacobi", "beta", self.beta)

    def _recurrence(
        self,
        x: NDArray[np.float64],
        n: int,
        values: NDArray[np.float64],
        derivatives: NDArray[np.float64],
    ) -> None:
        a, b = self.alpha, self.beta
        values[0] = 1.0
        derivatives[0] = 0.0
        if n == 0:
            return
        values[1] = 0.5 * (a - b + (a + b + 2.0) * x)
        derivatives[1] = 0.5 * (a + b + 2.0)
        for k in range(2, n + 1):
            t = 2 * k + a + b
            a_k = 2 * k * (k + a + b) * (t - 2)
            b_k = (t - 1) * (a * a - b * b + t * (t - 2) * x)
            db_k = (t - 1) * t * (t - 2)
            c_k = 2 * (k - 1 + a) * (k - 1 + b) * t
            values[k] = (b_k * values[k - 1] - c_k * values[k - 2]) / a_k
            derivatives[k] = (
                db_k * values[k - 1]
                + b_k * derivatives[k - 1]
                - c_k * derivatives[k - 2]
            ) / a_k
