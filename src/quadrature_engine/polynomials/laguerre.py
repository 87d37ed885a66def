"""Generalized Laguerre polynomials, orthogonal under x^alpha e^-x."""

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from quadrature_engine.core.exceptions import InvalidShapeParameterError
from quadrature_engine.polynomials.base import OrthogonalPolynomial


@dataclass(frozen=True)
class LaguerrePolynomial(OrthogonalPolynomial):
    """
    Generalized Laguerre polynomials.

    Recurrence:
        L_0 = 1
        L_1 = 1 + alpha - x
        k L_k = (2k - 1 + alpha - x) L_{k-1} - (k - 1 + alpha) L_{k-2}

    Attributes:
        alpha: Shape parameter, must be finite and > -1.
    """

    alpha: float = 0.0

    def __post_init__(self) -> None:
        if not (math.isfinite(self.alpha) and self.alpha > -1.0):
            raise InvalidShapeParameterError("laguerre", "alpha", self.alpha)

    def _recurrence(
        self,
        x: NDArray[np.float64],
        n: int,
        values: NDArray[np.float64],
        derivatives: NDArray[np.float64],
    ) -> None:
        a = self.alpha
        values[0] = 1.0
        derivatives[0] = 0.0
        if n == 0:
            return
        values[1] = 1.0 + a - x
        derivatives[1] = -1.0
        for k in range(2, n + 1):
            c1 = 2 * k - 1 + a - x
            c2 = k - 1 + a
            values[k] = (c1 * values[k - 1] - c2 * values[k - 2]) / k
            derivatives[k] = (
                c1 * derivatives[k - 1]
                - values[k - 1]
                - c2 * derivatives[k - 2]
            ) / k
