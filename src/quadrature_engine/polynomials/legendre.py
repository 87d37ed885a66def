"""Legendre polynomials P_k, orthogonal under weight 1 on [-1, 1]."""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from quadrature_engine.polynomials.base import OrthogonalPolynomial


@dataclass(frozen=True)
class LegendrePolynomial(OrthogonalPolynomial):
    """
    Legendre polynomials.

    Recurrence:
        P_0 = 1
        P_1 = x
        k P_k = (2k - 1) x P_{k-1} - (k - 1) P_{k-2}
    """

    def _recurrence(
        self,
        x: NDArray[np.float64],
        n: int,
        values: NDArray[np.float64],
        derivatives: NDArray[np.float64],
    ) -> None:
        values[0] = 1.0
        derivatives[0] = 0.0
        if n == 0:
            return
        values[1] = x
        derivatives[1] = 1.0
        for k in range(2, n + 1):
            values[k] = (
                (2 * k - 1) * x * values[k - 1] - (k - 1) * values[k - 2]
            ) / k
            derivatives[k] = (
                (2 * k - 1) * (values[k - 1] + x * derivatives[k - 1])
                - (k - 1) * derivatives[k - 2]
            ) / k
