"""Orthonormal (physicists') Hermite functions under weight e^{-x^2}."""

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from quadrature_engine.polynomials.base import OrthogonalPolynomial

# pi^{-1/4}, the normalized degree-0 polynomial
H0 = math.pi**-0.25


@dataclass(frozen=True)
class OrthonormalHermitePolynomial(OrthogonalPolynomial):
    """
    Hermite polynomials normalized so that int h_j h_k e^{-x^2} dx = delta_jk.

    Recurrence:
        h_0 = pi^{-1/4}
        h_1 = sqrt(2) x h_0
        h_k = sqrt(2 / k) x h_{k-1} - sqrt((k - 1) / k) h_{k-2}

    The normalized form keeps values O(1) at large degree, where the
    physicists' H_n overflow.
    """

    def _recurrence(
        self,
        x: NDArray[np.float64],
        n: int,
        values: NDArray[np.float64],
        derivatives: NDArray[np.float64],
    ) -> None:
        values[0] = H0
        derivatives[0] = 0.0
        if n == 0:
            return
        values[1] = math.sqrt(2.0) * x * H0
        derivatives[1] = math.sqrt(2.0) * H0
        for k in range(2, n + 1):
            c1 = math.sqrt(2.0 / k)
            c2 = math.sqrt((k - 1) / k)
            values[k] = c1 * x * values[k - 1] - c2 * values[k - 2]
            derivatives[k] = (
                c1 * (values[k - 1] + x * derivatives[k - 1])
                - c2 * derivatives[k - 2]
            )
