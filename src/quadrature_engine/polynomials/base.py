"""
Abstract base for orthogonal polynomial families.

Each family evaluates every degree 0..n at once by running its three-term
recurrence at the requested points. The first derivatives come from the same
recurrence differentiated term by term, so no symbolic differentiation is
involved.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

import numpy as np
from numpy.typing import ArrayLike, NDArray

RealFunction = Callable[[ArrayLike], NDArray[np.float64] | np.float64]


@dataclass(frozen=True)
class PolynomialPair:
    """
    Value and first-derivative functions of one polynomial degree.

    Attributes:
        value: Maps x (scalar or array) to p(x).
        derivative: Maps x (scalar or array) to p'(x).
    """

    value: RealFunction
    derivative: RealFunction


class OrthogonalPolynomial(ABC):
    """
    Base class for orthogonal polynomial families.

    Subclasses implement ``_recurrence``, which fills preallocated value and
    derivative arrays for degrees 0..n. Instances hold only their shape
    parameters and are safe to share.
    """

    def evaluate(
        self, x: ArrayLike, n: int
    ) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        """
        Evaluate all polynomials of degree 0..n and their derivatives at x.

        Args:
            x: Point or array of points.
            n: Highest degree to evaluate.

        Returns:
            Tuple (values, derivatives), each of shape (n + 1, *x.shape).
            values[k] holds the degree-k polynomial at x.

        Raises:
            ValueError: If n < 0.
        """
        _check_degree(n)
        points = np.asarray(x, dtype=np.float64)
        values = np.empty((n + 1,) + points.shape, dtype=np.float64)
        derivatives = np.empty_like(values)
        self._recurrence(points, n, values, derivatives)
        return values, derivatives

    def polynomials_and_derivatives(
        self, n: int
    ) -> tuple[PolynomialPair, ...]:
        """
        Build the ascending sequence of (value, derivative) pairs.

        Args:
            n: Highest degree.

        Returns:
            Tuple of length n + 1; entry k is the degree-k pair.

        Raises:
            ValueError: If n < 0.
        """
        _check_degree(n)
        return tuple(
            PolynomialPair(
                value=partial(self._value_at, degree=k),
                derivative=partial(self._derivative_at, degree=k),
            )
            for k in range(n + 1)
        )

    def _value_at(
        self, x: ArrayLike, degree: int
    ) -> NDArray[np.float64] | np.float64:
        values, _ = self.evaluate(x, degree)
        result: NDArray[np.float64] | np.float64 = values[degree]
        return result

    def _derivative_at(
        self, x: ArrayLike, degree: int
    ) -> NDArray[np.float64] | np.float64:
        _, derivatives = self.evaluate(x, degree)
        result: NDArray[np.float64] | np.float64 = derivatives[degree]
        return result

    @abstractmethod
    def _recurrence(
        self,
        x: NDArray[np.float64],
        n: int,
        values: NDArray[np.float64],
        derivatives: NDArray[np.float64],
    ) -> None:
        """
        Fill values[0..n] and derivatives[0..n] at x in place.

        Args:
            x: Evaluation points.
            n: Highest degree (>= 0).
            values: Output array, shape (n + 1, *x.shape).
            derivatives: Output array, shape (n + 1, *x.shape).
        """
        ...


def _check_degree(n: int) -> None:
    if n < 0:
        raise ValueError(f"Polynomial degree must be >= 0, got {n}")
