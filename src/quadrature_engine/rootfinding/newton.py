"""
Newton-Raphson single root finder.

Used by the quadrature generators to refine an initial guess into a root of
an orthogonal polynomial, with the derivative supplied analytically.
"""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import NoReturn

from quadrature_engine.core.exceptions import RootNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-10
DEFAULT_MAX_ITERATIONS = 10000

ScalarFunction = Callable[[float], float]


@dataclass(frozen=True)
class NewtonRaphsonSingleRootFinder:
    """
    Newton-Raphson iteration x_{k+1} = x_k - f(x_k) / f'(x_k).

    Iteration stops when |f(x_k)| or the step size falls below the
    tolerance. The step computed at the converged point is still applied,
    so the returned root carries one extra Newton correction. The finder
    holds no per-call state.

    Attributes:
        tolerance: Absolute tolerance on the function value and step size.
        max_iterations: Maximum number of Newton steps before giving up.
    """

    tolerance: float = DEFAULT_TOLERANCE
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    def __post_init__(self) -> None:
        if not self.tolerance > 0:
            raise ValueError(f"tolerance must be > 0, got {self.tolerance}")
        if self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be >= 1, got {self.max_iterations}"
            )

    def get_root(
        self,
        function: ScalarFunction,
        derivative: ScalarFunction,
        initial_guess: float,
    ) -> float:
        """
        Find a root of function starting from initial_guess.

        Args:
            function: f, mapping a float to a float.
            derivative: f', mapping a float to a float.
            initial_guess: Starting point of the iteration.

        Returns:
            The converged root.

        Raises:
            RootNotFoundError: If the derivative vanishes, a non-finite value
                appears, or the iteration bound is exceeded.
        """
        root = float(initial_guess)
        if not math.isfinite(root):
            self._fail("Initial guess is not finite", initial_guess, 0)

        for iteration in range(self.max_iterations):
            y = float(function(root))
            if not math.isfinite(y):
                self._fail(
                    "Function value is not finite", initial_guess, iteration
                )
            if y == 0.0:
                return root

            dydx = float(derivative(root))
            if dydx == 0.0 or not math.isfinite(dydx):
                self._fail(
                    f"Derivative was {dydx} at x={root}",
                    initial_guess,
                    iteration,
                )

            step = y / dydx
            root -= step
            if abs(y) < self.tolerance or abs(step) < self.tolerance:
                return root

        self._fail(
            f"Could not find root in {self.max_iterations} iterations",
            initial_guess,
            self.max_iterations,
        )

    def _fail(
        self, message: str, initial_guess: float, iterations: int
    ) -> NoReturn:
        logger.warning(
            "Newton-Raphson failed: %s (initial guess %r)",
            message,
            initial_guess,
        )
        raise RootNotFoundError(message, initial_guess, iterations)
