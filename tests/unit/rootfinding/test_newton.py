"""
Tests for the Newton-Raphson root finder.
"""

import logging
import math

import pytest

from quadrature_engine.core.exceptions import RootNotFoundError
from quadrature_engine.rootfinding import NewtonRaphsonSingleRootFinder


class TestNewtonRaphsonSingleRootFinder:
    def test_square_root(self) -> None:
        finder = NewtonRaphsonSingleRootFinder()
        root = finder.get_root(lambda x: x * x - 2, lambda x: 2 * x, 1.0)

        assert root == pytest.approx(math.sqrt(2), abs=1e-12)

    def test_linear_function_converges_in_one_step(self) -> None:
        calls: list[float] = []

        def function(x: float) -> float:
            calls.append(x)
            return 3 * x - 6

        finder = NewtonRaphsonSingleRootFinder()
        root = finder.get_root(function, lambda x: 3.0, 100.0)

        assert root == pytest.approx(2.0)
        # Initial evaluation plus the check at the new point
        assert len(calls) == 2

    def test_initial_guess_already_a_root(self) -> None:
        finder = NewtonRaphsonSingleRootFinder()
        root = finder.get_root(math.sin, math.cos, 0.0)

        assert root == 0.0

    def test_zero_derivative_raises(self) -> None:
        """x^2 + 1 has a flat point at 0 and no real root."""
        finder = NewtonRaphsonSingleRootFinder()

        with pytest.raises(RootNotFoundError, match="Derivative was 0.0"):
            finder.get_root(lambda x: x * x + 1, lambda x: 2 * x, 0.0)

    def test_iteration_bound_raises(self) -> None:
        """Newton steps on x^2 + 1 never shrink below 1."""
        finder = NewtonRaphsonSingleRootFinder(max_iterations=50)

        with pytest.raises(RootNotFoundError) as exc_info:
            finder.get_root(lambda x: x * x + 1, lambda x: 2 * x, 0.3)

        assert exc_info.value.initial_guess == 0.3
        assert exc_info.value.iterations is not None
        assert exc_info.value.iterations <= 50

    def test_non_finite_value_raises(self) -> None:
        finder = NewtonRaphsonSingleRootFinder()

        with pytest.raises(RootNotFoundError, match="not finite"):
            finder.get_root(lambda x: math.nan, lambda x: 1.0, 0.0)

    def test_non_finite_initial_guess_raises(self) -> None:
        finder = NewtonRaphsonSingleRootFinder()

        with pytest.raises(RootNotFoundError, match="Initial guess"):
            finder.get_root(lambda x: x, lambda x: 1.0, math.inf)

    def test_failure_is_logged(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        finder = NewtonRaphsonSingleRootFinder(max_iterations=3)

        with caplog.at_level(logging.WARNING, logger="quadrature_engine"):
            with pytest.raises(RootNotFoundError):
                finder.get_root(lambda x: x * x + 1, lambda x: 2 * x, 0.3)

        assert "Newton-Raphson failed" in caplog.text

    def test_tolerance_controls_accuracy(self) -> None:
        coarse = NewtonRaphsonSingleRootFinder(tolerance=1e-2)
        fine = NewtonRaphsonSingleRootFinder(tolerance=1e-14)

        def f(x: float) -> float:
            return math.exp(x) - 2

        coarse_root = coarse.get_root(f, math.exp, 3.0)
        fine_root = fine.get_root(f, math.exp, 3.0)

        assert abs(coarse_root - math.log(2)) < 1e-2
        assert fine_root == pytest.approx(math.log(2), abs=1e-14)

    @pytest.mark.parametrize(
        "kwargs",
        [{"tolerance": 0.0}, {"tolerance": -1e-3}, {"max_iterations": 0}],
    )
    def test_invalid_settings_rejected(self, kwargs: dict[str, float]) -> None:
        with pytest.raises(ValueError):
            NewtonRaphsonSingleRootFinder(**kwargs)  # type: ignore[arg-type]
