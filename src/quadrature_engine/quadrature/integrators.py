"""
One-dimensional integration with Gaussian quadrature rules.

Each family integrates against its own weight function on its canonical
domain. GaussianQuadratureIntegrator1D maps a plain integral of f over the
family's kind of interval onto that form:
- Legendre: finite [lower, upper]
- Jacobi: finite [lower, upper], f divided by the Jacobi weight function
- Laguerre: [lower, inf), f multiplied by e^t t^-alpha
- Hermite: (-inf, inf), f multiplied by e^{t^2}
"""

import logging
import math
from collections.abc import Callable, Sequence

import numpy as np
from numpy.typing import NDArray

from quadrature_engine.quadrature.config import QuadratureConfig
from quadrature_engine.quadrature.data_models import QuadratureData
from quadrature_engine.quadrature.enums import QuadratureFamily
from quadrature_engine.quadrature.generator import generate

logger = logging.getLogger(__name__)

# Vectorized integrand: array of points -> array of values
Integrand = Callable[[NDArray[np.float64]], NDArray[np.float64]]


def weighted_sum(data: QuadratureData, function: Integrand) -> float:
    """
    Apply a rule: sum_i w_i f(x_i).

    This approximates the integral of f against the family weight function
    over the family's canonical domain.

    Args:
        data: Quadrature rule.
        function: Vectorized integrand.

    Returns:
        The quadrature sum.
    """
    values = np.asarray(function(data.abscissas), dtype=np.float64)
    return float(np.dot(data.weights, values))


class GaussianQuadratureIntegrator1D:
    """
    Integrates plain (unweighted) functions with a fixed Gaussian rule.

    The rule is generated once at construction and reused for every call
    to integrate.
    """

    def __init__(
        self,
        family: QuadratureFamily | str,
        n: int,
        shape_parameters: Sequence[float] = (),
        config: QuadratureConfig | None = None,
    ):
        """
        Initialize integrator.

        Args:
            family: Polynomial family or its name.
            n: Number of quadrature points.
            shape_parameters: Family shape parameters, see generate.
            config: Generation configuration. If None, uses defaults.
        """
        self.family = QuadratureFamily(family)
        self.shape_parameters = tuple(float(p) for p in shape_parameters)
        self._data = generate(self.family, self.shape_parameters, n, config)

    @property
    def data(self) -> QuadratureData:
        """Access quadrature abscissas and weights."""
        return self._data

    def _shape_parameter(self, index: int) -> float:
        if index < len(self.shape_parameters):
            return self.shape_parameters[index]
        return 0.0

    def integrate(
        self, function: Integrand, lower: float, upper: float
    ) -> float:
        """
        Integrate function from lower to upper.

        Args:
            function: Vectorized integrand.
            lower: Lower limit (-inf for Hermite).
            upper: Upper limit (inf for Laguerre and Hermite).

        Returns:
            Approximation of the integral.

        Raises:
            ValueError: If the limits do not suit the family.
        """
        x = self._data.abscissas
        w = self._data.weights

        match self.family:
            case QuadratureFamily.LEGENDRE | QuadratureFamily.JACOBI:
                _check_finite_interval(self.family, lower, upper)
                half_width = 0.5 * (upper - lower)
                mid = 0.5 * (upper + lower)
                values = np.asarray(function(half_width * x + mid))
                if self.family == QuadratureFamily.JACOBI:
                    alpha = self._shape_parameter(0)
                    beta = self._shape_parameter(1)
                    values = values / ((1 - x) ** alpha * (1 + x) ** beta)
                return float(half_width * np.dot(w, values))

            case QuadratureFamily.LAGUERRE:
                if not (math.isfinite(lower) and upper == math.inf):
                    raise ValueError(
                        f"Laguerre integration needs [lower, inf) with "
                        f"finite lower, got [{lower}, {upper}]"
                    )
                alpha = self._shape_parameter(0)
                values = np.asarray(function(x + lower))
                return _log_scaled_sum(w, x - alpha * np.log(x), values)

            case QuadratureFamily.HERMITE:
                if not (lower == -math.inf and upper == math.inf):
                    raise ValueError(
                        f"Hermite integration needs (-inf, inf), "
                        f"got ({lower}, {upper})"
                    )
                values = np.asarray(function(x))
                return _log_scaled_sum(w, x * x, values)

        raise ValueError(f"Unsupported family: {self.family}")


def _log_scaled_sum(
    weights: NDArray[np.float64],
    log_factors: NDArray[np.float64],
    values: NDArray[np.float64],
) -> float:
    """
    Compute sum_i w_i exp(log_factors_i) values_i.

    Weights and factors are combined in log space: at large orders the
    outer weights underflow while exp(log_factors) overflows.
    """
    with np.errstate(divide="ignore"):
        log_weights = np.log(weights)
    return float(np.sum(np.exp(log_weights + log_factors) * values))


def _check_finite_interval(
    family: QuadratureFamily, lower: float, upper: float
) -> None:
    if not (math.isfinite(lower) and math.isfinite(upper)):
        raise ValueError(
            f"{family.value} integration needs a finite interval, "
            f"got [{lower}, {upper}]"
        )
    if not lower < upper:
        raise ValueError(
            f"lower must be < upper, got lower={lower}, upper={upper}"
        )


def normal_quadrature(
    n: int,
    mean: float = 0.0,
    std: float = 1.0,
    config: QuadratureConfig | None = None,
) -> QuadratureData:
    """
    Gauss-Hermite points and weights for expectations under N(mean, std^2).

    The Hermite rule integrates against exp(-x^2). The transformation is:
        - theta = mean + std * sqrt(2) * x
        - weights divided by sqrt(pi), then normalized to sum to 1

    so that E[f(X)] ~ sum_i w_i f(theta_i) for X ~ N(mean, std^2).

    Args:
        n: Number of points.
        mean: Mean of the normal distribution.
        std: Standard deviation, must be > 0.
        config: Generation configuration. If None, uses defaults.

    Returns:
        QuadratureData with points theta and probability weights.
    """
    if not std > 0:
        raise ValueError(f"std must be > 0, got {std}")

    rule = generate(QuadratureFamily.HERMITE, (), n, config)

    # Transform to probabilists' convention
    x_prob = np.sqrt(2.0) * rule.abscissas
    w_prob = rule.weights / np.sqrt(np.pi)

    # Scale to N(mean, std^2)
    theta = mean + std * x_prob

    # Normalize weights to sum to 1 (should already be close)
    weights = w_prob / w_prob.sum()

    logger.debug(
        "Normal quadrature: n=%d mean=%g std=%g weight sum before "
        "normalization %.15g",
        n,
        mean,
        std,
        w_prob.sum(),
    )
    return QuadratureData(abscissas=theta, weights=weights)
