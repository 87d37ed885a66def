"""
Gaussian quadrature rule generation.

One algorithm serves every family: for i = 0..n-1, take the family's initial
guess (which may look at the roots already found), refine it with
Newton-Raphson against the degree-n polynomial, then apply the family's
weight formula at the root.
"""

import logging
import math
from collections.abc import Sequence

import numpy as np

from quadrature_engine.core.exceptions import (
    InvalidOrderError,
    RootNotFoundError,
)
from quadrature_engine.quadrature.config import (
    QuadratureConfig,
    default_config,
)
from quadrature_engine.quadrature.data_models import QuadratureData
from quadrature_engine.quadrature.enums import QuadratureFamily
from quadrature_engine.quadrature.families import FamilyRule, get_rule
from quadrature_engine.rootfinding.newton import NewtonRaphsonSingleRootFinder

logger = logging.getLogger(__name__)


def check_order(n: object) -> int:
    """
    Validate a quadrature order.

    Args:
        n: Candidate order.

    Returns:
        n as a plain int.

    Raises:
        InvalidOrderError: If n is not an integer or n <= 0.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidOrderError(n)
    if n <= 0:
        raise InvalidOrderError(n)
    return int(n)


class GaussianQuadratureGenerator:
    """
    Generates Gaussian quadrature rules for one family.

    The generator holds only the (immutable) family rule and root finder, so
    a single instance can serve concurrent callers.
    """

    def __init__(
        self,
        rule: FamilyRule,
        root_finder: NewtonRaphsonSingleRootFinder | None = None,
    ):
        """
        Initialize generator.

        Args:
            rule: Family rule (polynomial, initial guess, weight formula).
            root_finder: Newton-Raphson root finder. If None, uses defaults.
        """
        self.rule = rule
        self.root_finder = root_finder or NewtonRaphsonSingleRootFinder()

    @property
    def family(self) -> QuadratureFamily:
        return self.rule.family

    def generate(self, n: int) -> QuadratureData:
        """
        Generate the n-point rule.

        Args:
            n: Number of points; the rule is exact for polynomials of degree
                up to 2n - 1.

        Returns:
            QuadratureData with n strictly increasing abscissas and their
            weights.

        Raises:
            InvalidOrderError: If n <= 0.
            RootNotFoundError: If any root fails to converge or does not
                exceed the previous root. No partial rule is returned.
        """
        n = check_order(n)
        logger.debug("Generating %s rule of order %d", self.family.value, n)

        pairs = self.rule.polynomial.polynomials_and_derivatives(n)
        function = pairs[n].value
        derivative = pairs[n].derivative

        roots: list[float] = []
        weights: list[float] = []
        for i in range(n):
            guess = self.rule.initial_guess(i, n, roots)
            root = self.root_finder.get_root(function, derivative, guess)

            # Roots are never re-sorted: the heuristics rely on finding them
            # in increasing order
            if roots and not root > roots[-1]:
                logger.warning(
                    "%s root %d of order %d at %r does not exceed root %r",
                    self.family.value,
                    i,
                    n,
                    root,
                    roots[-1],
                )
                raise RootNotFoundError(
                    f"Root {i} of the order {n} {self.family.value} "
                    f"polynomial converged to {root!r}, which does not "
                    f"exceed the previous root {roots[-1]!r}",
                    guess,
                )

            weight = self.rule.weight(root, n, pairs)
            if not math.isfinite(weight):
                raise RootNotFoundError(
                    f"Weight at root {i} ({root!r}) is not finite", guess
                )

            roots.append(root)
            weights.append(weight)

        return QuadratureData(abscissas=roots, weights=weights)


def generate(
    family: QuadratureFamily | str,
    shape_parameters: Sequence[float],
    n: int,
    config: QuadratureConfig | None = None,
) -> QuadratureData:
    """
    Generate a Gaussian quadrature rule.

    Deterministic for fixed inputs: each call builds its own working state.

    Args:
        family: Polynomial family or its name.
        shape_parameters: Laguerre: (alpha,). Jacobi: (alpha, beta).
            Legendre and Hermite: (). Missing values default to 0.
        n: Number of points.
        config: Generation configuration. If None, uses defaults.

    Returns:
        QuadratureData with n abscissas and weights.

    Raises:
        InvalidOrderError: If n <= 0.
        InvalidShapeParameterError: If a shape parameter is out of range.
        RootNotFoundError: If root finding fails.
    """
    n = check_order(n)
    config = config or default_config()
    rule = get_rule(family, shape_parameters)
    generator = GaussianQuadratureGenerator(
        rule, root_finder=config.root_finder.build()
    )
    return generator.generate(n)
