"""
Per-family Gaussian quadrature rules.

A FamilyRule bundles what is specific to one orthogonal polynomial family:
- the polynomial (three-term recurrence with shape parameters bound)
- the initial-guess heuristic for the Newton-Raphson root search
- the closed-form weight at a root

The generator in quadrature_engine.quadrature.generator runs one shared
algorithm over these rules.

All heuristics search the roots from smallest to largest and use the roots
found so far. Their numeric constants are empirical tuning values for the
Newton-Raphson starting points (Press et al., Numerical Recipes, section
4.5) and are kept as literals.
"""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial

from scipy.special import gammaln

from quadrature_engine.core.exceptions import InvalidShapeParameterError
from quadrature_engine.polynomials import (
    JacobiPolynomial,
    LaguerrePolynomial,
    LegendrePolynomial,
    OrthogonalPolynomial,
    OrthonormalHermitePolynomial,
    PolynomialPair,
)
from quadrature_engine.quadrature.enums import QuadratureFamily

# (i, n, roots found so far) -> starting point for root i
InitialGuess = Callable[[int, int, Sequence[float]], float]
# (root, n, polynomial pairs for degrees 0..n) -> weight
WeightFormula = Callable[[float, int, Sequence[PolynomialPair]], float]


@dataclass(frozen=True)
class FamilyRule:
    """
    Family-specific ingredients of a Gaussian quadrature rule.

    Attributes:
        family: The polynomial family.
        polynomial: Evaluator for the family's polynomials.
        initial_guess: Starting point heuristic for root i of degree n.
        weight: Weight formula evaluated at a root.
    """

    family: QuadratureFamily
    polynomial: OrthogonalPolynomial
    initial_guess: InitialGuess
    weight: WeightFormula


########################################################
# Legendre
########################################################


def _legendre_initial_guess(
    i: int, n: int, roots: Sequence[float]
) -> float:
    return -math.cos(math.pi * (i + 0.75) / (n + 0.5))


def _legendre_weight(
    x: float, n: int, pairs: Sequence[PolynomialPair]
) -> float:
    dp = float(pairs[n].derivative(x))
    return 2.0 / ((1.0 - x * x) * dp * dp)


def legendre_rule() -> FamilyRule:
    """Gauss-Legendre: weight 1 on [-1, 1]."""
    return FamilyRule(
        family=QuadratureFamily.LEGENDRE,
        polynomial=LegendrePolynomial(),
        initial_guess=_legendre_initial_guess,
        weight=_legendre_weight,
    )


########################################################
# Laguerre
########################################################


def _laguerre_initial_guess(
    i: int, n: int, roots: Sequence[float], alpha: float
) -> float:
    if i == 0:
        return (1 + alpha) * (3 + 0.92 * alpha) / (1 + 1.8 * alpha + 2.4 * n)
    if i == 1:
        return roots[0] + (15 + 6.25 * alpha) / (1 + 0.9 * alpha + 2.5 * n)
    j = i - 1
    gap = roots[i - 1] - roots[i - 2]
    scale = (1 + 2.55 * j) / 1.9 / j + 1.26 * j * alpha / (1 + 3.5 * j)
    return roots[i - 1] + scale * gap / (1 + 0.3 * alpha)


def _laguerre_weight(
    x: float, n: int, pairs: Sequence[PolynomialPair], alpha: float
) -> float:
    # Gamma(alpha + n) / n!
    log_ratio = gammaln(alpha + n) - gammaln(n + 1)
    dp = float(pairs[n].derivative(x))
    p_prev = float(pairs[n - 1].value(x))
    return -math.exp(log_ratio) / (dp * p_prev)


def laguerre_rule(alpha: float = 0.0) -> FamilyRule:
    """
    Generalized Gauss-Laguerre: weight x^alpha e^{-x} on [0, inf).

    Args:
        alpha: Shape parameter, must be finite and > -1.

    Raises:
        InvalidShapeParameterError: If alpha is not finite or alpha <= -1.
    """
    return FamilyRule(
        family=QuadratureFamily.LAGUERRE,
        polynomial=LaguerrePolynomial(alpha=alpha),
        initial_guess=partial(_laguerre_initial_guess, alpha=alpha),
        weight=partial(_laguerre_weight, alpha=alpha),
    )


########################################################
# Hermite
########################################################


def _hermite_initial_guess(i: int, n: int, roots: Sequence[float]) -> float:
    # Roots are symmetric about 0; the upper half mirrors the lower half
    mirror = n - 1 - i
    if mirror < i:
        return -roots[mirror]
    if i == 0:
        return -(math.sqrt(2 * n + 1) - 1.85575 * (2 * n + 1) ** -0.16667)
    if i == 1:
        return roots[0] - 1.14 * n**0.426 / roots[0]
    if i == 2:
        return 1.86 * roots[1] - 0.86 * roots[0]
    if i == 3:
        return 1.91 * roots[2] - 0.91 * roots[1]
    return 2 * roots[i - 1] - roots[i - 2]


def _hermite_weight(
    x: float, n: int, pairs: Sequence[PolynomialPair]
) -> float:
    dp = float(pairs[n].derivative(x))
    return 2.0 / (dp * dp)


def hermite_rule() -> FamilyRule:
    """Gauss-Hermite: weight e^{-x^2} on (-inf, inf)."""
    return FamilyRule(
        family=QuadratureFamily.HERMITE,
        polynomial=OrthonormalHermitePolynomial(),
        initial_guess=_hermite_initial_guess,
        weight=_hermite_weight,
    )


########################################################
# Jacobi
########################################################


def _jacobi_initial_guess(
    i: int, n: int, roots: Sequence[float], alpha: float, beta: float
) -> float:
    # P^(alpha, beta)(x) = (-1)^n P^(beta, alpha)(-x). The heuristic below
    # walks the roots of P^(beta, alpha) from the largest down, which in
    # mirrored coordinates z = -x walks ours from the smallest up.
    a, b = beta, alpha
    z = [-r for r in roots]
    k = i + 1

    if k == 1:
        an = a / n
        bn = b / n
        r1 = (1 + a) * (2.78 / (4 + n * n) + 0.768 * an / n)
        r2 = 1 + 1.48 * an + 0.96 * bn + 0.452 * an * an + 0.83 * an * bn
        guess = 1 - r1 / r2
    elif k == 2:
        r1 = (4.1 + a) / ((1 + a) * (1 + 0.156 * a))
        r2 = 1 + 0.06 * (n - 8) * (1 + 0.12 * a) / n
        r3 = 1 + 0.012 * b * (1 + 0.25 * abs(a)) / n
        guess = z[0] - (1 - z[0]) * r1 * r2 * r3
    elif k == 3:
        r1 = (1.67 + 0.28 * a) / (1 + 0.37 * a)
        r2 = 1 + 0.22 * (n - 8) / n
        r3 = 1 + 8 * b / ((6.28 + b) * n * n)
        guess = z[1] - (z[0] - z[1]) * r1 * r2 * r3
    elif k == n - 1:
        r1 = (1 + 0.235 * b) / (0.766 + 0.119 * b)
        r2 = 1 / (1 + 0.639 * (n - 4) / (1 + 0.71 * (n - 4)))
        r3 = 1 / (1 + 20 * a / ((7.5 + a) * n * n))
        guess = z[k - 2] + (z[k - 2] - z[k - 3]) * r1 * r2 * r3
    elif k == n:
        r1 = (1 + 0.37 * b) / (1.67 + 0.28 * b)
        r2 = 1 / (1 + 0.22 * (n - 8) / n)
        r3 = 1 / (1 + 8 * a / ((6.28 + a) * n * n))
        guess = z[k - 2] + (z[k - 2] - z[k - 3]) * r1 * r2 * r3
    else:
        guess = 3 * z[k - 2] - 3 * z[k - 3] + z[k - 4]

    return -guess


def _jacobi_weight(
    x: float,
    n: int,
    pairs: Sequence[PolynomialPair],
    alpha: float,
    beta: float,
) -> float:
    # Gamma(alpha + n) Gamma(beta + n) / (n! Gamma(n + alpha + beta + 1))
    log_ratio = (
        gammaln(alpha + n)
        + gammaln(beta + n)
        - gammaln(n + 1)
        - gammaln(n + alpha + beta + 1)
    )
    t = 2 * n + alpha + beta
    dp = float(pairs[n].derivative(x))
    p_prev = float(pairs[n - 1].value(x))
    return math.exp(log_ratio) * t * 2.0 ** (alpha + beta) / (dp * p_prev)


def jacobi_rule(alpha: float = 0.0, beta: float = 0.0) -> FamilyRule:
    """
    Gauss-Jacobi: weight (1 - x)^alpha (1 + x)^beta on [-1, 1].

    Args:
        alpha: Exponent of (1 - x), must be finite and > -1.
        beta: Exponent of (1 + x), must be finite and > -1.

    Raises:
        InvalidShapeParameterError: If either parameter is not finite or
            <= -1.
    """
    return FamilyRule(
        family=QuadratureFamily.JACOBI,
        polynomial=JacobiPolynomial(alpha=alpha, beta=beta),
        initial_guess=partial(_jacobi_initial_guess, alpha=alpha, beta=beta),
        weight=partial(_jacobi_weight, alpha=alpha, beta=beta),
    )


########################################################
# Lookup
########################################################

# Maximum number of shape parameters per family
_N_SHAPE_PARAMETERS = {
    QuadratureFamily.LEGENDRE: 0,
    QuadratureFamily.LAGUERRE: 1,
    QuadratureFamily.HERMITE: 0,
    QuadratureFamily.JACOBI: 2,
}


def get_rule(
    family: QuadratureFamily | str,
    shape_parameters: Sequence[float] = (),
) -> FamilyRule:
    """
    Build the rule for a family.

    Missing shape parameters take the family defaults (alpha = beta = 0).

    Args:
        family: Family or its name ("legendre", "laguerre", ...).
        shape_parameters: Laguerre: (alpha,). Jacobi: (alpha, beta).
            Legendre and Hermite take none.

    Returns:
        The family rule.

    Raises:
        ValueError: If family is not a known family name.
        InvalidShapeParameterError: If too many shape parameters are given
            or a parameter is out of range.
    """
    family = QuadratureFamily(family)
    params = tuple(float(p) for p in shape_parameters)
    if len(params) > _N_SHAPE_PARAMETERS[family]:
        raise InvalidShapeParameterError(
            family.value, "shape_parameters", params
        )

    match family:
        case QuadratureFamily.LEGENDRE:
            return legendre_rule()
        case QuadratureFamily.LAGUERRE:
            return laguerre_rule(*params)
        case QuadratureFamily.HERMITE:
            return hermite_rule()
        case QuadratureFamily.JACOBI:
            return jacobi_rule(*params)
