"""
Tests for orthogonal polynomial evaluators.
"""

import math

import numpy as np
import pytest
from scipy import special

from quadrature_engine.core.exceptions import InvalidShapeParameterError
from quadrature_engine.polynomials import (
    JacobiPolynomial,
    LaguerrePolynomial,
    LegendrePolynomial,
    OrthonormalHermitePolynomial,
    PolynomialPair,
)

X = np.linspace(-0.95, 0.95, 11)
X_POSITIVE = np.linspace(0.0, 12.0, 13)


class TestLaguerrePolynomial:
    def test_low_degree_closed_forms(self) -> None:
        """L_2 = (x^2 - 4x + 2) / 2 and L_3 = (-x^3 + 9x^2 - 18x + 6) / 6."""
        values, derivatives = LaguerrePolynomial().evaluate(2.0, 3)

        assert values[0] == pytest.approx(1.0)
        assert values[1] == pytest.approx(-1.0)
        assert values[2] == pytest.approx(-1.0)
        assert values[3] == pytest.approx(-1.0 / 3.0)
        assert derivatives[2] == pytest.approx(0.0)

    @pytest.mark.parametrize("alpha", [0.0, -0.5, 0.5, 2.0])
    def test_matches_scipy(self, alpha: float) -> None:
        """Values match scipy, derivatives match -L_{n-1}^(alpha+1)."""
        n = 8
        values, derivatives = LaguerrePolynomial(alpha).evaluate(X_POSITIVE, n)

        for k in range(n + 1):
            np.testing.assert_allclose(
                values[k],
                special.eval_genlaguerre(k, alpha, X_POSITIVE),
                rtol=1e-10,
                atol=1e-10,
            )
        for k in range(1, n + 1):
            np.testing.assert_allclose(
                derivatives[k],
                -special.eval_genlaguerre(k - 1, alpha + 1, X_POSITIVE),
                rtol=1e-10,
                atol=1e-10,
            )

    @pytest.mark.parametrize(
        "alpha", [-1.0, -2.5, float("nan"), math.inf, -math.inf]
    )
    def test_rejects_alpha_out_of_range(self, alpha: float) -> None:
        with pytest.raises(InvalidShapeParameterError, match="alpha"):
            LaguerrePolynomial(alpha)


class TestLegendrePolynomial:
    def test_matches_scipy(self) -> None:
        n = 10
        values, derivatives = LegendrePolynomial().evaluate(X, n)

        for k in range(n + 1):
            np.testing.assert_allclose(
                values[k], special.eval_legendre(k, X), atol=1e-12
            )
            expected_derivative = np.polynomial.Legendre.basis(k).deriv()(X)
            np.testing.assert_allclose(
                derivatives[k], expected_derivative, atol=1e-10
            )

    def test_endpoint_values(self) -> None:
        """P_k(1) = 1 and P'_k(1) = k(k+1)/2."""
        values, derivatives = LegendrePolynomial().evaluate(1.0, 6)

        np.testing.assert_allclose(values, np.ones(7))
        np.testing.assert_allclose(
            derivatives, [k * (k + 1) / 2 for k in range(7)]
        )


class TestOrthonormalHermitePolynomial:
    def test_matches_scaled_physicists_hermite(self) -> None:
        """h_k = H_k / sqrt(2^k k! sqrt(pi)), h'_k = 2k H_{k-1} / norm."""
        n = 9
        x = np.linspace(-3.0, 3.0, 13)
        values, derivatives = OrthonormalHermitePolynomial().evaluate(x, n)

        for k in range(n + 1):
            norm = math.sqrt(2**k * math.factorial(k) * math.sqrt(math.pi))
            np.testing.assert_allclose(
                values[k], special.eval_hermite(k, x) / norm, atol=1e-10
            )
            if k > 0:
                np.testing.assert_allclose(
                    derivatives[k],
                    2 * k * special.eval_hermite(k - 1, x) / norm,
                    atol=1e-10,
                )

    def test_orthonormal_under_gaussian_weight(self) -> None:
        """Discrete inner products on a high-order rule give the identity."""
        x, w = np.polynomial.hermite.hermgauss(30)
        values, _ = OrthonormalHermitePolynomial().evaluate(x, 10)

        gram = (values * w) @ values.T
        np.testing.assert_allclose(gram, np.eye(11), atol=1e-12)


class TestJacobiPolynomial:
    @pytest.mark.parametrize(
        "alpha,beta", [(0.0, 0.0), (0.5, -0.5), (2.0, 1.0), (-0.7, 3.0)]
    )
    def test_matches_scipy(self, alpha: float, beta: float) -> None:
        """Derivative identity: P'_k = (k+a+b+1)/2 P_{k-1}^(a+1, b+1)."""
        n = 7
        values, derivatives = JacobiPolynomial(alpha, beta).evaluate(X, n)

        for k in range(n + 1):
            np.testing.assert_allclose(
                values[k],
                special.eval_jacobi(k, alpha, beta, X),
                rtol=1e-10,
                atol=1e-10,
            )
        for k in range(1, n + 1):
            expected = (
                0.5
                * (k + alpha + beta + 1)
                * special.eval_jacobi(k - 1, alpha + 1, beta + 1, X)
            )
            np.testing.assert_allclose(
                derivatives[k], expected, rtol=1e-10, atol=1e-10
            )

    def test_zero_parameters_reduce_to_legendre(self) -> None:
        jacobi, _ = JacobiPolynomial().evaluate(X, 6)
        legendre, _ = LegendrePolynomial().evaluate(X, 6)

        np.testing.assert_allclose(jacobi, legendre, atol=1e-12)

    def test_rejects_out_of_range_parameters(self) -> None:
        with pytest.raises(InvalidShapeParameterError, match="alpha"):
            JacobiPolynomial(alpha=-1.0)
        with pytest.raises(InvalidShapeParameterError, match="beta"):
            JacobiPolynomial(beta=-1.5)

    @pytest.mark.parametrize("parameter", ["alpha", "beta"])
    @pytest.mark.parametrize("value", [math.inf, -math.inf, float("nan")])
    def test_rejects_non_finite_parameters(
        self, parameter: str, value: float
    ) -> None:
        with pytest.raises(InvalidShapeParameterError, match=parameter):
            JacobiPolynomial(**{parameter: value})


class TestPolynomialPairs:
    def test_sequence_length_and_type(self) -> None:
        """Order n gives n + 1 pairs, degrees 0..n."""
        pairs = LegendrePolynomial().polynomials_and_derivatives(4)

        assert len(pairs) == 5
        assert all(isinstance(p, PolynomialPair) for p in pairs)

    def test_pairs_match_evaluate(self) -> None:
        polynomial = LaguerrePolynomial(alpha=1.5)
        pairs = polynomial.polynomials_and_derivatives(5)
        values, derivatives = polynomial.evaluate(X_POSITIVE, 5)

        for k, pair in enumerate(pairs):
            np.testing.assert_allclose(pair.value(X_POSITIVE), values[k])
            np.testing.assert_allclose(
                pair.derivative(X_POSITIVE), derivatives[k]
            )

    def test_scalar_input_gives_scalar(self) -> None:
        pairs = LegendrePolynomial().polynomials_and_derivatives(3)

        value = pairs[3].value(0.5)
        assert np.ndim(value) == 0
        # P_3(x) = (5x^3 - 3x) / 2
        assert float(value) == pytest.approx(-0.4375)
        # P_3'(x) = (15x^2 - 3) / 2
        assert float(pairs[3].derivative(0.5)) == pytest.approx(0.375)

    def test_degree_zero(self) -> None:
        values, derivatives = JacobiPolynomial(1.0, 2.0).evaluate(X, 0)

        assert values.shape == (1, len(X))
        np.testing.assert_array_equal(values[0], np.ones(len(X)))
        np.testing.assert_array_equal(derivatives[0], np.zeros(len(X)))

    def test_negative_degree_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be >= 0"):
            LegendrePolynomial().evaluate(0.0, -1)
        with pytest.raises(ValueError, match="must be >= 0"):
            OrthonormalHermitePolynomial().polynomials_and_derivatives(-1)

    def test_output_shape_follows_input(self) -> None:
        x = np.zeros((2, 3))
        values, derivatives = OrthonormalHermitePolynomial().evaluate(x, 4)

        assert values.shape == (5, 2, 3)
        assert derivatives.shape == (5, 2, 3)
