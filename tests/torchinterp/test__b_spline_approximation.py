"""Tests for least-squares B-spline approximation."""

import pytest
import torch


@pytest.fixture
def noisy():
    t = torch.linspace(0, 10, 40, dtype=torch.float64)
    u = torch.sin(t) + 0.1 * torch.cos(7 * t)
    return u, t


class TestBSplineApproximationFit:
    def test_fit_returns_b_spline_approximation(self, noisy):
        """b_spline_approximation_fit returns a BSplineApproximation tensorclass."""
        from torchinterp import BSplineApproximation, b_spline_approximation_fit

        u, t = noisy

        spline = b_spline_approximation_fit(u, t, n_control=12)

        assert isinstance(spline, BSplineApproximation)
        assert spline.control_points.shape == (12,)
        assert spline.knots.shape == (16,)

    @pytest.mark.parametrize("n_control", [3, 40, 41])
    def test_invalid_control_point_count(self, noisy, n_control):
        """Control point count must satisfy degree < n_control < n."""
        from torchinterp import (
            InvalidControlPointCountError,
            b_spline_approximation_fit,
        )

        u, t = noisy

        with pytest.raises(InvalidControlPointCountError):
            b_spline_approximation_fit(u, t, n_control=n_control, degree=3)

    def test_invalid_degree(self, noisy):
        """Degree must be at least one."""
        from torchinterp import InvalidDegreeError, b_spline_approximation_fit

        u, t = noisy

        with pytest.raises(InvalidDegreeError):
            b_spline_approximation_fit(u, t, n_control=5, degree=0)


class TestBSplineApproximationLeastSquares:
    @pytest.mark.parametrize("knot_policy", ["average", "uniform"])
    def test_residual_orthogonal_to_basis(self, noisy, knot_policy):
        """The residual satisfies the normal equations."""
        from torchinterp import b_spline_approximation_fit, b_spline_basis

        u, t = noisy

        spline = b_spline_approximation_fit(
            u, t, n_control=10, knot_policy=knot_policy
        )

        B = b_spline_basis(spline.curve_parameters, spline.knots, spline.degree)
        residual = spline.evaluate(t) - u

        torch.testing.assert_close(
            B.T @ residual,
            torch.zeros(10, dtype=torch.float64),
            atol=1e-10,
            rtol=0,
        )

    def test_perturbed_control_points_are_worse(self, noisy):
        """Moving any control point increases the squared residual."""
        from torchinterp import b_spline_approximation_fit, b_spline_basis

        u, t = noisy

        spline = b_spline_approximation_fit(u, t, n_control=8)

        B = b_spline_basis(spline.curve_parameters, spline.knots, spline.degree)
        best = ((B @ spline.control_points - u) ** 2).sum()

        for i in range(8):
            perturbed = spline.control_points.clone()
            perturbed[i] += 0.01

            assert ((B @ perturbed - u) ** 2).sum() > best

    def test_matches_lstsq(self, noisy):
        """Cholesky on the normal equations agrees with a direct lstsq."""
        from torchinterp import b_spline_approximation_fit, b_spline_basis

        u, t = noisy

        spline = b_spline_approximation_fit(u, t, n_control=9, degree=2)

        B = b_spline_basis(spline.curve_parameters, spline.knots, 2)
        expected = torch.linalg.lstsq(B, u.unsqueeze(-1)).solution.squeeze(-1)

        torch.testing.assert_close(spline.control_points, expected)

    def test_reproduces_cubic_data(self):
        """Data on a cubic polynomial lies in the spline space."""
        from torchinterp import b_spline_approximation_fit

        t = torch.linspace(0, 1, 12, dtype=torch.float64)

        spline = b_spline_approximation_fit(1 + 2 * t - t**3, t, n_control=6)

        query = torch.tensor([0.05, 0.37, 0.81], dtype=torch.float64)
        torch.testing.assert_close(spline.evaluate(query), 1 + 2 * query - query**3)
        torch.testing.assert_close(spline.derivative(query), 2 - 3 * query**2)


class TestBSplineApproximationDerivative:
    def test_order_too_high(self, noisy):
        """Orders above the degree are rejected."""
        from torchinterp import OrderTooHighError, b_spline_approximation_fit

        u, t = noisy

        spline = b_spline_approximation_fit(u, t, n_control=8)

        with pytest.raises(OrderTooHighError):
            spline.derivative(5.0, order=4)
