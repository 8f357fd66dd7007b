"""Tests for natural cubic spline interpolation."""

import pytest
import torch


class TestCubicSplineFit:
    def test_fit_returns_cubic_spline(self, scenario):
        """cubic_spline_fit returns a CubicSpline tensorclass."""
        from torchinterp import CubicSpline, cubic_spline_fit

        u, t = scenario

        spline = cubic_spline_fit(u, t)

        assert isinstance(spline, CubicSpline)
        assert spline.moments.shape == (6,)
        assert spline.coefficients.shape == (5, 4)

    def test_natural_boundary(self, scenario):
        """Second derivatives vanish at both ends."""
        from torchinterp import cubic_spline_fit

        u, t = scenario

        spline = cubic_spline_fit(u, t)

        zero = torch.tensor(0.0, dtype=torch.float64)
        torch.testing.assert_close(spline.moments[0], zero)
        torch.testing.assert_close(spline.moments[-1], zero)
        torch.testing.assert_close(spline.derivative(t[0], order=2), zero)
        torch.testing.assert_close(spline.derivative(t[-1], order=2), zero)

    def test_two_points_is_linear(self):
        """With two samples both moments are zero and the spline is the chord."""
        from torchinterp import cubic_spline_fit

        spline = cubic_spline_fit([1.0, 3.0], [0.0, 2.0])

        torch.testing.assert_close(
            spline.evaluate(1.5), torch.tensor(2.5, dtype=torch.float64)
        )


class TestCubicSplineEvaluate:
    def test_exact_at_samples(self, scenario):
        """Every sample is reproduced."""
        from torchinterp import cubic_spline_fit

        u, t = scenario

        spline = cubic_spline_fit(u, t)

        torch.testing.assert_close(spline.evaluate(t), u)

    def test_reproduces_linear_data(self):
        """Linear data has zero moments and is reproduced."""
        from torchinterp import cubic_spline_fit

        t = torch.tensor([0.0, 0.5, 1.5, 2.0, 4.0], dtype=torch.float64)

        spline = cubic_spline_fit(3 * t + 2, t)

        query = torch.linspace(0, 4, 21, dtype=torch.float64)
        torch.testing.assert_close(spline.evaluate(query), 3 * query + 2)

    def test_continuity_at_knots(self, scenario):
        """Value, slope and curvature agree on both sides of interior knots."""
        from torchinterp import cubic_spline_fit

        u, t = scenario

        spline = cubic_spline_fit(u, t)

        h = t[1:] - t[:-1]
        a, b, c, d = spline.coefficients.unbind(dim=1)

        # End of segment i against start of segment i+1
        value = a + b * h + c * h**2 + d * h**3
        slope = b + 2 * c * h + 3 * d * h**2
        curvature = 2 * c + 6 * d * h

        torch.testing.assert_close(value, u[1:])
        torch.testing.assert_close(slope[:-1], b[1:])
        torch.testing.assert_close(curvature[:-1], 2 * c[1:])

    def test_value_between_neighboring_samples(self, scenario):
        """At t = 30 the spline lies strictly between u(0) and u(62.25)."""
        from torchinterp import cubic_spline_fit

        u, t = scenario

        spline = cubic_spline_fit(u, t)

        value = spline.evaluate(30.0)

        assert u[1] < value < u[0]

    def test_scipy_comparison(self, scenario):
        """Compare with scipy.interpolate.CubicSpline(bc_type='natural')."""
        pytest.importorskip("scipy")
        from scipy.interpolate import CubicSpline as ScipyCubicSpline

        from torchinterp import cubic_spline_fit

        u, t = scenario

        spline = cubic_spline_fit(u, t)
        reference = ScipyCubicSpline(t.numpy(), u.numpy(), bc_type="natural")

        query = torch.linspace(0, 252.3, 40, dtype=torch.float64)

        for order in range(3):
            torch.testing.assert_close(
                spline.derivative(query, order=order),
                torch.tensor(reference(query.numpy(), order), dtype=torch.float64),
            )

        torch.testing.assert_close(
            spline.integral(10.0, 200.0),
            torch.tensor(reference.integrate(10.0, 200.0), dtype=torch.float64),
        )


class TestCubicSplineDerivative:
    def test_third_derivative_piecewise_constant(self, scenario):
        """The third derivative is 6 d on each segment."""
        from torchinterp import cubic_spline_fit

        u, t = scenario

        spline = cubic_spline_fit(u, t)

        torch.testing.assert_close(
            spline.derivative(t[:-1], order=3), 6 * spline.coefficients[:, 3]
        )

    def test_order_too_high(self, scenario):
        """Order 4 exceeds the local degree."""
        from torchinterp import OrderTooHighError, cubic_spline_fit

        u, t = scenario

        spline = cubic_spline_fit(u, t)

        with pytest.raises(OrderTooHighError):
            spline.derivative(80.0, order=4)


class TestCubicSplineIntegral:
    def test_bounds_clamped(self, scenario):
        """Bounds outside the domain are clamped to it."""
        from torchinterp import cubic_spline_fit

        u, t = scenario

        spline = cubic_spline_fit(u, t)

        torch.testing.assert_close(
            spline.integral(-50.0, 400.0), spline.integral(t[0], t[-1])
        )
