"""Tests for three-point local quadratic interpolation."""

import pytest
import torch


def _parabola(t):
    return t**2 - 3 * t + 1


class TestQuadraticInterpolation:
    def test_requires_three_points(self):
        """Two samples cannot define a parabola."""
        from torchinterp import InvalidInputError, quadratic_interpolation_fit

        with pytest.raises(InvalidInputError):
            quadratic_interpolation_fit([1.0, 2.0], [0.0, 1.0])

    def test_exact_at_samples(self, scenario):
        """Every sample is reproduced."""
        from torchinterp import quadratic_interpolation_fit

        u, t = scenario

        interpolation = quadratic_interpolation_fit(u, t)

        torch.testing.assert_close(interpolation.evaluate(t), u)

    def test_reproduces_quadratic_data(self):
        """Quadratic data is reproduced whatever window is chosen."""
        from torchinterp import quadratic_interpolation_fit

        t = torch.tensor([0.0, 0.4, 1.0, 1.7, 2.1, 3.0], dtype=torch.float64)

        interpolation = quadratic_interpolation_fit(_parabola(t), t)

        query = torch.linspace(0, 3, 31, dtype=torch.float64)
        torch.testing.assert_close(interpolation.evaluate(query), _parabola(query))

    def test_derivatives_of_quadratic_data(self):
        """First and second derivatives match the parabola."""
        from torchinterp import quadratic_interpolation_fit

        t = torch.tensor([0.0, 0.4, 1.0, 1.7, 2.1, 3.0], dtype=torch.float64)

        interpolation = quadratic_interpolation_fit(_parabola(t), t)

        query = torch.tensor([0.2, 1.3, 2.9], dtype=torch.float64)
        torch.testing.assert_close(interpolation.derivative(query), 2 * query - 3)
        torch.testing.assert_close(
            interpolation.derivative(query, order=2),
            torch.full_like(query, 2.0),
        )

    def test_window_uses_nearer_neighbor(self):
        """The third sample is the neighbor nearer to the query."""
        from torchinterp import quadratic_interpolation_fit

        t = torch.tensor([0.0, 1.0, 2.0, 3.0], dtype=torch.float64)
        u = torch.tensor([0.0, 0.0, 0.0, 3.0], dtype=torch.float64)

        interpolation = quadratic_interpolation_fit(u, t)

        # In [1, 2], a query near 1 uses {0, 1, 2}: all zero
        torch.testing.assert_close(
            interpolation.evaluate(1.2), torch.tensor(0.0, dtype=torch.float64)
        )
        # near 2 it uses {1, 2, 3}: parabola 1.5 (t-1)(t-2), at 1.8 is -0.24
        torch.testing.assert_close(
            interpolation.evaluate(1.8), torch.tensor(-0.24, dtype=torch.float64)
        )

    def test_order_too_high(self, scenario):
        """Order 3 exceeds the local degree."""
        from torchinterp import OrderTooHighError, quadratic_interpolation_fit

        u, t = scenario

        interpolation = quadratic_interpolation_fit(u, t)

        with pytest.raises(OrderTooHighError):
            interpolation.derivative(80.0, order=3)
