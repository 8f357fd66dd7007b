"""Tests for nonlinear least-squares curve fitting."""

import pytest
import torch


def _line(t, p):
    return p[0] * t + p[1]


def _decay(t, p):
    return p[0] * torch.exp(-p[1] * t)


class TestCurveFit:
    def test_line(self):
        """A line through exact data is recovered."""
        from torchinterp import CurveFit, curve_fit

        t = torch.tensor([0.0, 1.0, 2.0, 3.0], dtype=torch.float64)

        fit = curve_fit(_line, 2 * t + 1, t, [0.0, 0.0])

        assert isinstance(fit, CurveFit)
        assert bool(fit.converged)
        torch.testing.assert_close(
            fit.parameters,
            torch.tensor([2.0, 1.0], dtype=torch.float64),
            atol=1e-6,
            rtol=0,
        )

    def test_exponential_decay(self):
        """A nonlinear model is fitted from a rough initial guess."""
        from torchinterp import curve_fit

        t = torch.linspace(0, 4, 10, dtype=torch.float64)
        u = 2.0 * torch.exp(-0.5 * t)

        fit = curve_fit(_decay, u, t, torch.tensor([1.0, 1.0]))

        torch.testing.assert_close(
            fit.parameters,
            torch.tensor([2.0, 0.5], dtype=torch.float64),
            atol=1e-4,
            rtol=0,
        )
        assert fit.fun.item() < 1e-8

    def test_evaluate_and_derivative(self):
        """The fitted model is evaluated and differentiated by autograd."""
        from torchinterp import curve_fit

        t = torch.linspace(0, 4, 10, dtype=torch.float64)
        u = 2.0 * torch.exp(-0.5 * t)

        fit = curve_fit(_decay, u, t, [2.0, 0.5])

        a, b = fit.parameters
        query = torch.tensor([0.5, 1.5], dtype=torch.float64)

        torch.testing.assert_close(fit.evaluate(query), a * torch.exp(-b * query))
        torch.testing.assert_close(
            fit.derivative(query), -b * a * torch.exp(-b * query)
        )
        torch.testing.assert_close(
            fit.derivative(query, order=2), b**2 * a * torch.exp(-b * query)
        )

    def test_derivative_beyond_polynomial_degree_is_zero(self):
        """Derivatives that no longer depend on t vanish."""
        from torchinterp import curve_fit

        t = torch.tensor([0.0, 1.0, 2.0], dtype=torch.float64)

        fit = curve_fit(_line, 2 * t + 1, t, [0.0, 0.0])

        torch.testing.assert_close(
            fit.derivative(torch.tensor([0.5, 1.0], dtype=torch.float64), 2),
            torch.zeros(2, dtype=torch.float64),
        )

    def test_negative_order(self):
        """Negative derivative orders are invalid."""
        from torchinterp import curve_fit

        t = torch.tensor([0.0, 1.0, 2.0], dtype=torch.float64)

        fit = curve_fit(_line, 2 * t + 1, t, [0.0, 0.0])

        with pytest.raises(ValueError):
            fit.derivative(1.0, order=-1)

    def test_duplicate_t_rejected(self):
        """Samples are validated like every other model."""
        from torchinterp import InvalidInputError, curve_fit

        with pytest.raises(InvalidInputError):
            curve_fit(_line, [1.0, 2.0], [1.0, 1.0], [0.0, 0.0])
