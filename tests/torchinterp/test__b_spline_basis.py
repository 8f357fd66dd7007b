"""Tests for Cox-de Boor basis evaluation."""

import pytest
import torch


@pytest.fixture
def knots():
    return torch.tensor(
        [0.0, 0.0, 0.0, 0.0, 0.3, 0.5, 0.8, 1.0, 1.0, 1.0, 1.0],
        dtype=torch.float64,
    )


class TestBSplineBasis:
    def test_shape(self, knots):
        """One column per basis function."""
        from torchinterp import b_spline_basis

        t = torch.linspace(0, 1, 7, dtype=torch.float64).reshape(7, 1)

        basis = b_spline_basis(t, knots, 3)

        assert basis.shape == (7, 1, 7)

    def test_partition_of_unity(self, knots):
        """Basis functions sum to one on the whole domain, ends included."""
        from torchinterp import b_spline_basis

        t = torch.linspace(0, 1, 101, dtype=torch.float64)

        basis = b_spline_basis(t, knots, 3)

        torch.testing.assert_close(basis.sum(dim=-1), torch.ones_like(t))
        assert torch.all(basis >= -1e-15)

    def test_clamped_ends(self, knots):
        """At the ends only the first or last basis function is active."""
        from torchinterp import b_spline_basis

        basis = b_spline_basis(
            torch.tensor([0.0, 1.0], dtype=torch.float64), knots, 3
        )

        expected = torch.zeros(2, 7, dtype=torch.float64)
        expected[0, 0] = 1.0
        expected[1, -1] = 1.0
        torch.testing.assert_close(basis, expected)

    def test_scipy_comparison(self, knots):
        """Compare with scipy.interpolate.BSpline evaluated on unit coefficients."""
        pytest.importorskip("scipy")
        import numpy
        from scipy.interpolate import BSpline

        from torchinterp import b_spline_basis

        t = torch.linspace(0, 1, 37, dtype=torch.float64)

        basis = b_spline_basis(t, knots, 3)

        reference = BSpline(knots.numpy(), numpy.eye(7), 3)(t.numpy())
        torch.testing.assert_close(
            basis, torch.tensor(reference, dtype=torch.float64)
        )

    def test_degree_zero(self):
        """Degree 0 basis functions are interval indicators."""
        from torchinterp import b_spline_basis

        knots = torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)

        basis = b_spline_basis(
            torch.tensor([0.25, 0.5, 1.0], dtype=torch.float64), knots, 0
        )

        expected = torch.tensor(
            [[1.0, 0.0], [0.0, 1.0], [0.0, 1.0]], dtype=torch.float64
        )
        torch.testing.assert_close(basis, expected)

    def test_negative_degree(self, knots):
        """Negative degrees are rejected."""
        from torchinterp import InvalidDegreeError, b_spline_basis

        with pytest.raises(InvalidDegreeError):
            b_spline_basis(torch.tensor([0.5]), knots, -1)

    def test_too_few_knots(self):
        """Degree must leave at least one basis function."""
        from torchinterp import InvalidDegreeError, b_spline_basis

        knots = torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)

        with pytest.raises(InvalidDegreeError):
            b_spline_basis(torch.tensor([0.5], dtype=torch.float64), knots, 2)

    def test_decreasing_knots(self):
        """Knots must be non-decreasing."""
        from torchinterp import InvalidInputError, b_spline_basis

        knots = torch.tensor([0.0, 0.6, 0.4, 1.0], dtype=torch.float64)

        with pytest.raises(InvalidInputError):
            b_spline_basis(torch.tensor([0.5], dtype=torch.float64), knots, 1)
