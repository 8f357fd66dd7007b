"""Tests for sample validation and ordering."""

import pytest
import torch


class TestSampleSet:
    def test_sorts_by_t(self):
        """Unsorted samples are reordered with u traveling along with t."""
        from torchinterp import sample_set

        samples = sample_set([3.0, 1.0, 2.0], [2.0, 0.0, 1.0])

        torch.testing.assert_close(
            samples.t, torch.tensor([0.0, 1.0, 2.0], dtype=torch.float64)
        )
        torch.testing.assert_close(
            samples.u, torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64)
        )

    def test_sequences_become_float64(self):
        """Python sequences are converted to float64 tensors."""
        from torchinterp import sample_set

        samples = sample_set([1, 2], (0, 1))

        assert samples.t.dtype == torch.float64
        assert samples.u.dtype == torch.float64

    def test_integer_tensors_promoted(self):
        """Integer tensors are promoted to float64."""
        from torchinterp import sample_set

        samples = sample_set(torch.tensor([1, 2]), torch.tensor([0, 1]))

        assert samples.t.dtype == torch.float64

    def test_float32_preserved(self):
        """Floating tensors keep their dtype."""
        from torchinterp import sample_set

        t = torch.tensor([0.0, 1.0], dtype=torch.float32)
        u = torch.tensor([1.0, 2.0], dtype=torch.float32)

        samples = sample_set(u, t)

        assert samples.t.dtype == torch.float32
        assert samples.u.dtype == torch.float32

    def test_duplicate_t_raises(self):
        """Duplicate abscissae are rejected."""
        from torchinterp import InvalidInputError, sample_set

        with pytest.raises(InvalidInputError, match="duplicate"):
            sample_set([1.0, 2.0, 3.0], [0.0, 1.0, 1.0])

    def test_mismatched_lengths_raise(self):
        """u and t must have the same length."""
        from torchinterp import InvalidInputError, sample_set

        with pytest.raises(InvalidInputError):
            sample_set([1.0, 2.0, 3.0], [0.0, 1.0])

    def test_too_few_points_raise(self):
        """Fewer samples than the method minimum are rejected."""
        from torchinterp import InvalidInputError, sample_set

        with pytest.raises(InvalidInputError):
            sample_set([1.0], [0.0])

        with pytest.raises(InvalidInputError):
            sample_set([1.0, 2.0], [0.0, 1.0], minimum_points=3)

    def test_non_finite_raise(self):
        """NaN and infinite samples are rejected."""
        from torchinterp import InvalidInputError, sample_set

        with pytest.raises(InvalidInputError):
            sample_set([1.0, float("nan")], [0.0, 1.0])

        with pytest.raises(InvalidInputError):
            sample_set([1.0, 2.0], [0.0, float("inf")])

    def test_two_dimensional_raises(self):
        """Only one-dimensional samples are accepted."""
        from torchinterp import InvalidInputError, sample_set

        with pytest.raises(InvalidInputError):
            sample_set(torch.zeros(2, 2), torch.zeros(2, 2))

    def test_invalid_input_is_value_error(self):
        """InvalidInputError can be caught as ValueError."""
        from torchinterp import InterpolationError, InvalidInputError

        assert issubclass(InvalidInputError, ValueError)
        assert issubclass(InvalidInputError, InterpolationError)
