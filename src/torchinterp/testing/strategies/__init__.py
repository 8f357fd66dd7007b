"""Hypothesis strategies for interpolation testing."""

from ._real_numbers import real_numbers
from ._sample_sets import sample_sets

__all__ = [
    "real_numbers",
    "sample_sets",
]
