"""Testing helpers for interpolation models."""

from .strategies import real_numbers, sample_sets

__all__ = [
    "real_numbers",
    "sample_sets",
]
