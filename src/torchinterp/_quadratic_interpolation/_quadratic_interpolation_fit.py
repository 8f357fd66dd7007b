from __future__ import annotations

from typing import TYPE_CHECKING

from .._locate_segment import Extrapolate, check_extrapolate
from .._sample_set import ArrayLike, sample_set

if TYPE_CHECKING:
    from ._quadratic_interpolation import QuadraticInterpolation


def quadratic_interpolation_fit(
    u: ArrayLike,
    t: ArrayLike,
    extrapolate: Extrapolate = "extrapolate",
) -> QuadraticInterpolation:
    """
    Fit a local quadratic interpolant.

    There is nothing to precompute: the three-point window is chosen per
    query at evaluation time.

    Raises
    ------
    InvalidInputError
        If the samples are malformed or fewer than 3.
    """
    check_extrapolate(extrapolate)

    samples = sample_set(u, t, minimum_points=3)

    # Lazy import to avoid circular dependency
    from ._quadratic_interpolation import QuadraticInterpolation

    return QuadraticInterpolation(
        samples=samples,
        extrapolate=extrapolate,
        batch_size=[],
    )
