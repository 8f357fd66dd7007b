from __future__ import annotations

from typing import TYPE_CHECKING

import torch

from .._locate_segment import Extrapolate, check_extrapolate
from .._sample_set import ArrayLike, sample_set

if TYPE_CHECKING:
    from ._linear_interpolation import LinearInterpolation


def linear_interpolation_fit(
    u: ArrayLike,
    t: ArrayLike,
    extrapolate: Extrapolate = "extrapolate",
) -> LinearInterpolation:
    """
    Fit a piecewise linear interpolant.

    Parameters
    ----------
    u : Tensor or sequence of float
        Sample values, shape (n,).
    t : Tensor or sequence of float
        Sample abscissae, shape (n,). Sorted on construction.
    extrapolate : str
        Extrapolation mode: "extrapolate" (extend the boundary segments),
        "clamp", "error".

    Returns
    -------
    LinearInterpolation

    Raises
    ------
    InvalidInputError
        If the samples are malformed or fewer than 2.
    """
    check_extrapolate(extrapolate)

    samples = sample_set(u, t, minimum_points=2)

    h = samples.t[1:] - samples.t[:-1]
    slope = (samples.u[1:] - samples.u[:-1]) / h

    coefficients = torch.stack([samples.u[:-1], slope], dim=1)

    # Lazy import to avoid circular dependency
    from ._linear_interpolation import LinearInterpolation

    return LinearInterpolation(
        samples=samples,
        coefficients=coefficients,
        extrapolate=extrapolate,
        batch_size=[],
    )
