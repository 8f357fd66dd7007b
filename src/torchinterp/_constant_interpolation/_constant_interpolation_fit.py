from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from .._locate_segment import Extrapolate, check_extrapolate
from .._sample_set import ArrayLike, sample_set

if TYPE_CHECKING:
    from ._constant_interpolation import ConstantInterpolation

Direction = Literal["left", "right"]


def constant_interpolation_fit(
    u: ArrayLike,
    t: ArrayLike,
    direction: Direction = "left",
    extrapolate: Extrapolate = "extrapolate",
) -> ConstantInterpolation:
    """
    Fit a piecewise constant interpolant.

    Parameters
    ----------
    u : Tensor or sequence of float
        Sample values, shape (n,).
    t : Tensor or sequence of float
        Sample abscissae, shape (n,).
    direction : str
        "left" holds the value of the left sample of each interval,
        "right" the value of the right sample.
    extrapolate : str
        Extrapolation mode: "extrapolate", "clamp", "error".

    Returns
    -------
    ConstantInterpolation

    Raises
    ------
    InvalidInputError
        If the samples are malformed or fewer than 2.
    ValueError
        If direction is not "left" or "right".
    """
    if direction not in ("left", "right"):
        raise ValueError(
            f"Unknown direction {direction!r}. Supported directions: 'left', 'right'."
        )
    check_extrapolate(extrapolate)

    samples = sample_set(u, t, minimum_points=2)

    # Lazy import to avoid circular dependency
    from ._constant_interpolation import ConstantInterpolation

    return ConstantInterpolation(
        samples=samples,
        direction=direction,
        extrapolate=extrapolate,
        batch_size=[],
    )
