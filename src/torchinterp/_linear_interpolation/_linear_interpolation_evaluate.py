from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._locate_segment import locate_segment
from .._piecewise_polynomial import piecewise_polynomial_evaluate

if TYPE_CHECKING:
    from ._linear_interpolation import LinearInterpolation


def linear_interpolation_evaluate(
    interpolation: LinearInterpolation,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate a piecewise linear interpolant at query points.

    On segment i, ``u_i + (u_{i+1} - u_i) * (t - t_i) / (t_{i+1} - t_i)``.

    Parameters
    ----------
    interpolation : LinearInterpolation
        Fitted interpolant from linear_interpolation_fit
    t : float or Tensor
        Query points, any shape

    Returns
    -------
    Tensor
        Interpolated values, shape of ``t``

    Raises
    ------
    ExtrapolationError
        If a query point is outside the sample domain and
        interpolation.extrapolate == 'error'
    """
    knots = interpolation.samples.t

    t, index = locate_segment(knots, t, interpolation.extrapolate)

    return piecewise_polynomial_evaluate(
        knots, interpolation.coefficients, t, index
    )
