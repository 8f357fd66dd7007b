from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._locate_segment import locate_segment
from .._piecewise_polynomial import piecewise_polynomial_evaluate

if TYPE_CHECKING:
    from ._cubic_spline import CubicSpline


def cubic_spline_evaluate(
    spline: CubicSpline,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate a cubic spline at query points.

    Parameters
    ----------
    spline : CubicSpline
        Fitted cubic spline from cubic_spline_fit
    t : float or Tensor
        Query points, any shape

    Returns
    -------
    y : Tensor
        Interpolated values, shape of ``t``

    Raises
    ------
    ExtrapolationError
        If any query point is outside the spline domain and
        spline.extrapolate == 'error'

    Notes
    -----
    Outside the domain the boundary segment's cubic is continued.
    """
    knots = spline.samples.t

    t, index = locate_segment(knots, t, spline.extrapolate)

    # Horner: y = a + dx*(b + dx*(c + dx*d))
    return piecewise_polynomial_evaluate(knots, spline.coefficients, t, index)
