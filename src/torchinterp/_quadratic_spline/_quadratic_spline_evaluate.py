from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._locate_segment import locate_segment
from .._piecewise_polynomial import piecewise_polynomial_evaluate

if TYPE_CHECKING:
    from ._quadratic_spline import QuadraticSpline


def quadratic_spline_evaluate(
    spline: QuadraticSpline,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate a quadratic spline at query points.

    Parameters
    ----------
    spline : QuadraticSpline
        Fitted spline from quadratic_spline_fit
    t : float or Tensor
        Query points, any shape

    Returns
    -------
    Tensor
        Interpolated values, shape of ``t``

    Raises
    ------
    ExtrapolationError
        If a query point is outside the spline domain and
        spline.extrapolate == 'error'
    """
    knots = spline.samples.t

    t, index = locate_segment(knots, t, spline.extrapolate)

    return piecewise_polynomial_evaluate(knots, spline.coefficients, t, index)
