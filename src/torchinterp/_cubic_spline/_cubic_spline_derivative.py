from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._check_order import check_order
from .._locate_segment import locate_segment
from .._piecewise_polynomial import piecewise_polynomial_evaluate

if TYPE_CHECKING:
    from ._cubic_spline import CubicSpline


def cubic_spline_derivative(
    spline: CubicSpline,
    t: Union[float, Tensor],
    order: int = 1,
) -> Tensor:
    """
    Compute a derivative of a cubic spline at query points.

    Parameters
    ----------
    spline : CubicSpline
        Input cubic spline
    t : float or Tensor
        Query points, any shape
    order : int
        Order of derivative (0, 1, 2 or 3). Default is 1.

    Returns
    -------
    Tensor
        Derivative values, shape of ``t``

    Raises
    ------
    OrderTooHighError
        If order > 3.

    Notes
    -----
    For cubic polynomial: y = a + b*dx + c*dx^2 + d*dx^3
    - First derivative: y' = b + 2c*dx + 3d*dx^2
    - Second derivative: y'' = 2c + 6d*dx
    - Third derivative: y''' = 6d
    """
    check_order(order, 3)

    knots = spline.samples.t

    t, index = locate_segment(knots, t, spline.extrapolate)

    return piecewise_polynomial_evaluate(
        knots, spline.coefficients, t, index, order=order
    )
