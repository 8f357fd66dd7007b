from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._check_order import check_order
from .._locate_segment import locate_segment
from .._piecewise_polynomial import piecewise_polynomial_evaluate

if TYPE_CHECKING:
    from ._quadratic_spline import QuadraticSpline


def quadratic_spline_derivative(
    spline: QuadraticSpline,
    t: Union[float, Tensor],
    order: int = 1,
) -> Tensor:
    """
    Derivative of a quadratic spline at query points.

    The first derivative is continuous; the second is piecewise constant.

    Raises
    ------
    OrderTooHighError
        If order > 2.
    """
    check_order(order, 2)

    knots = spline.samples.t

    t, index = locate_segment(knots, t, spline.extrapolate)

    return piecewise_polynomial_evaluate(
        knots, spline.coefficients, t, index, order=order
    )
