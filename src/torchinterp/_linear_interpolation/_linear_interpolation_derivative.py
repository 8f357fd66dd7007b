from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._check_order import check_order
from .._locate_segment import locate_segment
from .._piecewise_polynomial import piecewise_polynomial_evaluate

if TYPE_CHECKING:
    from ._linear_interpolation import LinearInterpolation


def linear_interpolation_derivative(
    interpolation: LinearInterpolation,
    t: Union[float, Tensor],
    order: int = 1,
) -> Tensor:
    """
    Derivative of a piecewise linear interpolant at query points.

    The first derivative is the slope of the enclosing segment. At interior
    samples it is the slope of the segment to the right.

    Raises
    ------
    OrderTooHighError
        If order > 1.
    """
    check_order(order, 1)

    knots = interpolation.samples.t

    t, index = locate_segment(knots, t, interpolation.extrapolate)

    return piecewise_polynomial_evaluate(
        knots, interpolation.coefficients, t, index, order=order
    )
