from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._check_order import check_order
from ._quadratic_interpolation_evaluate import quadratic_interpolation_terms

if TYPE_CHECKING:
    from ._quadratic_interpolation import QuadraticInterpolation


def quadratic_interpolation_derivative(
    interpolation: QuadraticInterpolation,
    t: Union[float, Tensor],
    order: int = 1,
) -> Tensor:
    """
    Derivative of the local parabola at query points.

    Raises
    ------
    OrderTooHighError
        If order > 2.
    """
    check_order(order, 2)

    return quadratic_interpolation_terms(interpolation, t, order)
