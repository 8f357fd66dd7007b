from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._unsupported_operation_error import UnsupportedOperationError
from ._constant_interpolation_evaluate import constant_interpolation_evaluate

if TYPE_CHECKING:
    from ._constant_interpolation import ConstantInterpolation


def constant_interpolation_derivative(
    interpolation: ConstantInterpolation,
    t: Union[float, Tensor],
    order: int = 1,
) -> Tensor:
    """
    Only the zeroth derivative (the value itself) is defined.

    Raises
    ------
    UnsupportedOperationError
        If order >= 1.
    """
    if order < 0:
        raise ValueError(f"Derivative order must be non-negative, got {order}")
    if order > 0:
        raise UnsupportedOperationError(
            "Piecewise constant interpolation has no derivative"
        )

    return constant_interpolation_evaluate(interpolation, t)
