from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._unsupported_operation_error import UnsupportedOperationError
from ._loess_evaluate import loess_evaluate

if TYPE_CHECKING:
    from ._loess import Loess


def loess_derivative(
    loess: Loess,
    t: Union[float, Tensor],
    order: int = 1,
) -> Tensor:
    """
    Only the zeroth derivative (the smoothed value) is defined.

    Raises
    ------
    UnsupportedOperationError
        If order >= 1.
    """
    if order < 0:
        raise ValueError(f"Derivative order must be non-negative, got {order}")
    if order > 0:
        raise UnsupportedOperationError("LOESS does not provide derivatives")

    return loess_evaluate(loess, t)
