from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from .._locate_segment import apply_extrapolation, as_query

if TYPE_CHECKING:
    from ._constant_interpolation import ConstantInterpolation


def constant_interpolation_evaluate(
    interpolation: ConstantInterpolation,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate a piecewise constant interpolant at query points.

    Parameters
    ----------
    interpolation : ConstantInterpolation
        Fitted interpolant from constant_interpolation_fit
    t : float or Tensor
        Query points, any shape

    Returns
    -------
    Tensor
        Values, shape of ``t``. Every sample is reproduced exactly.
    """
    knots = interpolation.samples.t
    values = interpolation.samples.u

    t = as_query(t, knots)
    t = apply_extrapolation(knots, t, interpolation.extrapolate)

    # "left": last sample with t_i <= t, "right": first sample with t_i >= t
    if interpolation.direction == "left":
        index = torch.searchsorted(knots, t.reshape(-1), right=True) - 1
    else:
        index = torch.searchsorted(knots, t.reshape(-1), right=False)

    index = torch.clamp(index, 0, knots.shape[0] - 1)

    return values[index].reshape(t.shape)
