from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from .._locate_segment import apply_extrapolation, as_query

if TYPE_CHECKING:
    from ._lagrange_interpolation import LagrangeInterpolation


def lagrange_interpolation_evaluate(
    interpolation: LagrangeInterpolation,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate the interpolating polynomial with the barycentric formula.

        p(t) = sum_i (w_i u_i / (t - t_i)) / sum_i (w_i / (t - t_i))

    A query equal to a node returns that node's value directly.

    Parameters
    ----------
    interpolation : LagrangeInterpolation
        Fitted interpolant from lagrange_interpolation_fit
    t : float or Tensor
        Query points, any shape

    Returns
    -------
    Tensor
        Interpolated values, shape of ``t``
    """
    knots = interpolation.samples.t
    values = interpolation.samples.u
    weights = interpolation.weights

    t = as_query(t, knots)
    t = apply_extrapolation(knots, t, interpolation.extrapolate)

    t_flat = t.reshape(-1)

    differences = t_flat.unsqueeze(-1) - knots  # (n_query, n)
    exact = differences == 0

    safe = torch.where(exact, torch.ones_like(differences), differences)
    terms = weights / safe

    y = (terms * values).sum(dim=-1) / terms.sum(dim=-1)

    node_values = (exact.to(values.dtype) * values).sum(dim=-1)
    y = torch.where(exact.any(dim=-1), node_values, y)

    return y.reshape(t.shape)
