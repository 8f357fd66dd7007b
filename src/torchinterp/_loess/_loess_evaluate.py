from __future__ import annotations

import math
from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from .._locate_segment import apply_extrapolation, as_query

if TYPE_CHECKING:
    from ._loess import Loess


def loess_evaluate(
    loess: Loess,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate a LOESS smoother at query points.

    Parameters
    ----------
    loess : Loess
        Smoother from loess_fit.
    t : float or Tensor
        Query points, any shape.

    Returns
    -------
    Tensor
        Smoothed values, shape of ``t``.

    Raises
    ------
    ExtrapolationError
        If any query point is outside the sample domain and
        loess.extrapolate == 'error'

    Notes
    -----
    For a query t*, the k = ceil(alpha * n) samples nearest to t* get the
    tri-cube weights

        w_i = (1 - (d_i / d_max)^3)^3,    d_i = |t_i - t*|

    where d_max is the largest of the k distances. The polynomial
    ``sum_j beta_j (t - t*)^j`` minimizing ``sum_i w_i (u_i - p(t_i))^2`` is
    found by least squares and ``beta_0`` is returned. If d_max is zero all
    weights are one; if every weight vanishes the neighbors are weighted
    uniformly.
    """
    x = loess.samples.t
    y = loess.samples.u
    n = x.shape[0]

    t = as_query(t, x)
    t = apply_extrapolation(x, t, loess.extrapolate)

    query = t.reshape(-1)  # (m,)
    n_neighbors = math.ceil(loess.alpha * n)

    # (m, n) distances, k nearest per query
    distance = torch.abs(x.unsqueeze(0) - query.unsqueeze(1))
    nearest, index = torch.topk(distance, n_neighbors, dim=1, largest=False)

    d_max = nearest.max(dim=1, keepdim=True).values
    safe_d_max = torch.where(d_max > 0, d_max, torch.ones_like(d_max))
    weights = (1 - (nearest / safe_d_max) ** 3) ** 3

    # All neighbors at d_max
    degenerate = weights.sum(dim=1, keepdim=True) == 0
    weights = torch.where(degenerate, torch.ones_like(weights), weights)

    # Weighted Vandermonde in the centered variable, shape (m, k, degree + 1)
    dx = x[index] - query.unsqueeze(1)
    powers = torch.arange(loess.degree + 1, dtype=x.dtype, device=x.device)
    vandermonde = dx.unsqueeze(-1) ** powers

    sqrt_weights = torch.sqrt(weights)
    lhs = sqrt_weights.unsqueeze(-1) * vandermonde
    rhs = (sqrt_weights * y[index]).unsqueeze(-1)

    beta = torch.linalg.lstsq(lhs, rhs).solution  # (m, degree + 1, 1)

    return beta[:, 0, 0].reshape(t.shape)
