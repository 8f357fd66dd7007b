from __future__ import annotations

from typing import TYPE_CHECKING

import torch

from .._locate_segment import Extrapolate, check_extrapolate
from .._sample_set import ArrayLike, sample_set

if TYPE_CHECKING:
    from ._lagrange_interpolation import LagrangeInterpolation


def lagrange_interpolation_fit(
    u: ArrayLike,
    t: ArrayLike,
    extrapolate: Extrapolate = "extrapolate",
) -> LagrangeInterpolation:
    """
    Fit the interpolating polynomial of degree n-1.

    Parameters
    ----------
    u : Tensor or sequence of float
        Sample values, shape (n,).
    t : Tensor or sequence of float
        Sample abscissae, shape (n,).
    extrapolate : str
        Extrapolation mode: "extrapolate", "clamp", "error".

    Returns
    -------
    LagrangeInterpolation

    Notes
    -----
    Both the barycentric weights and the Newton divided differences cost
    O(n^2); evaluation afterwards is O(n) per query.
    """
    check_extrapolate(extrapolate)

    samples = sample_set(u, t, minimum_points=2)
    knots = samples.t
    n = knots.shape[0]

    # w_i = 1 / prod_{j != i} (t_i - t_j)
    differences = knots.unsqueeze(1) - knots.unsqueeze(0)
    differences = differences + torch.eye(n, dtype=knots.dtype, device=knots.device)
    weights = 1.0 / torch.prod(differences, dim=1)

    # Newton divided differences, built column by column
    coefficients = samples.u
    for j in range(1, n):
        coefficients = torch.cat(
            [
                coefficients[:j],
                (coefficients[j:] - coefficients[j - 1 : -1])
                / (knots[j:] - knots[: n - j]),
            ]
        )

    # Lazy import to avoid circular dependency
    from ._lagrange_interpolation import LagrangeInterpolation

    return LagrangeInterpolation(
        samples=samples,
        weights=weights,
        divided_differences=coefficients,
        extrapolate=extrapolate,
        batch_size=[],
    )
