from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import torch

from .._locate_segment import Extrapolate, check_extrapolate
from .._sample_set import ArrayLike, sample_set
from .._solve_tridiagonal import solve_tridiagonal

if TYPE_CHECKING:
    from ._quadratic_spline import QuadraticSpline

logger = logging.getLogger(__name__)


def quadratic_spline_fit(
    u: ArrayLike,
    t: ArrayLike,
    extrapolate: Extrapolate = "extrapolate",
) -> QuadraticSpline:
    """
    Fit a quadratic spline to data points.

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
    QuadraticSpline

    Raises
    ------
    InvalidInputError
        If the samples are malformed or fewer than 2.

    Notes
    -----
    With z_i the slope at t_i and delta_i = (u_{i+1} - u_i) / h_i, the
    segment polynomial

        u_i + z_i (t - t_i) + (z_{i+1} - z_i) / (2 h_i) (t - t_i)^2

    interpolates u_{i+1} iff z_i + z_{i+1} = 2 delta_i. The system is closed
    by pinning the slope at the first knot to the two-point difference
    quotient, z_0 = delta_0, so the first segment is a straight line.

    The resulting matrix is lower bidiagonal; the Thomas sweep on it is
    forward substitution segment by segment.
    """
    check_extrapolate(extrapolate)

    samples = sample_set(u, t, minimum_points=2)
    knots = samples.t
    n = knots.shape[0]

    h = knots[1:] - knots[:-1]  # (n-1,)
    delta = (samples.u[1:] - samples.u[:-1]) / h  # (n-1,)

    diag = torch.ones(n, dtype=knots.dtype, device=knots.device)
    upper = torch.zeros(n - 1, dtype=knots.dtype, device=knots.device)
    lower = torch.ones(n - 1, dtype=knots.dtype, device=knots.device)
    rhs = torch.cat([delta[:1], 2 * delta])

    z = solve_tridiagonal(diag, upper, lower, rhs)

    a = samples.u[:-1]
    b = z[:-1]
    c = (z[1:] - z[:-1]) / (2 * h)

    coefficients = torch.stack([a, b, c], dim=1)

    logger.debug("Fitted quadratic spline with %d segments", n - 1)

    # Lazy import to avoid circular dependency
    from ._quadratic_spline import QuadraticSpline

    return QuadraticSpline(
        samples=samples,
        slopes=z,
        coefficients=coefficients,
        extrapolate=extrapolate,
        batch_size=[],
    )
