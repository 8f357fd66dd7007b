from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import torch

from .._invalid_control_point_count_error import (
    InvalidControlPointCountError,
)
from .._invalid_degree_error import InvalidDegreeError
from .._locate_segment import Extrapolate, check_extrapolate
from .._sample_set import ArrayLike, sample_set
from .._singular_system_error import SingularSystemError
from ._b_spline_basis import b_spline_basis
from ._b_spline_knots import (
    KnotPolicy,
    Parametrization,
    b_spline_approximation_knots,
    b_spline_parameters,
    check_b_spline_options,
)

if TYPE_CHECKING:
    from ._b_spline_approximation import BSplineApproximation

logger = logging.getLogger(__name__)


def b_spline_approximation_fit(
    u: ArrayLike,
    t: ArrayLike,
    n_control: int,
    degree: int = 3,
    parametrization: Parametrization = "uniform",
    knot_policy: KnotPolicy = "average",
    extrapolate: Extrapolate = "extrapolate",
) -> BSplineApproximation:
    """
    Fit a B-spline to data points using least squares.

    Parameters
    ----------
    u : Tensor or sequence of float
        Sample values, shape (n,).
    t : Tensor or sequence of float
        Sample abscissae, shape (n,).
    n_control : int
        Number of control points, degree < n_control < n.
    degree : int
        Polynomial degree, 1 <= degree < n. Default is 3 (cubic).
    parametrization : str
        How samples are mapped to curve parameters, see
        :func:`b_spline_parameters`.
    knot_policy : str
        How interior knots are placed, see
        :func:`b_spline_approximation_knots`.
    extrapolate : str
        Extrapolation mode: "extrapolate", "clamp", "error".

    Returns
    -------
    BSplineApproximation
        Fitted spline.

    Raises
    ------
    InvalidInputError
        If the samples are malformed.
    InvalidDegreeError
        If degree < 1 or degree >= n.
    InvalidControlPointCountError
        If n_control <= degree or n_control >= n.
    SingularSystemError
        If the normal equations are not positive definite.

    Notes
    -----
    Solves the least squares problem ``min ||B @ c - u||^2`` through the
    normal equations ``(B^T B) c = B^T u`` with a Cholesky factorization,
    where ``B[i, j] = N_j(tau_i)`` is the (n, n_control) collocation matrix.
    """
    check_extrapolate(extrapolate)
    check_b_spline_options(parametrization, knot_policy)

    samples = sample_set(u, t, minimum_points=2)
    n = samples.t.shape[0]

    if degree < 1 or degree >= n:
        raise InvalidDegreeError(
            f"Degree must satisfy 1 <= degree < {n} for {n} samples, got {degree}"
        )

    if n_control <= degree or n_control >= n:
        raise InvalidControlPointCountError(
            f"Control point count must satisfy {degree} < n_control < {n}, "
            f"got {n_control}"
        )

    parameters = b_spline_parameters(samples.u, samples.t, parametrization)
    knots = b_spline_approximation_knots(
        parameters, degree, n_control, knot_policy
    )

    B = b_spline_basis(parameters, knots, degree)  # (n, n_control)

    normal_matrix = B.T @ B
    normal_rhs = B.T @ samples.u

    L, info = torch.linalg.cholesky_ex(normal_matrix)
    if info.item() != 0:
        raise SingularSystemError(
            "Normal equations are not positive definite; some knot span "
            "contains no sample parameter"
        )

    control_points = torch.cholesky_solve(normal_rhs.unsqueeze(-1), L).squeeze(-1)

    logger.debug(
        "Fitted degree %d B-spline with %d control points to %d samples",
        degree,
        n_control,
        n,
    )

    # Lazy import to avoid circular dependency
    from ._b_spline_approximation import BSplineApproximation

    return BSplineApproximation(
        samples=samples,
        curve_parameters=parameters,
        knots=knots,
        control_points=control_points,
        degree=degree,
        parametrization=parametrization,
        knot_policy=knot_policy,
        extrapolate=extrapolate,
        batch_size=[],
    )
