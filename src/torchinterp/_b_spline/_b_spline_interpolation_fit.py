from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import torch

from .._invalid_degree_error import InvalidDegreeError
from .._locate_segment import Extrapolate, check_extrapolate
from .._sample_set import ArrayLike, sample_set
from .._singular_system_error import SingularSystemError
from ._b_spline_basis import b_spline_basis
from ._b_spline_knots import (
    KnotPolicy,
    Parametrization,
    b_spline_knots,
    b_spline_parameters,
    check_b_spline_options,
)

if TYPE_CHECKING:
    from ._b_spline_interpolation import BSplineInterpolation

logger = logging.getLogger(__name__)


def b_spline_interpolation_fit(
    u: ArrayLike,
    t: ArrayLike,
    degree: int = 3,
    parametrization: Parametrization = "uniform",
    knot_policy: KnotPolicy = "average",
    extrapolate: Extrapolate = "extrapolate",
) -> BSplineInterpolation:
    """
    Fit a B-spline that passes through every sample.

    Parameters
    ----------
    u : Tensor or sequence of float
        Sample values, shape (n,).
    t : Tensor or sequence of float
        Sample abscissae, shape (n,).
    degree : int
        Polynomial degree, 1 <= degree < n. Default is 3 (cubic).
    parametrization : str
        How samples are mapped to curve parameters, see
        :func:`b_spline_parameters`.
    knot_policy : str
        How interior knots are placed, see :func:`b_spline_knots`.
    extrapolate : str
        Extrapolation mode: "extrapolate", "clamp", "error".

    Returns
    -------
    BSplineInterpolation
        Fitted spline.

    Raises
    ------
    InvalidInputError
        If the samples are malformed.
    InvalidDegreeError
        If degree < 1 or degree >= n.
    SingularSystemError
        If the collocation matrix is singular.

    Notes
    -----
    Solves the square system ``B @ c = u`` where ``B[i, j] = N_j(tau_i)`` is
    the collocation matrix of the basis at the sample parameters.
    """
    check_extrapolate(extrapolate)
    check_b_spline_options(parametrization, knot_policy)

    samples = sample_set(u, t, minimum_points=2)
    n = samples.t.shape[0]

    if degree < 1 or degree >= n:
        raise InvalidDegreeError(
            f"Degree must satisfy 1 <= degree < {n} for {n} samples, got {degree}"
        )

    parameters = b_spline_parameters(samples.u, samples.t, parametrization)
    knots = b_spline_knots(parameters, degree, knot_policy)

    B = b_spline_basis(parameters, knots, degree)  # (n, n)

    control_points, info = torch.linalg.solve_ex(B, samples.u)
    if info.item() != 0 or not torch.all(torch.isfinite(control_points)):
        raise SingularSystemError(
            "B-spline collocation matrix is singular; try another knot policy"
        )

    logger.debug(
        "Fitted degree %d B-spline through %d samples (%s, %s)",
        degree,
        n,
        parametrization,
        knot_policy,
    )

    # Lazy import to avoid circular dependency
    from ._b_spline_interpolation import BSplineInterpolation

    return BSplineInterpolation(
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
