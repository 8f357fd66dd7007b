from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from .._invalid_degree_error import InvalidDegreeError
from .._invalid_input_error import InvalidInputError
from .._locate_segment import Extrapolate, check_extrapolate
from .._sample_set import ArrayLike, sample_set

if TYPE_CHECKING:
    from ._loess import Loess

logger = logging.getLogger(__name__)


def loess_fit(
    u: ArrayLike,
    t: ArrayLike,
    degree: int = 2,
    alpha: float = 0.75,
    extrapolate: Extrapolate = "extrapolate",
) -> Loess:
    """
    Prepare a LOESS smoother.

    Parameters
    ----------
    u : Tensor or sequence of float
        Sample values, shape (n,).
    t : Tensor or sequence of float
        Sample abscissae, shape (n,).
    degree : int
        Degree of the local polynomial. Default is 2.
    alpha : float
        Fraction of samples in every local fit, in (0, 1]. Each query uses
        its ``ceil(alpha * n)`` nearest samples. Default is 0.75.
    extrapolate : str
        Extrapolation mode: "extrapolate", "clamp", "error".

    Returns
    -------
    Loess
        Smoother.

    Raises
    ------
    InvalidInputError
        If the samples are malformed or alpha is outside (0, 1].
    InvalidDegreeError
        If degree < 0 or degree + 2 > ceil(alpha * n). The farthest neighbor
        has zero weight, so the local fit needs degree + 1 other samples.
    """
    check_extrapolate(extrapolate)

    samples = sample_set(u, t, minimum_points=2)
    n = samples.t.shape[0]

    if not 0 < alpha <= 1:
        raise InvalidInputError(f"alpha must be in (0, 1], got {alpha}")

    n_neighbors = math.ceil(alpha * n)

    if degree < 0 or degree >= n_neighbors - 1:
        raise InvalidDegreeError(
            f"Degree must satisfy 0 <= degree < {n_neighbors - 1} for "
            f"{n_neighbors} neighbors, got {degree}"
        )

    logger.debug(
        "LOESS of degree %d over %d of %d samples per query",
        degree,
        n_neighbors,
        n,
    )

    # Lazy import to avoid circular dependency
    from ._loess import Loess

    return Loess(
        samples=samples,
        degree=degree,
        alpha=alpha,
        extrapolate=extrapolate,
        batch_size=[],
    )
