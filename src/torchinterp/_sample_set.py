"""Validated, ordered sample storage shared by every interpolation method."""

from __future__ import annotations

from typing import Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._invalid_input_error import InvalidInputError

ArrayLike = Union[Tensor, Sequence[float]]


@tensorclass
class SampleSet:
    """Ordered ``(t, u)`` samples.

    Attributes
    ----------
    t : Tensor
        Independent variable, shape (n,). Strictly increasing.
    u : Tensor
        Dependent variable, shape (n,).
    """

    t: Tensor
    u: Tensor


def _as_float_tensor(a: ArrayLike, name: str) -> Tensor:
    if isinstance(a, Tensor):
        if not a.is_floating_point():
            a = a.to(torch.float64)
        return a
    try:
        return torch.as_tensor(a, dtype=torch.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} is not a numeric sequence") from e


def sample_set(
    u: ArrayLike,
    t: ArrayLike,
    minimum_points: int = 2,
) -> SampleSet:
    """
    Validate and order raw samples.

    Parameters
    ----------
    u : Tensor or sequence of float
        Dependent variable values, shape (n,).
    t : Tensor or sequence of float
        Independent variable values, shape (n,). Need not be sorted.
    minimum_points : int
        Smallest sample count accepted by the calling method.

    Returns
    -------
    SampleSet
        Samples sorted by ``t``.

    Raises
    ------
    InvalidInputError
        If ``u`` or ``t`` is not one-dimensional, the lengths differ, there
        are fewer than ``minimum_points`` samples, a value is not finite, or
        ``t`` contains duplicates.
    """
    u = _as_float_tensor(u, "u")
    t = _as_float_tensor(t, "t")

    if t.dim() != 1 or u.dim() != 1:
        raise InvalidInputError(
            f"u and t must be one-dimensional, got shapes {tuple(u.shape)} and {tuple(t.shape)}"
        )
    if t.shape[0] != u.shape[0]:
        raise InvalidInputError(
            f"u and t must have the same length, got {u.shape[0]} and {t.shape[0]}"
        )

    n = t.shape[0]
    if n < minimum_points:
        raise InvalidInputError(
            f"Need at least {minimum_points} points, got {n}"
        )
    if not torch.all(torch.isfinite(t)) or not torch.all(torch.isfinite(u)):
        raise InvalidInputError("u and t must be finite")

    dtype = torch.promote_types(t.dtype, u.dtype)
    t = t.to(dtype)
    u = u.to(device=t.device, dtype=dtype)

    order = torch.argsort(t)
    t = t[order]
    u = u[order]

    if torch.any(t[1:] <= t[:-1]):
        raise InvalidInputError("t contains duplicate values")

    return SampleSet(t=t, u=u, batch_size=[])
