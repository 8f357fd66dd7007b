"""Locally weighted polynomial regression (LOESS)."""

from typing import Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._sample_set import SampleSet
from ._loess_derivative import loess_derivative
from ._loess_evaluate import loess_evaluate


@tensorclass
class Loess:
    """LOESS smoother.

    No coefficients are precomputed: every query fits its own weighted
    polynomial to the nearest samples.

    Attributes
    ----------
    samples : SampleSet
        Samples to smooth.
    degree : int
        Degree of the local polynomial.
    alpha : float
        Fraction of the samples used by every local fit, in (0, 1].
    extrapolate : str
        Extrapolation mode: "extrapolate", "clamp", "error".
    """

    samples: SampleSet
    degree: int
    alpha: float
    extrapolate: str

    def evaluate(self, t: Union[float, Tensor]) -> Tensor:
        return loess_evaluate(self, t)

    def derivative(self, t: Union[float, Tensor], order: int = 1) -> Tensor:
        return loess_derivative(self, t, order)
