"""Local three-point quadratic interpolation."""

from typing import Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._sample_set import SampleSet
from ._quadratic_interpolation_derivative import (
    quadratic_interpolation_derivative,
)
from ._quadratic_interpolation_evaluate import quadratic_interpolation_evaluate


@tensorclass
class QuadraticInterpolation:
    """Local quadratic interpolant.

    Each query is answered by the parabola through the three samples nearest
    to it. The result is continuous, its derivative jumps where the window
    shifts.

    Attributes
    ----------
    samples : SampleSet
        Samples the interpolant passes through, n >= 3.
    extrapolate : str
        Extrapolation mode: "extrapolate", "clamp", "error".
    """

    samples: SampleSet
    extrapolate: str

    def evaluate(self, t: Union[float, Tensor]) -> Tensor:
        return quadratic_interpolation_evaluate(self, t)

    def derivative(self, t: Union[float, Tensor], order: int = 1) -> Tensor:
        return quadratic_interpolation_derivative(self, t, order)
