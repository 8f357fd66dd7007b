"""Piecewise constant ("zero spline") interpolation."""

from typing import Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._sample_set import SampleSet
from ._constant_interpolation_derivative import (
    constant_interpolation_derivative,
)
from ._constant_interpolation_evaluate import constant_interpolation_evaluate
from ._constant_interpolation_integral import constant_interpolation_integral


@tensorclass
class ConstantInterpolation:
    """Piecewise constant interpolant.

    Attributes
    ----------
    samples : SampleSet
        Samples the interpolant passes through.
    direction : str
        "left": u_i on [t_i, t_{i+1}). "right": u_{i+1} on (t_i, t_{i+1}].
    extrapolate : str
        Extrapolation mode: "extrapolate", "clamp", "error". Outside the
        domain the value is the nearest boundary sample for both
        "extrapolate" and "clamp".
    """

    samples: SampleSet
    direction: str
    extrapolate: str

    def evaluate(self, t: Union[float, Tensor]) -> Tensor:
        return constant_interpolation_evaluate(self, t)

    def derivative(self, t: Union[float, Tensor], order: int = 1) -> Tensor:
        return constant_interpolation_derivative(self, t, order)

    def integral(
        self, a: Union[float, Tensor], b: Union[float, Tensor]
    ) -> Tensor:
        return constant_interpolation_integral(self, a, b)
