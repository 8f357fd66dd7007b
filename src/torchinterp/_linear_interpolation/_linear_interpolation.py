"""Piecewise linear interpolation."""

from typing import Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._sample_set import SampleSet
from ._linear_interpolation_derivative import linear_interpolation_derivative
from ._linear_interpolation_evaluate import linear_interpolation_evaluate
from ._linear_interpolation_integral import linear_interpolation_integral


@tensorclass
class LinearInterpolation:
    """Piecewise linear interpolant.

    Attributes
    ----------
    samples : SampleSet
        Samples the interpolant passes through.
    coefficients : Tensor
        Shape (n_segments, 2). For segment i the line is
        coefficients[i, 0] + coefficients[i, 1] * (t - t_i).
    extrapolate : str
        Extrapolation mode: "extrapolate", "clamp", "error".
    """

    samples: SampleSet
    coefficients: Tensor
    extrapolate: str

    def evaluate(self, t: Union[float, Tensor]) -> Tensor:
        return linear_interpolation_evaluate(self, t)

    def derivative(self, t: Union[float, Tensor], order: int = 1) -> Tensor:
        return linear_interpolation_derivative(self, t, order)

    def integral(
        self, a: Union[float, Tensor], b: Union[float, Tensor]
    ) -> Tensor:
        return linear_interpolation_integral(self, a, b)
