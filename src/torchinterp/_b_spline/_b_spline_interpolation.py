"""B-spline interpolation through every sample."""

from typing import Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._sample_set import SampleSet
from ._b_spline_derivative import b_spline_derivative
from ._b_spline_evaluate import b_spline_evaluate


@tensorclass
class BSplineInterpolation:
    """B-spline curve with one control point per sample.

    Attributes
    ----------
    samples : SampleSet
        Samples the curve passes through.
    curve_parameters : Tensor
        Curve parameter of every sample, shape (n,), from 0 to 1.
    knots : Tensor
        Clamped knot vector, shape (n + degree + 1,).
    control_points : Tensor
        Control points, shape (n,).
    degree : int
        Polynomial degree of the pieces.
    parametrization : str
        "uniform" or "arc_length".
    knot_policy : str
        "average" or "uniform".
    extrapolate : str
        Extrapolation mode: "extrapolate", "clamp", "error".
    """

    samples: SampleSet
    curve_parameters: Tensor
    knots: Tensor
    control_points: Tensor
    degree: int
    parametrization: str
    knot_policy: str
    extrapolate: str

    def evaluate(self, t: Union[float, Tensor]) -> Tensor:
        return b_spline_evaluate(self, t)

    def derivative(self, t: Union[float, Tensor], order: int = 1) -> Tensor:
        return b_spline_derivative(self, t, order)
