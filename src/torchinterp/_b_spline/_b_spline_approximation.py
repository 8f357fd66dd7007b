"""Least-squares B-spline approximation."""

from typing import Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._sample_set import SampleSet
from ._b_spline_derivative import b_spline_derivative
from ._b_spline_evaluate import b_spline_evaluate


@tensorclass
class BSplineApproximation:
    """B-spline curve with fewer control points than samples.

    The control points minimize the squared residual at the samples, so the
    curve smooths the data instead of passing through it.

    Attributes
    ----------
    samples : SampleSet
        Samples the curve was fitted to.
    curve_parameters : Tensor
        Curve parameter of every sample, shape (n,), from 0 to 1.
    knots : Tensor
        Clamped knot vector, shape (n_control + degree + 1,).
    control_points : Tensor
        Control points, shape (n_control,).
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
