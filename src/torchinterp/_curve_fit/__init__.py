from ._curve_fit import curve_fit
from ._curve_fit_result import CurveFit

__all__ = [
    "CurveFit",
    "curve_fit",
]
