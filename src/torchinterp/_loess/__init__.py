from ._loess import Loess
from ._loess_derivative import loess_derivative
from ._loess_evaluate import loess_evaluate
from ._loess_fit import loess_fit

__all__ = [
    "Loess",
    "loess_derivative",
    "loess_evaluate",
    "loess_fit",
]
