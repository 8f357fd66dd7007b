import torch
from torch import Tensor

from ._singular_system_error import SingularSystemError


def _check_pivot(pivot: Tensor, row: int) -> None:
    if torch.any(pivot == 0) or not torch.all(torch.isfinite(pivot)):
        raise SingularSystemError(
            f"Tridiagonal system is singular (zero pivot in row {row})"
        )


def solve_tridiagonal(
    diag: Tensor,
    upper: Tensor,
    lower: Tensor,
    rhs: Tensor,
) -> Tensor:
    """
    Solve a tridiagonal system Ax = b using the Thomas algorithm.

    The matrix A has the form:
        [d0  u0   0   0  ...  0   0 ]
        [l0  d1  u1   0  ...  0   0 ]
        [ 0  l1  d2  u2  ...  0   0 ]
        [        ...                ]
        [ 0   0   0   0  ... ln-2 dn-1]

    Parameters
    ----------
    diag : Tensor
        Main diagonal, shape (n,)
    upper : Tensor
        Upper diagonal, shape (n-1,)
    lower : Tensor
        Lower diagonal, shape (n-1,)
    rhs : Tensor
        Right-hand side, shape (*batch, n)

    Returns
    -------
    Tensor
        Solution x, shape (*batch, n)

    Raises
    ------
    SingularSystemError
        If a pivot of the forward elimination is zero.

    Notes
    -----
    Forward elimination followed by back substitution, O(n). With a zero
    upper diagonal the sweep reduces to forward substitution.
    """
    n = diag.shape[0]

    # Solve along the leading axis, (*batch, n) -> (n, *batch)
    b = rhs.movedim(-1, 0)

    _check_pivot(diag[0], 0)

    if n == 1:
        return (b[0] / diag[0]).unsqueeze(0).movedim(0, -1)

    # Row i after elimination reads x_i + upper_ratio[i] x_{i+1} = reduced[i]
    upper_ratio = [upper[0] / diag[0]]
    reduced = [b[0] / diag[0]]

    for i in range(1, n):
        pivot = diag[i] - lower[i - 1] * upper_ratio[i - 1]
        _check_pivot(pivot, i)
        if i < n - 1:
            upper_ratio.append(upper[i] / pivot)
        reduced.append((b[i] - lower[i - 1] * reduced[i - 1]) / pivot)

    x = [reduced[n - 1]]

    for i in range(n - 2, -1, -1):
        x.append(reduced[i] - upper_ratio[i] * x[-1])

    # x holds x_{n-1}, ..., x_0
    return torch.stack(x[::-1], dim=0).movedim(0, -1)
