import torch
from torch import Tensor

from .._invalid_degree_error import InvalidDegreeError
from .._invalid_input_error import InvalidInputError


def b_spline_basis(
    t: Tensor,
    knots: Tensor,
    degree: int,
) -> Tensor:
    """
    Evaluate B-spline basis functions using Cox-de Boor recursion.

    Parameters
    ----------
    t : Tensor
        Evaluation points, shape (*query_shape)
    knots : Tensor
        Knot vector, shape (n_knots,). Must be non-decreasing.
    degree : int
        Polynomial degree (0=constant, 1=linear, 2=quadratic, 3=cubic)

    Returns
    -------
    basis : Tensor
        Shape (*query_shape, n_basis) where n_basis = n_knots - degree - 1

    Raises
    ------
    InvalidDegreeError
        If degree is negative or too high for the given knot count.
    InvalidInputError
        If knots are not non-decreasing.

    Notes
    -----
    For degree 0:
        B_{i,0}(t) = 1 if t_i <= t < t_{i+1}, else 0

    For degree k > 0:
        B_{i,k}(t) = ((t - t_i) / (t_{i+k} - t_i)) * B_{i,k-1}(t)
                   + ((t_{i+k+1} - t) / (t_{i+k+1} - t_{i+1})) * B_{i+1,k-1}(t)

    Division by zero (0/0) is handled as 0 (when knot intervals are zero).

    The degree-0 level is seeded from the knot span found by binary search,
    restricted to the spans ``degree, ..., n_basis - 1`` that carry a full
    set of basis functions. The right end of the domain therefore belongs to
    the last span, and points outside the domain evaluate the polynomial
    piece of the nearest boundary span.
    """
    n_knots = knots.shape[0]

    # Validate degree
    if degree < 0:
        raise InvalidDegreeError(f"Degree must be non-negative, got {degree}")
    if n_knots < degree + 2:
        raise InvalidDegreeError(
            f"Need at least {degree + 2} knots for degree {degree}, got {n_knots}"
        )

    # Validate knots are non-decreasing
    if not torch.all(knots[1:] >= knots[:-1]):
        raise InvalidInputError("Knots must be non-decreasing")

    # Number of basis functions
    n_basis = n_knots - degree - 1

    query_shape = t.shape
    t_flat = t.reshape(-1)  # (n_points,)
    n_points = t_flat.shape[0]

    span = torch.searchsorted(knots, t_flat, right=True) - 1
    span = torch.clamp(span, degree, n_basis - 1)

    # Degree 0 basis functions, shape (n_points, n_knots - 1)
    basis_current = torch.nn.functional.one_hot(span, n_knots - 1).to(
        dtype=knots.dtype
    )

    # Dynamic programming: build up from degree 0 to target degree
    # At each level k, we compute B_{j,k} for j = 0, 1, ..., n_knots - k - 2
    for k in range(1, degree + 1):
        n_basis_k = n_knots - k - 1

        basis_next = torch.zeros(
            n_points, n_basis_k, dtype=knots.dtype, device=knots.device
        )

        for j in range(n_basis_k):
            # Left term: ((t - t_j) / (t_{j+k} - t_j)) * B_{j,k-1}(t)
            denom_left = knots[j + k] - knots[j]
            if denom_left.abs() > 0:
                alpha_left = (t_flat - knots[j]) / denom_left
                left_term = alpha_left * basis_current[:, j]
            else:
                # 0/0 case: treat as 0
                left_term = torch.zeros(
                    n_points, dtype=knots.dtype, device=knots.device
                )

            # Right term: ((t_{j+k+1} - t) / (t_{j+k+1} - t_{j+1})) * B_{j+1,k-1}(t)
            denom_right = knots[j + k + 1] - knots[j + 1]
            if denom_right.abs() > 0:
                alpha_right = (knots[j + k + 1] - t_flat) / denom_right
                right_term = alpha_right * basis_current[:, j + 1]
            else:
                # 0/0 case: treat as 0
                right_term = torch.zeros(
                    n_points, dtype=knots.dtype, device=knots.device
                )

            basis_next[:, j] = left_term + right_term

        basis_current = basis_next

    return basis_current.view(*query_shape, n_basis)
