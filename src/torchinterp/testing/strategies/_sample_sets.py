from typing import Tuple

import hypothesis.strategies
import torch

from ._real_numbers import real_numbers


@hypothesis.strategies.composite
def sample_sets(
    draw: hypothesis.strategies.DrawFn,
    min_size: int = 2,
    max_size: int = 12,
    min_gap: float = 0.1,
    max_gap: float = 10.0,
    dtype: torch.dtype = torch.float64,
) -> Tuple[torch.Tensor, torch.Tensor]:
    """Generate ``(u, t)`` samples with strictly increasing, well separated ``t``.

    Consecutive abscissae differ by at least ``min_gap`` so that fitted
    systems stay well conditioned.
    """
    n = draw(hypothesis.strategies.integers(min_size, max_size))

    start = draw(real_numbers(-100.0, 100.0))
    gaps = draw(
        hypothesis.strategies.lists(
            real_numbers(min_gap, max_gap),
            min_size=n - 1,
            max_size=n - 1,
        )
    )
    values = draw(
        hypothesis.strategies.lists(
            real_numbers(-100.0, 100.0),
            min_size=n,
            max_size=n,
        )
    )

    t = start + torch.cat(
        [torch.zeros(1, dtype=dtype), torch.cumsum(torch.tensor(gaps, dtype=dtype), 0)]
    )
    u = torch.tensor(values, dtype=dtype)

    return u, t
