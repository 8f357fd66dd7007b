import pytest
import torch


@pytest.fixture
def scenario():
    """Six unevenly spaced samples shared by the method tests, as (u, t)."""
    t = torch.tensor(
        [0.0, 62.25, 109.66, 162.66, 205.8, 252.3], dtype=torch.float64
    )
    u = torch.tensor(
        [14.7, 11.51, 10.41, 14.95, 12.24, 11.22], dtype=torch.float64
    )
    return u, t
