"""Sample grid construction."""

from typing import Optional, Tuple

import torch
from torch import Tensor


def sample_grid(
    a: float,
    b: float,
    n_points: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Evenly spaced sample points spanning ``[a, b]``, both endpoints included.

    Parameters
    ----------
    a, b : float
        Interval endpoints. ``a > b`` gives a descending grid.
    n_points : int
        Number of points. Zero gives an empty grid and one gives ``[a]``.

    Returns
    -------
    Tensor
        Shape ``(n_points,)``. Consecutive points are ``(b - a) / (n_points - 1)``
        apart.
    """
    return torch.linspace(a, b, n_points, dtype=dtype, device=device)


def step_size(a: float, b: float, n_points: int) -> float:
    """
    Multiplier applied to the weighted sum of samples.

    This is ``(b - a) / n_points``, not the grid spacing
    ``(b - a) / (n_points - 1)``. Zero points give a zero step.
    """
    if n_points == 0:
        return 0.0

    return (b - a) / n_points


def interval_bounds(interval) -> Tuple[float, float]:
    """Split a two-element interval into Python floats."""
    if isinstance(interval, Tensor):
        interval = interval.detach().reshape(-1).tolist()

    a, b = interval

    return float(a), float(b)
