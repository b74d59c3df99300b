"""Fixed-grid quadrature rules for a single-variable integrand."""

import warnings
from typing import Any, Callable, Optional, Union

import torch
from torch import Tensor

from aprox.quadrature._exceptions import (
    SimpsonAdjustmentWarning,
    ValidationError,
)
from aprox.quadrature._grid import interval_bounds, sample_grid, step_size
from aprox.quadrature._method import Method
from aprox.quadrature._validate import _count, _scalar, _warn, validate

# Errors a malformed, already-reported argument can raise during evaluation
_MALFORMED_INPUT_ERRORS = (
    TypeError,
    ValueError,
    IndexError,
    ZeroDivisionError,
    RuntimeError,
)


def approximate(
    func: Callable,
    n_points: Any,
    interval: Any,
    method: Union[Method, str] = Method.SIMPSON,
    *,
    vectorized: bool = True,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Approximate a definite integral on an evenly spaced grid.

    Parameters
    ----------
    func : callable
        Integrand mapping a real to a real. It is first tried on the whole
        grid tensor; a scalar result is broadcast. If it raises ``TypeError``,
        ``ValueError`` or ``RuntimeError`` on the tensor, or returns a result
        of another shape, it is called once per point with a float instead.
    n_points : int
        Number of grid points. Simpson's rule drops one point when the count
        is odd.
    interval : sequence of two floats or Tensor
        ``[a, b]``. ``a > b`` is accepted and gives the negated orientation.
    method : Method or str
        ``"m"`` (midpoint), ``"l"`` (left endpoint), ``"r"`` (right endpoint),
        ``"t"`` (trapezoidal) or ``"s"`` (Simpson, default). Rule names are
        also accepted.
    vectorized : bool
        Whether to try the single tensor call first. ``False`` always calls
        ``func`` once per point.
    dtype : torch.dtype, optional
        Result dtype. Defaults to the interval's floating dtype, or float64.
    device : torch.device, optional
        Result device. Defaults to the interval's device.

    Returns
    -------
    Tensor
        Scalar approximation.

    Raises
    ------
    UnknownMethodError
        If ``method`` matches none of the rules.

    Warns
    -----
    ValidationWarning
        If an argument is malformed. The approximation still runs; when it
        cannot complete the result is NaN.
    SimpsonAdjustmentWarning
        If Simpson's rule received an odd number of points.

    Notes
    -----
    The grid spacing is ``(b - a) / (n_points - 1)`` but the weighted sum is
    scaled by ``(b - a) / n_points``. A rule with no terms (e.g.
    ``n_points=1``) returns zero.

    Differentiable with respect to parameters captured in ``func``'s closure
    when ``func`` accepts the grid tensor.

    Examples
    --------
    >>> approximate(lambda x: x**2, 100, [0, 1])  # 0.33
    >>> approximate(lambda x: torch.exp(x**2), 1000, [2, 4], method="t")

    >>> # Scalar integrands fall back to per-point calls
    >>> approximate(math.exp, 100, [0, 1], "t")
    """
    diagnostics = validate(func, n_points, interval)
    _warn(diagnostics, stacklevel=3)

    valid = not diagnostics

    method = Method.parse(method)

    try:
        return _approximate(
            func,
            n_points,
            interval,
            method,
            vectorized=vectorized,
            dtype=dtype,
            device=device,
        )
    except _MALFORMED_INPUT_ERRORS:
        if valid:
            raise

        dtype, device = _infer_dtype_device(interval, dtype, device)

        return torch.tensor(float("nan"), dtype=dtype, device=device)


def approximate_strict(
    func: Callable,
    n_points: Any,
    interval: Any,
    method: Union[Method, str] = Method.SIMPSON,
    *,
    vectorized: bool = True,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Like :func:`approximate`, but malformed arguments are an error.

    Raises
    ------
    ValidationError
        If any argument fails validation. ``error.diagnostics`` lists the
        failed checks.
    UnknownMethodError
        If ``method`` matches none of the rules.
    """
    diagnostics = validate(func, n_points, interval)

    if diagnostics:
        raise ValidationError(diagnostics)

    return approximate(
        func,
        n_points,
        interval,
        method,
        vectorized=vectorized,
        dtype=dtype,
        device=device,
    )


def _approximate(
    func: Callable,
    n_points: Any,
    interval: Any,
    method: Method,
    *,
    vectorized: bool,
    dtype: Optional[torch.dtype],
    device: Optional[torch.device],
) -> Tensor:
    n = _point_count(n_points)

    if method is Method.SIMPSON and n % 2 != 0:
        warnings.warn(
            f"The number of points needs to be even for Simpson's rule, "
            f"the result was calculated using {n - 1} points instead of "
            f"{n} points",
            SimpsonAdjustmentWarning,
            stacklevel=3,
        )

        n = n - 1

    a, b = interval_bounds(interval)
    dtype, device = _infer_dtype_device(interval, dtype, device)

    x = sample_grid(a, b, n, dtype=dtype, device=device)
    delta_x = step_size(a, b, n)

    if method is Method.MIDPOINT:
        y = _evaluate(func, (x[:-1] + x[1:]) / 2, vectorized)
        y_sum = y.sum()
    elif method is Method.LEFT:
        y_sum = _evaluate(func, x[:-1], vectorized).sum()
    elif method is Method.RIGHT:
        y_sum = _evaluate(func, x[1:], vectorized).sum()
    elif method is Method.TRAPEZOIDAL:
        y = _evaluate(func, x, vectorized)
        y_sum = ((y[:-1] + y[1:]) / 2).sum()
    else:
        y = _evaluate(func, x, vectorized)
        y_sum = (_simpson_weights(n, dtype, device) * y).sum()

    return delta_x * y_sum


def _simpson_weights(
    n: int, dtype: torch.dtype, device: Optional[torch.device]
) -> Tensor:
    # 1-based: 1/3 at both ends, 2/3 at even i, 4/3 at odd interior i
    weights = torch.full((n,), 4 / 3, dtype=dtype, device=device)
    weights[1::2] = 2 / 3

    if n > 0:
        weights[0] = 1 / 3
        weights[-1] = 1 / 3

    return weights


def _evaluate(func: Callable, nodes: Tensor, vectorized: bool) -> Tensor:
    if nodes.numel() == 0:
        return torch.zeros_like(nodes)

    if vectorized:
        values = _evaluate_tensor(func, nodes)

        if values is not None:
            return values

    return torch.tensor(
        [float(func(node)) for node in nodes.tolist()],
        dtype=nodes.dtype,
        device=nodes.device,
    )


def _evaluate_tensor(func: Callable, nodes: Tensor) -> Optional[Tensor]:
    """Call ``func`` once on all nodes, or return None if it rejects tensors."""
    try:
        values = torch.as_tensor(
            func(nodes), dtype=nodes.dtype, device=nodes.device
        )
    except (TypeError, ValueError, RuntimeError):
        return None

    if values.dim() == 0:
        return torch.broadcast_to(values, nodes.shape)

    if values.shape != nodes.shape:
        return None

    return values


def _point_count(n_points: Any) -> int:
    if _count(n_points) != 1:
        raise ValueError(
            f"n_points must be a single number, got {n_points!r}"
        )

    value = _scalar(n_points)

    if not value.is_integer():
        raise ValueError(f"n_points must be integer-valued, got {value}")

    return int(value)


def _infer_dtype_device(interval, dtype, device):
    if isinstance(interval, Tensor) and interval.is_floating_point():
        if dtype is None:
            dtype = interval.dtype

        if device is None:
            device = interval.device

    if dtype is None:
        dtype = torch.float64

    return dtype, device
