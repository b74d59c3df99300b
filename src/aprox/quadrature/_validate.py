"""Argument validation for quadrature approximation."""

import numbers
import warnings
from typing import Any, List, NamedTuple

import torch

from aprox.quadrature._exceptions import ValidationWarning


class Diagnostic(NamedTuple):
    """A failed validation check.

    Parameters
    ----------
    code : str
        Machine-readable identifier of the check, e.g. ``"not_a_number"``.
    message : str
        Human-readable description.
    """

    code: str
    message: str


def _elements(value: Any):
    """Flatten ``value`` into a list of elements, or None if it is not a collection."""
    if isinstance(value, torch.Tensor):
        return value.reshape(-1).tolist()

    # numpy arrays and other array-likes
    if hasattr(value, "tolist") and hasattr(value, "shape"):
        flat = value.tolist()

        if not isinstance(flat, list):
            return [flat]

        return _flatten(flat)

    if isinstance(value, (list, tuple)):
        return _flatten(list(value))

    return None


def _flatten(items: list) -> list:
    out = []

    for item in items:
        if isinstance(item, (list, tuple)):
            out.extend(_flatten(list(item)))
        else:
            out.append(item)

    return out


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_numeric(value: Any) -> bool:
    if isinstance(value, torch.Tensor):
        return not value.is_complex() and value.dtype != torch.bool

    if _is_real(value):
        return True

    elements = _elements(value)

    if elements is None:
        return False

    return all(_is_real(element) for element in elements)


def _count(value: Any) -> int:
    elements = _elements(value)

    if elements is None:
        return 1

    return len(elements)


def _is_pair(value: Any) -> bool:
    """True for a flat, one-dimensional collection of two real numbers."""
    if _is_real(value) or not _is_numeric(value):
        return False

    shape = getattr(value, "shape", None)

    if shape is not None:
        return tuple(shape) == (2,)

    return (
        isinstance(value, (list, tuple))
        and len(value) == 2
        and all(_is_real(element) for element in value)
    )


def _scalar(value: Any) -> float:
    elements = _elements(value)

    if elements is None:
        return float(value)

    return float(elements[0])


def validate(func: Any, n_points: Any, interval: Any) -> List[Diagnostic]:
    """
    Check the arguments of :func:`~aprox.quadrature.approximate`.

    Checks run in order and stop at the first failure:

    1. ``func`` is callable.
    2. ``n_points`` is numeric.
    3. ``n_points`` holds exactly one element.
    4. ``n_points`` is strictly positive.
    5. ``n_points`` is integer-valued.
    6. ``interval`` is a flat pair of real numbers.

    Parameters
    ----------
    func : Any
        Candidate integrand.
    n_points : Any
        Candidate number of sample points.
    interval : Any
        Candidate integration interval.

    Returns
    -------
    list of Diagnostic
        Empty when every check passes, otherwise the single failed check.
    """
    if not callable(func):
        return [
            Diagnostic(
                "not_a_function",
                "The value as the first argument is not a function",
            )
        ]

    if not _is_numeric(n_points):
        return [
            Diagnostic(
                "not_a_number",
                "The value sent for the number of points is not a number",
            )
        ]

    if _count(n_points) != 1:
        return [
            Diagnostic(
                "not_a_scalar",
                "The value sent for the number of points is a vector, "
                "it should be an integer",
            )
        ]

    value = _scalar(n_points)

    if not value > 0:
        return [
            Diagnostic(
                "not_positive",
                "The value sent for the number of points needs to be a "
                "positive integer",
            )
        ]

    if not value.is_integer():
        return [
            Diagnostic(
                "not_an_integer",
                "The value sent for the number of points should be an integer",
            )
        ]

    if not _is_pair(interval):
        return [
            Diagnostic(
                "not_a_pair",
                "The value sent for the interval is not a pair of numbers",
            )
        ]

    return []


def check(func: Any, n_points: Any, interval: Any) -> bool:
    """
    Validate arguments and warn about the first failed check.

    Never raises: a failure is reported as a single
    :class:`~aprox.quadrature.ValidationWarning`.

    Returns
    -------
    bool
        True if every check passed.
    """
    diagnostics = validate(func, n_points, interval)

    _warn(diagnostics, stacklevel=3)

    return not diagnostics


def _warn(diagnostics: List[Diagnostic], stacklevel: int) -> None:
    for diagnostic in diagnostics:
        warnings.warn(
            diagnostic.message, ValidationWarning, stacklevel=stacklevel
        )
