"""aprox: numerical approximation of definite integrals with PyTorch."""

from . import quadrature
from .quadrature import (
    Diagnostic,
    IntegrationError,
    Method,
    QuadratureWarning,
    SimpsonAdjustmentWarning,
    UnknownMethodError,
    ValidationError,
    ValidationWarning,
    approximate,
    approximate_strict,
    check,
    validate,
)

__all__ = [
    "quadrature",
    "approximate",
    "approximate_strict",
    "validate",
    "check",
    "Method",
    "Diagnostic",
    "QuadratureWarning",
    "ValidationWarning",
    "SimpsonAdjustmentWarning",
    "IntegrationError",
    "ValidationError",
    "UnknownMethodError",
]

__version__ = "0.1.0"
