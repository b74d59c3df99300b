"""
Fixed-grid quadrature for single-variable integrands.

Function-based approximation (evaluates callable):
    approximate, approximate_strict

Rule selection:
    Method

Validation:
    validate, check, Diagnostic

Grid helpers:
    sample_grid, step_size

Exceptions:
    QuadratureWarning, ValidationWarning, SimpsonAdjustmentWarning,
    IntegrationError, ValidationError, UnknownMethodError
"""

from aprox.quadrature._approximate import approximate, approximate_strict
from aprox.quadrature._exceptions import (
    IntegrationError,
    QuadratureWarning,
    SimpsonAdjustmentWarning,
    UnknownMethodError,
    ValidationError,
    ValidationWarning,
)
from aprox.quadrature._grid import sample_grid, step_size
from aprox.quadrature._method import Method
from aprox.quadrature._validate import Diagnostic, check, validate

__all__ = [
    # Function-based
    "approximate",
    "approximate_strict",
    # Rule selection
    "Method",
    # Validation
    "validate",
    "check",
    "Diagnostic",
    # Grid helpers
    "sample_grid",
    "step_size",
    # Exceptions
    "QuadratureWarning",
    "ValidationWarning",
    "SimpsonAdjustmentWarning",
    "IntegrationError",
    "ValidationError",
    "UnknownMethodError",
]
