"""Exceptions and warnings for quadrature approximation."""


class QuadratureWarning(UserWarning):
    """Warning for quadrature issues."""

    pass


class ValidationWarning(QuadratureWarning):
    """Warning emitted when an argument fails validation.

    Validation is advisory: the approximation still runs after this warning.
    """

    pass


class SimpsonAdjustmentWarning(QuadratureWarning):
    """Warning emitted when Simpson's rule drops a point to get an even count."""

    pass


class IntegrationError(Exception):
    """Error when an integral cannot be approximated."""

    pass


class ValidationError(IntegrationError, ValueError):
    """Error raised by strict approximation when validation fails.

    Parameters
    ----------
    diagnostics : list of Diagnostic
        The failed checks.
    """

    def __init__(self, diagnostics):
        self.diagnostics = list(diagnostics)

        message = "; ".join(d.message for d in self.diagnostics)

        super().__init__(message)


class UnknownMethodError(IntegrationError, ValueError):
    """Error when a method selector matches none of the quadrature rules."""

    def __init__(self, method):
        self.method = method

        super().__init__(
            f"unknown quadrature method {method!r}, expected one of "
            f"'m', 'l', 'r', 't', 's'"
        )
