import pytest

from aprox.quadrature import (
    Diagnostic,
    IntegrationError,
    QuadratureWarning,
    SimpsonAdjustmentWarning,
    UnknownMethodError,
    ValidationError,
    ValidationWarning,
)


class TestExceptions:
    def test_quadrature_warning_is_user_warning(self):
        assert issubclass(QuadratureWarning, UserWarning)

    def test_warning_hierarchy(self):
        assert issubclass(ValidationWarning, QuadratureWarning)
        assert issubclass(SimpsonAdjustmentWarning, QuadratureWarning)

    def test_error_hierarchy(self):
        assert issubclass(IntegrationError, Exception)
        assert issubclass(ValidationError, IntegrationError)
        assert issubclass(ValidationError, ValueError)
        assert issubclass(UnknownMethodError, IntegrationError)
        assert issubclass(UnknownMethodError, ValueError)

    def test_validation_warning_can_be_raised(self):
        with pytest.warns(QuadratureWarning, match="test"):
            import warnings

            warnings.warn("test", ValidationWarning)

    def test_validation_error_carries_diagnostics(self):
        diagnostics = [Diagnostic("not_a_number", "not a number")]

        with pytest.raises(ValidationError, match="not a number") as info:
            raise ValidationError(diagnostics)

        assert info.value.diagnostics == diagnostics

    def test_unknown_method_error_carries_method(self):
        with pytest.raises(UnknownMethodError, match="'x'") as info:
            raise UnknownMethodError("x")

        assert info.value.method == "x"
