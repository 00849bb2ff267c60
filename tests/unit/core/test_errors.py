"""Unit tests for error handling."""

import json

from scatterspec.core.enums import BuildPhase, ErrorCode
from scatterspec.core.errors import (
    ParameterValidationError,
    RowConversionError,
    ScatterSpecError,
    SpecBuildError,
    ValidationError,
)
from scatterspec.core.models import ErrorDetail


class TestScatterSpecError:
    """Test base ScatterSpecError class."""

    def test_basic_error(self) -> None:
        """Test basic error creation."""
        error = ScatterSpecError(message="Test error", code=ErrorCode.E500_INTERNAL)
        assert str(error) == "Test error"
        assert error.code == ErrorCode.E500_INTERNAL
        assert error.details == []
        assert error.hint is None
        assert error.phase is None

    def test_to_dict(self) -> None:
        """Test serialization of an error with details."""
        error = ScatterSpecError(
            message="Full error",
            code=ErrorCode.E400_VALIDATION,
            details=[ErrorDetail(field="columns", reason="no columns given")],
            hint="Test hint",
            phase=BuildPhase.PARAMETER_VALIDATION,
        )
        payload = error.to_dict()

        assert payload == {
            "code": "E400_VALIDATION",
            "message": "Full error",
            "details": [{"field": "columns", "reason": "no columns given"}],
            "hint": "Test hint",
            "phase": "parameter_validation",
        }
        json.dumps(payload)

    def test_to_dict_without_details(self) -> None:
        """Test that empty details serialize as None."""
        payload = SpecBuildError("boom").to_dict()
        assert payload["details"] is None
        assert payload["phase"] == "spec_assembly"


class TestSubclasses:
    """Test error subclasses."""

    def test_validation_error(self) -> None:
        """Test validation error defaults."""
        error = ValidationError("bad input")
        assert error.code == ErrorCode.E400_VALIDATION
        assert error.phase == BuildPhase.PARAMETER_VALIDATION
        assert isinstance(error, ScatterSpecError)

    def test_parameter_validation_error_message(self) -> None:
        """Test that the message names every failing field."""
        error = ParameterValidationError(
            [ErrorDetail(field="status_colours"), ErrorDetail(field="width"), ErrorDetail(reason="anonymous")]
        )
        assert error.message == "Invalid plot parameters: status_colours, width"
        assert len(error.details) == 3
        assert isinstance(error, ValidationError)

    def test_row_conversion_error(self) -> None:
        """Test row conversion error details."""
        error = RowConversionError("Row table must be a sequence of mappings", row_type="int")
        assert error.phase == BuildPhase.ROW_CONVERSION
        assert error.details[0].reason == "unsupported type int"

    def test_spec_build_error_hint(self) -> None:
        """Test default and custom hints."""
        assert "XY plot spec" in SpecBuildError("boom").hint
        assert SpecBuildError("boom", hint="custom").hint == "custom"
        assert SpecBuildError("boom").code == ErrorCode.E500_INTERNAL
