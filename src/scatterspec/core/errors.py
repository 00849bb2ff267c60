"""Error handling and exception definitions for scatterspec."""

from typing import Any

from .enums import BuildPhase, ErrorCode
from .models import ErrorDetail


class ScatterSpecError(Exception):
    """Base exception for all scatterspec errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: list[ErrorDetail] | None = None,
        hint: str | None = None,
        phase: BuildPhase | None = None,
    ):
        """Initialize scatterspec error.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            details: Optional detailed error information
            hint: Optional correction hint for the caller
            phase: Optional build phase where the error occurred
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or []
        self.hint = hint
        self.phase = phase

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for the widget shell."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": [d.model_dump(exclude_none=True) for d in self.details] or None,
            "hint": self.hint,
            "phase": self.phase.value if self.phase else None,
        }


class ValidationError(ScatterSpecError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        details: list[ErrorDetail] | None = None,
        hint: str | None = None,
        phase: BuildPhase = BuildPhase.PARAMETER_VALIDATION,
    ):
        """Initialize validation error."""
        super().__init__(
            message=message,
            code=ErrorCode.E400_VALIDATION,
            details=details,
            hint=hint,
            phase=phase,
        )


class ParameterValidationError(ValidationError):
    """Raised by strict mode when plot parameters or canvas size are malformed."""

    def __init__(self, details: list[ErrorDetail]):
        """Initialize parameter validation error."""
        fields = ", ".join(d.field for d in details if d.field)
        super().__init__(
            message=f"Invalid plot parameters: {fields}",
            details=details,
            hint="Check the suggestions in details, or disable strict mode",
        )


class RowConversionError(ValidationError):
    """Raised when the row table is neither a sequence of mappings nor a DataFrame."""

    def __init__(self, message: str, row_type: str | None = None):
        """Initialize row conversion error."""
        details = [ErrorDetail(field="rows", reason=f"unsupported type {row_type}")] if row_type else None
        super().__init__(
            message=message,
            details=details,
            hint="Pass a list of dicts or a polars DataFrame",
            phase=BuildPhase.ROW_CONVERSION,
        )


class SpecBuildError(ScatterSpecError):
    """Raised when spec assembly fails unexpectedly."""

    def __init__(self, message: str, hint: str | None = None):
        """Initialize spec build error."""
        super().__init__(
            message=message,
            code=ErrorCode.E500_INTERNAL,
            hint=hint or "Failed to assemble the XY plot spec. Check the row table and parameters.",
            phase=BuildPhase.SPEC_ASSEMBLY,
        )
