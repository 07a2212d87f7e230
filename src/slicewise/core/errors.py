"""Error handling and exception definitions for slicewise."""

from pydantic import ValidationError as PydanticValidationError

from .enums import ErrorCode
from .models import ErrorDetail, ErrorResponse


class SlicewiseError(Exception):
    """Base exception for all slicewise errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: list[ErrorDetail] | None = None,
        hint: str | None = None,
    ):
        """Initialize slicewise error.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            details: Optional detailed error information
            hint: Optional correction hint for the caller
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or []
        self.hint = hint

    def to_error_response(self) -> ErrorResponse:
        """Convert exception to ErrorResponse model.

        Returns:
            ErrorResponse model instance
        """
        return ErrorResponse(
            code=self.code.value,
            message=self.message,
            details=self.details if self.details else None,
            hint=self.hint,
        )


class ValidationError(SlicewiseError):
    """Raised when chart input or configuration has the wrong type."""

    def __init__(
        self,
        message: str,
        details: list[ErrorDetail] | None = None,
        hint: str | None = None,
    ):
        """Initialize validation error."""
        super().__init__(
            message=message,
            code=ErrorCode.E400_VALIDATION,
            details=details,
            hint=hint,
        )

    @classmethod
    def from_pydantic(cls, message: str, error: PydanticValidationError, prefix: str = "") -> "ValidationError":
        """Build a validation error with one detail per failing field.

        Args:
            message: Error message
            error: Pydantic validation error to translate
            prefix: Optional prefix for the reported field names

        Returns:
            ValidationError instance
        """
        details = []
        for item in error.errors():
            location = ".".join(str(part) for part in item["loc"])
            field = f"{prefix}{location}" if prefix and location else (prefix or location)
            details.append(ErrorDetail(field=field or None, reason=item["msg"]))
        return cls(message=message, details=details)


class ChartBuildError(SlicewiseError):
    """Raised when chart building fails."""

    def __init__(
        self,
        message: str,
        details: list[ErrorDetail] | None = None,
        hint: str | None = None,
    ):
        """Initialize chart build error."""
        super().__init__(
            message=message,
            code=ErrorCode.E422_UNPROCESSABLE,
            details=details,
            hint=hint or "Failed to build the chart. Check the values and configuration.",
        )


class PaletteError(ChartBuildError):
    """Raised when a slice has no colour in a custom palette."""

    def __init__(
        self,
        index: int,
        palette_size: int,
    ):
        """Initialize palette error.

        Args:
            index: Slice index that needed a colour
            palette_size: Number of colours in the palette
        """
        super().__init__(
            message=f"Palette has no colour for slice {index} ({palette_size} colours given)",
            details=[
                ErrorDetail(
                    field="palette",
                    reason=f"Index {index} is out of range for a palette of {palette_size}",
                    suggestion="Supply at least one colour per value",
                )
            ],
            hint=f"Pass a palette with at least {index + 1} colours, or none to generate one.",
        )
        self.index = index
        self.palette_size = palette_size
