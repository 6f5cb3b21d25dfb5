"""Validation result for schema validation.

Collects the feedback of a schema validation pass:
- Errors: combinations rejected outright (strict mode)
- Warnings: combinations the engine accepts but drops from the output

Python 3.13+.
"""

from dataclasses import dataclass

from .codes import Diagnostic

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Structured schema error.

    Attributes:
        code: Error code name (e.g., "UNSUPPORTED_FIELD")
        message: Human-readable error message
        context: Variant/field path the error applies to (e.g., "Shape::Point.x")
        diagnostic: Full diagnostic the error was built from
    """

    code: str
    message: str
    context: str | None = None
    diagnostic: Diagnostic | None = None

    def format(self) -> str:
        """Format error as human-readable string."""
        location = f" at {self.context}" if self.context else ""
        return f"[{self.code}]{location}: {self.message}"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structured schema warning.

    Attributes:
        code: Warning code name (e.g., "OPTIONAL_FIELD_DROPPED")
        message: Human-readable warning message
        context: Variant/field path the warning applies to
        diagnostic: Full diagnostic the warning was built from
    """

    code: str
    message: str
    context: str | None = None
    diagnostic: Diagnostic | None = None

    def format(self) -> str:
        """Format warning as human-readable string."""
        location = f" at {self.context}" if self.context else ""
        return f"[{self.code}]{location}: {self.message}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable result of a schema validation pass.

    Attributes:
        errors: Rejected combinations
        warnings: Accepted combinations that drop data

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationWarning, ...]

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors).

        Warnings do not affect validity - they're informational.
        """
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Get number of errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Get number of warnings."""
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors or warnings."""
        return ValidationResult(errors=(), warnings=())

    @staticmethod
    def invalid(
        errors: tuple[ValidationError, ...] = (),
        warnings: tuple[ValidationWarning, ...] = (),
    ) -> "ValidationResult":
        """Create an invalid result.

        Args:
            errors: Validation errors
            warnings: Validation warnings

        Returns:
            ValidationResult with the given errors and warnings
        """
        return ValidationResult(errors=errors, warnings=warnings)
