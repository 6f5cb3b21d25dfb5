"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Write errors (event writer failures, nesting violations)
        2000-2999: Serialization errors (depth limit, non-serializable payloads)
        3000-3999: Schema errors (definition and value construction mismatches)
        4000-4099: Policy warnings (fields the engine drops by design)
    """

    # Write errors (1000-1999)
    WRITE_FAILED = 1001
    WRITER_UNBALANCED_END = 1002
    WRITER_MISMATCHED_END = 1003
    WRITER_UNCLOSED_ELEMENTS = 1004
    WRITER_MULTIPLE_ROOTS = 1005
    WRITER_TEXT_OUTSIDE_ROOT = 1006
    WRITER_EMPTY_DOCUMENT = 1007

    # Serialization errors (2000-2999)
    MAX_DEPTH_EXCEEDED = 2001
    NOT_SERIALIZABLE = 2002

    # Schema errors (3000-3999)
    UNKNOWN_VARIANT = 3001
    DUPLICATE_VARIANT = 3002
    DUPLICATE_FIELD = 3003
    SHAPE_FIELD_COUNT = 3004
    TEXT_CONTENT_KIND = 3005
    TEXT_CONTENT_POSITIONAL = 3006
    PAYLOAD_MISSING_FIELD = 3007
    PAYLOAD_UNKNOWN_FIELD = 3008
    SCALAR_TYPE_MISMATCH = 3009
    SCALAR_OUT_OF_RANGE = 3010
    INVALID_KIND = 3011
    PAYLOAD_SHAPE_MISMATCH = 3012
    UNSUPPORTED_FIELD = 3013
    SCHEMA_MISMATCH = 3014

    # Policy warnings (4000-4099)
    NON_STRING_ATTRIBUTE_DROPPED = 4001
    OPTIONAL_FIELD_DROPPED = 4002
    POSITIONAL_ATTRIBUTE_DROPPED = 4003
    MULTIPLE_TEXT_CONTENT = 4004
    TEXT_CONTENT_ATTRIBUTE_DROPPED = 4005


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        variant_name: Variant where the problem occurred (schema errors)
        field_name: Field where the problem occurred (schema errors)
        expected_type: Expected content kind or Python type
        received_type: Actual Python type received
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    variant_name: str | None = None
    field_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNKNOWN_VARIANT]: Variant 'Circle' is not declared by 'Shape'
              = variant: Circle
              = help: Declared variants: Point, Line

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
