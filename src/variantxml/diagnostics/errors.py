"""variantxml exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "SchemaError",
    "UnsupportedFieldError",
    "VariantXmlError",
    "WriteFailure",
    "WriterStateError",
]


class VariantXmlError(Exception):
    """Base exception for all variantxml errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize VariantXmlError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class WriteFailure(VariantXmlError):
    """The event writer rejected an operation during serialization.

    The only error a serialize call raises once the value is constructed.
    The first failure aborts the whole depth-first walk; events written
    before it are not rolled back, so the output is truncated and unusable.

    Attributes:
        message: The underlying writer error message, verbatim
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize WriteFailure.

        Args:
            message: Underlying error message OR Diagnostic object
        """
        super().__init__(message)
        self.message = message.message if isinstance(message, Diagnostic) else message


class SchemaError(VariantXmlError, ValueError):
    """A schema or a value does not describe a serializable variant.

    Raised at definition time (descriptor construction) or at value
    construction time, never while events are being written.
    """


class UnsupportedFieldError(SchemaError):
    """A schema uses a field combination the engine would silently drop.

    Only raised when the serializer is configured with strict=True.
    """


class WriterStateError(VariantXmlError, ValueError):
    """A concrete writer was driven into an unbalanced nesting state.

    The engine converts this into WriteFailure when it surfaces
    during a serialize call.
    """
