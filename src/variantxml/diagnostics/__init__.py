"""Diagnostic system for variantxml errors.

Provides structured error diagnostics with codes, hints, and formatting.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    SchemaError,
    UnsupportedFieldError,
    VariantXmlError,
    WriteFailure,
    WriterStateError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "SchemaError",
    "UnsupportedFieldError",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "VariantXmlError",
    "WriteFailure",
    "WriterStateError",
]
