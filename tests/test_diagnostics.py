"""Tests for the diagnostics package: codes, templates, errors, formatting.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest

from variantxml.core import DepthLimitExceededError
from variantxml.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
    SchemaError,
    UnsupportedFieldError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
    VariantXmlError,
    WriteFailure,
    WriterStateError,
)


class TestDiagnosticCodes:
    """Code numbering by category."""

    def test_codes_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low", "high"),
        [
            (DiagnosticCode.WRITE_FAILED, 1000, 1999),
            (DiagnosticCode.MAX_DEPTH_EXCEEDED, 2000, 2999),
            (DiagnosticCode.UNKNOWN_VARIANT, 3000, 3999),
            (DiagnosticCode.OPTIONAL_FIELD_DROPPED, 4000, 4099),
        ],
    )
    def test_code_ranges(self, code: DiagnosticCode, low: int, high: int) -> None:
        assert low <= code.value <= high


class TestErrorHierarchy:
    """Exception classes and their diagnostics."""

    def test_write_failure_from_string(self) -> None:
        error = WriteFailure("disk full")

        assert error.message == "disk full"
        assert error.diagnostic is None
        assert str(error) == "disk full"

    def test_write_failure_from_diagnostic(self) -> None:
        error = WriteFailure(ErrorTemplate.write_failed("disk full"))

        assert error.message == "disk full"
        assert str(error).startswith("error[WRITE_FAILED]: disk full")

    def test_depth_error_is_write_failure(self) -> None:
        error = DepthLimitExceededError(ErrorTemplate.depth_exceeded(5))

        assert isinstance(error, WriteFailure)
        assert error.message == "Maximum nesting depth (5) exceeded"

    @pytest.mark.parametrize(
        "error_type", [SchemaError, UnsupportedFieldError, WriterStateError]
    )
    def test_value_errors(self, error_type: type[VariantXmlError]) -> None:
        assert issubclass(error_type, ValueError)
        assert issubclass(error_type, VariantXmlError)

    def test_write_failure_is_not_value_error(self) -> None:
        assert not issubclass(WriteFailure, ValueError)


class TestTemplates:
    """Templates fill in codes, locations and hints."""

    def test_unknown_variant(self) -> None:
        diagnostic = ErrorTemplate.unknown_variant("Circle", "Shape", ["Point", "Line"])

        assert diagnostic.code is DiagnosticCode.UNKNOWN_VARIANT
        assert diagnostic.message == "Variant 'Circle' is not declared by 'Shape'"
        assert diagnostic.hint == "Declared variants: Point, Line"

    def test_unclosed_elements(self) -> None:
        diagnostic = ErrorTemplate.unclosed_elements(["a", "b"])

        assert diagnostic.message == "Writer closed with unclosed elements: a, b"

    def test_unsupported_field_copies_location(self) -> None:
        policy = ErrorTemplate.optional_field_dropped("note", "Section")
        rejected = ErrorTemplate.unsupported_field(policy)

        assert rejected.code is DiagnosticCode.UNSUPPORTED_FIELD
        assert rejected.severity == "error"
        assert (rejected.variant_name, rejected.field_name) == ("Section", "note")
        assert rejected.message == policy.message

    def test_diagnostic_str_is_message(self) -> None:
        assert str(ErrorTemplate.unbalanced_end()) == "End element written with no open element"


class TestFormatter:
    """Rust, simple and JSON output."""

    def _diagnostic(self) -> Diagnostic:
        return ErrorTemplate.non_string_attribute_dropped("level", "Section", "u8")

    def test_rust_format(self) -> None:
        text = DiagnosticFormatter().format(self._diagnostic())

        assert text.splitlines() == [
            "warning[NON_STRING_ATTRIBUTE_DROPPED]: "
            "Attribute field 'level' of variant 'Section' has kind u8 and is dropped",
            "  = variant: Section",
            "  = field: level",
            "  = expected: String",
            "  = received: u8",
            "  = help: Only String attribute fields are written",
        ]

    def test_simple_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(ErrorTemplate.unbalanced_end()) == (
            "WRITER_UNBALANCED_END: End element written with no open element"
        )

    def test_json_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        data = json.loads(formatter.format(self._diagnostic()))

        assert data["code"] == "NON_STRING_ATTRIBUTE_DROPPED"
        assert data["code_value"] == 4001
        assert data["severity"] == "warning"
        assert data["field_name"] == "level"

    def test_json_omits_empty_fields(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        data = json.loads(formatter.format(ErrorTemplate.empty_document()))

        assert "field_name" not in data
        assert "variant_name" not in data

    def test_color(self) -> None:
        text = DiagnosticFormatter(color=True).format(ErrorTemplate.unbalanced_end())

        assert text.startswith("\033[1;31merror\033[0m[")

    def test_sanitize_truncates(self) -> None:
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )

        text = formatter.format(ErrorTemplate.write_failed("x" * 50))

        assert text == "WRITE_FAILED: " + "x" * 10 + "..."

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        text = formatter.format_all([ErrorTemplate.unbalanced_end(), ErrorTemplate.empty_document()])

        assert text.count("\n\n") == 1


class TestValidationResult:
    """Result container and its formatting."""

    def test_valid(self) -> None:
        result = ValidationResult.valid()

        assert result.is_valid
        assert (result.error_count, result.warning_count) == (0, 0)

    def test_warnings_keep_result_valid(self) -> None:
        result = ValidationResult(
            errors=(), warnings=(ValidationWarning("OPTIONAL_FIELD_DROPPED", "m", "S::V.f"),)
        )

        assert result.is_valid
        assert result.warnings[0].format() == "[OPTIONAL_FIELD_DROPPED] at S::V.f: m"

    def test_invalid(self) -> None:
        result = ValidationResult.invalid(errors=(ValidationError("UNSUPPORTED_FIELD", "m"),))

        assert not result.is_valid
        assert result.errors[0].format() == "[UNSUPPORTED_FIELD]: m"

    def test_format_validation_result(self) -> None:
        result = ValidationResult.invalid(
            errors=(ValidationError("UNSUPPORTED_FIELD", "bad", "S::V"),),
            warnings=(ValidationWarning("MULTIPLE_TEXT_CONTENT", "meh", "S::W"),),
        )

        text = DiagnosticFormatter().format_validation_result(result)

        assert text.startswith("Validation failed: 1 error(s), 1 warning(s)")
        assert "  [UNSUPPORTED_FIELD] at S::V: bad" in text
        assert "  [MULTIPLE_TEXT_CONTENT] at S::W: meh" in text

    def test_format_passed(self) -> None:
        text = DiagnosticFormatter().format_validation_result(ValidationResult.valid())

        assert text == "Validation passed"
