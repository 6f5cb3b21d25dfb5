"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps raise sites short while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Write errors
    # ------------------------------------------------------------------

    @staticmethod
    def write_failed(reason: str) -> Diagnostic:
        """Event writer rejected an operation.

        Args:
            reason: Underlying writer error message

        Returns:
            Diagnostic for WRITE_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.WRITE_FAILED,
            message=reason,
            hint="The output written so far is truncated and must be discarded",
        )

    @staticmethod
    def unbalanced_end() -> Diagnostic:
        """End element requested with no open element.

        Returns:
            Diagnostic for WRITER_UNBALANCED_END
        """
        return Diagnostic(
            code=DiagnosticCode.WRITER_UNBALANCED_END,
            message="End element written with no open element",
        )

    @staticmethod
    def mismatched_end(expected: str, received: str) -> Diagnostic:
        """End element name does not match the innermost open element.

        Args:
            expected: Name of the innermost open element
            received: Name carried by the end event

        Returns:
            Diagnostic for WRITER_MISMATCHED_END
        """
        msg = f"End element '{received}' does not close open element '{expected}'"
        return Diagnostic(
            code=DiagnosticCode.WRITER_MISMATCHED_END,
            message=msg,
            expected_type=expected,
            received_type=received,
        )

    @staticmethod
    def unclosed_elements(names: Iterable[str]) -> Diagnostic:
        """Writer closed while elements were still open.

        Args:
            names: Open element names, outermost first

        Returns:
            Diagnostic for WRITER_UNCLOSED_ELEMENTS
        """
        joined = ", ".join(names)
        msg = f"Writer closed with unclosed elements: {joined}"
        return Diagnostic(
            code=DiagnosticCode.WRITER_UNCLOSED_ELEMENTS,
            message=msg,
            hint="A serialize call that failed leaves its output truncated",
        )

    @staticmethod
    def multiple_roots(name: str) -> Diagnostic:
        """Second top-level element written to a single-root writer.

        Args:
            name: Name of the rejected element

        Returns:
            Diagnostic for WRITER_MULTIPLE_ROOTS
        """
        msg = f"Second root element '{name}' written without a container"
        return Diagnostic(
            code=DiagnosticCode.WRITER_MULTIPLE_ROOTS,
            message=msg,
            hint="Pass a container name to collect element sequences",
        )

    @staticmethod
    def text_outside_root() -> Diagnostic:
        """Character data written with no open element.

        Returns:
            Diagnostic for WRITER_TEXT_OUTSIDE_ROOT
        """
        return Diagnostic(
            code=DiagnosticCode.WRITER_TEXT_OUTSIDE_ROOT,
            message="Character data written outside the root element",
            hint="Pass a container name to collect top-level character data",
        )

    @staticmethod
    def empty_document() -> Diagnostic:
        """Writer closed before any element was written.

        Returns:
            Diagnostic for WRITER_EMPTY_DOCUMENT
        """
        return Diagnostic(
            code=DiagnosticCode.WRITER_EMPTY_DOCUMENT,
            message="No root element was written",
        )

    # ------------------------------------------------------------------
    # Serialization errors
    # ------------------------------------------------------------------

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Nested value depth limit exceeded.

        Args:
            max_depth: Configured maximum depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Check for a nested value that contains itself, or raise max_depth",
        )

    @staticmethod
    def not_serializable(type_name: str, field_name: str | None) -> Diagnostic:
        """Nested payload does not implement serialize_xml.

        Args:
            type_name: Python type of the offending payload
            field_name: Field carrying it (None for positional variants)

        Returns:
            Diagnostic for NOT_SERIALIZABLE
        """
        msg = f"Value of type '{type_name}' cannot be serialized as a nested value"
        return Diagnostic(
            code=DiagnosticCode.NOT_SERIALIZABLE,
            message=msg,
            field_name=field_name,
            expected_type="XmlSerializable",
            received_type=type_name,
            hint="Nested values must provide serialize_xml(writer, context)",
        )

    # ------------------------------------------------------------------
    # Schema errors
    # ------------------------------------------------------------------

    @staticmethod
    def unknown_variant(variant: str, schema_name: str, declared: Iterable[str]) -> Diagnostic:
        """Value names a variant the schema does not declare.

        Args:
            variant: Requested variant identifier
            schema_name: Name of the tagged-union type
            declared: Declared variant identifiers in order

        Returns:
            Diagnostic for UNKNOWN_VARIANT
        """
        msg = f"Variant '{variant}' is not declared by '{schema_name}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_VARIANT,
            message=msg,
            variant_name=variant,
            hint=f"Declared variants: {', '.join(declared)}",
        )

    @staticmethod
    def duplicate_variant(variant: str, schema_name: str) -> Diagnostic:
        """Variant identifier declared twice.

        Args:
            variant: Duplicated identifier
            schema_name: Name of the tagged-union type

        Returns:
            Diagnostic for DUPLICATE_VARIANT
        """
        msg = f"Variant '{variant}' is declared more than once in '{schema_name}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_VARIANT,
            message=msg,
            variant_name=variant,
        )

    @staticmethod
    def duplicate_field(field: str, variant: str) -> Diagnostic:
        """Field identifier declared twice within a variant.

        Args:
            field: Duplicated identifier
            variant: Variant declaring it

        Returns:
            Diagnostic for DUPLICATE_FIELD
        """
        msg = f"Field '{field}' is declared more than once in variant '{variant}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_FIELD,
            message=msg,
            variant_name=variant,
            field_name=field,
        )

    @staticmethod
    def shape_field_count(variant: str, shape: str, count: int) -> Diagnostic:
        """Field count incompatible with the variant shape.

        Args:
            variant: Variant identifier
            shape: Declared shape
            count: Number of fields supplied

        Returns:
            Diagnostic for SHAPE_FIELD_COUNT
        """
        msg = f"Variant '{variant}' of shape '{shape}' cannot carry {count} field(s)"
        return Diagnostic(
            code=DiagnosticCode.SHAPE_FIELD_COUNT,
            message=msg,
            variant_name=variant,
            hint="Unit variants carry no fields; positional variants carry exactly one",
        )

    @staticmethod
    def text_content_kind(field: str, kind: str) -> Diagnostic:
        """Text content field with a non-scalar content kind.

        Args:
            field: Field identifier
            kind: Offending content kind description

        Returns:
            Diagnostic for TEXT_CONTENT_KIND
        """
        msg = f"Text content field '{field}' must be a string or scalar, not {kind}"
        return Diagnostic(
            code=DiagnosticCode.TEXT_CONTENT_KIND,
            message=msg,
            field_name=field,
            expected_type="scalar",
            received_type=kind,
        )

    @staticmethod
    def text_content_positional(variant: str) -> Diagnostic:
        """Text content role used on a positional variant.

        Args:
            variant: Variant identifier

        Returns:
            Diagnostic for TEXT_CONTENT_POSITIONAL
        """
        msg = f"Positional variant '{variant}' cannot carry a text content field"
        return Diagnostic(
            code=DiagnosticCode.TEXT_CONTENT_POSITIONAL,
            message=msg,
            variant_name=variant,
            hint="Text content is only meaningful for named-field variants",
        )

    @staticmethod
    def payload_missing_field(field: str, variant: str) -> Diagnostic:
        """Named payload omits a declared field.

        Args:
            field: Missing field identifier
            variant: Variant identifier

        Returns:
            Diagnostic for PAYLOAD_MISSING_FIELD
        """
        msg = f"Value for variant '{variant}' is missing field '{field}'"
        return Diagnostic(
            code=DiagnosticCode.PAYLOAD_MISSING_FIELD,
            message=msg,
            variant_name=variant,
            field_name=field,
        )

    @staticmethod
    def payload_unknown_field(field: str, variant: str) -> Diagnostic:
        """Named payload supplies an undeclared field.

        Args:
            field: Unknown field identifier
            variant: Variant identifier

        Returns:
            Diagnostic for PAYLOAD_UNKNOWN_FIELD
        """
        msg = f"Variant '{variant}' has no field '{field}'"
        return Diagnostic(
            code=DiagnosticCode.PAYLOAD_UNKNOWN_FIELD,
            message=msg,
            variant_name=variant,
            field_name=field,
        )

    @staticmethod
    def payload_shape_mismatch(variant: str, shape: str, received_type: str) -> Diagnostic:
        """Payload incompatible with the variant shape.

        Args:
            variant: Variant identifier
            shape: Declared shape
            received_type: Python type of the payload

        Returns:
            Diagnostic for PAYLOAD_SHAPE_MISMATCH
        """
        msg = f"Payload of type '{received_type}' does not fit {shape} variant '{variant}'"
        return Diagnostic(
            code=DiagnosticCode.PAYLOAD_SHAPE_MISMATCH,
            message=msg,
            variant_name=variant,
            received_type=received_type,
        )

    @staticmethod
    def scalar_type_mismatch(kind: str, received_type: str) -> Diagnostic:
        """Scalar value of the wrong Python type.

        Args:
            kind: Declared content kind
            received_type: Python type of the value

        Returns:
            Diagnostic for SCALAR_TYPE_MISMATCH
        """
        msg = f"Expected a value of kind {kind}, got '{received_type}'"
        return Diagnostic(
            code=DiagnosticCode.SCALAR_TYPE_MISMATCH,
            message=msg,
            expected_type=kind,
            received_type=received_type,
        )

    @staticmethod
    def scalar_out_of_range(kind: str, value: object) -> Diagnostic:
        """Integer outside the declared width.

        Args:
            kind: Declared integer kind
            value: Offending value

        Returns:
            Diagnostic for SCALAR_OUT_OF_RANGE
        """
        msg = f"Value {value} is out of range for {kind}"
        return Diagnostic(
            code=DiagnosticCode.SCALAR_OUT_OF_RANGE,
            message=msg,
            expected_type=kind,
        )

    @staticmethod
    def invalid_kind(description: str) -> Diagnostic:
        """Content kind constructed with invalid parameters.

        Args:
            description: What is wrong with the kind

        Returns:
            Diagnostic for INVALID_KIND
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_KIND,
            message=description,
        )

    @staticmethod
    def schema_mismatch(value_schema: str, serializer_schema: str) -> Diagnostic:
        """Value handed to a serializer built for another schema.

        Args:
            value_schema: Name of the value's tagged-union type
            serializer_schema: Name of the type the serializer was built for

        Returns:
            Diagnostic for SCHEMA_MISMATCH
        """
        msg = (
            f"Value of '{value_schema}' cannot be written by the serializer "
            f"for '{serializer_schema}'"
        )
        return Diagnostic(
            code=DiagnosticCode.SCHEMA_MISMATCH,
            message=msg,
            expected_type=serializer_schema,
            received_type=value_schema,
            hint="Serialize the value with serializer_for(value.schema)",
        )

    @staticmethod
    def unsupported_field(policy: Diagnostic) -> Diagnostic:
        """Strict mode rejection of a drop policy.

        Args:
            policy: Warning diagnostic describing the dropped field

        Returns:
            Diagnostic for UNSUPPORTED_FIELD
        """
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_FIELD,
            message=policy.message,
            variant_name=policy.variant_name,
            field_name=policy.field_name,
            hint="Disable strict mode to accept the documented drop policy",
        )

    # ------------------------------------------------------------------
    # Policy warnings
    # ------------------------------------------------------------------

    @staticmethod
    def non_string_attribute_dropped(field: str, variant: str, kind: str) -> Diagnostic:
        """Attribute field with a non-string kind is never written.

        Args:
            field: Field identifier
            variant: Variant identifier
            kind: Declared content kind

        Returns:
            Diagnostic for NON_STRING_ATTRIBUTE_DROPPED
        """
        msg = f"Attribute field '{field}' of variant '{variant}' has kind {kind} and is dropped"
        return Diagnostic(
            code=DiagnosticCode.NON_STRING_ATTRIBUTE_DROPPED,
            message=msg,
            variant_name=variant,
            field_name=field,
            expected_type="String",
            received_type=kind,
            hint="Only String attribute fields are written",
            severity="warning",
        )

    @staticmethod
    def optional_field_dropped(field: str, variant: str) -> Diagnostic:
        """Optional field inside a named variant is never written.

        Args:
            field: Field identifier
            variant: Variant identifier

        Returns:
            Diagnostic for OPTIONAL_FIELD_DROPPED
        """
        msg = f"Optional field '{field}' of variant '{variant}' is dropped"
        return Diagnostic(
            code=DiagnosticCode.OPTIONAL_FIELD_DROPPED,
            message=msg,
            variant_name=variant,
            field_name=field,
            hint="Optional content fields are not written for named-field variants",
            severity="warning",
        )

    @staticmethod
    def positional_attribute_dropped(variant: str) -> Diagnostic:
        """Attribute role on a positional variant is never written.

        Args:
            variant: Variant identifier

        Returns:
            Diagnostic for POSITIONAL_ATTRIBUTE_DROPPED
        """
        msg = f"Attribute field of positional variant '{variant}' is dropped"
        return Diagnostic(
            code=DiagnosticCode.POSITIONAL_ATTRIBUTE_DROPPED,
            message=msg,
            variant_name=variant,
            hint="Positional variants do not support attributes",
            severity="warning",
        )

    @staticmethod
    def multiple_text_content(variant: str, count: int) -> Diagnostic:
        """More than one text content field in a variant.

        Args:
            variant: Variant identifier
            count: Number of text content fields

        Returns:
            Diagnostic for MULTIPLE_TEXT_CONTENT
        """
        msg = f"Variant '{variant}' declares {count} text content fields"
        return Diagnostic(
            code=DiagnosticCode.MULTIPLE_TEXT_CONTENT,
            message=msg,
            variant_name=variant,
            hint="Each text content field emits its own character block",
            severity="warning",
        )

    @staticmethod
    def text_content_attribute_dropped(field: str, variant: str) -> Diagnostic:
        """String attribute of a variant written as text content.

        Args:
            field: Attribute field identifier
            variant: Variant identifier

        Returns:
            Diagnostic for TEXT_CONTENT_ATTRIBUTE_DROPPED
        """
        msg = f"Attribute field '{field}' of variant '{variant}' is dropped next to text content"
        return Diagnostic(
            code=DiagnosticCode.TEXT_CONTENT_ATTRIBUTE_DROPPED,
            message=msg,
            variant_name=variant,
            field_name=field,
            hint="Variants with a text content field have no element to carry attributes",
            severity="warning",
        )
