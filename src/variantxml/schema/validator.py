"""Schema validation: report the field combinations the engine drops.

The serializer accepts every schema its descriptors can express, but some
combinations never reach the output:

- Attribute fields whose kind is not String
- Optional fields (at any list depth) inside named-field variants
- Attribute-role fields of positional variants
- String attribute fields of a named variant that also has a text content
  field (the variant writes no element to carry them)
- More than one text content field in a variant (accepted, but each one
  emits its own character block)

validate_schema() reports each as a warning, or as an error in strict mode.

Python 3.13+.
"""

from collections.abc import Iterator

from variantxml.diagnostics import (
    Diagnostic,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from variantxml.diagnostics.templates import ErrorTemplate
from variantxml.enums import VariantShape

from .descriptors import EnumSchema, VariantDescriptor
from .kinds import ContentKind, ListKind, OptionalKind

__all__ = ["schema_policy_diagnostics", "validate_schema"]


def _drops_optional(kind: ContentKind) -> bool:
    """Check whether an element field's kind ends in an Optional."""
    match kind:
        case OptionalKind():
            return True
        case ListKind(inner=inner):
            return _drops_optional(inner)
        case _:
            return False


def _variant_policies(variant: VariantDescriptor) -> Iterator[tuple[str | None, Diagnostic]]:
    """Yield (field identifier, diagnostic) for every drop policy in a variant."""
    match variant.shape:
        case VariantShape.NAMED:
            text_fields = 0
            for descriptor in variant.fields:
                if descriptor.is_attribute:
                    if not descriptor.is_string_attribute:
                        yield descriptor.identifier, ErrorTemplate.non_string_attribute_dropped(
                            descriptor.identifier or "", variant.identifier, descriptor.kind.label
                        )
                elif descriptor.is_text_content:
                    text_fields += 1
                elif _drops_optional(descriptor.kind):
                    yield descriptor.identifier, ErrorTemplate.optional_field_dropped(
                        descriptor.identifier or "", variant.identifier
                    )
            if text_fields > 1:
                yield None, ErrorTemplate.multiple_text_content(variant.identifier, text_fields)
            if text_fields:
                for descriptor in variant.fields:
                    if descriptor.is_string_attribute:
                        yield descriptor.identifier, ErrorTemplate.text_content_attribute_dropped(
                            descriptor.identifier or "", variant.identifier
                        )
        case VariantShape.POSITIONAL:
            if variant.fields[0].is_attribute:
                yield None, ErrorTemplate.positional_attribute_dropped(variant.identifier)
        case VariantShape.UNIT:
            pass


def schema_policy_diagnostics(schema: EnumSchema) -> tuple[tuple[str, Diagnostic], ...]:
    """Collect drop policy diagnostics with their "Type::Variant.field" context."""
    found: list[tuple[str, Diagnostic]] = []
    for variant in schema.variants:
        for field_name, diagnostic in _variant_policies(variant):
            context = f"{schema.name}::{variant.identifier}"
            if field_name is not None:
                context = f"{context}.{field_name}"
            found.append((context, diagnostic))
    return tuple(found)


def validate_schema(schema: EnumSchema, *, strict: bool = False) -> ValidationResult:
    """Validate a schema against the serializer's drop policies.

    Args:
        schema: Schema to check
        strict: Report drop policies as errors instead of warnings

    Returns:
        ValidationResult; invalid only when strict and a policy applies

    Example:
        >>> result = validate_schema(schema)
        >>> for warning in result.warnings:
        ...     print(warning.format())
    """
    policies = schema_policy_diagnostics(schema)
    if not policies:
        return ValidationResult.valid()

    if strict:
        errors: list[ValidationError] = []
        for context, diagnostic in policies:
            rejected = ErrorTemplate.unsupported_field(diagnostic)
            errors.append(
                ValidationError(
                    code=rejected.code.name,
                    message=rejected.message,
                    context=context,
                    diagnostic=rejected,
                )
            )
        return ValidationResult.invalid(errors=tuple(errors))

    warnings = tuple(
        ValidationWarning(
            code=diagnostic.code.name,
            message=diagnostic.message,
            context=context,
            diagnostic=diagnostic,
        )
        for context, diagnostic in policies
    )
    return ValidationResult(errors=(), warnings=warnings)
