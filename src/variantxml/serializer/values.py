"""Tagged-union values.

A VariantValue pairs a schema with the active variant and its payload.
Payloads are checked against the variant's field descriptors when the
value is built, and list payloads are copied into tuples, so serialization
itself can only fail in the writer.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import TYPE_CHECKING

from variantxml.diagnostics import SchemaError
from variantxml.diagnostics.templates import ErrorTemplate
from variantxml.enums import VariantShape
from variantxml.schema import (
    ContentKind,
    EnumSchema,
    ListKind,
    NestedKind,
    OptionalKind,
    VariantDescriptor,
)
from variantxml.writer import XmlSerializable

from .context import WriteContext
from .scalars import scalar_problem

if TYPE_CHECKING:
    from variantxml.writer import EventWriter

__all__ = ["VariantValue", "check_value"]


def check_value(kind: ContentKind, value: object, variant: str, field: str | None) -> None:
    """Validate a payload against its content kind.

    Args:
        kind: Declared content kind
        value: Payload (list items and optional contents are checked too)
        variant: Variant identifier, for diagnostics
        field: Field identifier, for diagnostics (None for positional)

    Raises:
        SchemaError: If the payload does not fit
    """
    match kind:
        case NestedKind(type_name=type_name):
            if not isinstance(value, XmlSerializable):
                raise SchemaError(ErrorTemplate.not_serializable(type(value).__name__, field))
            if (
                type_name is not None
                and isinstance(value, VariantValue)
                and value.schema.name != type_name
            ):
                raise SchemaError(
                    replace(
                        ErrorTemplate.scalar_type_mismatch(type_name, value.schema.name),
                        variant_name=variant,
                        field_name=field,
                    )
                )
        case ListKind(inner=inner):
            if isinstance(value, str | bytes) or not isinstance(value, Sequence):
                raise SchemaError(
                    replace(
                        ErrorTemplate.scalar_type_mismatch(kind.label, type(value).__name__),
                        variant_name=variant,
                        field_name=field,
                    )
                )
            for item in value:
                check_value(inner, item, variant, field)
        case OptionalKind(inner=inner):
            if value is not None:
                check_value(inner, value, variant, field)
        case _:
            problem = scalar_problem(kind, value)
            if problem is not None:
                raise SchemaError(replace(problem, variant_name=variant, field_name=field))


def _freeze(kind: ContentKind, value: object) -> object:
    """Copy validated sequences into tuples so later caller edits cannot reach them."""
    match kind:
        case ListKind(inner=inner):
            return tuple(_freeze(inner, item) for item in value)  # type: ignore[attr-defined]
        case OptionalKind(inner=inner):
            return None if value is None else _freeze(inner, value)
        case _:
            return value


@dataclass(frozen=True, slots=True)
class VariantValue:
    """A value of a tagged-union type.

    Attributes:
        schema: Type the value belongs to
        variant: Identifier of the active variant
        payload: None for unit variants, a mapping of field identifier to
            value for named variants, the carried value for positional ones

    Example:
        >>> point = VariantValue(shape, "Point", {"x": "A", "y": 7})
        >>> point["y"]
        7
    """

    schema: EnumSchema
    variant: str
    payload: object = None

    def __post_init__(self) -> None:
        """Check the payload against the active variant.

        Raises:
            SchemaError: If the variant is unknown or the payload does not fit
        """
        descriptor = self.schema.variant(self.variant)
        match descriptor.shape:
            case VariantShape.UNIT:
                if self.payload is not None:
                    raise SchemaError(
                        ErrorTemplate.payload_shape_mismatch(
                            self.variant, descriptor.shape, type(self.payload).__name__
                        )
                    )
            case VariantShape.NAMED:
                self._check_named(descriptor)
            case VariantShape.POSITIONAL:
                kind = descriptor.fields[0].kind
                check_value(kind, self.payload, self.variant, None)
                object.__setattr__(self, "payload", _freeze(kind, self.payload))

    def _check_named(self, descriptor: VariantDescriptor) -> None:
        payload = self.payload
        if not isinstance(payload, Mapping):
            raise SchemaError(
                ErrorTemplate.payload_shape_mismatch(
                    self.variant, descriptor.shape, type(payload).__name__
                )
            )
        for name in payload:
            if descriptor.field(name) is None:
                raise SchemaError(ErrorTemplate.payload_unknown_field(name, self.variant))
        frozen: dict[str, object] = {}
        for field in descriptor.fields:
            name = field.identifier or ""
            if name not in payload:
                # Optional fields may be left out entirely
                if isinstance(field.kind, OptionalKind):
                    continue
                raise SchemaError(ErrorTemplate.payload_missing_field(name, self.variant))
            check_value(field.kind, payload[name], self.variant, name)
            frozen[name] = _freeze(field.kind, payload[name])
        object.__setattr__(self, "payload", MappingProxyType(frozen))

    @property
    def descriptor(self) -> VariantDescriptor:
        """Descriptor of the active variant."""
        return self.schema.variant(self.variant)

    @property
    def fields(self) -> Mapping[str, object]:
        """Named field values (empty for unit and positional variants)."""
        if isinstance(self.payload, Mapping):
            return self.payload
        return MappingProxyType({})

    def __getitem__(self, name: str) -> object:
        """Value of a named field (None for an omitted optional field)."""
        if self.descriptor.field(name) is None:
            raise KeyError(name)
        return self.fields.get(name)

    def serialize_xml(self, writer: EventWriter, context: WriteContext | None = None) -> None:
        """Write this value's events through the serializer for its schema.

        Raises:
            WriteFailure: If the writer rejects an event
        """
        from .engine import serializer_for  # noqa: PLC0415 - circular

        if context is None:
            context = WriteContext.top_level()
        serializer_for(self.schema, context.config).serialize(self, writer, context)
