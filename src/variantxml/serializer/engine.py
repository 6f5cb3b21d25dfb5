"""Variant serialization engine.

Turns a VariantValue into an ordered stream of write events. The active
variant selects one case handler from a dispatch table built once per
schema in declaration order:

- Unit: an empty element named after the variant
- Named fields: string attributes gathered on the start event, then each
  content field in declaration order; a text content field replaces the
  whole wrapper with raw character data
- Positional: the carried value wrapped in an element named after the
  variant, repeated per list item, omitted for an absent optional

Nested values are serialized through direct recursive calls against the
same writer, with an explicit WriteContext telling them how to wrap
themselves. The first writer error aborts the whole walk as WriteFailure;
already written events are not rolled back.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from variantxml.diagnostics import SchemaError, UnsupportedFieldError, WriteFailure
from variantxml.diagnostics.templates import ErrorTemplate
from variantxml.enums import VariantShape
from variantxml.schema import (
    ContentKind,
    EnumSchema,
    FieldDescriptor,
    LabelResolver,
    ListKind,
    NestedKind,
    OptionalKind,
    ScalarKind,
    VariantDescriptor,
    validate_schema,
)
from variantxml.writer import (
    Characters,
    EndElement,
    EventWriter,
    StartElement,
    XmlEvent,
    XmlSerializable,
)

from .config import DEFAULT_CONFIG, SerializerConfig
from .context import WriteContext
from .scalars import format_scalar
from .values import VariantValue

__all__ = ["VariantSerializer", "emit", "serializer_for"]

logger = logging.getLogger(__name__)

CaseHandler: TypeAlias = Callable[[VariantDescriptor, VariantValue, EventWriter, WriteContext], None]


def emit(writer: EventWriter, event: XmlEvent) -> None:
    """Hand one event to the writer, reporting any failure as WriteFailure.

    Raises:
        WriteFailure: Carrying the writer's error message verbatim
    """
    try:
        writer.write(event)
    except WriteFailure:
        raise
    except Exception as exc:
        raise WriteFailure(ErrorTemplate.write_failed(str(exc))) from exc


class VariantSerializer:
    """Serializer for the values of one tagged-union schema.

    Stateless after construction: all per-call state lives in the
    WriteContext, so one instance serves any number of calls.

    Usage:
        >>> serializer = VariantSerializer(shape)
        >>> recorder = EventRecorder()
        >>> serializer.serialize(shape.value("Point", x="A", y=7), recorder)

    Raises (construction):
        UnsupportedFieldError: If config.strict and the schema contains a
            field combination the engine drops
    """

    __slots__ = ("_config", "_dispatch", "_resolver", "_schema")

    def __init__(self, schema: EnumSchema, config: SerializerConfig | None = None) -> None:
        self._schema = schema
        self._config = config if config is not None else DEFAULT_CONFIG
        self._resolver = LabelResolver.for_schema(schema)

        result = validate_schema(schema, strict=self._config.strict)
        if not result.is_valid:
            first = result.errors[0]
            raise UnsupportedFieldError(first.diagnostic or first.message)
        for warning in result.warnings:
            logger.warning("Schema %s: %s", schema.name, warning.format())

        self._dispatch: dict[str, CaseHandler] = {
            variant.identifier: self._handler_for(variant) for variant in schema.variants
        }

    @property
    def schema(self) -> EnumSchema:
        """Schema this serializer was built for."""
        return self._schema

    @property
    def config(self) -> SerializerConfig:
        """Configuration applied to top-level calls."""
        return self._config

    def _handler_for(self, variant: VariantDescriptor) -> CaseHandler:
        match variant.shape:
            case VariantShape.UNIT:
                return self._serialize_unit
            case VariantShape.NAMED:
                return self._serialize_named
            case VariantShape.POSITIONAL:
                return self._serialize_positional

    def serialize(
        self,
        value: VariantValue,
        writer: EventWriter,
        context: WriteContext | None = None,
    ) -> None:
        """Write the events of value's active variant.

        Args:
            value: Value of this serializer's schema
            writer: Event sink
            context: Wrapping instructions from the caller (None at top level)

        Raises:
            WriteFailure: If the writer rejects an event
            SchemaError: If value belongs to another schema
        """
        if value.schema != self._schema:
            raise SchemaError(
                ErrorTemplate.schema_mismatch(value.schema.name, self._schema.name)
            )
        if context is None:
            context = WriteContext.top_level(self._config)

        descriptor = self._schema.variant(value.variant)
        handler = self._dispatch[descriptor.identifier]
        wrapper = self._wrapper_name(context)
        logger.debug(
            "Serializing %s::%s (wrapper=%s)", self._schema.name, value.variant, wrapper
        )

        if wrapper is not None:
            emit(writer, StartElement(wrapper, self._resolver.namespace_attributes(self._schema)))
        handler(descriptor, value, writer, context)
        if wrapper is not None:
            emit(writer, EndElement(wrapper))

    def _wrapper_name(self, context: WriteContext) -> str | None:
        """Element the value opens around its variant, if any."""
        if context.suppress_wrapper:
            return None
        if context.override_name is not None:
            return context.override_name
        return self._resolver.root_label(self._schema)

    # ------------------------------------------------------------------
    # Case handlers
    # ------------------------------------------------------------------

    def _serialize_unit(
        self,
        variant: VariantDescriptor,
        value: VariantValue,
        writer: EventWriter,
        context: WriteContext,
    ) -> None:
        """Unit variant: one empty element."""
        label = self._resolver.variant_label(variant)
        emit(writer, StartElement(label))
        emit(writer, EndElement(label))

    def _serialize_named(
        self,
        variant: VariantDescriptor,
        value: VariantValue,
        writer: EventWriter,
        context: WriteContext,
    ) -> None:
        """Named-field variant.

        Attribute fields are honored only for the String kind; every other
        field is content, written in declaration order. When any content
        field is text content the variant has no element of its own and
        its attributes are not written.
        """
        payload = value.fields
        attributes = [f for f in variant.fields if f.is_string_attribute]
        content = [f for f in variant.fields if not f.is_attribute]

        if any(f.is_text_content for f in content):
            for descriptor in content:
                self._write_field(descriptor, payload, writer, context)
            return

        if not attributes and not content:
            return

        label = self._resolver.variant_label(variant)
        start = StartElement(label)
        for descriptor in attributes:
            text = str(payload[descriptor.identifier or ""])
            start = start.attr(self._resolver.field_label(descriptor), text)
        emit(writer, start)
        for descriptor in content:
            self._write_field(descriptor, payload, writer, context)
        emit(writer, EndElement(label))

    def _serialize_positional(
        self,
        variant: VariantDescriptor,
        value: VariantValue,
        writer: EventWriter,
        context: WriteContext,
    ) -> None:
        """Positional variant: the carried value inside element(s) named after the variant.

        Attribute-role fields are not supported for this shape and are skipped.
        """
        label = self._resolver.variant_label(variant)
        for descriptor in variant.fields:
            if descriptor.is_attribute:
                continue
            self._write_wrapped(descriptor.kind, label, value.payload, writer, context)

    # ------------------------------------------------------------------
    # Field strategies
    # ------------------------------------------------------------------

    def _write_field(
        self,
        descriptor: FieldDescriptor,
        payload: Mapping[str, object],
        writer: EventWriter,
        context: WriteContext,
    ) -> None:
        """Content field of a named variant."""
        value = payload.get(descriptor.identifier or "")
        if descriptor.is_text_content:
            emit(writer, Characters(format_scalar(descriptor.kind, value)))  # type: ignore[arg-type]
            return
        self._write_element(
            descriptor.kind, self._resolver.field_label(descriptor), value, writer, context
        )

    def _write_element(
        self,
        kind: ContentKind,
        name: str,
        value: Any,
        writer: EventWriter,
        context: WriteContext,
    ) -> None:
        """Element strategy: the field name labels every element written."""
        match kind:
            case OptionalKind():
                logger.debug("Optional field <%s> not written", name)
            case ListKind(inner=inner):
                for item in value:
                    self._write_element(inner, name, item, writer, context)
            case NestedKind():
                self._delegate(value, writer, context.named(name))
            case _:
                _write_text_element(writer, name, kind, value)

    def _write_wrapped(
        self,
        kind: ContentKind,
        label: str,
        value: Any,
        writer: EventWriter,
        context: WriteContext,
    ) -> None:
        """Wrapper strategy: the variant label wraps each present value."""
        match kind:
            case OptionalKind(inner=inner):
                if value is not None:
                    self._write_wrapped(inner, label, value, writer, context)
            case ListKind(inner=inner):
                for item in value:
                    self._write_wrapped(inner, label, item, writer, context)
            case NestedKind():
                emit(writer, StartElement(label))
                self._delegate(value, writer, context.reuse_wrapper())
                emit(writer, EndElement(label))
            case _:
                _write_text_element(writer, label, kind, value)

    @staticmethod
    def _delegate(value: XmlSerializable, writer: EventWriter, context: WriteContext) -> None:
        """Recurse into a nested value one level deeper."""
        with context.guard:
            value.serialize_xml(writer, context)


def _write_text_element(writer: EventWriter, name: str, kind: ScalarKind, value: object) -> None:
    emit(writer, StartElement(name))
    emit(writer, Characters(format_scalar(kind, value)))
    emit(writer, EndElement(name))


@functools.lru_cache(maxsize=256)
def serializer_for(
    schema: EnumSchema, config: SerializerConfig = DEFAULT_CONFIG
) -> VariantSerializer:
    """Shared serializer for a schema and configuration.

    Schema validation (and its warnings) runs once per distinct pair.

    Raises:
        UnsupportedFieldError: If config.strict rejects the schema
    """
    return VariantSerializer(schema, config)
