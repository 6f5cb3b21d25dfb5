"""Resolved schema descriptors for tagged-union types.

A tagged-union type is described by an EnumSchema: an ordered tuple of
VariantDescriptors, each with a shape and the FieldDescriptors it carries.
Descriptors are the resolved form of the type's annotations: every field
already knows its XML role, content kind and naming directives.

Invariants enforced at construction:
- Unit variants carry no fields; positional variants carry exactly one
- Field identifiers are unique within a variant, variant identifiers
  unique within a schema
- Text content fields are scalar and only appear in named variants

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from variantxml.diagnostics import SchemaError
from variantxml.diagnostics.templates import ErrorTemplate
from variantxml.enums import FieldRole, VariantShape

from .kinds import STRING, ContentKind, StringKind, is_scalar

if TYPE_CHECKING:
    from variantxml.serializer.values import VariantValue

__all__ = [
    "EnumSchema",
    "FieldDescriptor",
    "VariantDescriptor",
    "XmlDirectives",
]


@dataclass(frozen=True, slots=True)
class XmlDirectives:
    """Naming directives attached to a schema, variant or field.

    Attributes:
        rename: Wire name replacing the identifier
        prefix: Namespace prefix prepended as "prefix:name"
        namespaces: Namespace declarations (prefix, uri) written as xmlns
            attributes on elements the schema opens for itself
        default_namespace: Prefix elided from wire names (schema level)
    """

    rename: str | None = None
    prefix: str | None = None
    namespaces: tuple[tuple[str, str], ...] = ()
    default_namespace: str | None = None

    def __post_init__(self) -> None:
        """Normalize namespace declarations to an ordered tuple of pairs."""
        namespaces: Any = self.namespaces
        if isinstance(namespaces, Mapping):
            object.__setattr__(self, "namespaces", tuple(namespaces.items()))
        else:
            object.__setattr__(self, "namespaces", tuple(tuple(pair) for pair in namespaces))


_NO_DIRECTIVES = XmlDirectives()


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Resolved facts about one field of a variant.

    Attributes:
        identifier: Field name (None for the anonymous positional field)
        kind: Content kind of the payload
        role: XML placement (attribute, element or text content)
        directives: Naming directives for the field's wire name
    """

    identifier: str | None
    kind: ContentKind
    role: FieldRole = FieldRole.ELEMENT
    directives: XmlDirectives = _NO_DIRECTIVES

    def __post_init__(self) -> None:
        """Validate that text content carries a scalar."""
        if self.role is FieldRole.TEXT_CONTENT and not is_scalar(self.kind):
            raise SchemaError(
                ErrorTemplate.text_content_kind(self.identifier or "0", self.kind.label)
            )

    @classmethod
    def attribute(
        cls,
        identifier: str,
        kind: ContentKind = STRING,
        *,
        rename: str | None = None,
        prefix: str | None = None,
    ) -> FieldDescriptor:
        """Declare a field written as an attribute of the variant element."""
        return cls(identifier, kind, FieldRole.ATTRIBUTE, XmlDirectives(rename=rename, prefix=prefix))

    @classmethod
    def element(
        cls,
        identifier: str,
        kind: ContentKind,
        *,
        rename: str | None = None,
        prefix: str | None = None,
    ) -> FieldDescriptor:
        """Declare a field written as a child element."""
        return cls(identifier, kind, FieldRole.ELEMENT, XmlDirectives(rename=rename, prefix=prefix))

    @classmethod
    def text(cls, identifier: str, kind: ContentKind = STRING) -> FieldDescriptor:
        """Declare a field written as the variant's character payload."""
        return cls(identifier, kind, FieldRole.TEXT_CONTENT)

    @property
    def is_attribute(self) -> bool:
        """True for fields written as attributes."""
        return self.role is FieldRole.ATTRIBUTE

    @property
    def is_text_content(self) -> bool:
        """True for fields written as raw character data."""
        return self.role is FieldRole.TEXT_CONTENT

    @property
    def is_string_attribute(self) -> bool:
        """True for the only attribute fields the engine writes."""
        return self.is_attribute and isinstance(self.kind, StringKind)


@dataclass(frozen=True, slots=True)
class VariantDescriptor:
    """One alternative of a tagged-union type.

    Attributes:
        identifier: Variant name
        shape: Unit, named fields, or one positional field
        fields: Ordered field descriptors (empty for unit variants)
        directives: Naming directives for the variant's wire name
    """

    identifier: str
    shape: VariantShape
    fields: tuple[FieldDescriptor, ...] = ()
    directives: XmlDirectives = _NO_DIRECTIVES

    def __post_init__(self) -> None:
        """Validate field count, uniqueness and text content placement."""
        object.__setattr__(self, "fields", tuple(self.fields))
        count = len(self.fields)
        match self.shape:
            case VariantShape.UNIT if count != 0:
                raise SchemaError(
                    ErrorTemplate.shape_field_count(self.identifier, self.shape, count)
                )
            case VariantShape.POSITIONAL if count != 1:
                raise SchemaError(
                    ErrorTemplate.shape_field_count(self.identifier, self.shape, count)
                )
            case VariantShape.POSITIONAL if self.fields[0].is_text_content:
                raise SchemaError(ErrorTemplate.text_content_positional(self.identifier))
            case VariantShape.NAMED:
                seen: set[str] = set()
                for descriptor in self.fields:
                    name = descriptor.identifier
                    if name is None or name in seen:
                        raise SchemaError(
                            ErrorTemplate.duplicate_field(name or "None", self.identifier)
                        )
                    seen.add(name)
            case _:
                pass

    @classmethod
    def unit(
        cls, identifier: str, *, rename: str | None = None, prefix: str | None = None
    ) -> VariantDescriptor:
        """Declare a variant without fields."""
        return cls(identifier, VariantShape.UNIT, (), XmlDirectives(rename=rename, prefix=prefix))

    @classmethod
    def named(
        cls,
        identifier: str,
        *fields: FieldDescriptor,
        rename: str | None = None,
        prefix: str | None = None,
    ) -> VariantDescriptor:
        """Declare a variant whose fields are keyed by name."""
        return cls(
            identifier, VariantShape.NAMED, fields, XmlDirectives(rename=rename, prefix=prefix)
        )

    @classmethod
    def positional(
        cls,
        identifier: str,
        kind: ContentKind,
        *,
        role: FieldRole = FieldRole.ELEMENT,
        rename: str | None = None,
        prefix: str | None = None,
    ) -> VariantDescriptor:
        """Declare a variant carrying exactly one anonymous value."""
        return cls(
            identifier,
            VariantShape.POSITIONAL,
            (FieldDescriptor(None, kind, role),),
            XmlDirectives(rename=rename, prefix=prefix),
        )

    def field(self, identifier: str) -> FieldDescriptor | None:
        """Look up a named field."""
        for descriptor in self.fields:
            if descriptor.identifier == identifier:
                return descriptor
        return None


@dataclass(frozen=True, slots=True)
class EnumSchema:
    """A tagged-union type: its name and its variants in declaration order.

    Attributes:
        name: Type name
        variants: Variant descriptors in declaration order
        directives: Schema-wide directives (default namespace, namespace
            declarations)
        root: Element wrapping top-level serialization (None writes the
            active variant without a wrapper)

    Example:
        >>> shape = EnumSchema(
        ...     "Shape",
        ...     (
        ...         VariantDescriptor.unit("Empty"),
        ...         VariantDescriptor.named(
        ...             "Point",
        ...             FieldDescriptor.attribute("x"),
        ...             FieldDescriptor.element("y", U32),
        ...         ),
        ...     ),
        ... )
        >>> shape.value("Point", x="A", y=7)
    """

    name: str
    variants: tuple[VariantDescriptor, ...]
    directives: XmlDirectives = _NO_DIRECTIVES
    root: str | None = None
    _index: dict[str, VariantDescriptor] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Build the identifier index, rejecting duplicates."""
        object.__setattr__(self, "variants", tuple(self.variants))
        index: dict[str, VariantDescriptor] = {}
        for variant in self.variants:
            if variant.identifier in index:
                raise SchemaError(ErrorTemplate.duplicate_variant(variant.identifier, self.name))
            index[variant.identifier] = variant
        object.__setattr__(self, "_index", index)

    @property
    def default_namespace(self) -> str | None:
        """Prefix elided from wire names."""
        return self.directives.default_namespace

    def variant(self, identifier: str) -> VariantDescriptor:
        """Look up a variant by identifier.

        Raises:
            SchemaError: If the schema does not declare the variant
        """
        descriptor = self._index.get(identifier)
        if descriptor is None:
            raise SchemaError(
                ErrorTemplate.unknown_variant(identifier, self.name, self._index.keys())
            )
        return descriptor

    def value(self, variant: str, payload: object = None, /, **fields: object) -> VariantValue:
        """Construct a value of this type.

        Args:
            variant: Active variant identifier
            payload: Carried value for positional variants
            **fields: Field values for named variants

        Raises:
            SchemaError: If the payload does not fit the variant
        """
        from variantxml.serializer.values import VariantValue  # noqa: PLC0415 - circular

        descriptor = self.variant(variant)
        if descriptor.shape is VariantShape.NAMED:
            return VariantValue(self, variant, fields if payload is None else payload)
        if fields:
            raise SchemaError(
                ErrorTemplate.payload_shape_mismatch(variant, descriptor.shape, "dict")
            )
        return VariantValue(self, variant, payload)
