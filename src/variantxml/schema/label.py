"""Wire name resolution.

Turns an identifier plus its rename/prefix directives into the literal
element or attribute name written to the output. A prefix equal to the
schema's default namespace is elided.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from variantxml.constants import XML_PREFIX, XMLNS_ATTRIBUTE

from .descriptors import EnumSchema, FieldDescriptor, VariantDescriptor, XmlDirectives

__all__ = ["LabelResolver", "build_label_name"]


def build_label_name(
    identifier: str, directives: XmlDirectives, default_namespace: str | None
) -> str:
    """Compute the wire name for an identifier.

    Args:
        identifier: Declared identifier
        directives: Rename and prefix directives
        default_namespace: Prefix that is never written

    Returns:
        "prefix:name" or "name"

    Example:
        >>> build_label_name("Point", XmlDirectives(prefix="geo"), None)
        'geo:Point'
        >>> build_label_name("Point", XmlDirectives(prefix="geo"), "geo")
        'Point'
    """
    label = directives.rename or identifier
    prefix = directives.prefix
    if prefix is None or prefix == default_namespace:
        return label
    return f"{prefix}:{label}"


@dataclass(frozen=True, slots=True)
class LabelResolver:
    """Resolve wire names against one schema's default namespace.

    Stateless: names are recomputed on every call.
    """

    default_namespace: str | None = None

    @classmethod
    def for_schema(cls, schema: EnumSchema) -> "LabelResolver":
        """Create a resolver bound to the schema's default namespace."""
        return cls(schema.default_namespace)

    def variant_label(self, variant: VariantDescriptor) -> str:
        """Wire name of a variant element."""
        return build_label_name(variant.identifier, variant.directives, self.default_namespace)

    def field_label(self, descriptor: FieldDescriptor) -> str:
        """Wire name of a field's element or attribute."""
        return build_label_name(
            descriptor.identifier or "", descriptor.directives, self.default_namespace
        )

    def root_label(self, schema: EnumSchema) -> str | None:
        """Wire name of the schema's root wrapper, if it declares one."""
        if schema.root is None:
            return None
        return build_label_name(schema.root, schema.directives, self.default_namespace)

    @staticmethod
    def namespace_attributes(schema: EnumSchema) -> tuple[tuple[str, str], ...]:
        """Namespace declarations as (attribute name, uri) pairs.

        The pre-bound "xml" prefix is skipped.
        """
        return tuple(
            (XMLNS_ATTRIBUTE if not prefix else f"{XMLNS_ATTRIBUTE}:{prefix}", uri)
            for prefix, uri in schema.directives.namespaces
            if prefix != XML_PREFIX
        )
