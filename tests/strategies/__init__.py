"""Hypothesis strategies for variantxml property-based testing.

Usage:
    from tests.strategies import enum_schemas, variant_values
    from tests.strategies.schemas import scalar_kinds, scalar_values
"""

from .schemas import (
    INTEGER_KINDS,
    enum_schemas,
    named_fields,
    payloads,
    scalar_kinds,
    scalar_values,
    string_lists,
    variant_descriptors,
    variant_values,
    variant_values_of,
    xml_identifiers,
    xml_text,
)

__all__ = [
    "INTEGER_KINDS",
    "enum_schemas",
    "named_fields",
    "payloads",
    "scalar_kinds",
    "scalar_values",
    "string_lists",
    "variant_descriptors",
    "variant_values",
    "variant_values_of",
    "xml_identifiers",
    "xml_text",
]
