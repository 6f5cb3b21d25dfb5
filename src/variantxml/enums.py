"""Enumerations for variantxml type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class VariantShape(StrEnum):
    """Shape of a tagged-union alternative.

    StrEnum provides automatic string conversion: str(VariantShape.UNIT) == "unit"
    """

    UNIT = "unit"
    """No carried fields: Variant"""

    NAMED = "named"
    """Fields keyed by name: Variant { x, y }"""

    POSITIONAL = "positional"
    """Exactly one anonymous carried value: Variant(value)"""


class FieldRole(StrEnum):
    """XML placement of a field.

    StrEnum provides automatic string conversion: str(FieldRole.ELEMENT) == "element"
    """

    ATTRIBUTE = "attribute"
    """Written as an attribute of the variant's start element"""

    ELEMENT = "element"
    """Written as a child element"""

    TEXT_CONTENT = "text_content"
    """Written as the variant's raw character payload"""


__all__ = [
    "FieldRole",
    "VariantShape",
]
