"""Variant serialization: engine, values, context and entry points.

Exports:
    VariantSerializer: Dispatcher and case handlers for one schema
    VariantValue: A value of a tagged-union type
    WriteContext: Wrapping instructions passed to nested values
    SerializerConfig: Serializer configuration
    serialize, to_events, to_string, to_element, write: entry points
    format_scalar: Scalar rendering

Python 3.13+.
"""

from .api import serialize, to_element, to_events, to_string, write
from .config import DEFAULT_CONFIG, SerializerConfig
from .context import WriteContext
from .engine import VariantSerializer, serializer_for
from .scalars import check_scalar, format_scalar
from .values import VariantValue, check_value

__all__ = [
    "DEFAULT_CONFIG",
    "SerializerConfig",
    "VariantSerializer",
    "VariantValue",
    "WriteContext",
    "check_scalar",
    "check_value",
    "format_scalar",
    "serialize",
    "serializer_for",
    "to_element",
    "to_events",
    "to_string",
    "write",
]
