"""variantxml - XML serialization for tagged-union (variant) types.

Given a value belonging to one of several named alternatives, each carrying
no fields, named fields, or one positional value, produces a deterministic,
order-preserving stream of XML write events (start element, attribute,
characters, end element). Nested structured values drive the same writer
recursively.

Public API:
    EnumSchema, VariantDescriptor, FieldDescriptor - describe a type
    VariantValue - a value of a described type
    serialize - write a value into any EventWriter
    to_string, to_element, to_events, write - bundled writer shortcuts
    SerializerConfig - strict mode, depth limit, text output options

Exceptions:
    VariantXmlError - Base exception class
    WriteFailure - The writer rejected an event (output truncated)
    SchemaError - A schema or value is malformed
    UnsupportedFieldError - Strict mode rejected a dropped field combination

Submodules:
    variantxml.schema - Content kinds, descriptors, wire names, validation
    variantxml.writer - Events, EventRecorder, XmlStreamWriter, ElementTreeWriter
    variantxml.serializer - Engine, WriteContext, scalar rendering
    variantxml.diagnostics - Diagnostic codes, templates, formatting
"""

from .diagnostics import (
    SchemaError,
    UnsupportedFieldError,
    VariantXmlError,
    WriteFailure,
)
from .enums import FieldRole, VariantShape
from .schema import EnumSchema, FieldDescriptor, VariantDescriptor, XmlDirectives
from .serializer import (
    SerializerConfig,
    VariantSerializer,
    VariantValue,
    WriteContext,
    serialize,
    to_element,
    to_events,
    to_string,
    write,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("variantxml")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "EnumSchema",
    "FieldDescriptor",
    "FieldRole",
    "SchemaError",
    "SerializerConfig",
    "UnsupportedFieldError",
    "VariantDescriptor",
    "VariantSerializer",
    "VariantShape",
    "VariantValue",
    "VariantXmlError",
    "WriteContext",
    "WriteFailure",
    "XmlDirectives",
    "__version__",
    "serialize",
    "to_element",
    "to_events",
    "to_string",
    "write",
]
