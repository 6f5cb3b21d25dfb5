"""Schema descriptors for tagged-union types.

Exports:
    EnumSchema, VariantDescriptor, FieldDescriptor, XmlDirectives: resolved
        type descriptions
    Content kinds (StringKind ... OptionalKind) and predefined instances
    LabelResolver, build_label_name: wire name resolution
    validate_schema: report field combinations the serializer drops

Python 3.13+.
"""

from .descriptors import EnumSchema, FieldDescriptor, VariantDescriptor, XmlDirectives
from .kinds import (
    BOOL,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    NESTED,
    STRING,
    U8,
    U16,
    U32,
    U64,
    USIZE,
    BoolKind,
    ContentKind,
    FloatKind,
    IntegerKind,
    ListKind,
    NestedKind,
    OptionalKind,
    ScalarKind,
    SizeKind,
    StringKind,
    is_scalar,
)
from .label import LabelResolver, build_label_name
from .validator import schema_policy_diagnostics, validate_schema

__all__ = [
    "BOOL",
    "F32",
    "F64",
    "I8",
    "I16",
    "I32",
    "I64",
    "NESTED",
    "STRING",
    "U8",
    "U16",
    "U32",
    "U64",
    "USIZE",
    "BoolKind",
    "ContentKind",
    "EnumSchema",
    "FieldDescriptor",
    "FloatKind",
    "IntegerKind",
    "LabelResolver",
    "ListKind",
    "NestedKind",
    "OptionalKind",
    "ScalarKind",
    "SizeKind",
    "StringKind",
    "VariantDescriptor",
    "XmlDirectives",
    "build_label_name",
    "is_scalar",
    "schema_policy_diagnostics",
    "validate_schema",
]
