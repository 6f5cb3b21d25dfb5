"""Content kinds: the payload category of a field.

Closed set of frozen dataclasses dispatched with structural pattern
matching. Scalars carry enough information (width, signedness) to render
and range-check a value; List and Optional wrap an inner kind.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from typing import TypeIs

from variantxml.diagnostics import SchemaError
from variantxml.diagnostics.templates import ErrorTemplate

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Kinds
    "StringKind",
    "BoolKind",
    "IntegerKind",
    "FloatKind",
    "SizeKind",
    "NestedKind",
    "ListKind",
    "OptionalKind",
    # Type aliases
    "ContentKind",
    "ScalarKind",
    # Predefined instances
    "STRING",
    "BOOL",
    "U8",
    "I8",
    "U16",
    "I16",
    "U32",
    "I32",
    "U64",
    "I64",
    "F32",
    "F64",
    "USIZE",
    "NESTED",
    # Helpers
    "is_scalar",
]

_INTEGER_WIDTHS: frozenset[int] = frozenset({8, 16, 32, 64})
_FLOAT_WIDTHS: frozenset[int] = frozenset({32, 64})


@dataclass(frozen=True, slots=True)
class StringKind:
    """Text payload, written verbatim."""

    @property
    def label(self) -> str:
        """Human-readable kind name."""
        return "String"


@dataclass(frozen=True, slots=True)
class BoolKind:
    """Boolean payload, written as true/false."""

    @property
    def label(self) -> str:
        """Human-readable kind name."""
        return "bool"


@dataclass(frozen=True, slots=True)
class IntegerKind:
    """Fixed-width integer payload.

    Attributes:
        bits: Width in bits (8, 16, 32 or 64)
        signed: Two's complement range when True, unsigned otherwise
    """

    bits: int
    signed: bool

    def __post_init__(self) -> None:
        """Validate width."""
        if self.bits not in _INTEGER_WIDTHS:
            raise SchemaError(ErrorTemplate.invalid_kind(f"Unsupported integer width: {self.bits}"))

    @property
    def label(self) -> str:
        """Human-readable kind name (e.g. u8, i64)."""
        return f"{'i' if self.signed else 'u'}{self.bits}"

    @property
    def min_value(self) -> int:
        """Smallest representable value."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        """Largest representable value."""
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


@dataclass(frozen=True, slots=True)
class FloatKind:
    """IEEE 754 floating point payload.

    Attributes:
        bits: Width in bits (32 or 64)
    """

    bits: int

    def __post_init__(self) -> None:
        """Validate width."""
        if self.bits not in _FLOAT_WIDTHS:
            raise SchemaError(ErrorTemplate.invalid_kind(f"Unsupported float width: {self.bits}"))

    @property
    def label(self) -> str:
        """Human-readable kind name (f32 or f64)."""
        return f"f{self.bits}"


@dataclass(frozen=True, slots=True)
class SizeKind:
    """Platform size payload (unsigned, 64-bit range)."""

    @property
    def label(self) -> str:
        """Human-readable kind name."""
        return "usize"

    @property
    def max_value(self) -> int:
        """Largest representable value."""
        return (1 << 64) - 1


@dataclass(frozen=True, slots=True)
class NestedKind:
    """Structured payload that serializes itself.

    Attributes:
        type_name: Expected schema name when the payload is a VariantValue
            (None accepts any XmlSerializable)
    """

    type_name: str | None = None

    @property
    def label(self) -> str:
        """Human-readable kind name."""
        return self.type_name if self.type_name is not None else "Nested"


@dataclass(frozen=True, slots=True)
class ListKind:
    """Ordered sequence of an inner kind.

    Attributes:
        inner: Kind of every item
    """

    inner: ContentKind

    @property
    def label(self) -> str:
        """Human-readable kind name."""
        return f"List[{self.inner.label}]"


@dataclass(frozen=True, slots=True)
class OptionalKind:
    """Value of an inner kind, or None.

    Attributes:
        inner: Kind of the value when present
    """

    inner: ContentKind

    @property
    def label(self) -> str:
        """Human-readable kind name."""
        return f"Optional[{self.inner.label}]"


ScalarKind: TypeAlias = StringKind | BoolKind | IntegerKind | FloatKind | SizeKind
ContentKind: TypeAlias = ScalarKind | NestedKind | ListKind | OptionalKind


def is_scalar(kind: ContentKind) -> TypeIs[ScalarKind]:
    """Type guard for kinds rendered as a single character block."""
    return isinstance(kind, StringKind | BoolKind | IntegerKind | FloatKind | SizeKind)


STRING = StringKind()
BOOL = BoolKind()
U8 = IntegerKind(8, signed=False)
I8 = IntegerKind(8, signed=True)
U16 = IntegerKind(16, signed=False)
I16 = IntegerKind(16, signed=True)
U32 = IntegerKind(32, signed=False)
I32 = IntegerKind(32, signed=True)
U64 = IntegerKind(64, signed=False)
I64 = IntegerKind(64, signed=True)
F32 = FloatKind(32)
F64 = FloatKind(64)
USIZE = SizeKind()
NESTED = NestedKind()
