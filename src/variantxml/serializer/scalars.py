"""Scalar validation and rendering.

Every scalar payload becomes a single character block. Rendering follows
the conventions of the type system the schemas describe:

- bool: "true" / "false"
- integers: decimal, range-checked against the declared width
- floats: shortest round-trip digits (single precision for f32) written
  in positional notation without an exponent, integral values without a
  trailing ".0", "NaN" / "inf" / "-inf" for non-finite values
- strings: unchanged

Python 3.13+. Zero external dependencies.
"""

import math
import struct
from decimal import Decimal

from variantxml.constants import FALSE_LITERAL, INF_LITERAL, NAN_LITERAL, TRUE_LITERAL
from variantxml.diagnostics import Diagnostic, SchemaError
from variantxml.diagnostics.templates import ErrorTemplate
from variantxml.schema.kinds import (
    BoolKind,
    FloatKind,
    IntegerKind,
    ScalarKind,
    SizeKind,
    StringKind,
)

__all__ = ["check_scalar", "format_scalar", "scalar_problem"]

# f32 needs at most 9 significant digits to round-trip.
_F32_MAX_DIGITS: int = 9


def scalar_problem(kind: ScalarKind, value: object) -> Diagnostic | None:
    """Describe why value does not fit kind, or return None if it does."""
    received = type(value).__name__
    match kind:
        case StringKind():
            if not isinstance(value, str):
                return ErrorTemplate.scalar_type_mismatch(kind.label, received)
        case BoolKind():
            if not isinstance(value, bool):
                return ErrorTemplate.scalar_type_mismatch(kind.label, received)
        case IntegerKind() | SizeKind():
            # bool is an int subclass but never a valid integer payload
            if isinstance(value, bool) or not isinstance(value, int):
                return ErrorTemplate.scalar_type_mismatch(kind.label, received)
            low = kind.min_value if isinstance(kind, IntegerKind) else 0
            if not low <= value <= kind.max_value:
                return ErrorTemplate.scalar_out_of_range(kind.label, value)
        case FloatKind(bits=bits):
            if isinstance(value, bool) or not isinstance(value, int | float):
                return ErrorTemplate.scalar_type_mismatch(kind.label, received)
            if bits == 32:
                try:
                    struct.pack("<f", float(value))
                except OverflowError:
                    return ErrorTemplate.scalar_out_of_range(kind.label, value)
    return None


def check_scalar(kind: ScalarKind, value: object) -> None:
    """Validate a scalar payload.

    Raises:
        SchemaError: If the value has the wrong type or is out of range
    """
    problem = scalar_problem(kind, value)
    if problem is not None:
        raise SchemaError(problem)


def _shortest_f32(value: float) -> str:
    """Fewest significant digits that read back as the same f32."""
    packed = struct.pack("<f", value)
    single = struct.unpack("<f", packed)[0]
    text = repr(single)
    for digits in range(1, _F32_MAX_DIGITS + 1):
        candidate = f"{single:.{digits}g}"
        try:
            repacked = struct.pack("<f", float(candidate))
        except OverflowError:
            # rounded past the f32 maximum
            continue
        if repacked == packed:
            text = candidate
            break
    return text


def _format_float(value: float, bits: int) -> str:
    """Shortest round-trip digits in positional notation, never an exponent."""
    if math.isnan(value):
        return NAN_LITERAL
    if math.isinf(value):
        return INF_LITERAL if value > 0 else f"-{INF_LITERAL}"
    digits = _shortest_f32(value) if bits == 32 else repr(value)
    text = format(Decimal(digits), "f")
    if "." in text:
        # shortest digits carry no trailing zeros beyond an integral ".0"
        text = text.rstrip("0").rstrip(".")
    return text


def format_scalar(kind: ScalarKind, value: object) -> str:
    """Render a scalar payload as character data.

    Args:
        kind: Declared scalar kind
        value: Payload

    Returns:
        Text written as a single character event

    Raises:
        SchemaError: If the value does not fit the kind

    Example:
        >>> format_scalar(BOOL, True)
        'true'
        >>> format_scalar(F64, 2.0)
        '2'
    """
    check_scalar(kind, value)
    match kind:
        case StringKind():
            return str(value)
        case BoolKind():
            return TRUE_LITERAL if value else FALSE_LITERAL
        case FloatKind(bits=bits):
            return _format_float(float(value), bits)  # type: ignore[arg-type]
        case _:
            return str(value)
