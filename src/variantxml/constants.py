"""Shared constants for variantxml.

Centralized configuration constants used across the schema, writer and
serializer packages. Placing constants here avoids circular imports and
provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "RECURSION_RESERVE_FRAMES",
    # Scalar literals
    "TRUE_LITERAL",
    "FALSE_LITERAL",
    "NAN_LITERAL",
    "INF_LITERAL",
    # Writer defaults
    "DEFAULT_ENCODING",
    # Namespaces
    "XMLNS_ATTRIBUTE",
    "XML_PREFIX",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# Nested values serialize through direct recursive calls into the same writer.
# Every delegation to a nested value costs several interpreter frames, so the
# limit is well below sys.getrecursionlimit() and is clamped against it at
# configuration time.

MAX_DEPTH: int = 100

# Frames kept in reserve for call overhead when clamping MAX_DEPTH.
RECURSION_RESERVE_FRAMES: int = 50

# ============================================================================
# SCALAR LITERALS
# ============================================================================

TRUE_LITERAL: str = "true"
FALSE_LITERAL: str = "false"
NAN_LITERAL: str = "NaN"
INF_LITERAL: str = "inf"

# ============================================================================
# WRITER DEFAULTS
# ============================================================================

DEFAULT_ENCODING: str = "utf-8"

# ============================================================================
# NAMESPACES
# ============================================================================

XMLNS_ATTRIBUTE: str = "xmlns"

# Pre-bound prefix; never declared with an xmlns attribute.
XML_PREFIX: str = "xml"
