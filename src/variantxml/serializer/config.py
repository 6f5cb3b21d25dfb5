"""Serializer configuration.

Provides a single frozen dataclass that encapsulates all serializer
parameters, shared by every nested value of one serialize call.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from variantxml.constants import DEFAULT_ENCODING, MAX_DEPTH

__all__ = ["DEFAULT_CONFIG", "SerializerConfig"]


@dataclass(frozen=True, slots=True)
class SerializerConfig:
    """Immutable configuration for variant serialization.

    All fields have sensible defaults; constructing ``SerializerConfig()``
    with no arguments produces a usable configuration.

    Attributes:
        strict: Reject schemas containing field combinations the engine
            drops (non-string attributes, optional fields in named
            variants, attributes on positional variants, repeated text
            content) with UnsupportedFieldError instead of logging a
            warning (default: False).
        max_depth: Maximum nested value depth (default: 100). Clamped
            against the interpreter recursion limit.
        xml_declaration: Write an XML declaration before the first element
            when rendering text (default: False).
        encoding: Encoding named in the XML declaration (default: utf-8).
        short_empty_elements: Render elements without content as <name/>
            when rendering text (default: True).

    Example:
        >>> config = SerializerConfig(strict=True, max_depth=20)
        >>> to_string(value, config=config)
    """

    strict: bool = False
    max_depth: int = MAX_DEPTH
    xml_declaration: bool = False
    encoding: str = DEFAULT_ENCODING
    short_empty_elements: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_depth is not positive or encoding is empty.
        """
        if self.max_depth <= 0:
            msg = "max_depth must be positive"
            raise ValueError(msg)
        if not self.encoding:
            msg = "encoding must not be empty"
            raise ValueError(msg)


DEFAULT_CONFIG = SerializerConfig()
