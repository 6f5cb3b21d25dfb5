"""XML write events.

Immutable event objects handed to an EventWriter. Attributes belong to
the StartElement event itself: they are collected on the event before it
is written and cannot be streamed independently.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, replace
from typing import TypeAlias

__all__ = ["Characters", "EndElement", "StartElement", "XmlEvent"]


@dataclass(frozen=True, slots=True)
class StartElement:
    """Open an element.

    Attributes:
        name: Element wire name
        attributes: (name, value) pairs in insertion order
    """

    name: str
    attributes: tuple[tuple[str, str], ...] = ()

    def attr(self, name: str, value: str) -> "StartElement":
        """Return a copy with one more attribute appended."""
        return replace(self, attributes=(*self.attributes, (name, value)))


@dataclass(frozen=True, slots=True)
class Characters:
    """Character data inside the innermost open element."""

    text: str


@dataclass(frozen=True, slots=True)
class EndElement:
    """Close the innermost open element.

    Attributes:
        name: Name of the element being closed
    """

    name: str


XmlEvent: TypeAlias = StartElement | Characters | EndElement
