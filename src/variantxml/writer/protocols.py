"""Structural interfaces between the serializer, writers and values.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from variantxml.serializer.context import WriteContext

    from .events import XmlEvent

__all__ = ["EventWriter", "XmlSerializable"]


@runtime_checkable
class EventWriter(Protocol):
    """Sink accepting XML write events in document order.

    write() may raise any exception (OSError, UnicodeError, ValueError...);
    the serializer reports it as WriteFailure with the message verbatim.
    """

    def write(self, event: XmlEvent) -> None:
        """Consume one event."""
        ...


@runtime_checkable
class XmlSerializable(Protocol):
    """A value able to drive an EventWriter with its own events.

    Nested values are serialized through this method. The context tells the
    value which element name to open (override_name) or that the caller
    already opened it (suppress_wrapper).
    """

    def serialize_xml(self, writer: EventWriter, context: WriteContext | None = None) -> None:
        """Write this value's events."""
        ...
