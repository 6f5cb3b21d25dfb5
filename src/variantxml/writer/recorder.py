"""In-memory event writer.

Collects events into a list for inspection. Performs no nesting checks.

Python 3.13+.
"""

from collections.abc import Iterator

from .events import XmlEvent

__all__ = ["EventRecorder"]


class EventRecorder:
    """EventWriter that records every event it receives.

    Example:
        >>> recorder = EventRecorder()
        >>> serialize(shape.value("Empty"), recorder)
        >>> recorder.events
        [StartElement(name='Empty', attributes=()), EndElement(name='Empty')]
    """

    __slots__ = ("events",)

    def __init__(self) -> None:
        self.events: list[XmlEvent] = []

    def write(self, event: XmlEvent) -> None:
        self.events.append(event)

    def clear(self) -> None:
        """Forget all recorded events."""
        self.events.clear()

    def __iter__(self) -> Iterator[XmlEvent]:
        return iter(self.events)

    def __len__(self) -> int:
        return len(self.events)
