"""Event writers: the sinks a serializer drives.

Exports:
    StartElement, Characters, EndElement: write events
    EventWriter, XmlSerializable: structural interfaces
    EventRecorder: records events in memory
    XmlStreamWriter: streams XML text through xml.sax.saxutils.XMLGenerator
    ElementTreeWriter: builds an xml.etree.ElementTree.Element

Python 3.13+.
"""

from .events import Characters, EndElement, StartElement, XmlEvent
from .protocols import EventWriter, XmlSerializable
from .recorder import EventRecorder
from .stream import XmlStreamWriter
from .tree import ElementTreeWriter

__all__ = [
    "Characters",
    "ElementTreeWriter",
    "EndElement",
    "EventRecorder",
    "EventWriter",
    "StartElement",
    "XmlEvent",
    "XmlSerializable",
    "XmlStreamWriter",
]
