"""Convenience entry points.

serialize() is the single engine entry point; the other functions pair it
with one of the bundled writers, in the manner of json.dumps/json.dump.

Python 3.13+.
"""

from __future__ import annotations

import io
import xml.etree.ElementTree as ET
from typing import TextIO

from variantxml.diagnostics import WriteFailure, WriterStateError
from variantxml.diagnostics.templates import ErrorTemplate
from variantxml.writer import (
    ElementTreeWriter,
    EventRecorder,
    EventWriter,
    XmlEvent,
    XmlSerializable,
    XmlStreamWriter,
)

from .config import DEFAULT_CONFIG, SerializerConfig
from .context import WriteContext

__all__ = ["serialize", "to_element", "to_events", "to_string", "write"]


def serialize(
    value: XmlSerializable,
    writer: EventWriter,
    *,
    config: SerializerConfig | None = None,
) -> None:
    """Serialize a value into an event writer.

    Args:
        value: VariantValue or any other XmlSerializable
        writer: Event sink
        config: Serializer configuration (default: SerializerConfig())

    Raises:
        WriteFailure: If the writer rejects an event; the writer's output is
            truncated and must be discarded
        UnsupportedFieldError: If config.strict rejects a schema on the way

    Example:
        >>> recorder = EventRecorder()
        >>> serialize(shape.value("Empty"), recorder)
    """
    value.serialize_xml(writer, WriteContext.top_level(config))


def to_events(value: XmlSerializable, *, config: SerializerConfig | None = None) -> list[XmlEvent]:
    """Serialize a value and return the recorded events."""
    recorder = EventRecorder()
    serialize(value, recorder, config=config)
    return recorder.events


def write(
    value: XmlSerializable,
    stream: TextIO,
    *,
    config: SerializerConfig | None = None,
) -> None:
    """Serialize a value as XML text into a stream.

    Raises:
        WriteFailure: If the stream fails or the events do not nest
    """
    effective = config if config is not None else DEFAULT_CONFIG
    writer = XmlStreamWriter(
        stream,
        encoding=effective.encoding,
        xml_declaration=effective.xml_declaration,
        short_empty_elements=effective.short_empty_elements,
    )
    serialize(value, writer, config=effective)
    try:
        writer.close()
    except (OSError, WriterStateError) as exc:
        raise WriteFailure(ErrorTemplate.write_failed(str(exc))) from exc


def to_string(value: XmlSerializable, *, config: SerializerConfig | None = None) -> str:
    """Serialize a value as XML text.

    Example:
        >>> to_string(shape.value("Point", x="A", y=7))
        '<Point x="A"><y>7</y></Point>'
    """
    buffer = io.StringIO()
    write(value, buffer, config=config)
    return buffer.getvalue()


def to_element(
    value: XmlSerializable,
    *,
    container: str | None = None,
    config: SerializerConfig | None = None,
) -> ET.Element:
    """Serialize a value into an ElementTree element.

    Args:
        value: Value to serialize
        container: Synthetic root collecting a sequence of top-level
            elements (needed for positional lists and text content)
        config: Serializer configuration

    Raises:
        WriteFailure: If the events do not form a single tree
    """
    writer = ElementTreeWriter(container)
    serialize(value, writer, config=config)
    try:
        return writer.close()
    except WriterStateError as exc:
        raise WriteFailure(ErrorTemplate.write_failed(str(exc))) from exc
