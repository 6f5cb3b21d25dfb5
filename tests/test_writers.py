"""Tests for the bundled event writers.

EventRecorder, XmlStreamWriter (xml.sax.saxutils) and ElementTreeWriter
(xml.etree.ElementTree), plus the shared nesting checks.

Python 3.13+.
"""

from __future__ import annotations

import io
import xml.etree.ElementTree as ET

import pytest

from variantxml.diagnostics import DiagnosticCode, WriterStateError
from variantxml.writer import (
    Characters,
    ElementTreeWriter,
    EndElement,
    EventRecorder,
    EventWriter,
    StartElement,
    XmlStreamWriter,
)
from variantxml.writer.nesting import ElementStack


def _code(exc: WriterStateError) -> DiagnosticCode:
    assert exc.diagnostic is not None
    return exc.diagnostic.code


# ============================================================================
# Events
# ============================================================================


class TestEvents:
    """Immutable event values."""

    def test_attr_returns_copy(self) -> None:
        start = StartElement("a")
        extended = start.attr("k", "v")

        assert start.attributes == ()
        assert extended.attributes == (("k", "v"),)

    def test_attr_preserves_order(self) -> None:
        start = StartElement("a").attr("z", "1").attr("a", "2")

        assert [name for name, _ in start.attributes] == ["z", "a"]

    def test_events_compare_by_value(self) -> None:
        assert Characters("x") == Characters("x")
        assert EndElement("a") != EndElement("b")


# ============================================================================
# EventRecorder
# ============================================================================


class TestEventRecorder:
    """In-memory writer."""

    def test_records_in_order(self) -> None:
        recorder = EventRecorder()
        recorder.write(StartElement("a"))
        recorder.write(EndElement("a"))

        assert list(recorder) == [StartElement("a"), EndElement("a")]
        assert len(recorder) == 2

    def test_clear(self) -> None:
        recorder = EventRecorder()
        recorder.write(Characters("x"))
        recorder.clear()

        assert recorder.events == []

    @pytest.mark.parametrize(
        "writer", [EventRecorder(), XmlStreamWriter(io.StringIO()), ElementTreeWriter()]
    )
    def test_writers_satisfy_protocol(self, writer: object) -> None:
        assert isinstance(writer, EventWriter)


# ============================================================================
# ElementStack
# ============================================================================


class TestElementStack:
    """Balanced nesting checks."""

    def test_push_pop(self) -> None:
        stack = ElementStack()
        stack.push("a")
        stack.push("b")

        assert stack.open_names == ("a", "b")
        stack.pop("b")
        assert stack.depth == 1

    def test_unbalanced_end(self) -> None:
        with pytest.raises(WriterStateError) as exc_info:
            ElementStack().pop("a")

        assert _code(exc_info.value) is DiagnosticCode.WRITER_UNBALANCED_END

    def test_mismatched_end(self) -> None:
        stack = ElementStack()
        stack.push("a")

        with pytest.raises(WriterStateError, match="'b' does not close open element 'a'"):
            stack.pop("b")

    def test_unclosed(self) -> None:
        stack = ElementStack()
        stack.push("a")

        with pytest.raises(WriterStateError) as exc_info:
            stack.ensure_closed()

        assert _code(exc_info.value) is DiagnosticCode.WRITER_UNCLOSED_ELEMENTS


# ============================================================================
# XmlStreamWriter
# ============================================================================


class TestXmlStreamWriter:
    """Streaming text output."""

    def test_renders_events(self) -> None:
        buffer = io.StringIO()
        writer = XmlStreamWriter(buffer)
        for event in (
            StartElement("a", (("k", "v"),)),
            Characters("x & y"),
            EndElement("a"),
        ):
            writer.write(event)
        writer.close()

        assert buffer.getvalue() == '<a k="v">x &amp; y</a>'

    def test_short_empty_elements(self) -> None:
        buffer = io.StringIO()
        writer = XmlStreamWriter(buffer)
        writer.write(StartElement("a"))
        writer.write(EndElement("a"))

        assert buffer.getvalue() == "<a/>"

    def test_long_empty_elements(self) -> None:
        buffer = io.StringIO()
        writer = XmlStreamWriter(buffer, short_empty_elements=False)
        writer.write(StartElement("a"))
        writer.write(EndElement("a"))

        assert buffer.getvalue() == "<a></a>"

    def test_declaration_written_lazily(self) -> None:
        buffer = io.StringIO()
        writer = XmlStreamWriter(buffer, xml_declaration=True)

        assert buffer.getvalue() == ""
        writer.write(StartElement("a"))
        writer.write(EndElement("a"))
        assert buffer.getvalue().startswith('<?xml version="1.0" encoding="utf-8"?>')

    def test_depth_tracks_open_elements(self) -> None:
        writer = XmlStreamWriter(io.StringIO())
        writer.write(StartElement("a"))

        assert writer.depth == 1

    def test_mismatched_end_rejected(self) -> None:
        writer = XmlStreamWriter(io.StringIO())
        writer.write(StartElement("a"))

        with pytest.raises(WriterStateError):
            writer.write(EndElement("b"))

    def test_close_with_open_elements_rejected(self) -> None:
        writer = XmlStreamWriter(io.StringIO())
        writer.write(StartElement("a"))

        with pytest.raises(WriterStateError, match="unclosed elements: a"):
            writer.close()

    def test_stream_errors_propagate(self) -> None:
        stream = io.StringIO()
        stream.close()
        writer = XmlStreamWriter(stream)

        with pytest.raises(ValueError, match="closed file"):
            writer.write(StartElement("a"))


# ============================================================================
# ElementTreeWriter
# ============================================================================


class TestElementTreeWriter:
    """Tree building output."""

    def test_builds_element(self) -> None:
        writer = ElementTreeWriter()
        writer.write(StartElement("a", (("k", "v"),)))
        writer.write(StartElement("b"))
        writer.write(Characters("x"))
        writer.write(EndElement("b"))
        writer.write(EndElement("a"))

        root = writer.close()

        assert root.tag == "a"
        assert root.get("k") == "v"
        assert root.findtext("b") == "x"

    def test_second_root_rejected(self) -> None:
        writer = ElementTreeWriter()
        writer.write(StartElement("a"))
        writer.write(EndElement("a"))

        with pytest.raises(WriterStateError) as exc_info:
            writer.write(StartElement("b"))

        assert _code(exc_info.value) is DiagnosticCode.WRITER_MULTIPLE_ROOTS

    def test_text_outside_root_rejected(self) -> None:
        with pytest.raises(WriterStateError) as exc_info:
            ElementTreeWriter().write(Characters("x"))

        assert _code(exc_info.value) is DiagnosticCode.WRITER_TEXT_OUTSIDE_ROOT

    def test_empty_document_rejected(self) -> None:
        with pytest.raises(WriterStateError) as exc_info:
            ElementTreeWriter().close()

        assert _code(exc_info.value) is DiagnosticCode.WRITER_EMPTY_DOCUMENT

    def test_container_collects_fragments(self) -> None:
        writer = ElementTreeWriter("items")
        for text in ("1", "2"):
            writer.write(StartElement("i"))
            writer.write(Characters(text))
            writer.write(EndElement("i"))

        root = writer.close()

        assert root.tag == "items"
        assert [child.text for child in root] == ["1", "2"]

    def test_container_accepts_bare_text(self) -> None:
        writer = ElementTreeWriter("raw")
        writer.write(Characters("hello"))

        assert writer.close().text == "hello"

    def test_empty_container(self) -> None:
        root = ElementTreeWriter("empty").close()

        assert ET.tostring(root) == b"<empty />"
