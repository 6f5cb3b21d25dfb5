"""Streaming XML text writer.

Renders events to a text stream through xml.sax.saxutils.XMLGenerator,
which takes care of character and attribute escaping. Output is written
as events arrive; nothing is buffered beyond what the stream buffers.

Python 3.13+.
"""

import logging
from typing import TextIO
from xml.sax.saxutils import XMLGenerator

from variantxml.constants import DEFAULT_ENCODING

from .events import Characters, EndElement, StartElement, XmlEvent
from .nesting import ElementStack

__all__ = ["XmlStreamWriter"]

logger = logging.getLogger(__name__)


class XmlStreamWriter:
    """EventWriter that streams XML text.

    Args:
        stream: Text stream receiving the output
        encoding: Encoding named in the XML declaration
        xml_declaration: Write <?xml ...?> before the first event
        short_empty_elements: Render elements without content as <name/>

    Example:
        >>> buffer = io.StringIO()
        >>> writer = XmlStreamWriter(buffer)
        >>> serialize(value, writer)
        >>> writer.close()
        >>> buffer.getvalue()
        '<Point x="A"><y>7</y></Point>'
    """

    __slots__ = ("_declaration_pending", "_generator", "_stack")

    def __init__(
        self,
        stream: TextIO,
        *,
        encoding: str = DEFAULT_ENCODING,
        xml_declaration: bool = False,
        short_empty_elements: bool = True,
    ) -> None:
        self._generator = XMLGenerator(
            stream, encoding=encoding, short_empty_elements=short_empty_elements
        )
        self._stack = ElementStack()
        self._declaration_pending = xml_declaration

    @property
    def depth(self) -> int:
        """Number of currently open elements."""
        return self._stack.depth

    def write(self, event: XmlEvent) -> None:
        """Render one event.

        Raises:
            WriterStateError: On an unbalanced or mismatched end element
            OSError: If the underlying stream fails
        """
        if self._declaration_pending:
            self._declaration_pending = False
            self._generator.startDocument()

        match event:
            case StartElement(name=name, attributes=attributes):
                self._generator.startElement(name, dict(attributes))
                self._stack.push(name)
            case Characters(text=text):
                self._generator.characters(text)
            case EndElement(name=name):
                self._stack.pop(name)
                self._generator.endElement(name)

    def close(self) -> None:
        """Finish the document and flush the stream.

        Raises:
            WriterStateError: If elements are still open
        """
        self._stack.ensure_closed()
        self._generator.endDocument()
        logger.debug("XML stream writer closed")
