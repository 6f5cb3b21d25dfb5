"""ElementTree building writer.

Feeds events to xml.etree.ElementTree.TreeBuilder and hands back the
resulting Element.

Python 3.13+.
"""

import xml.etree.ElementTree as ET

from variantxml.diagnostics import WriterStateError
from variantxml.diagnostics.templates import ErrorTemplate

from .events import Characters, EndElement, StartElement, XmlEvent
from .nesting import ElementStack

__all__ = ["ElementTreeWriter"]


class ElementTreeWriter:
    """EventWriter that builds an ElementTree.

    Without a container the events must form exactly one root element.
    With a container every top-level element and character block becomes
    content of a synthetic element of that name, so fragments such as the
    repeated wrappers of a positional list can be captured too.

    Args:
        container: Name of a synthetic root element, or None
    """

    __slots__ = ("_builder", "_container", "_roots", "_stack")

    def __init__(self, container: str | None = None) -> None:
        self._builder = ET.TreeBuilder()
        self._stack = ElementStack()
        self._container = container
        self._roots = 0
        if container is not None:
            self._builder.start(container, {})

    def write(self, event: XmlEvent) -> None:
        """Apply one event to the tree under construction.

        Raises:
            WriterStateError: On unbalanced nesting, a second root element
                or top-level character data without a container
        """
        match event:
            case StartElement(name=name, attributes=attributes):
                if self._stack.depth == 0 and self._container is None:
                    if self._roots:
                        raise WriterStateError(ErrorTemplate.multiple_roots(name))
                    self._roots += 1
                self._builder.start(name, dict(attributes))
                self._stack.push(name)
            case Characters(text=text):
                if self._stack.depth == 0 and self._container is None:
                    raise WriterStateError(ErrorTemplate.text_outside_root())
                self._builder.data(text)
            case EndElement(name=name):
                self._stack.pop(name)
                self._builder.end(name)

    def close(self) -> ET.Element:
        """Finish the tree and return its root.

        Raises:
            WriterStateError: If elements are still open or nothing was written
        """
        self._stack.ensure_closed()
        if self._container is not None:
            self._builder.end(self._container)
        elif not self._roots:
            raise WriterStateError(ErrorTemplate.empty_document())
        return self._builder.close()
