"""Open element tracking shared by the concrete writers.

Balanced nesting is the only well-formedness property the writers check;
element and attribute names are trusted as given.

Python 3.13+.
"""

from variantxml.diagnostics import WriterStateError
from variantxml.diagnostics.templates import ErrorTemplate

__all__ = ["ElementStack"]


class ElementStack:
    """Stack of currently open element names, outermost first."""

    __slots__ = ("_names",)

    def __init__(self) -> None:
        self._names: list[str] = []

    @property
    def depth(self) -> int:
        """Number of open elements."""
        return len(self._names)

    @property
    def open_names(self) -> tuple[str, ...]:
        """Open element names, outermost first."""
        return tuple(self._names)

    def push(self, name: str) -> None:
        self._names.append(name)

    def pop(self, name: str) -> None:
        """Close the innermost element.

        Raises:
            WriterStateError: If nothing is open or the name does not match
        """
        if not self._names:
            raise WriterStateError(ErrorTemplate.unbalanced_end())
        if self._names[-1] != name:
            raise WriterStateError(ErrorTemplate.mismatched_end(self._names[-1], name))
        self._names.pop()

    def ensure_closed(self) -> None:
        """Raise if any element is still open.

        Raises:
            WriterStateError: If elements remain open
        """
        if self._names:
            raise WriterStateError(ErrorTemplate.unclosed_elements(self._names))
