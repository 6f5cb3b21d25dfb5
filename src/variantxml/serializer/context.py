"""Per-call serialization context.

A nested value needs two facts from its parent: which element name to
open for itself, and whether the parent already opened the element. They
travel as an explicit immutable WriteContext argument, so no handoff state
is ever left on the writer.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from variantxml.core import DepthGuard

from .config import DEFAULT_CONFIG, SerializerConfig

__all__ = ["WriteContext"]


@dataclass(frozen=True, slots=True)
class WriteContext:
    """Instructions for one serialize_xml call.

    Attributes:
        override_name: Element name the value must open for itself
        suppress_wrapper: The caller already opened the element; the value
            writes its content only
        config: Configuration shared by the whole call tree
        guard: Depth guard shared by the whole call tree
    """

    override_name: str | None = None
    suppress_wrapper: bool = False
    config: SerializerConfig = DEFAULT_CONFIG
    guard: DepthGuard = field(default_factory=DepthGuard, compare=False, repr=False)

    @classmethod
    def top_level(cls, config: SerializerConfig | None = None) -> WriteContext:
        """Create the context of a top-level serialize call."""
        effective = config if config is not None else DEFAULT_CONFIG
        return cls(config=effective, guard=DepthGuard(max_depth=effective.max_depth))

    @property
    def is_top_level(self) -> bool:
        """True when no parent dictated how the value is wrapped."""
        return self.override_name is None and not self.suppress_wrapper

    def named(self, name: str) -> WriteContext:
        """Context for a nested value that opens its own element called name."""
        return replace(self, override_name=name, suppress_wrapper=False)

    def reuse_wrapper(self) -> WriteContext:
        """Context for a nested value written inside an element already open."""
        return replace(self, override_name=None, suppress_wrapper=True)
