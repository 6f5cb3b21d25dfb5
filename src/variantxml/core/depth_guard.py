"""Depth limiting for nested value serialization.

Nested values serialize through direct recursive calls into the same
writer. A value that (directly or indirectly) contains itself, or a
programmatically built tree that is simply too deep, would otherwise end
in RecursionError halfway through the output.

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from variantxml.constants import MAX_DEPTH, RECURSION_RESERVE_FRAMES
from variantxml.diagnostics import WriteFailure
from variantxml.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(WriteFailure):
    """Raised when the maximum nesting depth is exceeded.

    A WriteFailure: it aborts the serialize call and leaves the output
    truncated, exactly like a writer error.
    """


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting nesting depth.

    One guard is created per top-level serialize call and travels inside
    the WriteContext, so every nested value shares it regardless of which
    schema it belongs to.

    Usage:
        guard = DepthGuard(max_depth=50)
        with guard:
            nested.serialize_xml(writer, context)

    Mutability Note:
        Intentionally mutable (not frozen=True) to enable stateful depth
        tracking via context manager protocol.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current nesting depth
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates the limit BEFORE incrementing: __exit__ is not called when
        __enter__ raises, so incrementing first would leave the depth elevated.
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.depth_exceeded(self.max_depth))
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Current depth (alias for current_depth)."""
        return self.current_depth


def depth_clamp(requested_depth: int, reserve_frames: int = RECURSION_RESERVE_FRAMES) -> int:
    """Clamp requested depth against Python recursion limit.

    Each nesting level costs several interpreter frames (serialize_xml,
    dispatch, case handler, field strategy), so the usable depth is the
    recursion limit minus a reserve, divided by a per-level cost.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary
    """
    frames_per_level = 6
    max_safe_depth = max(1, (sys.getrecursionlimit() - reserve_frames) // frames_per_level)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
