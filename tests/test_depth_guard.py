"""Tests for core/depth_guard.py.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from variantxml.constants import MAX_DEPTH, RECURSION_RESERVE_FRAMES
from variantxml.core import DepthGuard, DepthLimitExceededError, depth_clamp


class TestDepthGuardConstruction:
    """Construction and defaults."""

    def test_default_construction(self) -> None:
        guard = DepthGuard()

        assert guard.max_depth == MAX_DEPTH
        assert guard.current_depth == 0

    def test_custom_max_depth(self) -> None:
        assert DepthGuard(max_depth=5).max_depth == 5

    def test_post_init_clamps_max_depth(self) -> None:
        limit = sys.getrecursionlimit()
        guard = DepthGuard(max_depth=limit * 10)

        assert guard.max_depth < limit


class TestDepthGuardContextManager:
    """Enter/exit bookkeeping."""

    def test_increments_and_decrements(self) -> None:
        guard = DepthGuard()

        with guard:
            assert guard.depth == 1
            with guard:
                assert guard.depth == 2
        assert guard.depth == 0

    def test_decrements_on_exception(self) -> None:
        guard = DepthGuard()

        with pytest.raises(RuntimeError), guard:
            raise RuntimeError

        assert guard.depth == 0

    def test_limit_raises_without_incrementing(self) -> None:
        guard = DepthGuard(max_depth=1)

        with guard:
            with pytest.raises(DepthLimitExceededError):
                guard.__enter__()
            assert guard.depth == 1

    @given(max_depth=st.integers(min_value=1, max_value=50))
    def test_exactly_max_depth_levels_allowed(self, max_depth: int) -> None:
        """PROPERTY: max_depth nested entries succeed and one more fails."""
        guard = DepthGuard(max_depth=max_depth)
        for _ in range(max_depth):
            guard.__enter__()

        with pytest.raises(DepthLimitExceededError):
            guard.__enter__()
        assert guard.depth == max_depth


class TestDepthClamp:
    """Clamping against the interpreter recursion limit."""

    def test_small_depth_unchanged(self) -> None:
        assert depth_clamp(10) == 10

    def test_large_depth_clamped_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        limit = sys.getrecursionlimit()

        with caplog.at_level(logging.WARNING, logger="variantxml.core.depth_guard"):
            clamped = depth_clamp(limit)

        assert clamped == (limit - RECURSION_RESERVE_FRAMES) // 6
        assert "Clamping" in caplog.text

    def test_clamp_never_below_one(self) -> None:
        assert depth_clamp(5, reserve_frames=sys.getrecursionlimit()) == 1
