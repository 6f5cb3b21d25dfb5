"""Core utilities shared across the schema, writer and serializer layers.

Exports:
    DepthGuard: Context manager for nesting depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded
    depth_clamp: Clamp a depth limit against the interpreter recursion limit

Python 3.13+.
"""

from .depth_guard import DepthGuard, DepthLimitExceededError, depth_clamp

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]
