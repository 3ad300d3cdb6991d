"""
Core type definitions for errkit.

Aliases shared across the library.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import LazyCoroResult

# ============================================================================
# Type aliases
# ============================================================================

# Thunk = deferred computation, nothing runs until called
type Thunk[T] = Callable[[], T]

# AsyncThunk = deferred async computation
type AsyncThunk[T] = Callable[[], Awaitable[T]]

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

__all__ = (
    "AsyncThunk",
    "LCR",
    "Thunk",
)
