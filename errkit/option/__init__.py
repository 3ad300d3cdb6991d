"""
Option Monad
============

LazyCoroOption - combined monad:
- Lazy (deferred computations)
- Coro (asynchronous)
- Optional[T] (value or None)

Effectful counterpart of `T | None`, the same way kungfu's LazyCoroResult
is the effectful counterpart of Result.
"""

from .monad import LazyCoroOption

__all__ = ("LazyCoroOption",)
