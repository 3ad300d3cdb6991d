"""
LazyCoroResult transforms
=========================

Maps over lazy results. Nothing runs until the returned LazyCoroResult is awaited.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import LCR


def fmap_rt[T, U, E](f: Callable[[T], U], interp: LCR[T, E]) -> LCR[U, E]:
    """Map the success side of a LazyCoroResult."""

    async def run() -> Result[U, E]:
        return (await interp()).map(f)

    return LazyCoroResult(run)


def bimap_except_t[T, U, E, F](
    on_error: Callable[[E], F],
    on_ok: Callable[[T], U],
    interp: LCR[T, E],
) -> LCR[U, F]:
    """
    Transform both the error and the success value.

    Example:
        bimap_except_t(str, len, fetch_body(url))  # LCR[int, str]
    """

    async def run() -> Result[U, F]:
        match await interp():
            case Ok(value):
                return Ok(on_ok(value))
            case Error(err):
                return Error(on_error(err))

    return LazyCoroResult(run)


__all__ = ("bimap_except_t", "fmap_rt")
