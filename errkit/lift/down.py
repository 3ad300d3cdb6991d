"""
Running a context down to a value.

Result -> Optional, and case analysis (folds) over LazyCoroResult and
LazyCoroOption.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import LCR
from ..option import LazyCoroOption
from .up import note


def hush[T, E](result: Result[T, E]) -> T | None:
    """
    Suppress the error of a Result.

    Example:
        from errkit import lift as L

        L.down.hush(Ok(1))       # 1
        L.down.hush(Error("x"))  # None

    NOTE: Ok(None) also hushes to None, the two are indistinguishable.
    """
    match result:
        case Ok(value):
            return value
        case Error(_):
            return None


def hush_t[T, E](interp: LCR[T, E]) -> LazyCoroOption[T]:
    """Suppress the error of a LazyCoroResult."""

    async def run() -> T | None:
        return hush(await interp())

    return LazyCoroOption(run)


def note_t[T, E](error: E, option: LazyCoroOption[T]) -> LCR[T, E]:
    """Tag the None of a LazyCoroOption with an error."""

    async def run() -> Result[T, E]:
        return note(error, await option())

    return LazyCoroResult(run)


async def maybe_t[T, C](
    on_nothing: Callable[[], Awaitable[C]],
    on_just: Callable[[T], Awaitable[C]],
    option: LazyCoroOption[T],
) -> C:
    """
    Case analysis for LazyCoroOption.

    Runs on_nothing if the computation yields None, otherwise on_just(value).
    """
    value = await option()
    if value is None:
        return await on_nothing()
    return await on_just(value)


async def is_just_t[T](option: LazyCoroOption[T]) -> bool:
    """Analogous to `value is not None`, but for LazyCoroOption."""
    return await option() is not None


async def is_nothing_t[T](option: LazyCoroOption[T]) -> bool:
    """Analogous to `value is None`, but for LazyCoroOption."""
    return await option() is None


async def except_t[T, E, C](
    on_error: Callable[[E], Awaitable[C]],
    on_ok: Callable[[T], Awaitable[C]],
    interp: LCR[T, E],
) -> C:
    """
    Case analysis for LazyCoroResult: one continuation per constructor.

    Example:
        from errkit import lift as L

        status = await L.down.except_t(report_failure, render_page, fetch_page(url))
    """
    match await interp():
        case Ok(value):
            return await on_ok(value)
        case Error(err):
            return await on_error(err)


async def is_left_t[T, E](interp: LCR[T, E]) -> bool:
    """True if the LazyCoroResult resolves to Error."""
    match await interp():
        case Ok(_):
            return False
        case Error(_):
            return True


async def is_right_t[T, E](interp: LCR[T, E]) -> bool:
    """True if the LazyCoroResult resolves to Ok."""
    return not await is_left_t(interp)


__all__ = (
    "except_t",
    "hush",
    "hush_t",
    "is_just_t",
    "is_left_t",
    "is_nothing_t",
    "is_right_t",
    "maybe_t",
    "note_t",
)
