"""
Lifting values into a context.

Optional -> Result, Result -> LazyCoroResult, Optional -> LazyCoroOption.
Absence never becomes an error implicitly: the caller always supplies the
error value.
"""

from __future__ import annotations

from typing import Never

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import LCR, AsyncThunk
from ..option import LazyCoroOption


def note[T, E](error: E, value: T | None) -> Result[T, E]:
    """
    Tag the None of an optional with an error.

    **When to use:** Dict lookups, regex matches, `next(..., None)` — anywhere
    you get Optional and want a Result.

    Example:
        from errkit import lift as L

        L.up.note("missing", config.get("port"))  # Ok(8080) or Error("missing")

    **Grammar:** `L.up.note(error, value)` reads as "note the error on value"
    """
    if value is None:
        return Error(error)
    return Ok(value)


def hoist_either[T, E](value: Result[T, E]) -> LCR[T, E]:
    """
    Lift already-computed Result into LazyCoroResult.

    Example:
        from errkit import lift as L

        def validate(user: User) -> Result[User, str]: ...

        fetch_user(42).then(lambda u: L.up.hoist_either(validate(u)))

    NOTE: This is NOT lazy — result is already computed.
    """

    async def run() -> Result[T, E]:
        return value

    return LazyCoroResult(run)


def hoist_maybe[T](value: T | None) -> LazyCoroOption[T]:
    """Lift already-computed optional into LazyCoroOption."""
    return LazyCoroOption.from_optional(value)


def fail_with[T, E](error: E, value: T | None) -> LCR[T, E]:
    """
    Lift optional into LazyCoroResult. None becomes Error(error).

    Example:
        from errkit import lift as L

        user = await L.up.fail_with(NotFound(user_id), cache.get(user_id))
    """

    async def run() -> Result[T, E]:
        return note(error, value)

    return LazyCoroResult(run)


def fail_with_m[T, E](error: E, thunk: AsyncThunk[T | None]) -> LCR[T, E]:
    """
    Lift effectful optional into LazyCoroResult. None becomes Error(error).

    **When to use:** Async lookups returning `T | None` (db.find, redis.get).

    Example:
        from errkit import lift as L

        L.up.fail_with_m(NotFound(user_id), lambda: db.find(user_id))

    NOTE: thunk must be a zero-arg callable for laziness.
          A bare coroutine would start before the LazyCoroResult is awaited.
    """

    async def run() -> Result[T, E]:
        return note(error, await thunk())

    return LazyCoroResult(run)


def just[T](value: T) -> LazyCoroOption[T]:
    """Present LazyCoroOption. Equivalent to LazyCoroOption.pure."""
    return LazyCoroOption.pure(value)


def nothing() -> LazyCoroOption[Never]:
    """Absent LazyCoroOption."""
    return LazyCoroOption.nothing()


def pure[T](value: T) -> LCR[T, Never]:
    """Lift pure value into always-succeeding LazyCoroResult."""
    return LazyCoroResult.pure(value)


def fail[E](error: E) -> LCR[Never, E]:
    """
    Create always-failing LazyCoroResult. Dual of pure().

    NOTE: Return type LCR[Never, E] means "never produces a value".
    """
    return Error(error).to_async()


__all__ = (
    "fail",
    "fail_with",
    "fail_with_m",
    "hoist_either",
    "hoist_maybe",
    "just",
    "note",
    "nothing",
    "pure",
)
