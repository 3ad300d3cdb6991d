"""
Exception adapters.

Run exception-raising code and turn a chosen exception family into Error.
Everything outside that family propagates unchanged, and control-flow
signals listed in the policy's `reraise` are never intercepted.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import LCR, AsyncThunk, Thunk

logger = logging.getLogger(__name__)


# Signals that belong to the interpreter or the event loop, not to the
# wrapped computation. Checked before the catch family.
NON_INTERCEPTABLE: tuple[type[BaseException], ...] = (
    KeyboardInterrupt,
    SystemExit,
    GeneratorExit,
    asyncio.CancelledError,
    RecursionError,
    MemoryError,
    AssertionError,
)


@dataclass(frozen=True, slots=True)
class CatchPolicy:
    """
    Which exceptions become Error and which always propagate.

    `reraise` wins over `catch`: RecursionError is an Exception, but
    SYNC_POLICY still lets it through.
    """

    catch: tuple[type[Exception], ...] = (Exception,)
    reraise: tuple[type[BaseException], ...] = NON_INTERCEPTABLE


IO_POLICY = CatchPolicy(catch=(OSError,), reraise=())
SYNC_POLICY = CatchPolicy()


def catching[T](
    thunk: Thunk[T],
    *,
    policy: CatchPolicy = SYNC_POLICY,
) -> LCR[T, Exception]:
    """
    Execute sync thunk, convert exceptions from policy.catch to Error.

    Example:
        from errkit import lift as L
        import json

        L.catching(lambda: json.loads(raw), policy=CatchPolicy(catch=(ValueError,)))

    NOTE: Lazy. The thunk runs only when the result is awaited.
    """

    async def run() -> Result[T, Exception]:
        try:
            return Ok(thunk())
        except policy.reraise as exc:
            logger.debug("Propagating %s from %r", type(exc).__name__, thunk)
            raise
        except policy.catch as exc:
            logger.debug("Intercepted %r from %r", exc, thunk)
            return Error(exc)

    return LazyCoroResult(run)


def catching_async[T](
    thunk: AsyncThunk[T],
    *,
    policy: CatchPolicy = SYNC_POLICY,
) -> LCR[T, Exception]:
    """Async version of catching(). Cancellation of the awaited thunk propagates."""

    async def run() -> Result[T, Exception]:
        try:
            return Ok(await thunk())
        except policy.reraise as exc:
            logger.debug("Propagating %s from %r", type(exc).__name__, thunk)
            raise
        except policy.catch as exc:
            logger.debug("Intercepted %r from %r", exc, thunk)
            return Error(exc)

    return LazyCoroResult(run)


def try_io[T](thunk: Thunk[T]) -> LCR[T, OSError]:
    """
    Catch OSError (IOError) and convert it to Error. Anything else propagates.

    Example:
        from errkit import lift as L

        text = await L.try_io(lambda: Path("motd").read_text())
    """
    return catching(thunk, policy=IO_POLICY)  # type: ignore[return-value]


def try_io_async[T](thunk: AsyncThunk[T]) -> LCR[T, OSError]:
    """Async version of try_io()."""
    return catching_async(thunk, policy=IO_POLICY)  # type: ignore[return-value]


def sync_io[T](thunk: Thunk[T]) -> LCR[T, Exception]:
    """
    Catch all exceptions except NON_INTERCEPTABLE ones and convert them to Error.

    KeyboardInterrupt, SystemExit, cancellation, RecursionError and friends
    always propagate untouched.
    """
    return catching(thunk, policy=SYNC_POLICY)


def sync_io_async[T](thunk: AsyncThunk[T]) -> LCR[T, Exception]:
    """Async version of sync_io()."""
    return catching_async(thunk, policy=SYNC_POLICY)


__all__ = (
    "CatchPolicy",
    "IO_POLICY",
    "NON_INTERCEPTABLE",
    "SYNC_POLICY",
    "catching",
    "catching_async",
    "sync_io",
    "sync_io_async",
    "try_io",
    "try_io_async",
)
