"""
Aggregate combinators
=====================

Fold many Results into one under AllE / AnyE policy, with extract + wrap pattern.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable, Coroutine, Iterable, Sequence

from kungfu import LazyCoroResult, Result

from ..monoid import Monoid
from .policy import Aggregate, AllE, AnyE


# ============================================================================
# Plain Results
# ============================================================================


def all_e[E, R](
    outcomes: Iterable[Result[R, E]],
    *,
    errors: Monoid[E],
    results: Monoid[R],
) -> Result[R, E]:
    """
    Ok only if every outcome is Ok. Merges all successes or all errors.

    Example:
        all_e([Ok("a"), Ok("b"), Error("x")], errors=STR, results=STR)
        # Error("x")
    """
    return AllE.concat(outcomes, errors=errors, results=results).outcome


def any_e[E, R](
    outcomes: Iterable[Result[R, E]],
    *,
    errors: Monoid[E],
    results: Monoid[R],
) -> Result[R, E]:
    """
    Ok if any outcome is Ok. Error only when all failed (errors merged).

    Example:
        any_e([Error("x"), Ok("a"), Error("y")], errors=STR, results=STR)
        # Ok("a")
    """
    return AnyE.concat(outcomes, errors=errors, results=results).outcome


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def aggregateM[M, E, R, Raw, Out](
    interps: Sequence[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]],
    *,
    policy: type[Aggregate[E, R]],
    errors: Monoid[E],
    results: Monoid[R],
    extract: Callable[[Raw], Result[R, E]],
    combine: Callable[[Result[R, E], list[Raw]], Out],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Out]]], M],
) -> M:
    """
    Generic aggregate combinator.

    Runs all computations concurrently, folds extracted Results in input order.
    """

    async def run() -> Out:
        raws: list[Raw] = await asyncio.gather(*(i() for i in interps))
        merged = policy.concat(
            (extract(raw) for raw in raws),
            errors=errors,
            results=results,
        )
        return combine(merged.outcome, raws)

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def all_e_par[E, R](
    interps: Sequence[LazyCoroResult[R, E]],
    *,
    errors: Monoid[E],
    results: Monoid[R],
) -> LazyCoroResult[R, E]:
    """Run all concurrently, succeed only if all succeed. Nothing is cancelled early."""

    async def run() -> Result[R, E]:
        outcomes: list[Result[R, E]] = await asyncio.gather(*(i() for i in interps))
        return all_e(outcomes, errors=errors, results=results)

    return LazyCoroResult(run)


def any_e_par[E, R](
    interps: Sequence[LazyCoroResult[R, E]],
    *,
    errors: Monoid[E],
    results: Monoid[R],
) -> LazyCoroResult[R, E]:
    """Run all concurrently, succeed if any succeeds."""

    async def run() -> Result[R, E]:
        outcomes: list[Result[R, E]] = await asyncio.gather(*(i() for i in interps))
        return any_e(outcomes, errors=errors, results=results)

    return LazyCoroResult(run)


__all__ = ("aggregateM", "all_e", "all_e_par", "any_e", "any_e_par")
