"""
Result and Optional helpers
===========================

Predicates, maps and case analysis on plain values.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result


def is_left[T, E](result: Result[T, E]) -> bool:
    """True for Error."""
    match result:
        case Ok(_):
            return False
        case Error(_):
            return True


def is_right[T, E](result: Result[T, E]) -> bool:
    """True for Ok."""
    return not is_left(result)


def fmap_r[T, U, E](f: Callable[[T], U], result: Result[T, E]) -> Result[U, E]:
    """Map the success side. Function-first form of result.map(f)."""
    return result.map(f)


def or_default[T](value: T | None, default: T) -> T:
    """`value` unless it is None."""
    return default if value is None else value


def select[T](low: T, high: T, flag: bool) -> T:
    """
    Case analysis for bool.

        select(low, high, flag) == (high if flag else low)
    """
    return high if flag else low


__all__ = ("fmap_r", "is_left", "is_right", "or_default", "select")
