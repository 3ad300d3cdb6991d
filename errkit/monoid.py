"""
Monoid - identity element plus associative merge
================================================

Aggregators never infer how to merge values: the caller passes a Monoid for
the error side and one for the result side.

Monoid laws every instance must satisfy:
- Left identity: combine(empty(), x) == x
- Right identity: combine(x, empty()) == x
- Associativity: combine(combine(x, y), z) == combine(x, combine(y, z))
"""

from __future__ import annotations

import functools
import operator
import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Monoid[A]:
    """
    Explicit monoid instance.

    Example:
        words = Monoid(empty=str, combine=operator.add)
        words.concat(["a", "b", "c"])  # "abc"
    """

    empty: Callable[[], A]
    combine: Callable[[A, A], A]

    def concat(self, items: Iterable[A], /) -> A:
        """Fold items left to right, starting from empty()."""
        return functools.reduce(self.combine, items, self.empty())


class Log[A](list[A]):
    """
    Log accumulator.

    A list with monoidal operations:
    - empty: just Log()
    - combine: concatenation, never mutates either side
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Combine two logs (monoidal append).

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, item: A, /) -> Log[A]:
        """Append single item. Same as self.combine(Log.of(item))."""
        result: Log[A] = Log(self)
        result.append(item)
        return result


class _Combinable(typing.Protocol):
    def combine(self, other: typing.Self, /) -> typing.Self: ...


def monoid_of[C: _Combinable](cls: Callable[[], C]) -> Monoid[C]:
    """
    Build a Monoid from a class whose no-arg constructor is the identity
    and whose .combine() method is the merge.

    Example:
        monoid_of(Log).concat([Log.of(1), Log.of(2)])  # Log([1, 2])
    """

    def combine(left: C, right: C) -> C:
        return left.combine(right)

    return Monoid(empty=cls, combine=combine)


def _unit(*_: object) -> None:
    return None


# ============================================================================
# Instances
# ============================================================================

STR: Monoid[str] = Monoid(empty=str, combine=operator.add)
LIST: Monoid[list[typing.Any]] = Monoid(empty=list, combine=operator.add)
TUPLE: Monoid[tuple[typing.Any, ...]] = Monoid(empty=tuple, combine=operator.add)
SUM: Monoid[int | float] = Monoid(empty=int, combine=operator.add)
UNIT: Monoid[None] = Monoid(empty=_unit, combine=_unit)
LOG: Monoid[Log[typing.Any]] = monoid_of(Log)


__all__ = (
    "LIST",
    "LOG",
    "Log",
    "Monoid",
    "STR",
    "SUM",
    "TUPLE",
    "UNIT",
    "monoid_of",
)
