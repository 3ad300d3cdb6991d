"""
Aggregation policies
====================

AllE and AnyE wrap a single Result and merge pairwise. Both merge ALL
errors they see, none of them short-circuits and drops error values.

Monoid laws (given lawful error/result monoids):
- Left identity: X.empty(...).combine(x) == x
- Right identity: x.combine(X.empty(...)) == x
- Associativity: (x.combine(y)).combine(z) == x.combine(y.combine(z))
"""

from __future__ import annotations

import functools
import typing
from collections.abc import Iterable
from dataclasses import dataclass
from typing import assert_never

from kungfu import Error, Ok, Result

from .._errors import MonoidMismatchError
from ..monoid import Monoid


@dataclass(frozen=True, slots=True)
class Aggregate[E, R]:
    """Common shape of aggregation policies. Use AllE or AnyE."""

    outcome: Result[R, E]

    @classmethod
    def empty(cls, *, errors: Monoid[E], results: Monoid[R]) -> typing.Self:
        """Identity element of the policy."""
        raise NotImplementedError

    def _merge(
        self,
        other: typing.Self,
        errors: Monoid[E],
        results: Monoid[R],
    ) -> typing.Self:
        raise NotImplementedError

    def combine(
        self,
        other: typing.Self,
        /,
        *,
        errors: Monoid[E],
        results: Monoid[R],
    ) -> typing.Self:
        """Associative merge of two wrapped outcomes."""
        if type(other) is not type(self):
            raise MonoidMismatchError(type(self), type(other))
        return self._merge(other, errors, results)

    @classmethod
    def concat(
        cls,
        outcomes: Iterable[Result[R, E]],
        /,
        *,
        errors: Monoid[E],
        results: Monoid[R],
    ) -> typing.Self:
        """
        Fold outcomes in sequence order, seeded with the identity.

        Example:
            AllE.concat([Ok("a"), Ok("b")], errors=STR, results=STR).outcome
            # Ok("ab")
        """
        return functools.reduce(
            lambda acc, outcome: acc.combine(cls(outcome), errors=errors, results=results),
            outcomes,
            cls.empty(errors=errors, results=results),
        )


@dataclass(frozen=True, slots=True)
class AllE[E, R](Aggregate[E, R]):
    """
    Succeed only if every combined outcome succeeds.

    - Ok + Ok: Ok(results.combine)
    - Ok + Error / Error + Ok: the Error
    - Error + Error: Error(errors.combine)

    Identity: Ok(results.empty()).
    """

    @classmethod
    def empty(cls, *, errors: Monoid[E], results: Monoid[R]) -> typing.Self:
        _ = errors
        return cls(Ok(results.empty()))

    def _merge(
        self,
        other: typing.Self,
        errors: Monoid[E],
        results: Monoid[R],
    ) -> typing.Self:
        match self.outcome, other.outcome:
            case Ok(x), Ok(y):
                return type(self)(Ok(results.combine(x, y)))
            case Ok(_), Error(_):
                return other
            case Error(_), Ok(_):
                return self
            case Error(x), Error(y):
                return type(self)(Error(errors.combine(x, y)))
            case _ as unreachable:
                assert_never(unreachable)


@dataclass(frozen=True, slots=True)
class AnyE[E, R](Aggregate[E, R]):
    """
    Succeed if any combined outcome succeeds.

    - Ok + Ok: Ok(results.combine)
    - Ok + Error / Error + Ok: the Ok
    - Error + Error: Error(errors.combine)

    Identity: Error(errors.empty()). Ok(results.empty()) would absorb every
    failure (Ok("") + Error("x") == Ok("")) and break right identity.
    """

    @classmethod
    def empty(cls, *, errors: Monoid[E], results: Monoid[R]) -> typing.Self:
        _ = results
        return cls(Error(errors.empty()))

    def _merge(
        self,
        other: typing.Self,
        errors: Monoid[E],
        results: Monoid[R],
    ) -> typing.Self:
        match self.outcome, other.outcome:
            case Ok(x), Ok(y):
                return type(self)(Ok(results.combine(x, y)))
            case Ok(_), Error(_):
                return self
            case Error(_), Ok(_):
                return other
            case Error(x), Error(y):
                return type(self)(Error(errors.combine(x, y)))
            case _ as unreachable:
                assert_never(unreachable)


__all__ = ("Aggregate", "AllE", "AnyE")
