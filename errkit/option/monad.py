"""LazyCoroOption Monad

Combined monad unifying:
- Lazy (deferred computations)
- Coro (asynchronous)
- Optional[T] (value or None)

Built on top of kungfu library patterns."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from kungfu import Error, LazyCoroResult, Ok, Result
from kungfu.library.caching import acache

from .._errors import NothingError


class LazyCoroOption[T]:
    """Lazy Coroutine Option Monad.

    Absence is None. There is no error payload: use note_t / to_lazy_coro_result
    to attach one.

    Monadic laws:
    - Left identity: pure(a).then(f) ≡ f(a)
    - Right identity: m.then(pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_value",)

    def __init__(
        self,
        value: Callable[[], Coroutine[typing.Any, typing.Any, T | None]],
        /,
    ) -> None:
        """Create LazyCoroOption from a fn returning coroutine."""
        self._value = value

    @staticmethod
    def pure[V](value: V) -> LazyCoroOption[V]:
        """Lift a present value into the monad."""

        async def wrapper() -> V | None:
            return value

        return LazyCoroOption(wrapper)

    @staticmethod
    def nothing() -> LazyCoroOption[typing.Never]:
        """Always-absent computation."""

        async def wrapper() -> None:
            return None

        return LazyCoroOption(wrapper)

    @staticmethod
    def from_optional[V](value: V | None) -> LazyCoroOption[V]:
        """Lift an already-computed optional. NOT lazy."""

        async def wrapper() -> V | None:
            return value

        return LazyCoroOption(wrapper)

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> LazyCoroOption[U]:
        """Functor fmap - apply function to present value."""

        async def wrapper() -> U | None:
            value = await self()
            if value is None:
                return None
            return f(value)

        return LazyCoroOption(wrapper)

    # Monad operations

    def then[U](
        self,
        f: Callable[[T], typing.Awaitable[U | None]],
        /,
    ) -> LazyCoroOption[U]:
        """
        Monadic bind (>>=).

        - On value: awaits f(value)
        - On None: short-circuit, f is never called
        """

        async def wrapper() -> U | None:
            value = await self()
            if value is None:
                return None
            return await f(value)

        return LazyCoroOption(wrapper)

    # Utility operations

    def cache(self) -> LazyCoroOption[T]:
        """Cache the result - only compute once."""
        return LazyCoroOption(acache(self))

    def or_else(self, default: T, /) -> Coroutine[typing.Any, typing.Any, T]:
        """Run and return value, or default when absent."""

        async def inner() -> T:
            value = await self()
            return default if value is None else value

        return inner()

    def unwrap(self) -> Coroutine[typing.Any, typing.Any, T]:
        """Run and return value, raising NothingError when absent."""

        async def inner() -> T:
            value = await self()
            if value is None:
                raise NothingError()
            return value

        return inner()

    def to_lazy_coro_result[E](self, error: E, /) -> LazyCoroResult[T, E]:
        """Convert to kungfu LazyCoroResult. Absence becomes Error(error)."""

        async def wrapper() -> Result[T, E]:
            value = await self()
            if value is None:
                return Error(error)
            return Ok(value)

        return LazyCoroResult(wrapper)

    # Protocol methods

    def __call__(self) -> Coroutine[typing.Any, typing.Any, T | None]:
        """Execute the lazy computation, returning coroutine."""
        return self._value()

    def __await__(self) -> typing.Generator[typing.Any, None, T | None]:
        """Allow direct await on the option."""
        return self().__await__()


__all__ = ("LazyCoroOption",)
