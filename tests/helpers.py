"""Test helpers shared across test modules."""

from __future__ import annotations

import typing

from kungfu import Error, Ok, Result


def unpack(result: Result[typing.Any, typing.Any]) -> tuple[str, typing.Any]:
    """Flatten a Result into a comparable ("ok" | "error", payload) pair."""
    match result:
        case Ok(value):
            return ("ok", value)
        case Error(err):
            return ("error", err)
    raise AssertionError(f"not a Result: {result!r}")
