"""Error reporting to standard error."""

from __future__ import annotations

import sys


def _write(message: str) -> None:
    # sys.stderr is None under pythonw and in detached processes.
    stream = sys.stderr
    if stream is None:
        return
    print(message, end="", file=stream, flush=True)


def err(message: str) -> None:
    """Write a string to stderr, flushed immediately."""
    _write(message)


def err_ln(message: str) -> None:
    """Write a string with a newline to stderr."""
    _write(message + "\n")


__all__ = ("err", "err_ln")
