from __future__ import annotations


class NothingError(ValueError):
    """LazyCoroOption was unwrapped but held no value."""

    def __init__(self) -> None:
        super().__init__("Called unwrap on an absent value")


class MonoidMismatchError(TypeError):
    """Aggregators of different policies were combined."""

    expected: type
    got: type

    def __init__(self, expected: type, got: type) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"Cannot combine {expected.__name__} with {got.__name__}")


__all__ = ("MonoidMismatchError", "NothingError")
