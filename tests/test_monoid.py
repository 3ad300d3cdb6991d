from __future__ import annotations

import pytest

from errkit.monoid import LIST, LOG, STR, SUM, TUPLE, UNIT, Log, Monoid, monoid_of


@pytest.mark.parametrize(
    ("monoid", "items", "expected"),
    [
        (STR, ["a", "b", "c"], "abc"),
        (LIST, [[1], [], [2, 3]], [1, 2, 3]),
        (TUPLE, [(1,), (2,)], (1, 2)),
        (SUM, [1, 2, 3.5], 6.5),
        (UNIT, [None, None], None),
    ],
)
def test_concat(monoid: Monoid, items: list, expected: object) -> None:
    assert monoid.concat(items) == expected


def test_concat_of_nothing_is_identity() -> None:
    assert STR.concat([]) == ""
    assert LIST.concat([]) == []
    assert LOG.concat([]) == Log()


def test_log_combine_does_not_mutate() -> None:
    left = Log.of("a")
    right = Log.of("b")
    combined = left.combine(right)

    assert combined == ["a", "b"]
    assert left == ["a"]
    assert right == ["b"]


def test_log_tell() -> None:
    log = Log.of(1).tell(2)
    assert log == [1, 2]
    assert isinstance(log, Log)


def test_monoid_of_uses_constructor_and_combine() -> None:
    monoid = monoid_of(Log)
    assert monoid.empty() == Log()
    assert monoid.concat([Log.of(1), Log.of(2, 3)]) == [1, 2, 3]


def test_custom_monoid() -> None:
    longest = Monoid(empty=str, combine=lambda a, b: a if len(a) >= len(b) else b)
    assert longest.concat(["ab", "abcd", "abc"]) == "abcd"
