from __future__ import annotations

import itertools
import typing

import pytest
from kungfu import Error, LazyCoroResult, Ok, Result

from errkit import (
    LIST,
    STR,
    AllE,
    AnyE,
    MonoidMismatchError,
    aggregateM,
    all_e,
    all_e_par,
    any_e,
    any_e_par,
)
from errkit import lift as L

from .helpers import unpack

SAMPLES: list[Result[list[str], list[str]]] = [
    Ok([]),
    Ok(["a"]),
    Ok(["b", "c"]),
    Error([]),
    Error(["x"]),
    Error(["y", "z"]),
]

POLICIES = pytest.mark.parametrize("policy", [AllE, AnyE])


def _combine(policy: type, left: Result, right: Result) -> tuple[str, typing.Any]:
    merged = policy(left).combine(policy(right), errors=LIST, results=LIST)
    return unpack(merged.outcome)


# ============================================================================
# Laws
# ============================================================================


@POLICIES
def test_associativity(policy: type) -> None:
    for a, b, c in itertools.product(SAMPLES, repeat=3):
        wa, wb, wc = policy(a), policy(b), policy(c)
        left = wa.combine(wb, errors=LIST, results=LIST).combine(wc, errors=LIST, results=LIST)
        right = wa.combine(wb.combine(wc, errors=LIST, results=LIST), errors=LIST, results=LIST)
        assert unpack(left.outcome) == unpack(right.outcome), (a, b, c)


@POLICIES
def test_identity(policy: type) -> None:
    empty = policy.empty(errors=LIST, results=LIST)
    for sample in SAMPLES:
        wrapped = policy(sample)
        assert unpack(empty.combine(wrapped, errors=LIST, results=LIST).outcome) == unpack(sample)
        assert unpack(wrapped.combine(empty, errors=LIST, results=LIST).outcome) == unpack(sample)


@POLICIES
def test_fold_is_independent_of_grouping(policy: type) -> None:
    outcomes = [Ok(["a"]), Error(["x"]), Ok(["b"]), Error(["y"]), Ok(["c"])]
    whole = policy.concat(outcomes, errors=LIST, results=LIST)
    head = policy.concat(outcomes[:2], errors=LIST, results=LIST)
    tail = policy.concat(outcomes[2:], errors=LIST, results=LIST)

    assert unpack(whole.outcome) == unpack(head.combine(tail, errors=LIST, results=LIST).outcome)


def test_all_e_identity_is_ok_empty() -> None:
    assert unpack(AllE.empty(errors=STR, results=STR).outcome) == ("ok", "")


def test_any_e_identity_is_error_empty() -> None:
    assert unpack(AnyE.empty(errors=STR, results=STR).outcome) == ("error", "")


# ============================================================================
# Merge tables
# ============================================================================


def test_all_e_table() -> None:
    assert _combine(AllE, Ok(["a"]), Ok(["b"])) == ("ok", ["a", "b"])
    assert _combine(AllE, Ok(["a"]), Error(["y"])) == ("error", ["y"])
    assert _combine(AllE, Error(["x"]), Ok(["b"])) == ("error", ["x"])
    assert _combine(AllE, Error(["x"]), Error(["y"])) == ("error", ["x", "y"])


def test_any_e_table() -> None:
    assert _combine(AnyE, Ok(["a"]), Ok(["b"])) == ("ok", ["a", "b"])
    assert _combine(AnyE, Ok(["a"]), Error(["y"])) == ("ok", ["a"])
    assert _combine(AnyE, Error(["x"]), Ok(["b"])) == ("ok", ["b"])
    assert _combine(AnyE, Error(["x"]), Error(["y"])) == ("error", ["x", "y"])


def test_combine_rejects_other_policy() -> None:
    with pytest.raises(MonoidMismatchError):
        AllE(Ok("a")).combine(AnyE(Ok("b")), errors=STR, results=STR)


def test_wrappers_are_immutable() -> None:
    wrapped = AllE(Ok("a"))
    with pytest.raises(AttributeError):
        wrapped.outcome = Ok("b")  # type: ignore[misc]


# ============================================================================
# Plain folds
# ============================================================================


def test_all_e_single_failure_passes_through() -> None:
    result = all_e([Ok("a"), Ok("b"), Error("x")], errors=STR, results=STR)
    assert unpack(result) == ("error", "x")


def test_all_e_merges_every_failure() -> None:
    result = all_e([Error("x"), Ok("a"), Error("y")], errors=STR, results=STR)
    assert unpack(result) == ("error", "xy")


def test_all_e_merges_successes_in_order() -> None:
    result = all_e([Ok("a"), Ok("b"), Ok("c")], errors=STR, results=STR)
    assert unpack(result) == ("ok", "abc")


def test_all_e_empty_sequence() -> None:
    assert unpack(all_e([], errors=STR, results=STR)) == ("ok", "")


def test_any_e_one_success_wins() -> None:
    result = any_e([Error("x"), Ok("a"), Error("y")], errors=STR, results=STR)
    assert unpack(result) == ("ok", "a")


def test_any_e_merges_successes() -> None:
    result = any_e([Ok("a"), Error("x"), Ok("b")], errors=STR, results=STR)
    assert unpack(result) == ("ok", "ab")


def test_any_e_all_failures_merge() -> None:
    result = any_e([Error("x"), Error("y")], errors=STR, results=STR)
    assert unpack(result) == ("error", "xy")


def test_any_e_empty_sequence_fails() -> None:
    assert unpack(any_e([], errors=STR, results=STR)) == ("error", "")


def test_accepts_generators() -> None:
    result = all_e((Ok(str(i)) for i in range(3)), errors=STR, results=STR)
    assert unpack(result) == ("ok", "012")


# ============================================================================
# Lazy folds
# ============================================================================


@pytest.mark.asyncio
async def test_all_e_par_runs_everything() -> None:
    calls: list[str] = []

    def track(name: str, result: Result[str, str]) -> LazyCoroResult[str, str]:
        async def run() -> Result[str, str]:
            calls.append(name)
            return result

        return LazyCoroResult(run)

    interp = all_e_par(
        [track("a", Error("x")), track("b", Ok("b")), track("c", Error("y"))],
        errors=STR,
        results=STR,
    )
    assert calls == []

    result = await interp
    assert unpack(result) == ("error", "xy")
    assert sorted(calls) == ["a", "b", "c"]


@pytest.mark.asyncio
async def test_any_e_par() -> None:
    interp = any_e_par(
        [L.fail("x"), L.pure("a"), L.fail("y")],
        errors=STR,
        results=STR,
    )
    assert unpack(await interp) == ("ok", "a")


@pytest.mark.asyncio
async def test_aggregate_m_custom_raw() -> None:
    async def first() -> tuple[Result[str, str], int]:
        return (Ok("a"), 1)

    async def second() -> tuple[Result[str, str], int]:
        return (Error("x"), 2)

    run = aggregateM(
        [first, second],
        policy=AnyE,
        errors=STR,
        results=STR,
        extract=lambda raw: raw[0],
        combine=lambda outcome, raws: (unpack(outcome), [weight for _, weight in raws]),
        wrap=lambda fn: fn,
    )
    assert await run() == (("ok", "a"), [1, 2])
