"""
Error-handling combinators on top of kungfu.

Conversions between optional values (`T | None`) and Results, their lazy
async counterparts (LazyCoroOption, LazyCoroResult), exception adapters,
and monoidal aggregation of many Results into one.

Architecture:
- lift.up / lift.down - moving values into and out of a context
- lift.catch          - exception -> Error adapters
- aggregate           - AllE / AnyE policies over explicit Monoids
- transform           - small maps and case analysis
"""

# Core types
from ._types import LCR, AsyncThunk, Thunk

# Monoids
from .monoid import LIST, LOG, STR, SUM, TUPLE, UNIT, Log, Monoid, monoid_of

# Option monad
from .option import LazyCoroOption

# Lift helpers
from . import lift
from .lift import (
    CatchPolicy,
    NON_INTERCEPTABLE,
    catching,
    catching_async,
    except_t,
    fail_with,
    fail_with_m,
    hoist_either,
    hoist_maybe,
    hush,
    hush_t,
    is_just_t,
    is_left_t,
    is_nothing_t,
    is_right_t,
    just,
    maybe_t,
    note,
    note_t,
    nothing,
    sync_io,
    sync_io_async,
    try_io,
    try_io_async,
)

# Aggregation
from .aggregate import (
    Aggregate,
    AllE,
    AnyE,
    aggregateM,
    all_e,
    all_e_par,
    any_e,
    any_e_par,
)

# Transform
from .transform import (
    bimap_except_t,
    fmap_r,
    fmap_rt,
    is_left,
    is_right,
    or_default,
    select,
)

# Error reporting
from .report import err, err_ln

# Errors
from ._errors import MonoidMismatchError, NothingError

__all__ = (
    # Types
    "AsyncThunk",
    "LCR",
    "Thunk",
    # Monoids
    "LIST",
    "LOG",
    "Log",
    "Monoid",
    "STR",
    "SUM",
    "TUPLE",
    "UNIT",
    "monoid_of",
    # Option monad
    "LazyCoroOption",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift - up
    "fail_with",
    "fail_with_m",
    "hoist_either",
    "hoist_maybe",
    "just",
    "note",
    "nothing",
    # Lift - down
    "except_t",
    "hush",
    "hush_t",
    "is_just_t",
    "is_left_t",
    "is_nothing_t",
    "is_right_t",
    "maybe_t",
    "note_t",
    # Lift - catch
    "CatchPolicy",
    "NON_INTERCEPTABLE",
    "catching",
    "catching_async",
    "sync_io",
    "sync_io_async",
    "try_io",
    "try_io_async",
    # Aggregation
    "Aggregate",
    "AllE",
    "AnyE",
    "aggregateM",
    "all_e",
    "all_e_par",
    "any_e",
    "any_e_par",
    # Transform
    "bimap_except_t",
    "fmap_r",
    "fmap_rt",
    "is_left",
    "is_right",
    "or_default",
    "select",
    # Error reporting
    "err",
    "err_ln",
    # Errors
    "MonoidMismatchError",
    "NothingError",
)
