"""
Lift helpers with semantic namespaces.

Supports two import styles:
    from errkit import lift as L   # Recommended
    from errkit import lift        # Explicit

Architecture:
- L.up.*     - lifting values into a context (Optional/Result -> Result/Lazy*)
- L.down.*   - running a context down (hush, folds, predicates)
- L.catch.*  - exception adapters (try_io, sync_io, catching)

Examples:
    from errkit import lift as L

    port = L.up.note("no port", env.get("PORT"))
    user = L.up.fail_with_m(NotFound(42), lambda: db.find(42))
    maybe_user = L.down.hush_t(user)
    text = L.try_io(lambda: Path("motd").read_text())
"""

from __future__ import annotations

from . import catch as catch_ns
from . import down as down_ns
from . import up as up_ns

# From up namespace
from .up import (
    fail,
    fail_with,
    fail_with_m,
    hoist_either,
    hoist_maybe,
    just,
    note,
    nothing,
    pure,
)

# From down namespace
from .down import (
    except_t,
    hush,
    hush_t,
    is_just_t,
    is_left_t,
    is_nothing_t,
    is_right_t,
    maybe_t,
    note_t,
)

# From catch namespace
from .catch import (
    CatchPolicy,
    IO_POLICY,
    NON_INTERCEPTABLE,
    SYNC_POLICY,
    catching,
    catching_async,
    sync_io,
    sync_io_async,
    try_io,
    try_io_async,
)

# Namespace aliases: L.up.*, L.down.*, L.catch.*
up = up_ns
down = down_ns
catch = catch_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    "catch",
    # Up
    "fail",
    "fail_with",
    "fail_with_m",
    "hoist_either",
    "hoist_maybe",
    "just",
    "note",
    "nothing",
    "pure",
    # Down
    "except_t",
    "hush",
    "hush_t",
    "is_just_t",
    "is_left_t",
    "is_nothing_t",
    "is_right_t",
    "maybe_t",
    "note_t",
    # Catch
    "CatchPolicy",
    "IO_POLICY",
    "NON_INTERCEPTABLE",
    "SYNC_POLICY",
    "catching",
    "catching_async",
    "sync_io",
    "sync_io_async",
    "try_io",
    "try_io_async",
)
