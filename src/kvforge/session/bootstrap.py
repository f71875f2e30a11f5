"""Per-connection priming commands issued before measured traffic."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kvforge.codec.inline import encode_inline

if TYPE_CHECKING:
    from collections.abc import Sequence


def flushall() -> bytes:
    return encode_inline("FLUSHALL")


def select(database_index: int) -> bytes:
    return encode_inline("SELECT", database_index)


def script_flush() -> bytes:
    return encode_inline("SCRIPT", "FLUSH")


def script_load(body: str) -> bytes:
    return encode_inline("SCRIPT", "LOAD", body)


def build_bootstrap(
    flush_requested: bool,
    database_index: int,
    preload_scripts: Sequence[str] = (),
) -> list[bytes]:
    """Build the ordered bootstrap sequence for one connection.

    The sequence is:

    1. ``FLUSHALL`` then ``SELECT db`` if *flush_requested*.
    2. ``SCRIPT FLUSH`` if any scripts are preloaded.
    3. ``SELECT db``, always. After a flush this selects the database a
       second time.
    4. ``SCRIPT LOAD body`` for every preload script, in order.

    Args:
        flush_requested: Whether to wipe all data first.
        database_index: Database selected for the session.
        preload_scripts: Script bodies referenced by EVALSHA workloads.

    Returns:
        Inline command bytes, to be sent and acknowledged in order.
    """
    ops: list[bytes] = []
    if flush_requested:
        ops.append(flushall())
        ops.append(select(database_index))

    if preload_scripts:
        ops.append(script_flush())

    ops.append(select(database_index))

    for body in preload_scripts:
        ops.append(script_load(body))

    return ops
