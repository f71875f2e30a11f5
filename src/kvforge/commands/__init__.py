"""Benchmark commands for kvforge.

This package provides the closed set of commands a workload can drive.
Every command implements the :class:`Command` interface: it owns its
parameter slots and renders an inline request via
:meth:`Command.generate_message`.
"""

from __future__ import annotations

from kvforge.commands.base import Command
from kvforge.commands.hashes import Hget, Hset
from kvforge.commands.scripting import Eval, Evalsha, script_sha1
from kvforge.commands.strings import Append, Decr, Del, Expire, Get, Incr, Prepend, Set

__all__ = [
    "Append",
    "Command",
    "Decr",
    "Del",
    "Eval",
    "Evalsha",
    "Expire",
    "Get",
    "Hget",
    "Hset",
    "Incr",
    "Prepend",
    "Set",
    "script_sha1",
]
