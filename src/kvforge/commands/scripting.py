"""Script execution commands: EVAL and EVALSHA."""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from typing import TYPE_CHECKING

from kvforge.commands.base import Command

if TYPE_CHECKING:
    from kvforge.params.template import Parameter


def script_sha1(body: str) -> str:
    """Return the script identity the server uses for EVALSHA.

    This is the SHA-1 digest of the UTF-8 encoded body, as 40 lowercase
    hex characters, matching what ``SCRIPT LOAD`` replies with.
    """
    return hashlib.sha1(body.encode("utf-8")).hexdigest()  # noqa: S324


class _ScriptCommand(Command):
    """Shared layout: ``VERB script numkeys arg...``.

    ``numkeys`` is the number of forwarded parameters; every forwarded
    parameter is regenerated per request.
    """

    def __init__(self, script: str, args: Sequence[Parameter]) -> None:
        self.script = script
        self.args = list(args)

    def tokens(self) -> list[str]:
        values = [arg.regenerate() for arg in self.args]
        return [self.script, str(len(values)), *values]

    def parameters(self) -> tuple[Parameter, ...]:
        return tuple(self.args)


class Eval(_ScriptCommand):
    """``EVAL body numkeys key... arg...`` carrying the literal script body."""

    verb = "EVAL"

    @property
    def body(self) -> str:
        return self.script


class Evalsha(_ScriptCommand):
    """``EVALSHA sha1 numkeys key... arg...`` referencing a preloaded script."""

    verb = "EVALSHA"

    @classmethod
    def from_body(cls, body: str, args: Sequence[Parameter]) -> Evalsha:
        """Build an EVALSHA command for *body*, hashing it to its identity."""
        return cls(script_sha1(body), args)

    @property
    def sha1(self) -> str:
        return self.script
