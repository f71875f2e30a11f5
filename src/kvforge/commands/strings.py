"""String-keyed commands: GET, SET, DEL, EXPIRE and the counter/mutation family."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from kvforge._internal.errors import NumericParseError
from kvforge.commands.base import Command, KeyCommand, KeyValueCommand

if TYPE_CHECKING:
    from kvforge.params.template import Parameter

# Plain ASCII integer, as the server parses it.
_INTEGER = re.compile(r"-?[0-9]+")


class Get(KeyCommand):
    """``GET key``."""

    verb = "GET"


class Del(KeyCommand):
    """``DEL key``."""

    verb = "DEL"


class Incr(KeyCommand):
    """``INCR key``."""

    verb = "INCR"


class Decr(KeyCommand):
    """``DECR key``."""

    verb = "DECR"


class Append(KeyValueCommand):
    """``APPEND key value``."""

    verb = "APPEND"


class Prepend(KeyValueCommand):
    """``PREPEND key value``."""

    verb = "PREPEND"


class Set(Command):
    """``SET key value`` with an optional ``EX ttl`` suffix.

    The TTL slot is rendered as configured and never regenerated; it is
    normally a literal number of seconds.

    Args:
        key: Key slot.
        value: Value slot.
        ttl: Optional TTL slot.
    """

    verb = "SET"

    def __init__(self, key: Parameter, value: Parameter, ttl: Parameter | None = None) -> None:
        self.key = key
        self.value = value
        self.ttl = ttl

    def tokens(self) -> list[str]:
        tokens = [self.key.regenerate(), self.value.regenerate()]
        if self.ttl is not None:
            tokens += ["EX", self.ttl.current_value]
        return tokens

    def parameters(self) -> tuple[Parameter, ...]:
        if self.ttl is None:
            return (self.key, self.value)
        return (self.key, self.value, self.ttl)


class Expire(Command):
    """``EXPIRE key seconds``.

    Raises:
        NumericParseError: From :meth:`generate_message` when the seconds
            slot does not hold an integer.
    """

    verb = "EXPIRE"

    def __init__(self, key: Parameter, seconds: Parameter) -> None:
        self.key = key
        self.seconds = seconds

    def tokens(self) -> list[str]:
        key = self.key.regenerate()
        seconds = self.seconds.regenerate()
        if _INTEGER.fullmatch(seconds) is None:
            raise NumericParseError(self.method, seconds)
        return [key, seconds]

    def parameters(self) -> tuple[Parameter, ...]:
        return (self.key, self.seconds)
