"""Hash field commands: HGET and HSET."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kvforge.commands.base import Command

if TYPE_CHECKING:
    from kvforge.params.template import Parameter


class Hget(Command):
    """``HGET key field``."""

    verb = "HGET"

    def __init__(self, key: Parameter, field: Parameter) -> None:
        self.key = key
        self.field = field

    def tokens(self) -> list[str]:
        return [self.key.regenerate(), self.field.regenerate()]

    def parameters(self) -> tuple[Parameter, ...]:
        return (self.key, self.field)


class Hset(Command):
    """``HSET key field value``."""

    verb = "HSET"

    def __init__(self, key: Parameter, field: Parameter, value: Parameter) -> None:
        self.key = key
        self.field = field
        self.value = value

    def tokens(self) -> list[str]:
        return [self.key.regenerate(), self.field.regenerate(), self.value.regenerate()]

    def parameters(self) -> tuple[Parameter, ...]:
        return (self.key, self.field, self.value)
