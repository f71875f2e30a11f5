"""Abstract base class for all benchmark commands."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from kvforge.codec.inline import encode_inline

if TYPE_CHECKING:
    from kvforge.params.template import Parameter


class Command(ABC):
    """Abstract base for the closed set of benchmark commands.

    A command owns its parameter slots. Concrete subclasses declare the
    wire ``verb`` and implement :meth:`tokens`, which regenerates the
    slots and returns the argument tokens that follow the verb.

    The slots a command holds are fixed at construction; only their
    values change. Commands are never shared between worker sessions:
    each session works on its own :meth:`clone`.

    Example::

        cmd = Get(Parameter(seed=0, size=8, cardinality=100))
        cmd.generate_message()  # b"GET <8 chars>\\n"
    """

    verb: ClassVar[str]

    @property
    def method(self) -> str:
        """Return the lowercase method name used for metric labels."""
        return self.verb.lower()

    @abstractmethod
    def tokens(self) -> list[str]:
        """Regenerate the parameter slots and return the argument tokens.

        Returns:
            Argument tokens in wire order, not including the verb.

        Raises:
            GenerationError: If a slot value cannot be rendered.
        """

    @abstractmethod
    def parameters(self) -> tuple[Parameter, ...]:
        """Return the parameter slots owned by this command, in wire order."""

    def generate_message(self) -> bytes:
        """Regenerate the slots and render the inline request bytes."""
        return encode_inline(self.verb, *self.tokens())

    def clone(self) -> Command:
        """Return a copy whose parameter slots are not shared with *self*."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        slots = ", ".join(repr(p) for p in self.parameters())
        return f"{type(self).__name__}({slots})"


class KeyCommand(Command):
    """A command taking a single key slot (GET, DEL, INCR, DECR)."""

    def __init__(self, key: Parameter) -> None:
        self.key = key

    def tokens(self) -> list[str]:
        return [self.key.regenerate()]

    def parameters(self) -> tuple[Parameter, ...]:
        return (self.key,)


class KeyValueCommand(Command):
    """A command taking a key and a value slot (APPEND, PREPEND)."""

    def __init__(self, key: Parameter, value: Parameter) -> None:
        self.key = key
        self.value = value

    def tokens(self) -> list[str]:
        return [self.key.regenerate(), self.value.regenerate()]

    def parameters(self) -> tuple[Parameter, ...]:
        return (self.key, self.value)
