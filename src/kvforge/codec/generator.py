"""Request generation entry points used by worker sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kvforge.commands.base import Command


def generate_message(command: Command) -> bytes:
    """Regenerate every slot of *command* and return the request bytes.

    A SET TTL slot is rendered as configured, not regenerated.

    Raises:
        NumericParseError: If an EXPIRE seconds slot is not an integer.
    """
    return command.generate_message()


def method_name(command: Command) -> str:
    """Return the lowercase method label for *command*, e.g. ``"hset"``."""
    return command.method


def clone_template(command: Command) -> Command:
    """Return a deep copy of *command* for a single worker session."""
    return command.clone()
