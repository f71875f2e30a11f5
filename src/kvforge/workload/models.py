"""Workload and session configuration dataclasses for kvforge."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kvforge.session.classifier import ResponseParser

if TYPE_CHECKING:
    from kvforge.commands.base import Command

__all__ = [
    "ProtocolSessionConfig",
    "Workload",
]


@dataclass(frozen=True)
class Workload:
    """A named, rate-tagged unit of benchmark traffic.

    Attributes:
        name: Label used in reports, defaults to the method name.
        rate: Target requests per second, 0 for unbounded.
        command: Template command; workers generate from clones of it.
    """

    name: str
    rate: int
    command: Command

    @property
    def method(self) -> str:
        """Return the command's lowercase method label."""
        return self.command.method

    def clone(self) -> Workload:
        """Return a workload with its own copy of the command template."""
        return Workload(name=self.name, rate=self.rate, command=self.command.clone())


@dataclass(frozen=True)
class ProtocolSessionConfig:
    """Everything a worker session needs, built once at startup.

    Shared read-only between sessions. Sessions must not generate
    traffic from ``workloads`` directly; they call :meth:`clone_workloads`
    to get command copies of their own.

    Attributes:
        workloads: Workloads in declaration order.
        bootstrap_ops: Priming commands to send before measured traffic.
        database_index: Database selected by the bootstrap sequence.
        preload_scripts: Script bodies loaded for EVALSHA workloads.
        flush: Whether the bootstrap sequence flushes all data.
    """

    workloads: tuple[Workload, ...]
    bootstrap_ops: tuple[bytes, ...]
    database_index: int = 0
    preload_scripts: tuple[str, ...] = field(default_factory=tuple)
    flush: bool = False

    @property
    def protocol_name(self) -> str:
        return ResponseParser.name

    def new_parser(self) -> ResponseParser:
        """Create a reply parser for one session."""
        return ResponseParser()

    def clone_workloads(self) -> list[Workload]:
        """Return independent copies of every workload for one session."""
        return [workload.clone() for workload in self.workloads]
