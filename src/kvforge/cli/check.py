"""``kvforge check``: validate a workload config and show what it will send."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from kvforge._internal.config import load_settings
from kvforge._internal.errors import ConfigError
from kvforge._internal.logging import setup_logging
from kvforge.workload.loader import load_config_file
from kvforge.workload.models import ProtocolSessionConfig

console = Console(stderr=True)


def _workload_table(config: ProtocolSessionConfig) -> Table:
    """Build a Rich table listing every configured workload."""
    table = Table(title="Workloads", show_header=True, header_style="bold cyan", expand=True)
    table.add_column("Name", style="bold")
    table.add_column("Method")
    table.add_column("Rate", justify="right")
    table.add_column("Params", justify="right")

    for workload in config.workloads:
        table.add_row(
            workload.name,
            workload.method,
            str(workload.rate) if workload.rate else "unbounded",
            str(len(workload.command.parameters())),
        )
    return table


def _bootstrap_panel(config: ProtocolSessionConfig) -> Panel:
    lines = [op.decode().rstrip("\n") for op in config.bootstrap_ops]
    return Panel("\n".join(lines), title="Bootstrap", border_style="cyan")


def check_cmd(
    config_file: Path = typer.Argument(
        ...,
        help="Path to the TOML workload config.",
    ),
    flush: bool | None = typer.Option(
        None,
        "--flush/--no-flush",
        help="Flush all data before the run (default: $KVFORGE_FLUSH).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging.",
    ),
) -> None:
    """Validate a workload config and print its workloads and bootstrap ops."""
    try:
        settings = load_settings()
        setup_logging("DEBUG" if verbose else settings.log_level)
        config = load_config_file(config_file, flush=settings.flush if flush is None else flush)
    except ConfigError as exc:
        console.print(f"[red]Invalid config:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    console.print(_workload_table(config))
    console.print(_bootstrap_panel(config))
    console.print(f"[green]Config OK:[/green] {len(config.workloads)} workload(s)")
