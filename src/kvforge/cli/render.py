"""``kvforge render``: print sample requests generated from a workload config."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from kvforge._internal.errors import KvForgeError
from kvforge._internal.logging import setup_logging
from kvforge.codec.generator import generate_message
from kvforge.workload.loader import load_config_file

console = Console(stderr=True)


def render_cmd(
    config_file: Path = typer.Argument(
        ...,
        help="Path to the TOML workload config.",
    ),
    count: int = typer.Option(
        3,
        "--count",
        "-n",
        min=1,
        help="Requests to generate per workload.",
    ),
    workload_name: str | None = typer.Option(
        None,
        "--workload",
        "-w",
        help="Only render the workload with this name.",
    ),
) -> None:
    """Generate requests exactly as a worker session would and print them."""
    setup_logging("WARNING")
    try:
        config = load_config_file(config_file)
        workloads = config.clone_workloads()
        if workload_name is not None:
            workloads = [w for w in workloads if w.name == workload_name]
            if not workloads:
                console.print(f"[red]Error:[/red] no workload named {workload_name!r}")
                raise typer.Exit(code=1)

        for workload in workloads:
            console.print(f"[bold cyan]# {workload.name}[/bold cyan] ({workload.method})")
            for _ in range(count):
                typer.echo(generate_message(workload.command).decode(), nl=False)
    except KvForgeError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
