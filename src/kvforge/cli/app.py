"""Main Typer application: entry point for the ``kvforge`` CLI."""

from __future__ import annotations

import typer

from kvforge import __version__
from kvforge.cli.check import check_cmd
from kvforge.cli.render import render_cmd

app = typer.Typer(
    name="kvforge",
    help="Benchmark workload codec for key-value stores.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("check", help="Validate a workload config.")(check_cmd)
app.command("render", help="Print sample requests for a workload config.")(render_cmd)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"kvforge {__version__}")
        raise typer.Exit


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """kvforge: benchmark workloads for key-value stores."""
