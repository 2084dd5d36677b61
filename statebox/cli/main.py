#!/usr/bin/env python3
"""
Statebox CLI - Predictable state container tooling

Main entrypoint for the statebox command-line tool.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .. import __version__
from ..core.action_types import ActionTypes
from ..logging_config import setup_logging
from .commands import replay

app = typer.Typer(
    name="statebox",
    help="Predictable state container tooling",
    add_completion=False,
)

console = Console()

app.command(name="replay")(replay.replay_command)


@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override STATEBOX_LOG_LEVEL"),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="Override STATEBOX_LOG_FORMAT"),
):
    """Predictable state container tooling."""
    setup_logging(level=log_level, fmt=log_format)


@app.command()
def tokens():
    """Show the reserved lifecycle action types of this process."""
    table = Table(title="Reserved Action Types")
    table.add_column("Event", style="green")
    table.add_column("Type", style="yellow")
    table.add_row("INIT", ActionTypes.INIT)
    table.add_row("REPLACE", ActionTypes.REPLACE)
    console.print(table)


@app.command()
def version():
    """Show version information."""
    table = Table(show_header=False, box=None)
    table.add_row("[bold]Statebox[/bold]", f"v{__version__}")
    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
