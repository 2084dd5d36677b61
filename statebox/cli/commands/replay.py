"""
Replay command: Replay an action log and report the resulting state
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from ...core.canonical import canonicalize
from ...core.errors import StoreError
from ...logging_config import get_logger
from ...replay import read_actions
from ...replay import replay as replay_actions
from ..loader import load_reducer

console = Console()


def replay_command(
    log_path: str = typer.Argument(..., help="Path to JSONL action log"),
    reducer_ref: str = typer.Option(
        ...,
        "--reducer",
        "-r",
        help="Reducer as 'package.module:attr' or 'file.py:attr'",
    ),
    state_json: Optional[str] = typer.Option(None, "--state", help="Preloaded state as JSON"),
    until: Optional[int] = typer.Option(None, "--until", "-u", help="Replay only the first N actions"),
    show_state: bool = typer.Option(False, "--show-state", "-s", help="Show final state"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay an action log through a reducer and print the state hash.

    Examples:
        statebox replay actions.jsonl -r app.reducers:root
        statebox replay actions.jsonl -r reducers.py:counter --until 10
        statebox replay actions.jsonl -r app.reducers:root --json --show-state
    """
    logger = get_logger(__name__, trace_id=log_path)
    try:
        reducer = load_reducer(reducer_ref)
        preloaded = json.loads(state_json) if state_json is not None else None

        if not json_output:
            console.print("[bold]Replaying action log...[/bold]")
        logger.info("Replaying action log", extra={"reducer": reducer_ref, "until": until})

        result = replay_actions(read_actions(log_path), reducer, preloaded_state=preloaded, until=until)
    except FileNotFoundError:
        logger.error("Action log not found")
        if json_output:
            print(json.dumps({"error": "Action log not found", "path": log_path}))
        else:
            console.print(f"[red]Error: Action log not found:[/red] {log_path}")
        raise typer.Exit(2)
    except (StoreError, ValueError) as e:
        logger.error("Replay failed: %s", e)
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
    except Exception as e:
        # Reducer failures and unhashable final states
        logger.exception("Replay failed")
        message = f"{type(e).__name__}: {e}"
        if json_output:
            print(json.dumps({"error": message}))
        else:
            console.print(f"[red]Error:[/red] {message}")
        raise typer.Exit(2)

    logger.info("Replay finished", extra={"applied": result.applied, "state_hash": result.state_hash})

    if json_output:
        output = {
            "success": True,
            "actions_replayed": result.applied,
            "state_hash": result.state_hash,
            "action_counts": result.counts,
        }
        if show_state:
            output["state"] = canonicalize(result.state)
        print(json.dumps(output, indent=2))
        return

    console.print(f"[green]✓ Replayed {result.applied} actions successfully[/green]")
    console.print(f"  State hash: [yellow]{result.state_hash}[/yellow]")

    table = Table(title="Action Counts")
    table.add_column("Action Type", style="green")
    table.add_column("Count", style="cyan", justify="right")
    for kind in sorted(result.counts.keys()):
        table.add_row(kind, str(result.counts[kind]))
    console.print(table)

    if show_state:
        console.print("\n[bold]Final State:[/bold]")
        console.print(Syntax(json.dumps(canonicalize(result.state), indent=2), "json", theme="monokai"))
