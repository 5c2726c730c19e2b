"""history command — list stored scratchpads."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

console = Console()


@click.command("history")
@click.option(
    "--state",
    type=click.Choice(["active", "completed", "all"]),
    default="all",
    show_default=True,
    help="Which scratchpads to list.",
)
@click.option("--limit", default=20, show_default=True, help="Maximum number of records to show.")
@click.pass_context
def history_cmd(ctx, state: str, limit: int):
    """Show stored review scratchpads, most recent first."""
    store = ctx.obj["store"]

    records = store.list_scratchpads(state=state)
    if not records:
        console.print("[yellow]No review scratchpads found.[/yellow]")
        return

    records = list(reversed(records))[:limit]

    table = Table(title="Review Scratchpads", show_header=True, header_style="bold cyan")
    table.add_column("Date", width=10)
    table.add_column("Identifier", style="bold", max_width=30)
    table.add_column("State", width=9)
    table.add_column("Status", width=18)
    table.add_column("Approved", max_width=32)
    table.add_column("File", max_width=48)

    _status_style = {
        "ANALYSIS_COMPLETE": "green",
        "UNDER_REVIEW": "yellow",
    }

    for r in records:
        style = _status_style.get(r.status, "white")
        table.add_row(
            r.date,
            r.identifier,
            r.state,
            f"[{style}]{r.status}[/{style}]" if r.status else "",
            r.approved_for_merge,
            r.name,
        )

    console.print(table)
