"""complete command — move a finished scratchpad out of the active area."""

from __future__ import annotations

import click
from rich.console import Console

console = Console()


@click.command("complete")
@click.argument("name")
@click.pass_context
def complete_cmd(ctx, name: str):
    """Move scratchpad NAME from the active to the completed directory."""
    store = ctx.obj["store"]
    try:
        target = store.complete(name)
    except FileNotFoundError as e:
        raise click.ClickException(str(e))
    console.print(f"[green]Completed[/green] {name}")
    click.echo(str(target))
