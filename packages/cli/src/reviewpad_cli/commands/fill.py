"""fill command — write reviewer findings into a pending scratchpad section.

The automated stages leave some sections for a human or agent reviewer
(security, performance, suggestions, questions). This fills one of them in a
stored scratchpad without touching any other text.
"""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from reviewpad_core.document import Section, fill_markdown

console = Console()


@click.command("fill")
@click.argument("name")
@click.option(
    "--section",
    "section_slug",
    required=True,
    type=click.Choice([s.slug for s in Section]),
    help="Section to fill.",
)
@click.option("--text", default=None, help="Replacement content.")
@click.option(
    "--from-file",
    "from_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read replacement content from a file.",
)
@click.pass_context
def fill_cmd(ctx, name: str, section_slug: str, text: str | None, from_file: Path | None):
    """Fill SECTION of the active scratchpad NAME."""
    if (text is None) == (from_file is None):
        raise click.UsageError("Pass exactly one of --text or --from-file.")
    content = text if text is not None else from_file.read_text(encoding="utf-8").rstrip("\n")

    store = ctx.obj["store"]
    try:
        original = store.load(name)
    except FileNotFoundError as e:
        raise click.ClickException(str(e))

    section = Section.from_slug(section_slug)
    updated, changed = fill_markdown(original, section, content)
    if not changed:
        console.print(f"[yellow]Section {section_slug} is not pending in {name}; nothing changed.[/yellow]")
        return

    path = store.save(name, updated)
    console.print(f"[green]Filled {section_slug}[/green]")
    click.echo(str(path))
