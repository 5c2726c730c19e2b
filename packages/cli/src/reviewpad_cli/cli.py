"""CLI entry point for reviewpad.

Commands:
  review    — build a review scratchpad for a PR, issue or branch
  workflow  — handle a "/review <target>" command from the task queue workflow
  enqueue   — register a review as a task in the automation queue
  history   — list stored scratchpads
  complete  — move a finished scratchpad to the completed area
  fill      — fill a pending section of a stored scratchpad
"""

from __future__ import annotations

import importlib.metadata
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from reviewpad_cli.commands.complete import complete_cmd
from reviewpad_cli.commands.fill import fill_cmd
from reviewpad_cli.commands.history import history_cmd
from reviewpad_cli.commands.review import review_cmd
from reviewpad_cli.commands.workflow import enqueue_cmd, workflow_cmd

console = Console()


def _build_store(settings):
    """Instantiate the scratchpad store for the resolved settings.

    This factory lives in cli.py so neither reviewpad_core nor reviewpad_store
    know about the CLI config format.
    """
    from reviewpad_store.filesystem import FileStore

    return FileStore(active_dir=settings.scratchpad_dir, completed_dir=settings.completed_dir)


def _configure_logging(verbose: bool) -> None:
    # Logs go to stderr so stdout carries only what downstream scripts parse.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group()
@click.version_option(
    version=importlib.metadata.version("reviewpad"),
    prog_name="reviewpad",
)
@click.option(
    "--config",
    "config_path",
    default=".reviewpad.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="REVIEWPAD_CONFIG",
)
@click.option(
    "--project-root",
    default=None,
    help="Root of the project under review. Overrides config file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: str, project_root: str | None, verbose: bool):
    """Structured review scratchpads for the automation project."""
    from reviewpad_core.config import ReviewSettings, load_config

    _configure_logging(verbose)
    ctx.ensure_object(dict)

    try:
        config = load_config(config_path, cli_overrides={"project_root": project_root})
    except ValueError as e:
        raise click.UsageError(str(e))

    settings = ReviewSettings.from_config(config)
    store = _build_store(settings)
    ctx.obj["settings"] = settings
    ctx.obj["store"] = store
    ctx.call_on_close(store.close)


main.add_command(review_cmd)
main.add_command(workflow_cmd)
main.add_command(enqueue_cmd)
main.add_command(history_cmd)
main.add_command(complete_cmd)
main.add_command(fill_cmd)
