"""workflow and enqueue commands — task queue integration.

The automation's task queue runs reviews unattended: `enqueue` registers a
custom task whose command is `reviewpad workflow "/review <id>"`, and the
queue treats a REVIEW_SUCCESS line in the output as task completion.
"""

from __future__ import annotations

import logging

import click

from reviewpad_core.identifier import normalize, parse_workflow_command
from reviewpad_core.reviewer import run_review
from reviewpad_core.tools.subsystems import enqueue_review

logger = logging.getLogger(__name__)


@click.command("workflow")
@click.argument("command")
@click.pass_context
def workflow_cmd(ctx, command: str):
    """Handle a workflow review COMMAND such as "/review PR-106".

    Runs a quick review and prints REVIEW_SUCCESS:<path>,
    REVIEW_PARTIAL_SUCCESS:<path> or REVIEW_FAILED:<reason>.
    """
    try:
        target = parse_workflow_command(command)
        review_id = normalize(target)
    except ValueError as e:
        logger.error("%s", e)
        click.echo("REVIEW_FAILED:invalid_command_format")
        ctx.exit(1)

    settings = ctx.obj["settings"]
    store = ctx.obj["store"]

    try:
        summary = run_review(review_id, settings, writer=store.save, quick=True)
    except OSError as e:
        logger.error("Review failed: %s", e)
        click.echo(f"REVIEW_FAILED:{type(e).__name__}")
        ctx.exit(1)

    if summary.path is not None and summary.path.is_file():
        click.echo(f"REVIEW_SUCCESS:{summary.path}")
    else:
        logger.warning("Review completed but scratchpad not found: %s", summary.path)
        click.echo(f"REVIEW_PARTIAL_SUCCESS:{summary.path}")


@click.command("enqueue")
@click.argument("identifier")
@click.option(
    "--priority",
    type=click.Choice(["low", "normal", "high"]),
    default="normal",
    show_default=True,
    help="Queue priority for the review task.",
)
@click.pass_context
def enqueue_cmd(ctx, identifier: str, priority: str):
    """Add a review of IDENTIFIER to the automation task queue."""
    try:
        review_id = normalize(identifier)
    except ValueError as e:
        raise click.UsageError(str(e))

    settings = ctx.obj["settings"]
    result = enqueue_review(
        settings.queue_script,
        str(review_id),
        priority=priority,
        task_timeout=settings.queue_task_timeout,
        cwd=settings.project_root,
        timeout=settings.tool_timeout,
    )
    if not result.ok:
        raise click.ClickException(f"Task queue not available for review integration: {result.reason}")
    click.echo(f"Review task added to queue: {review_id} (priority {priority})")
