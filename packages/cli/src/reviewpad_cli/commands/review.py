"""review command — build a review scratchpad for a PR, issue or branch."""

from __future__ import annotations

import click
from rich.console import Console

from reviewpad_core.catalog import FOCUS_AREAS
from reviewpad_core.identifier import normalize
from reviewpad_core.reviewer import ReviewSummary, run_review

console = Console()


def resolve_identifier(identifier: str | None, issue: str | None, branch: str | None) -> str:
    """Pick the raw review identifier from the positional argument and options.

    --issue N is shorthand for issue-N. With neither given, an explicit
    --branch doubles as the identifier.
    """
    if identifier and issue:
        raise click.UsageError("Multiple PR identifiers provided.")
    if issue:
        return f"issue-{issue}"
    if identifier:
        return identifier
    if branch:
        return branch
    raise click.UsageError("PR identifier is required.")


def print_summary(summary: ReviewSummary) -> None:
    if summary.issues:
        console.print(f"\n[bold red]{len(summary.issues)} critical issue(s):[/bold red]")
        for issue in summary.issues:
            console.print(f"  - {issue}")
    pending = summary.document.pending()
    if pending:
        console.print(f"[dim]{len(pending)} section(s) left for the reviewer.[/dim]")
    console.print(f"\n[green]PR review complete![/green] Scratchpad: {summary.name}")


@click.command("review")
@click.argument("identifier", required=False)
@click.option("--branch", default=None, help="Branch name to record instead of the detected one.")
@click.option("--issue", default=None, help="Issue number to review (same as identifier issue-N).")
@click.option(
    "--focus-area",
    type=click.Choice(FOCUS_AREAS),
    default=None,
    help="Area to emphasise in the scratchpad header.",
)
@click.option("--quick", is_flag=True, help="Quick review: skip file analysis and safety tests.")
@click.option(
    "--shadow",
    "-s",
    is_flag=True,
    help="Dry-run mode: print the scratchpad without writing it.",
)
@click.pass_context
def review_cmd(
    ctx,
    identifier: str | None,
    branch: str | None,
    issue: str | None,
    focus_area: str | None,
    quick: bool,
    shadow: bool,
):
    """Create a review scratchpad for IDENTIFIER.

    IDENTIFIER is a PR number, issue number or branch name, e.g. 106, PR-106,
    issue-115 or feature/array-optimization. Bare numbers become PR-<n>.

    The scratchpad path is printed as the last line of output so the command
    can be chained from other scripts.
    """
    raw = resolve_identifier(identifier, issue, branch)
    try:
        review_id = normalize(raw)
    except ValueError as e:
        raise click.UsageError(str(e))

    settings = ctx.obj["settings"]
    store = ctx.obj["store"]

    summary = run_review(
        review_id,
        settings,
        writer=None if shadow else store.save,
        branch=branch,
        quick=quick,
        focus_area=focus_area,
    )

    if shadow:
        console.print(summary.document.render(), markup=False, highlight=False)
        console.print("[bold]Shadow review complete. Scratchpad not written.[/bold]")
        return

    print_summary(summary)
    click.echo(str(summary.path))
