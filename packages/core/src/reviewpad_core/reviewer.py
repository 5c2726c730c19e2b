"""Core review pipeline.

    build_template → branch stage → analysis stage → safety stage → recommendation

Each stage produces a typed result (BranchInfo, AnalysisResult, SafetyReport,
Recommendation) that is the only input of the fill that follows it, so the
recommendation cannot be written before the safety checks have run. The
document is handed to the ``writer`` after every stage; a crash in a later
stage still leaves a complete, readable scratchpad behind.
"""

from __future__ import annotations

import logging
import platform
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console

from reviewpad_core.analysis import AnalysisResult, analyze_critical_files
from reviewpad_core.config import ReviewSettings
from reviewpad_core.document import ReportDocument, Section
from reviewpad_core.identifier import ReviewIdentifier, scratchpad_name
from reviewpad_core.recommendation import Recommendation, resolve
from reviewpad_core.safety import SafetyReport, SafetyStatus, run_safety_checks
from reviewpad_core.template import build_template
from reviewpad_core.tools.git import DiffStats, current_branch, diff_stats

console = Console()
logger = logging.getLogger(__name__)

_MAX_KEY_CHANGES = 20

Writer = Callable[[str, str], Path]


@dataclass(frozen=True)
class BranchInfo:
    branch: str
    stats: DiffStats


@dataclass
class ReviewSummary:
    """Result returned by run_review, enough for the CLI to report and chain."""

    identifier: str
    name: str
    path: Path | None
    document: ReportDocument
    quick: bool
    status: SafetyStatus | None = None  # None when the safety stage did not run
    issues: list[str] = field(default_factory=list)
    files_analyzed: int = 0


def gather_branch_info(settings: ReviewSettings) -> BranchInfo:
    root = settings.project_root
    branch = current_branch(root, timeout=settings.tool_timeout)
    stats = diff_stats(root, timeout=settings.tool_timeout)
    logger.info("Branch analysis complete: %s (%s)", branch, stats.describe())
    return BranchInfo(branch=branch, stats=stats)


def apply_branch_info(document: ReportDocument, info: BranchInfo) -> None:
    document.update(Section.BRANCH, info.branch)
    document.update(Section.FILES_CHANGED, info.stats.describe())
    names = info.stats.file_names
    if names:
        lines = [f"- `{name}`" for name in names[:_MAX_KEY_CHANGES]]
        if len(names) > _MAX_KEY_CHANGES:
            lines.append(f"- ... and {len(names) - _MAX_KEY_CHANGES} more")
        document.update(Section.KEY_CHANGES, "\n".join(lines))


def apply_analysis(document: ReportDocument, analysis: AnalysisResult) -> None:
    document.update(Section.CODE_QUALITY, analysis.summary())
    if analysis.issues:
        document.update(Section.MUST_FIX, analysis.issues_markdown())


def apply_safety(document: ReportDocument, report: SafetyReport) -> None:
    document.update(Section.TEST_RESULTS, report.render())


def apply_recommendation(document: ReportDocument, recommendation: Recommendation) -> None:
    document.update(Section.RECOMMENDATION, recommendation.render())


def run_review(
    identifier: ReviewIdentifier,
    settings: ReviewSettings,
    writer: Optional[Writer] = None,
    branch: str | None = None,
    quick: bool = False,
    focus_area: str | None = None,
    now: datetime | None = None,
) -> ReviewSummary:
    """Run the scratchpad pipeline and return a ReviewSummary.

    Collaborator failures never raise out of here; they show up in the
    scratchpad as degraded facts and in the summary status. ``writer`` is
    called with (name, text) after each stage; pass None for a dry run.
    """
    now = now or datetime.now()
    name = scratchpad_name(identifier, now.date())
    path: Path | None = None

    def persist(document: ReportDocument) -> None:
        nonlocal path
        if writer is not None:
            path = writer(name, document.render())

    logger.info("Starting PR review for: %s", identifier)
    console.print(f"[bold]Creating review scratchpad:[/bold] {name}")
    document = build_template(
        identifier,
        name=name,
        now=now,
        environment=platform.system(),
        reviewer=settings.reviewer,
        branch=branch,
        focus_area=focus_area,
    )
    persist(document)

    info = gather_branch_info(settings)
    apply_branch_info(document, info)
    persist(document)
    console.print(f"  Branch: [cyan]{document.content(Section.BRANCH)}[/cyan] ({info.stats.describe()})")

    summary = ReviewSummary(identifier=str(identifier), name=name, path=path, document=document, quick=quick)

    if quick:
        console.print("[yellow]Quick review mode - skipping detailed analysis.[/yellow]")
        return summary

    analysis = analyze_critical_files(settings.project_root)
    apply_analysis(document, analysis)
    persist(document)
    console.print(f"  Analyzed {len(analysis.records)} critical file(s), {len(analysis.issues)} critical issue(s).")

    report = run_safety_checks(settings)
    apply_safety(document, report)
    persist(document)

    recommendation = resolve(report.status)
    apply_recommendation(document, recommendation)
    persist(document)

    _status_color = {SafetyStatus.PASS: "green", SafetyStatus.PARTIAL_PASS: "yellow", SafetyStatus.FAIL: "red"}
    color = _status_color[report.status]
    console.print(
        f"  Safety tests: [{color}]{report.status.value}[/{color}] · "
        f"Approved for merge: {recommendation.approved_for_merge}"
    )

    summary.path = path
    summary.status = report.status
    summary.issues = list(analysis.issues)
    summary.files_analyzed = len(analysis.records)
    return summary
