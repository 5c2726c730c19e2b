"""Builds the initial scratchpad for a review."""

from __future__ import annotations

from datetime import datetime

from reviewpad_core.catalog import USAGE_LIMIT_PATTERNS
from reviewpad_core.document import ReportDocument, Section
from reviewpad_core.identifier import ReviewIdentifier


def build_template(
    identifier: ReviewIdentifier,
    name: str,
    now: datetime,
    environment: str,
    reviewer: str,
    branch: str | None = None,
    focus_area: str | None = None,
) -> ReportDocument:
    """Return a fresh scratchpad with every section slot pending.

    ``now`` and ``environment`` (the OS name) are injected so the output is
    reproducible. An explicit ``branch`` is filled in immediately, which turns
    the later branch-detection fill into a no-op.
    """
    day = now.strftime("%Y-%m-%d")
    stamp = now.strftime("%Y-%m-%d %H:%M:%S")
    focus_line = f"**Focus Area**: {focus_area}\n" if focus_area else ""
    patterns = "".join(f"- {p}\n" for p in USAGE_LIMIT_PATTERNS)

    parts = [
        f"# PR Review: {identifier}\n\n**Branch**: `",
        Section.BRANCH,
        f"`\n**Date**: {day}\n"
        f"**Reviewer**: {reviewer}\n"
        "**Priority**: Core functionality - task automation and usage limit detection\n"
        f"{focus_line}"
        "\n## 1. Review Context\n\n"
        "### PR Overview\n"
        "- **Focus**: Core functionality analysis for live operation\n"
        "- **Core Requirements**:\n"
        "  1. Task automation functionality\n"
        "  2. Detection/handling of program blocks until usage limits reset (xpm/am)\n"
        "  3. tmux integration without killing existing servers\n"
        "- **Files Changed**: ",
        Section.FILES_CHANGED,
        "\n\n### Key Changes Summary\n",
        Section.KEY_CHANGES,
        "\n\n## 2. Detailed Code Analysis\n\n"
        "### 2.1 Core File Analysis\n"
        "**Status**: PENDING\n"
        "**Priority**: CRITICAL (Main automation logic)\n\n"
        "**Review Focus Areas**:\n"
        "- Task automation processing\n"
        "- Usage limit detection patterns\n"
        "- tmux/claunch integration safety\n"
        "- Session management isolation\n"
        "- Monitoring system reliability\n\n"
        "### 2.2 Usage Limit Detection Analysis\n"
        "**Status**: PENDING\n"
        "**Priority**: HIGH (Essential for xpm/am handling)\n\n"
        "**Critical Patterns to Verify**:\n"
        f"{patterns}"
        "\n### 2.3 Integration Safety Analysis\n"
        "**Status**: PENDING\n"
        "**Priority**: HIGH (Live operation safety)\n\n"
        "**tmux Integration Checklist**:\n"
        "- [ ] Session prefix isolation (claude-auto-*)\n"
        "- [ ] Existing session preservation\n"
        "- [ ] Proper cleanup mechanisms\n"
        "- [ ] Fallback to direct Claude CLI mode\n\n"
        "## 3. Core Functionality Testing Plan\n\n"
        "### 3.1 Task Automation Testing\n"
        "- [ ] Queue status reporting\n"
        "- [ ] Task execution workflow\n"
        "- [ ] Error handling robustness\n"
        "- [ ] Integration with monitoring system\n\n"
        "### 3.2 Usage Limit Detection Testing\n"
        "- [ ] Pattern recognition accuracy\n"
        "- [ ] Timeout handling (30s standard)\n"
        "- [ ] PM/AM specific patterns\n"
        "- [ ] Recovery mechanism activation\n\n"
        "### 3.3 Live Operation Safety Testing\n"
        "- [ ] No disruption to existing tmux sessions\n"
        "- [ ] Graceful degradation on errors\n"
        "- [ ] Resource usage optimization\n"
        "- [ ] Continuous monitoring stability\n\n"
        "## 4. Test Execution Log\n\n"
        "### Test Environment Setup\n"
        f"**Time**: {stamp}\n"
        f"**Environment**: {environment} with tmux and Claude CLI\n\n"
        "### Test Results\n",
        Section.TEST_RESULTS,
        "\n\n## 5. Reviewer Agent Analysis\n\n"
        "### Code Quality Assessment\n",
        Section.CODE_QUALITY,
        "\n\n### Security & Safety Review\n",
        Section.SECURITY,
        "\n\n### Performance Impact Analysis\n",
        Section.PERFORMANCE,
        "\n\n## 6. Final Review Verdict\n\n"
        "### Must-Fix Issues (BLOCKING)\n",
        Section.MUST_FIX,
        "\n\n### Suggested Improvements (RECOMMENDED)\n",
        Section.SUGGESTIONS,
        "\n\n### Questions for Developer (DISCUSSION)\n",
        Section.QUESTIONS,
        "\n\n### Final Recommendation\n",
        Section.RECOMMENDATION,
        "\n\n---\n\n"
        f"**Review Scratchpad**: `{name}`\n"
        f"**Created**: {stamp}\n"
        "**Integration**: Task queue workflow compatible\n",
    ]

    document = ReportDocument(parts)
    if branch:
        document.update(Section.BRANCH, branch)
    return document
