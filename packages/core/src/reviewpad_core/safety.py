"""Live-environment safety checks.

Three checks run in a fixed order, each independently of the others:

  1. tmux session safety: informational, always passes (nothing is mutated)
  2. task queue liveness: failure downgrades the run to PARTIAL_PASS
  3. monitor liveness: failure forces FAIL

The overall status is the worst outcome seen, so a FAIL can never be undone
by a later PASS.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from reviewpad_core.config import ReviewSettings
from reviewpad_core.tools.result import ToolResult, ToolStatus
from reviewpad_core.tools.subsystems import monitor_help, queue_status
from reviewpad_core.tools.tmux import count_sessions

logger = logging.getLogger(__name__)

_QUEUE_STATUS_LINES = 5


class SafetyStatus(str, Enum):
    PASS = "PASS"
    PARTIAL_PASS = "PARTIAL_PASS"
    FAIL = "FAIL"


_STATUS_RANK = {SafetyStatus.PASS: 0, SafetyStatus.PARTIAL_PASS: 1, SafetyStatus.FAIL: 2}


def worst(outcomes: Iterable[SafetyStatus]) -> SafetyStatus:
    """Aggregate outcomes on the PASS < PARTIAL_PASS < FAIL lattice."""
    return max(outcomes, key=_STATUS_RANK.__getitem__, default=SafetyStatus.PASS)


@dataclass
class CheckResult:
    number: int
    title: str
    outcome: SafetyStatus
    lines: list[str] = field(default_factory=list)
    tool: ToolResult | None = None

    def render(self) -> str:
        body = "\n".join(self.lines)
        return f"**Test {self.number} - {self.title}**:\n{body}"


@dataclass
class SafetyReport:
    checks: list[CheckResult] = field(default_factory=list)

    @property
    def status(self) -> SafetyStatus:
        return worst(c.outcome for c in self.checks)

    def render(self) -> str:
        return "\n\n".join(c.render() for c in self.checks)


def _skipped(number: int, title: str, tool: ToolResult) -> CheckResult:
    return CheckResult(
        number=number,
        title=title,
        outcome=SafetyStatus.PASS,
        lines=[f"- Status: ⚠️ Skipped ({tool.reason})"],
        tool=tool,
    )


def check_session_safety(settings: ReviewSettings) -> CheckResult:
    sessions = count_sessions(timeout=settings.tool_timeout)
    return CheckResult(
        number=1,
        title="tmux Session Safety",
        outcome=SafetyStatus.PASS,
        lines=[
            f"- Existing tmux sessions: {'unknown' if sessions is None else sessions}",
            "- Status: ✅ Safe (monitoring will not interfere)",
        ],
    )


def _fence_for(lines: list[str]) -> str:
    """Return a code fence longer than any backtick run inside ``lines``."""
    longest = max((len(run) for line in lines for run in re.findall(r"`+", line)), default=0)
    return "`" * max(3, longest + 1)


def check_queue(settings: ReviewSettings) -> CheckResult:
    title = "Task Queue Functionality"
    tool = queue_status(settings.queue_script, cwd=settings.project_root, timeout=settings.tool_timeout)
    if tool.status is ToolStatus.UNAVAILABLE:
        return _skipped(2, title, tool)
    if tool.ok:
        lines = ["- Queue accessibility: ✅ Working", "- Status: ✅ Functional"]
        head = [line for line in tool.stdout.splitlines() if line.strip()][:_QUEUE_STATUS_LINES]
        if head:
            lines.append("- Queue status output:")
            fence = _fence_for(head)
            lines.append(fence)
            lines.extend(head)
            lines.append(fence)
        return CheckResult(2, title, SafetyStatus.PASS, lines, tool)
    return CheckResult(
        2,
        title,
        SafetyStatus.PARTIAL_PASS,
        [
            "- Queue accessibility: ❌ Error",
            "- Status: ❌ Needs Investigation",
            f"- Reason: {tool.reason}",
        ],
        tool,
    )


def check_monitor(settings: ReviewSettings) -> CheckResult:
    title = "Monitoring System"
    tool = monitor_help(settings.monitor_script, cwd=settings.project_root, timeout=settings.tool_timeout)
    if tool.status is ToolStatus.UNAVAILABLE:
        return _skipped(3, title, tool)
    if tool.ok:
        lines = ["- Script executability: ✅ Working", "- Help system: ✅ Functional"]
        return CheckResult(3, title, SafetyStatus.PASS, lines, tool)
    lines = ["- Script executability: ❌ Error", f"- Reason: {tool.reason}"]
    return CheckResult(3, title, SafetyStatus.FAIL, lines, tool)


def run_safety_checks(settings: ReviewSettings) -> SafetyReport:
    report = SafetyReport()
    for check in (check_session_safety, check_queue, check_monitor):
        result = check(settings)
        logger.debug("Check %d (%s): %s", result.number, result.title, result.outcome.value)
        report.checks.append(result)
    logger.info("Safety tests complete. Overall status: %s", report.status.value)
    return report
