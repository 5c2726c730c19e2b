"""Calls into the automation project's own executables (task queue, hybrid monitor)."""

from __future__ import annotations

import os
from pathlib import Path

from reviewpad_core.tools.result import ToolResult, ToolStatus, run_tool


def _unavailable_unless_executable(script: Path) -> ToolResult | None:
    if not script.is_file() or not os.access(script, os.X_OK):
        return ToolResult(ToolStatus.UNAVAILABLE, reason=f"{script.name} not found or not executable")
    return None


def queue_status(script: Path, cwd: Path | None = None, timeout: int = 30) -> ToolResult:
    return _unavailable_unless_executable(script) or run_tool([script, "status"], cwd=cwd, timeout=timeout)


def monitor_help(script: Path, cwd: Path | None = None, timeout: int = 30) -> ToolResult:
    return _unavailable_unless_executable(script) or run_tool([script, "--help"], cwd=cwd, timeout=timeout)


def enqueue_review(
    script: Path,
    identifier: str,
    priority: str = "normal",
    task_timeout: int = 1800,
    cwd: Path | None = None,
    timeout: int = 30,
) -> ToolResult:
    """Register a review of ``identifier`` as a custom task in the queue."""
    unavailable = _unavailable_unless_executable(script)
    if unavailable:
        return unavailable
    return run_tool(
        [
            script,
            "add-custom",
            f"Review PR/Issue: {identifier}",
            "--command",
            f"reviewpad workflow '/review {identifier}'",
            "--priority",
            priority,
            "--timeout",
            str(task_timeout),
            "--completion-marker",
            "REVIEW_SUCCESS",
        ],
        cwd=cwd,
        timeout=timeout,
    )
