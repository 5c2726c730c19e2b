"""Uniform wrapper around external command invocations.

Every collaborator call (git, tmux, the queue and monitor scripts) goes
through run_tool() and comes back as a ToolResult instead of raising. The
pipeline degrades facts and test outcomes from these results; it never
aborts because a collaborator is missing or failed.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)


class ToolStatus(str, Enum):
    SUCCESS = "success"
    DEGRADED = "degraded"  # ran, but failed or timed out
    UNAVAILABLE = "unavailable"  # could not be started at all


@dataclass(frozen=True)
class ToolResult:
    status: ToolStatus
    stdout: str = ""
    reason: str = ""
    returncode: int | None = None

    @property
    def ok(self) -> bool:
        return self.status is ToolStatus.SUCCESS


def run_tool(args: Sequence[str], cwd: Path | None = None, timeout: int = 30) -> ToolResult:
    """Run a command once and classify the outcome. Never raises for tool failures."""
    cmd = [str(a) for a in args]
    try:
        result = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except (FileNotFoundError, PermissionError) as e:
        logger.debug("%s could not be started: %s", cmd[0], e)
        return ToolResult(ToolStatus.UNAVAILABLE, reason=f"{cmd[0]} not available")
    except OSError as e:
        # started but could not exec, e.g. a script without a shebang
        logger.warning("%s failed to run: %s", cmd[0], e)
        return ToolResult(ToolStatus.DEGRADED, reason=str(e))
    except subprocess.TimeoutExpired:
        logger.warning("%s timed out after %ds", " ".join(cmd), timeout)
        return ToolResult(ToolStatus.DEGRADED, reason=f"timed out after {timeout}s")

    if result.returncode != 0:
        stderr = (result.stderr or "").strip().splitlines()
        reason = stderr[-1] if stderr else f"exit code {result.returncode}"
        logger.debug("%s exited with %d: %s", " ".join(cmd), result.returncode, reason)
        return ToolResult(ToolStatus.DEGRADED, stdout=result.stdout or "", reason=reason, returncode=result.returncode)

    return ToolResult(ToolStatus.SUCCESS, stdout=result.stdout or "", returncode=0)
