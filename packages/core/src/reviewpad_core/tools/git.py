from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from reviewpad_core.tools.result import run_tool

_INSERTIONS_RE = re.compile(r"(\d+) insertion")
_DELETIONS_RE = re.compile(r"(\d+) deletion")


@dataclass(frozen=True)
class DiffStats:
    """Change counts for the most recent commit. None means git could not tell us."""

    files_changed: int | None = None
    additions: int | None = None
    deletions: int | None = None
    file_names: list[str] = field(default_factory=list)

    def describe(self) -> str:
        def fmt(value: int | None) -> str:
            return "unknown" if value is None else str(value)

        return f"{fmt(self.files_changed)} files, +{fmt(self.additions)}/-{fmt(self.deletions)} lines"


def current_branch(cwd: Path, timeout: int = 30) -> str:
    result = run_tool(["git", "rev-parse", "--abbrev-ref", "HEAD"], cwd=cwd, timeout=timeout)
    branch = result.stdout.strip() if result.ok else ""
    return branch or "unknown"


def diff_stats(cwd: Path, timeout: int = 30) -> DiffStats:
    """Return file and line counts for HEAD~1..HEAD."""
    names_result = run_tool(["git", "diff", "--name-only", "HEAD~1"], cwd=cwd, timeout=timeout)
    stat_result = run_tool(["git", "diff", "--shortstat", "HEAD~1"], cwd=cwd, timeout=timeout)

    names: list[str] = []
    files_changed = None
    if names_result.ok:
        names = [line.strip() for line in names_result.stdout.splitlines() if line.strip()]
        files_changed = len(names)

    additions = deletions = None
    if stat_result.ok:
        # --shortstat prints nothing for an empty diff, and omits a side with no changes.
        match = _INSERTIONS_RE.search(stat_result.stdout)
        additions = int(match.group(1)) if match else 0
        match = _DELETIONS_RE.search(stat_result.stdout)
        deletions = int(match.group(1)) if match else 0

    return DiffStats(files_changed=files_changed, additions=additions, deletions=deletions, file_names=names)
