"""Static analysis of the automation project's critical files.

Best-effort by nature: files that do not exist in the checkout are skipped,
and the result only ever adds facts and issues to the scratchpad. It is not
a verification gate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from reviewpad_core.catalog import (
    AUTOMATION_VOCABULARY,
    CRITICAL_FILES,
    ISOLATION_MARKER,
    SESSION_SAFETY_RULE_FILES,
    USAGE_LIMIT_PATTERNS,
    USAGE_LIMIT_RULE_FILES,
)

logger = logging.getLogger(__name__)

_PRESENT = "✅ Present"
_MISSING = "❌ Missing"


@dataclass(frozen=True)
class CriticalFileRecord:
    path: str
    pattern_match_count: int
    has_isolation_marker: bool
    has_automation_vocabulary: bool


@dataclass
class AnalysisResult:
    records: list[CriticalFileRecord] = field(default_factory=list)
    issues: list[str] = field(default_factory=list)

    def summary(self) -> str:
        """Markdown block with one paragraph per analysed file."""
        if not self.records:
            return "_No critical files found in the project checkout._"
        total = len(USAGE_LIMIT_PATTERNS)
        blocks = []
        for r in self.records:
            blocks.append(
                f"### Analysis: {r.path}\n"
                f"- Usage limit patterns: {r.pattern_match_count}/{total}\n"
                f"- tmux safety measures: {_PRESENT if r.has_isolation_marker else _MISSING}\n"
                f"- Task automation elements: {_PRESENT if r.has_automation_vocabulary else _MISSING}"
            )
        return "\n\n".join(blocks)

    def issues_markdown(self) -> str:
        return "\n".join(f"- {issue}" for issue in self.issues)


def analyze_file(path: str, content: str) -> CriticalFileRecord:
    return CriticalFileRecord(
        path=path,
        pattern_match_count=sum(1 for pattern in USAGE_LIMIT_PATTERNS if pattern in content),
        has_isolation_marker=ISOLATION_MARKER in content,
        has_automation_vocabulary=AUTOMATION_VOCABULARY.search(content) is not None,
    )


def critical_issues(record: CriticalFileRecord) -> list[str]:
    """Issues raised for one file. Both rules may fire for the same file."""
    issues = []
    if record.pattern_match_count == 0 and any(name in record.path for name in USAGE_LIMIT_RULE_FILES):
        issues.append(f"{record.path}: Missing usage limit detection patterns")
    if not record.has_isolation_marker and any(name in record.path for name in SESSION_SAFETY_RULE_FILES):
        issues.append(f"{record.path}: Missing tmux session safety measures")
    return issues


def analyze_critical_files(project_root: Path, files: tuple[str, ...] = CRITICAL_FILES) -> AnalysisResult:
    result = AnalysisResult()
    for rel_path in files:
        full_path = project_root / rel_path
        if not full_path.is_file():
            logger.debug("Skipping %s (not present)", rel_path)
            continue
        try:
            content = full_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning("Could not read %s: %s", rel_path, e)
            continue

        logger.info("Analyzing %s for core functionality", rel_path)
        record = analyze_file(rel_path, content)
        result.records.append(record)
        result.issues.extend(critical_issues(record))

    logger.info("Core analysis complete. Found %d critical issue(s).", len(result.issues))
    return result
