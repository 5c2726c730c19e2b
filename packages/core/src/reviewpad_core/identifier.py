from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

_TAGGED_PREFIXES = {"PR-": "pr", "issue-": "issue", "workflow-": "workflow"}
_WORKFLOW_COMMAND_RE = re.compile(r"^/review\s+(.+)$")


@dataclass(frozen=True)
class ReviewIdentifier:
    """A normalized review target: ``PR-106``, ``issue-115``, ``workflow-3`` or a branch name."""

    value: str
    kind: str  # "pr" | "issue" | "workflow" | "other"

    def __str__(self) -> str:
        return self.value


def normalize(raw: str) -> ReviewIdentifier:
    """Normalize a raw CLI identifier.

    Bare numbers become ``PR-<n>``; already tagged values are returned as-is,
    so normalizing twice is a no-op. Anything else is kept verbatim and treated
    as a branch or free-form identifier.
    """
    value = (raw or "").strip()
    if not value:
        raise ValueError("PR identifier is required")

    for prefix, kind in _TAGGED_PREFIXES.items():
        if value.startswith(prefix):
            return ReviewIdentifier(value=value, kind=kind)

    if re.fullmatch(r"[0-9]+", value):
        return ReviewIdentifier(value=f"PR-{value}", kind="pr")

    return ReviewIdentifier(value=value, kind="other")


def scratchpad_name(identifier: ReviewIdentifier, day: date) -> str:
    """Return the scratchpad file name for an identifier on a given day."""
    slug = identifier.value.lower().replace("/", "-")
    return f"{day:%Y-%m-%d}_pr-review-{slug}.md"


def parse_workflow_command(command: str) -> str:
    """Extract the review target from a ``/review <target>`` workflow command."""
    match = _WORKFLOW_COMMAND_RE.match(command.strip())
    if not match:
        raise ValueError(f"Invalid review command format: {command!r}")
    return match.group(1).strip()
