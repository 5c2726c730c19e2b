"""Scratchpad listing models.

Decoupled from reviewpad_core so the store layer has no knowledge of how
documents are built.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ScratchpadRecord:
    """A scratchpad file found in the store."""

    name: str
    path: Path
    state: str  # "active" | "completed"
    date: str  # YYYY-MM-DD prefix of the file name
    identifier: str  # from the "# PR Review: ..." title, "" if absent
    status: str  # final recommendation status, e.g. UNDER_REVIEW or ANALYSIS_COMPLETE
    approved_for_merge: str = ""
