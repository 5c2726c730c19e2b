"""FileStore — scratchpads as markdown files in active/completed directories.

Layout (relative to the reviewed project by default):
  scratchpads/active/     reviews in progress, written by the pipeline
  scratchpads/completed/  reviews moved out with `reviewpad complete`

Writes go to a temporary file in the target directory followed by
os.replace(), so a reader never observes a half-written scratchpad.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path

from reviewpad_store.base import ScratchpadStore
from reviewpad_store.models import ScratchpadRecord

logger = logging.getLogger(__name__)

_SCRATCHPAD_GLOB = "*_pr-review-*.md"
_TITLE_RE = re.compile(r"^# PR Review: (.+)$", re.MULTILINE)
_STATUS_RE = re.compile(r"^\*\*Status\*\*: (\S+)", re.MULTILINE)
_APPROVED_RE = re.compile(r"^\*\*Approved for Merge\*\*: (.+)$", re.MULTILINE)
_DATE_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})_")


class FileStore(ScratchpadStore):
    def __init__(self, active_dir: Path, completed_dir: Path):
        self._active_dir = Path(active_dir)
        self._completed_dir = Path(completed_dir)

    @property
    def active_dir(self) -> Path:
        return self._active_dir

    @property
    def completed_dir(self) -> Path:
        return self._completed_dir

    def save(self, name: str, text: str) -> Path:
        self._active_dir.mkdir(parents=True, exist_ok=True)
        target = self._active_dir / name
        fd, tmp_path = tempfile.mkstemp(dir=self._active_dir, prefix=".tmp-", suffix=".md")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(text)
            os.replace(tmp_path, target)
        except Exception:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        logger.debug("Wrote %s (%d bytes)", target, len(text))
        return target

    def load(self, name: str) -> str:
        path = self._active_dir / name
        if not path.is_file():
            raise FileNotFoundError(f"No active scratchpad named {name!r} in {self._active_dir}")
        return path.read_text(encoding="utf-8")

    def complete(self, name: str) -> Path:
        source = self._active_dir / name
        if not source.is_file():
            raise FileNotFoundError(f"No active scratchpad named {name!r} in {self._active_dir}")
        self._completed_dir.mkdir(parents=True, exist_ok=True)
        target = self._completed_dir / name
        os.replace(source, target)
        logger.info("Moved %s to %s", name, self._completed_dir)
        return target

    def list_scratchpads(self, state: str = "all") -> list[ScratchpadRecord]:
        dirs = []
        if state in ("active", "all"):
            dirs.append(("active", self._active_dir))
        if state in ("completed", "all"):
            dirs.append(("completed", self._completed_dir))

        records = []
        for label, directory in dirs:
            if not directory.is_dir():
                continue
            for path in sorted(directory.glob(_SCRATCHPAD_GLOB)):
                try:
                    records.append(self._read_record(path, label))
                except OSError as e:
                    logger.warning("Could not read %s: %s", path, e)
        records.sort(key=lambda r: (r.date, r.name))
        return records

    @staticmethod
    def _read_record(path: Path, state: str) -> ScratchpadRecord:
        text = path.read_text(encoding="utf-8")
        title = _TITLE_RE.search(text)
        # The last **Status** line is the final recommendation; earlier ones are per-section.
        statuses = _STATUS_RE.findall(text)
        approved = _APPROVED_RE.search(text)
        date = _DATE_RE.match(path.name)
        return ScratchpadRecord(
            name=path.name,
            path=path,
            state=state,
            date=date.group(1) if date else "",
            identifier=title.group(1).strip() if title else "",
            status=statuses[-1] if statuses else "",
            approved_for_merge=approved.group(1).strip() if approved else "",
        )
