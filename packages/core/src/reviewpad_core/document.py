"""Scratchpad document model.

A scratchpad is an ordered sequence of literal markdown and named section
slots. A slot renders as its placeholder marker until it is filled, and it
can be filled exactly once. Because slots are addressed by identity rather
than found by scanning text, content that happens to contain a marker
string can never be mistaken for a pending slot.

Scratchpads already written to disk are plain markdown; ``fill_markdown``
fills a section there by locating the section's marker after its heading.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)


class ReplaceMode(str, Enum):
    FIRST = "first"
    ALL = "all"


class Section(Enum):
    """Named placeholder slots of a scratchpad: (marker, anchor heading, replace mode)."""

    BRANCH = ("auto-detected", "**Branch**:", ReplaceMode.ALL)
    FILES_CHANGED = ("[TO BE ANALYZED]", "### PR Overview", ReplaceMode.FIRST)
    KEY_CHANGES = ("[TO BE POPULATED DURING ANALYSIS]", "### Key Changes Summary", ReplaceMode.FIRST)
    TEST_RESULTS = ("[TO BE POPULATED DURING TESTING]", "### Test Results", ReplaceMode.FIRST)
    CODE_QUALITY = ("[DETAILED ANALYSIS TO BE ADDED]", "### Code Quality Assessment", ReplaceMode.FIRST)
    SECURITY = ("[SECURITY ANALYSIS TO BE ADDED]", "### Security & Safety Review", ReplaceMode.FIRST)
    PERFORMANCE = ("[PERFORMANCE ANALYSIS TO BE ADDED]", "### Performance Impact Analysis", ReplaceMode.FIRST)
    MUST_FIX = ("[TO BE POPULATED]", "### Must-Fix Issues (BLOCKING)", ReplaceMode.FIRST)
    SUGGESTIONS = ("[TO BE POPULATED]", "### Suggested Improvements (RECOMMENDED)", ReplaceMode.FIRST)
    QUESTIONS = ("[TO BE POPULATED]", "### Questions for Developer (DISCUSSION)", ReplaceMode.FIRST)
    RECOMMENDATION = (
        "**Status**: UNDER_REVIEW\n**Approved for Merge**: TBD\n**Requires Changes**: TBD",
        "### Final Recommendation",
        ReplaceMode.FIRST,
    )

    def __init__(self, marker: str, anchor: str, mode: ReplaceMode):
        self.marker = marker
        self.anchor = anchor
        self.mode = mode

    @property
    def slug(self) -> str:
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_slug(cls, slug: str) -> "Section":
        for section in cls:
            if section.slug == slug:
                return section
        raise ValueError(f"Unknown section: {slug!r}")


Part = Union[str, Section]


class ReportDocument:
    """In-memory scratchpad with fill-once section slots."""

    def __init__(self, parts: list[Part]):
        seen: set[Section] = set()
        for part in parts:
            if isinstance(part, Section):
                if part in seen:
                    raise ValueError(f"Section {part.name} appears more than once in the template")
                seen.add(part)
        missing = [s.name for s in Section if s not in seen]
        if missing:
            raise ValueError(f"Template is missing sections: {', '.join(missing)}")

        self._parts: list[Part] = list(parts)
        self._content: dict[Section, str] = {}
        self.version = 0

    def update(self, section: Section, text: str) -> bool:
        """Fill a pending section. Returns False (and changes nothing) if it was already filled."""
        if section in self._content:
            logger.debug("Section %s already filled; ignoring update", section.name)
            return False
        self._content[section] = text
        self.version += 1
        return True

    def is_filled(self, section: Section) -> bool:
        return section in self._content

    def content(self, section: Section) -> str | None:
        return self._content.get(section)

    def pending(self) -> list[Section]:
        """Unfilled sections in document order."""
        return [p for p in self._parts if isinstance(p, Section) and p not in self._content]

    def render(self) -> str:
        out = []
        for part in self._parts:
            if isinstance(part, Section):
                out.append(self._content.get(part, part.marker))
            else:
                out.append(part)
        return "".join(out)

    def __str__(self) -> str:
        return self.render()


def replace_marker(
    text: str,
    marker: str,
    replacement: str,
    mode: ReplaceMode = ReplaceMode.FIRST,
    anchor: str | None = None,
) -> str:
    """Replace ``marker`` in ``text`` and return the new text.

    Only occurrences after the first ``anchor`` are considered when an anchor
    is given. A missing marker (or anchor) leaves the text unchanged.
    """
    start = 0
    if anchor is not None:
        idx = text.find(anchor)
        if idx < 0:
            return text
        start = idx + len(anchor)

    head, tail = text[:start], text[start:]
    if mode == ReplaceMode.ALL:
        return head + tail.replace(marker, replacement)
    return head + tail.replace(marker, replacement, 1)


def fill_markdown(text: str, section: Section, replacement: str) -> tuple[str, bool]:
    """Fill ``section`` inside rendered scratchpad markdown.

    The marker must sit directly under the section's heading; this keeps
    sections that share a marker (the three ``[TO BE POPULATED]`` verdict
    lists) apart.
    """
    idx = text.find(section.anchor)
    if idx < 0:
        return text, False
    body_start = idx + len(section.anchor)
    next_heading = text.find("\n#", body_start)
    body_end = len(text) if next_heading < 0 else next_heading
    body = text[body_start:body_end]
    if section.marker not in body:
        return text, False

    new_body = replace_marker(body, section.marker, replacement, section.mode)
    return text[:body_start] + new_body + text[body_end:], True
