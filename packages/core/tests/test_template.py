"""Tests for the initial scratchpad template."""

from datetime import datetime

from reviewpad_core.catalog import USAGE_LIMIT_PATTERNS
from reviewpad_core.document import Section
from reviewpad_core.identifier import normalize
from reviewpad_core.template import build_template

NOW = datetime(2025, 9, 1, 14, 30, 5)


def _build(**kwargs):
    defaults = dict(
        identifier=normalize("106"),
        name="2025-09-01_pr-review-pr-106.md",
        now=NOW,
        environment="Linux",
        reviewer="Review Agent",
    )
    defaults.update(kwargs)
    return build_template(**defaults)


def test_header_contains_identifier_and_dates():
    text = _build().render()
    assert text.startswith("# PR Review: PR-106\n")
    assert "**Date**: 2025-09-01" in text
    assert "**Time**: 2025-09-01 14:30:05" in text
    assert "**Environment**: Linux with tmux and Claude CLI" in text
    assert "**Review Scratchpad**: `2025-09-01_pr-review-pr-106.md`" in text


def test_all_sections_pending_without_branch():
    doc = _build()
    assert doc.pending() == list(Section)
    assert "**Branch**: `auto-detected`" in doc.render()


def test_explicit_branch_filled_at_build_time():
    doc = _build(branch="feature/queue")
    assert doc.is_filled(Section.BRANCH)
    assert "**Branch**: `feature/queue`" in doc.render()
    assert "auto-detected" not in doc.render()


def test_pattern_catalog_embedded_in_order():
    text = _build().render()
    block_start = text.index("**Critical Patterns to Verify**:\n") + len("**Critical Patterns to Verify**:\n")
    block = text[block_start:].split("\n\n", 1)[0].splitlines()
    assert block == [f"- {p}" for p in USAGE_LIMIT_PATTERNS]
    assert len(block) == 8


def test_recommendation_starts_under_review():
    text = _build().render()
    assert "### Final Recommendation\n**Status**: UNDER_REVIEW\n**Approved for Merge**: TBD\n**Requires Changes**: TBD" in text


def test_focus_area_line_only_when_given():
    assert "**Focus Area**" not in _build().render()
    assert "**Focus Area**: usage_limits" in _build(focus_area="usage_limits").render()


def test_no_template_syntax_left():
    text = _build().render()
    assert "{" not in text
    assert "}" not in text


def test_reviewer_name_rendered():
    assert "**Reviewer**: Bot" in _build(reviewer="Bot").render()
