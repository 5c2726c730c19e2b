"""Tests for review identifier normalization and naming."""

from datetime import date

import pytest

from reviewpad_core.identifier import ReviewIdentifier, normalize, parse_workflow_command, scratchpad_name


class TestNormalize:
    def test_bare_number_becomes_pr(self):
        assert normalize("106") == ReviewIdentifier("PR-106", "pr")

    def test_pr_prefix_kept(self):
        assert normalize("PR-106").value == "PR-106"

    def test_issue_prefix_kept(self):
        result = normalize("issue-115")
        assert result.value == "issue-115"
        assert result.kind == "issue"

    def test_workflow_prefix_kept(self):
        assert normalize("workflow-3").kind == "workflow"

    def test_branch_name_kept_verbatim(self):
        result = normalize("feature/array-optimization")
        assert result.value == "feature/array-optimization"
        assert result.kind == "other"

    def test_idempotent(self):
        once = normalize("94")
        assert normalize(once.value) == once

    def test_whitespace_stripped(self):
        assert normalize("  42 ").value == "PR-42"

    def test_non_ascii_digits_not_treated_as_number(self):
        result = normalize("\u00b2")
        assert result.value == "\u00b2"
        assert result.kind == "other"

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            normalize("")

    def test_str_is_value(self):
        assert str(normalize("7")) == "PR-7"


class TestScratchpadName:
    def test_lower_cases_identifier(self):
        assert scratchpad_name(normalize("PR-106"), date(2025, 9, 1)) == "2025-09-01_pr-review-pr-106.md"

    def test_branch_slashes_flattened(self):
        name = scratchpad_name(normalize("feature/Queue"), date(2025, 9, 1))
        assert name == "2025-09-01_pr-review-feature-queue.md"


class TestParseWorkflowCommand:
    def test_extracts_target(self):
        assert parse_workflow_command("/review PR-106") == "PR-106"

    def test_tolerates_extra_whitespace(self):
        assert parse_workflow_command("  /review   issue-94 ") == "issue-94"

    def test_rejects_other_commands(self):
        with pytest.raises(ValueError):
            parse_workflow_command("/deploy PR-106")

    def test_rejects_missing_target(self):
        with pytest.raises(ValueError):
            parse_workflow_command("/review")
