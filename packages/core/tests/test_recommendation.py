"""Tests for the recommendation resolver."""

import pytest

from reviewpad_core.recommendation import resolve
from reviewpad_core.safety import SafetyStatus


@pytest.mark.parametrize(
    "status, expected",
    [
        (
            SafetyStatus.PASS,
            "**Status**: ANALYSIS_COMPLETE\n"
            "**Approved for Merge**: PENDING_FINAL_REVIEW\n"
            "**Requires Changes**: None identified in core functionality",
        ),
        (
            SafetyStatus.PARTIAL_PASS,
            "**Status**: ANALYSIS_COMPLETE\n"
            "**Approved for Merge**: CONDITIONAL (see test failures)\n"
            "**Requires Changes**: Address failing tests",
        ),
        (
            SafetyStatus.FAIL,
            "**Status**: ANALYSIS_COMPLETE\n"
            "**Approved for Merge**: NO\n"
            "**Requires Changes**: Critical functionality broken",
        ),
    ],
)
def test_fixed_block_per_status(status, expected):
    assert resolve(status).render() == expected


def test_mapping_is_total():
    assert {resolve(s).approved_for_merge for s in SafetyStatus} == {
        "PENDING_FINAL_REVIEW",
        "CONDITIONAL (see test failures)",
        "NO",
    }


def test_resolve_is_pure():
    assert resolve(SafetyStatus.FAIL) == resolve(SafetyStatus.FAIL)
