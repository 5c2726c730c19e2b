from __future__ import annotations

from dataclasses import dataclass

from reviewpad_core.safety import SafetyStatus

ANALYSIS_COMPLETE = "ANALYSIS_COMPLETE"


@dataclass(frozen=True)
class Recommendation:
    status: str
    approved_for_merge: str
    requires_changes: str

    def render(self) -> str:
        return (
            f"**Status**: {self.status}\n"
            f"**Approved for Merge**: {self.approved_for_merge}\n"
            f"**Requires Changes**: {self.requires_changes}"
        )


_RECOMMENDATIONS = {
    SafetyStatus.PASS: Recommendation(ANALYSIS_COMPLETE, "PENDING_FINAL_REVIEW", "None identified in core functionality"),
    SafetyStatus.PARTIAL_PASS: Recommendation(ANALYSIS_COMPLETE, "CONDITIONAL (see test failures)", "Address failing tests"),
    SafetyStatus.FAIL: Recommendation(ANALYSIS_COMPLETE, "NO", "Critical functionality broken"),
}


def resolve(status: SafetyStatus) -> Recommendation:
    """Map the aggregated safety status to the final verdict block."""
    return _RECOMMENDATIONS[status]
