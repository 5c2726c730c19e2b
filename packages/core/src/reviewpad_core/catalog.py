"""Static catalogs the scratchpad engine checks changes against.

The usage-limit patterns are the strings the monitored AI CLI prints when it
throttles or rejects a request. They are embedded verbatim in every
scratchpad and counted per critical file during analysis.
"""

from __future__ import annotations

import re

CORE_FUNCTIONALITY_AREAS: tuple[str, ...] = (
    "automated_task_processing",
    "usage_limit_detection_handling",
    "tmux_claunch_integration",
    "session_management_safety",
    "monitoring_system_reliability",
)

FOCUS_AREAS: tuple[str, ...] = ("task_automation", "usage_limits", "tmux_integration")

USAGE_LIMIT_PATTERNS: tuple[str, ...] = (
    "Please try again",
    "Rate limit",
    "Usage limit",
    "Try again later",
    "Claude is currently overloaded",
    "Too many requests",
    "Service temporarily unavailable",
    "pm|am.*try.*again",
)

CRITICAL_FILES: tuple[str, ...] = (
    "src/hybrid-monitor.sh",
    "src/task-queue.sh",
    "src/usage-limit-recovery.sh",
    "src/session-manager.sh",
    "src/claunch-integration.sh",
)

# Session-name prefix used by the automation for every tmux session it owns.
ISOLATION_MARKER = "claude-auto"

AUTOMATION_VOCABULARY = re.compile(r"task|queue|automation", re.IGNORECASE)

# File identities the critical-issue rules apply to (substring match on the path).
USAGE_LIMIT_RULE_FILES: tuple[str, ...] = ("usage-limit", "hybrid-monitor")
SESSION_SAFETY_RULE_FILES: tuple[str, ...] = ("session-manager", "hybrid-monitor")
