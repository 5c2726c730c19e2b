from __future__ import annotations

from reviewpad_core.tools.result import ToolStatus, run_tool


def count_sessions(timeout: int = 30) -> int | None:
    """Return the number of tmux sessions, 0 if no server runs, None if tmux is unavailable.

    Read-only: list-sessions never creates or kills a session.
    """
    result = run_tool(["tmux", "list-sessions"], timeout=timeout)
    if result.status is ToolStatus.UNAVAILABLE:
        return None
    if not result.ok:
        # tmux exits non-zero with "no server running" when there are no sessions.
        return 0
    return len([line for line in result.stdout.splitlines() if line.strip()])
