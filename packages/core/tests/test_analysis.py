"""Tests for the critical file analyzer."""

from reviewpad_core.analysis import AnalysisResult, analyze_critical_files, analyze_file, critical_issues


def _write(root, rel, content):
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


class TestAnalyzeFile:
    def test_counts_each_pattern_once(self):
        content = "Rate limit\nRate limit again\nUsage limit\n"
        record = analyze_file("src/x.sh", content)
        assert record.pattern_match_count == 2

    def test_pattern_match_is_case_sensitive(self):
        assert analyze_file("src/x.sh", "rate LIMIT").pattern_match_count == 0

    def test_regex_like_pattern_matched_literally(self):
        assert analyze_file("src/x.sh", "pm|am.*try.*again").pattern_match_count == 1
        assert analyze_file("src/x.sh", "3pm please try again").pattern_match_count == 0

    def test_all_patterns(self):
        content = "\n".join(
            [
                "Please try again",
                "Rate limit",
                "Usage limit",
                "Try again later",
                "Claude is currently overloaded",
                "Too many requests",
                "Service temporarily unavailable",
                "pm|am.*try.*again",
            ]
        )
        assert analyze_file("src/x.sh", content).pattern_match_count == 8

    def test_isolation_marker(self):
        assert analyze_file("a", 'SESSION="claude-auto-$$"').has_isolation_marker is True
        assert analyze_file("a", "tmux new -s other").has_isolation_marker is False

    def test_automation_vocabulary_case_insensitive(self):
        assert analyze_file("a", "# TASK runner").has_automation_vocabulary is True
        assert analyze_file("a", "QueueManager").has_automation_vocabulary is True
        assert analyze_file("a", "echo hello").has_automation_vocabulary is False


class TestCriticalIssues:
    def test_usage_limit_rule_on_recovery_file(self):
        record = analyze_file("src/usage-limit-recovery.sh", "claude-auto")
        assert critical_issues(record) == ["src/usage-limit-recovery.sh: Missing usage limit detection patterns"]

    def test_session_rule_on_session_manager(self):
        record = analyze_file("src/session-manager.sh", "nothing")
        assert critical_issues(record) == ["src/session-manager.sh: Missing tmux session safety measures"]

    def test_both_rules_fire_on_hybrid_monitor(self):
        record = analyze_file("src/hybrid-monitor.sh", "echo hi")
        assert critical_issues(record) == [
            "src/hybrid-monitor.sh: Missing usage limit detection patterns",
            "src/hybrid-monitor.sh: Missing tmux session safety measures",
        ]

    def test_rules_do_not_apply_to_other_files(self):
        record = analyze_file("src/task-queue.sh", "echo hi")
        assert critical_issues(record) == []

    def test_no_issue_when_safe(self):
        record = analyze_file("src/hybrid-monitor.sh", "Rate limit claude-auto")
        assert critical_issues(record) == []


class TestAnalyzeCriticalFiles:
    def test_missing_files_skipped(self, tmp_path):
        result = analyze_critical_files(tmp_path)
        assert result.records == []
        assert result.issues == []

    def test_scan_order_and_issue_order(self, tmp_path):
        _write(tmp_path, "src/session-manager.sh", "plain")
        _write(tmp_path, "src/hybrid-monitor.sh", "plain")
        _write(tmp_path, "src/usage-limit-recovery.sh", "claude-auto")

        result = analyze_critical_files(tmp_path)

        assert [r.path for r in result.records] == [
            "src/hybrid-monitor.sh",
            "src/usage-limit-recovery.sh",
            "src/session-manager.sh",
        ]
        assert result.issues == [
            "src/hybrid-monitor.sh: Missing usage limit detection patterns",
            "src/hybrid-monitor.sh: Missing tmux session safety measures",
            "src/usage-limit-recovery.sh: Missing usage limit detection patterns",
            "src/session-manager.sh: Missing tmux session safety measures",
        ]

    def test_deterministic(self, tmp_path):
        _write(tmp_path, "src/hybrid-monitor.sh", "Rate limit task")
        _write(tmp_path, "src/task-queue.sh", "queue claude-auto")
        first = analyze_critical_files(tmp_path)
        second = analyze_critical_files(tmp_path)
        assert first.records == second.records
        assert first.issues == second.issues


class TestSummary:
    def test_paragraph_per_file(self):
        result = AnalysisResult(
            records=[
                analyze_file("src/hybrid-monitor.sh", "Rate limit claude-auto task"),
                analyze_file("src/task-queue.sh", "echo"),
            ]
        )
        summary = result.summary()
        assert "### Analysis: src/hybrid-monitor.sh\n- Usage limit patterns: 1/8\n" in summary
        assert "- tmux safety measures: ✅ Present" in summary
        assert "### Analysis: src/task-queue.sh" in summary
        assert "- Task automation elements: ❌ Missing" in summary

    def test_empty_summary(self):
        assert "No critical files" in AnalysisResult().summary()

    def test_issues_markdown(self):
        result = AnalysisResult(issues=["a: x", "b: y"])
        assert result.issues_markdown() == "- a: x\n- b: y"
