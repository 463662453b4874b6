from __future__ import annotations

import token_tracker
from token_tracker import TokenTracker, reset_tracker


def test_estimates_roughly_four_chars_per_token():
    tracker = TokenTracker()
    assert tracker.estimate_tokens("") == 0
    assert tracker.estimate_tokens("abc") == 1
    assert tracker.estimate_tokens("a" * 40) == 10


def test_summary_totals():
    tracker = TokenTracker()
    tracker.record("NodeExtraction", "p" * 40, "r" * 8, 1.0, system_prompt="s" * 4,
                   actual_prompt_tokens=12, actual_response_tokens=3)
    tracker.record("Summary", "p" * 4, "", 0.5)
    summary = tracker.get_summary()
    assert summary["num_calls"] == 2
    assert summary["num_failed"] == 1
    assert summary["totals"]["estimated_tokens"] == 10 + 1 + 2 + 1
    assert summary["totals"]["actual_tokens"] == 15
    assert summary["totals"]["duration_seconds"] == 1.5


def test_print_report_without_calls(capsys):
    TokenTracker().print_report()
    assert "No LLM calls" in capsys.readouterr().out


def test_reset_tracker_replaces_global():
    old = token_tracker.tracker
    new = reset_tracker()
    assert new is token_tracker.tracker
    assert new is not old
