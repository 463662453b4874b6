# src/token_tracker.py

"""
Token tracking for LLM calls.
Records input tokens, output tokens, system tokens, and timing for every call.

Token estimation uses the ~4 characters per token approximation.
Providers also return actual token counts in the `usage` block when available.

The report is printed to the console only; nothing is written to disk.
"""

import time
from typing import Dict, List
from dataclasses import dataclass


@dataclass
class CallRecord:
    """Record of a single LLM call."""
    call_name: str
    prompt_tokens_est: int
    system_tokens_est: int
    response_tokens_est: int
    duration_seconds: float
    prompt_tokens_actual: int = 0
    response_tokens_actual: int = 0
    failed: bool = False

    @property
    def total_tokens_est(self) -> int:
        return self.prompt_tokens_est + self.system_tokens_est + self.response_tokens_est

    @property
    def total_tokens_actual(self) -> int:
        return self.prompt_tokens_actual + self.response_tokens_actual


class TokenTracker:
    """
    Tracks token usage across all LLM calls in one Simplify run.

    Usage:
        tracker = TokenTracker()
        tracker.record("NodeExtraction", prompt, response, duration, system)
        ...
        tracker.print_report()
    """

    def __init__(self):
        self.calls: List[CallRecord] = []
        self.start_time: float = time.time()

    def estimate_tokens(self, text: str) -> int:
        """Estimate token count. ~4 chars per token."""
        if not text:
            return 0
        return max(1, len(text) // 4)

    def record(
        self,
        call_name: str,
        prompt: str,
        response: str,
        duration: float,
        system_prompt: str = "",
        actual_prompt_tokens: int = 0,
        actual_response_tokens: int = 0
    ):
        """Record a single LLM call. An empty response marks a failed call."""
        self.calls.append(CallRecord(
            call_name=call_name,
            prompt_tokens_est=self.estimate_tokens(prompt),
            system_tokens_est=self.estimate_tokens(system_prompt),
            response_tokens_est=self.estimate_tokens(response),
            duration_seconds=duration,
            prompt_tokens_actual=actual_prompt_tokens,
            response_tokens_actual=actual_response_tokens,
            failed=not response
        ))

    def get_summary(self) -> Dict:
        """Get summary of all calls."""
        est_total = sum(c.total_tokens_est for c in self.calls)
        actual_total = sum(c.total_tokens_actual for c in self.calls)
        return {
            "calls": [
                {
                    "name": c.call_name,
                    "total_tokens_est": c.total_tokens_est,
                    "total_tokens_actual": c.total_tokens_actual,
                    "duration_seconds": round(c.duration_seconds, 1),
                    "failed": c.failed,
                }
                for c in self.calls
            ],
            "num_calls": len(self.calls),
            "num_failed": sum(1 for c in self.calls if c.failed),
            "totals": {
                "estimated_tokens": est_total,
                "actual_tokens": actual_total,
                "duration_seconds": round(
                    sum(c.duration_seconds for c in self.calls), 1
                ),
                "wall_time": round(time.time() - self.start_time, 1),
            }
        }

    def print_report(self):
        """Print formatted token usage report to console."""
        summary = self.get_summary()
        totals = summary["totals"]

        if not summary["num_calls"]:
            print("  [Tokens] No LLM calls made (local fallbacks only)")
            return

        print("\n" + "=" * 60)
        print("TOKEN USAGE REPORT")
        print("=" * 60)
        print(f"{'Call':<24} {'Est.':>8} {'Actual':>8} {'Time':>7}")
        print("-" * 60)
        for c in summary["calls"]:
            flag = "  ✗" if c["failed"] else ""
            print(
                f"{c['name']:<24} {c['total_tokens_est']:>8} "
                f"{c['total_tokens_actual']:>8} "
                f"{c['duration_seconds']:>6.1f}s{flag}"
            )
        print("-" * 60)
        print(
            f"{'TOTAL':<24} {totals['estimated_tokens']:>8} "
            f"{totals['actual_tokens']:>8} {totals['duration_seconds']:>6.1f}s"
        )
        print(
            f"LLM calls: {summary['num_calls']} "
            f"({summary['num_failed']} failed) | "
            f"wall time {totals['wall_time']:.1f}s"
        )
        print("=" * 60)


# Global tracker instance
tracker = TokenTracker()


def reset_tracker():
    """Reset the global tracker for a new run."""
    global tracker
    tracker = TokenTracker()
    return tracker
