# src/llm_tasks/info_extraction.py

"""
Summary, title and key-statistics extraction for the info boxes.

Each call is independent of node extraction and of the others: its own
request, its own parse, its own local fallback.
"""

import time
from typing import Any, Callable

from llm_client import llm_client
from flowchart_models import (
    ExtractionResult, SummaryResult, TitleResult, StatsResult, Parsed, Fallback
)
from llm_tasks.system_prompt import (
    SUMMARY_SYSTEM_PROMPT, TITLE_SYSTEM_PROMPT, STATS_SYSTEM_PROMPT,
    summary_user_prompt, title_user_prompt, stats_user_prompt
)
from llm_tasks.utils import (
    _timed, parse_json_object, fallback_summary, fallback_title,
    fallback_stats, ResponseParseError
)


def _string_field(payload: dict, key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        raise ResponseParseError(f"'{key}' missing or not a string")
    return str(value).strip()


def summary_from_payload(payload: dict) -> SummaryResult:
    return SummaryResult(summary=_string_field(payload, "summary"))


def title_from_payload(payload: dict) -> TitleResult:
    return TitleResult(title=_string_field(payload, "title"))


def stats_from_payload(payload: dict) -> StatsResult:
    stats = payload.get("stats")
    if not isinstance(stats, list):
        raise ResponseParseError("'stats' missing or not an array")
    return StatsResult(stats=[str(s).strip() for s in stats if str(s).strip()])


def _run_object_task(
    name: str,
    text: str,
    client,
    system_prompt: str,
    user_prompt: str,
    from_payload: Callable[[Any], Any],
    heuristic: Callable[[str], Any],
):
    """Call → parse → validate, degrading to `heuristic` at each failure point."""
    client = client or llm_client

    if not text or not text.strip():
        return Fallback(heuristic(""), reason="empty input")

    if not client.has_credentials():
        print(f"    [{name}] No API key — local heuristic")
        return Fallback(heuristic(text), reason="no credentials")

    start = time.time()
    content = client.generate(user_prompt, system_prompt=system_prompt, call_name=name)

    if content is None:
        print(f"    [{name}] ⚠ Service failed — local heuristic on input")
        _timed(name, start)
        return Fallback(heuristic(text), reason="service error")

    try:
        result = from_payload(parse_json_object(content))
    except ResponseParseError as e:
        print(f"    [{name}] ⚠ Could not parse response ({e}) — heuristic on response text")
        _timed(name, start)
        return Fallback(heuristic(content), reason="unparseable response")

    _timed(name, start)
    return Parsed(result)


def summarize(text: str, client=None) -> ExtractionResult[SummaryResult]:
    """Short summary of the text. Fallback: first five sentences."""
    return _run_object_task(
        "Summary", text, client,
        SUMMARY_SYSTEM_PROMPT, summary_user_prompt(text),
        summary_from_payload,
        lambda t: SummaryResult(summary=fallback_summary(t)),
    )


def extract_title(text: str, client=None) -> ExtractionResult[TitleResult]:
    """Short title for the text. Fallback: first five words."""
    return _run_object_task(
        "Title", text, client,
        TITLE_SYSTEM_PROMPT, title_user_prompt(text),
        title_from_payload,
        lambda t: TitleResult(title=fallback_title(t)),
    )


def extract_statistics(text: str, client=None) -> ExtractionResult[StatsResult]:
    """Up to three key statistics. Fallback: first three numbers."""
    return _run_object_task(
        "Stats", text, client,
        STATS_SYSTEM_PROMPT, stats_user_prompt(text),
        stats_from_payload,
        lambda t: StatsResult(stats=fallback_stats(t)),
    )
