# src/llm_tasks/utils.py

"""
Shared utility functions for LLM tasks.
Timing, JSON recovery from model responses, local fallback heuristics.
"""

import json
import re
import time
from typing import Any, List, Optional

from config import FALLBACK_SUMMARY_SENTENCES, FALLBACK_TITLE_WORDS, MAX_STATS


SENTENCE_BREAK = re.compile(r"[.\n]+")
NUMBER_PATTERN = re.compile(r"\d+(?:,\d{3})*(?:\.\d+)?")

_EMBEDDED = {
    list: (re.compile(r"\[[\s\S]*\]"), "["),
    dict: (re.compile(r"\{[\s\S]*\}"), "{"),
}


class ResponseParseError(ValueError):
    """Raised when a model response holds no usable JSON payload."""


# ============================================================
# Timing
# ============================================================

def _timed(name: str, start: float):
    """Log elapsed time for a task."""
    print(f"    [{name}] done in {time.time() - start:.1f}s")


# ============================================================
# JSON Recovery
# ============================================================

def _first_decodable(text: str, opener: str, kind: type) -> Optional[Any]:
    """Decode the first JSON value of `kind` starting at any `opener`."""
    decoder = json.JSONDecoder()
    pos = text.find(opener)
    while pos != -1:
        try:
            value, _ = decoder.raw_decode(text, pos)
        except json.JSONDecodeError:
            value = None
        except RecursionError:
            # later openers sit inside the same over-deep run
            return None
        if isinstance(value, kind):
            return value
        pos = text.find(opener, pos + 1)
    return None


def parse_json_payload(content: str, kind: type) -> Any:
    """
    Parse a JSON array (kind=list) or object (kind=dict) from a model response.

    1. Direct parse of the trimmed response.
    2. The greedy span from the first opener to the last closer.
    3. The first position where a value of the right kind decodes.

    Raises:
        ResponseParseError: when none of the attempts yields `kind`.
    """
    text = (content or "").strip()
    try:
        value = json.loads(text)
        if isinstance(value, kind):
            return value
    except (json.JSONDecodeError, RecursionError):
        pass

    pattern, opener = _EMBEDDED[kind]
    match = pattern.search(text)
    if match:
        try:
            value = json.loads(match.group(0))
            if isinstance(value, kind):
                return value
        except (json.JSONDecodeError, RecursionError):
            pass

    value = _first_decodable(text, opener, kind)
    if value is None:
        raise ResponseParseError(
            f"no JSON {kind.__name__} in response: {text[:60]!r}"
        )
    return value


def parse_json_array(content: str) -> list:
    return parse_json_payload(content, list)


def parse_json_object(content: str) -> dict:
    return parse_json_payload(content, dict)


# ============================================================
# Local Fallbacks
# ============================================================

def split_sentences(text: str) -> List[str]:
    """Split on runs of periods/newlines, trim, drop empty fragments."""
    return [s.strip() for s in SENTENCE_BREAK.split(text or "") if s.strip()]


def fallback_summary(text: str) -> str:
    """First few sentences joined back into a paragraph."""
    sentences = split_sentences(text)[:FALLBACK_SUMMARY_SENTENCES]
    if not sentences:
        return ""
    return ". ".join(sentences) + "."


def fallback_title(text: str) -> str:
    """First few words of the text."""
    return " ".join((text or "").split()[:FALLBACK_TITLE_WORDS])


def fallback_stats(text: str) -> List[str]:
    """First numeric-looking substrings, in order of appearance."""
    return NUMBER_PATTERN.findall(text or "")[:MAX_STATS]
