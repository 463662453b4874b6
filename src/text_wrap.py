# src/text_wrap.py

"""
Greedy word wrapping for text placed inside flowchart boxes.
"""

from typing import List, Optional

TRUNCATION_MARKER = "..."


def wrap_text(text: str, max_chars: int, max_lines: Optional[int] = None) -> List[str]:
    """
    Break text into lines of at most max_chars characters.

    Words are whitespace-delimited and never split; a word longer than
    max_chars gets a line of its own. When more than max_lines lines
    result, only the first max_lines are kept and the last one gets
    TRUNCATION_MARKER appended. max_lines=None keeps every line.

    Args:
        text: Text to wrap.
        max_chars: Character budget per line.
        max_lines: Line cap, or None for no cap.

    Returns:
        Ordered list of lines.
    """
    if not text or max_lines is not None and max_lines <= 0:
        return []

    lines = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if len(candidate) > max_chars:
            if current:
                lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)

    if max_lines is not None and len(lines) > max_lines:
        lines = lines[:max_lines]
        lines[-1] = lines[-1] + TRUNCATION_MARKER
    return lines
