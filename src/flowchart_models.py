# src/flowchart_models.py

"""
Data model for the flowchart pipeline.

Extraction produces FlowchartNode lists and the three info artifacts,
wrapped in a tagged result (Parsed / Fallback). Layout produces
DrawCommand records that are issued once to a DrawingSink.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar, Union

from config import MAX_STATS


T = TypeVar("T")


# ============================================================
# Extracted records
# ============================================================

@dataclass(frozen=True)
class FlowchartNode:
    """One extracted step. Title is required, description may be empty."""
    title: str
    description: str = ""

    def __post_init__(self):
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError("FlowchartNode title must be a non-empty string")

    def to_dict(self) -> dict:
        return {"title": self.title, "description": self.description}


NodeList = List[FlowchartNode]


@dataclass(frozen=True)
class SummaryResult:
    summary: str = ""


@dataclass(frozen=True)
class TitleResult:
    title: str = ""


@dataclass(frozen=True)
class StatsResult:
    stats: List[str] = field(default_factory=list)

    def __post_init__(self):
        # Frozen: bypass __setattr__ to normalise
        object.__setattr__(self, "stats", [str(s) for s in self.stats][:MAX_STATS])


# ============================================================
# Tagged extraction result
# ============================================================

@dataclass(frozen=True)
class Parsed(Generic[T]):
    """Service response parsed and validated into typed records."""
    value: T

    @property
    def from_service(self) -> bool:
        return True


@dataclass(frozen=True)
class Fallback(Generic[T]):
    """Value produced by the local heuristic."""
    value: T
    reason: str = ""

    @property
    def from_service(self) -> bool:
        return False


ExtractionResult = Union[Parsed[T], Fallback[T]]


# ============================================================
# Draw commands
# ============================================================

class TextAlign:
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    ALL = (LEFT, CENTER, RIGHT)


class InfoBoxKind:
    SUMMARY = "summary"
    TITLE = "title"
    STATS = "stats"

    ALL = (SUMMARY, TITLE, STATS)


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float
    x: float
    y: float
    color_hex: Optional[str] = None


@dataclass(frozen=True)
class Text:
    text: str
    x: float
    y: float
    font_size: Optional[float] = None
    color_hex: Optional[str] = None
    align: Optional[str] = None
    bold: bool = False


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    color_hex: Optional[str] = None


DrawCommand = Union[Rectangle, Text, Line]
