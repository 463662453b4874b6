# src/config.py

"""
Configuration settings for the Flowchart Agent.
All environment variables and constants are managed here.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class LLMConfig:
    """Chat-completion provider configuration (OpenAI-compatible API)."""
    api_key: Optional[str] = os.getenv("DEEPSEEK_API_KEY") or None
    base_url: str = os.getenv("DEEPSEEK_BASE_URL", "https://api.deepseek.com/v1")
    model: str = os.getenv("DEEPSEEK_MODEL", "deepseek-chat")

    @property
    def completions_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/chat/completions"

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


@dataclass
class LLMParams:
    """
    Parameters for LLM requests.

    No retries: a failed call degrades to the local fallback immediately.
    """
    temperature: float = float(os.getenv("LLM_TEMPERATURE", "0.2"))

    # Timeouts (seconds)
    connect_timeout: int = int(os.getenv("LLM_CONNECT_TIMEOUT", "30"))
    read_timeout: int = int(os.getenv("LLM_READ_TIMEOUT", "120"))


@dataclass
class LayoutConfig:
    """
    Fixed layout constants. Units are canvas points.

    Node stack values are the scaled-down boxes of the add-on
    (200x60 boxes at 0.75).
    """
    # Node stack
    box_width: float = 150
    box_height: float = 45
    start_x: float = 10
    start_y: float = 10
    spacing: float = 15
    title_font: float = 5
    desc_font: float = 5
    title_offset: float = 8
    desc_offset: float = 21
    desc_max_chars: int = 33
    desc_max_lines: int = 4
    box_color: str = "#E8EAF6"
    text_color: str = "#000000"
    connector_color: str = "#5C6BC0"

    # Info boxes (right of the node stack)
    info_x: float = 180
    info_width: float = 220
    info_max_chars: int = 45
    info_header_font: float = 6
    info_body_font: float = 5
    info_header_offset: float = 8
    info_body_offset: float = 20

    summary_y: float = 10
    summary_height: float = 160
    summary_color: str = "#FFF8E1"

    title_y: float = 180
    title_height: float = 35
    title_color: str = "#E0F2F1"

    stats_y: float = 225
    stats_height: float = 90
    stats_color: str = "#FCE4EC"

    @property
    def line_spacing(self) -> float:
        return self.desc_font + 2

    @property
    def stack_step(self) -> float:
        return self.box_height + self.spacing


@dataclass
class CanvasConfig:
    """Default canvas used when a sink has no page geometry of its own."""
    width: float = float(os.getenv("CANVAS_WIDTH", "800"))
    height: float = float(os.getenv("CANVAS_HEIGHT", "600"))
    font_family: str = "Times New Roman"
    default_text_x: float = 50
    default_text_y: float = 50
    dpi: int = 150


# Heuristic limits for the local fallbacks
FALLBACK_SUMMARY_SENTENCES = 5
FALLBACK_TITLE_WORDS = 5
MAX_STATS = 3

# Initialize
llm_config = LLMConfig()
llm_params = LLMParams()
layout_config = LayoutConfig()
canvas_config = CanvasConfig()
