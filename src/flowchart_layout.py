# src/flowchart_layout.py

"""
Flowchart layout: nodes and info artifacts → positioned draw commands.

Layout is a pure function of node count and text length. Every
position, size, colour and font comes from LayoutConfig; there is no
collision detection or reflow.

    Node stack (x = start_x)        Info boxes (x = info_x)
    ┌──────────┐                    ┌──────────────┐
    │  title   │                    │ Summary      │
    │  desc... │                    │ ...          │
    └──────────┘                    └──────────────┘
    ┌──────────┐                    ┌──────────────┐
    │  title   │                    │ Title        │
    └──────────┘                    └──────────────┘
        ...                         ┌──────────────┐
                                    │ Key Stats    │
                                    └──────────────┘
"""

from typing import List, Sequence

from config import layout_config
from flowchart_models import (
    DrawCommand, FlowchartNode, InfoBoxKind, Line, Rectangle, Text, TextAlign,
    SummaryResult, TitleResult, StatsResult, Parsed, Fallback
)
from text_wrap import wrap_text


INFO_HEADERS = {
    InfoBoxKind.SUMMARY: "Summary",
    InfoBoxKind.TITLE: "Title",
    InfoBoxKind.STATS: "Key Statistics",
}

STAT_BULLET = "• "


def node_box_y(index: int, config=None) -> float:
    """Top edge of the index-th box in the stack."""
    c = config or layout_config
    return c.start_y + index * c.stack_step


def _node_commands(node: FlowchartNode, y: float, c) -> List[DrawCommand]:
    x = c.start_x
    center_x = x + c.box_width / 2
    commands: List[DrawCommand] = [
        Rectangle(c.box_width, c.box_height, x, y, c.box_color),
        Text(node.title, center_x, y + c.title_offset,
             c.title_font, c.text_color, TextAlign.CENTER, bold=True),
    ]
    if node.description:
        lines = wrap_text(node.description, c.desc_max_chars, c.desc_max_lines)
        text_y = y + c.desc_offset
        for i, line in enumerate(lines):
            commands.append(
                Text(line, center_x, text_y + i * c.line_spacing,
                     c.desc_font, c.text_color, TextAlign.CENTER)
            )
    return commands


def layout_node_stack(
    nodes: Sequence[FlowchartNode], connectors: bool = False, config=None
) -> List[DrawCommand]:
    """
    Stack node boxes vertically with centered title and wrapped description.

    Per node: one Rectangle, one bold title Text, and one Text per
    description line (at most desc_max_lines, omitted for empty
    descriptions). With connectors=True a Line joins each box to the next.

    Returns:
        Draw commands in drawing order; empty when there are no nodes.
    """
    c = config or layout_config
    commands: List[DrawCommand] = []
    center_x = c.start_x + c.box_width / 2

    for i, node in enumerate(nodes):
        y = node_box_y(i, c)
        commands.extend(_node_commands(node, y, c))
        if connectors and i > 0:
            prev_bottom = node_box_y(i - 1, c) + c.box_height
            commands.append(Line(center_x, prev_bottom, center_x, y, c.connector_color))

    if commands:
        print(f"    [Layout] {len(nodes)} nodes → {len(commands)} draw commands")
    return commands


def _info_geometry(kind: str, c):
    """(y, height, fill) of an info box."""
    if kind == InfoBoxKind.SUMMARY:
        return c.summary_y, c.summary_height, c.summary_color
    if kind == InfoBoxKind.TITLE:
        return c.title_y, c.title_height, c.title_color
    if kind == InfoBoxKind.STATS:
        return c.stats_y, c.stats_height, c.stats_color
    raise ValueError(f"Unknown info box kind: {kind!r}")


def _body_lines(kind: str, payload, c) -> List[str]:
    if isinstance(payload, (Parsed, Fallback)):
        payload = payload.value

    if kind == InfoBoxKind.SUMMARY:
        if not isinstance(payload, SummaryResult):
            raise TypeError("summary box needs a SummaryResult")
        return wrap_text(payload.summary, c.info_max_chars)

    if kind == InfoBoxKind.TITLE:
        if not isinstance(payload, TitleResult):
            raise TypeError("title box needs a TitleResult")
        # Single unwrapped line
        return [payload.title] if payload.title else []

    if not isinstance(payload, StatsResult):
        raise TypeError("stats box needs a StatsResult")
    lines = []
    for stat in payload.stats:
        lines.extend(wrap_text(STAT_BULLET + stat, c.info_max_chars))
    return lines


def layout_info_box(kind: str, payload, config=None) -> List[DrawCommand]:
    """
    Lay out one of the fixed info boxes (summary, title, stats).

    Body lines use the wider info budget and no line cap; they keep
    stacking downward even past the box bottom.

    Args:
        kind: One of InfoBoxKind.ALL.
        payload: SummaryResult / TitleResult / StatsResult, or a
            Parsed/Fallback wrapping one.
    """
    c = config or layout_config
    y, height, fill = _info_geometry(kind, c)
    x = c.info_x
    center_x = x + c.info_width / 2

    commands: List[DrawCommand] = [
        Rectangle(c.info_width, height, x, y, fill),
        Text(INFO_HEADERS[kind], center_x, y + c.info_header_offset,
             c.info_header_font, c.text_color, TextAlign.CENTER, bold=True),
    ]
    body_y = y + c.info_body_offset
    for i, line in enumerate(_body_lines(kind, payload, c)):
        commands.append(
            Text(line, center_x, body_y + i * (c.info_body_font + 2),
                 c.info_body_font, c.text_color, TextAlign.CENTER)
        )
    return commands
