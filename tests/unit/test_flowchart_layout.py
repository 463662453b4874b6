from __future__ import annotations

import pytest

from config import LayoutConfig
from flowchart_layout import layout_info_box, layout_node_stack, node_box_y
from flowchart_models import (
    Fallback, FlowchartNode, InfoBoxKind, Line, Parsed, Rectangle,
    StatsResult, SummaryResult, Text, TextAlign, TitleResult,
)


CONFIG = LayoutConfig()

NODES = [
    FlowchartNode("Collect", "Gather every receipt from the month"),
    FlowchartNode("Review", ""),
    FlowchartNode("Submit", "Send the report to finance for approval and wait "
                            "for the reimbursement to arrive in the account "
                            "before closing the ticket and archiving receipts"),
]


def _rects(commands):
    return [c for c in commands if isinstance(c, Rectangle)]


def _texts(commands):
    return [c for c in commands if isinstance(c, Text)]


def test_empty_nodes_make_no_commands():
    assert layout_node_stack([]) == []


def test_one_rectangle_per_node_and_at_least_one_text():
    commands = layout_node_stack(NODES)
    assert len(_rects(commands)) == len(NODES)
    assert len(_texts(commands)) >= len(NODES)


def test_boxes_step_down_by_height_plus_spacing():
    rects = _rects(layout_node_stack(NODES))
    ys = [r.y for r in rects]
    assert ys[0] == CONFIG.start_y
    assert all(b - a == CONFIG.box_height + CONFIG.spacing for a, b in zip(ys, ys[1:]))
    assert {r.x for r in rects} == {CONFIG.start_x}
    assert all((r.width, r.height) == (150, 45) for r in rects)


def test_title_is_bold_and_centered():
    commands = layout_node_stack([FlowchartNode("Only", "")])
    rect, title = commands
    assert title.text == "Only"
    assert title.bold
    assert title.align == TextAlign.CENTER
    assert title.x == rect.x + rect.width / 2
    assert title.y == rect.y + CONFIG.title_offset


def test_description_lines_are_capped_at_four():
    commands = layout_node_stack([NODES[2]])
    desc = [t for t in _texts(commands) if not t.bold]
    assert len(desc) == 4
    assert desc[-1].text.endswith("...")
    assert all(len(t.text) <= CONFIG.desc_max_chars for t in desc[:-1])
    ys = [t.y for t in desc]
    assert ys[0] == CONFIG.start_y + CONFIG.desc_offset
    assert all(b - a == CONFIG.desc_font + 2 for a, b in zip(ys, ys[1:]))


def test_empty_description_emits_title_only():
    commands = layout_node_stack([NODES[1]])
    assert len(commands) == 2


def test_connectors_join_consecutive_boxes():
    commands = layout_node_stack(NODES, connectors=True)
    lines = [c for c in commands if isinstance(c, Line)]
    assert len(lines) == len(NODES) - 1
    first = lines[0]
    assert first.y1 == node_box_y(0) + CONFIG.box_height
    assert first.y2 == node_box_y(1)
    assert first.x1 == first.x2 == CONFIG.start_x + CONFIG.box_width / 2


def test_layout_is_deterministic():
    assert layout_node_stack(NODES) == layout_node_stack(NODES)


def test_summary_box_wraps_without_cap():
    summary = SummaryResult(" ".join(["word"] * 120))
    commands = layout_info_box(InfoBoxKind.SUMMARY, summary)
    rect, header, *body = commands
    assert header.text == "Summary" and header.bold
    assert len(body) > 4
    assert all(len(t.text) <= CONFIG.info_max_chars for t in body)
    assert rect.x == CONFIG.info_x and rect.y == CONFIG.summary_y


def test_title_box_is_single_unwrapped_line():
    long_title = "A Remarkably Long Title That Goes Well Past The Info Box Budget"
    commands = layout_info_box(InfoBoxKind.TITLE, Parsed(TitleResult(long_title)))
    assert [t.text for t in _texts(commands)] == ["Title", long_title]


def test_stats_box_bullets_each_stat():
    commands = layout_info_box(InfoBoxKind.STATS, Fallback(StatsResult(["12.5", "3,400"])))
    body = [t.text for t in _texts(commands)][1:]
    assert body == ["• 12.5", "• 3,400"]


def test_info_boxes_disjoint_from_each_other_and_stack():
    payloads = {
        InfoBoxKind.SUMMARY: SummaryResult("s"),
        InfoBoxKind.TITLE: TitleResult("t"),
        InfoBoxKind.STATS: StatsResult(["1"]),
    }
    rects = [_rects(layout_info_box(k, p))[0] for k, p in payloads.items()]
    stack_right = CONFIG.start_x + CONFIG.box_width
    assert all(r.x > stack_right for r in rects)
    spans = sorted((r.y, r.y + r.height) for r in rects)
    assert all(prev[1] < nxt[0] for prev, nxt in zip(spans, spans[1:]))


def test_info_box_rejects_wrong_payload():
    with pytest.raises(TypeError):
        layout_info_box(InfoBoxKind.TITLE, SummaryResult("x"))
    with pytest.raises(ValueError):
        layout_info_box("chart", SummaryResult("x"))
