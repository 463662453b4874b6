# src/flowchart_generator.py

"""
Flowchart rendering with Graphviz.

GraphvizCanvas is a DrawingSink: every primitive becomes a node (or an
edge between two invisible points) with a pinned position, and the whole
canvas is rendered with `neato -n2` so Graphviz keeps the layout AS-IS
instead of computing its own.

Canvas coordinates have y growing downward; Graphviz has y growing
upward, so y is flipped against the canvas height.
"""

import html
from typing import List, Optional, Tuple

from graphviz import Graph

from config import canvas_config
from drawing_sink import DrawingSink
from flowchart_models import TextAlign

POINTS_PER_INCH = 72.0
CHAR_WIDTH_RATIO = 0.5


def _label(text: str, bold: bool) -> str:
    """HTML-like label; escapes markup in user text."""
    body = html.escape(text or "", quote=False) or " "
    return f"<<B>{body}</B>>" if bold else f"<{body}>"


class GraphvizCanvas(DrawingSink):
    """Fixed-size canvas drawn through Graphviz."""

    def __init__(self, width: float = None, height: float = None, config=None):
        self.config = config or canvas_config
        self.width = width or self.config.width
        self.height = height or self.config.height
        self._items: List[Tuple[str, dict]] = []

    # ── DrawingSink ──

    def create_rectangle(self, width, height, x, y, color_hex=None):
        if width <= 0 or height <= 0:
            raise ValueError(f"rectangle size must be positive, got {width}x{height}")
        attrs = {
            "shape": "box",
            "fixedsize": "true",
            "label": "",
            "width": f"{width / POINTS_PER_INCH:.4f}",
            "height": f"{height / POINTS_PER_INCH:.4f}",
            "pos": self._pos(x + width / 2, y + height / 2),
            "penwidth": "0",
        }
        if color_hex:
            attrs.update(style="filled", fillcolor=color_hex)
        else:
            attrs.update(penwidth="1", color="#000000")
        self._items.append(("node", attrs))

    def create_text(
        self, text, x, y, font_size=None, color_hex=None, align=None, bold=False
    ):
        if align is not None and align not in TextAlign.ALL:
            raise ValueError(f"unknown text alignment: {align!r}")
        x = x or self.config.default_text_x
        y = y or self.config.default_text_y
        size = font_size or 12
        est_width = len(text or "") * size * CHAR_WIDTH_RATIO
        if align in (None, TextAlign.LEFT):
            x += est_width / 2
        elif align == TextAlign.RIGHT:
            x -= est_width / 2
        attrs = {
            "shape": "plaintext",
            "label": _label(text, bold),
            "fontname": self.config.font_family,
            "fontsize": f"{size}",
            "fontcolor": color_hex or "#000000",
            "margin": "0",
            "width": "0",
            "height": "0",
            "pos": self._pos(x, y + size / 2),
        }
        self._items.append(("node", attrs))

    def create_line(self, x1, y1, x2, y2, color_hex=None):
        self._items.append(("edge", {
            "start": self._pos(x1, y1),
            "end": self._pos(x2, y2),
            "color": color_hex or "#000000",
        }))

    def get_canvas_width(self) -> float:
        return self.width

    def get_canvas_height(self) -> float:
        return self.height

    # ── Rendering ──

    def _pos(self, x: float, y: float) -> str:
        return f"{x:.2f},{self.height - y:.2f}!"

    def __len__(self):
        return len(self._items)

    def clear(self):
        self._items = []

    def build_graph(self) -> Graph:
        g = Graph("canvas", engine="neato")
        g.attr(
            bb=f"0,0,{self.width:.0f},{self.height:.0f}",
            size=f"{self.width / POINTS_PER_INCH:.2f},{self.height / POINTS_PER_INCH:.2f}!",
            dpi=str(self.config.dpi),
            pad="0",
            splines="line",
        )
        g.attr("edge", arrowhead="none", penwidth="0.75")

        node_id = 0
        for kind, attrs in self._items:
            if kind == "node":
                g.node(f"n{node_id}", **attrs)
                node_id += 1
                continue
            # Lines: an edge between two invisible pinned points
            a, b = f"n{node_id}", f"n{node_id + 1}"
            point = {"shape": "point", "width": "0", "height": "0", "style": "invis"}
            g.node(a, pos=attrs["start"], **point)
            g.node(b, pos=attrs["end"], **point)
            g.edge(a, b, color=attrs["color"])
            node_id += 2
        return g

    def to_dot(self) -> str:
        return self.build_graph().source

    def render_png(self) -> Optional[bytes]:
        """
        Render the canvas to PNG bytes.

        Returns:
            PNG data, or None if Graphviz failed.
        """
        try:
            data = self.build_graph().pipe(format="png", neato_no_op=2)
            print(f"    [Canvas] Rendered {len(self._items)} primitives "
                  f"({len(data):,} bytes)")
            return data
        except Exception as e:
            print(f"    [Canvas] Render failed: {e}")
            return None
