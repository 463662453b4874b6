# src/flowchart_agent.py

"""
Flowchart Agent - Session Orchestrator.
Holds the single in-memory session and runs its two actions:
Simplify (text → nodes + info artifacts) and Create Flowchart (nodes →
draw commands → sink).
"""

import json
import time

from llm_client import llm_client
from token_tracker import reset_tracker
from llm_tasks import (
    extract_flowchart_nodes,
    summarize,
    extract_title,
    extract_statistics
)
from flowchart_layout import layout_node_stack, layout_info_box
from flowchart_models import InfoBoxKind, NodeList
from drawing_sink import DrawingSink, DrawingError, draw_commands


NO_NODES_ERROR = "Cannot create flowchart: no nodes available"
NO_INFO_ERROR = "Cannot create info boxes: run Simplify first"


class FlowchartAgent:
    def __init__(self, client=None):
        self.client = client or llm_client
        self.nodes: NodeList = []
        self.simplified_text: str = ""
        self.summary = None
        self.title = None
        self.stats = None
        self.nodes_from_service = False
        self.error: str = ""

    def reset(self):
        """Forget everything from the previous run."""
        self.nodes = []
        self.simplified_text = ""
        self.summary = None
        self.title = None
        self.stats = None
        self.nodes_from_service = False
        self.error = ""

    def simplify(self, text: str) -> NodeList:
        """
        Break text into nodes and derive summary, title and stats.

        The four extraction calls run one after another; each falls back
        on its own, so a failure in one never cancels the others. Session
        state is replaced wholesale.
        """
        if not text or not text.strip():
            return self.nodes

        t0 = time.time()
        tracker = reset_tracker()
        self.client.set_tracker(tracker)

        print("=" * 60)
        print("Flowchart Agent - Simplify")
        print(f"  Model: {self.client.config.model}")
        print(f"  API key: {'configured' if self.client.has_credentials() else 'missing (local fallbacks)'}")
        print(f"  Input: {len(text):,} chars")
        print("=" * 60)

        self.error = ""

        print("\n[1/4] Flowchart nodes...")
        nodes = extract_flowchart_nodes(text, client=self.client)

        print("[2/4] Summary...")
        summary = summarize(text, client=self.client)

        print("[3/4] Title...")
        title = extract_title(text, client=self.client)

        print("[4/4] Statistics...")
        stats = extract_statistics(text, client=self.client)

        self.nodes = list(nodes.value)
        self.nodes_from_service = nodes.from_service
        self.simplified_text = json.dumps(
            [n.to_dict() for n in self.nodes], indent=2, ensure_ascii=False
        )
        self.summary = summary
        self.title = title
        self.stats = stats

        for i, n in enumerate(self.nodes[:5]):
            print(f"    {i+1}. {n.title}")
        if len(self.nodes) > 5:
            print(f"    ... +{len(self.nodes)-5} more")

        tracker.print_report()
        print(f"\n✓ {len(self.nodes)} nodes ({time.time()-t0:.1f}s)")
        return self.nodes

    def create_flowchart(self, sink: DrawingSink, connectors: bool = False) -> bool:
        """
        Draw the node stack onto the sink.

        Returns:
            True when every command was drawn. On False, `error` holds the
            user-facing message; a failed draw leaves earlier shapes in place.
        """
        if not self.nodes:
            self.error = NO_NODES_ERROR
            print(f"  ✗ {NO_NODES_ERROR}")
            return False
        return self._draw(sink, layout_node_stack(self.nodes, connectors=connectors),
                          "Error creating flowchart")

    def create_info_boxes(self, sink: DrawingSink) -> bool:
        """Draw whichever of the summary/title/stats boxes exist."""
        commands = []
        for kind, result in (
            (InfoBoxKind.SUMMARY, self.summary),
            (InfoBoxKind.TITLE, self.title),
            (InfoBoxKind.STATS, self.stats),
        ):
            if result is not None:
                commands.extend(layout_info_box(kind, result))
        if not commands:
            self.error = NO_INFO_ERROR
            print(f"  ✗ {NO_INFO_ERROR}")
            return False
        return self._draw(sink, commands, "Error creating info boxes")

    def _draw(self, sink: DrawingSink, commands, error_prefix: str) -> bool:
        try:
            issued = draw_commands(sink, commands)
        except DrawingError as e:
            self.error = f"{error_prefix}: {e}"
            print(f"  ✗ {self.error} (after {e.index} commands)")
            return False
        self.error = ""
        print(f"  ✓ Drew {issued} commands")
        return True


def generate_flowchart_from_text(
    text: str, sink: DrawingSink, info_boxes: bool = False,
    connectors: bool = False, client=None
) -> FlowchartAgent:
    """Run Simplify then Create Flowchart in one go. Returns the session."""
    agent = FlowchartAgent(client)
    agent.simplify(text)
    if not agent.create_flowchart(sink, connectors=connectors):
        return agent
    if info_boxes:
        agent.create_info_boxes(sink)
    return agent
