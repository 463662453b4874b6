# src/llm_tasks/node_extraction.py

"""
Flowchart node extraction.

Sends the text to the LLM for a JSON array of {title, description} nodes.
Degrades to sentence splitting when there is no API key, the call fails,
or the response cannot be parsed. Never raises.
"""

import time
from typing import Any, List

from llm_client import llm_client
from flowchart_models import ExtractionResult, FlowchartNode, NodeList, Parsed, Fallback
from llm_tasks.system_prompt import NODES_SYSTEM_PROMPT, nodes_user_prompt
from llm_tasks.utils import (
    _timed, parse_json_array, split_sentences, ResponseParseError
)


def fallback_nodes(text: str) -> NodeList:
    """One node per sentence fragment, with empty descriptions."""
    return [FlowchartNode(title=s, description="") for s in split_sentences(text)]


def nodes_from_payload(payload: Any) -> NodeList:
    """
    Validate a decoded JSON array into FlowchartNodes.

    Raises:
        ResponseParseError: payload is not a list of objects with titles.
    """
    if not isinstance(payload, list):
        raise ResponseParseError("node payload is not an array")

    nodes: List[FlowchartNode] = []
    for i, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ResponseParseError(f"node {i} is not an object")
        title = item.get("title")
        title = "" if title is None else str(title).strip()
        if not title:
            raise ResponseParseError(f"node {i} has no title")
        description = item.get("description")
        description = "" if description is None else str(description).strip()
        nodes.append(FlowchartNode(title=title, description=description))
    return nodes


def extract_flowchart_nodes(raw_text: str, client=None) -> ExtractionResult[NodeList]:
    """
    Break text down into flowchart nodes.

    Args:
        raw_text: User text (pasted or extracted from a file).
        client: ChatClient to use (defaults to the module client).

    Returns:
        Parsed(nodes) when the service answered with a valid array,
        otherwise Fallback(nodes, reason).
    """
    client = client or llm_client

    if not raw_text or not raw_text.strip():
        return Fallback([], reason="empty input")

    start = time.time()

    if not client.has_credentials():
        nodes = fallback_nodes(raw_text)
        print(f"    [Nodes] No API key — split into {len(nodes)} sentence nodes")
        return Fallback(nodes, reason="no credentials")

    content = client.generate(
        nodes_user_prompt(raw_text),
        system_prompt=NODES_SYSTEM_PROMPT,
        call_name="NodeExtraction"
    )

    if content is None:
        nodes = fallback_nodes(raw_text)
        print(f"    [Nodes] ⚠ Service failed — {len(nodes)} sentence nodes from input")
        _timed("Nodes", start)
        return Fallback(nodes, reason="service error")

    try:
        nodes = nodes_from_payload(parse_json_array(content))
    except ResponseParseError as e:
        print(f"    [Nodes] ⚠ Could not parse response ({e}) — splitting response text")
        nodes = fallback_nodes(content)
        _timed("Nodes", start)
        return Fallback(nodes, reason="unparseable response")

    print(f"    [Nodes] ✓ {len(nodes)} nodes parsed")
    _timed("Nodes", start)
    return Parsed(nodes)
