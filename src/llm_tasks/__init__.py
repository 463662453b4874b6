# src/llm_tasks/__init__.py

"""
LLM-based extraction tasks for the flowchart pipeline.

Public API, import everything from here:
    from llm_tasks import extract_flowchart_nodes, summarize, ...
"""

# Utilities
from llm_tasks.utils import (
    parse_json_array,
    parse_json_object,
    split_sentences,
    ResponseParseError
)

# Node extraction
from llm_tasks.node_extraction import (
    extract_flowchart_nodes,
    fallback_nodes,
    nodes_from_payload
)

# Info boxes: summary, title, statistics
from llm_tasks.info_extraction import (
    summarize,
    extract_title,
    extract_statistics
)
