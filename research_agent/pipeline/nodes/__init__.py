from __future__ import annotations

from research_agent.pipeline.nodes.reasoning_selection import (
    NODE_NAME,
    ReasoningSelectionNode,
    probe_model_name,
)

__all__ = [
    "NODE_NAME",
    "ReasoningSelectionNode",
    "probe_model_name",
]
