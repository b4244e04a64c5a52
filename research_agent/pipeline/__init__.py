"""Research pipeline state, records and graph nodes.

Usage:
    from research_agent.pipeline import ExecutionState, QueryAnalysis
    from research_agent.pipeline.nodes import ReasoningSelectionNode

    node = ReasoningSelectionNode(llm_client)
    if node.should_execute(state):
        state = await node.process(state)
    state.reasoning  # ReasoningMethod chosen for the downstream stages
"""

from __future__ import annotations

from research_agent.pipeline.graph import GraphNode
from research_agent.pipeline.models import QueryAnalysis
from research_agent.pipeline.profile import UserProfile
from research_agent.pipeline.state import QUERY_ANALYSIS_KEY, ExecutionState

__all__ = [
    "QUERY_ANALYSIS_KEY",
    "ExecutionState",
    "GraphNode",
    "QueryAnalysis",
    "UserProfile",
]
