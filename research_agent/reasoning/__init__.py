"""Reasoning method selection for the research pipeline.

The pipeline supports a small, fixed set of reasoning methods:

- CHAIN_OF_THOUGHT: Step-by-step explanation and analysis
- CHAIN_OF_IDEAS: Divergent idea generation
- CHAIN_OF_TABLE: Structured, side-by-side comparison

``score_reasoning_methods`` turns the query, intent analysis, user profile
and model identifier into a score per method; ``select_optimal_reasoning``
returns the winner.

Usage:
    from research_agent.reasoning import select_optimal_reasoning

    method = select_optimal_reasoning(
        "Compare PostgreSQL versus MySQL",
        analysis=QueryAnalysis(intent="comparison"),
    )
"""

from __future__ import annotations

from research_agent.core.enums import ReasoningMethod
from research_agent.reasoning.scoring import (
    DEFAULT_METHOD,
    DEFAULT_WEIGHTS,
    ReasoningScores,
    SignalContribution,
    SignalWeights,
    score_reasoning_methods,
    select_optimal_reasoning,
)

__all__ = [
    "DEFAULT_METHOD",
    "DEFAULT_WEIGHTS",
    "ReasoningMethod",
    "ReasoningScores",
    "SignalContribution",
    "SignalWeights",
    "score_reasoning_methods",
    "select_optimal_reasoning",
]
