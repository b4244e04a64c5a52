"""Execution state threaded through the research pipeline.

``ExecutionState`` is immutable. Nodes never modify the state they receive;
they return a copy with the fields they own replaced:

    new_state = state.with_reasoning(ReasoningMethod.CHAIN_OF_TABLE)

Upstream stages attach their records to ``metadata`` under well-known keys
(see ``QUERY_ANALYSIS_KEY``).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

from research_agent.core.enums import ReasoningMethod
from research_agent.pipeline.models import QueryAnalysis
from research_agent.pipeline.profile import UserProfile

QUERY_ANALYSIS_KEY = "query_analysis"


@dataclass(frozen=True)
class ExecutionState:
    """Progressively-enriched value passed from node to node.

    Attributes:
        query:        Raw user query. May be ``None`` before intake.
        metadata:     Read-only mapping of stage outputs keyed by name.
        user_profile: Profile of the requesting user, when known.
        complete:     Set once the pipeline has produced its final answer.
        reasoning:    Reasoning method chosen by the selection node.
    """

    query: str | None = ""
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)
    user_profile: UserProfile | None = None
    complete: bool = False
    reasoning: ReasoningMethod | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata or {})))

    def is_complete(self) -> bool:
        return self.complete

    @property
    def query_analysis(self) -> QueryAnalysis | None:
        """The upstream analysis record, or ``None`` when absent.

        Raises:
            TypeError: If something other than a ``QueryAnalysis`` is stored
                under ``QUERY_ANALYSIS_KEY``.
        """
        analysis = self.metadata.get(QUERY_ANALYSIS_KEY)
        if analysis is not None and not isinstance(analysis, QueryAnalysis):
            raise TypeError(
                f"metadata[{QUERY_ANALYSIS_KEY!r}] must be QueryAnalysis, "
                f"got {type(analysis).__name__}"
            )
        return analysis

    # ------------------------------------------------------------------
    # Copy-with-modification
    # ------------------------------------------------------------------

    def with_reasoning(self, method: ReasoningMethod) -> ExecutionState:
        return replace(self, reasoning=method)

    def with_metadata(self, key: str, value: Any) -> ExecutionState:
        return replace(self, metadata={**self.metadata, key: value})

    def mark_complete(self) -> ExecutionState:
        return replace(self, complete=True)
