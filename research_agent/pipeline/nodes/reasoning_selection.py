"""Reasoning selection node - attaches a ReasoningMethod to the state.

The node reads the query, the upstream ``QueryAnalysis``, the user profile
and (when the LLM client exposes it) the model identifier, scores each
reasoning method and writes the winner into a copy of the state.

It never fails the pipeline: any error while scoring yields a state carrying
``ReasoningMethod.CHAIN_OF_THOUGHT``.
"""

from __future__ import annotations

import asyncio
from typing import Any

import structlog

from research_agent.agent.llm import SupportsModelName
from research_agent.config import ReasoningSettings, get_reasoning_settings
from research_agent.core.enums import ReasoningMethod
from research_agent.pipeline.graph import GraphNode
from research_agent.pipeline.state import ExecutionState
from research_agent.reasoning.scoring import (
    DEFAULT_METHOD,
    DEFAULT_WEIGHTS,
    ReasoningScores,
    SignalWeights,
    score_reasoning_methods,
)
from research_agent.telemetry.logging import bind_pipeline_context, bind_user_context

log = structlog.get_logger(__name__)

NODE_NAME = "reasoning_selection"


def probe_model_name(llm_client: Any) -> str | None:
    """Best-effort lookup of the client's model identifier.

    Returns ``None`` when the client is missing, does not implement
    ``SupportsModelName``, reports no model, or raises while doing so.
    """
    if llm_client is None or not isinstance(llm_client, SupportsModelName):
        return None
    try:
        name = llm_client.model_name()
    except Exception as exc:
        log.debug("reasoning_selection.model_probe_failed", error=str(exc))
        return None
    return str(name) if name is not None else None


class ReasoningSelectionNode(GraphNode[ExecutionState]):
    """Pipeline node choosing the reasoning method for downstream stages.

    Args:
        llm_client: Client of the target LLM backend. Only its optional
                    ``model_name()`` capability is used here.
        settings:   Node settings (a full ``Settings`` also works); defaults
                    to ``get_reasoning_settings()``.
        weights:    Points per signal tier.
    """

    def __init__(
        self,
        llm_client: Any = None,
        settings: ReasoningSettings | None = None,
        weights: SignalWeights = DEFAULT_WEIGHTS,
    ) -> None:
        self._llm_client = llm_client
        self._settings = settings or get_reasoning_settings()
        self._weights = weights

    @property
    def name(self) -> str:
        return NODE_NAME

    def should_execute(self, state: ExecutionState | None) -> bool:
        return state is not None and not state.is_complete()

    async def process(self, state: ExecutionState) -> ExecutionState:
        """Score reasoning methods off the event loop and attach the winner."""
        try:
            method = await asyncio.to_thread(self._select, state)
            return state.with_reasoning(method)
        except Exception as exc:
            log.warning(
                "reasoning_selection.fallback",
                error=str(exc),
                error_type=type(exc).__name__,
                method=DEFAULT_METHOD.value,
            )
            return state.with_reasoning(DEFAULT_METHOD)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _select(self, state: ExecutionState) -> ReasoningMethod:
        bind_pipeline_context(NODE_NAME)
        if state.user_profile is not None and state.user_profile.user_id:
            bind_user_context(state.user_profile.user_id)

        scores = self.score(state)
        method = scores.best()

        log.info(
            "reasoning_selection.selected",
            method=method.value,
            scores=scores.as_dict(),
            signals=[f"{c.signal}:{c.detail}->{c.method.value}" for c in scores.contributions],
        )
        return method

    def score(self, state: ExecutionState) -> ReasoningScores:
        """Score table for ``state`` without attaching a method."""
        model_name = None
        if self._settings.reasoning_model_probe_enabled:
            model_name = probe_model_name(self._llm_client)

        return score_reasoning_methods(
            state.query,
            analysis=state.query_analysis,
            profile=state.user_profile,
            model_name=model_name,
            weights=self._weights,
        )
