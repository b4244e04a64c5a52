"""LLM access for pipeline nodes."""

from __future__ import annotations

from research_agent.agent.llm import (
    LLMClient,
    LLMError,
    LLMRateLimitError,
    LLMUnavailableError,
    SupportsModelName,
)

__all__ = [
    "LLMClient",
    "LLMError",
    "LLMRateLimitError",
    "LLMUnavailableError",
    "SupportsModelName",
]
