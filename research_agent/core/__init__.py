from __future__ import annotations

from research_agent.core.enums import OutputFormat, ReasoningMethod

__all__ = [
    "OutputFormat",
    "ReasoningMethod",
]
