"""Telemetry package for observability.

This package contains:
- Structured logging with pipeline/user context binding
"""

from __future__ import annotations

from research_agent.telemetry.logging import (
    bind_pipeline_context,
    bind_user_context,
    clear_context,
    configure_logging,
)

__all__ = [
    "bind_pipeline_context",
    "bind_user_context",
    "clear_context",
    "configure_logging",
]
