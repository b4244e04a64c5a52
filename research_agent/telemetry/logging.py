"""Structured logging configuration for the research pipeline.

Configures structlog with JSON output in production and a human-readable
console renderer in development.

Features:
- JSON-formatted logs in production (human-readable in dev)
- Pipeline node and user ID in all log entries of a node run
- ISO8601 timestamps with timezone
- Stack traces for exceptions

Log format (production):
    {
        "timestamp": "2026-02-17T10:30:45.123456Z",
        "level": "info",
        "event": "reasoning_selection.selected",
        "node": "reasoning_selection",
        "user_id": "user_uuid",
        "method": "chain_of_table"
    }
"""

from __future__ import annotations

import logging
import sys
import uuid

import structlog
from structlog.types import Processor


def configure_logging(
    *,
    json_logs: bool = False,
    log_level: str = "INFO",
) -> None:
    """Configure structured logging for the application.

    Args:
        json_logs: Use JSON format (True for production, False for dev)
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    # Shared processors for all environments
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,  # Merge context variables
        structlog.stdlib.add_log_level,  # Add log level
        structlog.stdlib.add_logger_name,  # Add logger name
        structlog.processors.TimeStamper(fmt="iso", utc=True),  # ISO8601 timestamps
        structlog.processors.StackInfoRenderer(),  # Stack traces
    ]

    if json_logs:
        # Production: JSON output
        processors = shared_processors + [
            structlog.processors.format_exc_info,  # Format exceptions
            structlog.processors.JSONRenderer(),  # JSON output
        ]
    else:
        # Development: Human-readable output with colors
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# ------------------------------------------------------------------ #
# Context Binding Helpers
# ------------------------------------------------------------------ #


def bind_pipeline_context(node_name: str) -> None:
    """Bind the running pipeline node to log context.

    Args:
        node_name: Stable node name used for graph wiring
    """
    structlog.contextvars.bind_contextvars(node=node_name)


def bind_user_context(user_id: str | uuid.UUID) -> None:
    """Bind user ID to log context for this node run.

    Args:
        user_id: User identifier
    """
    structlog.contextvars.bind_contextvars(user_id=str(user_id))


def clear_context() -> None:
    """Clear all context variables (useful for testing)."""
    structlog.contextvars.clear_contextvars()
