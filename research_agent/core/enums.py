"""Closed vocabularies shared across the research pipeline."""

from __future__ import annotations

from enum import StrEnum


class ReasoningMethod(StrEnum):
    """Reasoning strategies the downstream pipeline knows how to run.

    Declaration order is significant: when two methods end up with the same
    score, the one declared first wins.
    """

    CHAIN_OF_THOUGHT = "chain_of_thought"
    CHAIN_OF_IDEAS = "chain_of_ideas"
    CHAIN_OF_TABLE = "chain_of_table"


class OutputFormat(StrEnum):
    """Answer layouts a user can ask for in their profile."""

    TEXT = "text"
    MARKDOWN = "markdown"
    TABLE = "table"
    BULLET_POINTS = "bullet_points"
    JSON = "json"
