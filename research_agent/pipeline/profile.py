"""Read-only view of a user's stored preferences."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from research_agent.core.enums import OutputFormat


@dataclass(frozen=True)
class UserProfile:
    """Persisted preferences and domain context for the requesting user.

    Attributes:
        user_id:          Identifier in the profile store.
        preferences:      Named preference flags. Values are boolean-ish;
                          a flag counts as set when present and truthy.
        preferred_format: Answer layout the user asked for, if any.
        domain:           Domain tag ("business", "academic", "creative", ...).
        expertise_level:  Self-declared expertise ("beginner" / "intermediate" /
                          "expert").
    """

    user_id: str | None = None
    preferences: Mapping[str, Any] = field(default_factory=dict, hash=False)
    preferred_format: OutputFormat | None = None
    domain: str | None = None
    expertise_level: str = "intermediate"

    def __post_init__(self) -> None:
        object.__setattr__(self, "preferences", MappingProxyType(dict(self.preferences or {})))

    def has_preference(self, name: str) -> bool:
        return bool(self.preferences.get(name))
