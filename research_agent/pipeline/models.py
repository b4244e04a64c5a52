"""Records produced by upstream pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class QueryAnalysis:
    """Output of the query-analysis stage.

    Attributes:
        intent:     Coarse purpose of the query ("comparison", "creative",
                    "analysis", "research", ...). ``None`` when the analyser
                    could not classify it.
        complexity: Free-form complexity hint ("low" / "medium" / "high").
        entities:   Named entities mentioned in the query.
        keywords:   Salient keywords extracted from the query.
        confidence: Analyser confidence in ``intent`` (0.0 - 1.0).
    """

    intent: str | None = None
    complexity: str = "medium"
    entities: tuple[str, ...] = field(default_factory=tuple)
    keywords: tuple[str, ...] = field(default_factory=tuple)
    confidence: float = 1.0
