"""Signal scoring that picks a reasoning method for a query.

Every ReasoningMethod starts from the same baseline and independent signals
add points on top:

    signal       trigger                                   points
    ---------    ---------------------------------------   ------
    intent       analysis.intent (exact match)               30
    lexical      keyword in the lower-cased query            20
    preference   "detailed" / "visual" flag, TABLE format    15
    domain       profile.domain (exact match)                10
    model        model family in the LLM model identifier    10

The method with the highest total wins. Ties resolve to the method declared
first in ``ReasoningMethod``, so with no signals at all the answer is
``CHAIN_OF_THOUGHT``.

Scoring is pure: no I/O, no shared state. Unrecognised intents, domains and
model names contribute nothing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from research_agent.core.enums import OutputFormat, ReasoningMethod
from research_agent.pipeline.models import QueryAnalysis
from research_agent.pipeline.profile import UserProfile

DEFAULT_METHOD = ReasoningMethod.CHAIN_OF_THOUGHT


@dataclass(frozen=True)
class SignalWeights:
    """Points awarded per signal tier."""

    baseline: int = 10
    intent: int = 30
    lexical: int = 20
    preference: int = 15
    domain: int = 10
    model_affinity: int = 10

    def __post_init__(self) -> None:
        if self.baseline < 0:
            raise ValueError(f"baseline must be non-negative, got {self.baseline}")


DEFAULT_WEIGHTS = SignalWeights()

# First match wins: a model named after both families only counts as "gpt".
_MODEL_FAMILIES: tuple[tuple[str, ReasoningMethod], ...] = (
    ("gpt", ReasoningMethod.CHAIN_OF_IDEAS),
    ("gemini", ReasoningMethod.CHAIN_OF_THOUGHT),
)

_INTENT_METHODS: Mapping[str, ReasoningMethod] = MappingProxyType({
    "comparison": ReasoningMethod.CHAIN_OF_TABLE,
    "creative": ReasoningMethod.CHAIN_OF_IDEAS,
    "analysis": ReasoningMethod.CHAIN_OF_THOUGHT,
    "research": ReasoningMethod.CHAIN_OF_THOUGHT,
})

_LEXICAL_CUES: tuple[tuple[ReasoningMethod, tuple[str, ...]], ...] = (
    (ReasoningMethod.CHAIN_OF_TABLE, ("compare", "versus", "difference")),
    (ReasoningMethod.CHAIN_OF_IDEAS, ("creative", "idea", "brainstorm")),
    (ReasoningMethod.CHAIN_OF_THOUGHT, ("analyze", "explain", "why")),
)

_DOMAIN_METHODS: Mapping[str, ReasoningMethod] = MappingProxyType({
    "business": ReasoningMethod.CHAIN_OF_TABLE,
    "academic": ReasoningMethod.CHAIN_OF_THOUGHT,
    "creative": ReasoningMethod.CHAIN_OF_IDEAS,
})


@dataclass(frozen=True)
class SignalContribution:
    """One rule that fired while scoring.

    Attributes:
        signal: Signal tier ("model", "intent", "lexical", "preference", "domain").
        method: Method that received the points.
        points: Points added.
        detail: What matched, e.g. the keyword or the intent value.
    """

    signal: str
    method: ReasoningMethod
    points: int
    detail: str


@dataclass(frozen=True)
class ReasoningScores:
    """Per-call score table plus the trail of rules that produced it."""

    scores: Mapping[ReasoningMethod, int]
    contributions: tuple[SignalContribution, ...] = field(default_factory=tuple)

    def best(self) -> ReasoningMethod:
        """Arg-max over ``scores``; ties go to the earlier-declared method."""
        best_method: ReasoningMethod | None = None
        best_score = 0
        for method in ReasoningMethod:
            score = self.scores.get(method)
            if score is None:
                continue
            if best_method is None or score > best_score:
                best_method, best_score = method, score
        return best_method or DEFAULT_METHOD

    def as_dict(self) -> dict[str, int]:
        return {method.value: score for method, score in self.scores.items()}


def score_reasoning_methods(
    query: str | None,
    analysis: QueryAnalysis | None = None,
    profile: UserProfile | None = None,
    model_name: str | None = None,
    weights: SignalWeights = DEFAULT_WEIGHTS,
) -> ReasoningScores:
    """Score every ReasoningMethod against the available signals.

    Args:
        query:      Raw user query; ``None`` is treated as empty.
        analysis:   Upstream query analysis, if any.
        profile:    Requesting user's profile, if any.
        model_name: Identifier of the backing LLM, if the client exposes one.
        weights:    Points per signal tier.

    Returns:
        ``ReasoningScores`` containing every method, baseline included.
    """
    contributions: list[SignalContribution] = []

    def award(signal: str, method: ReasoningMethod, points: int, detail: str) -> None:
        contributions.append(SignalContribution(signal, method, points, detail))

    # Model affinity
    if model_name:
        lowered_model = model_name.lower()
        for family, method in _MODEL_FAMILIES:
            if family in lowered_model:
                award("model", method, weights.model_affinity, family)
                break

    # Intent
    if analysis is not None and analysis.intent is not None:
        intent_method = _INTENT_METHODS.get(analysis.intent)
        if intent_method is not None:
            award("intent", intent_method, weights.intent, analysis.intent)

    # Lexical cues, each group fires at most once
    text = (query or "").lower()
    for method, cues in _LEXICAL_CUES:
        matched = next((cue for cue in cues if cue in text), None)
        if matched is not None:
            award("lexical", method, weights.lexical, matched)

    # Profile
    if profile is not None:
        if profile.has_preference("detailed"):
            award("preference", ReasoningMethod.CHAIN_OF_THOUGHT, weights.preference, "detailed")
        if profile.has_preference("visual"):
            award("preference", ReasoningMethod.CHAIN_OF_TABLE, weights.preference, "visual")
        elif profile.preferred_format == OutputFormat.TABLE:
            award("preference", ReasoningMethod.CHAIN_OF_TABLE, weights.preference, "format=table")

        if profile.domain is not None:
            domain_method = _DOMAIN_METHODS.get(profile.domain)
            if domain_method is not None:
                award("domain", domain_method, weights.domain, profile.domain)

    totals = {method: weights.baseline for method in ReasoningMethod}
    for contribution in contributions:
        totals[contribution.method] += contribution.points

    return ReasoningScores(
        scores=MappingProxyType(totals),
        contributions=tuple(contributions),
    )


def select_optimal_reasoning(
    query: str | None,
    analysis: QueryAnalysis | None = None,
    profile: UserProfile | None = None,
    model_name: str | None = None,
    weights: SignalWeights = DEFAULT_WEIGHTS,
) -> ReasoningMethod:
    """Return the best-scoring ReasoningMethod for the given signals."""
    return score_reasoning_methods(query, analysis, profile, model_name, weights).best()
