"""Command-line entry point: show which reasoning method a query would get.

Usage::

    python -m research_agent "Compare Postgres versus MySQL"
    python -m research_agent "Why is the sky blue?" --domain academic --prefer detailed
    python -m research_agent "Ideas for a launch" --intent creative --model gpt-4o
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

import structlog

from research_agent.agent.llm import LLMClient
from research_agent.config import get_settings
from research_agent.core.enums import OutputFormat
from research_agent.pipeline.models import QueryAnalysis
from research_agent.pipeline.nodes import ReasoningSelectionNode
from research_agent.pipeline.profile import UserProfile
from research_agent.pipeline.state import QUERY_ANALYSIS_KEY, ExecutionState
from research_agent.telemetry.logging import configure_logging

log = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="research_agent",
        description="Score reasoning methods for a query and print the winner.",
    )
    parser.add_argument("query", help="User query text")
    parser.add_argument("--intent", help="Intent from query analysis (e.g. comparison)")
    parser.add_argument("--domain", help="User profile domain (e.g. business)")
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        help="Preferred output format",
    )
    parser.add_argument(
        "--prefer",
        action="append",
        default=[],
        metavar="NAME",
        help="Set a profile preference flag (repeatable)",
    )
    parser.add_argument("--model", help="Model identifier (defaults to LITELLM_DEFAULT_MODEL)")
    return parser


def build_state(args: argparse.Namespace) -> ExecutionState:
    metadata = {}
    if args.intent:
        metadata[QUERY_ANALYSIS_KEY] = QueryAnalysis(intent=args.intent)

    profile = None
    if args.domain or args.format or args.prefer:
        profile = UserProfile(
            preferences={name: True for name in args.prefer},
            preferred_format=OutputFormat(args.format) if args.format else None,
            domain=args.domain,
        )

    return ExecutionState(query=args.query, metadata=metadata, user_profile=profile)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(
        json_logs=settings.json_logs or settings.is_prod,
        log_level="DEBUG" if settings.debug else settings.log_level,
    )

    node = ReasoningSelectionNode(LLMClient(settings, model=args.model), settings=settings)
    state = build_state(args)

    result = asyncio.run(node.process(state))

    # Scores are only shown when they explain the method process() attached.
    scores = None
    try:
        table = node.score(state)
    except Exception as exc:
        log.warning("cli.scores_unavailable", error=str(exc), error_type=type(exc).__name__)
    else:
        if table.best() == result.reasoning:
            scores = table.as_dict()

    print(json.dumps({"reasoning": result.reasoning.value, "scores": scores}))
    return 0


if __name__ == "__main__":
    sys.exit(main())
