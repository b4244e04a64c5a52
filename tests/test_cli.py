"""Tests for the ``python -m research_agent`` entry point."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from research_agent.__main__ import build_parser, build_state, main
from research_agent.core.enums import OutputFormat, ReasoningMethod
from research_agent.reasoning.scoring import ReasoningScores

SCORING = "research_agent.pipeline.nodes.reasoning_selection.score_reasoning_methods"


@pytest.fixture(autouse=True)
def configure_logging_mock():
    with patch("research_agent.__main__.configure_logging") as mock_configure:
        yield mock_configure


def run(capsys, *argv: str) -> dict:
    assert main(list(argv)) == 0
    return json.loads(capsys.readouterr().out.strip().splitlines()[-1])


def test_compare_query(capsys):
    output = run(capsys, "please compare X and Y", "--model", "claude-3-opus")

    assert output["reasoning"] == "chain_of_table"
    assert output["scores"]["chain_of_table"] == 30


def test_profile_flags(capsys):
    output = run(
        capsys,
        "why does this happen",
        "--domain", "academic",
        "--prefer", "detailed",
        "--model", "claude-3-opus",
    )

    assert output["reasoning"] == "chain_of_thought"
    assert output["scores"]["chain_of_thought"] == 55


def test_gpt_model_nudges_ideas(capsys):
    output = run(capsys, "", "--model", "openai/gpt-4o")

    assert output["reasoning"] == "chain_of_ideas"


def test_build_state_without_profile_flags():
    args = build_parser().parse_args(["hello"])

    state = build_state(args)

    assert state.user_profile is None
    assert state.query_analysis is None


def test_build_state_with_format_and_intent():
    args = build_parser().parse_args(["hello", "--format", "table", "--intent", "comparison"])

    state = build_state(args)

    assert state.user_profile.preferred_format == OutputFormat.TABLE
    assert state.query_analysis.intent == "comparison"


def test_logging_configured_from_settings(capsys, configure_logging_mock, monkeypatch):
    monkeypatch.setenv("JSON_LOGS", "true")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    run(capsys, "hello", "--model", "claude-3-opus")

    configure_logging_mock.assert_called_once_with(json_logs=True, log_level="DEBUG")


def test_production_forces_json_logs(capsys, configure_logging_mock, monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.setenv("LITELLM_API_KEY", "sk-live-7f3a9c")
    monkeypatch.delenv("JSON_LOGS", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    run(capsys, "hello", "--model", "claude-3-opus")

    configure_logging_mock.assert_called_once_with(json_logs=True, log_level="INFO")


def test_dev_environment_logs_at_debug(capsys, configure_logging_mock, monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "dev")
    monkeypatch.delenv("JSON_LOGS", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    run(capsys, "hello", "--model", "claude-3-opus")

    configure_logging_mock.assert_called_once_with(json_logs=False, log_level="DEBUG")


def test_scoring_failure_prints_fallback_without_scores(capsys):
    with patch(SCORING, side_effect=RuntimeError("boom")):
        output = run(capsys, "please compare X and Y", "--model", "claude-3-opus")

    assert output == {"reasoning": "chain_of_thought", "scores": None}


def test_scores_hidden_when_they_disagree_with_fallback(capsys):
    ideas = ReasoningScores(scores={ReasoningMethod.CHAIN_OF_IDEAS: 30})

    with patch(SCORING, side_effect=[RuntimeError("transient"), ideas]):
        output = run(capsys, "brainstorm", "--model", "claude-3-opus")

    assert output == {"reasoning": "chain_of_thought", "scores": None}
