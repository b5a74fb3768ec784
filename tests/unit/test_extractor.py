"""Tests for the response extractor."""

import json

import pytest

from src.services.verdict.errors import MalformedResponse
from src.services.verdict.extractor import extract_analysis, extract_verdict


def _fenced(payload: dict) -> str:
    return "Here you go:\n```json\n" + json.dumps(payload) + "\n```"


def test_faucet_scenario_returns_object_unchanged(trades, trades_analysis):
    result = extract_analysis(trades, _fenced(trades_analysis))
    assert result.model_dump(mode="json", exclude_none=True) == trades_analysis


def test_analysis_plain_json(trades, trades_analysis):
    result = extract_analysis(trades, json.dumps(trades_analysis))
    assert result.situation_type == "PLUMBING"
    assert len(result.questions) == 5


@pytest.mark.parametrize("count", [0, 4, 6])
def test_analysis_rejects_wrong_question_count(trades, trades_analysis, count):
    questions = (trades_analysis["questions"] * 2)[:count]
    payload = {**trades_analysis, "questions": questions}
    with pytest.raises(MalformedResponse):
        extract_analysis(trades, json.dumps(payload))


@pytest.mark.parametrize("field", ["situation_type", "observations", "first_take", "questions"])
def test_analysis_missing_field(trades, trades_analysis, field):
    payload = {k: v for k, v in trades_analysis.items() if k != field}
    with pytest.raises(MalformedResponse) as exc_info:
        extract_analysis(trades, json.dumps(payload))
    assert field in exc_info.value.message


def test_analysis_empty_first_take(trades, trades_analysis):
    payload = {**trades_analysis, "first_take": ""}
    with pytest.raises(MalformedResponse):
        extract_analysis(trades, json.dumps(payload))


def test_binary_persona_rejects_options(trades, trades_analysis):
    payload = json.loads(json.dumps(trades_analysis))
    payload["questions"][2]["options"] = ["a", "b", "c", "d"]
    with pytest.raises(MalformedResponse):
        extract_analysis(trades, json.dumps(payload))


def test_choice_persona_accepts_four_options(dating, dating_analysis):
    result = extract_analysis(dating, _fenced(dating_analysis))
    assert all(len(q.options) == 4 for q in result.questions)


@pytest.mark.parametrize(
    "options",
    [None, [], ["a", "b", "c"], ["a", "b", "c", "d", "e"], ["a", "b", " ", "d"]],
)
def test_choice_persona_rejects_bad_options(dating, dating_analysis, options):
    payload = json.loads(json.dumps(dating_analysis))
    payload["questions"][0]["options"] = options
    with pytest.raises(MalformedResponse):
        extract_analysis(dating, json.dumps(payload))


def test_verdict_valid(trades):
    payload = {
        "verdict": "DIY",
        "headline": "Grab the wrench.",
        "reasoning": "You've done it before.",
        "positives": ["owns tools"],
        "negatives": [],
        "cost": "$150-$300",
        "resources": "r/Plumbing",
        "closing": "Shut the water off first.",
    }
    result = extract_verdict(trades, _fenced(payload))
    assert result.verdict == "DIY"
    assert result.cost == "$150-$300"


def test_verdict_optional_fields_default(dating):
    payload = {
        "verdict": " MIXED_SIGNALS ",
        "headline": "h",
        "reasoning": "r",
        "closing": "c",
    }
    result = extract_verdict(dating, json.dumps(payload))
    assert result.verdict == "MIXED_SIGNALS"
    assert result.positives == []
    assert result.cost is None


@pytest.mark.parametrize("value", ["MAYBE", "diy", "", "INTERESTED"])
def test_verdict_outside_enumeration(trades, value):
    payload = {"verdict": value, "headline": "h", "reasoning": "r", "closing": "c"}
    with pytest.raises(MalformedResponse):
        extract_verdict(trades, json.dumps(payload))


def test_verdict_unparseable(trades):
    with pytest.raises(MalformedResponse) as exc_info:
        extract_verdict(trades, "I think you should call a pro.")
    assert exc_info.value.raw_text == "I think you should call a pro."
