"""Tests for JSON parser."""

import json

import pytest

from src.services.verdict.errors import MalformedResponse
from src.utils.json_parser import JSONParser


def test_extract_json_simple():
    """Test extracting simple JSON."""
    text = '{"key": "value"}'
    result = JSONParser.extract_json(text)
    assert result == {"key": "value"}


def test_extract_json_in_code_block():
    """Test extracting JSON from code block."""
    text = '```json\n{"key": "value"}\n```'
    result = JSONParser.extract_json(text)
    assert result == {"key": "value"}


def test_extract_json_in_untagged_code_block():
    text = '```\n{"key": "value"}\n```'
    assert JSONParser.extract_json(text) == {"key": "value"}


@pytest.mark.parametrize(
    "prefix,suffix",
    [
        ("", ""),
        ("Here you go:\n", ""),
        ("", "\nHope that helps!"),
        ("Sure thing. ", " Let me know if you need more."),
        ("\n\n   ", "   \n"),
    ],
)
def test_extract_json_fenced_with_prose(prefix, suffix):
    """Prose around a fenced object never changes the parsed result."""
    payload = {"verdict": "DIY", "reasoning": "You own the wrench.", "nested": {"a": [1, 2]}}
    text = prefix + "```json" + json.dumps(payload) + "```" + suffix
    assert JSONParser.extract_json(text) == payload


def test_extract_json_multiple_fences():
    text = "```json\n```\n{\"key\": 1}\n```\n```"
    assert JSONParser.extract_json(text) == {"key": 1}


def test_extract_json_uppercase_language_tag():
    text = '```JSON\n{"key": "value"}\n```'
    assert JSONParser.extract_json(text) == {"key": "value"}


def test_extract_json_greedy_outer_span():
    """First '{' to last '}' keeps nested objects intact."""
    text = 'Result: {"a": {"b": {"c": 1}}} done'
    assert JSONParser.extract_json(text) == {"a": {"b": {"c": 1}}}


@pytest.mark.parametrize(
    "text",
    [
        "not json at all",
        "",
        "} backwards {",
        "```json\n```",
        "[1, 2, 3]",
    ],
)
def test_extract_json_no_object_span(text):
    """Test that text without an object span raises instead of returning {}."""
    with pytest.raises(MalformedResponse):
        JSONParser.extract_json(text)


def test_extract_json_invalid():
    """Invalid JSON raises and keeps the raw text for diagnostics."""
    text = 'Here: {"key": "value",, "other": }'
    with pytest.raises(MalformedResponse) as exc_info:
        JSONParser.extract_json(text)
    assert exc_info.value.raw_text == text


def test_extract_json_two_objects_is_invalid():
    """Two sibling objects make the outer span invalid JSON."""
    with pytest.raises(MalformedResponse):
        JSONParser.extract_json('{"a": 1} and also {"b": 2}')


def test_strip_code_fences_leaves_other_text():
    assert JSONParser.strip_code_fences("a ```python b ``` c") == "a  b  c"
