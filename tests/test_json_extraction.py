"""Tests for JSON extraction from model replies."""

import pytest

from nutrition_ai.domain.analysis import AnalysisResult
from nutrition_ai.errors import InternalError
from nutrition_ai.services.json_extraction import extract_json_object, parse_reply


def test_extracts_single_object_from_prose() -> None:
    text = 'Here is the analysis:\n{"foodName": "apple", "calories": 95}\nEnjoy!'

    assert extract_json_object(text) == {"foodName": "apple", "calories": 95}


def test_extracts_object_from_code_fence() -> None:
    text = '```json\n{"a": {"b": [1, 2]}}\n```'

    assert extract_json_object(text) == {"a": {"b": [1, 2]}}


def test_braces_inside_strings_do_not_break_boundary() -> None:
    text = 'Result: {"note": "use {curly} braces }", "value": 1} trailing }'

    assert extract_json_object(text) == {"note": "use {curly} braces }", "value": 1}


def test_first_of_multiple_objects_wins() -> None:
    text = '{"first": 1} and then {"second": 2}'

    assert extract_json_object(text) == {"first": 1}


def test_skips_unparseable_prefix_brace() -> None:
    text = 'Template {name} filled: {"name": "rice"}'

    assert extract_json_object(text) == {"name": "rice"}


def test_reply_without_brace_fails() -> None:
    with pytest.raises(InternalError, match="Could not parse AI response"):
        extract_json_object("I cannot analyze this image.")


def test_malformed_json_fails() -> None:
    with pytest.raises(InternalError, match="Could not parse AI response"):
        extract_json_object('{"calories": 100,,}')


def test_empty_reply_fails() -> None:
    with pytest.raises(InternalError, match="No response from AI"):
        extract_json_object("")


def test_parse_reply_rejects_out_of_range_values() -> None:
    text = '{"foodName": "cake", "calories": 300, "healthScore": 14}'

    with pytest.raises(InternalError, match="healthScore"):
        parse_reply(text, AnalysisResult)
