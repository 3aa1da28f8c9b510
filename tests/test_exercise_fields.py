"""
Tests for exercise field parsing and readiness maturity
"""
import json
from companion.content.exercise_fields import (
    ChoiceField,
    NumberField,
    RatingField,
    TextareaField,
    parse_exercise_fields,
)
from companion.exercises.maturity import calculate_maturity_level


def test_object_fields_are_validated():
    raw = {
        "questions": [
            {"id": "comfort", "type": "rating", "label": "Comfort", "scale": 5},
            {"id": "notes", "type": "textarea", "label": "Notes"},
        ]
    }
    groups = parse_exercise_fields(raw, "ex-1")

    assert list(groups) == ["questions"]
    assert isinstance(groups["questions"][0], RatingField)
    assert groups["questions"][0].scale == 5
    assert isinstance(groups["questions"][1], TextareaField)


def test_json_string_fields_are_parsed():
    raw = json.dumps({"main": [{"id": "hours", "type": "number", "label": "Hours", "min": 0}]})
    groups = parse_exercise_fields(raw, "ex-1")

    assert isinstance(groups["main"][0], NumberField)
    assert groups["main"][0].min == 0


def test_malformed_json_becomes_empty():
    assert parse_exercise_fields("{not json", "ex-1") == {}


def test_missing_or_non_object_fields_become_empty():
    assert parse_exercise_fields(None, "ex-1") == {}
    assert parse_exercise_fields("[1, 2, 3]", "ex-1") == {}


def test_select_and_radio_share_a_config():
    raw = {
        "main": [
            {"id": "tool", "type": "select", "label": "Tool", "options": ["A", "B"]},
            {"id": "freq", "type": "radio", "label": "Frequency", "options": ["daily", "weekly"]},
        ]
    }
    groups = parse_exercise_fields(raw, "ex-1")

    assert all(isinstance(f, ChoiceField) for f in groups["main"])
    assert groups["main"][1].options == ["daily", "weekly"]


def test_unknown_field_type_is_dropped():
    raw = {
        "main": [
            {"id": "ok", "type": "text", "label": "Fine"},
            {"id": "bad", "type": "hologram", "label": "Unknown"},
            {"id": "no-label", "type": "text"},
        ]
    }
    groups = parse_exercise_fields(raw, "ex-1")

    assert [f.id for f in groups["main"]] == ["ok"]


def test_group_that_is_not_a_list_is_skipped():
    raw = {"broken": {"id": "x"}, "main": [{"id": "ok", "type": "checkbox", "label": "Done"}]}
    groups = parse_exercise_fields(raw, "ex-1")

    assert list(groups) == ["main"]


def test_maturity_levels():
    assert calculate_maturity_level({"a": 3, "b": 3, "c": 2}).level == "Advanced"
    assert calculate_maturity_level({"a": 2, "b": 2}).level == "Intermediate"
    assert calculate_maturity_level({"a": 2, "b": 1}).level == "Developing"
    assert calculate_maturity_level({"a": 1, "b": 0}).level == "Beginner"


def test_maturity_threshold_is_inclusive():
    """12 of 15 points is exactly 80%."""
    result = calculate_maturity_level({"a": 3, "b": 3, "c": 2, "d": 2, "e": 2})
    assert result.level == "Advanced"
    assert round(result.percentage, 6) == 80.0


def test_maturity_ignores_non_scores():
    responses = {"a": 3, "notes": "text", "big": 10, "negative": -1, "flag": True}
    result = calculate_maturity_level(responses)

    assert result.level == "Advanced"
    assert result.percentage == 100.0


def test_maturity_without_scores():
    assert calculate_maturity_level({"notes": "just text"}) is None
    assert calculate_maturity_level({}) is None
    assert calculate_maturity_level(None) is None
