"""
Unit tests for path lookups into assessment records.
"""

import copy

from assessment_api.services.assessment_data import find_assessment
from assessment_api.services.paths import get_value_from_path, loose_equals


NESTED = {"a": {"b": {"c": 5}}}

RECORD = {
    "accuracy": 0,
    "exercises": [
        {"id": 73, "analysisScore": 76},
        {"id": 235, "setList": [{"time": 62}], "name": "Jog test"},
        {"id": 235, "setList": [{"time": 99}], "name": "Duplicate id"},
        {"id": "900", "score": 1},
    ],
    "vitalsMap": {"vitals": {"heart_rate": 72}, "flag": False},
    "notAList": {"id": 235},
}


# --- Dot traversal ---

def test_dot_path_resolves_nested_value():
    assert get_value_from_path(NESTED, "a.b.c") == 5


def test_missing_leaf_returns_none():
    assert get_value_from_path(NESTED, "a.b.x") is None


def test_missing_intermediate_segment_returns_none():
    assert get_value_from_path(NESTED, "a.x.c") is None


def test_traversal_through_non_mapping_returns_none():
    assert get_value_from_path(NESTED, "a.b.c.d") is None


def test_missing_record_or_path_returns_none():
    assert get_value_from_path(None, "a.b") is None
    assert get_value_from_path({}, "a") is None
    assert get_value_from_path(NESTED, "") is None
    assert get_value_from_path(NESTED, None) is None


def test_single_segment_path():
    assert get_value_from_path(NESTED, "a") == {"b": {"c": 5}}
    assert get_value_from_path(NESTED, "missing") is None


def test_falsy_values_are_returned_not_nulled():
    assert get_value_from_path(RECORD, "accuracy") == 0
    assert get_value_from_path(RECORD, "vitalsMap.flag") is False


def test_indexed_segment():
    record = {"setList": [{"time": 10}, {"time": 20}]}
    assert get_value_from_path(record, "setList[1].time") == 20
    assert get_value_from_path(record, "setList[5].time") is None
    assert get_value_from_path({"setList": {"0": 1}}, "setList[0]") is None


# --- Array filter ---

def test_filter_selects_first_matching_element():
    assert get_value_from_path(RECORD, "exercises[?(@.id==235)].setList[0].time") == 62
    assert get_value_from_path(RECORD, "exercises[?(@.id==235)].name") == "Jog test"


def test_filter_on_other_field():
    assert get_value_from_path(RECORD, "exercises[?(@.name=='Duplicate id')].setList[0].time") == 99


def test_filter_uses_loose_equality():
    # literal is text, record id is a number (and vice versa)
    assert get_value_from_path(RECORD, "exercises[?(@.id==73)].analysisScore") == 76
    assert get_value_from_path(RECORD, "exercises[?(@.id==900)].score") == 1
    assert get_value_from_path(RECORD, 'exercises[?(@.id=="73")].analysisScore') == 76


def test_filter_without_match_returns_none():
    assert get_value_from_path(RECORD, "exercises[?(@.id==1)].analysisScore") is None


def test_filter_on_non_array_returns_none():
    assert get_value_from_path(RECORD, "notAList[?(@.id==235)].id") is None
    assert get_value_from_path(RECORD, "missing[?(@.id==235)].id") is None


def test_filter_match_with_missing_remaining_path_returns_none():
    assert get_value_from_path(RECORD, "exercises[?(@.id==73)].setList[0].time") is None


def test_filter_with_nested_array_path():
    record = {"data": {"items": [{"k": "x", "v": 3}]}}
    assert get_value_from_path(record, "data.items[?(@.k==x)].v") == 3


# --- Misc ---

def test_resolver_does_not_mutate_record():
    record = find_assessment("session_001")
    snapshot = copy.deepcopy(record)
    get_value_from_path(record, "exercises[?(@.id==235)].setList[0].time")
    get_value_from_path(record, "vitalsMap.vitals.heart_rate")
    assert record == snapshot


def test_loose_equals():
    assert loose_equals(235, "235")
    assert loose_equals(1.5, "1.50")
    assert loose_equals("abc", "abc")
    assert not loose_equals(None, "None")
    assert not loose_equals([235], "235")
    assert not loose_equals(235, "236")


def test_filter_skips_elements_with_huge_integer_fields():
    record = {"items": [{"id": 10**400, "v": 1}, {"id": 5, "v": 2}]}

    assert get_value_from_path(record, "items[?(@.id==5)].v") == 2
    assert not loose_equals(10**400, "1e400")
