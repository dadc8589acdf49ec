"""Tests for object helpers: trim, pick/remove keys, validity, iterate."""

from __future__ import annotations

import math
from collections import OrderedDict

from sagus.core.objects import (
    is_valid,
    is_valid_object,
    iterate,
    pick_keys,
    remove_keys,
    trim_object,
)
from sagus.core.types import Entry


# ---- trim_object ----

def test_trim_removes_none_values():
    obj = {"name": "John Doe", "age": None, "gender": None}
    assert trim_object(obj) == {"name": "John Doe"}


def test_trim_removes_empty_and_blank_strings():
    obj = {"name": "John Doe", "gender": "", "note": "   "}
    assert trim_object(obj) == {"name": "John Doe"}


def test_trim_removes_nan():
    assert trim_object({"score": math.nan, "rank": 1}) == {"rank": 1}


def test_trim_keeps_false_zero_and_empty_containers():
    obj = {"name": "John Doe", "is_female": False, "count": 0, "meta": {}, "tags": []}
    assert trim_object(obj) == obj


def test_trim_nested_objects():
    obj = {
        "name": "John Doe",
        "gender": "",
        "body": {"height": None, "weight": "20kg", "blood_group": ""},
    }
    assert trim_object(obj) == {"name": "John Doe", "body": {"weight": "20kg"}}


def test_trim_does_not_recurse_into_lists():
    obj = {"items": [None, "", {"a": None}]}
    assert trim_object(obj) == obj


def test_trim_does_not_mutate_input():
    obj = {"a": None, "b": {"c": ""}}
    trim_object(obj)
    assert obj == {"a": None, "b": {"c": ""}}


def test_trim_returns_new_object():
    obj = {"a": 1}
    assert trim_object(obj) is not obj


# ---- pick_keys / remove_keys ----

PERSON = {"name": "John Doe", "age": 40, "gender": "Male"}


def test_pick_single_key():
    assert pick_keys(PERSON, ["name"]) == {"name": "John Doe"}


def test_pick_multiple_keys():
    assert pick_keys(PERSON, ["name", "age"]) == {"name": "John Doe", "age": 40}


def test_pick_ignores_missing_keys():
    assert pick_keys(PERSON, ["name", "email"]) == {"name": "John Doe"}


def test_remove_single_key():
    assert remove_keys(PERSON, ["name"]) == {"age": 40, "gender": "Male"}


def test_remove_multiple_keys():
    assert remove_keys(PERSON, ["name", "gender"]) == {"age": 40}


def test_pick_and_remove_are_shallow_copies():
    picked = pick_keys(PERSON, ["name"])
    kept = remove_keys(PERSON, [])
    assert picked is not PERSON
    assert kept == PERSON and kept is not PERSON


# ---- is_valid ----

def test_is_valid_rejects_missing_values():
    assert is_valid(None) is False
    assert is_valid(math.nan) is False
    assert is_valid("") is False
    assert is_valid("  \t") is False


def test_is_valid_accepts_falsy_values():
    assert is_valid(False) is True
    assert is_valid(0) is True
    assert is_valid({}) is True
    assert is_valid([]) is True


# ---- is_valid_object ----

def test_is_valid_object_rejects_invalid_values():
    assert is_valid_object(None) is False
    assert is_valid_object(math.nan) is False
    assert is_valid_object("") is False


def test_is_valid_object_rejects_empty_containers():
    assert is_valid_object({}) is False
    assert is_valid_object([]) is False


def test_is_valid_object_accepts_non_empty_containers():
    assert is_valid_object({"name": None}) is True
    assert is_valid_object([None]) is True


def test_is_valid_object_accepts_scalars():
    assert is_valid_object(False) is True
    assert is_valid_object("x") is True
    assert is_valid_object(12) is True


# ---- iterate ----

def test_iterate_list():
    assert list(iterate(["a", "b", "c"])) == [Entry(0, "a"), Entry(1, "b"), Entry(2, "c")]


def test_iterate_mapping_insertion_order():
    data = OrderedDict([("z", 1), ("a", 2)])
    assert [(e.key, e.value) for e in iterate(data)] == [("z", 1), ("a", 2)]


def test_iterate_is_lazy():
    gen = iterate({"a": 1, "b": 2})
    assert next(gen) == Entry("a", 1)
    assert next(gen) == Entry("b", 2)


def test_iterate_unpacks():
    pairs = {key: value for key, value in iterate({"a": 1})}
    assert pairs == {"a": 1}


def test_iterate_empty():
    assert list(iterate([])) == []
    assert list(iterate({})) == []


def test_iterate_restarts_per_call():
    data = [1, 2]
    assert list(iterate(data)) == list(iterate(data))
