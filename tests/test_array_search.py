"""
Tests for toolbelt/array/search.py

Covers forward and backward scans, from_index normalisation, and the -1
"not found" convention.
"""

import pytest

from toolbelt.array import find_index, find_last_index, index_of, last_index_of
from toolbelt.errors import InvalidArgumentError

USERS = [
    {"user": "barney", "active": False},
    {"user": "fred", "active": False},
    {"user": "pebbles", "active": True},
]


def test_index_of_basic_and_from_index():
    """index_of finds the first match at or after from_index."""
    array = [1, 2, 1, 2]

    assert index_of(array, 2) == 1
    assert index_of(array, 2, 2) == 3
    assert index_of(array, 3) == -1


def test_index_of_negative_from_index():
    """A negative from_index counts from the end and clamps at 0."""
    array = [1, 2, 1, 2]

    assert index_of(array, 1, -2) == 2
    assert index_of(array, 1, -10) == 0


def test_last_index_of_basic_and_from_index():
    """last_index_of scans right to left from from_index."""
    array = [1, 2, 1, 2]

    assert last_index_of(array, 2) == 3
    assert last_index_of(array, 2, 2) == 1
    assert last_index_of(array, 2, 100) == 3
    assert last_index_of(array, 2, -2) == 1
    assert last_index_of(array, 5) == -1


def test_find_index_with_predicate():
    """find_index returns the first element the predicate accepts."""
    assert find_index(USERS, lambda o: o["user"] == "barney") == 0
    assert find_index(USERS, lambda o: o["active"]) == 2
    assert find_index(USERS, lambda o: o["user"] == "wilma") == -1


def test_find_last_index_with_predicate():
    """find_last_index returns the last element the predicate accepts."""
    assert find_last_index(USERS, lambda o: not o["active"]) == 1
    assert find_last_index(USERS, lambda o: not o["active"], 0) == 0


def test_search_on_empty_or_none():
    """Empty lists and None are never searched."""
    assert index_of([], 1) == -1
    assert index_of(None, 1) == -1
    assert find_index(None, bool) == -1
    assert find_last_index([], bool) == -1


def test_index_of_uses_equality():
    """Elements are compared with ==, so equal dicts match."""
    assert index_of([{"a": 1}, {"b": 2}], {"b": 2}) == 1


def test_search_rejects_non_arrays():
    """A string is not searched character by character."""
    with pytest.raises(InvalidArgumentError):
        index_of("abc", "a")


def test_predicate_errors_propagate():
    """Exceptions raised by the predicate reach the caller unchanged."""
    def boom(value):
        raise KeyError("boom")

    with pytest.raises(KeyError):
        find_index([1], boom)
