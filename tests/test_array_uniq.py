"""
Tests for toolbelt/array/uniq.py
"""

import math

import pytest

from toolbelt.array import uniq, uniq_by
from toolbelt.errors import InvalidArgumentError


def test_uniq_keeps_first_occurrence_order():
    """uniq([2, 1, 2]) is [2, 1]."""
    assert uniq([2, 1, 2]) == [2, 1]
    assert uniq(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
    assert uniq([]) == []


def test_uniq_does_not_mutate_input():
    """uniq returns a new list."""
    array = [1, 1, 2]
    uniq(array)

    assert array == [1, 1, 2]


def test_uniq_with_unhashable_elements():
    """dicts and lists are compared by equality."""
    assert uniq([{"a": 1}, {"a": 1}, [1], [1], {"a": 2}]) == [{"a": 1}, [1], {"a": 2}]


def test_uniq_by_keeps_first_of_each_group():
    """Elements mapping to the same key collapse to the first one."""
    assert uniq_by([2.1, 1.2, 2.3], math.floor) == [2.1, 1.2]
    assert uniq_by([{"x": 1}, {"x": 2}, {"x": 1}], lambda o: o["x"]) == [{"x": 1}, {"x": 2}]


def test_uniq_rejects_non_arrays():
    """None and strings are not arrays."""
    with pytest.raises(InvalidArgumentError):
        uniq(None)
    with pytest.raises(InvalidArgumentError):
        uniq_by("aab", str.lower)


def test_uniq_treats_equal_numbers_and_bools_as_one_value():
    """1, True and 1.0 are equal in Python; the first one is kept."""
    result = uniq([1, True, 1.0, 0, False])

    assert result == [1, 0]
    assert type(result[0]) is int
