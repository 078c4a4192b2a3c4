"""
Tests for toolbelt/array/sorted.py

Checks the leftmost/rightmost insertion point contract and that inserting at
the reported index keeps the list sorted.
"""

import math

import pytest

from toolbelt.array import (
    sorted_index,
    sorted_index_by,
    sorted_index_of,
    sorted_last_index,
    sorted_last_index_by,
    sorted_last_index_of,
    sorted_uniq,
    sorted_uniq_by,
)
from toolbelt.errors import InvalidArgumentError


def test_sorted_index_leftmost():
    """sorted_index returns the position before any equal elements."""
    assert sorted_index([30, 50], 40) == 1
    assert sorted_index([4, 5, 5, 5, 6], 5) == 1
    assert sorted_index([4, 5], 1) == 0
    assert sorted_index([4, 5], 9) == 2


def test_sorted_last_index_rightmost():
    """sorted_last_index returns the position after all equal elements."""
    assert sorted_last_index([4, 5, 5, 5, 6], 5) == 4
    assert sorted_last_index([4, 5], 1) == 0


def test_insertion_points_are_ordered_and_preserve_sorting():
    """sorted_index <= sorted_last_index and both are valid insertion points."""
    array = [1, 3, 3, 3, 7, 9, 9, 12]
    for value in (0, 1, 2, 3, 8, 9, 12, 20):
        low = sorted_index(array, value)
        high = sorted_last_index(array, value)
        assert low <= high

        for index in (low, high):
            inserted = array[:index] + [value] + array[index:]
            assert inserted == sorted(inserted)


def test_sorted_index_by_uses_iteratee():
    """The _by variants rank value and elements through the iteratee."""
    objects = [{"x": 4}, {"x": 5}]

    assert sorted_index_by(objects, {"x": 4}, lambda o: o["x"]) == 0
    assert sorted_last_index_by(objects, {"x": 4}, lambda o: o["x"]) == 1


def test_sorted_index_of_and_last_index_of():
    """Binary-search equivalents of index_of / last_index_of."""
    array = [4, 5, 5, 5, 6]

    assert sorted_index_of(array, 5) == 1
    assert sorted_last_index_of(array, 5) == 3
    assert sorted_index_of(array, 7) == -1
    assert sorted_last_index_of(array, 3) == -1


def test_sorted_on_empty_or_none():
    """Empty input: insertion point 0, not found -1, uniq []."""
    assert sorted_index([], 1) == 0
    assert sorted_last_index(None, 1) == 0
    assert sorted_index_of(None, 1) == -1
    assert sorted_last_index_of([], 1) == -1
    assert sorted_uniq(None) == []
    assert sorted_uniq_by([], math.floor) == []


def test_sorted_uniq():
    """Consecutive duplicates collapse to one."""
    assert sorted_uniq([1, 1, 2]) == [1, 2]
    assert sorted_uniq([1, 2, 2, 3, 3, 3]) == [1, 2, 3]


def test_sorted_uniq_by_returns_computed_values():
    """sorted_uniq_by yields iteratee outputs, not the original elements."""
    assert sorted_uniq_by([1.1, 1.2, 2.3, 2.4], math.floor) == [1, 2]


def test_sorted_rejects_non_arrays():
    """A string is not an array."""
    with pytest.raises(InvalidArgumentError):
        sorted_index("abc", "b")
