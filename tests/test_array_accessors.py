"""
Tests for toolbelt/array/accessors.py
"""

import pytest

from toolbelt.array import first, head, last, nth, tail
from toolbelt.errors import InvalidArgumentError


def test_head_and_last_match_indexing():
    """head is a[0] and last is a[-1] for non-empty lists and tuples."""
    for array in ([1], [1, 2, 3], ("x", "y"), [None, 0, ""]):
        assert head(array) is array[0]
        assert last(array) is array[-1]


def test_first_is_alias_of_head():
    """first and head are the same function."""
    assert first is head


def test_accessors_on_empty_input():
    """Empty lists and None give None (or [] for tail)."""
    assert head([]) is None
    assert last([]) is None
    assert head(None) is None
    assert last(None) is None
    assert nth(None, 2) is None
    assert tail([]) == []
    assert tail(None) == []


def test_nth_positive_and_negative():
    """nth indexes from the start, or from the end when negative."""
    array = ["a", "b", "c", "d"]

    assert nth(array) == "a"
    assert nth(array, 1) == "b"
    assert nth(array, -2) == "c"


def test_nth_out_of_range_returns_none():
    """Out-of-range indexes do not raise."""
    array = ["a", "b"]

    assert nth(array, 2) is None
    assert nth(array, -3) is None


def test_tail_returns_new_list():
    """tail copies and does not touch the input."""
    array = [1, 2, 3]
    result = tail(array)

    assert result == [2, 3]
    result.append(4)
    assert array == [1, 2, 3]
    assert tail((1, 2)) == [2]


def test_accessors_reject_non_arrays():
    """Strings, dicts and numbers are not arrays."""
    for bad in ("abc", {"a": 1}, 42):
        with pytest.raises(InvalidArgumentError):
            head(bad)
        with pytest.raises(InvalidArgumentError):
            last(bad)
        with pytest.raises(InvalidArgumentError):
            tail(bad)
