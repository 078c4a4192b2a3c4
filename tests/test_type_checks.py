"""
Tests for toolbelt/type/checks.py
"""

from collections import OrderedDict

import numpy as np
import pandas as pd

from toolbelt.type import is_array, is_empty, is_object


class Empty:
    pass


class WithAttribute:
    def __init__(self):
        self.value = 1


def test_is_array():
    """Lists and tuples only."""
    assert is_array([1, 2, 3])
    assert is_array(())
    assert not is_array("abc")
    assert not is_array({"a": 1})
    assert not is_array(None)


def test_is_object_plain_dicts_only():
    """Subclasses and instances are not plain objects."""
    assert is_object({})
    assert is_object(dict(a=1))
    assert not is_object(OrderedDict())
    assert not is_object([1])
    assert not is_object(Empty())


def test_is_empty_true_cases():
    """None, empty containers and attribute-less objects are empty."""
    for value in (None, "", [], (), {}, set(), frozenset(), b"", Empty()):
        assert is_empty(value), value


def test_is_empty_false_cases():
    """Numbers, booleans and non-empty things are not empty."""
    for value in (0, 1.5, True, False, "a", [0], {"a": None}, {0}, WithAttribute()):
        assert not is_empty(value), value


def test_is_empty_numpy_and_pandas():
    """numpy/pandas emptiness is checked without truth-testing."""
    assert is_empty(np.array([]))
    assert not is_empty(np.array([0]))
    assert is_empty(pd.Series(dtype=float))
    assert not is_empty(pd.Series([1]))
    assert is_empty(pd.DataFrame())
    assert not is_empty(pd.DataFrame({"a": [1]}))
