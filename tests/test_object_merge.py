"""
Tests for toolbelt/object/merge.py
"""

from collections import OrderedDict

import pytest

from toolbelt.errors import InvalidArgumentError
from toolbelt.object import merge


def test_merge_recurses_into_plain_dicts():
    """merge({a: {b: 1}}, {a: {c: 2}}) gives {a: {b: 1, c: 2}}."""
    assert merge({"a": {"b": 1}}, {"a": {"c": 2}}) == {"a": {"b": 1, "c": 2}}


def test_merge_mutates_and_returns_target():
    """The target is updated in place, sources left to right."""
    target = {"a": 1}
    result = merge(target, {"b": 2}, {"a": 3, "c": 4})

    assert result is target
    assert target == {"a": 3, "b": 2, "c": 4}


def test_merge_replaces_lists_and_instances_by_reference():
    """Only plain dicts are merged; everything else is assigned as-is."""
    class Point:
        def __init__(self, x):
            self.x = x

    items = [3]
    point = Point(1)
    target = {"items": [1, 2], "point": Point(0), "ordered": {"k": 1}}
    merge(target, {"items": items, "point": point, "ordered": OrderedDict(j=2)})

    assert target["items"] is items
    assert target["point"] is point
    assert target["ordered"] == OrderedDict(j=2)


def test_merge_skips_non_mapping_sources():
    """None and scalars among the sources are ignored."""
    assert merge({"a": 1}, None, 5, {"b": 2}) == {"a": 1, "b": 2}


def test_merge_rejects_non_mapping_target():
    """The target has to be a mutable mapping."""
    with pytest.raises(InvalidArgumentError):
        merge(None, {"a": 1})
    with pytest.raises(InvalidArgumentError):
        merge([], {"a": 1})
