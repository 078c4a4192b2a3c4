"""
List helpers: accessors, search, slicing, sorted-list binary search,
in-place pull/remove, flattening and de-duplication.
"""

from toolbelt.array.accessors import first, head, last, nth, tail
from toolbelt.array.pull import pull, pull_all, pull_all_by, pull_all_with, pull_at, remove
from toolbelt.array.search import find_index, find_last_index, index_of, last_index_of
from toolbelt.array.slicing import slice_, take, take_right, take_right_while, take_while
from toolbelt.array.sorted import (
    sorted_index,
    sorted_index_by,
    sorted_index_of,
    sorted_last_index,
    sorted_last_index_by,
    sorted_last_index_of,
    sorted_uniq,
    sorted_uniq_by,
)
from toolbelt.array.transform import (
    chunk,
    compact,
    fill,
    flatten,
    flatten_deep,
    flatten_depth,
    from_pairs,
    join,
    reverse,
)
from toolbelt.array.uniq import uniq, uniq_by

__all__ = [
    "chunk",
    "compact",
    "fill",
    "find_index",
    "find_last_index",
    "first",
    "flatten",
    "flatten_deep",
    "flatten_depth",
    "from_pairs",
    "head",
    "index_of",
    "join",
    "last",
    "last_index_of",
    "nth",
    "pull",
    "pull_all",
    "pull_all_by",
    "pull_all_with",
    "pull_at",
    "remove",
    "reverse",
    "slice_",
    "sorted_index",
    "sorted_index_by",
    "sorted_index_of",
    "sorted_last_index",
    "sorted_last_index_by",
    "sorted_last_index_of",
    "sorted_uniq",
    "sorted_uniq_by",
    "tail",
    "take",
    "take_right",
    "take_right_while",
    "take_while",
    "uniq",
    "uniq_by",
]
