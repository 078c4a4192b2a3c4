"""
Binary-search helpers for lists already sorted in ascending order.

**Conceptual**: ``sorted_index`` answers "where would value go to keep the
list sorted?". When equal elements are present there are two valid answers:
the leftmost insertion point (before every equal element) and the rightmost
one (after every equal element). The ``sorted_index*`` functions return the
leftmost point, the ``sorted_last_index*`` functions the rightmost one, so
for any value ``sorted_index(a, v) <= sorted_last_index(a, v)``.

**Functionally**:
  - O(log n) comparisons via the standard library's ``bisect``.
  - The ``*_by`` variants rank both value and elements by ``iteratee``; the
    iteratee is evaluated lazily, only for the elements the search visits.
  - Unsorted input gives an unspecified (but in-range) answer.
  - None in place of a list behaves like an empty list.
"""

import bisect
from typing import Any, Callable, List, Optional, Sequence

from toolbelt.array._base import ensure_sequence


def sorted_index(array: Optional[Sequence[Any]], value: Any) -> int:
    """
    Lowest index at which value can be inserted to keep array sorted.

    Example:
        >>> sorted_index([30, 50], 40)
        1
        >>> sorted_index([4, 5, 5, 5, 6], 5)
        1
    """
    array = ensure_sequence(array)
    if not array:
        return 0
    return bisect.bisect_left(array, value)


def sorted_index_by(
    array: Optional[Sequence[Any]],
    value: Any,
    iteratee: Callable[[Any], Any],
) -> int:
    """
    Like sorted_index, ranking value and elements by iteratee.

    Example:
        >>> sorted_index_by([{"x": 4}, {"x": 5}], {"x": 4}, lambda o: o["x"])
        0
    """
    array = ensure_sequence(array)
    if not array:
        return 0
    return bisect.bisect_left(array, iteratee(value), key=iteratee)


def sorted_index_of(array: Optional[Sequence[Any]], value: Any) -> int:
    """
    Index of the first element equal to value, found by binary search, else -1.

    Example:
        >>> sorted_index_of([4, 5, 5, 5, 6], 5)
        1
    """
    array = ensure_sequence(array)
    if not array:
        return -1
    index = bisect.bisect_left(array, value)
    return index if index < len(array) and array[index] == value else -1


def sorted_last_index(array: Optional[Sequence[Any]], value: Any) -> int:
    """
    Highest index at which value can be inserted to keep array sorted.

    Example:
        >>> sorted_last_index([4, 5, 5, 5, 6], 5)
        4
    """
    array = ensure_sequence(array)
    if not array:
        return 0
    return bisect.bisect_right(array, value)


def sorted_last_index_by(
    array: Optional[Sequence[Any]],
    value: Any,
    iteratee: Callable[[Any], Any],
) -> int:
    """
    Like sorted_last_index, ranking value and elements by iteratee.

    Example:
        >>> sorted_last_index_by([{"x": 4}, {"x": 5}], {"x": 4}, lambda o: o["x"])
        1
    """
    array = ensure_sequence(array)
    if not array:
        return 0
    return bisect.bisect_right(array, iteratee(value), key=iteratee)


def sorted_last_index_of(array: Optional[Sequence[Any]], value: Any) -> int:
    """
    Index of the last element equal to value, found by binary search, else -1.

    Example:
        >>> sorted_last_index_of([4, 5, 5, 5, 6], 5)
        3
    """
    array = ensure_sequence(array)
    if not array:
        return -1
    index = bisect.bisect_right(array, value)
    return index - 1 if index > 0 and array[index - 1] == value else -1


def sorted_uniq(array: Optional[Sequence[Any]]) -> List[Any]:
    """
    Drop consecutive duplicates from a sorted list.

    Example:
        >>> sorted_uniq([1, 1, 2])
        [1, 2]
    """
    array = ensure_sequence(array)
    if not array:
        return []
    result = [array[0]]
    for value in array[1:]:
        if value != result[-1]:
            result.append(value)
    return result


def sorted_uniq_by(
    array: Optional[Sequence[Any]],
    iteratee: Callable[[Any], Any],
) -> List[Any]:
    """
    Collapse runs of equal ``iteratee`` results, returning the computed values.

    Note that the result holds the iteratee's outputs, not the original
    elements.

    Example:
        >>> import math
        >>> sorted_uniq_by([1.1, 1.2, 2.3, 2.4], math.floor)
        [1, 2]
    """
    array = ensure_sequence(array)
    if not array:
        return []
    result = [iteratee(array[0])]
    for element in array[1:]:
        computed = iteratee(element)
        if computed != result[-1]:
            result.append(computed)
    return result
