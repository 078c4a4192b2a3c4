"""
In-place removal: pull, pull_all, pull_all_by, pull_all_with, pull_at, remove.

**Conceptual**: Unlike the rest of toolbelt.array these functions mutate the
list they are given. The four ``pull*`` variants differ only in how they
decide whether an element goes, so they all delegate to one compaction
routine, ``_pull_where``, which keeps the survivors in order and rewrites the
list in a single slice assignment. The list object's identity is preserved:
other references to it see the change.

Equality is Python ``==``; unhashable values (dicts, lists) are supported.
Because ``1 == 1.0 == True`` in Python, pulling ``1`` also pulls ``True``
and ``1.0``.
None in place of a list gives ``[]``.
"""

from typing import Any, Callable, Iterable, List, Optional, Sequence, Union

from toolbelt.array._base import SeenValues, ensure_list


def _pull_where(array: List[Any], should_pull: Callable[[Any], Any]) -> List[Any]:
    """
    Remove every element of array for which should_pull is truthy.

    Returns:
        The removed elements, in their original order.
    """
    kept = []
    pulled = []
    for value in array:
        (pulled if should_pull(value) else kept).append(value)
    array[:] = kept
    return pulled


def pull(array: Optional[List[Any]], *values: Any) -> List[Any]:
    """
    Remove all given values from array.

    Returns:
        array itself, mutated.

    Example:
        >>> array = ["a", "b", "c", "a", "b", "c"]
        >>> pull(array, "a", "c")
        ['b', 'b']
    """
    return pull_all(array, values)


def pull_all(array: Optional[List[Any]], values: Optional[Iterable[Any]]) -> List[Any]:
    """
    Like pull, but takes the values to remove as one iterable.

    Example:
        >>> array = ["a", "b", "c", "a", "b", "c"]
        >>> pull_all(array, ["a", "c"])
        ['b', 'b']
    """
    array = ensure_list(array)
    if array is None:
        return []
    if values is None:
        return array
    doomed = SeenValues(values)
    _pull_where(array, lambda value: value in doomed)
    return array


def pull_all_by(
    array: Optional[List[Any]],
    values: Optional[Iterable[Any]],
    iteratee: Callable[[Any], Any],
) -> List[Any]:
    """
    Like pull_all, comparing ``iteratee(element)`` with ``iteratee(value)``.

    Example:
        >>> array = [{"x": 1}, {"x": 2}, {"x": 3}, {"x": 1}]
        >>> pull_all_by(array, [{"x": 1}, {"x": 3}], lambda o: o["x"])
        [{'x': 2}]
    """
    array = ensure_list(array)
    if array is None:
        return []
    if values is None:
        return array
    doomed = SeenValues(iteratee(value) for value in values)
    _pull_where(array, lambda value: iteratee(value) in doomed)
    return array


def pull_all_with(
    array: Optional[List[Any]],
    values: Optional[Iterable[Any]],
    comparator: Callable[[Any, Any], Any],
) -> List[Any]:
    """
    Like pull_all, removing elements for which ``comparator(element, value)``
    is truthy for any of the values.

    Example:
        >>> array = [{"x": 1, "y": 2}, {"x": 3, "y": 4}]
        >>> pull_all_with(array, [{"x": 3, "y": 4}], lambda a, b: a["x"] == b["x"])
        [{'x': 1, 'y': 2}]
    """
    array = ensure_list(array)
    if array is None:
        return []
    if values is None:
        return array
    candidates = list(values)
    _pull_where(
        array,
        lambda value: any(comparator(value, other) for other in candidates),
    )
    return array


def pull_at(array: Optional[List[Any]], indexes: Union[int, Sequence[int]]) -> List[Any]:
    """
    Remove the elements at the given indexes and return them.

    Negative indexes count from the end; out-of-range indexes are ignored and
    an index listed twice is removed once.

    Returns:
        Removed elements in ascending index order.

    Example:
        >>> array = ["a", "b", "c", "d"]
        >>> pull_at(array, [1, 3])
        ['b', 'd']
        >>> array
        ['a', 'c']
    """
    array = ensure_list(array)
    if array is None:
        return []
    if isinstance(indexes, int):
        indexes = [indexes]

    length = len(array)
    targets = sorted({
        index + length if index < 0 else index
        for index in indexes
        if -length <= index < length
    })
    pulled = [array[index] for index in targets]
    # Delete from the end so earlier positions stay valid
    for index in reversed(targets):
        del array[index]
    return pulled


def remove(array: Optional[List[Any]], predicate: Callable[[Any], Any]) -> List[Any]:
    """
    Remove the elements predicate returns truthy for and return them.

    The predicate is called with the element only; use ``pull_at`` with
    computed indexes when the decision depends on position.

    Example:
        >>> array = [1, 2, 3, 4]
        >>> remove(array, lambda n: n % 2 == 0)
        [2, 4]
        >>> array
        [1, 3]
    """
    array = ensure_list(array)
    if array is None:
        return []
    return _pull_where(array, predicate)
