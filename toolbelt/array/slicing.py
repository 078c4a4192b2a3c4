"""
Slicing helpers: slice_, take, take_right, take_while, take_right_while.

All of them return new lists and never mutate their input. Offsets follow
Python slicing: a start past the end gives an empty result and is never
reset to the beginning of the list.
"""

from typing import Any, Callable, List, Optional, Sequence

from toolbelt.array._base import ensure_sequence, normalize_bounds


def slice_(
    array: Optional[Sequence[Any]],
    start: int = 0,
    end: Optional[int] = None,
) -> List[Any]:
    """
    Create a list of array's elements from start up to, but not including, end.

    Negative offsets count from the end. A start at or after end gives an
    empty list.

    Example:
        >>> slice_([1, 2, 3], 0, 2)
        [1, 2]
        >>> slice_([1, 2, 3], -2)
        [2, 3]
    """
    array = ensure_sequence(array)
    if not array:
        return []
    bounds = normalize_bounds(len(array), start, end)
    return list(array[bounds.start:bounds.stop])


def take(array: Optional[Sequence[Any]], n: int = 1) -> List[Any]:
    """
    Take n elements from the beginning.

    Example:
        >>> take([1, 2, 3])
        [1]
        >>> take([1, 2, 3], 5)
        [1, 2, 3]
    """
    return slice_(array, 0, max(n, 0))


def take_right(array: Optional[Sequence[Any]], n: int = 1) -> List[Any]:
    """
    Take n elements from the end.

    Example:
        >>> take_right([1, 2, 3], 2)
        [2, 3]
    """
    array = ensure_sequence(array)
    if not array or n <= 0:
        return []
    length = len(array)
    return slice_(array, max(length - n, 0), length)


def take_while(array: Optional[Sequence[Any]], predicate: Callable[[Any], Any]) -> List[Any]:
    """
    Take elements from the beginning until predicate returns falsey.

    Example:
        >>> take_while([1, 2, 5, 1], lambda n: n < 3)
        [1, 2]
    """
    array = ensure_sequence(array)
    if not array:
        return []
    index = 0
    while index < len(array) and predicate(array[index]):
        index += 1
    return slice_(array, 0, index)


def take_right_while(
    array: Optional[Sequence[Any]],
    predicate: Callable[[Any], Any],
) -> List[Any]:
    """
    Take elements from the end until predicate returns falsey.

    Example:
        >>> take_right_while([5, 1, 2], lambda n: n < 3)
        [1, 2]
    """
    array = ensure_sequence(array)
    if not array:
        return []
    index = len(array)
    while index > 0 and predicate(array[index - 1]):
        index -= 1
    return slice_(array, index, len(array))
