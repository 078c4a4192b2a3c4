"""
Linear searches returning indexes.

Every function returns -1 when nothing matches, including for empty or None
input. ``from_index`` follows the usual conventions: negative values count
from the end; for the right-to-left searches a value past the end is clamped
to the last index.
"""

from typing import Any, Callable, Optional, Sequence

from toolbelt.array._base import (
    ensure_sequence,
    normalize_from_index,
    normalize_from_last_index,
)


def index_of(array: Optional[Sequence[Any]], value: Any, from_index: int = 0) -> int:
    """
    Get the index of the first element equal to value.

    Example:
        >>> index_of([1, 2, 1, 2], 2)
        1
        >>> index_of([1, 2, 1, 2], 2, 2)
        3
    """
    return find_index(array, lambda element: element == value, from_index)


def last_index_of(
    array: Optional[Sequence[Any]],
    value: Any,
    from_index: Optional[int] = None,
) -> int:
    """
    Like index_of, but scans from right to left.

    Example:
        >>> last_index_of([1, 2, 1, 2], 2)
        3
        >>> last_index_of([1, 2, 1, 2], 2, 2)
        1
    """
    return find_last_index(array, lambda element: element == value, from_index)


def find_index(
    array: Optional[Sequence[Any]],
    predicate: Callable[[Any], Any],
    from_index: int = 0,
) -> int:
    """
    Get the index of the first element predicate returns truthy for.

    Args:
        array: List or tuple to inspect.
        predicate: Called with each element.
        from_index: Index to start searching at.

    Returns:
        Matching index, else -1.

    Example:
        >>> users = [{"user": "barney", "active": False},
        ...          {"user": "pebbles", "active": True}]
        >>> find_index(users, lambda o: o["active"])
        1
    """
    array = ensure_sequence(array)
    if not array:
        return -1
    length = len(array)
    for index in range(normalize_from_index(length, from_index), length):
        if predicate(array[index]):
            return index
    return -1


def find_last_index(
    array: Optional[Sequence[Any]],
    predicate: Callable[[Any], Any],
    from_index: Optional[int] = None,
) -> int:
    """
    Like find_index, but scans from right to left.

    Example:
        >>> find_last_index([1, 2, 3, 4], lambda n: n % 2 == 1)
        2
    """
    array = ensure_sequence(array)
    if not array:
        return -1
    for index in range(normalize_from_last_index(len(array), from_index), -1, -1):
        if predicate(array[index]):
            return index
    return -1
