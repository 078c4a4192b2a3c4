"""
Element accessors: first, last, nth and tail.

None in place of a list is treated as an empty list.
"""

from typing import Any, List, Optional, Sequence

from toolbelt.array._base import ensure_sequence


def head(array: Optional[Sequence[Any]]) -> Any:
    """
    Get the first element of array.

    Example:
        >>> head([1, 2, 3])
        1
        >>> head([]) is None
        True
    """
    array = ensure_sequence(array)
    return array[0] if array else None


first = head


def last(array: Optional[Sequence[Any]]) -> Any:
    """
    Get the last element of array, or None when it is empty.

    Example:
        >>> last([1, 2, 3])
        3
    """
    array = ensure_sequence(array)
    return array[-1] if array else None


def nth(array: Optional[Sequence[Any]], n: int = 0) -> Any:
    """
    Get the element at index n. A negative n counts from the end.

    Out-of-range indexes give None rather than raising IndexError.

    Example:
        >>> nth(["a", "b", "c", "d"], 1)
        'b'
        >>> nth(["a", "b", "c", "d"], -2)
        'c'
    """
    array = ensure_sequence(array)
    if not array:
        return None
    length = len(array)
    if n < 0:
        n += length
    return array[n] if 0 <= n < length else None


def tail(array: Optional[Sequence[Any]]) -> List[Any]:
    """
    Get all but the first element of array as a new list.

    Example:
        >>> tail([1, 2, 3])
        [2, 3]
    """
    array = ensure_sequence(array)
    if not array:
        return []
    return list(array[1:])
