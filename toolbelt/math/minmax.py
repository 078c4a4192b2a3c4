"""
Extremes: max_, min_, max_by, min_by.

All four return None for an empty (or None) collection. On ties the first
extreme element wins.
"""

from typing import Any, Callable, Iterable, Optional

from toolbelt.math.aggregate import to_values


def _extreme(array: Optional[Iterable[Any]], key: Callable[[Any], Any], better: Callable[[Any, Any], bool]) -> Any:
    values = to_values(array)
    if not values:
        return None
    result = values[0]
    best = key(result)
    for value in values[1:]:
        computed = key(value)
        if better(computed, best):
            best = computed
            result = value
    return result


def max_(array: Optional[Iterable[Any]]) -> Any:
    """
    Compute the maximum value of array.

    Example:
        >>> max_([4, 2, 8, 6])
        8
        >>> max_([]) is None
        True
    """
    return _extreme(array, lambda value: value, lambda a, b: a > b)


def max_by(array: Optional[Iterable[Any]], iteratee: Callable[[Any], Any]) -> Any:
    """
    Element of array whose ``iteratee`` result is largest.

    Example:
        >>> max_by([{"n": 1}, {"n": 2}], lambda o: o["n"])
        {'n': 2}
    """
    return _extreme(array, iteratee, lambda a, b: a > b)


def min_(array: Optional[Iterable[Any]]) -> Any:
    """
    Compute the minimum value of array.

    Example:
        >>> min_([4, 2, 8, 6])
        2
    """
    return _extreme(array, lambda value: value, lambda a, b: a < b)


def min_by(array: Optional[Iterable[Any]], iteratee: Callable[[Any], Any]) -> Any:
    """
    Element of array whose ``iteratee`` result is smallest.

    Example:
        >>> min_by([{"n": 1}, {"n": 2}], lambda o: o["n"])
        {'n': 1}
    """
    return _extreme(array, iteratee, lambda a, b: a < b)
