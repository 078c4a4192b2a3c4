"""
De-duplication preserving first-occurrence order.

Elements are duplicates when they compare equal with ``==`` (and, for
hashable values, hash equal), so ``1``, ``1.0`` and ``True`` are one value:
``uniq([1, True, 1.0]) == [1]``.
"""

from typing import Any, Callable, List, Sequence

from toolbelt.array._base import SeenValues
from toolbelt.errors import InvalidArgumentError
from toolbelt.type.checks import is_array


def uniq(array: Sequence[Any]) -> List[Any]:
    """
    Create a duplicate-free copy of array.

    Raises:
        InvalidArgumentError: If array is not a list or tuple.

    Example:
        >>> uniq([2, 1, 2])
        [2, 1]
    """
    return uniq_by(array, lambda value: value)


def uniq_by(array: Sequence[Any], iteratee: Callable[[Any], Any]) -> List[Any]:
    """
    Like uniq, treating elements as duplicates when ``iteratee`` maps them to
    equal values. The first element of each group is kept.

    Raises:
        InvalidArgumentError: If array is not a list or tuple.

    Example:
        >>> import math
        >>> uniq_by([2.1, 1.2, 2.3], math.floor)
        [2.1, 1.2]
    """
    if not is_array(array):
        raise InvalidArgumentError("a list or tuple", array)

    seen = SeenValues()
    result = []
    for value in array:
        key = iteratee(value)
        if key not in seen:
            seen.add(key)
            result.append(value)
    return result
