"""
Whole-list transforms: chunk, compact, flatten family, fill, reverse, join,
from_pairs.

chunk, compact and the flatten family return new lists; fill and reverse
work in place and return the list they were given.
"""

import math
from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from toolbelt.array._base import ensure_list, ensure_sequence, normalize_bounds
from toolbelt.errors import InvalidArgumentError
from toolbelt.type.checks import is_array


def _require_sequence(array: Any) -> Sequence[Any]:
    # These helpers reject None instead of treating it as empty
    if array is None:
        raise InvalidArgumentError("a list or tuple", array)
    return ensure_sequence(array)


def chunk(array: Sequence[Any], size: int = 1) -> List[List[Any]]:
    """
    Split array into groups of ``size`` elements.

    If array can't be split evenly, the final chunk holds the remainder.
    Concatenating the chunks gives back the original elements.

    Args:
        array: List or tuple to split.
        size: Length of each chunk. Values below 1 give an empty result.

    Returns:
        New list of chunks.

    Raises:
        InvalidArgumentError: If array is not a list or tuple.

    Example:
        >>> chunk([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
    """
    array = _require_sequence(array)
    if size < 1:
        return []
    return [list(array[index:index + size]) for index in range(0, len(array), size)]


def _is_nan(value: Any) -> bool:
    return isinstance(value, (float, np.floating)) and math.isnan(value)


def compact(array: Sequence[Any]) -> List[Any]:
    """
    Create a list with all falsy values removed.

    Falsy follows Python truthiness (None, False, 0, 0.0, "", empty
    containers), with NaN added: NaN is truthy to Python but is treated as a
    missing number here.

    Raises:
        InvalidArgumentError: If array is not a list or tuple.

    Example:
        >>> compact([0, 1, False, 2, "", 3, None, float("nan")])
        [1, 2, 3]
    """
    array = _require_sequence(array)
    return [value for value in array if value and not _is_nan(value)]


def _flatten_into(result: List[Any], array: Iterable[Any], depth: float) -> List[Any]:
    for value in array:
        if depth > 0 and is_array(value):
            _flatten_into(result, value, depth - 1)
        else:
            result.append(value)
    return result


def flatten(array: Sequence[Any]) -> List[Any]:
    """
    Flatten array a single level deep.

    Raises:
        InvalidArgumentError: If array is not a list or tuple.

    Example:
        >>> flatten([1, [2, [3, [4]], 5]])
        [1, 2, [3, [4]], 5]
    """
    return _flatten_into([], _require_sequence(array), 1)


def flatten_deep(array: Sequence[Any]) -> List[Any]:
    """
    Recursively flatten array.

    Raises:
        InvalidArgumentError: If array is not a list or tuple.

    Example:
        >>> flatten_deep([1, [2, [3, [4]], 5]])
        [1, 2, 3, 4, 5]
    """
    return _flatten_into([], _require_sequence(array), math.inf)


def flatten_depth(array: Optional[Sequence[Any]], depth: int = 1) -> List[Any]:
    """
    Recursively flatten array up to ``depth`` times.

    Example:
        >>> flatten_depth([1, [2, [3, [4]], 5]], 2)
        [1, 2, 3, [4], 5]
    """
    array = ensure_sequence(array)
    if not array:
        return []
    return _flatten_into([], array, depth)


def fill(
    array: Optional[List[Any]],
    value: Any,
    start: int = 0,
    end: Optional[int] = None,
) -> List[Any]:
    """
    Fill elements of array with value from start up to, but not including, end.

    Offsets are normalised the same way as ``slice_``; a start at or past end
    fills nothing. Mutates array.

    Returns:
        array itself.

    Example:
        >>> fill([4, 6, 8, 10], "*", 1, 3)
        [4, '*', '*', 10]
        >>> fill([1, 2, 3], "a", -2, -1)
        [1, 'a', 3]
    """
    array = ensure_list(array)
    if array is None:
        return []
    for index in normalize_bounds(len(array), start, end):
        array[index] = value
    return array


def reverse(array: Optional[List[Any]]) -> List[Any]:
    """
    Reverse array in place.

    Returns:
        array itself, so the call can be chained.

    Example:
        >>> reverse([1, 2, 3])
        [3, 2, 1]
    """
    array = ensure_list(array)
    if array is None:
        return []
    array.reverse()
    return array


def join(array: Optional[Sequence[Any]], separator: str = ",") -> str:
    """
    Convert all elements of array into one string separated by separator.

    None elements become empty strings.

    Example:
        >>> join(["a", "b", "c"], "~")
        'a~b~c'
    """
    array = ensure_sequence(array)
    if not array:
        return ""
    return separator.join("" if value is None else str(value) for value in array)


def from_pairs(pairs: Optional[Iterable[Tuple[Hashable, Any]]]) -> Dict[Hashable, Any]:
    """
    Build a dict from key-value pairs. Later pairs win on duplicate keys.

    Example:
        >>> from_pairs([["a", 1], ["b", 2]])
        {'a': 1, 'b': 2}
    """
    result = {}
    if pairs is None:
        return result
    for pair in pairs:
        result[pair[0]] = pair[1]
    return result
