"""
Argument guards and index arithmetic shared by the array helpers.
"""

from typing import Any, Iterable, List, Optional

from toolbelt.errors import InvalidArgumentError
from toolbelt.type.checks import is_array


def ensure_sequence(array: Any) -> Optional[Any]:
    """
    Validate a read-only array argument.

    Returns:
        The array unchanged, or None when the caller passed None (callers
        then return their empty result).

    Raises:
        InvalidArgumentError: If array is neither None, a list nor a tuple.
    """
    if array is None or is_array(array):
        return array
    raise InvalidArgumentError("a list or tuple", array)


def ensure_list(array: Any) -> Optional[List[Any]]:
    """
    Validate an array argument that is about to be mutated in place.

    Raises:
        InvalidArgumentError: If array is neither None nor a list.
    """
    if array is None or isinstance(array, list):
        return array
    raise InvalidArgumentError("a list", array)


def normalize_bounds(length: int, start: int, end: Optional[int]) -> range:
    """
    Resolve slice-style ``start``/``end`` offsets against ``length``.

    Negative offsets count from the end; results are clamped to
    ``[0, length]``. A start at or past the end yields an empty range.
    """
    if end is None or end > length:
        end = length
    elif end < 0:
        end = max(end + length, 0)
    if start < 0:
        start = max(start + length, 0)
    return range(start, max(start, end))


def normalize_from_index(length: int, from_index: int) -> int:
    """Left-to-right search start: negative counts from the end, clamped at 0."""
    if from_index < 0:
        return max(length + from_index, 0)
    return from_index


def normalize_from_last_index(length: int, from_index: Optional[int]) -> int:
    """Right-to-left search start: defaults to the last index, clamped into range."""
    if from_index is None:
        return length - 1
    if from_index < 0:
        return max(length + from_index, 0)
    return min(from_index, length - 1)


class SeenValues:
    """
    Membership set that also accepts unhashable values.

    Hashable values go into a real set; unhashable ones (dicts, lists) fall
    back to an equality scan over a list.
    """

    def __init__(self, values: Iterable[Any] = ()):
        self._hashable = set()
        self._unhashable = []
        for value in values:
            self.add(value)

    def add(self, value: Any) -> None:
        try:
            self._hashable.add(value)
        except TypeError:
            self._unhashable.append(value)

    def __contains__(self, value: Any) -> bool:
        try:
            return value in self._hashable
        except TypeError:
            return value in self._unhashable
