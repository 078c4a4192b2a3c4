"""
Key selection: pick and omit. Both return new dicts and leave the input alone.
"""

from collections.abc import Mapping
from typing import Any, Dict, Hashable, Iterable

from toolbelt.errors import InvalidArgumentError


def _ensure_mapping(obj: Any) -> Mapping:
    if not isinstance(obj, Mapping):
        raise InvalidArgumentError("a mapping", obj)
    return obj


def pick(obj: Mapping, keys: Iterable[Hashable]) -> Dict[Hashable, Any]:
    """
    Create a dict composed of the picked keys of obj. Missing keys are ignored.

    Raises:
        InvalidArgumentError: If obj is not a mapping.

    Example:
        >>> pick({"a": 1, "b": 2, "c": 3}, ["a", "c"])
        {'a': 1, 'c': 3}
    """
    obj = _ensure_mapping(obj)
    return {key: obj[key] for key in keys if key in obj}


def omit(obj: Mapping, keys: Iterable[Hashable]) -> Dict[Hashable, Any]:
    """
    Create a shallow copy of obj without the given keys.

    Raises:
        InvalidArgumentError: If obj is not a mapping.

    Example:
        >>> omit({"a": 1, "b": 2, "c": 3}, ["a", "c"])
        {'b': 2}
    """
    obj = _ensure_mapping(obj)
    result = dict(obj)
    for key in keys:
        result.pop(key, None)
    return result
