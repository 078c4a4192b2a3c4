"""
Recursive merge of dicts into a target dict.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any

from toolbelt.errors import InvalidArgumentError
from toolbelt.type.checks import is_object


def merge(target: MutableMapping, *sources: Any) -> MutableMapping:
    """
    Recursively merge the keys of sources into target, left to right.

    **Functionally**:
    - target is mutated and returned.
    - When a key holds a plain dict on both sides, the two are merged
      recursively. Any other value (lists, class instances, dict subclasses,
      scalars) from the source replaces the target's value as-is, by
      reference.
    - Sources that are not mappings (None, numbers, ...) are skipped.

    Raises:
        InvalidArgumentError: If target is not a mutable mapping.

    Example:
        >>> merge({"a": 1}, {"b": 2}, {"c": 3})
        {'a': 1, 'b': 2, 'c': 3}
        >>> merge({"a": {"b": 1}}, {"a": {"c": 2}})
        {'a': {'b': 1, 'c': 2}}
    """
    if not isinstance(target, MutableMapping):
        raise InvalidArgumentError("a mutable mapping", target)

    for source in sources:
        if not isinstance(source, Mapping):
            continue
        for key, source_value in source.items():
            target_value = target.get(key)
            if is_object(source_value) and is_object(target_value):
                merge(target_value, source_value)
            else:
                target[key] = source_value

    return target
