"""
Deep clone.

**Conceptual**: ``clone`` produces a copy that shares no mutable state with
the original: mutating any container reachable from the clone never affects
the original, and vice versa. Each kind of value is copied the way that fits
it:

  - immutable scalars (None, bool, numbers, str, bytes) are returned as-is;
  - ``datetime``/``date``/``time`` values are copied;
  - compiled regular expressions are re-compiled from pattern and flags
    (``re`` caches compiled patterns, so the result may be the very same
    immutable object);
  - ``dict``, ``list``, ``tuple``, ``set`` and ``frozenset`` are rebuilt
    element by element, cloning dict keys as well as values;
  - numpy arrays and pandas Series/DataFrames use their own deep copy,
    except that elements of object-dtype arrays and columns are cloned one
    by one (a numpy "deep" copy still shares those Python objects);
  - anything else goes through ``copy.deepcopy``.

Shared references are preserved (an object reachable twice is cloned once)
and cyclic structures terminate, using the same id-keyed memo as
``copy.deepcopy``.
"""

import copy
import datetime
import re
from numbers import Number
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

_IMMUTABLE_SCALARS = (type(None), bool, Number, str, bytes)


def _clone_elements(source: np.ndarray, target: np.ndarray, memo: Dict[int, Any]) -> None:
    for index in np.ndindex(source.shape):
        target[index] = clone(source[index], memo)


def _cloned_objects(source: np.ndarray, memo: Dict[int, Any]) -> np.ndarray:
    # np.array() would turn a column of equal-length lists into a 2-D array
    target = np.empty(source.shape, dtype=object)
    _clone_elements(source, target, memo)
    return target


def clone(value: Any, _memo: Optional[Dict[int, Any]] = None) -> Any:
    """
    Create a deep clone of value.

    Example:
        >>> original = {"a": 1, "b": {"c": 2}}
        >>> cloned = clone(original)
        >>> cloned["b"]["c"] = 3
        >>> original["b"]["c"]
        2
    """
    if isinstance(value, _IMMUTABLE_SCALARS):
        return value

    memo = {} if _memo is None else _memo
    if id(value) in memo:
        return memo[id(value)]

    if isinstance(value, (datetime.date, datetime.time)):
        result = copy.copy(value)
    elif isinstance(value, re.Pattern):
        result = re.compile(value.pattern, value.flags)
    elif type(value) is dict:
        result = {}
        memo[id(value)] = result
        for key, item in value.items():
            result[clone(key, memo)] = clone(item, memo)
    elif type(value) is list:
        result = []
        memo[id(value)] = result
        result.extend(clone(item, memo) for item in value)
    elif type(value) is set:
        result = set()
        memo[id(value)] = result
        result.update(clone(item, memo) for item in value)
    elif type(value) is tuple:
        result = tuple(clone(item, memo) for item in value)
    elif type(value) is frozenset:
        result = frozenset(clone(item, memo) for item in value)
    elif isinstance(value, np.ndarray):
        if value.dtype == object:
            result = np.empty(value.shape, dtype=object)
            memo[id(value)] = result
            _clone_elements(value, result, memo)
        else:
            result = value.copy()
    elif isinstance(value, pd.Series):
        if value.dtype == object:
            result = pd.Series(
                _cloned_objects(value.to_numpy(), memo),
                index=value.index,
                name=value.name,
                dtype=object,
            )
        else:
            result = value.copy(deep=True)
    elif isinstance(value, pd.DataFrame):
        result = value.copy(deep=True)
        for position, dtype in enumerate(value.dtypes):
            if dtype == object:
                column = value.iloc[:, position].to_numpy()
                result.isetitem(position, _cloned_objects(column, memo))
    else:
        result = copy.deepcopy(value, memo)

    memo[id(value)] = result
    return result
