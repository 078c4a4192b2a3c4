"""
Aggregations over a collection of numbers: sum_, sum_by, mean, mean_by.

**Functionally**:
- Input: any finite iterable of numbers, including lists, tuples, numpy
  arrays and pandas Series. None is treated as empty.
- ``sum_`` of an empty collection is 0; ``mean`` of an empty collection is
  NaN (there is no meaningful average of nothing).
- ``sum_`` keeps Python numeric types (integers stay integers); ``mean``
  always returns a Python float.
"""

from collections.abc import Iterable
from typing import Any, Callable, List, Optional

import numpy as np
import pandas as pd

from toolbelt.errors import InvalidArgumentError


def to_values(array: Optional[Iterable[Any]]) -> List[Any]:
    """
    Materialise a numeric collection as a list of Python scalars.

    Raises:
        InvalidArgumentError: If array is not iterable, or is a string.
    """
    if array is None:
        return []
    if isinstance(array, (np.ndarray, pd.Series, pd.Index)):
        return array.tolist()
    if isinstance(array, (str, bytes)) or not isinstance(array, Iterable):
        raise InvalidArgumentError("an iterable of numbers", array)
    return list(array)


def sum_(array: Optional[Iterable[Any]]) -> Any:
    """
    Compute the sum of the values in array.

    Example:
        >>> sum_([4, 2, 8, 6])
        20
        >>> sum_([])
        0
    """
    return sum(to_values(array))


def sum_by(array: Optional[Iterable[Any]], iteratee: Callable[[Any], Any]) -> Any:
    """
    Like sum_, summing ``iteratee(element)`` for each element.

    Example:
        >>> sum_by([{"n": 4}, {"n": 2}], lambda o: o["n"])
        6
    """
    return sum(iteratee(value) for value in to_values(array))


def mean(array: Optional[Iterable[Any]]) -> float:
    """
    Compute the arithmetic mean of the values in array.

    Example:
        >>> mean([4, 2, 8, 6])
        5.0
    """
    values = to_values(array)
    if not values:
        return float("nan")
    return float(np.mean(values))


def mean_by(array: Optional[Iterable[Any]], iteratee: Callable[[Any], Any]) -> float:
    """
    Like mean, averaging ``iteratee(element)`` for each element.

    Example:
        >>> mean_by([{"n": 4}, {"n": 2}, {"n": 8}, {"n": 6}], lambda o: o["n"])
        5.0
    """
    values = to_values(array)
    if not values:
        return float("nan")
    return float(np.mean([iteratee(value) for value in values]))
