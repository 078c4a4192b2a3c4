"""
Shape and emptiness checks.

**Conceptual**: These predicates answer the questions every other helper asks
before it starts work: "is this a list?", "is this a plain dict?", "is there
anything in here?". They never raise.

numpy arrays and pandas objects are recognised by ``is_empty`` because both
define their own notion of emptiness (``size`` / ``empty``) and refuse to be
used in a boolean context.
"""

from collections.abc import Sized
from numbers import Number
from typing import Any

import numpy as np
import pandas as pd


def is_array(value: Any) -> bool:
    """
    Check whether value is a list or tuple.

    Strings are sequences in Python but are deliberately not arrays here.

    Args:
        value: Anything.

    Returns:
        True for ``list`` and ``tuple`` instances (including subclasses).

    Example:
        >>> is_array([1, 2, 3])
        True
        >>> is_array("abc")
        False
    """
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    """
    Check whether value is a plain ``dict``.

    **Conceptual**: "Plain" means created as a dict literal or by ``dict()``.
    Subclasses (OrderedDict, defaultdict, Counter), read-only mappings and
    class instances are not plain; ``merge`` only recurses into plain dicts.

    Args:
        value: Anything.

    Returns:
        True only when ``type(value) is dict``.

    Example:
        >>> is_object({"a": 1})
        True
        >>> is_object([1, 2, 3])
        False
    """
    return type(value) is dict


def is_empty(value: Any) -> bool:
    """
    Check whether value is empty.

    A value is empty when it is:
      - None;
      - an empty string, list, tuple, dict, set or any other sized container;
      - a numpy array with ``size == 0``;
      - a pandas Series/DataFrame/Index whose ``empty`` flag is set;
      - an object carrying no instance attributes.

    Numbers and booleans are never empty.

    Args:
        value: Anything.

    Returns:
        True if value is empty, else False.

    Example:
        >>> is_empty(None), is_empty(""), is_empty({}), is_empty(set())
        (True, True, True, True)
        >>> is_empty([1, 2, 3]), is_empty(42)
        (False, False)
    """
    if value is None:
        return True

    if isinstance(value, (bool, Number)):
        return False

    # numpy/pandas objects raise on truth-testing, check them explicitly
    if isinstance(value, np.ndarray):
        return value.size == 0
    if isinstance(value, (pd.Series, pd.DataFrame, pd.Index)):
        return bool(value.empty)

    if isinstance(value, Sized):
        return len(value) == 0

    if hasattr(value, "__dict__"):
        return not vars(value)

    return False
