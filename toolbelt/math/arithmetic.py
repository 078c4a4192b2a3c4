"""
Two-operand arithmetic: add, subtract, multiply, divide.
"""

from typing import Union

import numpy as np

Number = Union[int, float]


def add(augend: Number, addend: Number) -> Number:
    """
    Add two numbers.

    Example:
        >>> add(6, 4)
        10
    """
    return augend + addend


def subtract(minuend: Number, subtrahend: Number) -> Number:
    """
    Subtract two numbers.

    Example:
        >>> subtract(6, 4)
        2
    """
    return minuend - subtrahend


def multiply(multiplier: Number, multiplicand: Number) -> Number:
    """
    Multiply two numbers.

    Example:
        >>> multiply(6, 4)
        24
    """
    return multiplier * multiplicand


def divide(dividend: Number, divisor: Number) -> float:
    """
    Divide two numbers using IEEE-754 semantics.

    **Functionally**:
    - Always true division (``6 / 4 == 1.5``).
    - Division by zero does not raise: a non-zero dividend gives ``inf`` or
      ``-inf`` depending on the signs (including the sign of a ``-0.0``
      divisor), and ``0 / 0`` gives ``nan``.

    Example:
        >>> divide(6, 4)
        1.5
        >>> divide(5, 0)
        inf
    """
    if divisor == 0:
        # numpy follows IEEE-754 here where Python raises ZeroDivisionError
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.divide(float(dividend), float(divisor)))
    return dividend / divisor
