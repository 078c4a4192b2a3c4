"""
Rounding to a number of decimal places: ceil, floor, round_.

**Conceptual**: The obvious implementation, ``math.floor(x * 10**p) / 10**p``,
inherits binary floating-point error: ``4.005 * 100`` is
``400.49999999999994``, so rounding 4.005 to two places would give 4.0.
Instead the decimal exponent is shifted textually: ``4.005`` is rewritten as
``4.005e2``, which parses to exactly ``400.5``, is rounded, and is shifted
back the same way. The result is the answer a person would compute on paper
for the number as it is written.

**Functionally**:
- ``precision`` may be negative to round to tens, hundreds, ...
  (``round_(4060, -2) == 4100``).
- ``round_`` rounds halves towards positive infinity (``round_(4.5) == 5``,
  ``round_(-4.5) == -4``), unlike Python's ``round`` which rounds half to
  even.
- Results are floats. NaN and infinities are returned unchanged.
- Precision is clamped to +/-292 so the shifted value stays representable.
"""

import math
from typing import Callable, Union

Number = Union[int, float]

MAX_PRECISION = 292


def _shift(number: float, places: int) -> float:
    """Multiply by 10**places by editing the decimal exponent of repr(number)."""
    mantissa, _, exponent = repr(float(number)).partition("e")
    return float(f"{mantissa}e{int(exponent or 0) + places}")


def _create_round(method: Callable[[float], Number]) -> Callable[[Number, int], float]:
    def rounder(number: Number, precision: int = 0) -> float:
        number = float(number)
        if not math.isfinite(number):
            return number
        precision = max(min(int(precision), MAX_PRECISION), -MAX_PRECISION)
        if precision == 0:
            return float(method(number))
        shifted = _shift(number, precision)
        if not math.isfinite(shifted):
            # Too large to carry that many decimals; nothing left to round
            return number
        return _shift(method(shifted), -precision)
    return rounder


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


_ceil = _create_round(math.ceil)
_floor = _create_round(math.floor)
_round = _create_round(_round_half_up)


def ceil(number: Number, precision: int = 0) -> float:
    """
    Round number up to precision.

    Example:
        >>> ceil(4.006)
        5.0
        >>> ceil(6.004, 2)
        6.01
        >>> ceil(6040, -2)
        6100.0
    """
    return _ceil(number, precision)


def floor(number: Number, precision: int = 0) -> float:
    """
    Round number down to precision.

    Example:
        >>> floor(0.046, 2)
        0.04
        >>> floor(4060, -2)
        4000.0
    """
    return _floor(number, precision)


def round_(number: Number, precision: int = 0) -> float:
    """
    Round number to precision, halves towards positive infinity.

    Example:
        >>> round_(4.006, 2)
        4.01
        >>> round_(4.005, 2)
        4.01
        >>> round_(4060, -2)
        4100.0
    """
    return _round(number, precision)
