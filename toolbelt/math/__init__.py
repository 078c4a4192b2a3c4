"""
Numeric helpers: two-operand arithmetic, decimal-precision rounding,
and aggregation over collections (lists, numpy arrays, pandas Series).
"""

from toolbelt.math.aggregate import mean, mean_by, sum_, sum_by
from toolbelt.math.arithmetic import add, divide, multiply, subtract
from toolbelt.math.minmax import max_, max_by, min_, min_by
from toolbelt.math.rounding import ceil, floor, round_

__all__ = [
    "add",
    "ceil",
    "divide",
    "floor",
    "max_",
    "max_by",
    "mean",
    "mean_by",
    "min_",
    "min_by",
    "multiply",
    "round_",
    "subtract",
    "sum_",
    "sum_by",
]
