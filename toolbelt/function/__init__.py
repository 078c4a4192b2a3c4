"""
Higher-order wrappers: debounce, throttle and memoize.

Debounce and throttle share one timing state machine
(``toolbelt.function.scheduler``) driven by an injectable clock/timer source
(``toolbelt.utils.time``).
"""

from toolbelt.function.debounce import Debounced, debounce
from toolbelt.function.memoize import Memoized, memoize
from toolbelt.function.scheduler import InvocationScheduler, SchedulerState
from toolbelt.function.throttle import Throttled, throttle

__all__ = [
    "Debounced",
    "InvocationScheduler",
    "Memoized",
    "SchedulerState",
    "Throttled",
    "debounce",
    "memoize",
    "throttle",
]
