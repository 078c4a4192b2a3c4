"""
Throttle: run a function at most once every ``wait`` ms.

**Conceptual**: The first call in a quiet period invokes immediately (unless
``leading=False``) and opens a ``wait`` window. Calls inside the window only
replace the pending arguments; when the window closes, one trailing
invocation runs with the latest arguments (unless ``trailing=False``).

Throttle shares the debounce state machine but measures the window from the
last invocation rather than the last call, so steady calls cannot postpone it
forever: ``wait`` acts as both the debounce delay and the cap that debounce
calls ``max_wait``.
"""

from typing import Any, Callable, Optional

from toolbelt.function.scheduler import InvocationScheduler
from toolbelt.utils.time import Scheduler


class Throttled(InvocationScheduler):
    """Throttle wrapper; see ``throttle``."""

    def __init__(
        self,
        func: Callable[..., Any],
        wait: float = 0,
        leading: bool = True,
        trailing: bool = True,
        scheduler: Optional[Scheduler] = None,
    ):
        super().__init__(func, wait, leading=leading, trailing=trailing, scheduler=scheduler)

    def _should_invoke(self, time: float) -> bool:
        # The negative-elapsed (clock went backwards) branch lives in the base rule
        if super()._should_invoke(time):
            return True
        return time - self.last_invoke_time >= self.wait

    def _remaining_wait(self, time: float) -> float:
        return self.wait - (time - self.last_invoke_time)


def throttle(
    func: Optional[Callable[..., Any]] = None,
    wait: float = 0,
    leading: bool = True,
    trailing: bool = True,
    scheduler: Optional[Scheduler] = None,
) -> Any:
    """
    Create a throttled function that invokes func at most once per ``wait`` ms.

    Called without ``func`` it returns a decorator.

    Args:
        func: The function to throttle.
        wait: Milliseconds to throttle invocations to.
        leading: Invoke on the leading edge of the window.
        trailing: Invoke on the trailing edge of the window.
        scheduler: Clock/timer source. Defaults to the backend selected by
            ``TOOLBELT_SCHEDULER``.

    Returns:
        A ``Throttled`` wrapper exposing ``cancel()``, ``flush()`` and
        ``pending()``, or a decorator producing one.

    Raises:
        InvalidArgumentError: If func is given and is not callable.
        ValueError: If wait is negative.

    Example:
        >>> from toolbelt.utils.time import ManualScheduler
        >>> clock = ManualScheduler()
        >>> calls = []
        >>> throttled = throttle(calls.append, 100, scheduler=clock)
        >>> throttled(1); throttled(2); throttled(3)
        >>> calls
        [1]
        >>> clock.advance(100)
        >>> calls
        [1, 3]
    """
    if func is None:
        def decorator(target: Callable[..., Any]) -> Throttled:
            return Throttled(target, wait, leading, trailing, scheduler)
        return decorator
    return Throttled(func, wait, leading, trailing, scheduler)
