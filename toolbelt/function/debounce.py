"""
Debounce: run a function only after calls have stopped for ``wait`` ms.

**Conceptual**: Every call inside the wait window postpones the pending
trailing invocation, so a burst of calls collapses into one invocation
``wait`` ms after the last call, made with the last call's arguments.
``leading=True`` also (or instead, with ``trailing=False``) invokes at the
start of a burst. ``max_wait`` caps how long a continuous burst can postpone
invocation: once ``max_wait`` ms have passed since the last invocation, the
next call (or timer expiry) invokes immediately.

**Example**:
    save = debounce(write_to_disk, 500)
    for keystroke in keystrokes:
        save(buffer)          # write_to_disk runs once, 500 ms after the last keystroke

    @debounce(wait=200, leading=True, trailing=False)
    def on_click(event): ...
"""

from typing import Any, Callable, Optional

from toolbelt.function.scheduler import InvocationScheduler
from toolbelt.utils.time import Scheduler


class Debounced(InvocationScheduler):
    """Debounce wrapper; see ``debounce``."""

    def __init__(
        self,
        func: Callable[..., Any],
        wait: float = 0,
        leading: bool = False,
        trailing: bool = True,
        max_wait: Optional[float] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        super().__init__(func, wait, leading=leading, trailing=trailing, scheduler=scheduler)
        if max_wait is not None:
            if max_wait < 0:
                raise ValueError(f"max_wait must be non-negative, got: {max_wait}")
            # A cap shorter than wait would fire before the debounce window closes
            max_wait = max(max_wait, wait)
        self.max_wait = max_wait

    def _should_invoke(self, time: float) -> bool:
        if super()._should_invoke(time):
            return True
        return self.max_wait is not None and time - self.last_invoke_time >= self.max_wait

    def _remaining_wait(self, time: float) -> float:
        time_waiting = super()._remaining_wait(time)
        if self.max_wait is None:
            return time_waiting
        return min(time_waiting, self.max_wait - (time - self.last_invoke_time))


def debounce(
    func: Optional[Callable[..., Any]] = None,
    wait: float = 0,
    leading: bool = False,
    trailing: bool = True,
    max_wait: Optional[float] = None,
    scheduler: Optional[Scheduler] = None,
) -> Any:
    """
    Create a debounced function that delays invoking func until ``wait``
    milliseconds have elapsed since the last time it was called.

    Called without ``func`` it returns a decorator.

    Args:
        func: The function to debounce.
        wait: Milliseconds to delay.
        leading: Invoke on the leading edge of the wait window.
        trailing: Invoke on the trailing edge of the wait window.
        max_wait: Maximum milliseconds func may be delayed before it is
            invoked; raised to ``wait`` if smaller.
        scheduler: Clock/timer source. Defaults to the backend selected by
            ``TOOLBELT_SCHEDULER`` (thread timers unless configured).

    Returns:
        A ``Debounced`` wrapper exposing ``cancel()``, ``flush()`` and
        ``pending()``, or a decorator producing one.

    Raises:
        InvalidArgumentError: If func is given and is not callable.
        ValueError: If wait or max_wait is negative.
    """
    if func is None:
        def decorator(target: Callable[..., Any]) -> Debounced:
            return Debounced(target, wait, leading, trailing, max_wait, scheduler)
        return decorator
    return Debounced(func, wait, leading, trailing, max_wait, scheduler)
