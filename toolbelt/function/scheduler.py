"""
Invocation scheduler: the timing state machine behind debounce and throttle.

**Conceptual**: A wrapper created by ``debounce`` or ``throttle`` sits between
a caller and a target function and decides, on every call, whether the target
runs now (leading edge), later (trailing edge, when a timer expires) or not at
all (the call is coalesced into a pending one). Each wrapper owns exactly one
``InvocationScheduler`` instance; nothing is shared between wrappers.

**State machine**:

    IDLE --call--> SCHEDULED --timer expires, enough time passed--> IDLE
                      |   ^                                          (trailing
                      |   |                                           invocation)
                      +---+  timer expires too early: reschedule
                             for the remaining wait

  - At most one timer is pending at any moment. Starting a timer cancels the
    previous one, and every timer carries a generation number so a callback
    that fires after being cancelled (possible with thread timers) is ignored.
  - Pending arguments exist only between a call and the next invocation or
    cancellation.
  - ``last_invoke_time`` changes only when the target actually runs (and on
    the leading edge, which marks the start of a burst).

**Decision rule** ("should the target run now?"), evaluated at call time and
on every timer expiry:
  - this is the first call since creation or cancellation;
  - at least ``wait`` ms have passed since the last call;
  - the clock went backwards (elapsed time is negative);
  - plus the subclass-specific rules (debounce: ``max_wait`` exceeded since
    the last invocation; throttle: ``wait`` exceeded since the last
    invocation).

**Results**: a call returns the value of the most recent invocation, because a
deferred invocation cannot produce a value synchronously. Exceptions raised by
the target propagate to whichever call triggered the invocation: the direct
call, the timer callback, or ``flush()``.

Methods: the wrapper implements the descriptor protocol, so decorating a method
binds the instance as the first positional argument (the "receiver"), which is
then stored with the rest of the pending arguments.
"""

import functools
import threading
import types
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from toolbelt.errors import InvalidArgumentError
from toolbelt.utils.logger import get_logger
from toolbelt.utils.time import Scheduler, get_default_scheduler

logger = get_logger(__name__)

PendingCall = Tuple[Tuple[Any, ...], Dict[str, Any]]


class SchedulerState(Enum):
    """Whether a trailing invocation is currently scheduled."""
    IDLE = "idle"
    SCHEDULED = "scheduled"


class InvocationScheduler:
    """
    Base class for the debounce and throttle wrappers.

    Subclasses refine ``_should_invoke`` and ``_remaining_wait``; everything
    else (edges, cancel, flush, timer bookkeeping) is shared.

    Attributes:
        func: The wrapped target function.
        wait: Milliseconds between the qualifying call and the invocation.
        leading: Invoke on the leading edge of a burst.
        trailing: Invoke on the trailing edge of a burst.
        max_wait: Upper bound (ms) on how long invocation can be deferred,
            or None. Only debounce sets it.
        last_call_time: Clock reading of the most recent call, or None.
        last_invoke_time: Clock reading of the most recent invocation.
        last_result: Value returned by the most recent invocation.
    """

    max_wait: Optional[float] = None

    def __init__(
        self,
        func: Callable[..., Any],
        wait: float = 0,
        leading: bool = False,
        trailing: bool = True,
        scheduler: Optional[Scheduler] = None,
    ):
        if not callable(func):
            raise InvalidArgumentError("a callable", func)
        if wait < 0:
            raise ValueError(f"wait must be non-negative, got: {wait}")

        # Copy __name__/__doc__ first so none of our own attributes get overwritten
        functools.update_wrapper(self, func)

        self.func = func
        self.wait = wait
        self.leading = leading
        self.trailing = trailing
        self.last_call_time: Optional[float] = None
        self.last_invoke_time: float = 0.0
        self.last_result: Any = None

        self._scheduler = scheduler if scheduler is not None else get_default_scheduler()
        self._lock = threading.RLock()
        self._pending: Optional[PendingCall] = None
        self._timer: Any = None
        self._generation = 0
        self._name = getattr(func, "__qualname__", repr(func))

    def __get__(self, instance: Any, owner: Any = None) -> Any:
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name} wait={self.wait} state={self.state.value}>"

    @property
    def state(self) -> SchedulerState:
        """IDLE when no timer is pending, SCHEDULED otherwise."""
        return SchedulerState.IDLE if self._timer is None else SchedulerState.SCHEDULED

    def pending(self) -> bool:
        """True while a timer is scheduled (a trailing invocation may still happen)."""
        return self._timer is not None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            time = self._scheduler.now()
            is_invoking = self._should_invoke(time)

            self._pending = (args, kwargs)
            self.last_call_time = time

            if is_invoking:
                if self._timer is None:
                    return self._leading_edge(time)
                if self.max_wait is not None:
                    # max_wait exceeded in the middle of a burst: run now, keep debouncing
                    self._start_timer(self.wait)
                    return self._invoke(time)
            if self._timer is None:
                self._start_timer(self.wait)
            return self.last_result

    def cancel(self) -> None:
        """
        Drop any scheduled invocation and reset all timing state.

        The target is not invoked. The next call behaves like the first one.
        """
        with self._lock:
            self._clear_timer()
            self.last_invoke_time = 0.0
            self.last_call_time = None
            self._pending = None
            logger.debug("%s: cancelled", self._name)

    def flush(self) -> Any:
        """
        Perform a scheduled trailing invocation immediately.

        Returns:
            The new result when an invocation happened, otherwise the result
            of the most recent invocation.
        """
        with self._lock:
            if self._timer is None:
                return self.last_result
            self._clear_timer()
            logger.debug("%s: flushed", self._name)
            return self._trailing_edge(self._scheduler.now())

    def _should_invoke(self, time: float) -> bool:
        if self.last_call_time is None:
            return True
        time_since_last_call = time - self.last_call_time
        return time_since_last_call >= self.wait or time_since_last_call < 0

    def _remaining_wait(self, time: float) -> float:
        return self.wait - (time - self.last_call_time)

    def _invoke(self, time: float) -> Any:
        args, kwargs = self._pending
        self._pending = None
        self.last_invoke_time = time
        logger.debug("%s: invoking", self._name)
        self.last_result = self.func(*args, **kwargs)
        return self.last_result

    def _leading_edge(self, time: float) -> Any:
        # Start of a burst: the invoke clock starts here even when leading is off
        self.last_invoke_time = time
        self._start_timer(self.wait)
        return self._invoke(time) if self.leading else self.last_result

    def _trailing_edge(self, time: float) -> Any:
        self._timer = None
        if self.trailing and self._pending is not None:
            return self._invoke(time)
        self._pending = None
        return self.last_result

    def _start_timer(self, delay: float) -> None:
        self._clear_timer()
        generation = self._generation
        self._timer = self._scheduler.call_later(
            delay, lambda: self._timer_expired(generation)
        )
        logger.debug("%s: timer scheduled in %.1f ms", self._name, delay)

    def _clear_timer(self) -> None:
        if self._timer is not None:
            self._scheduler.cancel(self._timer)
            self._timer = None
        self._generation += 1

    def _timer_expired(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            time = self._scheduler.now()
            if self._should_invoke(time):
                self._trailing_edge(time)
                return
            remaining = self._remaining_wait(time)
            logger.debug("%s: rescheduling for remaining %.1f ms", self._name, remaining)
            self._start_timer(remaining)
