"""
Clock and timer abstractions for the debounce/throttle wrappers.

This module provides a small, testable way to obtain "now" and to schedule a
callback for later, instead of calling ``time.monotonic()`` or
``threading.Timer`` directly. Wrappers depend on a ``Scheduler`` object that is
injected at construction time, which makes their behaviour deterministic in
tests: pass a ``ManualScheduler`` and move time forward by hand.

All times and delays are milliseconds on a monotonic scale. Only differences
between two readings of the same clock are meaningful.
"""

import asyncio
import heapq
import itertools
import threading
import time
from typing import Any, Callable, List, Optional, Protocol, Tuple

from toolbelt.config.settings import get_settings

Callback = Callable[[], Any]


class Clock(Protocol):
    """
    Abstract time source protocol.

    **Conceptual**: A Clock answers "how many milliseconds is it now?" on a
    monotonic scale. Code that measures elapsed time accepts a Clock instead
    of reading the system clock, so tests can substitute a virtual one.
    """

    def now(self) -> float:
        """
        Return the current time in milliseconds.

        Returns:
            Monotonic timestamp in milliseconds.
        """
        ...


class Scheduler(Clock, Protocol):
    """
    A Clock that can also run a callback after a delay.

    **Usage**: Consumers keep the handle returned by ``call_later`` and pass it
    back to ``cancel``; handles are opaque.

    **Example**:
        handle = scheduler.call_later(100, on_expiry)
        ...
        scheduler.cancel(handle)
    """

    def call_later(self, delay: float, callback: Callback) -> Any:
        """
        Run ``callback`` once, ``delay`` milliseconds from now.

        Args:
            delay: Milliseconds to wait; negative values are treated as 0.
            callback: Zero-argument callable.

        Returns:
            Opaque handle accepted by ``cancel``.
        """
        ...

    def cancel(self, handle: Any) -> None:
        """Cancel a pending callback. Cancelling a fired handle is a no-op."""
        ...


class ThreadingScheduler:
    """
    Scheduler backed by ``time.monotonic`` and daemon ``threading.Timer`` threads.

    Callbacks run on a worker thread, so consumers must guard their own state
    with a lock (the invocation scheduler does).
    """

    def now(self) -> float:
        return time.monotonic() * 1000.0

    def call_later(self, delay: float, callback: Callback) -> threading.Timer:
        timer = threading.Timer(max(delay, 0.0) / 1000.0, callback)
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, handle: threading.Timer) -> None:
        handle.cancel()


class AsyncioScheduler:
    """
    Scheduler backed by an asyncio event loop.

    **Conceptual**: Uses ``loop.time()`` as the clock and ``loop.call_later``
    for timers, so callbacks run on the loop thread between other tasks. When
    no loop is given, the running loop is looked up on every use, which means
    the scheduler must be used from inside a coroutine or loop callback.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def now(self) -> float:
        return self._get_loop().time() * 1000.0

    def call_later(self, delay: float, callback: Callback) -> asyncio.TimerHandle:
        return self._get_loop().call_later(max(delay, 0.0) / 1000.0, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


class _ManualTimer:
    """Handle for a callback registered with ManualScheduler."""

    __slots__ = ("deadline", "callback", "cancelled")

    def __init__(self, deadline: float, callback: Callback):
        self.deadline = deadline
        self.callback = callback
        self.cancelled = False


class ManualScheduler:
    """
    Virtual clock and timer queue that only moves when told to.

    **Conceptual**: The time-based equivalent of a frozen clock. ``now()``
    stays put until ``advance()`` is called; ``advance`` then walks the clock
    forward, stopping at each due timer's deadline to run its callback. A
    callback that schedules another timer inside the advanced window sees that
    timer run in the same ``advance`` call, exactly as if real time had passed.

    **Usage**:
        scheduler = ManualScheduler()
        debounced = debounce(fn, 100, scheduler=scheduler)
        debounced()
        scheduler.advance(100)   # fn runs here

    Exceptions raised by callbacks propagate out of ``advance``/``run_all``.
    """

    def __init__(self, start: float = 0.0):
        self._now = float(start)
        self._queue: List[Tuple[float, int, _ManualTimer]] = []
        self._sequence = itertools.count()

    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callback) -> _ManualTimer:
        timer = _ManualTimer(self._now + max(delay, 0.0), callback)
        # Sequence number keeps same-deadline timers in registration order
        heapq.heappush(self._queue, (timer.deadline, next(self._sequence), timer))
        return timer

    def cancel(self, handle: _ManualTimer) -> None:
        handle.cancelled = True

    @property
    def pending(self) -> int:
        """Number of timers that have not fired or been cancelled."""
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)

    def advance(self, milliseconds: float) -> None:
        """
        Move the clock forward, running every timer that falls due on the way.

        Args:
            milliseconds: Non-negative amount of virtual time to let pass.

        Raises:
            ValueError: If milliseconds is negative.
        """
        if milliseconds < 0:
            raise ValueError(f"Cannot advance by a negative amount: {milliseconds}")

        target = self._now + milliseconds
        while self._queue and self._queue[0][0] <= target:
            _, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self._now = max(self._now, timer.deadline)
            timer.callback()
        self._now = target

    def run_all(self, limit: int = 10_000) -> None:
        """
        Run timers until the queue is empty, advancing the clock to each deadline.

        Args:
            limit: Maximum number of callbacks to run; guards against
                callbacks that keep rescheduling themselves.

        Raises:
            RuntimeError: If the queue is still non-empty after ``limit`` runs.
        """
        for _ in range(limit):
            while self._queue and self._queue[0][2].cancelled:
                heapq.heappop(self._queue)
            if not self._queue:
                return
            self.advance(max(self._queue[0][0] - self._now, 0.0))
        raise RuntimeError(f"Timers still pending after {limit} runs")


def get_default_scheduler() -> Scheduler:
    """
    Build the scheduler selected by ``TOOLBELT_SCHEDULER``.

    Returns:
        ThreadingScheduler for "thread" (the default), AsyncioScheduler
        bound lazily to the running loop for "asyncio".
    """
    if get_settings().scheduler == "asyncio":
        return AsyncioScheduler()
    return ThreadingScheduler()
