"""
Tests for toolbelt/function/throttle.py
"""

from unittest.mock import Mock

import pytest

from toolbelt.errors import InvalidArgumentError
from toolbelt.function import Throttled, throttle
from toolbelt.utils.time import ManualScheduler


def test_throttle_default_scenario(manual_scheduler):
    """
    First call invokes immediately; two more immediate calls wait for the
    window to close, then exactly one trailing invocation runs.
    """
    target = Mock()
    throttled = throttle(target, 100, scheduler=manual_scheduler)

    throttled(1)
    throttled(2)
    throttled(3)
    target.assert_called_once_with(1)

    manual_scheduler.advance(99)
    assert target.call_count == 1

    manual_scheduler.advance(1)
    assert target.call_count == 2
    target.assert_called_with(3)

    manual_scheduler.run_all()
    assert target.call_count == 2


def test_throttle_steady_calls_invoke_once_per_window(manual_scheduler):
    """Calls every 10 ms invoke at most once per 100 ms window."""
    target = Mock()
    throttled = throttle(target, 100, scheduler=manual_scheduler)

    for i in range(30):
        throttled(i)
        manual_scheduler.advance(10)

    # Leading call at 0, then the latest arguments at 100, 200 and 300 ms
    assert [c.args for c in target.call_args_list] == [(0,), (9,), (19,), (29,)]


def test_throttle_trailing_false(manual_scheduler):
    """trailing=False drops the calls made inside the window."""
    target = Mock()
    throttled = throttle(target, 100, trailing=False, scheduler=manual_scheduler)

    throttled(1)
    throttled(2)
    manual_scheduler.advance(100)
    target.assert_called_once_with(1)

    throttled(3)
    assert target.call_count == 2
    target.assert_called_with(3)


def test_throttle_leading_false(manual_scheduler):
    """leading=False defers the first invocation to the end of the window."""
    target = Mock()
    throttled = throttle(target, 100, leading=False, scheduler=manual_scheduler)

    throttled(1)
    throttled(2)
    target.assert_not_called()

    manual_scheduler.advance(100)
    target.assert_called_once_with(2)


def test_throttle_clock_going_backwards_invokes():
    """A negative elapsed time since the last call counts as a fresh call."""
    scheduler = ManualScheduler(start=1000)
    target = Mock()
    throttled = throttle(target, 100, trailing=False, scheduler=scheduler)

    throttled(1)
    throttled.last_call_time = 5000  # simulate a clock reading from the future
    throttled(2)

    assert [c.args for c in target.call_args_list] == [(1,)]
    assert throttled._should_invoke(scheduler.now())


def test_throttle_cancel_and_flush(manual_scheduler):
    """cancel() drops the trailing call; flush() runs it now."""
    target = Mock()
    throttled = throttle(target, 100, scheduler=manual_scheduler)

    throttled(1)
    throttled(2)
    throttled.cancel()
    manual_scheduler.advance(200)
    target.assert_called_once_with(1)

    throttled(3)
    throttled(4)
    throttled.flush()
    assert [c.args for c in target.call_args_list] == [(1,), (3,), (4,)]


def test_throttle_decorator_form(manual_scheduler):
    """throttle(wait=...) without func returns a decorator."""
    @throttle(wait=100, scheduler=manual_scheduler)
    def tick(n):
        return n

    assert isinstance(tick, Throttled)
    assert tick(7) == 7
    assert tick.__name__ == "tick"


def test_throttle_argument_validation():
    """Non-callables and negative waits are rejected."""
    with pytest.raises(InvalidArgumentError):
        throttle("nope", 10, scheduler=Mock())
    with pytest.raises(ValueError):
        throttle(lambda: None, -5, scheduler=Mock())
