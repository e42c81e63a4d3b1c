import pytest
from unittest.mock import MagicMock

from underbar.timers import VirtualScheduler


def test_starts_at_given_time():
    assert VirtualScheduler().now() == 0.0
    assert VirtualScheduler(start_ms=250).now() == 250.0


def test_callback_fires_when_due(clock):
    callback = MagicMock()
    clock.call_later(100, callback, "x")

    assert clock.advance(99) == 0
    callback.assert_not_called()

    assert clock.advance(1) == 1
    callback.assert_called_once_with("x")
    assert clock.now() == 100


def test_callbacks_observe_their_due_time(clock):
    seen = []
    clock.call_later(30, lambda: seen.append(clock.now()))
    clock.call_later(10, lambda: seen.append(clock.now()))

    clock.advance(50)

    assert seen == [10, 30]
    assert clock.now() == 50


def test_ties_fire_in_scheduling_order(clock):
    seen = []
    for name in ["a", "b", "c"]:
        clock.call_later(5, seen.append, name)

    clock.advance(5)

    assert seen == ["a", "b", "c"]


def test_cancelled_callback_never_fires(clock):
    callback = MagicMock()
    handle = clock.call_later(10, callback)

    clock.cancel(handle)
    clock.advance(100)

    callback.assert_not_called()
    assert clock.pending == 0


def test_cancel_after_fire_is_noop(clock):
    handle = clock.call_later(10, MagicMock())
    clock.advance(10)

    clock.cancel(handle)

    assert handle.fired
    assert not handle.cancelled


def test_callbacks_scheduled_during_advance_fire_if_due(clock):
    seen = []

    def chain():
        seen.append(clock.now())
        clock.call_later(10, lambda: seen.append(clock.now()))

    clock.call_later(10, chain)
    clock.advance(25)

    assert seen == [10, 20]


def test_run_all_drains_queue(clock):
    callback = MagicMock()
    clock.call_later(1000, callback)
    clock.call_later(5, callback)

    assert clock.run_all() == 2
    assert clock.now() == 1000
    assert clock.pending == 0


def test_uncaught_errors_are_collected(clock):
    error = KeyError("missing")
    after = MagicMock()
    clock.call_later(1, MagicMock(side_effect=error))
    clock.call_later(2, after)

    clock.advance(5)

    assert clock.uncaught == [error]
    after.assert_called_once()


def test_negative_delay_rejected(clock):
    with pytest.raises(ValueError):
        clock.call_later(-1, MagicMock())


def test_cannot_move_backwards(clock):
    with pytest.raises(ValueError):
        clock.advance(-10)


def test_cancelled_timers_are_compacted(clock):
    handles = [clock.call_later(100, MagicMock()) for _ in range(1000)]
    for handle in handles[:-1]:
        clock.cancel(handle)

    assert clock.pending == 1
    assert len(clock._queue) <= 2
    assert clock.run_all() == 1


def test_pending_counts_after_mixed_cancel_and_fire(clock):
    early = clock.call_later(10, MagicMock())
    late = clock.call_later(20, MagicMock())
    kept = clock.call_later(30, MagicMock())

    clock.cancel(late)
    assert clock.pending == 2

    clock.advance(15)
    assert early.fired
    clock.cancel(early)  # no-op once fired
    assert clock.pending == 1

    clock.advance(20)
    assert kept.fired
    assert clock.pending == 0
