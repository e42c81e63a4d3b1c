"""Deterministic, manually advanced scheduler.

``VirtualScheduler`` keeps its own clock that only moves when :meth:`advance`
or :meth:`run_all` is called. Callbacks fire in due-time order (ties broken
by scheduling order) and each one observes ``now()`` equal to its due time,
which makes timing behaviour reproducible in tests and simulations.

Example:
    >>> clock = VirtualScheduler()
    >>> fired = []
    >>> _ = clock.call_later(100, fired.append, "a")
    >>> clock.advance(99)
    0
    >>> fired
    []
    >>> clock.advance(1)
    1
    >>> fired
    ['a']
"""

import heapq
import itertools
import typing as tp

from underbar.logger.logger import logger
from underbar.timers.protocol import Scheduler, validate_delay

__all__ = ["VirtualScheduler", "VirtualTimer"]


class VirtualTimer:
    """Handle for a callback scheduled on a :class:`VirtualScheduler`."""

    __slots__ = ("due", "seq", "callback", "args", "cancelled", "fired")

    def __init__(self, due: float, seq: int, callback: tp.Callable, args: tuple):
        self.due = due
        self.seq = seq
        self.callback = callback
        self.args = args
        self.cancelled = False
        self.fired = False

    def __lt__(self, other: "VirtualTimer") -> bool:
        return (self.due, self.seq) < (other.due, other.seq)

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def __repr__(self) -> str:
        state = "active" if self.active else ("fired" if self.fired else "cancelled")
        return f"VirtualTimer(due={self.due}, {state})"


class VirtualScheduler(Scheduler):
    """Scheduler with a virtual millisecond clock.

    Exceptions escaping a callback are logged, collected in ``uncaught`` and
    do not stop the clock, mirroring how an event loop reports errors from
    timer callbacks.
    """

    def __init__(self, start_ms: float = 0.0):
        self._now = float(start_ms)
        self._queue: tp.List[VirtualTimer] = []
        self._counter = itertools.count()
        self._cancelled = 0
        self.uncaught: tp.List[BaseException] = []

    def now(self) -> float:
        return self._now

    def call_later(
        self, delay_ms: float, callback: tp.Callable[..., tp.Any], *args: tp.Any
    ) -> VirtualTimer:
        delay_ms = validate_delay(delay_ms)
        timer = VirtualTimer(self._now + delay_ms, next(self._counter), callback, args)
        heapq.heappush(self._queue, timer)
        return timer

    def cancel(self, handle: VirtualTimer) -> None:
        if handle.active:
            handle.cancelled = True
            self._cancelled += 1
            self._compact()

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks that have neither fired nor been cancelled."""
        return len(self._queue) - self._cancelled

    def _pop(self) -> VirtualTimer:
        timer = heapq.heappop(self._queue)
        if timer.cancelled:
            self._cancelled -= 1
        return timer

    def _compact(self) -> None:
        """Drop cancelled timers so superseded calls don't pile up in the heap."""
        while self._queue and self._queue[0].cancelled:
            self._pop()
        if self._cancelled > len(self._queue) // 2:
            self._queue = [timer for timer in self._queue if timer.active]
            heapq.heapify(self._queue)
            self._cancelled = 0

    def advance(self, ms: float) -> int:
        """Move the clock forward by ``ms`` and fire every callback that falls due.

        Args:
            ms: Non-negative amount of virtual time to elapse.

        Returns:
            Number of callbacks that fired.
        """
        if ms < 0:
            raise ValueError(f"Cannot move the clock backwards ({ms} ms).")
        target = self._now + ms
        fired = 0
        while self._queue and self._queue[0].due <= target:
            timer = self._pop()
            if not timer.active:
                continue
            self._now = max(self._now, timer.due)
            self._fire(timer)
            fired += 1
        self._now = target
        return fired

    def run_all(self) -> int:
        """Fire every pending callback, advancing the clock as far as needed."""
        fired = 0
        while self._queue:
            timer = self._pop()
            if not timer.active:
                continue
            self._now = max(self._now, timer.due)
            self._fire(timer)
            fired += 1
        return fired

    def _fire(self, timer: VirtualTimer) -> None:
        timer.fired = True
        try:
            timer.callback(*timer.args)
        except Exception as e:
            logger.exception(f"Uncaught error in scheduled callback {timer!r}: {e}")
            self.uncaught.append(e)
