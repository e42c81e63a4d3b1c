"""Scheduler backed by an asyncio event loop."""

import asyncio
import typing as tp

from underbar.timers.protocol import Scheduler, validate_delay


class AsyncioScheduler(Scheduler):
    """Adapter from the millisecond timer protocol to ``loop.call_later``.

    If no loop is given, the loop running at call time is used, which means
    calls must happen inside a coroutine or a loop callback. Exceptions that
    escape a callback go to the loop's exception handler.
    """

    def __init__(self, loop: tp.Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def now(self) -> float:
        return self.loop.time() * 1000.0

    def call_later(
        self, delay_ms: float, callback: tp.Callable[..., tp.Any], *args: tp.Any
    ) -> asyncio.TimerHandle:
        delay_ms = validate_delay(delay_ms)
        return self.loop.call_later(delay_ms / 1000.0, callback, *args)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()
