"""Timer facilities for deferred execution."""

import typing as tp

from underbar.core.config import settings
from underbar.core.enums import SchedulerKind
from underbar.timers.protocol import Scheduler
from underbar.timers.asyncio_scheduler import AsyncioScheduler
from underbar.timers.virtual import VirtualScheduler, VirtualTimer

__all__ = [
    "Scheduler",
    "AsyncioScheduler",
    "VirtualScheduler",
    "VirtualTimer",
    "get_scheduler",
]


def get_scheduler(kind: tp.Optional[SchedulerKind] = None) -> Scheduler:
    """Build a scheduler of the requested kind.

    Args:
        kind: Backend to use. Defaults to ``settings.DEFAULT_SCHEDULER``.

    Returns:
        A new scheduler instance.
    """
    kind = kind or settings.DEFAULT_SCHEDULER
    if kind is SchedulerKind.ASYNCIO:
        return AsyncioScheduler()
    if kind is SchedulerKind.VIRTUAL:
        return VirtualScheduler()
    raise ValueError(f"Unsupported scheduler kind: {kind}")
