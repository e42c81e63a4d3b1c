"""Enumerations for selecting timer backends."""

from enum import Enum


class SchedulerKind(Enum):
    """Timer facilities a decorator can be scheduled on."""

    ASYNCIO = "asyncio"
    VIRTUAL = "virtual"
