"""Configuration, enums and state records shared across underbar."""

from underbar.core.config import Settings, settings
from underbar.core.enums import SchedulerKind
from underbar.core.state import InvocationCache, MemoTable, ThrottleState

__all__ = [
    "Settings",
    "settings",
    "SchedulerKind",
    "InvocationCache",
    "MemoTable",
    "ThrottleState",
]
