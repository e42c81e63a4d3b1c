"""Per-wrapper state records for the function decorators.

Each decorator call allocates one of these models and closes over it, so two
wraps of the same function never share state.

Models:
    InvocationCache: Result of the first successful call, used by ``once``.
    MemoTable: Results keyed by argument, used by ``memoize``.
    ThrottleState: Cooldown bookkeeping for ``throttle``.
"""

from typing import Any, Dict, Hashable, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

__all__ = ["InvocationCache", "MemoTable", "ThrottleState"]


class InvocationCache(BaseModel):
    """Cached outcome of a single invocation.

    ``result`` is only meaningful once ``has_run`` is True, and ``has_run``
    never goes back to False.
    """

    has_run: bool = False
    result: Any = None

    def store(self, result: Any) -> None:
        self.result = result
        self.has_run = True


class MemoTable(BaseModel):
    """Append-only mapping from call argument to computed result.

    Entries are keyed by ``(type(arg), arg)`` so values that compare equal
    across types (``True``, ``1``, ``1.0``) stay distinct.
    """

    entries: Dict[Tuple[type, Hashable], Any] = Field(default_factory=dict)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @staticmethod
    def key_for(arg: Hashable) -> Tuple[type, Hashable]:
        return (type(arg), arg)

    def __contains__(self, arg: Hashable) -> bool:
        return self.key_for(arg) in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, arg: Hashable) -> Any:
        return self.entries[self.key_for(arg)]

    def store(self, arg: Hashable, value: Any) -> None:
        key = self.key_for(arg)
        if key in self.entries:
            raise KeyError(f"Memo entry for {arg!r} already exists.")
        self.entries[key] = value


class ThrottleState(BaseModel):
    """Cooldown bookkeeping for a throttled callable.

    Attributes:
        last_trigger: Scheduler time (ms) of the last execution, None before
            the first one.
        pending: Handle of the scheduled trailing execution, if any.
        last_result: Return value of the most recent execution, immediate or
            trailing.
    """

    last_trigger: Optional[float] = None
    pending: Any = None
    last_result: Any = None

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def in_cooldown(self, now: float, wait: float) -> bool:
        return self.last_trigger is not None and now < self.last_trigger + wait
