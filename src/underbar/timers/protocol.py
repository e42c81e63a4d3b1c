"""Timer protocol definition for underbar schedulers."""

from abc import ABC, abstractmethod
from typing import Any, Callable


class Scheduler(ABC):
    """Abstract base class for timer facilities.

    All times and delays are expressed in milliseconds. The decorators only
    rely on this contract, so any event loop or clock can be plugged in.

    Example:
        >>> class MyScheduler(Scheduler):
        ...     def now(self): ...
        ...     def call_later(self, delay_ms, callback, *args): ...
        ...     def cancel(self, handle): ...
    """

    @abstractmethod
    def now(self) -> float:
        """Current monotonic time in milliseconds."""
        pass

    @abstractmethod
    def call_later(self, delay_ms: float, callback: Callable[..., Any], *args: Any) -> Any:
        """Schedule ``callback(*args)`` to run no earlier than ``delay_ms`` from now.

        Args:
            delay_ms: Non-negative delay in milliseconds.
            callback: Callable to invoke.
            *args: Positional arguments for the callback.

        Returns:
            An opaque handle accepted by :meth:`cancel`.

        Raises:
            ValueError: If ``delay_ms`` is negative.
        """
        pass

    @abstractmethod
    def cancel(self, handle: Any) -> None:
        """Cancel a pending callback. No-op if it already ran or was cancelled."""
        pass


def validate_delay(delay_ms: float) -> float:
    """Reject negative delays before they reach a timer backend."""
    if delay_ms < 0:
        raise ValueError(f"Delay must be non-negative, got {delay_ms}.")
    return float(delay_ms)
