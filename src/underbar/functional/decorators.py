"""Function decorators that change when and how often a callable runs.

Each factory takes a target callable and returns a new callable with the same
calling convention. State lives in a record owned by the returned wrapper
(see :mod:`underbar.core.state`), so wrapping the same function twice yields
two independent wrappers. Decorators do not compose on their own; stack them
explicitly, e.g. ``throttle(memoize(f), 100)``.

The module provides:
    - **once**: run the target on the first call only, then replay its result
    - **memoize**: cache results per argument for single-argument functions
    - **delay**: fire-and-forget deferred invocation
    - **throttle**: at most one execution per window, with a trailing call
      carrying the latest arguments

Deferred executions (``delay`` and the trailing edge of ``throttle``) have no
caller to report to. Their exceptions go to an optional ``on_error`` callback,
and otherwise escape to the scheduler's own error reporting.

Examples:
    >>> from underbar.timers import VirtualScheduler
    >>> clock = VirtualScheduler()
    >>> calls = []
    >>> log = throttle(calls.append, 100, scheduler=clock)
    >>> log("a"); log("b"); log("c")
    >>> calls
    ['a']
    >>> clock.advance(100)
    1
    >>> calls
    ['a', 'c']
"""

import functools
import typing as tp

from underbar.core.state import InvocationCache, MemoTable, ThrottleState
from underbar.logger.logger import logger
from underbar.timers import Scheduler, get_scheduler
from underbar.timers.protocol import validate_delay

__all__ = ["once", "memoize", "delay", "throttle"]

ErrorCallback = tp.Callable[[Exception], tp.Any]


def _require_callable(func: tp.Any) -> None:
    if not callable(func):
        raise TypeError(f"Expected a callable, got {type(func).__name__}.")


def _invoke_deferred(
    func: tp.Callable,
    args: tuple,
    kwargs: dict,
    on_error: tp.Optional[ErrorCallback],
) -> tp.Any:
    """Run a deferred call, routing its failure to ``on_error`` when given."""
    try:
        return func(*args, **kwargs)
    except Exception as e:
        if on_error is None:
            raise
        on_error(e)
        return None


def once(func: tp.Callable) -> tp.Callable:
    """Return a wrapper that invokes ``func`` at most once.

    The first successful call caches its return value; every later call
    returns that value without calling ``func``, whatever its arguments. If
    the first call raises, nothing is cached and the next call tries again.

    Args:
        func: Callable to wrap.

    Returns:
        Wrapped callable. Its ``cache`` attribute holds the InvocationCache.

    Raises:
        TypeError: If ``func`` is not callable.
    """
    _require_callable(func)
    cache = InvocationCache()

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if not cache.has_run:
            cache.store(func(*args, **kwargs))
        return cache.result

    wrapper.cache = cache
    return wrapper


def memoize(func: tp.Callable) -> tp.Callable:
    """Cache the results of a single-argument function by its argument.

    The argument must be hashable. Entries are keyed by the argument together
    with its type, so ``1``, ``1.0``, ``True`` and ``"1"`` are cached
    separately. A key already in the table is never recomputed, including
    keys whose result is falsy (``0``, ``""``, ``False``, ``None``).

    Args:
        func: Callable taking exactly one argument.

    Returns:
        Wrapped callable. Its ``cache`` attribute holds the MemoTable.

    Raises:
        TypeError: If ``func`` is not callable.
    """
    _require_callable(func)
    table = MemoTable()

    @functools.wraps(func)
    def wrapper(arg):
        if arg not in table:
            table.store(arg, func(arg))
        return table.get(arg)

    wrapper.cache = table
    return wrapper


def delay(
    func: tp.Callable,
    wait: float,
    *args,
    scheduler: tp.Optional[Scheduler] = None,
    on_error: tp.Optional[ErrorCallback] = None,
    **kwargs,
) -> None:
    """Call ``func(*args, **kwargs)`` once, ``wait`` milliseconds from now.

    Returns immediately. The scheduled call cannot be cancelled and its return
    value is discarded.

    Args:
        func: Callable to run later.
        wait: Delay in milliseconds.
        *args: Positional arguments forwarded to ``func``.
        scheduler: Timer facility. Defaults to ``get_scheduler()``.
        on_error: Receives any exception raised by the deferred call. Without
            it the exception propagates to the scheduler.
        **kwargs: Keyword arguments forwarded to ``func``.

    Raises:
        TypeError: If ``func`` is not callable.
        ValueError: If ``wait`` is negative.
    """
    _require_callable(func)
    wait = validate_delay(wait)
    scheduler = scheduler if scheduler is not None else get_scheduler()

    logger.debug(f"Delaying {getattr(func, '__name__', func)!r} by {wait} ms")
    scheduler.call_later(
        wait, functools.partial(_invoke_deferred, func, args, kwargs, on_error)
    )


def throttle(
    func: tp.Callable,
    wait: float,
    *,
    scheduler: tp.Optional[Scheduler] = None,
    on_error: tp.Optional[ErrorCallback] = None,
) -> tp.Callable:
    """Limit ``func`` to one execution per ``wait`` millisecond window.

    A call outside the cooldown window runs ``func`` immediately and returns
    its result. A call inside the window replaces any pending trailing call
    with a new one scheduled ``wait`` ms later and returns None; only the last
    call of a window reaches ``func``. When the trailing call fires, the
    window restarts from the time that call was made. An immediate run
    cancels any trailing call still pending, so older arguments never reach
    ``func`` after newer ones.

    Args:
        func: Callable to throttle.
        wait: Window length in milliseconds.
        scheduler: Timer facility. Defaults to ``get_scheduler()``, resolved
            once when the wrapper is built.
        on_error: Receives exceptions raised by trailing executions. Without
            it they propagate to the scheduler. Immediate executions always
            raise to the caller.

    Returns:
        Wrapped callable. Its ``state`` attribute holds the ThrottleState;
        ``state.last_result`` is the result of the most recent execution,
        including trailing ones.

    Raises:
        TypeError: If ``func`` is not callable.
        ValueError: If ``wait`` is negative.
    """
    _require_callable(func)
    wait = validate_delay(wait)
    scheduler = scheduler if scheduler is not None else get_scheduler()
    state = ThrottleState()

    def trailing(scheduled_at: float, args: tuple, kwargs: dict) -> None:
        state.pending = None
        state.last_trigger = scheduled_at
        state.last_result = _invoke_deferred(func, args, kwargs, on_error)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        now = scheduler.now()

        if state.in_cooldown(now, wait):
            if state.pending is not None:
                scheduler.cancel(state.pending)
                logger.debug("Superseding pending trailing call")
            state.pending = scheduler.call_later(wait, trailing, now, args, kwargs)
            return None

        # A trailing call left over from an earlier window is now stale
        if state.pending is not None:
            scheduler.cancel(state.pending)
            state.pending = None
            logger.debug("Dropping stale trailing call before immediate run")

        state.last_trigger = now
        state.last_result = func(*args, **kwargs)
        return state.last_result

    wrapper.state = state
    return wrapper
