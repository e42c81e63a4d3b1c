"""underbar: functional helpers and function-timing decorators."""

from underbar.core.enums import SchedulerKind
from underbar.functional.decorators import once, memoize, delay, throttle
from underbar.functional.iterables import (
    identity,
    each,
    index_of,
    filter_,
    reject,
    uniq,
    map_,
    pluck,
    reduce,
    contains,
    every,
    some,
    invoke,
    sort_by,
    zip_,
    flatten,
    intersection,
    difference,
    shuffle,
)
from underbar.timers import (
    Scheduler,
    AsyncioScheduler,
    VirtualScheduler,
    get_scheduler,
)

__all__ = [
    "once",
    "memoize",
    "delay",
    "throttle",
    "identity",
    "each",
    "index_of",
    "filter_",
    "reject",
    "uniq",
    "map_",
    "pluck",
    "reduce",
    "contains",
    "every",
    "some",
    "invoke",
    "sort_by",
    "zip_",
    "flatten",
    "intersection",
    "difference",
    "shuffle",
    "Scheduler",
    "AsyncioScheduler",
    "VirtualScheduler",
    "get_scheduler",
    "SchedulerKind",
]
