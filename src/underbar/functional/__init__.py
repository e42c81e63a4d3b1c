"""Functional primitives for underbar.

Stateless helpers over sequences and mappings live in
:mod:`underbar.functional.iterables`. Decorators that change the timing or
call count of a function (``once``, ``memoize``, ``delay``, ``throttle``) live
in :mod:`underbar.functional.decorators` and keep their state per wrapper.
"""

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
]
