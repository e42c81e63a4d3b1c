"""Stateless helpers over sequences and mappings.

A collection is either a sequence (anything iterable) or a ``Mapping``. For
mappings the helpers operate on values, and iterators that receive a position
get the key instead of an index. Every helper returns a new list and leaves
its input untouched.

Helpers whose natural name would shadow a builtin carry a trailing
underscore (``map_``, ``filter_``).
"""

import itertools
import typing as tp
from collections.abc import Mapping

import numpy as np

__all__ = [
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

Collection = tp.Union[tp.Iterable[tp.Any], tp.Mapping[tp.Any, tp.Any]]

_MISSING = object()


def _values(collection: Collection) -> tp.List[tp.Any]:
    if isinstance(collection, Mapping):
        return list(collection.values())
    return list(collection)


def identity(value: tp.Any) -> tp.Any:
    """Return ``value`` unchanged. Useful as a default iterator."""
    return value


def each(collection: Collection, iterator: tp.Callable[..., tp.Any]) -> None:
    """Call ``iterator(value, key, collection)`` for every element.

    ``key`` is the index for sequences and the key for mappings.
    """
    if isinstance(collection, Mapping):
        for key, value in collection.items():
            iterator(value, key, collection)
    else:
        for index, value in enumerate(collection):
            iterator(value, index, collection)


def index_of(array: tp.Iterable[tp.Any], target: tp.Any) -> int:
    """Index of the first element equal to ``target``, or -1."""
    for index, item in enumerate(array):
        if item == target:
            return index
    return -1


def filter_(collection: Collection, test: tp.Callable[[tp.Any], tp.Any]) -> tp.List[tp.Any]:
    """Values for which ``test`` is truthy."""
    passed = []
    for value in _values(collection):
        if test(value):
            passed.append(value)
    return passed


def reject(collection: Collection, test: tp.Callable[[tp.Any], tp.Any]) -> tp.List[tp.Any]:
    """Values for which ``test`` is falsy."""
    return filter_(collection, lambda value: not test(value))


def uniq(array: tp.Iterable[tp.Any]) -> tp.List[tp.Any]:
    """Drop duplicates, keeping first occurrences in order.

    Equality based, so unhashable items are fine.
    """
    uniques: tp.List[tp.Any] = []
    for item in array:
        if index_of(uniques, item) == -1:
            uniques.append(item)
    return uniques


def map_(collection: Collection, iterator: tp.Callable[[tp.Any], tp.Any]) -> tp.List[tp.Any]:
    """Apply ``iterator`` to every value."""
    return [iterator(value) for value in _values(collection)]


def pluck(collection: Collection, key: tp.Any) -> tp.List[tp.Any]:
    """Extract ``item[key]`` from every item, e.g. a column of a list of dicts."""
    return map_(collection, lambda item: item[key])


def reduce(
    collection: Collection,
    iterator: tp.Callable[..., tp.Any],
    accumulator: tp.Any = _MISSING,
) -> tp.Any:
    """Fold a collection into a single value.

    ``iterator(accumulator, value, key, collection)`` is called for each
    element and its return value becomes the new accumulator. Without a
    starting accumulator the first value seeds it and is never passed to the
    iterator.

    Args:
        collection: Sequence or mapping to fold.
        iterator: Folding function.
        accumulator: Optional starting value.

    Returns:
        The final accumulator, or None for an empty collection without a
        starting value.

    Example:
        >>> reduce([1, 2, 3], lambda total, n, *_: total + n, 0)
        6
        >>> reduce([5], lambda total, n, *_: total + n * n)
        5
    """
    if isinstance(collection, Mapping):
        pairs = list(collection.items())
    else:
        pairs = list(enumerate(collection))

    if accumulator is _MISSING:
        if not pairs:
            return None
        accumulator = pairs[0][1]
        pairs = pairs[1:]

    for key, value in pairs:
        accumulator = iterator(accumulator, value, key, collection)
    return accumulator


def contains(collection: Collection, target: tp.Any) -> bool:
    """Whether any value equals ``target``."""
    return reduce(
        collection,
        lambda found, item, *_: found or item == target,
        False,
    )


def every(
    collection: Collection, iterator: tp.Optional[tp.Callable[[tp.Any], tp.Any]] = None
) -> bool:
    """Whether all values pass ``iterator`` (truthiness by default)."""
    test = iterator or identity
    return reduce(
        collection,
        lambda passed, value, *_: passed and bool(test(value)),
        True,
    )


def some(
    collection: Collection, iterator: tp.Optional[tp.Callable[[tp.Any], tp.Any]] = None
) -> bool:
    """Whether any value passes ``iterator`` (truthiness by default)."""
    test = iterator or identity
    return not every(collection, lambda value: not test(value))


def invoke(
    collection: Collection, func_or_name: tp.Union[str, tp.Callable[..., tp.Any]], *args
) -> tp.List[tp.Any]:
    """Call a function or a named method on every value.

    A callable is invoked as ``func(item, *args)``; a string is looked up as a
    method on each item and called with ``*args``.
    """
    if callable(func_or_name):
        return map_(collection, lambda item: func_or_name(item, *args))
    return map_(collection, lambda item: getattr(item, func_or_name)(*args))


def sort_by(
    collection: Collection, iterator: tp.Union[str, tp.Callable[[tp.Any], tp.Any]]
) -> tp.List[tp.Any]:
    """Stable sort by a computed criterion.

    If ``iterator`` is a string, items are sorted by ``item[iterator]``.
    """
    if isinstance(iterator, str):
        field = iterator
        return sorted(_values(collection), key=lambda item: item[field])
    return sorted(_values(collection), key=iterator)


def zip_(*arrays: tp.Iterable[tp.Any]) -> tp.List[tp.List[tp.Any]]:
    """Group elements by position, padding shorter arrays with None.

    Example:
        >>> zip_(['a', 'b', 'c', 'd'], [1, 2, 3])
        [['a', 1], ['b', 2], ['c', 3], ['d', None]]
    """
    return [list(group) for group in itertools.zip_longest(*arrays)]


def flatten(nested: tp.Iterable[tp.Any]) -> tp.List[tp.Any]:
    """Flatten arbitrarily nested lists and tuples into one list."""
    flat: tp.List[tp.Any] = []
    for item in nested:
        if isinstance(item, (list, tuple)):
            flat.extend(flatten(item))
        else:
            flat.append(item)
    return flat


def intersection(*arrays: tp.Iterable[tp.Any]) -> tp.List[tp.Any]:
    """Values of the first array present in every other array, without duplicates."""
    if not arrays:
        return []
    first, *others = [list(array) for array in arrays]
    return [
        item
        for item in uniq(first)
        if every(others, lambda other: contains(other, item))
    ]


def difference(array: tp.Iterable[tp.Any], *others: tp.Iterable[tp.Any]) -> tp.List[tp.Any]:
    """Values of ``array`` that appear in none of ``others``."""
    rest = flatten([list(other) for other in others])
    return reject(array, lambda value: contains(rest, value))


def shuffle(
    array: tp.Iterable[tp.Any], seed: tp.Optional[int] = None
) -> tp.List[tp.Any]:
    """Return a randomly permuted copy of ``array``.

    Args:
        array: Items to shuffle. Not modified.
        seed: Seed for ``numpy.random.default_rng`` for reproducible order.

    Returns:
        New list with the same items in random order.
    """
    items = list(array)
    rng = np.random.default_rng(seed)
    return [items[i] for i in rng.permutation(len(items))]
