"""Tests for the once decorator."""

import pytest
from unittest.mock import MagicMock

from underbar.functional.decorators import once


def test_first_call_wins():
    add = once(lambda a, b: a + b)

    assert add(1, 2) == 3
    assert add(10, 20) == 3


def test_invokes_target_exactly_once():
    target = MagicMock(return_value="done")
    wrapped = once(target)

    results = [wrapped(i) for i in range(5)]

    assert results == ["done"] * 5
    target.assert_called_once_with(0)


def test_forwards_keyword_arguments():
    target = MagicMock(return_value=42)
    wrapped = once(target)

    wrapped(1, flag=True)

    target.assert_called_once_with(1, flag=True)


def test_caches_none_result():
    target = MagicMock(return_value=None)
    wrapped = once(target)

    assert wrapped() is None
    assert wrapped() is None
    assert target.call_count == 1
    assert wrapped.cache.has_run


def test_failed_first_call_is_retried():
    target = MagicMock(side_effect=[RuntimeError("boom"), "recovered"])
    wrapped = once(target)

    with pytest.raises(RuntimeError, match="boom"):
        wrapped()
    assert not wrapped.cache.has_run

    assert wrapped() == "recovered"
    assert wrapped() == "recovered"
    assert target.call_count == 2


def test_independent_wrappers_do_not_share_state():
    target = MagicMock(side_effect=lambda x: x * 2)
    first = once(target)
    second = once(target)

    assert first(1) == 2
    assert second(5) == 10
    assert target.call_count == 2


def test_preserves_metadata():
    def greet(name):
        """Say hello."""
        return f"hello {name}"

    wrapped = once(greet)

    assert wrapped.__name__ == "greet"
    assert wrapped.__doc__ == "Say hello."


def test_method_receives_instance():
    class Counter:
        def __init__(self):
            self.calls = 0

        @once
        def setup(self):
            self.calls += 1
            return self

    counter = Counter()
    assert counter.setup() is counter
    counter.setup()
    assert counter.calls == 1


def test_rejects_non_callable():
    with pytest.raises(TypeError):
        once(42)
