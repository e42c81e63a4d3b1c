import pytest

from underbar.core.state import InvocationCache, MemoTable, ThrottleState


def test_invocation_cache_store():
    cache = InvocationCache()
    assert not cache.has_run

    cache.store(0)

    assert cache.has_run
    assert cache.result == 0


def test_memo_table_is_append_only():
    table = MemoTable()
    table.store("a", 1)

    assert "a" in table
    assert table.get("a") == 1
    assert len(table) == 1

    with pytest.raises(KeyError):
        table.store("a", 2)
    assert table.get("a") == 1


def test_memo_tables_do_not_share_entries():
    first, second = MemoTable(), MemoTable()
    first.store(1, "x")

    assert 1 not in second


@pytest.mark.parametrize(
    "last_trigger, now, expected",
    [
        (None, 0.0, False),
        (0.0, 50.0, True),
        (0.0, 100.0, False),
        (10.0, 109.9, True),
    ],
)
def test_throttle_state_cooldown(last_trigger, now, expected):
    state = ThrottleState(last_trigger=last_trigger)

    assert state.in_cooldown(now, 100.0) is expected


def test_memo_table_keys_include_type():
    table = MemoTable()
    table.store(1, "int")
    table.store(True, "bool")

    assert table.get(1) == "int"
    assert table.get(True) == "bool"
    assert 1.0 not in table
