import pytest

from bucket_queue.datatypes import NIL
from bucket_queue.errors import UnknownItem
from bucket_queue.registry import ItemRegistry


def test_acquire_and_lookup():
    reg = ItemRegistry(4)
    rec = reg.acquire("a", 7, 3)
    assert reg.lookup("a") == rec
    assert reg.keys[rec] == 7 and reg.slots[rec] == 3
    assert "a" in reg and len(reg) == 1


def test_unknown_lookup():
    reg = ItemRegistry(4)
    reg.acquire("a", 1, 1)
    with pytest.raises(UnknownItem):
        reg.lookup("b")
    assert len(reg) == 1


def test_release_recycles_record():
    reg = ItemRegistry(2)
    first = reg.acquire("a", 1, 1)
    reg.acquire("b", 2, 0)
    assert reg.release(first) == "a"
    assert "a" not in reg
    assert reg.slots[first] == NIL
    assert reg.acquire("c", 3, 1) == first
    assert reg.arena_size == 2


def test_arena_grows_when_full():
    reg = ItemRegistry(1)
    recs = [reg.acquire(i, i, 0) for i in range(5)]
    assert sorted(recs) == list(range(5))
    assert reg.arena_size == 8
    assert [reg.item_at(r) for r in recs] == list(range(5))
    assert [int(reg.keys[r]) for r in recs] == list(range(5))


def test_key_overflow_leaves_registry_unchanged():
    reg = ItemRegistry(2)
    with pytest.raises(OverflowError):
        reg.acquire("a", 2 ** 70, 0)
    assert len(reg) == 0
    assert reg.acquire("a", 1, 0) == 0


def test_initial_size_must_be_positive():
    with pytest.raises(ValueError):
        ItemRegistry(0)
