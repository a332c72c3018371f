"""
Monotone bucket queue.

Priorities are integers that never drop below the last extracted minimum and
never exceed it by more than a fixed increment C.  Typical usage:

    bq = BucketQueue(capacity=3)
    bq.insert("a", 10)
    bq.insert("b", 12)
    bq.decrease_key("b", 11)
    for item, key in bq.pop_until(11):
        handle(item)

insert / remove / decrease_key are O(1) and touch at most two buckets.
get_min / pop_min visit at most C + 1 buckets, whatever the history.
"""

import logging
import operator
from typing import Any, Hashable, Iterator, Optional, Tuple

import numpy as np

from bucket_queue.bucket_array import init_buckets, link, unlink, scan, bucket_counts
from bucket_queue.config import QueueConfig
from bucket_queue.datatypes import MinCursor, NIL
from bucket_queue.errors import (
    EmptyQueue,
    DuplicateItem,
    KeyBelowMinimum,
    KeyOutOfRange,
    NotADecrease,
)
from bucket_queue.registry import ItemRegistry

logger = logging.getLogger("bucket_queue")


class BucketQueue:
    """
    Circular array of C + 1 FIFO buckets plus a lazily advanced minimum cursor.

    Items sharing a key are returned in the order they entered that key's
    bucket (by `insert` or `decrease_key`).  The cursor only moves forward,
    and only inside `get_min` / `pop_min`; removing the minimum item leaves
    the search for the next one to the following extraction.
    """

    __slots__ = (
        "_capacity",
        "_head",
        "_tail",
        "_cursor",
        "_registry",
        "last_scan_visits",
        "last_touched_slots",
    )

    def __init__(self, capacity: int, *, initial_arena: int = 64) -> None:
        if isinstance(capacity, bool):
            raise TypeError("capacity must be an int, not bool")
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._head, self._tail = init_buckets(capacity)
        self._cursor = MinCursor(capacity + 1)
        self._registry = ItemRegistry(initial_arena)
        # instrumentation of the most recent operation
        self.last_scan_visits: int = 0
        self.last_touched_slots: Tuple[int, ...] = ()

    @classmethod
    def from_config(cls, config: QueueConfig) -> "BucketQueue":
        return cls(config.capacity, initial_arena=config.initial_arena)

    # ────────────────────────── public ──────────────────────────
    def insert(self, item: Hashable, key: int) -> None:
        """Queue a new item with priority `key`."""
        key = operator.index(key)
        reg = self._registry
        if item in reg:
            raise DuplicateItem(item)

        cursor = self._cursor
        if cursor.defined and key < cursor.key:
            raise KeyBelowMinimum(key, cursor.key)
        # Only an empty queue may jump past minimum + C; the minimum is kept
        # for every key within reach of it.
        reanchor = not cursor.defined or key > cursor.key + self._capacity
        if reanchor and len(reg):
            raise KeyOutOfRange(key, cursor.key, self._capacity)

        slot = key % (self._capacity + 1)
        rec = reg.acquire(item, key, slot)
        if reanchor:
            logger.debug(f"empty queue anchored at key {key}")
            cursor.anchor(key)
        link(self._head, self._tail, reg.nxt, reg.prv, slot, rec)
        self.last_touched_slots = (slot,)

    def remove(self, item: Hashable) -> int:
        """Drop a live item whatever its key; returns that key."""
        reg = self._registry
        rec = reg.lookup(item)
        slot = int(reg.slots[rec])
        key = int(reg.keys[rec])
        unlink(self._head, self._tail, reg.nxt, reg.prv, slot, rec)
        reg.release(rec)
        self.last_touched_slots = (slot,)
        return key

    def decrease_key(self, item: Hashable, new_key: int) -> None:
        """Move a live item to a strictly smaller key, not below the minimum."""
        new_key = operator.index(new_key)
        reg = self._registry
        rec = reg.lookup(item)
        key = int(reg.keys[rec])
        if new_key >= key:
            raise NotADecrease(item, key, new_key)
        if new_key < self._cursor.key:
            raise KeyBelowMinimum(new_key, self._cursor.key)

        old_slot = int(reg.slots[rec])
        new_slot = new_key % (self._capacity + 1)
        unlink(self._head, self._tail, reg.nxt, reg.prv, old_slot, rec)
        reg.keys[rec] = new_key
        reg.slots[rec] = new_slot
        link(self._head, self._tail, reg.nxt, reg.prv, new_slot, rec)
        self.last_touched_slots = (old_slot, new_slot)

    def get_min(self) -> Tuple[Any, int]:
        """(item, key) with the smallest key, left in the queue."""
        rec = self._find_min("get_min")
        return self._registry.item_at(rec), self._cursor.key

    def pop_min(self) -> Tuple[Any, int]:
        """Remove and return the (item, key) with the smallest key."""
        rec = self._find_min("pop_min")
        reg = self._registry
        slot = self._cursor.slot
        key = int(reg.keys[rec])
        unlink(self._head, self._tail, reg.nxt, reg.prv, slot, rec)
        item = reg.release(rec)
        self.last_touched_slots = (slot,)
        return item, key

    def pop_until(self, key_bound: int) -> Iterator[Tuple[Any, int]]:
        """
        Yield and remove all items with key ≤ `key_bound`
        in ascending key order.
        """
        while len(self._registry):
            _, key = self.get_min()
            if key > key_bound:
                return
            yield self.pop_min()

    def key_of(self, item: Hashable) -> int:
        reg = self._registry
        return int(reg.keys[reg.lookup(item)])

    def bucket_sizes(self) -> np.ndarray:
        """Items per slot, indexed by key mod (capacity + 1)."""
        return bucket_counts(self._head, self._registry.nxt)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def min_key(self) -> Optional[int]:
        """Last known minimum key; None until the first insert."""
        return self._cursor.key if self._cursor.defined else None

    def __contains__(self, item: Hashable) -> bool:
        return item in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def __bool__(self) -> bool:
        return len(self._registry) > 0

    def __repr__(self) -> str:
        return (
            f"BucketQueue(capacity={self._capacity}, size={len(self)}, "
            f"min_key={self.min_key})"
        )

    # ────────────────────────── internal ──────────────────────────
    def _find_min(self, operation: str) -> int:
        # Every live key lies in [cursor.key, cursor.key + C], so the first
        # occupied slot from the cursor holds the minimum.
        if not len(self._registry):
            raise EmptyQueue(operation)
        cursor = self._cursor
        steps = scan(self._head, cursor.slot)
        if steps == NIL:
            raise RuntimeError("bucket array out of sync with item registry")
        self.last_scan_visits = steps + 1
        if steps:
            cursor.advance(steps)
            logger.debug(f"minimum advanced to {cursor.key} (slot {cursor.slot})")
        return int(self._head[cursor.slot])
