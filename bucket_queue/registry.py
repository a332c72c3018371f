"""
Item registry: an arena of per-item records addressed by integer index.

A record is one row across four parallel int64 arrays:

    keys[rec]    current key
    slots[rec]   bucket index (key mod C+1)
    nxt[rec]     next record in the same bucket, or NIL
    prv[rec]     previous record in the same bucket, or NIL

Caller handles (any hashable) are mapped to record indices by a dict, so
lookup, unlink and relink by handle are O(1).  Released rows go on a free list
and are handed out again before the arena grows.  Growth doubles the arena;
the bucket array is never touched by it.
"""

import logging
from typing import Any, Dict, List

import numpy as np

from bucket_queue.datatypes import NIL
from bucket_queue.errors import UnknownItem

logger = logging.getLogger("bucket_queue")


class ItemRegistry:
    """Handle → record arena with free-list reuse."""

    __slots__ = ("keys", "slots", "nxt", "prv", "_items", "_index", "_free")

    def __init__(self, initial: int = 64) -> None:
        if initial < 1:
            raise ValueError(f"initial arena size must be positive, got {initial}")
        self.keys = np.zeros(initial, dtype=np.int64)
        self.slots = np.full(initial, NIL, dtype=np.int64)
        self.nxt = np.full(initial, NIL, dtype=np.int64)
        self.prv = np.full(initial, NIL, dtype=np.int64)
        self._items: List[Any] = [None] * initial
        self._index: Dict[Any, int] = {}
        # popped from the end, so the lowest free row is reused first
        self._free: List[int] = list(range(initial - 1, -1, -1))

    # ────────────────────────── public ──────────────────────────
    def lookup(self, item: Any) -> int:
        """Record index of a live item."""
        try:
            return self._index[item]
        except KeyError:
            raise UnknownItem(item) from None

    def acquire(self, item: Any, key: int, slot: int) -> int:
        """Create the record for an item the caller knows is not live; returns its index."""
        if not self._free:
            self._grow()
        rec = self._free[-1]
        self.keys[rec] = key  # OverflowError outside int64, before any change
        self._free.pop()
        self.slots[rec] = slot
        self._items[rec] = item
        self._index[item] = rec
        return rec

    def release(self, rec: int) -> Any:
        """Destroy record `rec` and return the item it belonged to."""
        item = self._items[rec]
        del self._index[item]
        self._items[rec] = None
        self.slots[rec] = NIL
        self.nxt[rec] = NIL
        self.prv[rec] = NIL
        self._free.append(rec)
        return item

    def item_at(self, rec: int) -> Any:
        return self._items[rec]

    @property
    def arena_size(self) -> int:
        return self.keys.shape[0]

    def __contains__(self, item: Any) -> bool:
        return item in self._index

    def __len__(self) -> int:
        return len(self._index)

    # ────────────────────────── internal ──────────────────────────
    def _grow(self) -> None:
        old = self.arena_size
        new = old * 2
        logger.debug(f"growing item arena from {old} to {new} records")

        def widen(arr, fill):
            out = np.full(new, fill, dtype=np.int64)
            out[:old] = arr
            return out

        self.keys = widen(self.keys, 0)
        self.slots = widen(self.slots, NIL)
        self.nxt = widen(self.nxt, NIL)
        self.prv = widen(self.prv, NIL)
        self._items.extend([None] * old)
        self._free.extend(range(new - 1, old - 1, -1))
