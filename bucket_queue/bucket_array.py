"""
Circular bucket array (Numba-accelerated).

The array is fixed at C + 1 slots.  Each slot is the head/tail of an intrusive
doubly linked list threaded through the record arena of the item registry:

    head[0:C+1], tail[0:C+1]      record index or NIL
    nxt[rec], prv[rec]            neighbours of record `rec` inside its bucket

Items are appended at the tail and taken from the head, so a bucket is FIFO.

Public API
----------
init_buckets(capacity)                     → tuple(head, tail)
link(head, tail, nxt, prv, slot, rec)      → None
unlink(head, tail, nxt, prv, slot, rec)    → None
scan(head, start)                          → int   steps to first non-empty slot
bucket_counts(head, nxt)                   → np.ndarray
"""

import numpy as np
from numba import njit

from bucket_queue.datatypes import NIL


# ──────────────────────────────────────────────────────────────────────────
@njit(cache=True)
def init_buckets(capacity: int):
    """
    Returns
    -------
    head, tail : np.ndarray[int64]
        One entry per slot (capacity + 1), all NIL.
    """
    head = np.full(capacity + 1, NIL, dtype=np.int64)
    tail = np.full(capacity + 1, NIL, dtype=np.int64)
    return head, tail


# ──────────────────────────────────────────────────────────────────────────
@njit(cache=True)
def link(head, tail, nxt, prv, slot: int, rec: int):
    """
    Append record `rec` to the tail of bucket `slot`.
    """
    last = tail[slot]
    prv[rec] = last
    nxt[rec] = NIL
    if last == NIL:
        head[slot] = rec
    else:
        nxt[last] = rec
    tail[slot] = rec


@njit(cache=True)
def unlink(head, tail, nxt, prv, slot: int, rec: int):
    """
    Detach record `rec` from bucket `slot` using its stored neighbours.
    """
    before = prv[rec]
    after = nxt[rec]
    if before == NIL:
        head[slot] = after
    else:
        nxt[before] = after
    if after == NIL:
        tail[slot] = before
    else:
        prv[after] = before
    nxt[rec] = NIL
    prv[rec] = NIL


@njit(cache=True)
def scan(head, start: int) -> int:
    """
    Walk the slots circularly from `start`.

    Returns
    -------
    int : number of steps to the first non-empty slot (0 when `start` itself
          is occupied), or NIL if every slot is empty.  The slots visited are
          the returned value + 1, never more than len(head).
    """
    n_slots = head.shape[0]
    for step in range(n_slots):
        if head[(start + step) % n_slots] != NIL:
            return step
    return NIL


@njit(cache=True)
def bucket_counts(head, nxt):
    """
    Item count per slot.  Walks every list, so O(C + n); diagnostics only.
    """
    n_slots = head.shape[0]
    counts = np.zeros(n_slots, dtype=np.int64)
    for slot in range(n_slots):
        rec = head[slot]
        while rec != NIL:
            counts[slot] += 1
            rec = nxt[rec]
    return counts
