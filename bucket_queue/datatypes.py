"""
Numba-accelerated bookkeeping types shared by the bucket array and the queue.
"""

from numba import int64, boolean
from numba.experimental import jitclass

NIL: int = -1            # end-of-list marker for intrusive links / empty buckets

cursor_spec = [
    ('n_slots',  int64),     # C + 1
    ('slot',     int64),
    ('key',      int64),
    ('defined',  boolean),   # False until the first insert
]

@jitclass(cursor_spec)
class MinCursor:
    """
    Last known location of the minimum key.

    Attributes
    ----------
    n_slots : int64
        Number of buckets (capacity + 1).
    slot : int64
        Bucket index of the last known minimum, always ``key % n_slots``.
    key : int64
        Last known minimum key.  Never decreases once ``defined``.
    defined : bool
        False for a queue that has never held an item.
    """
    def __init__(self, n_slots: int):
        self.n_slots = n_slots
        self.slot    = 0
        self.key     = 0
        self.defined = False

    def anchor(self, key: int) -> None:
        self.key     = key
        self.slot    = key % self.n_slots
        self.defined = True

    def advance(self, steps: int) -> None:
        self.key  += steps
        self.slot  = (self.slot + steps) % self.n_slots


if __name__ == "__main__":
    # Simple sanity test when running this module directly
    cursor = MinCursor(4)
    cursor.anchor(10)
    cursor.advance(3)
    print(
        f"Cursor: key={cursor.key}, slot={cursor.slot}, "
        f"n_slots={cursor.n_slots}, defined={cursor.defined}"
    )
