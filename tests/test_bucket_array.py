import numpy as np

from bucket_queue.bucket_array import init_buckets, link, unlink, scan, bucket_counts
from bucket_queue.datatypes import NIL, MinCursor


def _arena(n):
    return np.full(n, NIL, dtype=np.int64), np.full(n, NIL, dtype=np.int64)


def test_init_buckets_has_capacity_plus_one_empty_slots():
    head, tail = init_buckets(3)
    assert head.shape == (4,)
    assert tail.shape == (4,)
    assert (head == NIL).all() and (tail == NIL).all()


def test_link_appends_in_fifo_order():
    head, tail = init_buckets(2)
    nxt, prv = _arena(4)
    for rec in (0, 2, 3):
        link(head, tail, nxt, prv, 1, rec)
    assert head[1] == 0 and tail[1] == 3
    assert list(nxt[[0, 2, 3]]) == [2, 3, NIL]
    assert list(prv[[0, 2, 3]]) == [NIL, 0, 2]


def test_unlink_middle_head_and_tail():
    head, tail = init_buckets(0)
    nxt, prv = _arena(3)
    for rec in range(3):
        link(head, tail, nxt, prv, 0, rec)

    unlink(head, tail, nxt, prv, 0, 1)
    assert nxt[0] == 2 and prv[2] == 0
    unlink(head, tail, nxt, prv, 0, 0)
    assert head[0] == 2 and prv[2] == NIL
    unlink(head, tail, nxt, prv, 0, 2)
    assert head[0] == NIL and tail[0] == NIL


def test_scan_wraps_around_and_reports_empty():
    head, tail = init_buckets(4)
    nxt, prv = _arena(1)
    assert scan(head, 2) == NIL
    link(head, tail, nxt, prv, 1, 0)
    assert scan(head, 1) == 0
    assert scan(head, 2) == 4  # 2, 3, 4, 0, 1


def test_bucket_counts():
    head, tail = init_buckets(2)
    nxt, prv = _arena(3)
    link(head, tail, nxt, prv, 0, 0)
    link(head, tail, nxt, prv, 2, 1)
    link(head, tail, nxt, prv, 2, 2)
    assert list(bucket_counts(head, nxt)) == [1, 0, 2]


def test_min_cursor_anchor_and_advance():
    cursor = MinCursor(4)
    assert not cursor.defined
    cursor.anchor(10)
    assert cursor.defined and cursor.slot == 2
    cursor.advance(3)
    assert cursor.key == 13 and cursor.slot == 1


def test_min_cursor_negative_key_uses_floor_modulo():
    cursor = MinCursor(6)
    cursor.anchor(-1)
    assert cursor.slot == 5
