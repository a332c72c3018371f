"""
Caller-usage errors raised by BucketQueue.

Every error is a contract violation detected before any state change; none of
them is transient.  Each one also derives from the closest builtin so that
generic ``except ValueError`` / ``except KeyError`` handlers keep working.
"""

from typing import Any


class BucketQueueError(Exception):
    """Base class for all bucket queue errors."""


class KeyBelowMinimum(BucketQueueError, ValueError):
    def __init__(self, key: int, min_key: int) -> None:
        self.key = key
        self.min_key = min_key
        super().__init__(f"key {key} is below the current minimum {min_key}")


class KeyOutOfRange(BucketQueueError, ValueError):
    def __init__(self, key: int, min_key: int, capacity: int) -> None:
        self.key = key
        self.min_key = min_key
        self.capacity = capacity
        super().__init__(
            f"key {key} exceeds minimum {min_key} + capacity {capacity}"
        )


class NotADecrease(BucketQueueError, ValueError):
    def __init__(self, item: Any, key: int, new_key: int) -> None:
        self.item = item
        self.key = key
        self.new_key = new_key
        super().__init__(
            f"new key {new_key} for {item!r} is not below its current key {key}"
        )


class DuplicateItem(BucketQueueError, KeyError):
    def __init__(self, item: Any) -> None:
        self.item = item
        super().__init__(item)

    def __str__(self) -> str:
        return f"{self.item!r} is already queued"


class UnknownItem(BucketQueueError, KeyError):
    def __init__(self, item: Any) -> None:
        self.item = item
        super().__init__(item)

    def __str__(self) -> str:
        return f"{self.item!r} is not queued"


class EmptyQueue(BucketQueueError, IndexError):
    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} from an empty bucket queue")
