"""FIFO buffer of events waiting for delivery."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class EventQueue(Generic[T]):
    """Strict first-in first-out queue.

    Not thread-safe; the bus drains it on the caller's thread.
    """

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def enqueue(self, item: T) -> None:
        """Append *item* to the tail."""
        self._items.append(item)

    def dequeue(self) -> T | None:
        """Remove and return the head, or ``None`` when the queue is empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
