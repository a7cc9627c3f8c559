"""A thread-safe FIFO queue with non-blocking and blocking access."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class QueueClosed(Exception):
    """Raised by a blocking pop once the queue has been closed."""


class ThreadQueue(Generic[T]):
    """FIFO queue guarded by a lock and a condition variable."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()
        self._cond = threading.Condition()
        self._closed = False

    def push(self, value: T) -> None:
        """Append a value and wake one waiter."""
        with self._cond:
            self._items.append(value)
            self._cond.notify()

    def replace(self, value: T) -> None:
        """Drop the oldest value and append ``value``; the queue must not be empty."""
        with self._cond:
            if not self._items:
                raise IndexError("replace on an empty queue")
            self._items.popleft()
            self._items.append(value)
            self._cond.notify()

    def pop(self) -> T:
        """Block until a value is available and return it; raise QueueClosed if closed."""
        with self._cond:
            self._cond.wait_for(lambda: self._items or self._closed)
            if self._closed:
                raise QueueClosed("queue is closed")
            return self._items.popleft()

    def try_pop(self) -> Optional[T]:
        """Return the oldest value, or None if the queue is empty."""
        with self._cond:
            if not self._items:
                return None
            return self._items.popleft()

    def clear(self) -> None:
        """Remove every value."""
        with self._cond:
            self._items.clear()

    def close(self) -> None:
        """Close the queue and wake every blocked pop."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def empty(self) -> bool:
        with self._cond:
            return not self._items

    def size(self) -> int:
        with self._cond:
            return len(self._items)

    def __len__(self) -> int:
        return self.size()