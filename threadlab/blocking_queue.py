"""Bounded FIFO queue whose push blocks when full and pop blocks when empty."""

from __future__ import annotations

import queue
import threading
from collections import deque
from typing import Any


class BlockingQueue:
    """Thread-safe bounded queue.

    ``push`` raises :class:`queue.Full` and ``pop`` raises :class:`queue.Empty`
    when a timeout is given and runs out.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._lock = threading.Lock()
        self._not_full = threading.Condition(self._lock)
        self._not_empty = threading.Condition(self._lock)

    def push(self, value: Any, timeout: float | None = None) -> None:
        with self._not_full:
            if not self._not_full.wait_for(
                lambda: len(self._items) < self.capacity, timeout
            ):
                raise queue.Full("queue is full")
            self._items.append(value)
            self._not_empty.notify()

    def pop(self, timeout: float | None = None) -> Any:
        with self._not_empty:
            if not self._not_empty.wait_for(lambda: bool(self._items), timeout):
                raise queue.Empty("queue is empty")
            value = self._items.popleft()
            self._not_full.notify()
            return value

    def front(self) -> Any:
        """Oldest value, or None when the queue is empty."""
        with self._lock:
            return self._items[0] if self._items else None

    def rear(self) -> Any:
        """Newest value, or None when the queue is empty."""
        with self._lock:
            return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        with self._lock:
            return not self._items

    def is_full(self) -> bool:
        with self._lock:
            return len(self._items) == self.capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)