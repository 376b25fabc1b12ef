"""Thread-safe counters that never fall below zero."""

from __future__ import annotations

import threading


class Counter:
    """Counter guarded by a lock; decrementing at zero leaves it at zero."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> None:
        with self._lock:
            self._value += 1

    def decrement(self) -> None:
        with self._lock:
            self._value = max(self._value - 1, 0)

    @property
    def count(self) -> int:
        with self._lock:
            return self._value


class AtomicCounter:
    """Counter updated through compare-and-swap; it never goes below zero."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def _compare_exchange(self, expected: int, new: int) -> bool:
        with self._lock:
            if self._value != expected:
                return False
            self._value = new
            return True

    def increment(self) -> None:
        while True:
            current = self._value
            if self._compare_exchange(current, current + 1):
                return

    def decrement(self) -> None:
        while True:
            current = self._value
            if current <= 0 or self._compare_exchange(current, current - 1):
                return

    @property
    def count(self) -> int:
        return self._value