"""Producer and consumer sharing a bounded buffer guarded by semaphores."""

from __future__ import annotations

import argparse
import random
import sys
import threading
from collections import deque
from collections.abc import Iterable
from typing import Any, TextIO

BUFFER_SIZE = 5


class BoundedBuffer:
    """Fixed-capacity buffer: ``put`` blocks when full, ``get`` when empty."""

    def __init__(self, capacity: int = BUFFER_SIZE) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._free = threading.Semaphore(capacity)
        self._filled = threading.Semaphore(0)
        self._mutex = threading.Lock()

    def put(self, item: Any) -> None:
        self._free.acquire()
        with self._mutex:
            self._items.append(item)
        self._filled.release()

    def get(self) -> Any:
        self._filled.acquire()
        with self._mutex:
            item = self._items.popleft()
        self._free.release()
        return item


def run(items: Iterable[Any], capacity: int = BUFFER_SIZE, out: TextIO | None = None) -> list[Any]:
    """Pass ``items`` from a producer thread to a consumer thread; return what was consumed."""
    items = list(items)
    buffer = BoundedBuffer(capacity)
    consumed: list[Any] = []

    def produce() -> None:
        for item in items:
            if out is not None:
                out.write(f"Produced: {item}\n")
            buffer.put(item)

    def consume() -> None:
        for _ in items:
            item = buffer.get()
            consumed.append(item)
            if out is not None:
                out.write(f"Consumed: {item}\n")

    threads = [threading.Thread(target=produce), threading.Thread(target=consume)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return consumed


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="producer-consumer", description="Bounded buffer demo.")
    parser.add_argument("--count", type=int, default=10)
    parser.add_argument("--capacity", type=int, default=BUFFER_SIZE)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.capacity <= 0:
        parser.error("--capacity must be positive")
    rng = random.Random(args.seed)
    run((rng.randrange(100) for _ in range(args.count)), args.capacity, sys.stdout)
    return 0