"""The sleeping-barber problem: one barber, a few waiting chairs."""

from __future__ import annotations

import argparse
import sys
import threading
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

NUM_CHAIRS = 5


@dataclass(frozen=True)
class SimulationResult:
    served: int
    turned_away: int


class BarberShop:
    """Waiting room with ``chairs`` seats and one barber; ``report`` receives event lines."""

    def __init__(self, chairs: int = NUM_CHAIRS, report: Callable[[str], None] | None = None) -> None:
        if chairs < 0:
            raise ValueError("chairs must not be negative")
        self.chairs = chairs
        self._report = report or (lambda message: None)
        self._seats = threading.Lock()
        self._waiting: deque[tuple[int, threading.Event]] = deque()
        self._customer_ready = threading.Semaphore(0)

    @property
    def free_seats(self) -> int:
        with self._seats:
            return self.chairs - len(self._waiting)

    def arrive(self, customer_id: int) -> bool:
        """Wait for a haircut if a chair is free; return whether one was given."""
        with self._seats:
            if len(self._waiting) >= self.chairs:
                self._report(f"Customer {customer_id} is leaving because no chairs are available.")
                return False
            called = threading.Event()
            self._waiting.append((customer_id, called))
            self._report(f"Customer {customer_id} is waiting.")
        self._customer_ready.release()
        called.wait()
        self._report(f"Customer {customer_id} is getting a haircut.")
        return True

    def serve_next(self, timeout: float | None = None) -> int:
        """Call in the next waiting customer and return their id; TimeoutError if none."""
        if not self._customer_ready.acquire(timeout=timeout):
            raise TimeoutError("no customer arrived")
        with self._seats:
            customer_id, called = self._waiting.popleft()
        called.set()
        self._report("Barber is cutting hair.")
        return customer_id


def simulate(
    customers: int = 10,
    visits: int = 3,
    chairs: int = NUM_CHAIRS,
    out: TextIO | None = None,
) -> SimulationResult:
    """Run ``customers`` threads visiting ``visits`` times each, with one barber."""
    if customers < 0 or visits < 0:
        raise ValueError("customers and visits must not be negative")
    stream = sys.stdout if out is None else out
    lock = threading.Lock()
    outcomes = {True: 0, False: 0}
    closing = threading.Event()

    def report(line: str) -> None:
        with lock:
            stream.write(line + "\n")

    shop = BarberShop(chairs, report)

    def barber() -> None:
        while not closing.is_set():
            try:
                shop.serve_next(timeout=0.05)
            except TimeoutError:
                pass

    def customer(customer_id: int) -> None:
        for _ in range(visits):
            served = shop.arrive(customer_id)
            with lock:
                outcomes[served] += 1

    barber_thread = threading.Thread(target=barber)
    barber_thread.start()
    threads = [threading.Thread(target=customer, args=(cid,)) for cid in range(1, customers + 1)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    closing.set()
    barber_thread.join()
    return SimulationResult(served=outcomes[True], turned_away=outcomes[False])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="barbershop", description="Sleeping barber.")
    parser.add_argument("--customers", type=int, default=10)
    parser.add_argument("--visits", type=int, default=3)
    parser.add_argument("--chairs", type=int, default=NUM_CHAIRS)
    args = parser.parse_args(argv)
    if min(args.customers, args.visits, args.chairs) < 0:
        parser.error("counts must not be negative")
    result = simulate(args.customers, args.visits, args.chairs, sys.stdout)
    print(f"Served {result.served}, turned away {result.turned_away}.")
    return 0