"""Dining philosophers kept free of deadlock by ordered fork locking."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Callable

SEATS = 5


class DiningPhilosophers:
    """A round table where each fork is a lock shared by two neighbours."""

    def __init__(self, seats: int = SEATS) -> None:
        if seats < 2:
            raise ValueError("the table needs at least two seats")
        self.seats = seats
        self._forks = [threading.Lock() for _ in range(seats)]

    def wants_to_eat(
        self,
        philosopher: int,
        pick_left_fork: Callable[[], None],
        pick_right_fork: Callable[[], None],
        eat: Callable[[], None],
        put_left_fork: Callable[[], None],
        put_right_fork: Callable[[], None],
    ) -> None:
        """Take both forks, lower-numbered first, and run the meal callbacks."""
        if not 0 <= philosopher < self.seats:
            raise ValueError(f"no philosopher {philosopher} at this table")
        left = philosopher
        right = (philosopher + 1) % self.seats
        first, second = sorted((left, right))
        with self._forks[first], self._forks[second]:
            pick_left_fork()
            pick_right_fork()
            eat()
            put_left_fork()
            put_right_fork()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="philosophers", description="Dining philosophers.")
    parser.add_argument("--seats", type=int, default=SEATS)
    args = parser.parse_args(argv)
    if args.seats < 2:
        parser.error("--seats must be at least 2")

    table = DiningPhilosophers(args.seats)
    print_lock = threading.Lock()

    def announce(text: str) -> Callable[[], None]:
        def action() -> None:
            with print_lock:
                print(text)
        return action

    steps = [
        announce("Pick left fork"),
        announce("Pick right fork"),
        announce("Eating"),
        announce("Put left fork"),
        announce("Put right fork"),
    ]
    threads = [
        threading.Thread(target=table.wants_to_eat, args=(seat, *steps))
        for seat in range(args.seats)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return 0