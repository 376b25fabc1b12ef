"""Small thread demonstrations: countdown, futures, lock ordering and try-lock."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from typing import TextIO


def countdown(value: int) -> Iterator[int]:
    """Yield ``value - 1`` down to zero."""
    while value > 0:
        value -= 1
        yield value


def find_odd_sum(start: int, end: int) -> int:
    """Sum of the odd numbers from ``start`` to ``end`` inclusive."""
    first = start if start % 2 else start + 1
    return sum(range(first, end + 1, 2))


def odd_sum_in_thread(start: int, end: int) -> int:
    """Compute :func:`find_odd_sum` on a worker thread and wait for its future."""
    with ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(find_odd_sum, start, end).result()


def _run(*targets) -> None:
    threads = [threading.Thread(target=target) for target in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def ordered_tasks(out: TextIO | None = None, work_seconds: float = 2.0) -> list[str]:
    """Run two tasks that take both locks in the same order; return their start order."""
    stream = sys.stdout if out is None else out
    first, second = threading.Lock(), threading.Lock()
    started: list[str] = []

    def task(name: str) -> None:
        with first, second:
            started.append(name)
            stream.write(f"Started task {name}..\n")
            time.sleep(work_seconds)

    _run(lambda: task("A"), lambda: task("B"))
    return started


def try_lock_demo(
    out: TextIO | None = None,
    hold_seconds: float = 0.5,
    retry_seconds: float = 0.1,
) -> int:
    """One task holds a lock while another polls for it; return the failed attempts."""
    stream = sys.stdout if out is None else out
    mutex = threading.Lock()
    write_lock = threading.Lock()
    failures = 0

    def say(line: str) -> None:
        with write_lock:
            stream.write(line + "\n")

    def task1() -> None:
        say("Task 1 Locking the mutex")
        with mutex:
            say("Task 1 has locked the mutex")
            time.sleep(hold_seconds)
            say("Task 1 unlocking the mutex")

    def task2() -> None:
        nonlocal failures
        say("Task 2 trying to lock the mutex")
        while not mutex.acquire(blocking=False):
            failures += 1
            say("Task 2 could not lock the mutex")
            time.sleep(retry_seconds)
        say("Task 2 has locked the mutex")
        mutex.release()
        say("Task 2 has unlocked the mutex")

    _run(task1, task2)
    return failures


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="demos", description="Thread demonstrations.")
    parser.add_argument(
        "demo",
        nargs="?",
        choices=("countdown", "odd-sum", "ordered", "try-lock", "all"),
        default="all",
    )
    parser.add_argument("--work-seconds", type=float, default=2.0)
    args = parser.parse_args(argv)

    if args.demo in ("countdown", "all"):
        _run(lambda: print(*countdown(10), sep="\n"))
    if args.demo in ("odd-sum", "all"):
        print("Waiting for future result")
        print(f"Received oddSum = {odd_sum_in_thread(1, 5)}")
    if args.demo in ("ordered", "all"):
        ordered_tasks(sys.stdout, args.work_seconds)
    if args.demo in ("try-lock", "all"):
        try_lock_demo(sys.stdout)
    return 0