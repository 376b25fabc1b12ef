"""Logger whose callers queue messages for a background writer thread."""

from __future__ import annotations

import argparse
import os
import sys
import threading
from collections import deque
from typing import TextIO


def write_log_to_file(path: str | os.PathLike[str], message: str) -> None:
    """Append ``message`` as one line to the file at ``path``."""
    with open(path, "a", encoding="utf-8") as log_file:
        log_file.write(message + "\n")


class ThreadSafeLogger:
    """Queue messages from any thread; a worker appends them to a file.

    Messages still queued at :meth:`stop` are written before the worker exits.
    """

    def __init__(self, path: str | os.PathLike[str] = "logs.txt", out: TextIO | None = None) -> None:
        self.path = path
        self._out = out
        self._messages: deque[str] = deque()
        self._cond = threading.Condition()
        self._stopping = False
        self._worker: threading.Thread | None = None

    def log(self, message: str) -> None:
        with self._cond:
            self._messages.append(message)
            self._cond.notify_all()

    def start(self) -> None:
        with self._cond:
            if self._worker is not None:
                raise RuntimeError("logger is already running")
            self._stopping = False
            self._worker = threading.Thread(target=self._consume, daemon=True)
            self._worker.start()

    def stop(self) -> None:
        with self._cond:
            worker, self._worker = self._worker, None
            self._stopping = True
            self._cond.notify_all()
        if worker is not None:
            worker.join()

    def __enter__(self) -> ThreadSafeLogger:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _consume(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._messages or self._stopping)
                if not self._messages:
                    return
                message = self._messages.popleft()
            if self._out is not None:
                self._out.write(f"Consumed log: {message}\n")
            try:
                write_log_to_file(self.path, message)
            except OSError:
                (self._out or sys.stderr).write("Failed to open file.\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="logger", description="Threaded logger demo.")
    parser.add_argument("--path", default="logs.txt")
    args = parser.parse_args(argv)

    logger = ThreadSafeLogger(args.path, out=sys.stdout)
    logger.start()
    messages = ["Hello World", "Hello World 2", "Hello World 3", "this is a new log"]
    producers = [threading.Thread(target=logger.log, args=(m,)) for m in messages]
    for producer in producers:
        producer.start()
    for producer in producers:
        producer.join()
    print("Aborting..")
    logger.stop()
    print("All threads finished..")
    return 0