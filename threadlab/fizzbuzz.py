"""Round-robin fizzbuzz played by a table of players on a worker thread."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Iterable
from enum import Enum
from itertools import cycle

TOTAL_ROUNDS = 10
DEFAULT_PLAYERS = ("Abdul", "Bart", "Claudia", "Divya")


class Result(Enum):
    """How a number divides by three and five, with the word it is called."""

    DIV_BY_THREE = "fizz!"
    DIV_BY_FIVE = "buzz!"
    DIV_BY_THREE_AND_FIVE = "fizzbuzz!"
    DIV_BY_NONE = ""


def check_divisibility(number: int) -> Result:
    """Classify ``number`` by divisibility by three and five."""
    by_three = number % 3 == 0
    by_five = number % 5 == 0
    if by_three and by_five:
        return Result.DIV_BY_THREE_AND_FIVE
    if by_three:
        return Result.DIV_BY_THREE
    if by_five:
        return Result.DIV_BY_FIVE
    return Result.DIV_BY_NONE


def say(number: int) -> str:
    """Return what a player says for ``number``."""
    return check_divisibility(number).value or str(number)


def play(players: Iterable[str], rounds: int = TOTAL_ROUNDS) -> list[str]:
    """Play ``rounds`` turns, players taking turns in order, and return the calls."""
    table = list(players)
    if not table:
        raise ValueError("at least one player is needed")
    if rounds < 0:
        raise ValueError("rounds must not be negative")
    return [
        f"{name} says {say(number)}"
        for number, name in zip(range(1, rounds + 1), cycle(table))
    ]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fizzbuzz", description="Play fizzbuzz.")
    parser.add_argument("players", nargs="*", default=list(DEFAULT_PLAYERS))
    parser.add_argument("--rounds", type=int, default=TOTAL_ROUNDS)
    args = parser.parse_args(argv)
    if args.rounds < 0:
        parser.error("--rounds must not be negative")

    def game() -> None:
        for line in play(args.players, args.rounds):
            print(line)

    worker = threading.Thread(target=game, name="fizzbuzz")
    worker.start()
    worker.join()
    return 0