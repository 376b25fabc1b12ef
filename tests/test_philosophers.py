import threading
import time
from collections import defaultdict

import pytest

from threadlab.philosophers import SEATS, DiningPhilosophers, main

STEPS = ["pick_left", "pick_right", "eat", "put_left", "put_right"]


def _run_table(table, meals_each=1):
    guard = threading.Lock()
    active = set()
    violations = []
    events = defaultdict(list)

    def callbacks(p):
        def record(step):
            with guard:
                events[p].append(step)

        def pick_left():
            with guard:
                active.add(p)
            record("pick_left")

        def eat():
            with guard:
                neighbours = {(p - 1) % table.seats, (p + 1) % table.seats}
                if active & neighbours:
                    violations.append(p)
            record("eat")
            time.sleep(0.005)

        def put_right():
            record("put_right")
            with guard:
                active.discard(p)

        return (
            pick_left,
            lambda: record("pick_right"),
            eat,
            lambda: record("put_left"),
            put_right,
        )

    def diner(p):
        for _ in range(meals_each):
            table.wants_to_eat(p, *callbacks(p))

    threads = [threading.Thread(target=diner, args=(p,)) for p in range(table.seats)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(10)
    return events, violations


def test_each_philosopher_eats_in_order():
    events, violations = _run_table(DiningPhilosophers())
    assert violations == []
    assert sorted(events) == list(range(SEATS))
    for steps in events.values():
        assert steps == STEPS


def test_neighbours_never_eat_together_over_many_meals():
    events, violations = _run_table(DiningPhilosophers(), meals_each=5)
    assert violations == []
    assert all(steps == STEPS * 5 for steps in events.values())


@pytest.mark.parametrize("seat", [-1, SEATS])
def test_unknown_philosopher_raises(seat):
    table = DiningPhilosophers()
    noop = lambda: None  # noqa: E731
    with pytest.raises(ValueError):
        table.wants_to_eat(seat, noop, noop, noop, noop, noop)


def test_table_needs_two_seats():
    with pytest.raises(ValueError):
        DiningPhilosophers(1)


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines.count("Eating") == SEATS
    assert lines.count("Pick left fork") == SEATS
    assert len(lines) == 5 * SEATS