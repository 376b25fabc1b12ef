import threading

import pytest

from threadlab.counters import AtomicCounter, Counter

THREADS = 8
PER_THREAD = 200
KINDS = ["locked", "atomic"]


def _hammer(action):
    def work():
        for _ in range(PER_THREAD):
            action()

    threads = [threading.Thread(target=work) for _ in range(THREADS)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


@pytest.mark.parametrize("kind", KINDS)
def test_starts_at_zero(kind):
    counter = Counter() if kind == "locked" else AtomicCounter()
    assert counter.count == 0


@pytest.mark.parametrize("kind", KINDS)
def test_increment_and_decrement(kind):
    counter = Counter() if kind == "locked" else AtomicCounter()
    counter.increment()
    counter.increment()
    counter.decrement()
    assert counter.count == 1


@pytest.mark.parametrize("kind", KINDS)
def test_decrement_at_zero_stays_zero(kind):
    counter = Counter() if kind == "locked" else AtomicCounter()
    counter.decrement()
    counter.decrement()
    assert counter.count == 0
    counter.increment()
    assert counter.count == 1


@pytest.mark.parametrize("kind", KINDS)
def test_concurrent_increments_are_not_lost(kind):
    counter = Counter() if kind == "locked" else AtomicCounter()
    _hammer(counter.increment)
    assert counter.count == THREADS * PER_THREAD


@pytest.mark.parametrize("kind", KINDS)
def test_concurrent_decrements_never_go_negative(kind):
    counter = Counter() if kind == "locked" else AtomicCounter()
    for _ in range(PER_THREAD):
        counter.increment()
    _hammer(counter.decrement)
    assert counter.count == 0