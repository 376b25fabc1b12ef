# threadlab

Classic concurrency problems, each solved with Python's `threading`
primitives and packaged as something you can import, test and run.

| Module | What it shows |
| --- | --- |
| `threadlab.fizzbuzz` | Players taking turns at FizzBuzz; `check_divisibility`, `say` and `play` |
| `threadlab.counters` | `Counter` (lock based) and `AtomicCounter` (compare-and-swap style), both floored at zero |
| `threadlab.blocking_queue` | `BlockingQueue`: fixed capacity, blocks on `push` when full and on `pop` when empty |
| `threadlab.bank` | `Account`: deposits wake waiting withdrawals through a condition variable |
| `threadlab.logger` | `ThreadSafeLogger`: many threads log, one background thread appends to a file |
| `threadlab.philosophers` | `DiningPhilosophers`: forks taken in a fixed order so no one deadlocks |
| `threadlab.producer_consumer` | `BoundedBuffer`: a fixed-capacity buffer guarded by semaphores, and `run` |
| `threadlab.barbershop` | `BarberShop`: the sleeping-barber problem with a limited waiting room, and `simulate` |
| `threadlab.demos` | Lock ordering, try-lock retries, a countdown and a result computed on another thread |

## Installing

```
pip install .
```

The package uses only the standard library. Install the test extra to run
the test suite:

```
pip install ".[test]"
pytest
```

## Using it as a library

```python
from threadlab.blocking_queue import BlockingQueue
from threadlab.demos import find_odd_sum, odd_sum_in_thread
from threadlab.fizzbuzz import play

queue = BlockingQueue(2)
queue.push(1)
queue.push(2)
assert queue.is_full()
assert queue.pop() == 1

assert find_odd_sum(1, 5) == 9          # 1 + 3 + 5
assert odd_sum_in_thread(1, 5) == 9     # the same sum, computed on another thread

assert play(["Abdul", "Bart"], 3) == [
    "Abdul says 1",
    "Bart says 2",
    "Abdul says fizz!",
]
```

A few behaviours worth knowing:

- `BlockingQueue.push` and `BlockingQueue.pop` accept a `timeout`; when it
  runs out they raise `queue.Full` and `queue.Empty`. `front()` and `rear()`
  return `None` on an empty queue.
- `Account.withdraw_money(amount, timeout=1.0)` waits up to `timeout` for a
  non-zero balance and raises `InsufficientFundsError` if the balance is
  still too small. `add_money` returns the new balance.
- `ThreadSafeLogger` works as a context manager; messages still queued when
  it stops are written before its worker exits.
- `BarberShop.serve_next(timeout)` raises `TimeoutError` when no customer
  arrives in time; `simulate` returns a `SimulationResult` with `served` and
  `turned_away` counts.
- `producer_consumer.run(items, capacity, out)` returns the items in the
  order the consumer received them.

## Running the examples

Each example has its own command:

```
threadlab-fizzbuzz [PLAYER ...] [--rounds N]
threadlab-bank [withdrawals|deposits] [--work-seconds S]
threadlab-logger [--path FILE]
threadlab-philosophers [--seats N]
threadlab-producer-consumer [--count N] [--capacity N] [--seed N]
threadlab-barbershop [--customers N] [--visits N] [--chairs N]
threadlab-demos [countdown|odd-sum|ordered|try-lock|all] [--work-seconds S]
```

`threadlab-logger` appends the messages it consumes to `logs.txt` unless
`--path` names another file. `threadlab-producer-consumer` passes a fixed
number of random items through the buffer, and `threadlab-barbershop` lets
each customer visit a fixed number of times, so both finish and exit rather
than running forever.