"""Classic concurrency problems solved with Python threads."""

__version__ = "0.1.0"

__all__ = [
    "bank",
    "barbershop",
    "blocking_queue",
    "counters",
    "demos",
    "fizzbuzz",
    "logger",
    "philosophers",
    "producer_consumer",
]