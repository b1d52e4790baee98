"""A shared counter updated by two threads under a lock."""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)

ITERATIONS = 1000


class _Counter:
    def __init__(self) -> None:
        self.value = 0
        self.lock = threading.Lock()

    def add(self, delta: int, times: int, label: str) -> None:
        for _ in range(times):
            with self.lock:
                logger.debug("%s..........", label)
                self.value += delta


def simple_mutex_counter_driver(iterations: int = ITERATIONS) -> int:
    """Increment ``iterations`` times and decrement ``iterations - 10`` times concurrently.

    Returns the final count.
    """
    counter = _Counter()
    logger.info("Starting simple mutex counter.....")
    threads = [
        threading.Thread(target=counter.add, args=(1, iterations, "Incrementing")),
        threading.Thread(target=counter.add, args=(-1, iterations - 10, "Decrementing")),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    logger.info("Count is %d", counter.value)
    return counter.value


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO)
    simple_mutex_counter_driver()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())