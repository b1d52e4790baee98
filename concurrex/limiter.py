"""A runner that fetches URLs under a per-interval request budget."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass

import requests

logger = logging.getLogger(__name__)

_POLL_SECONDS = 0.05


@dataclass(frozen=True)
class Task:
    """A URL to fetch."""

    url: str


class _TokenBucket:
    """A pool of tokens that is topped back up to capacity on refill."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._tokens = capacity
        self._cond = threading.Condition()

    def take(self, stop: threading.Event) -> bool:
        with self._cond:
            while self._tokens == 0:
                if stop.is_set():
                    return False
                self._cond.wait(_POLL_SECONDS)
            self._tokens -= 1
            return True

    def refill(self) -> None:
        with self._cond:
            self._tokens = self._capacity
            self._cond.notify_all()


class NaiveLimitedRunner:
    """Run tasks so that at most ``limit`` start within each reset interval."""

    max_workers: int = 10000

    def __init__(self, limit: int, reset_interval: float) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        if reset_interval <= 0:
            raise ValueError("reset_interval must be positive")
        self.concurrency_limit = limit
        self.reset_interval = reset_interval
        self.tasks: list[Task] = []
        self._tokens = _TokenBucket(limit)

    def add_tasks(self, tasks: Iterable[Task]) -> None:
        """Replace the pending tasks."""
        self.tasks = list(tasks)

    def _reset_limit(self, stop: threading.Event, finished: threading.Event) -> None:
        while not finished.wait(self.reset_interval):
            if stop.is_set():
                return
            logger.info("resetting the concurrency limit to %d", self.concurrency_limit)
            self._tokens.refill()

    def start(self, stop: threading.Event | None = None) -> None:
        """Fetch every task, blocking until all are done or ``stop`` is set."""
        stop = stop if stop is not None else threading.Event()
        finished = threading.Event()
        pending = iter(list(self.tasks))
        lock = threading.Lock()

        def do_action() -> None:
            while not stop.is_set():
                with lock:
                    task = next(pending, None)
                if task is None:
                    return
                logger.info("got task %s", task)
                if not self._tokens.take(stop):
                    return
                self.fetch(task.url)

        resetter = threading.Thread(target=self._reset_limit, args=(stop, finished), daemon=True)
        resetter.start()
        logger.info("Spawning workers %d", self.max_workers)
        logger.info("Allowed concurrency limit %d", self.concurrency_limit)

        # A worker handles one task at a time, so more workers than tasks never help.
        workers = [
            threading.Thread(target=do_action, daemon=True)
            for _ in range(min(self.max_workers, len(self.tasks)))
        ]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join()
        finished.set()
        resetter.join()

    def fetch(self, url: str) -> int | None:
        """GET ``url`` and return its status code, or ``None`` if the request failed."""
        logger.info("Fetching url %s", url)
        try:
            response = requests.get(url)
        except requests.RequestException as exc:
            logger.info("error in doing request %s", exc)
            return None
        with response:
            logger.info("Status code %d", response.status_code)
            return response.status_code


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO)
    runner = NaiveLimitedRunner(3, 1.0)
    runner.add_tasks(
        [
            Task(url="https://jsonplaceholder.typicode.com/todos/1"),
            Task(url="https://jsonplaceholder.typicode.com/todos/2"),
        ]
    )
    runner.start()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())