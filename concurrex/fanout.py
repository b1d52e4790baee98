"""Fan a stream of values out to a pool of worker threads."""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from concurrex.generators import generate

T = TypeVar("T")

logger = logging.getLogger(__name__)

_END = object()
_POLL_SECONDS = 0.05


class _LockedIterator:
    """An iterator that several threads may pull from safely."""

    def __init__(self, source: Iterable[T]) -> None:
        self._it = iter(source)
        self._lock = threading.Lock()

    def __iter__(self) -> "_LockedIterator":
        return self

    def __next__(self):
        with self._lock:
            return next(self._it)


def _put(out: queue.Queue, item, done: threading.Event) -> bool:
    """Hand ``item`` to the consumer; give up once ``done`` is set."""
    while not done.is_set():
        try:
            out.put(item, timeout=_POLL_SECONDS)
            return True
        except queue.Full:
            continue
    return False


def _worker(
    worker_id: int,
    done: threading.Event,
    source: _LockedIterator,
    out: queue.Queue,
    work: Callable[[T], T],
) -> None:
    logger.info("Worker %d started", worker_id)
    for value in source:
        if not _put(out, work(value), done):
            return


def _drain(out: queue.Queue) -> Iterator:
    while (item := out.get()) is not _END:
        yield item


def _run_pool(targets: list[Callable[[], None]], out: queue.Queue) -> Iterator:
    threads = [threading.Thread(target=target, daemon=True) for target in targets]
    for thread in threads:
        thread.start()

    def close_when_finished() -> None:
        for thread in threads:
            thread.join()
        out.put(_END)

    threading.Thread(target=close_when_finished, daemon=True).start()
    return _drain(out)


def fanout(
    done: threading.Event,
    source: Iterable[T],
    num_workers: int,
    work: Callable[[T], T],
) -> Iterator[T]:
    """Apply ``work`` to every value of ``source`` using ``num_workers`` threads.

    Results are yielded in completion order; the stream ends once every
    worker has finished or ``done`` is set.
    """
    out: queue.Queue = queue.Queue(maxsize=1)
    shared = _LockedIterator(source)
    targets = [
        (lambda i=i: _worker(i, done, shared, out, work))
        for i in range(max(num_workers, 0))
    ]
    return _run_pool(targets, out)


def fanout_with_sem(
    done: threading.Event,
    source: Iterable[T],
    num_workers: int,
    concurrency_limit: int,
    work: Callable[[T], T],
) -> Iterator[T]:
    """Like :func:`fanout`, but at most ``concurrency_limit`` workers run at once."""
    if concurrency_limit < 1:
        raise ValueError("concurrency_limit must be at least 1")
    out: queue.Queue = queue.Queue(maxsize=1)
    shared = _LockedIterator(source)
    sem = threading.Semaphore(concurrency_limit)

    def limited(worker_id: int) -> None:
        with sem:
            _worker(worker_id, done, shared, out, work)

    targets = [(lambda i=i: limited(i)) for i in range(max(num_workers, 0))]
    return _run_pool(targets, out)


def naive_fanout() -> None:
    """Double 1..5 with three workers and print the results."""
    done = threading.Event()
    try:
        stream = generate(done, 1, 2, 3, 4, 5)
        results = fanout(done, stream, 3, lambda value: value * 2)
        logger.info("Fanout started, waiting for values to be received...")
        for value in results:
            print(value)
    finally:
        done.set()


def fanout_with_sem_driver() -> None:
    """Double 100000 integers with slow work under a concurrency limit of 5."""

    def slow_double(value: int) -> int:
        time.sleep(2)
        return value * 2

    done = threading.Event()
    try:
        stream = generate(done, *range(100000))
        results = fanout_with_sem(done, stream, 100, 5, slow_double)
        logger.info("Fanout with semaphore started, waiting for values to be received...")
        for value in results:
            print(value)
        logger.info("Fanout with semaphore completed.")
    finally:
        done.set()