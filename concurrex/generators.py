"""Cancellable value streams."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _stream(done: threading.Event, values: Iterable[T]) -> Iterator[T]:
    for value in values:
        if done.is_set():
            return
        yield value


def generate(done: threading.Event, *args: T) -> Iterator[T]:
    """Yield each argument in order until ``done`` is set."""
    return _stream(done, args)


def generate_from_func(done: threading.Event, fn: Callable[[], Iterable[T]]) -> Iterator[T]:
    """Yield the values returned by ``fn`` until ``done`` is set.

    ``fn`` is called lazily, when the first value is requested.
    """

    def produce() -> Iterator[T]:
        yield from _stream(done, fn())

    return produce()


def simple_generator_driver() -> None:
    """Print the integers 1 to 5 from a generated stream."""
    done = threading.Event()
    try:
        for value in generate(done, 1, 2, 3, 4, 5):
            print(value)
    finally:
        done.set()


def simple_generator_from_func_driver() -> None:
    """Print letters produced by a slow function through a stream."""

    def slow_letters() -> list[str]:
        time.sleep(2)  # simulate some delay
        return ["a", "b", "c", "d", "e"]

    done = threading.Event()
    try:
        stream = generate_from_func(done, slow_letters)
        logger.info("Generator started, waiting for values to be received...")
        for value in stream:
            print(value)
    finally:
        done.set()