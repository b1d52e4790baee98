"""Concurrent photo-metadata downloader built on a worker pool."""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

import requests

logger = logging.getLogger(__name__)

TOTAL_IMAGES = 5000
PHOTO_URL = "https://jsonplaceholder.typicode.com/photos/{}"

_END = object()


class _StatusError(RuntimeError):
    """Raised for a response whose status code is not 200."""


def _lookup(data: dict[str, Any], key: str) -> Any:
    if key in data:
        return data[key]
    lowered = key.lower()
    for name, value in data.items():
        if isinstance(name, str) and name.lower() == lowered:
            return value
    return None


@dataclass(frozen=True)
class APIResult:
    """One photo record as served by the photos endpoint."""

    album_id: int = 0
    id: int = 0
    title: str = ""
    url: str = ""
    thumbnail_url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "APIResult":
        """Build a record from decoded JSON; missing keys keep their defaults."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"cannot decode {type(data).__name__} into a photo record")
        fields = {
            "album_id": ("albumId", int),
            "id": ("id", int),
            "title": ("title", str),
            "url": ("url", str),
            "thumbnail_url": ("thumbnailUrl", str),
        }
        values: dict[str, Any] = {}
        for attr, (key, kind) in fields.items():
            value = _lookup(data, key)
            if value is None:
                continue
            if not isinstance(value, kind) or isinstance(value, bool):
                raise ValueError(f"field {key!r} must be {kind.__name__}, got {value!r}")
            values[attr] = value
        return cls(**values)


@dataclass
class Result:
    """The outcome of one fetch: a record or the error that stopped it."""

    api_result: APIResult = field(default_factory=APIResult)
    error: Exception | None = None


class Downloader:
    """Fetch photo records with a fixed pool of workers guarded by a semaphore."""

    total_images: int = TOTAL_IMAGES
    log_path: str = "logs.txt"
    stats_interval: float = 1.0

    def __init__(self, concurrency_limit: int) -> None:
        if concurrency_limit < 1:
            raise ValueError("concurrency_limit must be at least 1")
        self.concurrency_limit = concurrency_limit
        self._sem = threading.Semaphore(concurrency_limit)
        self.downloaded = 0

    def generate_image_urls(self, stop: threading.Event, total: int) -> Iterator[str]:
        """Yield the URLs of photos 1 to ``total`` until ``stop`` is set."""
        for number in range(1, total + 1):
            if stop.is_set():
                return
            yield PHOTO_URL.format(number)

    def fetch(self, url: str) -> Result:
        """Fetch and decode one photo record."""
        logger.info("Fetching url %s", url)
        try:
            response = requests.get(url)
        except requests.RequestException as exc:
            logger.error("error in doing request %s", exc)
            return Result(error=exc)

        logger.info("Received status %d", response.status_code)
        if response.status_code != 200:
            error = _StatusError(f"status Code : {response.status_code}")
            logger.error("%s", error)
            return Result(error=error)
        try:
            return Result(api_result=APIResult.from_dict(response.json()))
        except (ValueError, TypeError) as exc:
            logger.error("error in reading result %s", exc)
            return Result(error=exc)

    def _write_stats(self, handle, stop: threading.Event, finished: threading.Event) -> None:
        while not finished.wait(self.stats_interval) and not stop.is_set():
            try:
                handle.write(
                    f"Number of goroutines: {threading.active_count()} "
                    f"Downloaded Count: {self.downloaded} \n"
                )
                handle.flush()
            except OSError as exc:
                logger.error("error in writing to file %s", exc)

    def run(self, stop: threading.Event) -> int:
        """Download every photo record until done or ``stop`` is set.

        Returns the number of records fetched successfully.
        """
        if stop.is_set():
            return self.downloaded

        urls = self.generate_image_urls(stop, self.total_images)
        url_lock = threading.Lock()
        results: queue.Queue = queue.Queue()

        def next_url() -> str | None:
            with url_lock:
                return next(urls, None)

        def worker(worker_id: int) -> None:
            logger.info("Worker %d reporting", worker_id)
            while not stop.is_set():
                url = next_url()
                if url is None:
                    return
                with self._sem:
                    logger.info("Worker %d working", worker_id)
                    results.put(self.fetch(url))
                logger.info("Worker %d released", worker_id)

        with open(self.log_path, "a", encoding="utf-8") as handle:
            workers = [
                threading.Thread(target=worker, args=(i,), daemon=True)
                for i in range(self.concurrency_limit)
            ]
            for thread in workers:
                thread.start()

            def close_when_finished() -> None:
                for thread in workers:
                    thread.join()
                results.put(_END)

            threading.Thread(target=close_when_finished, daemon=True).start()

            finished = threading.Event()
            stats = threading.Thread(
                target=self._write_stats, args=(handle, stop, finished), daemon=True
            )
            stats.start()

            try:
                while (result := results.get()) is not _END:
                    if result.error is not None:
                        logger.error("error in getting result %s", result.error)
                        continue
                    logger.info("Received result is %s", result.api_result.thumbnail_url)
                    self.downloaded += 1
            finally:
                finished.set()
                stats.join()

        logger.critical("Total images downloaded: %d", self.downloaded)
        return self.downloaded