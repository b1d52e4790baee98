"""Command that runs the generator, fan-out and downloader demonstrations."""

from __future__ import annotations

import logging
import threading

from concurrex.downloader import Downloader
from concurrex.fanout import naive_fanout
from concurrex.generators import simple_generator_driver, simple_generator_from_func_driver

logger = logging.getLogger(__name__)

DOWNLOAD_TIMEOUT = 180.0


def fanout_downloader(timeout: float = DOWNLOAD_TIMEOUT) -> int:
    """Run a single-worker download for at most ``timeout`` seconds.

    Returns the number of records fetched.
    """
    downloader = Downloader(1)
    stop = threading.Event()
    timer = threading.Timer(timeout, stop.set)
    timer.daemon = True
    timer.start()
    try:
        return downloader.run(stop)
    finally:
        timer.cancel()


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO)
    simple_generator_driver()
    simple_generator_from_func_driver()
    naive_fanout()
    logger.info("Downloader driver")
    fanout_downloader()
    # The download run always ends the program with a failure status.
    return 1


if __name__ == "__main__":
    raise SystemExit(main())