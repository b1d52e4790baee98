"""Thread-based concurrency patterns: streams, fan-out pools, rate limiting, a downloader and more."""

__version__ = "0.1.0"