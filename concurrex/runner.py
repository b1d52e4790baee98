"""Bookkeeping for a runner that tracks active users."""

from __future__ import annotations

import threading

_SLOTS = 100


class Runner:
    """Holds a slot semaphore, the set of active users and a concurrency limit."""

    def __init__(self, concurrency_limit: int) -> None:
        self.concurrency_limit = concurrency_limit
        self.slots = threading.BoundedSemaphore(_SLOTS)
        self.users: set[str] = set()

    def add_user(self, user: str) -> None:
        """Mark ``user`` as active."""
        self.users.add(user)