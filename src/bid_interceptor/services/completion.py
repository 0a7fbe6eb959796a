"""Countdown latch used to fan in independently scheduled deliveries."""

from __future__ import annotations

import threading
from typing import Callable


class CompletionLatch:
    """Call ``callback`` exactly once, after ``count`` calls to ``count_down``.

    Signals beyond ``count`` are ignored. Safe to signal from timer threads.
    """

    def __init__(self, count: int, callback: Callable[[], None]) -> None:
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        self._remaining = count
        self._callback = callback
        self._lock = threading.Lock()

    @property
    def remaining(self) -> int:
        return self._remaining

    def count_down(self) -> None:
        with self._lock:
            if self._remaining == 0:
                return
            self._remaining -= 1
            fire = self._remaining == 0
        if fire:
            self._callback()
