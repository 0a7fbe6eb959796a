"""Port: deferred callback scheduling ("call this after N milliseconds")."""

from __future__ import annotations

import asyncio
import threading
import time
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class Scheduler(Protocol):
    """Run ``callback`` once, ``delay_ms`` milliseconds from now."""

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None: ...


# ---------------------------------------------------------------------------
# Default implementations (pure stdlib)
# ---------------------------------------------------------------------------


class AsyncioScheduler:
    """Schedules on an asyncio event loop (the running loop unless one is given)."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        loop = self._loop or asyncio.get_running_loop()
        loop.call_later(delay_ms / 1000.0, callback)


class TimerScheduler:
    """Schedules each callback on its own daemon ``threading.Timer``.

    Callbacks run on the timer threads, not the caller's. Daemon timers still
    pending at interpreter exit are dropped; call ``join`` to wait for them.
    """

    def __init__(self) -> None:
        self._timers: list[threading.Timer] = []
        self._lock = threading.Lock()

    
    def pending(self) -> int:
        with self._lock:
            return sum(1 for timer in self._timers if timer.is_alive())

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        timer = threading.Timer(delay_ms / 1000.0, callback)
        timer.daemon = True
        with self._lock:
            self._timers = [t for t in self._timers if t.is_alive()]
            self._timers.append(timer)
        timer.start()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for every scheduled timer to finish. Returns False on timeout."""
        with self._lock:
            timers = list(self._timers)
        deadline = None if timeout is None else time.monotonic() + timeout
        for timer in timers:
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            timer.join(remaining)
            if timer.is_alive():
                return False
        return True


class HostScheduler:
    """Uses the running event loop when called from one, timer threads otherwise.

    Outside an event loop, deliveries run on daemon timer threads (see
    ``TimerScheduler``); ``join`` waits for those.
    """

    def __init__(self) -> None:
        self._timers = TimerScheduler()

    def join(self, timeout: float | None = None) -> bool:
        return self._timers.join(timeout)

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._timers.call_later(delay_ms, callback)
            return
        loop.call_later(delay_ms / 1000.0, callback)


def default_scheduler() -> Scheduler:
    return HostScheduler()
