"""Port interfaces (Protocols).

Services depend only on these; concrete timers live beside them.
"""

from .scheduler import AsyncioScheduler, HostScheduler, Scheduler, TimerScheduler, default_scheduler

__all__ = [
    "AsyncioScheduler",
    "HostScheduler",
    "Scheduler",
    "TimerScheduler",
    "default_scheduler",
]
