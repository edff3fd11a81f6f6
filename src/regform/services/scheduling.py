"""Deferred callbacks for the submit completion step."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Protocol


class Scheduler(Protocol):
    """Runs *callback* once, roughly *delay* seconds from now."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> None: ...


class TimerScheduler:
    """Scheduler backed by daemon :class:`threading.Timer` threads.

    Fire-and-forget; :meth:`wait` lets a short-lived process (the CLI)
    block until every scheduled callback has run.
    """

    def __init__(self) -> None:
        self._timers: list[threading.Timer] = []
        self._lock = threading.Lock()

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        with self._lock:
            self._timers = [t for t in self._timers if t.is_alive()]
            self._timers.append(timer)
        timer.start()

    def wait(self, timeout: float | None = None) -> None:
        with self._lock:
            timers = list(self._timers)
        for timer in timers:
            timer.join(timeout)
        with self._lock:
            self._timers = [t for t in self._timers if t.is_alive()]
