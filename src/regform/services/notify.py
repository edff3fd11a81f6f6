"""Transient user notifications (pending / success indications).

The form controller only needs two calls: open a pending notification
and later replace it with its outcome.  Implementations decide where the
text goes; the default one logs through structlog.
"""

from __future__ import annotations

import itertools
from enum import StrEnum
from typing import Protocol

import structlog


class NotificationKind(StrEnum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class Notifier(Protocol):
    """Where the form sends its transient notifications."""

    def loading(self, message: str) -> str:
        """Show a pending notification and return a handle for :meth:`update`."""
        ...

    def update(self, handle: str, message: str, *, kind: NotificationKind) -> None:
        """Replace the notification behind *handle* with its outcome."""
        ...


class LogNotifier:
    """Notifier that records notifications and logs them via structlog."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._log = structlog.get_logger("regform.notify")
        # Open (loading) notifications only; an outcome closes the handle.
        self.current: dict[str, tuple[NotificationKind, str]] = {}

    def loading(self, message: str) -> str:
        handle = f"toast-{next(self._ids)}"
        self.current[handle] = (NotificationKind.LOADING, message)
        self._log.info("notification", handle=handle, kind="loading", message=message)
        return handle

    def update(self, handle: str, message: str, *, kind: NotificationKind) -> None:
        if kind is NotificationKind.LOADING:
            self.current[handle] = (kind, message)
        else:
            self.current.pop(handle, None)
        self._log.info("notification", handle=handle, kind=str(kind), message=message)
