"""Shared pytest fixtures and test helpers for regform tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from regform.infrastructure.storage import LocalStore
from regform.services.form import RegistrationForm
from regform.services.notify import NotificationKind

# Fixed reference time for every date-sensitive test.
NOW = datetime(2026, 10, 19, 12, 0, 0)

VALID_VALUES: dict[str, str] = {
    "lastname": "Jean",
    "firstname": "Pierre",
    "email": "test@example.com",
    "birth": "1995-05-15",
    "postCode": "75001",
    "town": "Paris",
}


class ManualScheduler:
    """Scheduler that holds callbacks until the test runs them."""

    def __init__(self) -> None:
        self.pending: list[tuple[float, Callable[[], None]]] = []

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        self.pending.append((delay, callback))

    def run_pending(self) -> None:
        while self.pending:
            _, callback = self.pending.pop(0)
            callback()


class RecordingNotifier:
    """Notifier that keeps every notification as ``(kind, message)``."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def loading(self, message: str) -> str:
        self.events.append(("loading", message))
        return f"n{len(self.events)}"

    def update(self, handle: str, message: str, *, kind: NotificationKind) -> None:
        self.events.append((str(kind), message))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store(tmp_path: Path) -> LocalStore:
    return LocalStore(tmp_path / "storage.json")


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def form(
    store: LocalStore, scheduler: ManualScheduler, notifier: RecordingNotifier
) -> RegistrationForm:
    """Form controller with a fixed clock, manual scheduler and recording notifier."""
    return RegistrationForm(store, notifier=notifier, scheduler=scheduler, clock=lambda: NOW)


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from a temp directory with no config or env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.  The store lands in ``tmp_path / ".regform"``.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("REGFORM_CONFIG", raising=False)
    monkeypatch.setenv("REGFORM_FORM__SUBMIT_DELAY", "0.01")
