"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import date, datetime


def local_now() -> datetime:
    """Current local wall-clock time (naive), the default reference time."""
    return datetime.now()


def parse_reference(value: str | None) -> datetime | date | None:
    """Parse an optional ``YYYY-MM-DD`` (or full ISO datetime) reference date.

    Raises:
        ValueError: If *value* is not ISO formatted.
    """
    if value is None:
        return None
    if "T" in value:
        return datetime.fromisoformat(value)
    return date.fromisoformat(value)
