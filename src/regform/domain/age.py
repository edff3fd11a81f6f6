"""Whole-years age calculation for display and storage.

Unlike :func:`regform.domain.validation.validate_age`, which gates the
form, :func:`calculate_age` returns a number and reports problems with
plain messages.  The messages are part of the public contract and must
not change:

- ``"missing param p"``
- ``"missing birth field"``
- ``"birth must be a valid Date"``
- ``"invalid date"``
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime

from regform.domain.dates import (
    CalendarDateError,
    MalformedDateError,
    is_after,
    parse_birth,
    whole_years,
)

MIN_BIRTH_YEAR = 1970


class AgeError(ValueError):
    """Age calculation failure; ``str(exc)`` is the contract message."""


def _get_birth(p: object) -> object:
    if isinstance(p, Mapping):
        if "birth" not in p:
            raise AgeError("missing birth field")
        return p["birth"]
    if not hasattr(p, "birth"):
        raise AgeError("missing birth field")
    return p.birth  # type: ignore[attr-defined]


def calculate_age(p: object = None, current_date: datetime | date | None = None) -> int:
    """Return the age in whole years of the subject *p*.

    Args:
        p: A mapping with a ``birth`` key or an object with a ``birth``
            attribute (e.g. :class:`~regform.domain.record.PersonRecord`).
            ``birth`` is a ``date``, ``datetime``, or ISO date string.
        current_date: Reference date; defaults to the local wall clock.

    Raises:
        AgeError: If the subject or its birth date is missing or invalid,
            the birth year is before 1970, the birth date is after
            *current_date*, or the date does not exist on the calendar.
    """
    if p is None or (not p and not isinstance(p, Mapping)):
        raise AgeError("missing param p")

    raw_birth = _get_birth(p)
    try:
        birth = parse_birth(raw_birth)
    except MalformedDateError:
        raise AgeError("birth must be a valid Date") from None
    except CalendarDateError:
        raise AgeError("invalid date") from None

    reference = current_date if current_date is not None else datetime.now()

    if birth.year < MIN_BIRTH_YEAR:
        raise AgeError("invalid date")
    if is_after(birth, reference):
        raise AgeError("invalid date")

    return whole_years(birth, reference)
