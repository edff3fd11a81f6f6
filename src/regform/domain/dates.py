"""Birth-date coercion and calendar arithmetic shared by the age rules.

Birth dates arrive as ``date``/``datetime`` objects or as ISO
``YYYY-MM-DD`` strings typed into the form.  Strings are never rolled
over: ``1991-02-30`` is rejected, not read as 2 March.
"""

from __future__ import annotations

import re
from datetime import date, datetime

ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class MalformedDateError(ValueError):
    """The value is not a date object and not an ISO-shaped date string."""


class CalendarDateError(ValueError):
    """The value is ISO-shaped but names a day that does not exist."""


def parse_birth(value: object) -> date:
    """Coerce *value* to a ``date`` (or ``datetime``) without rolling over.

    Raises:
        MalformedDateError: For non-date objects and malformed strings.
        CalendarDateError: For strings like ``2001-02-30`` or ``2001-13-01``.
    """
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        msg = f"Not a date: {value!r}"
        raise MalformedDateError(msg)
    if not ISO_DATE_PATTERN.fullmatch(value):
        msg = f"Not an ISO date: {value!r}"
        raise MalformedDateError(msg)
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise CalendarDateError(str(exc)) from exc


def as_date(value: date) -> date:
    """Drop the time component of a ``datetime``; pass plain dates through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def is_after(moment: date, reference: date) -> bool:
    """Whether *moment* lies strictly after *reference*.

    Two datetimes with the same tz-awareness compare to the microsecond.
    Every other pairing compares calendar days.
    """
    if (
        isinstance(moment, datetime)
        and isinstance(reference, datetime)
        and (moment.tzinfo is None) == (reference.tzinfo is None)
    ):
        return moment > reference
    return as_date(moment) > as_date(reference)


def whole_years(birth: date, reference: date) -> int:
    """Completed years between *birth* and *reference*.

    The anniversary day itself counts as reached.  A 29 February birthday
    is reached on 1 March in non-leap years.
    """
    years = reference.year - birth.year
    if (reference.month, reference.day) < (birth.month, birth.day):
        years -= 1
    return years
