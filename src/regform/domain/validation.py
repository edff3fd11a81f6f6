"""Field validators for the registration record.

Every validator is pure: same input, same outcome.  Rejection is a
value, not an exception: each validator returns a :class:`FieldCheck`
whose ``error`` carries a ``{kind, message}`` pair.  Callers that prefer
the failure channel can call :meth:`FieldCheck.raise_for_error`.

The only date-sensitive rule (:func:`validate_age`) takes its reference
time as a parameter; the wall clock is read only when none is given.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime

from pydantic import BaseModel

from regform.domain.dates import is_after, parse_birth, whole_years
from regform.domain.types import FieldName, ValidationErrorKind

MINIMUM_AGE = 18

POST_CODE_PATTERN = re.compile(r"[0-9]{5}")
TAG_PATTERN = re.compile(r"<[^>]*")
NAME_PATTERN = re.compile(r"[A-Za-zÀ-ÖØ-öø-ÿ\-]+")
TOWN_PATTERN = re.compile(r"[A-Za-zÀ-ÖØ-öø-ÿ\s\-]+")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


class ValidationError(BaseModel):
    """Structured failure returned by a field validator."""

    model_config = {"frozen": True}

    kind: ValidationErrorKind
    message: str


class FieldRejected(Exception):  # noqa: N818
    """Raised by :meth:`FieldCheck.raise_for_error` for a rejected value."""

    def __init__(self, error: ValidationError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> ValidationErrorKind:
        return self.error.kind


@dataclass(frozen=True)
class FieldCheck:
    """Outcome of one validator call: accepted, or rejected with an error."""

    valid: bool
    error: ValidationError | None = None

    @classmethod
    def accept(cls) -> FieldCheck:
        return cls(valid=True)

    @classmethod
    def reject(cls, kind: ValidationErrorKind, message: str) -> FieldCheck:
        return cls(valid=False, error=ValidationError(kind=kind, message=message))

    def raise_for_error(self) -> None:
        """Raise :class:`FieldRejected` if this check is a rejection."""
        if self.error is not None:
            raise FieldRejected(self.error)


_ACCEPTED = FieldCheck.accept()


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


def validate_age(
    birth: object,
    *,
    now: datetime | date | None = None,
    minimum_age: int = MINIMUM_AGE,
) -> FieldCheck:
    """Check that *birth* is a real past date at least *minimum_age* years ago.

    Args:
        birth: A ``date``, ``datetime``, or ISO ``YYYY-MM-DD`` string.
        now: Reference time. Defaults to the local wall clock.
        minimum_age: Youngest accepted age in whole years.
    """
    try:
        birth_date = parse_birth(birth)
    except ValueError:
        return FieldCheck.reject(ValidationErrorKind.INVALID_DATE, "Birth date is invalid")

    reference = now if now is not None else datetime.now()
    if is_after(birth_date, reference):
        return FieldCheck.reject(
            ValidationErrorKind.INVALID_DATE, "Birth date cannot be in the future"
        )

    if whole_years(birth_date, reference) < minimum_age:
        return FieldCheck.reject(
            ValidationErrorKind.INVALID_AGE, f"Must be at least {minimum_age} years old"
        )
    return _ACCEPTED


def validate_post_code(pc: object) -> FieldCheck:
    """French post code: exactly five ASCII digits."""
    if not isinstance(pc, str) or not POST_CODE_PATTERN.fullmatch(pc):
        return FieldCheck.reject(ValidationErrorKind.INVALID_POST_CODE, "Invalid post code")
    return _ACCEPTED


def validate_identity(name: object) -> FieldCheck:
    """First or last name: Latin letters, accents and hyphens, no markup.

    The markup check runs first, so ``"<b>"`` reports XSS rather than
    invalid characters.  Spaces are not accepted.
    """
    if not isinstance(name, str):
        return FieldCheck.reject(ValidationErrorKind.INVALID_IDENTITY, "Invalid name")
    if TAG_PATTERN.search(name):
        return FieldCheck.reject(ValidationErrorKind.INVALID_IDENTITY, "XSS detected")
    if not NAME_PATTERN.fullmatch(name):
        return FieldCheck.reject(
            ValidationErrorKind.INVALID_IDENTITY, "Invalid characters in name"
        )
    return _ACCEPTED


def validate_email(email: object) -> FieldCheck:
    """``local@domain.tld`` with a letters-only TLD of two or more characters."""
    if not isinstance(email, str) or not EMAIL_PATTERN.fullmatch(email):
        return FieldCheck.reject(ValidationErrorKind.INVALID_EMAIL, "Invalid email format")
    return _ACCEPTED


def validate_town(town: object) -> FieldCheck:
    """Town name: like a person's name, with whitespace allowed."""
    if not isinstance(town, str) or not TOWN_PATTERN.fullmatch(town):
        return FieldCheck.reject(ValidationErrorKind.INVALID_TOWN, "Invalid town name")
    return _ACCEPTED


# ---------------------------------------------------------------------------
# Field dispatch
# ---------------------------------------------------------------------------

_TEXT_VALIDATORS: dict[FieldName, Callable[[object], FieldCheck]] = {
    FieldName.LASTNAME: validate_identity,
    FieldName.FIRSTNAME: validate_identity,
    FieldName.EMAIL: validate_email,
    FieldName.POST_CODE: validate_post_code,
    FieldName.TOWN: validate_town,
}


def check_field(
    field: FieldName,
    value: object,
    *,
    now: datetime | date | None = None,
    minimum_age: int = MINIMUM_AGE,
) -> FieldCheck:
    """Run the validator that owns *field* against *value*."""
    if field is FieldName.BIRTH:
        return validate_age(value, now=now, minimum_age=minimum_age)
    return _TEXT_VALIDATORS[field](value)
