"""Field names, failure kinds, and per-field states.

Field order matches the registration form; the persisted JSON record
keeps the same order.
"""

from __future__ import annotations

from enum import StrEnum


class FieldName(StrEnum):
    """The six required fields of a registration record."""

    LASTNAME = "lastname"
    FIRSTNAME = "firstname"
    EMAIL = "email"
    BIRTH = "birth"
    POST_CODE = "postCode"
    TOWN = "town"


class ValidationErrorKind(StrEnum):
    """Discriminator carried by every field validation failure."""

    INVALID_DATE = "INVALID_DATE"
    INVALID_AGE = "INVALID_AGE"
    INVALID_POST_CODE = "INVALID_POST_CODE"
    INVALID_IDENTITY = "INVALID_IDENTITY"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_TOWN = "INVALID_TOWN"


class FieldState(StrEnum):
    """Display state of a single form field."""

    EMPTY = "empty"
    INVALID = "invalid"
    VALID = "valid"


FIELD_ORDER: tuple[FieldName, ...] = tuple(FieldName)


def parse_field_name(name: str) -> FieldName:
    """Resolve *name* to a :class:`FieldName`.

    Accepts the external spelling (``postCode``) as well as the snake-case
    attribute spelling (``post_code``).

    Raises:
        ValueError: If *name* is not one of the six form fields.
    """
    if name == "post_code":
        return FieldName.POST_CODE
    try:
        return FieldName(name)
    except ValueError:
        msg = f"Unknown field: {name!r}"
        raise ValueError(msg) from None
