"""Tests for the field validators."""

from datetime import date, datetime, timedelta

import pytest

from regform.domain.types import FieldName, ValidationErrorKind
from regform.domain.validation import (
    FieldCheck,
    FieldRejected,
    ValidationError,
    check_field,
    validate_age,
    validate_email,
    validate_identity,
    validate_post_code,
    validate_town,
)

TODAY = date(2026, 10, 19)


def _kind(check: FieldCheck) -> ValidationErrorKind | None:
    return check.error.kind if check.error else None


class TestFieldCheck:
    def test_accept(self) -> None:
        check = FieldCheck.accept()
        assert check.valid is True
        assert check.error is None
        check.raise_for_error()  # no-op

    def test_reject_carries_kind_and_message(self) -> None:
        check = FieldCheck.reject(ValidationErrorKind.INVALID_EMAIL, "Invalid email format")
        assert check.valid is False
        assert check.error == ValidationError(
            kind=ValidationErrorKind.INVALID_EMAIL, message="Invalid email format"
        )

    def test_raise_for_error(self) -> None:
        check = validate_post_code("ABCDE")
        with pytest.raises(FieldRejected, match="Invalid post code") as exc_info:
            check.raise_for_error()
        assert exc_info.value.kind is ValidationErrorKind.INVALID_POST_CODE

    def test_error_is_frozen(self) -> None:
        error = ValidationError(kind=ValidationErrorKind.INVALID_TOWN, message="x")
        with pytest.raises(Exception):
            error.message = "y"  # type: ignore[misc]


class TestValidateAge:
    def test_future_date_is_invalid_date(self) -> None:
        check = validate_age(date(2030, 1, 1), now=TODAY)
        assert _kind(check) is ValidationErrorKind.INVALID_DATE
        assert check.error is not None
        assert check.error.message == "Birth date cannot be in the future"

    def test_exactly_eighteen_is_accepted(self) -> None:
        assert validate_age(date(2008, 10, 19), now=TODAY).valid

    def test_one_day_short_of_eighteen(self) -> None:
        check = validate_age(date(2008, 10, 20), now=TODAY)
        assert _kind(check) is ValidationErrorKind.INVALID_AGE
        assert check.error is not None
        assert check.error.message == "Must be at least 18 years old"

    def test_adult_accepted(self) -> None:
        assert validate_age(date(1999, 3, 1), now=TODAY).valid

    def test_leap_year_birthday_before_anniversary(self) -> None:
        check = validate_age(date(2008, 2, 29), now=date(2026, 2, 28))
        assert _kind(check) is ValidationErrorKind.INVALID_AGE

    def test_leap_year_birthday_reached_on_first_of_march(self) -> None:
        assert validate_age(date(2008, 2, 29), now=date(2026, 3, 1)).valid

    def test_accepts_iso_string(self) -> None:
        assert validate_age("1995-05-15", now=TODAY).valid

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-date",
            "15/05/1995",
            "",
            " 1995-05-15",
            "1995-05-15\n",
            "2001-02-30",
            "2001-13-01",
            123,
            None,
            {},
        ],
    )
    def test_unparsable_is_invalid_date(self, value: object) -> None:
        check = validate_age(value, now=TODAY)
        assert _kind(check) is ValidationErrorKind.INVALID_DATE
        assert check.error is not None
        assert check.error.message == "Birth date is invalid"

    def test_datetime_later_same_day_is_future(self) -> None:
        now = datetime(2026, 10, 19, 12, 0)
        check = validate_age(now + timedelta(minutes=1), now=now)
        assert _kind(check) is ValidationErrorKind.INVALID_DATE

    def test_default_now_is_wall_clock(self) -> None:
        assert validate_age(date(1990, 1, 1)).valid
        future = datetime.now() + timedelta(days=2)
        assert _kind(validate_age(future)) is ValidationErrorKind.INVALID_DATE

    def test_custom_minimum_age(self) -> None:
        check = validate_age(date(2006, 1, 1), now=TODAY, minimum_age=21)
        assert check.error is not None
        assert check.error.message == "Must be at least 21 years old"


class TestValidatePostCode:
    def test_valid(self) -> None:
        assert validate_post_code("75001").valid
        assert validate_post_code("37000").valid

    @pytest.mark.parametrize(
        "value", ["3700", "ABCDE", "3700A", "750011", " 75001", "75001\n", "٧٥٠٠١", 75001, None]
    )
    def test_invalid(self, value: object) -> None:
        check = validate_post_code(value)
        assert _kind(check) is ValidationErrorKind.INVALID_POST_CODE
        assert check.error is not None
        assert check.error.message == "Invalid post code"


class TestValidateIdentity:
    @pytest.mark.parametrize("name", ["Jean-Michel", "loïse", "François", "Øyvind", "ÉLODIE"])
    def test_valid(self, name: str) -> None:
        assert validate_identity(name).valid

    @pytest.mark.parametrize("name", ["Jean123", "loï/se", "<script>alert(1)</script>"])
    def test_invalid(self, name: str) -> None:
        assert _kind(validate_identity(name)) is ValidationErrorKind.INVALID_IDENTITY

    def test_non_string(self) -> None:
        check = validate_identity(42)
        assert check.error is not None
        assert check.error.message == "Invalid name"

    @pytest.mark.parametrize("name", ["<script>alert(1)</script>", "<b", "Jean<img src=x"])
    def test_markup_reports_xss_first(self, name: str) -> None:
        check = validate_identity(name)
        assert check.error is not None
        assert check.error.message == "XSS detected"

    @pytest.mark.parametrize("name", ["Jean123", "a>b", "", "Jean Michel", "Jean\n"])
    def test_invalid_characters(self, name: str) -> None:
        check = validate_identity(name)
        assert check.error is not None
        assert check.error.message == "Invalid characters in name"


class TestValidateEmail:
    @pytest.mark.parametrize(
        "email", ["test@gmail.com", "first.last-x_y@sub.domain.fr", "a1@b2.io"]
    )
    def test_valid(self, email: str) -> None:
        assert validate_email(email).valid

    @pytest.mark.parametrize(
        "email",
        [
            "test@",
            "@example.com",
            "test.com",
            "//test@gmail.com",
            "test@example.c",
            "test@example.c0m",
            "te st@example.com",
            "test@gmail.com\n",
            None,
        ],
    )
    def test_invalid(self, email: object) -> None:
        check = validate_email(email)
        assert _kind(check) is ValidationErrorKind.INVALID_EMAIL
        assert check.error is not None
        assert check.error.message == "Invalid email format"


class TestValidateTown:
    @pytest.mark.parametrize("town", ["Paris", "Saint-Étienne", "Mont de Marsan", "Lyon"])
    def test_valid(self, town: str) -> None:
        assert validate_town(town).valid

    @pytest.mark.parametrize("town", ["Paris123", "Paris@", "<script>", "", None])
    def test_invalid(self, town: object) -> None:
        check = validate_town(town)
        assert _kind(check) is ValidationErrorKind.INVALID_TOWN
        assert check.error is not None
        assert check.error.message == "Invalid town name"


class TestCheckField:
    @pytest.mark.parametrize(
        "field,value,kind",
        [
            (FieldName.LASTNAME, "Jean1", ValidationErrorKind.INVALID_IDENTITY),
            (FieldName.FIRSTNAME, "<i>", ValidationErrorKind.INVALID_IDENTITY),
            (FieldName.EMAIL, "nope", ValidationErrorKind.INVALID_EMAIL),
            (FieldName.BIRTH, "2020-01-01", ValidationErrorKind.INVALID_AGE),
            (FieldName.POST_CODE, "750", ValidationErrorKind.INVALID_POST_CODE),
            (FieldName.TOWN, "Paris1", ValidationErrorKind.INVALID_TOWN),
        ],
    )
    def test_dispatches_to_field_validator(
        self, field: FieldName, value: str, kind: ValidationErrorKind
    ) -> None:
        assert _kind(check_field(field, value, now=TODAY)) is kind

    def test_repeated_calls_agree(self) -> None:
        """Validators are pure: the same input always gets the same outcome."""
        outcomes = {check_field(FieldName.EMAIL, "test@gmail.com").valid for _ in range(5)}
        assert outcomes == {True}
        rejections = {_kind(validate_identity("Jean123")) for _ in range(5)}
        assert rejections == {ValidationErrorKind.INVALID_IDENTITY}
