"""FieldService — single-field checks and age calculation as ServiceResults."""

from __future__ import annotations

from datetime import date, datetime

from regform.domain.age import AgeError, calculate_age
from regform.domain.types import parse_field_name
from regform.domain.validation import MINIMUM_AGE, check_field
from regform.services._helpers import local_now
from regform.services.result import ServiceResult
from regform.services.telemetry import traced


class FieldService:
    """Stateless adapter from domain rules to the service contract."""

    def __init__(self, *, minimum_age: int = MINIMUM_AGE) -> None:
        self._minimum_age = minimum_age

    @traced
    def validate(
        self,
        name: str,
        value: str,
        *,
        now: datetime | date | None = None,
    ) -> ServiceResult:
        """Run the validator for field *name* against *value*."""
        op = "validate"
        try:
            field_name = parse_field_name(name)
        except ValueError as exc:
            return ServiceResult.failure(op, "UNKNOWN_FIELD", str(exc))

        check = check_field(
            field_name,
            value,
            now=now if now is not None else local_now(),
            minimum_age=self._minimum_age,
        )
        if check.error is not None:
            return ServiceResult.failure(
                op,
                str(check.error.kind),
                check.error.message,
                detail={"field": field_name.value, "value": value},
            )
        return ServiceResult(ok=True, op=op, data={"field": field_name.value, "value": value})

    @traced
    def age(self, birth: str, *, on: datetime | date | None = None) -> ServiceResult:
        """Compute the whole-years age for *birth* as of *on* (default: now)."""
        op = "age"
        try:
            years = calculate_age({"birth": birth}, on)
        except AgeError as exc:
            return ServiceResult.failure(op, "AGE_ERROR", str(exc), detail={"birth": birth})
        data: dict[str, object] = {"birth": birth, "age": years}
        if on is not None:
            data["on"] = on.isoformat()
        return ServiceResult(ok=True, op=op, data=data)
