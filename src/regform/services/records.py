"""RecordService — read back the last submitted registration record."""

from __future__ import annotations

import json

from pydantic import ValidationError

from regform.domain.age import AgeError, calculate_age
from regform.domain.record import PersonRecord
from regform.infrastructure.storage import LocalStore, StorageError
from regform.services.form import STORAGE_KEY
from regform.services.result import ServiceResult
from regform.services.telemetry import traced


class RecordService:
    def __init__(self, store: LocalStore, *, storage_key: str = STORAGE_KEY) -> None:
        self._store = store
        self._storage_key = storage_key

    @traced
    def last_submitted(self) -> ServiceResult:
        """Return the stored record verbatim, plus its derived age when computable."""
        op = "show"
        try:
            raw = self._store.get_item(self._storage_key)
        except StorageError as exc:
            return ServiceResult.failure(op, "CORRUPT_RECORD", str(exc))
        if raw is None:
            return ServiceResult.failure(
                op, "NOT_FOUND", f"No record stored under {self._storage_key!r}"
            )

        try:
            record = PersonRecord.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as exc:
            return ServiceResult.failure(
                op, "CORRUPT_RECORD", f"Stored record is not a registration record: {exc}"
            )

        warnings: list[str] = []
        data: dict[str, object] = {"key": self._storage_key, "record": record.to_storage()}
        try:
            data["age"] = calculate_age(record)
        except AgeError as exc:
            warnings.append(f"Age unavailable: {exc}")
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
