"""PersonRecord — the flat six-field registration record.

All fields are strings exactly as typed.  Validation never rewrites
them; the stored JSON is the user's input verbatim.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from regform.domain.types import FIELD_ORDER, FieldName


class PersonRecord(BaseModel):
    """Registration record in external (JSON) representation."""

    model_config = {"frozen": True, "populate_by_name": True}

    lastname: str = ""
    firstname: str = ""
    email: str = ""
    birth: str = ""
    post_code: str = Field(default="", alias="postCode")
    town: str = ""

    @classmethod
    def empty(cls) -> PersonRecord:
        return cls()

    @classmethod
    def from_values(cls, values: Mapping[str, str]) -> PersonRecord:
        """Build a record from a field-name → value mapping (external names)."""
        return cls.model_validate({str(k): v for k, v in values.items()})

    def get(self, field: FieldName) -> str:
        if field is FieldName.POST_CODE:
            return self.post_code
        return str(getattr(self, field.value))

    def to_storage(self) -> dict[str, Any]:
        """Return the record keyed by external field names, in form order."""
        return {field.value: self.get(field) for field in FIELD_ORDER}

    def blank_fields(self) -> list[FieldName]:
        """Fields that are empty after trimming whitespace."""
        return [field for field in FIELD_ORDER if not self.get(field).strip()]
