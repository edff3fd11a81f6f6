"""The return type of every service call.

Services never raise for expected failures (invalid form, unknown field,
missing record).  They return ``ServiceResult(ok=False)`` with a
``ServiceError`` whose ``code`` is stable enough for scripts to match on,
and the CLI turns that into stderr output and exit status 1.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Failure payload: a machine code, a message for humans, and context."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of a service call.

    Attributes:
        ok: False when ``error`` is set.
        op: Operation name, used to pick a renderer (``"submit"``, ``"show"``).
        data: Payload of a successful call.
        warnings: Problems that did not stop the call.
        error: Set on failure.
        meta: Telemetry and other extras, present under ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
