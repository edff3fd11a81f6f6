"""RegistrationForm — field state, whole-form validation, and submission.

Every change re-validates the whole form, not just the touched field.
Submission is gated on the derived ``is_valid`` flag and on the
``submitting`` state, so a second submit while the first is still
completing is refused.

Pipeline for submit: VALIDATE → PERSIST → NOTIFY → (delay) → RESET
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from functools import partial

from regform.domain.record import PersonRecord
from regform.domain.types import FIELD_ORDER, FieldName, FieldState, parse_field_name
from regform.domain.validation import MINIMUM_AGE, check_field
from regform.infrastructure.storage import LocalStore, StorageError
from regform.services._helpers import local_now
from regform.services.notify import LogNotifier, NotificationKind, Notifier
from regform.services.result import ServiceResult
from regform.services.scheduling import Scheduler, TimerScheduler
from regform.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

STORAGE_KEY = "user"
DEFAULT_SUBMIT_DELAY = 0.3

REQUIRED_MESSAGE = "This field is required"
BIRTH_REQUIRED_MESSAGE = "Birth is required"
SUBMITTING_MESSAGE = "Submitting form..."
SUCCESS_MESSAGE = "Form successfully submitted!"


@dataclass(frozen=True)
class FormValidation:
    """Result of one whole-form validation pass."""

    errors: dict[FieldName, str] = field(default_factory=dict)
    all_filled: bool = False
    no_errors: bool = False

    @property
    def submittable(self) -> bool:
        return self.all_filled and self.no_errors


def _is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


class RegistrationForm:
    """Controller for the six-field registration form.

    Args:
        store: Persistent key-value store receiving the submitted record.
        notifier: Receives the pending and success notifications.
        scheduler: Runs the delayed submit completion.
        submit_delay: Seconds between persisting and resetting the form.
        minimum_age: Youngest accepted age for the birth field.
        storage_key: Key the submitted record is stored under.
        clock: Reference-time source for the birth field.
    """

    def __init__(
        self,
        store: LocalStore,
        *,
        notifier: Notifier | None = None,
        scheduler: Scheduler | None = None,
        submit_delay: float = DEFAULT_SUBMIT_DELAY,
        minimum_age: int = MINIMUM_AGE,
        storage_key: str = STORAGE_KEY,
        clock: Callable[[], datetime | date] = local_now,
    ) -> None:
        self._store = store
        self._notifier = notifier if notifier is not None else LogNotifier()
        self._scheduler = scheduler if scheduler is not None else TimerScheduler()
        self._submit_delay = submit_delay
        self._minimum_age = minimum_age
        self._storage_key = storage_key
        self._clock = clock
        self._lock = threading.RLock()

        self._values: dict[FieldName, str] = dict.fromkeys(FIELD_ORDER, "")
        self._errors: dict[FieldName, str] = {}
        self._is_valid = False
        self._submitting = False
        self.validate_form()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def values(self) -> dict[str, str]:
        """Current field values keyed by external field name."""
        with self._lock:
            return {f.value: v for f, v in self._values.items()}

    @property
    def errors(self) -> dict[str, str]:
        """Inline error message per field; valid fields are absent."""
        with self._lock:
            return {f.value: msg for f, msg in self._errors.items()}

    @property
    def is_valid(self) -> bool:
        return self._is_valid

    @property
    def submitting(self) -> bool:
        return self._submitting

    @property
    def can_submit(self) -> bool:
        """Whether the submit action is enabled."""
        with self._lock:
            return self._is_valid and not self._submitting

    def record(self) -> PersonRecord:
        with self._lock:
            return PersonRecord.from_values(self.values)

    def field_state(self, name: str) -> FieldState:
        field_name = parse_field_name(name)
        with self._lock:
            value = self._values[field_name]
        if _is_blank(value):
            return FieldState.EMPTY
        if self.validate_field(field_name, value) is not None:
            return FieldState.INVALID
        return FieldState.VALID

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate_field(self, name: str, value: str | None) -> str | None:
        """Return the inline error for *value* in field *name*, or None."""
        field_name = parse_field_name(name)
        if field_name is FieldName.BIRTH and _is_blank(value):
            return BIRTH_REQUIRED_MESSAGE
        check = check_field(
            field_name, value, now=self._clock(), minimum_age=self._minimum_age
        )
        if check.error is None:
            return None
        return check.error.message

    def validate_form(self) -> FormValidation:
        """Validate every field, refresh inline errors and the validity flag."""
        with self._lock:
            errors: dict[FieldName, str] = {}
            for field_name, value in self._values.items():
                if _is_blank(value):
                    errors[field_name] = REQUIRED_MESSAGE
                    continue
                message = self.validate_field(field_name, value)
                if message is not None:
                    errors[field_name] = message

            all_filled = not any(_is_blank(v) for v in self._values.values())
            validation = FormValidation(
                errors=errors, all_filled=all_filled, no_errors=not errors
            )
            self._errors = errors
            self._is_valid = validation.submittable
            return validation

    # ------------------------------------------------------------------
    # Input events
    # ------------------------------------------------------------------

    def change(self, name: str, value: str) -> FormValidation:
        """Set a field value (one keystroke or paste) and re-validate."""
        field_name = parse_field_name(name)
        with self._lock:
            self._values[field_name] = value
            return self.validate_form()

    def fill(self, values: Mapping[str, str]) -> FormValidation:
        """Apply several changes in order; returns the last validation."""
        validation = FormValidation()
        for name, value in values.items():
            validation = self.change(name, value)
        return validation

    def blur(self, name: str) -> str | None:
        """Re-validate the whole form when a field loses focus.

        Returns the inline error the whole-form pass leaves on the field, so a
        blank field reports ``REQUIRED_MESSAGE`` (birth included).
        """
        field_name = parse_field_name(name)
        with self._lock:
            return self.validate_form().errors.get(field_name)

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    @traced
    def submit(self) -> ServiceResult:
        """Validate, persist, and schedule the reset of the form.

        Failures never raise; they come back as a failed ServiceResult and
        the inline errors stay on the form.
        """
        op = "submit"
        with self._lock:
            if self._submitting:
                return ServiceResult.failure(
                    op, "SUBMIT_IN_PROGRESS", "A submission is already in progress"
                )

            # ── VALIDATE ─────────────────────────────────────────
            with trace_span("validate"):
                validation = self.validate_form()
            if not validation.submittable:
                return ServiceResult.failure(
                    op,
                    "FORM_INVALID",
                    "Form has invalid or missing fields",
                    detail={
                        "errors": {f.value: m for f, m in validation.errors.items()},
                        "values": self.values,
                    },
                )

            # ── PERSIST ──────────────────────────────────────────
            stored = self.record().to_storage()
            # Compact separators; non-ASCII stays verbatim.
            payload = json.dumps(stored, ensure_ascii=False, separators=(",", ":"))
            with trace_span("persist"):
                try:
                    self._store.set_item(self._storage_key, payload)
                except (OSError, StorageError) as exc:
                    logger.warning("Could not persist submission: %s", exc)
                    return ServiceResult.failure(op, "STORAGE_ERROR", str(exc))

            # ── NOTIFY ───────────────────────────────────────────
            handle = self._notifier.loading(SUBMITTING_MESSAGE)
            self._submitting = True
            self._scheduler.schedule(self._submit_delay, partial(self._complete, handle))
            logger.debug("Submission persisted under %r", self._storage_key)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "key": self._storage_key,
                "record": stored,
                "notification": handle,
                "status": "submitting",
            },
        )

    def _complete(self, handle: str) -> None:
        """Delayed completion: clear the form and report success."""
        with self._lock:
            self._values = dict.fromkeys(FIELD_ORDER, "")
            self.validate_form()
            self._submitting = False
        self._notifier.update(handle, SUCCESS_MESSAGE, kind=NotificationKind.SUCCESS)
        logger.debug("Submission %s completed; form reset", handle)
