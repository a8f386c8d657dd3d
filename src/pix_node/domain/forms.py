"""Domain models for form state."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum


class SubmissionState(StrEnum):
    """Lifecycle of a single form submission."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class FormRecord:
    """Ephemeral state held by one form."""

    values: dict[str, object]
    errors: dict[str, str] = field(default_factory=dict)
    state: SubmissionState = SubmissionState.IDLE
    submit_error: str | None = None


@dataclass(frozen=True)
class SubmitOutcome:
    """Result of a submit attempt."""

    state: SubmissionState
    payload: Mapping[str, object] | None = None
    errors: Mapping[str, str] = field(default_factory=dict)

    @property
    def accepted(self) -> bool:
        """Return True when validation passed and the callback ran."""
        return self.payload is not None
