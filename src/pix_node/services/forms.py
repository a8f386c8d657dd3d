"""Form validation and submission state machine."""

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime

from pix_node.domain.forms import FormRecord, SubmissionState, SubmitOutcome
from pix_node.domain.validation import Schema, validate
from pix_node.domain.views import FieldView, FormView

logger = logging.getLogger(__name__)

SubmitHandler = Callable[[dict[str, object]], Awaitable[None]]
Clock = Callable[[], datetime]


class FormBusyError(RuntimeError):
    """Raised when a form is used while an operation is in flight."""


class UnknownFieldError(ValueError):
    """Raised when editing a field the form does not define."""


def utcnow() -> datetime:
    """Return the current UTC time."""
    return datetime.now(tz=UTC)


@dataclass(frozen=True)
class FieldSpec:
    """Input definition: name, label and initial raw value."""

    name: str
    label: str
    default: object = ""


@dataclass(frozen=True)
class FormDefinition:
    """Declarative description of one form."""

    name: str
    fields: tuple[FieldSpec, ...]
    schema: Schema
    prepare: Callable[[Mapping[str, object], datetime], dict[str, object]]
    submit_label: str
    busy_label: str
    ui_only: frozenset[str] = frozenset()
    failure_message: str = "Something went wrong. Please try again."

    def defaults(self) -> dict[str, object]:
        """Return the initial raw values for every field."""
        return {entry.name: entry.default for entry in self.fields}

    def field_names(self) -> set[str]:
        return {entry.name for entry in self.fields}


@dataclass
class FormMachine:
    """State machine driving one form instance.

    ``idle -> submitting -> (success | error) -> idle`` on the next edit.
    Values are stored raw, as typed into inputs, and coerced by the
    definition's ``prepare`` step on submit.
    """

    definition: FormDefinition
    on_submit: SubmitHandler
    initial: Mapping[str, object] | None = None
    clock: Clock = utcnow
    is_loading: bool = False
    error: str | None = None
    record: FormRecord = field(init=False)

    def __post_init__(self) -> None:
        values = self.definition.defaults()
        known = self.definition.field_names()
        for name, value in (self.initial or {}).items():
            if name in known and value is not None:
                values[name] = value
        self.record = FormRecord(values=values)

    @property
    def state(self) -> SubmissionState:
        return self.record.state

    @property
    def values(self) -> dict[str, object]:
        return dict(self.record.values)

    @property
    def errors(self) -> dict[str, str]:
        return dict(self.record.errors)

    @property
    def is_disabled(self) -> bool:
        """Return True while inputs and the submit control are disabled."""
        return self.is_loading or self.record.state is SubmissionState.SUBMITTING

    def edit(self, name: str, value: object) -> None:
        """Update a field value and clear only that field's error."""
        if self.record.state is SubmissionState.SUBMITTING:
            raise FormBusyError(f"{self.definition.name} form is submitting")
        if name not in self.definition.field_names():
            raise UnknownFieldError(name)
        self.record.values[name] = value
        self.record.errors.pop(name, None)
        if self.record.state in {SubmissionState.SUCCESS, SubmissionState.ERROR}:
            self.record.state = SubmissionState.IDLE
            self.record.submit_error = None

    def edit_many(self, values: Mapping[str, object]) -> None:
        """Apply several edits in order."""
        for name, value in values.items():
            self.edit(name, value)

    def prepared(self) -> dict[str, object]:
        """Return the current values coerced for validation."""
        return self.definition.prepare(self.record.values, self.clock())

    async def submit(self) -> SubmitOutcome:
        """Validate and, when valid, hand a clean payload to the callback."""
        if self.record.state is SubmissionState.SUBMITTING:
            raise FormBusyError(f"{self.definition.name} form is submitting")
        if self.is_loading:
            raise FormBusyError(f"{self.definition.name} form is loading")
        if self.record.state is SubmissionState.SUCCESS:
            return SubmitOutcome(state=SubmissionState.SUCCESS)

        prepared = self.prepared()
        errors = validate(self.definition.schema, prepared)
        if errors:
            self.record.errors = errors
            return SubmitOutcome(state=self.record.state, errors=dict(errors))

        self.record.errors = {}
        self.record.submit_error = None
        self.record.state = SubmissionState.SUBMITTING
        payload = {
            name: value
            for name, value in prepared.items()
            if name not in self.definition.ui_only
        }
        try:
            await self.on_submit(dict(payload))
        except Exception:
            logger.exception(
                "Form submission failed", extra={"form": self.definition.name}
            )
            self.record.state = SubmissionState.ERROR
            self.record.submit_error = self.definition.failure_message
            return SubmitOutcome(state=SubmissionState.ERROR, payload=payload)
        self.record.state = SubmissionState.SUCCESS
        return SubmitOutcome(state=SubmissionState.SUCCESS, payload=payload)

    def render(self, *, submit_blocked: bool = False) -> FormView:
        """Render the form inputs, inline errors and submit control."""
        disabled = self.is_disabled
        fields = [
            FieldView(
                name=entry.name,
                label=entry.label,
                value=self.record.values.get(entry.name),
                error=self.record.errors.get(entry.name),
                disabled=disabled,
            )
            for entry in self.definition.fields
        ]
        return FormView(
            name=self.definition.name,
            fields=fields,
            submit_label=(
                self.definition.busy_label if disabled else self.definition.submit_label
            ),
            submit_disabled=disabled or submit_blocked,
            state=self.record.state,
            error=self.error or self.record.submit_error,
        )
