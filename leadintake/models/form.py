"""Data models for the booking form state.

This module contains the Pydantic models describing the form's fields, the
submission lifecycle and the synthetic UI events that drive it.
"""

from enum import Enum
from typing import Dict, Optional
from pydantic import BaseModel, Field


class FieldName(str, Enum):
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    VEHICLE = "vehicle"
    SERVICE = "service"
    DATE = "date"
    MESSAGE = "message"
    HONEYPOT = "honeypot"


REQUIRED_FIELDS = (FieldName.NAME, FieldName.EMAIL, FieldName.PHONE, FieldName.SERVICE)


class SubmissionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"


class FieldState(BaseModel):
    """Current value of a single form field.

    Attributes:
        raw_value: Value exactly as entered by the visitor
        touched: Whether the visitor has interacted with the field
    """

    raw_value: str = ""
    touched: bool = False


def _empty_fields() -> Dict[FieldName, FieldState]:
    return {field: FieldState() for field in FieldName}


class FormState(BaseModel):
    """The booking form's values, touched flags and submission lifecycle.

    Attributes:
        fields: State of every form field keyed by field name
        submission: Whether a request is currently in flight
        min_date: Earliest accepted booking date, fixed when the form is created
    """

    fields: Dict[FieldName, FieldState] = Field(default_factory=_empty_fields)
    submission: SubmissionState = SubmissionState.IDLE
    min_date: str = Field(..., description="Earliest accepted booking date as YYYY-MM-DDTHH:mm")

    def value(self, field: FieldName) -> str:
        return self.fields[field].raw_value

    def is_submitting(self) -> bool:
        return self.submission == SubmissionState.SUBMITTING

    def form_data(self) -> Dict[str, str]:
        """Form-encoded payload, one entry per field including the honeypot."""
        return {field.value: state.raw_value for field, state in self.fields.items()}


class EventKind(str, Enum):
    INPUT = "input"
    BLUR = "blur"
    CHANGE = "change"
    SUBMIT = "submit"
    RESET = "reset"


class FormEvent(BaseModel):
    """A UI event dispatched to the form.

    Attributes:
        kind: Type of event
        field: Field the event targets, unset for submit and reset
        value: New field value carried by input and change events
    """

    kind: EventKind
    field: Optional[FieldName] = None
    value: Optional[str] = None

    @classmethod
    def input(cls, field: FieldName, value: str) -> "FormEvent":
        return cls(kind=EventKind.INPUT, field=field, value=value)

    @classmethod
    def blur(cls, field: FieldName) -> "FormEvent":
        return cls(kind=EventKind.BLUR, field=field)

    @classmethod
    def change(cls, field: FieldName, value: str) -> "FormEvent":
        return cls(kind=EventKind.CHANGE, field=field, value=value)

    @classmethod
    def submit(cls) -> "FormEvent":
        return cls(kind=EventKind.SUBMIT)

    @classmethod
    def reset(cls) -> "FormEvent":
        return cls(kind=EventKind.RESET)
