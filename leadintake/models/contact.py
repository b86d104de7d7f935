"""Contact submission models for the booking form.

This module contains the Pydantic models for the backend's response, the
tagged outcome of a submission attempt and the notices shown to the visitor.
"""

from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from leadintake.models.form import FieldName


class ContactResponseStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class ContactResponse(BaseModel):
    """Response body returned by the contact endpoint.

    Attributes:
        status: "success" when the request was stored, "error" otherwise
        message: Human-readable message from the backend
    """
    status: str = Field(..., description="Outcome reported by the backend")
    message: Optional[str] = Field(None, description="Human-readable message from the backend")


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    SOFT_FAILURE = "soft_failure"
    HARD_FAILURE = "hard_failure"
    GUARD_REJECTED = "guard_rejected"
    BUSY = "busy"


class SubmissionOutcome(BaseModel):
    """Tagged result of a submit attempt.

    Attributes:
        kind: Which branch the attempt ended in
        message: Backend message for success and soft failures, error detail for hard failures
    """
    kind: OutcomeKind
    message: Optional[str] = None

    @classmethod
    def success(cls, message: Optional[str] = None) -> "SubmissionOutcome":
        return cls(kind=OutcomeKind.SUCCESS, message=message)

    @classmethod
    def soft_failure(cls, message: Optional[str] = None) -> "SubmissionOutcome":
        return cls(kind=OutcomeKind.SOFT_FAILURE, message=message)

    @classmethod
    def hard_failure(cls, message: Optional[str] = None) -> "SubmissionOutcome":
        return cls(kind=OutcomeKind.HARD_FAILURE, message=message)


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Notice(BaseModel):
    """A blocking message shown to the visitor."""
    level: NoticeLevel
    title: str
    text: str


class ValidationResult(BaseModel):
    """Validity of a single field, recomputed on every event."""
    field: FieldName
    valid: bool


class FormEvaluation(BaseModel):
    """Result of validating the whole form.

    Attributes:
        per_field_valid: Validity of every field
        form_valid: Whether the submit control may be enabled
        visible_errors: Fields that are touched and invalid
        char_count: Message counter label
    """
    per_field_valid: Dict[FieldName, bool]
    form_valid: bool
    visible_errors: List[FieldName] = Field(default_factory=list)
    char_count: str = "0/250"
