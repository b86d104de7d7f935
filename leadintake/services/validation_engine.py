"""Whole-form validation for the booking form.

The engine recomputes every field's validity from scratch on each call and
derives whether the form may be submitted. It never reads or writes the
view; reflect() is the only place results reach the screen.
"""

import logging
import re
from typing import Dict, Optional

from leadintake.core.config import settings
from leadintake.models.contact import FormEvaluation, ValidationResult
from leadintake.models.form import REQUIRED_FIELDS, FieldName, FormState
from leadintake.services.field_validators import (
    validate_date,
    validate_email,
    validate_honeypot,
    validate_message,
    validate_name,
    validate_phone,
    validate_service,
    validate_vehicle,
)
from leadintake.services.form_view import FormView
from leadintake.utils.constants import get_phone_pattern
from leadintake.utils.helper_functions import char_count_label

logger = logging.getLogger(__name__)


class ValidationEngine:
    """Evaluates a FormState against the field validators.

    Args:
        phone_pattern: Phone pattern to validate with, defaults to the configured locale
        vehicle_max_length: Maximum vehicle description length
        message_soft_limit: Limit shown on the message counter
    """

    def __init__(
        self,
        phone_pattern: Optional[re.Pattern] = None,
        vehicle_max_length: Optional[int] = None,
        message_soft_limit: Optional[int] = None,
    ):
        self.phone_pattern = phone_pattern or get_phone_pattern(settings.PHONE_LOCALE)
        self.vehicle_max_length = (
            vehicle_max_length if vehicle_max_length is not None else settings.VEHICLE_MAX_LENGTH
        )
        self.message_soft_limit = (
            message_soft_limit if message_soft_limit is not None else settings.MESSAGE_SOFT_LIMIT
        )

    def validate_field(self, state: FormState, field: FieldName) -> ValidationResult:
        value = state.value(field)
        if field == FieldName.NAME:
            valid = validate_name(value)
        elif field == FieldName.EMAIL:
            valid = validate_email(value)
        elif field == FieldName.PHONE:
            valid = validate_phone(value, self.phone_pattern)
        elif field == FieldName.VEHICLE:
            valid = validate_vehicle(value, self.vehicle_max_length)
        elif field == FieldName.SERVICE:
            valid = validate_service(value)
        elif field == FieldName.DATE:
            valid = validate_date(value, state.min_date)
        elif field == FieldName.MESSAGE:
            valid = validate_message(value)
        else:
            valid = validate_honeypot(value)
        return ValidationResult(field=field, valid=valid)

    def evaluate(self, state: FormState) -> FormEvaluation:
        """Validate every field and decide whether the form may be submitted.

        The message never gates submission. Touched flags only decide which
        errors are visible.

        Args:
            state: Form state to evaluate

        Returns:
            Per-field validity, overall validity, visible errors and the counter label
        """
        per_field_valid: Dict[FieldName, bool] = {
            field: self.validate_field(state, field).valid for field in FieldName
        }

        form_valid = (
            all(per_field_valid[field] for field in REQUIRED_FIELDS)
            and per_field_valid[FieldName.VEHICLE]
            and per_field_valid[FieldName.DATE]
            and per_field_valid[FieldName.HONEYPOT]
        )

        # The honeypot never shows an error to the visitor.
        visible_errors = [
            field
            for field in FieldName
            if field != FieldName.HONEYPOT
            and state.fields[field].touched
            and not per_field_valid[field]
        ]

        return FormEvaluation(
            per_field_valid=per_field_valid,
            form_valid=form_valid,
            visible_errors=visible_errors,
            char_count=char_count_label(state.value(FieldName.MESSAGE), self.message_soft_limit),
        )

    def reflect(self, evaluation: FormEvaluation, view: FormView) -> None:
        """Push an evaluation to the view: inline errors, submit control and counter."""
        for field in FieldName:
            if field == FieldName.HONEYPOT:
                continue
            view.show_field_error(field, field in evaluation.visible_errors)
        view.set_submit_enabled(evaluation.form_valid)
        view.set_char_count(evaluation.char_count)


validation_engine = ValidationEngine()
