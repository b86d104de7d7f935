"""Tracks which booking form fields the visitor has interacted with.

Touched flags only gate whether a field's error is shown; they never take
part in deciding whether the form may be submitted.
"""

import logging

from leadintake.models.form import FieldName, FormState

logger = logging.getLogger(__name__)


class TouchTracker:
    """Reads and updates touched flags on a FormState."""

    def mark_touched(self, state: FormState, field: FieldName) -> FormState:
        """Mark a single field as touched, typically on blur or change."""
        state.fields[field].touched = True
        return state

    def touch_all(self, state: FormState) -> FormState:
        """Mark every field as touched so a submit attempt reveals all errors."""
        for field_state in state.fields.values():
            field_state.touched = True
        return state

    def clear(self, state: FormState) -> FormState:
        for field_state in state.fields.values():
            field_state.touched = False
        logger.debug("Cleared touched flags")
        return state

    def is_touched(self, state: FormState, field: FieldName) -> bool:
        return state.fields[field].touched


touch_tracker = TouchTracker()
