"""Submission state machine for the booking form.

handle() applies a UI event to a FormState and returns the new state without
touching the view or the network. SubmissionController owns the live state,
reflects every change into a FormView and runs the asynchronous submit
lifecycle:

    idle --submit, guard passes--> submitting --response--> idle

A submit attempt that fails the guard, or arrives while a request is in
flight, never reaches the network.
"""

import logging
from datetime import datetime
from typing import Optional

from leadintake.core.config import settings
from leadintake.models.contact import (
    FormEvaluation,
    Notice,
    NoticeLevel,
    OutcomeKind,
    SubmissionOutcome,
)
from leadintake.models.form import (
    EventKind,
    FieldName,
    FieldState,
    FormEvent,
    FormState,
    SubmissionState,
)
from leadintake.services.contact_client import ContactClient, contact_client
from leadintake.services.field_validators import validate_honeypot
from leadintake.services.form_view import FormView
from leadintake.services.touch_tracker import touch_tracker
from leadintake.services.validation_engine import ValidationEngine, validation_engine
from leadintake.utils.constants import NoticeText, SubmitLabel
from leadintake.utils.helper_functions import min_date_threshold

logger = logging.getLogger(__name__)


FIX_ERRORS_NOTICE = Notice(
    level=NoticeLevel.WARNING,
    title=NoticeText.FIX_ERRORS_TITLE,
    text=NoticeText.FIX_ERRORS_TEXT,
)

SUCCESS_NOTICE = Notice(
    level=NoticeLevel.SUCCESS,
    title=NoticeText.SUCCESS_TITLE,
    text=NoticeText.SUCCESS_TEXT,
)

HARD_FAILURE_NOTICE = Notice(
    level=NoticeLevel.ERROR,
    title=NoticeText.HARD_FAILURE_TITLE,
    text=NoticeText.HARD_FAILURE_TEXT,
)


def soft_failure_notice(message: Optional[str]) -> Notice:
    return Notice(
        level=NoticeLevel.WARNING,
        title=NoticeText.SOFT_FAILURE_TITLE,
        text=message or NoticeText.SOFT_FAILURE_DEFAULT_TEXT,
    )


def handle(event: FormEvent, state: FormState) -> FormState:
    """Apply a UI event to the form state.

    Args:
        event: Event to apply
        state: Current state, left unmodified

    Returns:
        The new form state

    Raises:
        ValueError: If a field event does not name a field
    """
    new_state = state.model_copy(deep=True)

    if event.kind == EventKind.SUBMIT:
        return touch_tracker.touch_all(new_state)

    if event.kind == EventKind.RESET:
        new_state.fields = {field: FieldState() for field in FieldName}
        new_state.submission = SubmissionState.IDLE
        return new_state

    if event.field is None:
        raise ValueError(f"{event.kind.value} event requires a field")

    if event.value is not None:
        new_state.fields[event.field].raw_value = event.value

    # Typing alone never reveals an error; blur and change do.
    if event.kind in (EventKind.BLUR, EventKind.CHANGE):
        touch_tracker.mark_touched(new_state, event.field)

    return new_state


def start_submission(state: FormState) -> FormState:
    new_state = state.model_copy(deep=True)
    new_state.submission = SubmissionState.SUBMITTING
    return new_state


def finish_submission(state: FormState, outcome: SubmissionOutcome) -> FormState:
    """Return to idle, clearing the form only when the backend confirmed success."""
    if outcome.kind == OutcomeKind.SUCCESS:
        return handle(FormEvent.reset(), state)
    new_state = state.model_copy(deep=True)
    new_state.submission = SubmissionState.IDLE
    return new_state


class SubmissionController:
    """Owns the booking form state and drives it from UI events.

    Args:
        view: View to reflect state into, a no-op view by default
        client: Contact endpoint client
        engine: Validation engine
        now: Time the form was opened, used for the earliest booking date
        date_threshold_hours: Minimum booking lead time in hours
    """

    def __init__(
        self,
        view: Optional[FormView] = None,
        client: Optional[ContactClient] = None,
        engine: Optional[ValidationEngine] = None,
        now: Optional[datetime] = None,
        date_threshold_hours: Optional[int] = None,
    ):
        self.view = view or FormView()
        self.client = client or contact_client
        self.engine = engine or validation_engine

        hours = date_threshold_hours if date_threshold_hours is not None else settings.DATE_THRESHOLD_HOURS
        self.state = FormState(min_date=min_date_threshold(now, hours))
        self.view.set_date_min(self.state.min_date)
        self.view.set_submit_label(SubmitLabel.IDLE)
        self.evaluate()

    def evaluate(self) -> FormEvaluation:
        """Validate the current state and reflect it into the view."""
        evaluation = self.engine.evaluate(self.state)
        self.engine.reflect(evaluation, self.view)
        if self.state.is_submitting():
            self.view.set_submit_enabled(False)
        return evaluation

    def dispatch(self, event: FormEvent) -> FormEvaluation:
        self.state = handle(event, self.state)
        return self.evaluate()

    def guard_passes(self, evaluation: FormEvaluation) -> bool:
        return evaluation.form_valid and validate_honeypot(self.state.value(FieldName.HONEYPOT))

    async def submit(self) -> SubmissionOutcome:
        """Run one submit attempt.

        Every field is marked touched and the form re-validated first. If the
        form is invalid (including a filled honeypot) the fix-errors notice is
        shown and nothing is sent. Otherwise the request is sent, the matching
        notice is shown and the form is cleared on success. The submit
        control is restored however the attempt ends.

        Returns:
            The outcome of the attempt
        """
        evaluation = self.dispatch(FormEvent.submit())
        guard_passes = self.guard_passes(evaluation)

        if self.state.is_submitting():
            logger.info("Submit ignored, a booking request is already in flight")
            if not guard_passes:
                self.view.show_notice(FIX_ERRORS_NOTICE)
            return SubmissionOutcome(kind=OutcomeKind.BUSY)

        if not guard_passes:
            if not evaluation.per_field_valid[FieldName.HONEYPOT]:
                logger.info("Honeypot field filled, booking request dropped")
            else:
                invalid = [field.value for field in evaluation.visible_errors]
                logger.warning(f"Submit blocked by invalid fields: {invalid}")
            self.view.show_notice(FIX_ERRORS_NOTICE)
            return SubmissionOutcome(kind=OutcomeKind.GUARD_REJECTED)

        self.state = start_submission(self.state)
        self.view.set_submit_enabled(False)
        self.view.set_submit_label(SubmitLabel.BUSY)

        outcome = SubmissionOutcome.hard_failure()
        try:
            outcome = await self._send()
            self._show_outcome(outcome)
        finally:
            self.state = finish_submission(self.state, outcome)
            if outcome.kind == OutcomeKind.SUCCESS:
                self.view.clear_fields()
            self.view.set_submit_label(SubmitLabel.IDLE)
            self.evaluate()

        return outcome

    async def _send(self) -> SubmissionOutcome:
        try:
            return await self.client.submit(self.state.form_data())
        except Exception as e:
            logger.error(f"Unexpected error submitting booking request: {str(e)}")
            return SubmissionOutcome.hard_failure(str(e))

    def _show_outcome(self, outcome: SubmissionOutcome) -> None:
        if outcome.kind == OutcomeKind.SUCCESS:
            logger.info("Booking request submitted")
            self.view.show_notice(SUCCESS_NOTICE)
        elif outcome.kind == OutcomeKind.SOFT_FAILURE:
            self.view.show_notice(soft_failure_notice(outcome.message))
        else:
            self.view.show_notice(HARD_FAILURE_NOTICE)
