import itertools
import pytest
from leadintake.models.form import FieldName, FormState, REQUIRED_FIELDS
from leadintake.services.touch_tracker import touch_tracker
from leadintake.services.validation_engine import ValidationEngine, validation_engine
from leadintake.utils.constants import get_phone_pattern
from leadintake.tests.constants.form import FormTestConstants, THIRTY_ONE_WORD_MESSAGE


class TestValidationEngine:

    def test_valid_booking_enables_submit(self, valid_form_state):
        """Test a filled-in booking with an empty honeypot is submittable."""
        evaluation = validation_engine.evaluate(valid_form_state)

        assert evaluation.form_valid is True
        assert evaluation.visible_errors == []

    def test_empty_form_is_invalid_without_visible_errors(self, empty_form_state):
        """Test untouched invalid fields show no errors."""
        evaluation = validation_engine.evaluate(empty_form_state)

        assert evaluation.form_valid is False
        assert evaluation.visible_errors == []
        for field in REQUIRED_FIELDS:
            assert evaluation.per_field_valid[field] is False

    def test_touched_invalid_fields_show_errors(self, empty_form_state):
        touch_tracker.mark_touched(empty_form_state, FieldName.NAME)
        touch_tracker.mark_touched(empty_form_state, FieldName.VEHICLE)

        evaluation = validation_engine.evaluate(empty_form_state)

        assert evaluation.visible_errors == [FieldName.NAME]

    def test_honeypot_blocks_submit_without_error(self, valid_form_state):
        """Test a filled honeypot disables submit but never shows an error."""
        valid_form_state.fields[FieldName.HONEYPOT].raw_value = "x"
        touch_tracker.touch_all(valid_form_state)

        evaluation = validation_engine.evaluate(valid_form_state)

        assert evaluation.form_valid is False
        assert evaluation.per_field_valid[FieldName.HONEYPOT] is False
        assert FieldName.HONEYPOT not in evaluation.visible_errors

    @pytest.mark.parametrize(
        "field,value",
        [
            (FieldName.VEHICLE, "x" * 101),
            (FieldName.DATE, FormTestConstants.MOCK_DATE_TOO_EARLY.value),
            (FieldName.NAME, "John 5mith"),
            (FieldName.EMAIL, "john@example"),
            (FieldName.PHONE, "12345"),
            (FieldName.SERVICE, ""),
        ]
    )
    def test_any_failing_rule_disables_submit(self, valid_form_state, field, value):
        valid_form_state.fields[field].raw_value = value

        assert validation_engine.evaluate(valid_form_state).form_valid is False

    def test_optional_fields_accept_valid_values(self, valid_form_state):
        valid_form_state.fields[FieldName.VEHICLE].raw_value = FormTestConstants.MOCK_VEHICLE.value
        valid_form_state.fields[FieldName.DATE].raw_value = FormTestConstants.MOCK_DATE_ACCEPTED.value

        assert validation_engine.evaluate(valid_form_state).form_valid is True

    def test_message_length_never_gates_submit(self, valid_form_state):
        """Test a message over the counter and word limits still allows submit."""
        valid_form_state.fields[FieldName.MESSAGE].raw_value = THIRTY_ONE_WORD_MESSAGE + "x" * 300

        evaluation = validation_engine.evaluate(valid_form_state)

        assert evaluation.form_valid is True
        assert evaluation.char_count == f"{len(THIRTY_ONE_WORD_MESSAGE) + 300}/250"

    @pytest.mark.parametrize(
        "touched", list(itertools.product([False, True], repeat=len(list(FieldName))))[::17]
    )
    def test_touched_flags_never_change_enablement(self, valid_form_state, touched):
        """Test submit enablement ignores touched flags entirely."""
        empty_state = FormState(min_date=FormTestConstants.MOCK_MIN_DATE.value)
        for state in (valid_form_state, empty_state):
            baseline = validation_engine.evaluate(state).form_valid
            for field, flag in zip(FieldName, touched):
                state.fields[field].touched = flag
            assert validation_engine.evaluate(state).form_valid is baseline

    def test_evaluate_is_idempotent(self, valid_form_state):
        first = validation_engine.evaluate(valid_form_state)
        second = validation_engine.evaluate(valid_form_state)

        assert first == second

    def test_overridden_limits(self, valid_form_state):
        engine = ValidationEngine(
            phone_pattern=get_phone_pattern("GB"),
            vehicle_max_length=5,
            message_soft_limit=10,
        )
        valid_form_state.fields[FieldName.VEHICLE].raw_value = "Transit"

        evaluation = engine.evaluate(valid_form_state)

        assert evaluation.per_field_valid[FieldName.VEHICLE] is False
        assert evaluation.char_count == "0/10"


class TestValidationReflection:

    def test_reflect_pushes_errors_and_submit_state(self, empty_form_state, recording_view):
        touch_tracker.mark_touched(empty_form_state, FieldName.EMAIL)

        validation_engine.reflect(validation_engine.evaluate(empty_form_state), recording_view)

        assert recording_view.visible_errors == [FieldName.EMAIL]
        assert recording_view.submit_enabled is False
        assert recording_view.char_count == "0/250"

    def test_reflect_hides_errors_once_fixed(self, valid_form_state, recording_view):
        recording_view.field_errors[FieldName.NAME] = True
        touch_tracker.touch_all(valid_form_state)

        validation_engine.reflect(validation_engine.evaluate(valid_form_state), recording_view)

        assert recording_view.visible_errors == []
        assert recording_view.submit_enabled is True
