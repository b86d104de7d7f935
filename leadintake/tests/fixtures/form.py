import pytest
from unittest.mock import AsyncMock
from leadintake.models.contact import SubmissionOutcome
from leadintake.models.form import FieldName, FormEvent, FormState
from leadintake.services.contact_client import ContactClient
from leadintake.services.form_view import RecordingFormView
from leadintake.services.submission_controller import SubmissionController
from leadintake.tests.constants.form import FormTestConstants


@pytest.fixture(scope="function")
def recording_view():
    """Fixture providing a view that records what would be on screen."""
    return RecordingFormView()


@pytest.fixture(scope="function")
def empty_form_state():
    """Fixture providing a freshly opened form state."""
    return FormState(min_date=FormTestConstants.MOCK_MIN_DATE.value)


@pytest.fixture(scope="function")
def valid_form_state(empty_form_state):
    """Fixture providing a form state with every required field filled in."""
    state = empty_form_state
    state.fields[FieldName.NAME].raw_value = FormTestConstants.MOCK_NAME.value
    state.fields[FieldName.EMAIL].raw_value = FormTestConstants.MOCK_EMAIL.value
    state.fields[FieldName.PHONE].raw_value = FormTestConstants.MOCK_PHONE.value
    state.fields[FieldName.SERVICE].raw_value = FormTestConstants.MOCK_SERVICE.value
    return state


@pytest.fixture(scope="function")
def mock_contact_client(mocker):
    """Fixture providing a contact client whose submit is an AsyncMock."""
    mock = mocker.Mock(spec=ContactClient)
    mock.submit = AsyncMock(
        return_value=SubmissionOutcome.success(
            FormTestConstants.MOCK_SUCCESS_RESPONSE.value["message"]
        )
    )
    return mock


@pytest.fixture(scope="function")
def controller(recording_view, mock_contact_client):
    """Fixture providing a controller wired to a recording view and a mock client."""
    return SubmissionController(
        view=recording_view,
        client=mock_contact_client,
        now=FormTestConstants.MOCK_NOW.value,
    )


def fill_valid_booking(controller: SubmissionController) -> None:
    """Type a valid booking into the form the way a visitor would."""
    controller.dispatch(FormEvent.input(FieldName.NAME, FormTestConstants.MOCK_NAME.value))
    controller.dispatch(FormEvent.blur(FieldName.NAME))
    controller.dispatch(FormEvent.input(FieldName.EMAIL, FormTestConstants.MOCK_EMAIL.value))
    controller.dispatch(FormEvent.blur(FieldName.EMAIL))
    controller.dispatch(FormEvent.input(FieldName.PHONE, FormTestConstants.MOCK_PHONE.value))
    controller.dispatch(FormEvent.blur(FieldName.PHONE))
    controller.dispatch(FormEvent.change(FieldName.SERVICE, FormTestConstants.MOCK_SERVICE.value))
    controller.dispatch(FormEvent.input(FieldName.MESSAGE, FormTestConstants.MOCK_MESSAGE.value))


@pytest.fixture(scope="function")
def filled_controller(controller):
    """Fixture providing a controller with a valid booking typed in."""
    fill_valid_booking(controller)
    return controller
