"""View hooks the booking form reflects its state into.

FormView is the seam between the form logic and whatever renders it. The
base class ignores every call; RecordingFormView keeps the last reflected
state in memory for headless use and tests.
"""

from typing import Dict, List, Optional

from leadintake.models.contact import Notice
from leadintake.models.form import FieldName
from leadintake.utils.constants import SubmitLabel


class FormView:
    """No-op view. Subclasses override the hooks they render."""

    def show_field_error(self, field: FieldName, visible: bool) -> None:
        pass

    def set_submit_enabled(self, enabled: bool) -> None:
        pass

    def set_submit_label(self, label: str) -> None:
        pass

    def set_char_count(self, label: str) -> None:
        pass

    def set_date_min(self, min_date: str) -> None:
        pass

    def show_notice(self, notice: Notice) -> None:
        pass

    def clear_fields(self) -> None:
        pass


class RecordingFormView(FormView):
    """View that records what would be on screen."""

    def __init__(self):
        self.field_errors: Dict[FieldName, bool] = {field: False for field in FieldName}
        self.submit_enabled: bool = False
        self.submit_label: str = SubmitLabel.IDLE
        self.char_count: str = ""
        self.date_min: Optional[str] = None
        self.notices: List[Notice] = []
        self.cleared: int = 0

    def show_field_error(self, field: FieldName, visible: bool) -> None:
        self.field_errors[field] = visible

    def set_submit_enabled(self, enabled: bool) -> None:
        self.submit_enabled = enabled

    def set_submit_label(self, label: str) -> None:
        self.submit_label = label

    def set_char_count(self, label: str) -> None:
        self.char_count = label

    def set_date_min(self, min_date: str) -> None:
        self.date_min = min_date

    def show_notice(self, notice: Notice) -> None:
        self.notices.append(notice)

    def clear_fields(self) -> None:
        self.cleared += 1

    @property
    def visible_errors(self) -> List[FieldName]:
        return [field for field, visible in self.field_errors.items() if visible]

    @property
    def last_notice(self) -> Optional[Notice]:
        return self.notices[-1] if self.notices else None
