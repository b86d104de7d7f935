from datetime import datetime, timedelta
from typing import Optional

from leadintake.utils.constants import DATE_INPUT_FORMAT, PHONE_STRIP_PATTERN


def strip_phone(value: str) -> str:
    """Remove whitespace and hyphens from a phone number. Other punctuation is kept."""
    return PHONE_STRIP_PATTERN.sub("", value)


def round_up_to_hour(dt: datetime) -> datetime:
    floored = dt.replace(minute=0, second=0, microsecond=0)
    if floored == dt:
        return floored
    return floored + timedelta(hours=1)


def min_date_threshold(now: Optional[datetime] = None, offset_hours: int = 24) -> str:
    """Earliest bookable date in datetime-local format.

    Args:
        now: Reference time, defaults to the current local time
        offset_hours: Minimum lead time in hours

    Returns:
        now + offset_hours rounded up to the next whole hour, as YYYY-MM-DDTHH:mm
    """
    if now is None:
        now = datetime.now()
    return round_up_to_hour(now + timedelta(hours=offset_hours)).strftime(DATE_INPUT_FORMAT)


def count_words(value: str) -> int:
    return len(value.split())


def char_count_label(value: str, limit: int = 250) -> str:
    """Counter label, counting UTF-16 code units like a browser textarea."""
    return f"{len(value.encode('utf-16-le')) // 2}/{limit}"
