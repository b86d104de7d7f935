"""Field validators for the booking form.

Each validator is a pure predicate over a field's raw value. None of them
touch the form state or the view, so they can be tested on plain strings.
"""

import re
from typing import Optional

from leadintake.core.config import settings
from leadintake.utils.constants import (
    EMAIL_PATTERN,
    NAME_MIN_LENGTH,
    NAME_PATTERN,
    PHONE_PATTERNS,
)
from leadintake.utils.helper_functions import count_words, strip_phone


def validate_name(value: str) -> bool:
    """Name must be at least two characters of letters and spaces."""
    trimmed = value.strip()
    return len(trimmed) >= NAME_MIN_LENGTH and NAME_PATTERN.fullmatch(trimmed) is not None


def validate_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value.strip()) is not None


def validate_phone(value: str, pattern: re.Pattern = PHONE_PATTERNS["GB"]) -> bool:
    """Validate a phone number against a locale pattern.

    Whitespace and hyphens are stripped before matching; any other
    punctuation is left in place and fails the match.

    Args:
        value: Raw phone number as typed
        pattern: Locale pattern, UK-style by default

    Returns:
        True if the stripped number matches the pattern
    """
    return pattern.fullmatch(strip_phone(value)) is not None


def validate_vehicle(value: str, max_length: int = 100) -> bool:
    return len(value.strip()) <= max_length


def validate_service(value: str) -> bool:
    return value != ""


def validate_date(value: str, min_date: str) -> bool:
    """Requested date is optional, but must not be earlier than min_date.

    Both sides are YYYY-MM-DDTHH:mm strings, so plain string comparison
    orders them chronologically.
    """
    if not value:
        return True
    return value >= min_date


def validate_message(value: str) -> bool:
    # Length is only shown on the counter; the backend enforces the word limit.
    return True


def validate_honeypot(value: str) -> bool:
    return value == ""


def exceeds_word_limit(value: str, limit: Optional[int] = None) -> bool:
    """Whether the message would be rejected by the backend's word limit."""
    if limit is None:
        limit = settings.MESSAGE_WORD_LIMIT
    return count_words(value) > limit

