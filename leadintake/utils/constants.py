import re

# Field patterns
NAME_PATTERN = re.compile(r"^[A-Za-z\s]+$")
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PHONE_STRIP_PATTERN = re.compile(r"[\s-]")

# Phone patterns by locale, matched after spaces and hyphens are stripped
PHONE_PATTERNS = {
    "GB": re.compile(r"^(\+44|0)?[0-9\s]{10,15}$"),
}

NAME_MIN_LENGTH = 2

# datetime-local input format, zero padded so values compare as strings
DATE_INPUT_FORMAT = "%Y-%m-%dT%H:%M"


class SubmitLabel:
    IDLE = "Send Request"
    BUSY = "Sending..."


class NoticeText:
    FIX_ERRORS_TITLE = "Please Fix Errors"
    FIX_ERRORS_TEXT = "Check the fields highlighted in red and correct the issues before submitting."
    SUCCESS_TITLE = "Thank You!"
    SUCCESS_TEXT = (
        "We've received your booking request! Our team will review your details "
        "and get back to you within 24 hours to confirm your appointment."
    )
    SOFT_FAILURE_TITLE = "Almost There!"
    SOFT_FAILURE_DEFAULT_TEXT = "Please try again or call us."
    HARD_FAILURE_TITLE = "Oops!"
    HARD_FAILURE_TEXT = "Something went wrong. Try again or contact via phone/WhatsApp."


def get_phone_pattern(locale: str) -> re.Pattern:
    """Look up the phone pattern registered for a locale."""
    try:
        return PHONE_PATTERNS[locale.upper()]
    except KeyError:
        raise ValueError(f"Unsupported phone locale: {locale}")
