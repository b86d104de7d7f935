"""Configuration settings for the lead-intake booking form.

This module manages environment variables and form settings.
"""
import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    return float(value)


class Settings:
    """Form settings.

    Attributes:
        CONTACT_ENDPOINT_URL: Endpoint the booking request is posted to
        DATE_THRESHOLD_HOURS: Minimum lead time for a requested booking date
        MESSAGE_SOFT_LIMIT: Character count shown on the message counter
        MESSAGE_WORD_LIMIT: Word limit enforced by the backend (mirrored for reference)
        VEHICLE_MAX_LENGTH: Maximum length of the vehicle field
        PHONE_LOCALE: Locale key selecting the phone number pattern
        REQUEST_TIMEOUT: Seconds before the submission request is abandoned, unset for no timeout
        LOG_LEVEL: Logging level name
    """
    def __init__(self):
        # Submission endpoint
        self.CONTACT_ENDPOINT_URL = os.getenv(
            "CONTACT_ENDPOINT_URL", "http://localhost/contact_auto.php"
        )
        self.REQUEST_TIMEOUT = _optional_float(os.getenv("REQUEST_TIMEOUT"))

        # Validation rules
        self.DATE_THRESHOLD_HOURS = int(os.getenv("DATE_THRESHOLD_HOURS", 24))
        self.MESSAGE_SOFT_LIMIT = int(os.getenv("MESSAGE_SOFT_LIMIT", 250))
        self.MESSAGE_WORD_LIMIT = int(os.getenv("MESSAGE_WORD_LIMIT", 30))
        self.VEHICLE_MAX_LENGTH = int(os.getenv("VEHICLE_MAX_LENGTH", 100))
        self.PHONE_LOCALE = os.getenv("PHONE_LOCALE", "GB")

        # Logging
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
