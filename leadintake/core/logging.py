"""Logging setup for the booking form.

Call setup_logging() once from the host application's startup, before the
first SubmissionController is created.
"""
import logging
import sys
from leadintake.core.config import settings

def setup_logging() -> None:
    """Configure form logging."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_level = getattr(logging, settings.LOG_LEVEL.upper())

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
