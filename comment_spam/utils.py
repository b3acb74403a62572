"""Utility functions for logging, clamping and timestamps."""

import logging
from datetime import datetime, timezone

from .settings import get_settings

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
LOG = logging.getLogger("comment_spam")


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Bound a value to the closed interval [low, high]."""
    return max(low, min(value, high))


def utc_timestamp() -> str:
    """Return the current UTC time in ISO-8601 format."""
    return datetime.now(timezone.utc).isoformat()
