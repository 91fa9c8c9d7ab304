"""
Datetime utilities
"""
from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Get current UTC time (replacement for deprecated datetime.utcnow())

    Returns:
        datetime: Current UTC time with timezone awareness
    """
    return datetime.now(timezone.utc)
