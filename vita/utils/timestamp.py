"""Timestamp formatting utilities."""

from datetime import date, datetime


def today() -> str:
    """Current date as YYYY-MM-DD (used for envelope last_updated)."""
    return date.today().isoformat()


def session_stamp() -> str:
    """
    Compact timestamp for naming log session directories.

    Example:
        >>> session_stamp()
        '20251114_123456'
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
