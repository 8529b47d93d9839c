"""Shared utilities for VITA contexts."""

from vita.utils.text_processing import clean_value, is_placeholder, usable_value
from vita.utils.timestamp import session_stamp, today

__all__ = ["clean_value", "is_placeholder", "usable_value", "session_stamp", "today"]
