"""Utility functions for time filtering and label formatting."""

from datetime import datetime

from .models import FilterSelector


def is_within_window(timestamp, now, window_seconds):
    """Check if a timestamp falls inside a trailing window ending at now.

    The boundary is inclusive. A timestamp in the future has a negative age
    and is always inside the window.

    Args:
        timestamp: Unix timestamp in seconds
        now: Current Unix timestamp in seconds
        window_seconds: Window length in seconds

    Returns:
        bool: True if now - timestamp <= window_seconds
    """
    return now - timestamp <= window_seconds


def filter_by_time(records, selector, now):
    """Return the records whose timestamp falls within the selected window.

    Input order is preserved. The lifetime selector keeps every record.

    Args:
        records: Sequence of TimedRecord
        selector: FilterSelector
        now: Current Unix timestamp in seconds

    Returns:
        list: Records inside the window
    """
    if selector is FilterSelector.LIFETIME:
        return list(records)
    window = selector.window_seconds
    return [record for record in records if is_within_window(record.time, now, window)]


def format_date_label(timestamp):
    """Format a Unix timestamp as a locale date string."""
    return datetime.fromtimestamp(timestamp).strftime("%x")


def format_time_label(timestamp):
    """Format a Unix timestamp as a locale time string."""
    return datetime.fromtimestamp(timestamp).strftime("%X")
