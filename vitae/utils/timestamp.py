"""Timestamp formatting utilities."""

from datetime import datetime


def today(fmt: str = "%B %Y") -> str:
    """
    Today's date formatted for display in a document.

    Args:
        fmt: strftime format (default "October 2026" style)

    Returns:
        Formatted date string
    """
    return datetime.now().strftime(fmt)


def session_stamp() -> str:
    """Compact timestamp used for log directory names (e.g. 20261019_142501)."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
