"""
Date utility functions.
"""
from datetime import date
from typing import Optional


def today() -> date:
    """Current local calendar date."""
    return date.today()


def days_between(start: Optional[date], end: Optional[date] = None) -> Optional[int]:
    """
    Whole days from start to end.

    Args:
        start: Start date, may be None
        end: End date (defaults to today)

    Returns:
        Number of days (negative if start is after end), or None if start is None
    """
    if start is None:
        return None
    if end is None:
        end = today()
    return (end - start).days
