"""Utility functions for the WafeqPy library."""

import re
from datetime import date

DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"
_DATE_RE = re.compile(DATE_PATTERN)


def format_date(value: date) -> str:
    """Format a date or datetime as YYYY-MM-DD."""
    return value.strftime("%Y-%m-%d")


def is_valid_date_format(value: str) -> bool:
    """Check that a string has the YYYY-MM-DD shape.

    Only the shape is checked; "2023-13-45" is considered valid.
    """
    return bool(_DATE_RE.fullmatch(value))
