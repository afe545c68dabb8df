"""
Utility functions for the application.
"""
from typing import Any, Optional, Union
from datetime import date, datetime
import re

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(value: Any) -> Optional[date]:
    """
    Parse a strict ``YYYY-MM-DD`` string into a date.

    The string must match the pattern, name a real calendar day and format
    back to exactly the same text. Anything else returns None.
    """
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        return None
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None
    if parsed.isoformat() != value:
        return None
    return parsed


def is_valid_date(value: Any) -> bool:
    """Check whether a value is a strict ``YYYY-MM-DD`` calendar date."""
    return parse_date(value) is not None


def normalize_number(value: float) -> Union[int, float]:
    """Return whole numbers as int so 30.0 is rendered as 30."""
    value = float(value)
    if value.is_integer():
        return int(value)
    return value
