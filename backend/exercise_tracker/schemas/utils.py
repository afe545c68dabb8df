"""
Helpers shared by the request schemas.
"""
from typing import Any


def blank_to_none(value: Any) -> Any:
    """Treat absent, null and blank values alike; stringify scalar ids."""
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    if isinstance(value, str) and not value.strip():
        return None
    return value
