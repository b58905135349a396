"""
Date Utilities

Parsing and formatting of storefront date strings. The decoding layer
takes a date parser as a strategy so callers can plug in another format.
"""

from datetime import datetime
from typing import Callable, Optional

from ..errors import MalformedDataError
from .constants import DATE_FORMAT

DateParser = Callable[[Optional[str]], Optional[datetime]]


def parse_date(value: Optional[str], fmt: str = DATE_FORMAT) -> Optional[datetime]:
    """
    Parse a storefront date string.

    Args:
        value: Date string (e.g., "2015-05-13T11:34:25-04:00"), or None
        fmt: strptime format

    Returns:
        Timezone-aware datetime, or None for a missing/blank value

    Raises:
        MalformedDataError: If the string does not match the format
    """
    if value is None or not str(value).strip():
        return None

    try:
        return datetime.strptime(str(value).strip(), fmt)
    except ValueError as e:
        raise MalformedDataError(f"Invalid date {value!r}: {e}") from e


def make_date_parser(fmt: str = DATE_FORMAT) -> DateParser:
    """Return a date parser bound to the given format."""
    def _parse(value: Optional[str]) -> Optional[datetime]:
        return parse_date(value, fmt)
    return _parse


def format_date(value: Optional[datetime], fmt: str = DATE_FORMAT) -> Optional[str]:
    """
    Format a date for output in the storefront wire format.

    Replaces the string-returning date accessors of older SDK versions.
    """
    if value is None:
        return None
    return value.strftime(fmt)
