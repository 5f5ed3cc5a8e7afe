"""
Date utility functions for article and announcement display.
"""

from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[str, date, datetime, None]

DISPLAY_DATE_FORMAT = "%d %B %Y"

# Fixed English names so output does not depend on the process locale
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def parse_date(value: DateLike) -> Optional[datetime]:
    """
    Parse a stored date into a datetime.

    Accepts datetime and date objects and ISO strings as they come out of
    the database ("2025-11-14", "2025-11-14 08:30:00", "2025-11-14T08:30").

    Returns:
        datetime, or None when value is empty or not a recognizable date
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not value:
        return None

    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None


def _format(value: DateLike, format_string: str) -> str:
    parsed = parse_date(value)
    if parsed is None:
        # Show unparseable strings as-is rather than a bogus date
        return value if isinstance(value, str) else ""
    # %B is substituted by hand; strftime would use the locale's month name
    format_string = format_string.replace("%B", MONTH_NAMES[parsed.month - 1])
    return parsed.strftime(format_string)


def format_display_date(
    value: DateLike, format_string: str = DISPLAY_DATE_FORMAT
) -> str:
    """
    Format a date as "day month year", e.g. "14 November 2025".

    Args:
        value: Date, datetime or ISO date string
        format_string: strftime pattern; %B always yields the English
            month name

    Returns:
        Formatted date, the original string if it cannot be parsed, or ""
        for an empty value
    """
    return _format(value, format_string)


def extract_day(value: DateLike) -> str:
    """Zero-padded day of month ("05"), for announcement cards."""
    return _format(value, "%d")


def extract_month(value: DateLike) -> str:
    """Full English month name ("November"), for announcement cards."""
    return _format(value, "%B")
