"""
Strict parsing of numeric dates in an inferred layout.
"""

from datetime import date, datetime

from ..exceptions import DateParseError
from ..models import DateFormat


def parse_date(date_str: str, date_format: DateFormat) -> date:
    """
    Parse a date string using the inferred format.

    Raises:
        DateParseError: If the text is not a real date in that layout,
            e.g. a day value of 31 in the month position
    """
    try:
        return datetime.strptime(date_str, date_format.strptime_pattern).date()
    except ValueError as e:
        raise DateParseError(date_str, date_format.value) from e


def format_date(value: date, date_format: DateFormat) -> str:
    """Render a date back in the given layout (zero padded)."""
    return value.strftime(date_format.strptime_pattern)
