"""Date range validation - Pure functions.

Checks the two user-entered dates before any request is built.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime

from src.core.errors import DateRangeError, InvalidDateError, InvalidFormatError


DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class DateRange:
    """A validated date range.

    Attributes:
        start: Start date exactly as entered (YYYY-MM-DD)
        end: End date exactly as entered (YYYY-MM-DD)
        start_date: Parsed start date, used for ordering only
        end_date: Parsed end date, used for ordering only
    """
    start: str
    end: str
    start_date: date
    end_date: date


def is_valid_date_format(value: str) -> bool:
    """Return True if value is exactly YYYY-MM-DD (ASCII digits).

    Pure function.
    """
    return DATE_PATTERN.fullmatch(value) is not None


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateError(value, str(e)) from e


def validate_date_range(start: str, end: str) -> DateRange:
    """Validate a start/end pair of date strings.

    Pure function. Both strings are format-checked before either is
    parsed, and both are parsed before they are compared.

    Args:
        start: Start date string
        end: End date string

    Returns:
        DateRange holding the original strings and the parsed dates

    Raises:
        InvalidFormatError: If either string is not YYYY-MM-DD
        InvalidDateError: If either string is not a real calendar date
        DateRangeError: If start is after end
    """
    for value in (start, end):
        if not is_valid_date_format(value):
            raise InvalidFormatError(value)

    start_date = _parse_date(start)
    end_date = _parse_date(end)

    if start_date > end_date:
        raise DateRangeError(start, end)

    return DateRange(
        start=start,
        end=end,
        start_date=start_date,
        end_date=end_date,
    )
