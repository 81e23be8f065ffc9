"""
Calendar date utilities.

Provides lenient parsing of the date strings found in activity exports.
"""

from datetime import date, datetime

from dateutil import parser

_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def parse_calendar_date(value: str | date | None) -> date | None:
    """
    Interpret a value as a calendar date.

    ISO ``YYYY-MM-DD`` strings are parsed directly; other textual forms fall
    back to dateutil. Any time-of-day or timezone part is discarded. Values
    missing an explicit year, month or day (``"2024-01"``, ``"12"``) are not
    calendar dates.

    Args:
        value: Date string, date or datetime.

    Returns:
        The calendar date, or None if the value cannot be interpreted as one.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        first = parser.parse(text, default=_DEFAULTS[0])
        second = parser.parse(text, default=_DEFAULTS[1])
    except (parser.ParserError, ValueError, OverflowError):
        return None

    # dateutil fills missing parts from the default
    if first.date() != second.date():
        return None

    return first.date()


def dates_within(day: date, start: date, end: date) -> bool:
    """
    Check if a date falls within an inclusive range.

    Args:
        day: Date to check.
        start: First day of the range.
        end: Last day of the range.

    Returns:
        True if start <= day <= end, False otherwise.
    """
    return start <= day <= end
