"""
Date-range filtering of activity records.
"""

import logging
from collections.abc import Sequence
from datetime import date

from activity_summary_analyzer.domain.activity import ActivityRecord
from activity_summary_analyzer.utils.date_utils import dates_within, parse_calendar_date
from activity_summary_analyzer.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)

DateBoundary = str | date | None


def _is_blank(value: DateBoundary) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def resolve_date_range(
    start: DateBoundary, end: DateBoundary
) -> tuple[date, date] | None:
    """
    Resolve a pair of date boundaries.

    Args:
        start: First day of the range.
        end: Last day of the range.

    Returns:
        The (start, end) calendar dates, or None if either boundary is empty.

    Raises:
        ValidationError: If a non-empty boundary is not a calendar date.
    """
    if _is_blank(start) or _is_blank(end):
        return None

    start_date = parse_calendar_date(start)
    if start_date is None:
        raise ValidationError(f"Invalid start date: {start!r}")

    end_date = parse_calendar_date(end)
    if end_date is None:
        raise ValidationError(f"Invalid end date: {end!r}")

    return start_date, end_date


def filter_by_date_range(
    records: Sequence[ActivityRecord],
    start: DateBoundary = None,
    end: DateBoundary = None,
) -> list[ActivityRecord]:
    """
    Restrict records to an inclusive date range.

    Records whose date cannot be interpreted as a calendar date never fall
    inside an active range and are dropped.

    Args:
        records: Activity records in source order.
        start: First day of the range (optional).
        end: Last day of the range (optional).

    Returns:
        The records unchanged if either boundary is empty, otherwise the
        records within [start, end] in their original order.

    Raises:
        ValidationError: If a non-empty boundary is not a calendar date.
    """
    date_range = resolve_date_range(start, end)
    if date_range is None:
        return list(records)

    start_date, end_date = date_range

    filtered: list[ActivityRecord] = []
    unparsable = 0

    for record in records:
        day = parse_calendar_date(record.date)
        if day is None:
            unparsable += 1
            continue
        if dates_within(day, start_date, end_date):
            filtered.append(record)

    if unparsable:
        logger.warning(f"Dropped {unparsable} records with unparsable dates")

    logger.info(
        f"Kept {len(filtered)} of {len(records)} records between {start_date} and {end_date}"
    )
    return filtered
