"""Day offsets for calendar dates.

This module moves a date forward or backward by a whole number of days,
rolling over month and year boundaries.

Functions:
    offset_date: The date a signed number of days away.
    next_date: The following day.
    previous_date: The preceding day.
"""

from __future__ import annotations

from typing import Any

from caldate._internal.calendar import days_in_month
from caldate._internal.constants import DAYS_PER_400_YEARS
from caldate.core.date import CalendarDate


def offset_date(date: Any, offset_days: int) -> CalendarDate | None:
    """Return the date offset_days after (or before, if negative) date.

    The offset is added to the day field and the result normalized one
    month at a time: a day below 1 borrows the length of the previous
    month, a day past the end of the month carries into the next one.
    Whole 400-year cycles are skipped first, so the loop is bounded by
    about 4800 months whatever the offset.

    The input must be a valid date; an out-of-range day is normalized
    along with the offset, and an out-of-range month is undefined.

    Args:
        date: A CalendarDate or (year, month, day) sequence.
        offset_days: Signed number of days to move.

    Returns:
        A new CalendarDate, or None if date is None.

    Examples:
        >>> offset_date((2024, 2, 28), 1)
        CalendarDate(year=2024, month=2, day=29)

        >>> offset_date((2023, 2, 28), 1)
        CalendarDate(year=2023, month=3, day=1)

        >>> offset_date((2024, 1, 1), -1)
        CalendarDate(year=2023, month=12, day=31)
    """
    if date is None:
        return None

    start = CalendarDate.coerce(date)
    year, month = start.year, start.month
    day = start.day + offset_days

    if day > DAYS_PER_400_YEARS or day < 1 - DAYS_PER_400_YEARS:
        cycles = (day - 1) // DAYS_PER_400_YEARS
        year += 400 * cycles
        day -= DAYS_PER_400_YEARS * cycles

    while day < 1:
        month -= 1
        if month < 1:
            month = 12
            year -= 1
        day += days_in_month(year, month)

    while day > days_in_month(year, month):
        day -= days_in_month(year, month)
        month += 1
        if month > 12:
            month = 1
            year += 1

    return CalendarDate(year, month, day)


def next_date(date: Any) -> CalendarDate | None:
    """Return the day after date."""
    return offset_date(date, 1)


def previous_date(date: Any) -> CalendarDate | None:
    """Return the day before date."""
    return offset_date(date, -1)


__all__ = [
    "offset_date",
    "next_date",
    "previous_date",
]
