"""Human-readable date text for calendar headers.

Functions:
    month_name: English name of a 1-based month.
    day_name: English name of a weekday (Monday=0).
    day_of_week: Weekday index of a structured date.
    format_display: Long form such as "Monday January 15, 2024".
"""

from __future__ import annotations

from typing import Any

from caldate._internal.constants import DAY_NAMES, MONTH_NAMES
from caldate._internal.validation import validate_month
from caldate.core.date import CalendarDate
from caldate.errors import ValidationError


def month_name(month: int) -> str:
    """Return the English name of a month.

    Raises:
        ValidationError: If month is outside 1-12.

    Examples:
        >>> month_name(2)
        'February'
    """
    validate_month(month)
    return MONTH_NAMES[month]


def day_name(weekday: int) -> str:
    """Return the English name of a weekday, Monday being 0.

    Raises:
        ValidationError: If weekday is outside 0-6.
    """
    if weekday < 0 or weekday > 6:
        raise ValidationError(f"weekday must be between 0 and 6, got {weekday}")
    return DAY_NAMES[weekday]


def day_of_week(date: Any) -> int:
    """Return the day of the week of a structured date (Monday=0, Sunday=6).

    Examples:
        >>> day_of_week((2024, 1, 21))  # Sunday
        6
    """
    return CalendarDate.coerce(date).day_of_week()


def format_display(date: Any) -> str:
    """Format a date the way the calendar header shows it.

    Args:
        date: A CalendarDate or (year, month, day) sequence.

    Returns:
        "<Weekday> <Month> <day>, <year>".

    Raises:
        ValidationError: If the date is not a valid calendar date.

    Examples:
        >>> format_display((2024, 1, 15))
        'Monday January 15, 2024'
    """
    d = CalendarDate.coerce(date).validate()
    return f"{day_name(d.day_of_week())} {month_name(d.month)} {d.day}, {d.year}"


__all__ = [
    "month_name",
    "day_name",
    "day_of_week",
    "format_display",
]
