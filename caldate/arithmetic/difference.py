"""Exclusive day counts between calendar dates.

days_between() counts the whole days strictly between two dates: the
same day and adjacent days both give 0, and 2024-01-01 to 2024-01-03
gives 1. The count is split into the partial months or years at each
end plus the full months or years in the middle, using the helpers
below.

For valid dates a and b with offset_date(b, n) == a and n > 0,
days_between(a, b) == n - 1.
"""

from __future__ import annotations

from typing import Any

from caldate._internal.calendar import days_in_month
from caldate.core.date import CalendarDate


def days_from_month_start(date: CalendarDate) -> int:
    """Return the whole days between the 1st of the month and date."""
    return date.day - 1


def days_to_month_end(date: CalendarDate) -> int:
    """Return the whole days between date and the last day of its month."""
    return days_in_month(date.year, date.month) - date.day


def days_in_months(year: int, first_month: int, last_month: int) -> int:
    """Return the total length of months first_month..last_month of year.

    Both ends are inclusive; an empty range gives 0.
    """
    return sum(days_in_month(year, m) for m in range(first_month, last_month + 1))


def days_from_year_start(date: CalendarDate) -> int:
    """Return the whole days between January 1st and date."""
    return days_in_months(date.year, 1, date.month - 1) + days_from_month_start(date)


def days_to_year_end(date: CalendarDate) -> int:
    """Return the whole days between date and December 31st."""
    return days_in_months(date.year, date.month + 1, 12) + days_to_month_end(date)


def _leap_years_through(year: int) -> int:
    # Leap years in 1..year; floor division extends this below year 1
    return year // 4 - year // 100 + year // 400


def days_in_years(first_year: int, last_year: int) -> int:
    """Return the total length of years first_year..last_year.

    Both ends are inclusive; an empty range gives 0.
    """
    if last_year < first_year:
        return 0
    leap_years = _leap_years_through(last_year) - _leap_years_through(first_year - 1)
    return (last_year - first_year + 1) * 365 + leap_years


def days_between(target: Any, current: Any) -> int:
    """Return the signed number of whole days strictly between two dates.

    Both dates must be valid; the result is undefined otherwise.

    Args:
        target: A CalendarDate or (year, month, day) sequence.
        current: The reference date, in the same form.

    Returns:
        The exclusive day count: positive if target is later than
        current, negative if earlier, 0 for the same or adjacent days.

    Examples:
        >>> days_between((2024, 1, 3), (2024, 1, 1))
        1
        >>> days_between((2024, 1, 2), (2024, 1, 1))
        0
        >>> days_between((2025, 1, 1), (2024, 1, 1))
        365
        >>> days_between((2024, 1, 1), (2025, 1, 1))
        -365
    """
    target = CalendarDate.coerce(target)
    current = CalendarDate.coerce(current)

    if target.year == current.year:
        if target.month == current.month:
            diff = target.day - current.day
            if diff == 0:
                return 0
            return diff - 1 if diff > 0 else diff + 1

        if target.month > current.month:
            later, earlier, sign = target, current, 1
        else:
            later, earlier, sign = current, target, -1
        days = days_in_months(later.year, earlier.month + 1, later.month - 1)
        days += days_from_month_start(later)
        days += days_to_month_end(earlier)
        return sign * days

    if target.year > current.year:
        later, earlier, sign = target, current, 1
    else:
        later, earlier, sign = current, target, -1
    days = days_in_years(earlier.year + 1, later.year - 1)
    days += days_from_year_start(later)
    days += days_to_year_end(earlier)
    return sign * days


__all__ = [
    "days_between",
    "days_from_month_start",
    "days_to_month_end",
    "days_in_months",
    "days_from_year_start",
    "days_to_year_end",
    "days_in_years",
]
