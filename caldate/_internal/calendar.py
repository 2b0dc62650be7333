"""Calendar utilities for caldate.

This module provides the leap-year predicate and the month and year
length lookups every other module builds on, plus ordinal conversion
used for weekday calculation.

This module is not part of the public API.
"""

from __future__ import annotations

from caldate._internal.constants import DAYS_IN_MONTH, THIRTY_ONE_DAY_MONTHS
from caldate.errors import ValidationError


def is_leap_year(year: int | str) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 400, OR
    - Divisible by 4 and NOT divisible by 100

    Args:
        year: The year to check. Numeric strings are coerced to int.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year("2024")
        True
    """
    if isinstance(year, str):
        year = int(year)
    return year % 400 == 0 or (year % 100 != 0 and year % 4 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValidationError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")

    if month in THIRTY_ONE_DAY_MONTHS:
        return 31
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 30


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month.

    Args:
        year: The year (for leap year calculation).
        month: The month (1-12).

    Returns:
        Number of days before the month in that year.
    """
    result = sum(DAYS_IN_MONTH[1:month])
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1, matching datetime.date.toordinal().
    Floor division keeps the formula correct for year 0 and below.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_day_of_week(ordinal: int) -> int:
    """Convert an ordinal to day of week (Monday=0, Sunday=6).

    0001-01-01 (ordinal 1) was a Monday.
    """
    return (ordinal - 1) % 7


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_day_of_week",
]
