"""Validation utilities for caldate.

The arithmetic functions take their inputs on trust; these checks are
for callers that want to reject a malformed date up front.

This module is not part of the public API.
"""

from __future__ import annotations

from caldate.errors import ValidationError


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Args:
        month: The month to validate.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from caldate._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid date.

    Any integer year is accepted.

    Raises:
        ValidationError: If the month or day is out of range.
    """
    if not isinstance(year, int) or not isinstance(month, int) or not isinstance(day, int):
        raise ValidationError(
            f"date components must be integers, got ({year!r}, {month!r}, {day!r})"
        )
    validate_month(month)
    validate_day(year, month, day)


__all__ = [
    "validate_month",
    "validate_day",
    "validate_date",
]
