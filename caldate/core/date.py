"""CalendarDate value type.

This module provides CalendarDate, the (year, month, day) triple every
caldate operation consumes and produces.
"""

from __future__ import annotations

from typing import Any, NamedTuple, Sequence

from caldate._internal.calendar import (
    days_before_month,
    days_in_month,
    is_leap_year,
    ordinal_to_day_of_week,
    ymd_to_ordinal,
)
from caldate._internal.validation import validate_date
from caldate.errors import ParseError, ValidationError


class CalendarDate(NamedTuple):
    """A calendar date in the proleptic Gregorian calendar.

    CalendarDate is an immutable ordered triple, so it unpacks like a
    tuple and compares equal to ``(year, month, day)``. Construction
    does not validate: the arithmetic functions accept any triple, and
    only offset_date and days_between require the day to be in range
    for its month. Use validate() or is_valid() to check explicitly.

    Attributes:
        year: The year (any integer).
        month: The month (1-12).
        day: The day of the month.

    Examples:
        >>> d = CalendarDate(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> CalendarDate(2024, 1, 15) == (2024, 1, 15)
        True
    """

    year: int
    month: int
    day: int

    @classmethod
    def coerce(cls, value: Sequence[int]) -> CalendarDate:
        """Build a CalendarDate from any sequence of at least three ints.

        A CalendarDate is returned as-is. Extra trailing elements are
        ignored.

        Raises:
            ValidationError: If value has fewer than three elements.

        Examples:
            >>> CalendarDate.coerce([2024, 2, 29])
            CalendarDate(year=2024, month=2, day=29)
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) or len(value) < 3:
            raise ValidationError(
                f"expected a (year, month, day) sequence, got {value!r}"
            )
        return cls(value[0], value[1], value[2])

    @classmethod
    def from_string(cls, text: str) -> CalendarDate:
        """Parse a yyyy-mm-dd string, raising on failure.

        This is the strict counterpart of parse_date(): it raises where
        parse_date() returns None. Ranges are still not validated.

        Args:
            text: A 10-character yyyy-mm-dd string.

        Returns:
            The parsed CalendarDate.

        Raises:
            ParseError: If the string cannot be parsed.

        Examples:
            >>> CalendarDate.from_string("2024-01-15")
            CalendarDate(year=2024, month=1, day=15)

            >>> CalendarDate.from_string("2024-1-15")
            Traceback (most recent call last):
            ...
            caldate.errors.ParseError: Invalid date string: '2024-1-15'. Expected yyyy-mm-dd
        """
        from caldate.format.datestring import parse_date

        result = parse_date(text) if isinstance(text, str) else None
        if result is None:
            raise ParseError(f"Invalid date string: {text!r}. Expected yyyy-mm-dd")
        return result

    def to_string(self) -> str:
        """Return the date as a yyyy-mm-dd string.

        Negative years are written as 0000.

        Examples:
            >>> CalendarDate(2024, 1, 5).to_string()
            '2024-01-05'
        """
        from caldate.format.datestring import format_date

        return format_date(self)  # type: ignore[return-value]

    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self.year)

    def days_in_month(self) -> int:
        """Return the number of days in this date's month."""
        return days_in_month(self.year, self.month)

    def validate(self) -> CalendarDate:
        """Check that the month and day are in range.

        Returns:
            self, so the call can be chained.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> CalendarDate(2023, 2, 29).validate()
            Traceback (most recent call last):
            ...
            caldate.errors.ValidationError: day must be between 1 and 28 for 2023-02, got 29
        """
        validate_date(self.year, self.month, self.day)
        return self

    def is_valid(self) -> bool:
        """Return True if validate() would succeed."""
        try:
            self.validate()
        except ValidationError:
            return False
        return True

    def day_of_week(self) -> int:
        """Return the day of the week (Monday=0, Sunday=6).

        Examples:
            >>> CalendarDate(2024, 1, 15).day_of_week()  # Monday
            0
        """
        return ordinal_to_day_of_week(ymd_to_ordinal(self.year, self.month, self.day))

    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        return days_before_month(self.year, self.month) + self.day

    def add_days(self, days: int) -> CalendarDate:
        """Return a new date offset by the given number of days.

        Examples:
            >>> CalendarDate(2024, 2, 28).add_days(1)
            CalendarDate(year=2024, month=2, day=29)
        """
        from caldate.arithmetic.offset import offset_date

        return offset_date(self, days)  # type: ignore[return-value]

    def days_until(self, other: Any) -> int:
        """Return the exclusive day count from this date to other.

        Positive when other is later. See days_between().
        """
        from caldate.arithmetic.difference import days_between

        return days_between(other, self)

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["CalendarDate"]
