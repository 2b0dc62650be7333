"""yyyy-mm-dd string conversion.

This module converts between CalendarDate values and the fixed-width
``yyyy-mm-dd`` string the calendar views pass around.

Functions:
    parse_date: Parse a yyyy-mm-dd string into a CalendarDate.
    format_date: Format a structured date as a yyyy-mm-dd string.

Both functions are lenient: malformed input yields None instead of an
exception, and neither validates month or day ranges. Use
CalendarDate.from_string() for a parser that raises.

Examples:
    >>> parse_date("2024-01-15")
    CalendarDate(year=2024, month=1, day=15)

    >>> format_date((2024, 1, 5))
    '2024-01-05'

    >>> parse_date("2024-1-5") is None
    True
"""

from __future__ import annotations

from typing import Any, Sequence, Union

from loguru import logger

from caldate._internal.constants import (
    DATE_STRING_LENGTH,
    DAY_SLICE,
    MAX_PADDED_YEAR,
    MONTH_SLICE,
    NEGATIVE_YEAR_PLACEHOLDER,
    YEAR_SLICE,
)
from caldate.core.date import CalendarDate

DateLike = Union[CalendarDate, Sequence[int]]


def parse_date(text: Any) -> DateLike | None:
    """Parse a yyyy-mm-dd string into a CalendarDate.

    A structured date (CalendarDate, tuple or list) is returned
    unchanged, so callers may pass either form.

    The year, month and day are read positionally from characters 0-3,
    5-6 and 8-9 and must be ASCII digits. The separators at positions 4
    and 7 are not checked.

    Args:
        text: A 10-character date string, or an already structured date.

    Returns:
        The parsed CalendarDate, the structured input itself, or None if
        the input is empty, not exactly 10 characters, or has a
        field that is not all ASCII digits.

    Examples:
        >>> parse_date("2024-02-29")
        CalendarDate(year=2024, month=2, day=29)

        >>> parse_date("2024/02/29")  # Separators are ignored
        CalendarDate(year=2024, month=2, day=29)

        >>> parse_date("") is None
        True
    """
    if isinstance(text, (CalendarDate, tuple, list)):
        return text
    if not text or not isinstance(text, str) or len(text) != DATE_STRING_LENGTH:
        logger.debug("Rejected date string {!r}: expected yyyy-mm-dd", text)
        return None

    fields = (text[YEAR_SLICE], text[MONTH_SLICE], text[DAY_SLICE])
    if not all(field.isascii() and field.isdigit() for field in fields):
        logger.debug("Rejected date string {!r}: non-numeric field", text)
        return None

    year, month, day = (int(field) for field in fields)
    return CalendarDate(year, month, day)


def _format_year(year: int) -> str:
    if year < 0:
        # TODO: emit a signed ISO 8601 year (-yyyy) once the views can display BCE dates
        return NEGATIVE_YEAR_PLACEHOLDER
    if year > MAX_PADDED_YEAR:
        return str(year)
    return f"{year:04d}"


def _format_two_digits(value: int) -> str:
    return str(value) if value > 9 else f"0{value}"


def format_date(date: Any) -> str | None:
    """Format a structured date as a yyyy-mm-dd string.

    Any sequence of at least three elements is accepted; only the first
    three are read, as (year, month, day).

    Padding rules:
        - Year: 4 digits for 0-9999; unpadded above 9999; the literal
          ``0000`` for negative years, which this format cannot hold.
        - Month, day: values up to 9 get a single leading ``0``.

    Month and day ranges are not validated.

    Args:
        date: A CalendarDate or (year, month, day) sequence.

    Returns:
        The formatted string, or None if date is None, not a sequence,
        shorter than three elements, or has a non-integer field.

    Examples:
        >>> format_date(CalendarDate(987, 3, 9))
        '0987-03-09'

        >>> format_date((12345, 12, 31))
        '12345-12-31'

        >>> format_date([2024, 1]) is None
        True
    """
    if date is None or isinstance(date, (str, bytes)) or not isinstance(date, Sequence):
        logger.debug("Cannot format {!r}: not a (year, month, day) sequence", date)
        return None
    if len(date) < 3:
        logger.debug("Cannot format {!r}: fewer than three fields", date)
        return None

    year, month, day = date[0], date[1], date[2]
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in (year, month, day)):
        logger.debug("Cannot format {!r}: fields must be integers", date)
        return None
    return f"{_format_year(year)}-{_format_two_digits(month)}-{_format_two_digits(day)}"


__all__ = [
    "parse_date",
    "format_date",
]
