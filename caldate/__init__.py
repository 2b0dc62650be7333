"""Caldate: date arithmetic for a calendar front-end.

Caldate converts between ``yyyy-mm-dd`` strings and structured dates,
moves dates by whole days, and counts the whole days between two dates,
all in the proleptic Gregorian calendar. Every function is pure and
safe to call from any thread.

Core Types:
    CalendarDate: Immutable (year, month, day) triple

Format Functions:
    parse_date: Parse a yyyy-mm-dd string (None on failure)
    format_date: Format a structured date as yyyy-mm-dd (None on failure)
    format_display: "Monday January 15, 2024" header text

Arithmetic Functions:
    offset_date: Date a signed number of days away
    days_between: Exclusive whole-day count between two dates

Exceptions:
    CaldateError: Base exception
    ValidationError: Out-of-range date component
    ParseError: Strict parse failure

Logging goes through loguru and is disabled for this package by
default; call ``logger.enable("caldate")`` to see it.

Example:
    >>> from caldate import parse_date, offset_date, format_date
    >>> format_date(offset_date(parse_date("2024-02-28"), 1))
    '2024-02-29'
"""

from __future__ import annotations

from loguru import logger

__version__ = "0.1.0"

# Core types
from caldate.core.date import CalendarDate

# Calendar lookups
from caldate._internal.calendar import days_in_month, days_in_year, is_leap_year

# Exceptions
from caldate.errors import CaldateError, ParseError, ValidationError

# Format functions
from caldate.format import (
    day_name,
    day_of_week,
    format_date,
    format_display,
    month_name,
    parse_date,
)

# Arithmetic functions
from caldate.arithmetic import days_between, next_date, offset_date, previous_date

logger.disable("caldate")

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDate",
    # Calendar lookups
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    # Exceptions
    "CaldateError",
    "ValidationError",
    "ParseError",
    # Format functions
    "parse_date",
    "format_date",
    "month_name",
    "day_name",
    "day_of_week",
    "format_display",
    # Arithmetic functions
    "offset_date",
    "next_date",
    "previous_date",
    "days_between",
]
