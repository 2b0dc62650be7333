"""Formatting and parsing for caldate.

This module provides the yyyy-mm-dd wire format and the long display
text used by calendar headers.

Functions:
    parse_date: Parse a yyyy-mm-dd string (lenient, returns None on failure).
    format_date: Format a structured date as yyyy-mm-dd.
    month_name: English month name.
    day_name: English weekday name.
    day_of_week: Weekday index of a date.
    format_display: "Monday January 15, 2024" style text.
"""

from __future__ import annotations

from caldate.format.datestring import format_date, parse_date
from caldate.format.display import day_name, day_of_week, format_display, month_name

__all__: list[str] = [
    "parse_date",
    "format_date",
    "month_name",
    "day_name",
    "day_of_week",
    "format_display",
]
