"""Caldate exception hierarchy.

All caldate-specific exceptions inherit from CaldateError. The lenient
entry points (parse_date, format_date) never raise; these exceptions
come only from the strict ones.
"""

from __future__ import annotations


class CaldateError(Exception):
    """Base exception for all caldate errors."""

    pass


class ValidationError(CaldateError):
    """Invalid date component.

    Raised when a structured date is checked explicitly and one of its
    fields is out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
    """

    pass


class ParseError(CaldateError):
    """Failed to parse a date string.

    Raised by the strict parser when a string is not a 10-character
    yyyy-mm-dd value.

    Examples:
        - Wrong length
        - Non-digit characters in the year, month or day slots
    """

    pass


__all__ = [
    "CaldateError",
    "ValidationError",
    "ParseError",
]
