"""Core value types for caldate.

This module exports the CalendarDate type.
"""

from __future__ import annotations

from caldate.core.date import CalendarDate

__all__: list[str] = [
    "CalendarDate",
]
