"""Tests for the CalendarDate value type."""

from __future__ import annotations

import pytest

from caldate import CalendarDate
from caldate.errors import ParseError, ValidationError


class TestCalendarDateConstruction:
    """Tests for construction and coercion."""

    def test_fields(self) -> None:
        d = CalendarDate(2024, 1, 15)
        assert d.year == 2024
        assert d.month == 1
        assert d.day == 15

    def test_unpacks_like_a_tuple(self) -> None:
        year, month, day = CalendarDate(2024, 1, 15)
        assert (year, month, day) == (2024, 1, 15)

    def test_value_equality(self) -> None:
        assert CalendarDate(2024, 1, 15) == CalendarDate(2024, 1, 15)
        assert CalendarDate(2024, 1, 15) == (2024, 1, 15)
        assert CalendarDate(2024, 1, 15) != CalendarDate(2024, 1, 16)
        assert hash(CalendarDate(2024, 1, 15)) == hash((2024, 1, 15))

    def test_immutable(self) -> None:
        d = CalendarDate(2024, 1, 15)
        with pytest.raises(AttributeError):
            d.day = 16  # type: ignore[misc]

    def test_construction_does_not_validate(self) -> None:
        d = CalendarDate(2024, 2, 30)
        assert d.day == 30

    def test_ordering(self) -> None:
        assert CalendarDate(2023, 12, 31) < CalendarDate(2024, 1, 1)

    def test_coerce_sequence(self) -> None:
        assert CalendarDate.coerce([2024, 2, 29]) == CalendarDate(2024, 2, 29)
        assert CalendarDate.coerce((2024, 2, 29, "extra")) == (2024, 2, 29)

    def test_coerce_returns_same_instance(self) -> None:
        d = CalendarDate(2024, 2, 29)
        assert CalendarDate.coerce(d) is d

    @pytest.mark.parametrize("value", [[2024, 2], "2024-02-29"])
    def test_coerce_rejects_short_or_string(self, value: object) -> None:
        with pytest.raises(ValidationError, match="expected a \\(year, month, day\\)"):
            CalendarDate.coerce(value)  # type: ignore[arg-type]


class TestCalendarDateFromString:
    """Tests for the strict parser."""

    def test_valid(self) -> None:
        assert CalendarDate.from_string("1999-12-31") == (1999, 12, 31)

    @pytest.mark.parametrize("text", ["", "1999-12-3", "abcd-ef-gh"])
    def test_invalid_raises(self, text: str) -> None:
        with pytest.raises(ParseError, match="Invalid date string"):
            CalendarDate.from_string(text)

    def test_structured_input_raises(self) -> None:
        with pytest.raises(ParseError):
            CalendarDate.from_string([1999, 12, 31])  # type: ignore[arg-type]


class TestCalendarDateValidation:
    """Tests for validate() and is_valid()."""

    def test_valid_date(self) -> None:
        d = CalendarDate(2024, 2, 29)
        assert d.validate() is d
        assert d.is_valid() is True

    def test_invalid_day(self) -> None:
        d = CalendarDate(2023, 2, 29)
        assert d.is_valid() is False
        with pytest.raises(ValidationError, match="day must be between 1 and 28"):
            d.validate()

    def test_invalid_month(self) -> None:
        assert CalendarDate(2024, 13, 1).is_valid() is False
        assert CalendarDate(2024, 0, 1).is_valid() is False


class TestCalendarDateProperties:
    """Tests for derived values."""

    def test_is_leap_year(self) -> None:
        assert CalendarDate(2024, 1, 1).is_leap_year() is True
        assert CalendarDate(1900, 1, 1).is_leap_year() is False

    def test_days_in_month(self) -> None:
        assert CalendarDate(2024, 2, 1).days_in_month() == 29
        assert CalendarDate(2024, 9, 1).days_in_month() == 30

    def test_day_of_week(self) -> None:
        assert CalendarDate(2024, 1, 15).day_of_week() == 0  # Monday
        assert CalendarDate(2024, 1, 21).day_of_week() == 6  # Sunday
        assert CalendarDate(2000, 2, 29).day_of_week() == 1  # Tuesday

    def test_day_of_year(self) -> None:
        assert CalendarDate(2024, 1, 1).day_of_year() == 1
        assert CalendarDate(2024, 12, 31).day_of_year() == 366
        assert CalendarDate(2023, 12, 31).day_of_year() == 365

    def test_str_uses_wire_format(self) -> None:
        assert str(CalendarDate(2024, 3, 9)) == "2024-03-09"
        assert str(CalendarDate(-44, 3, 15)) == "0000-03-15"

    def test_repr(self) -> None:
        assert repr(CalendarDate(2024, 3, 9)) == "CalendarDate(year=2024, month=3, day=9)"
