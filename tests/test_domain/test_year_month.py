"""Tests for YearMonth parsing and formatting"""
import pytest
from datetime import date

from app.domain.year_month import (
    YearMonth, InvalidDateFormat, parse_year_month, format_year_month,
)


class TestParse:
    def test_parse_valid(self):
        assert parse_year_month("03-2024") == YearMonth(2024, 3)

    def test_parse_january_and_december(self):
        assert parse_year_month("01-1999") == YearMonth(1999, 1)
        assert parse_year_month("12-2030") == YearMonth(2030, 12)

    @pytest.mark.parametrize("text", [
        "13-2024",   # месяц вне диапазона
        "00-2024",
        "2024-01",   # ISO-порядок
        "1-2024",    # месяц без ведущего нуля
        "01-24",     # год из 2 цифр
        "01/2024",   # другой разделитель
        "01-2024-",
        " 01-2024",
        "01-2024\n",
        "",
        "AB-CDEF",
        "01-0000",
    ])
    def test_parse_rejects_malformed(self, text):
        with pytest.raises(InvalidDateFormat):
            parse_year_month(text)

    def test_parse_none_rejected(self):
        with pytest.raises(InvalidDateFormat):
            parse_year_month(None)

    def test_invalid_date_format_is_value_error(self):
        with pytest.raises(ValueError):
            parse_year_month("13-2024")


class TestFormat:
    def test_format_zero_pads_month(self):
        assert format_year_month(YearMonth(2024, 3)) == "03-2024"

    def test_format_none_is_open_bound(self):
        assert format_year_month(None) is None

    @pytest.mark.parametrize("value", [
        YearMonth(2024, 1), YearMonth(2024, 12), YearMonth(1, 7), YearMonth(9999, 10),
    ])
    def test_round_trip(self, value):
        assert parse_year_month(format_year_month(value)) == value


class TestYearMonth:
    def test_ordering_by_year_then_month(self):
        assert YearMonth(2023, 12) < YearMonth(2024, 1)
        assert YearMonth(2024, 2) > YearMonth(2024, 1)
        assert max(YearMonth(2024, 5), YearMonth(2023, 11)) == YearMonth(2024, 5)

    def test_month_out_of_range_rejected(self):
        with pytest.raises(InvalidDateFormat):
            YearMonth(2024, 13)

    def test_from_date_drops_day(self):
        assert YearMonth.from_date(date(2024, 3, 17)) == YearMonth(2024, 3)

    def test_to_date_is_first_of_month(self):
        assert YearMonth(2024, 3).to_date() == date(2024, 3, 1)
