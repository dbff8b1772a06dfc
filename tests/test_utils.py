"""Tests for parsing utilities."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from ledgerbook.domain.errors import ValidationError
from ledgerbook.utils.amount_parser import parse_amount, to_amount
from ledgerbook.utils.date_parser import coerce_date, month_bounds, month_key, parse_date


class TestParseAmount:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1000", Decimal("1000")),
            ("1,234.56", Decimal("1234.56")),
            ("¥1000", Decimal("1000")),
            ("$12.50", Decimal("12.50")),
            ("-12.50", Decimal("-12.50")),
            ("(12.50)", Decimal("-12.50")),
            (" 7 ", Decimal("7")),
        ],
    )
    def test_formats(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", "12.3.4"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_amount(text)


class TestToAmount:
    def test_float_goes_through_str(self):
        assert to_amount(0.1) == Decimal("0.1")

    def test_int_and_string(self):
        assert to_amount(5) == Decimal("5")
        assert to_amount("1,000.00") == Decimal("1000.00")

    def test_negative_rejected_by_default(self):
        with pytest.raises(ValidationError, match="must not be negative"):
            to_amount(Decimal("-1"))

    def test_negative_allowed(self):
        assert to_amount("-3", allow_negative=True) == Decimal("-3")

    @pytest.mark.parametrize("value", [None, True, "abc"])
    def test_invalid_values(self, value):
        with pytest.raises(ValidationError):
            to_amount(value)

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            to_amount(Decimal("Infinity"))

    def test_sub_cent_rejected(self):
        with pytest.raises(ValidationError, match="two decimal places"):
            to_amount("12.345", "balance", allow_negative=True)

    def test_trailing_zeros_allowed(self):
        assert to_amount("12.3400") == Decimal("12.34")


class TestDates:
    def test_parse_iso(self):
        assert parse_date("2024-03-05") == date(2024, 3, 5)

    def test_parse_relative(self):
        assert parse_date("today") == date.today()
        assert parse_date("this month") == date.today().replace(day=1)

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            parse_date("banana")

    def test_coerce_date(self):
        assert coerce_date(datetime(2024, 1, 2, 13, 0)) == date(2024, 1, 2)
        assert coerce_date(date(2024, 1, 2)) == date(2024, 1, 2)
        assert coerce_date("2024-01-02") == date(2024, 1, 2)

    def test_month_key(self):
        assert month_key(date(2024, 3, 31)) == "2024-03"

    def test_month_bounds(self):
        assert month_bounds("2024-02") == (date(2024, 2, 1), date(2024, 2, 29))
        assert month_bounds("2023-12") == (date(2023, 12, 1), date(2023, 12, 31))

    def test_month_bounds_invalid(self):
        with pytest.raises(ValueError, match="expected YYYY-MM"):
            month_bounds("2024/13")
