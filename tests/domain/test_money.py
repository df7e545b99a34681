"""Tests for fundwarrior.domain.money pure functions."""

import pytest

from fundwarrior.domain.models import Money
from fundwarrior.domain.money import display_dollars, parse_dollars


class TestDisplayDollars:
    """Tests for display_dollars."""

    def test_whole_dollar(self) -> None:
        """Should render whole dollars with two zero cents."""
        assert display_dollars(100) == "$1.00"

    def test_cents_only(self) -> None:
        """Should pad dollars to at least one digit."""
        assert display_dollars(5) == "$0.05"

    def test_zero(self) -> None:
        """Should render zero as $0.00."""
        assert display_dollars(0) == "$0.00"

    def test_large_amount(self) -> None:
        """Should not group thousands."""
        assert display_dollars(100000) == "$1000.00"

    def test_negative_amount(self) -> None:
        """Should put the minus sign before the dollar symbol."""
        assert display_dollars(-5) == "-$0.05"
        assert display_dollars(-12345) == "-$123.45"

    @pytest.mark.parametrize("amount", [0, 1, 9, 10, 99, 100, 101, 12345, -1, -99, -100, -98765])
    def test_reparses_to_original_value(self, amount: int) -> None:
        """Removing '$' and '.' should give back the original integer."""
        text = display_dollars(amount)

        assert text[-2:].isdigit()
        assert text[-3] == "."
        assert int(text.replace("$", "").replace(".", "")) == amount


class TestParseDollars:
    """Tests for parse_dollars."""

    def test_whole_dollars(self) -> None:
        """Should treat a bare number as dollars."""
        assert parse_dollars("12") == Money(1200)

    def test_dollars_and_cents(self) -> None:
        """Should parse two decimal places as cents."""
        assert parse_dollars("12.34") == Money(1234)

    def test_single_decimal_place(self) -> None:
        """Should treat one decimal place as tenths of a dollar."""
        assert parse_dollars("12.5") == Money(1250)

    def test_cents_without_dollars(self) -> None:
        """Should accept a leading decimal point."""
        assert parse_dollars(".05") == Money(5)

    def test_dollar_sign_and_whitespace(self) -> None:
        """Should ignore a leading dollar sign and surrounding whitespace."""
        assert parse_dollars("  $1000.00 ") == Money(100000)

    def test_negative(self) -> None:
        """Should keep a leading minus sign."""
        assert parse_dollars("-3.00") == Money(-300)
        assert parse_dollars("-$0.05") == Money(-5)

    @pytest.mark.parametrize("text", ["", "abc", "1.234", "1.2.3", "$", ".", "12,00", "1e5"])
    def test_rejects_invalid_amounts(self, text: str) -> None:
        """Should raise ValueError for anything that is not a dollar amount."""
        with pytest.raises(ValueError):
            parse_dollars(text)
