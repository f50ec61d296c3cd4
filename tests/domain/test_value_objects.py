"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from pos.domain.exceptions import InvalidQuantityError, ValidationError
from pos.domain.model.value_objects import (
    Money,
    Quantity,
    parse_amount,
    parse_discount_percentage,
    round_cents,
)


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_float_keeps_decimal_text(self):
        assert Money.of(9.9).amount == Decimal("9.9")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten dollars")

    def test_of_factory_rejects_nan(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of("NaN")

    def test_zero_is_allowed(self):
        assert Money.zero().amount == Decimal("0")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_addition(self):
        result = Money.of("10") + Money.of("5.50")
        assert result == Money.of("15.50")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_percent_keeps_full_precision(self):
        third = Money.of("10").percent(Decimal("33.333"))
        assert third.amount == Decimal("3.3333")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_str_rounds_half_up(self):
        assert str(Money.of("0.125")) == "$0.13"
        assert str(Money.of("2.675")) == "$2.68"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


def test_round_cents():
    assert round_cents(Decimal("1.005")) == Decimal("1.01")
    assert str(round_cents(Decimal("10"))) == "10.00"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_large_quantity_has_no_upper_bound(self):
        assert Quantity(10_000).value == 10_000

    def test_zero_rejected(self):
        with pytest.raises(InvalidQuantityError, match="greater than 0"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(InvalidQuantityError, match="greater than 0"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(InvalidQuantityError, match="integer"):
            Quantity(1.5)

    def test_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            Quantity(0)

    def test_str(self):
        assert str(Quantity(7)) == "7"


# ── Discount parsing ─────────────────────────────────────────────────────────


class TestParseDiscountPercentage:

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_blank_means_no_discount(self, text):
        assert parse_discount_percentage(text) == Decimal("0")

    @pytest.mark.parametrize("text", ["ten", "10%", "1,5", "NaN", "sNaN"])
    def test_malformed_means_no_discount(self, text):
        assert parse_discount_percentage(text) == Decimal("0")

    def test_number_is_parsed(self):
        assert parse_discount_percentage(" 12.5 ") == Decimal("12.5")

    def test_out_of_range_is_passed_through(self):
        assert parse_discount_percentage("150") == Decimal("150")
        assert parse_discount_percentage("-5") == Decimal("-5")

    @pytest.mark.parametrize("text", ["Infinity", "-Infinity", "inf"])
    def test_infinity_is_passed_through_for_billing_to_reject(self, text):
        value = parse_discount_percentage(text)
        assert value.is_infinite()


# ── Amount parsing ───────────────────────────────────────────────────────────


class TestParseAmount:

    def test_number_is_parsed(self):
        assert parse_amount(" 20.50 ") == Decimal("20.50")

    def test_negative_is_passed_through(self):
        assert parse_amount("-5") == Decimal("-5")

    @pytest.mark.parametrize("text", ["", "twenty", "1,5"])
    def test_malformed_rejected(self, text):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            parse_amount(text)

    @pytest.mark.parametrize("text", ["NaN", "Infinity", "-inf"])
    def test_non_finite_rejected(self, text):
        with pytest.raises(ValidationError, match="finite"):
            parse_amount(text)
