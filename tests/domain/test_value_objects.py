"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from gas.domain.exceptions import ValidationError
from gas.domain.model.value_objects import Money, Quantity, parse_percentage, to_decimal


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "EUR"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    @pytest.mark.parametrize("raw", ["NaN", "Infinity", "-inf"])
    def test_non_finite_amount_rejected(self, raw):
        with pytest.raises(ValidationError, match="must be finite"):
            Money(Decimal(raw))

    def test_of_factory_rejects_nan(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of("nan")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "15.00 €"
        assert str(Money(Decimal("9.5"), "USD")) == "9.50 USD"

    def test_is_zero(self):
        assert Money.of("0").is_zero
        assert not Money.of("0.01").is_zero


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_fractional_quantity(self):
        assert Quantity(Decimal("0.5")).value == Decimal("0.5")

    def test_int_is_coerced(self):
        assert Quantity(3).value == Decimal("3")

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(Decimal("0"))

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity.of("-2")

    @pytest.mark.parametrize("raw", ["nan", "Infinity"])
    def test_non_finite_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid quantity"):
            Quantity.of(raw)

    def test_non_finite_decimal_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Quantity(Decimal("NaN"))

    def test_addition(self):
        assert Quantity.of("1.5") + Quantity.of("2") == Quantity.of("3.5")


# ── Percentages and decimals ─────────────────────────────────────────────────


class TestParsePercentage:

    @pytest.mark.parametrize("raw", [None, ""])
    def test_absent_discount(self, raw):
        assert parse_percentage(raw) is None

    def test_valid_percentage(self):
        assert parse_percentage("12.5") == Decimal("12.5")

    @pytest.mark.parametrize("raw", ["-1", "100.01", "250"])
    def test_out_of_range_rejected(self, raw):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            parse_percentage(raw)

    @pytest.mark.parametrize("raw", ["nan", "NaN", "Infinity", "-Infinity"])
    def test_non_finite_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid percentage"):
            parse_percentage(raw)

    def test_not_a_number_rejected(self):
        with pytest.raises(ValidationError, match="Invalid percentage"):
            parse_percentage("abc")


class TestToDecimal:

    def test_empty_is_zero(self):
        assert to_decimal("") == Decimal("0")
        assert to_decimal(None) == Decimal("0")

    @pytest.mark.parametrize("raw", ["NaN", "sNaN", "Infinity", float("inf")])
    def test_non_finite_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid max_available"):
            to_decimal(raw, "max_available")

    def test_float_goes_through_str(self):
        assert to_decimal(0.1) == Decimal("0.1")
