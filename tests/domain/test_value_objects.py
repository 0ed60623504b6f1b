"""Unit tests for domain value objects."""

import pytest

from pims.domain.exceptions import ValidationError
from pims.domain.model.value_objects import Money, Quantity, format_idr


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(5000)
        assert m.amount == 5000
        assert m.currency == "IDR"

    def test_of_factory_from_string(self):
        assert Money.of("15000") == Money(15000)

    def test_of_factory_rejects_fractional_string(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("12.50")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(-1)

    def test_non_integer_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Money(12.5)

    def test_addition(self):
        assert Money(1000) + Money(250) == Money(1250)

    def test_multiplication_by_int(self):
        assert Money(5000) * 50 == Money(250000)

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money(5000) * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(10, "IDR") + Money(5, "USD")


class TestRupiahFormatting:

    def test_thousands_use_dots(self):
        assert format_idr(1250000) == "Rp 1.250.000"

    def test_small_amount(self):
        assert format_idr(500) == "Rp 500"

    def test_zero(self):
        assert format_idr(0) == "Rp 0"

    def test_money_str_has_no_decimals(self):
        assert str(Money(250000)) == "Rp 250.000"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity("5")

    def test_str(self):
        assert str(Quantity(7)) == "7"
