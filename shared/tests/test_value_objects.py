from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from shared.domain.value_objects import DateRange, Money


class TestMoney:
    def test_amount_is_quantized_to_cents(self):
        assert Money(Decimal("10.005")).amount == Decimal("10.01")
        assert Money(5).amount == Decimal("5.00")

    def test_float_is_rejected(self):
        with pytest.raises(TypeError):
            Money(0.1)

    def test_negative_amount_is_rejected(self):
        with pytest.raises(ValueError):
            Money(Decimal("-1.00"))

    def test_unsupported_currency(self):
        with pytest.raises(ValueError):
            Money(Decimal("1.00"), "KZT")

    def test_multiplication(self):
        assert Money(Decimal("0.10")) * 3 == Money(Decimal("0.30"))
        assert Money(Decimal("150.00")) * 3 == Money(Decimal("450.00"))

    def test_multiplication_rejects_float_and_bool(self):
        with pytest.raises(TypeError):
            Money(Decimal("1.00")) * 1.5
        with pytest.raises(TypeError):
            Money(Decimal("1.00")) * True

    def test_multiplication_keeps_currency(self):
        assert (Money(Decimal("2.50"), "EUR") * 2).currency == "EUR"


class TestDateRange:
    def test_nights(self):
        assert len(DateRange(date(2024, 7, 1), date(2024, 7, 4))) == 3

    def test_empty_or_reversed_range_is_rejected(self):
        with pytest.raises(ValueError):
            DateRange(date(2024, 7, 1), date(2024, 7, 1))
        with pytest.raises(ValueError):
            DateRange(date(2024, 7, 4), date(2024, 7, 1))

    def test_overlap_is_half_open(self):
        stay = DateRange(date(2024, 6, 10), date(2024, 6, 15))

        assert stay.overlaps_with(DateRange(date(2024, 6, 14), date(2024, 6, 20)))
        assert not stay.overlaps_with(DateRange(date(2024, 6, 15), date(2024, 6, 20)))
        assert not stay.overlaps_with(DateRange(date(2024, 6, 1), date(2024, 6, 10)))
        assert stay.overlaps_with(DateRange(date(2024, 6, 11), date(2024, 6, 12)))

    def test_contains_excludes_check_out_day(self):
        stay = DateRange(date(2024, 6, 10), date(2024, 6, 15))

        assert stay.contains(date(2024, 6, 10))
        assert not stay.contains(date(2024, 6, 15))
