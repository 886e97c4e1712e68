"""Unit tests for the availability rules (no database)."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from apps.bookings.domain import availability
from apps.bookings.domain.exceptions import UnavailableError, ValidationError
from shared.domain.value_objects import DateRange

TODAY = date(2024, 6, 1)


def test_validation_checks_dates_before_guests():
    with pytest.raises(ValidationError) as excinfo:
        availability.validate_booking_request(date(2024, 7, 4), date(2024, 7, 1), 99, 2, TODAY)

    assert excinfo.value.reason == availability.CHECKOUT_NOT_AFTER_CHECKIN


def test_past_check_in_reported_before_date_order():
    with pytest.raises(ValidationError) as excinfo:
        availability.validate_booking_request(date(2024, 5, 1), date(2024, 4, 1), 1, 2, TODAY)

    assert excinfo.value.reason == availability.CHECK_IN_IN_PAST


def test_valid_request_returns_range():
    dates = availability.validate_booking_request(date(2024, 7, 1), date(2024, 7, 4), 2, 2, TODAY)

    assert dates == DateRange(date(2024, 7, 1), date(2024, 7, 4))
    assert len(dates) == 3


def test_find_overlapping_uses_half_open_ranges():
    existing = [
        DateRange(date(2024, 6, 10), date(2024, 6, 15)),
        DateRange(date(2024, 6, 20), date(2024, 6, 25)),
    ]

    assert availability.find_overlapping(existing, DateRange(date(2024, 6, 15), date(2024, 6, 20))) == []
    assert availability.find_overlapping(existing, DateRange(date(2024, 6, 14), date(2024, 6, 21))) == existing


def test_ensure_available_raises_on_overlap():
    existing = [DateRange(date(2024, 6, 10), date(2024, 6, 15))]

    with pytest.raises(UnavailableError):
        availability.ensure_available(existing, DateRange(date(2024, 6, 14), date(2024, 6, 20)))

    availability.ensure_available(existing, DateRange(date(2024, 6, 15), date(2024, 6, 20)))


@pytest.mark.parametrize(
    ("nightly", "nights", "expected"),
    [
        ("150.00", 3, "450.00"),
        ("89.99", 3, "269.97"),
        ("0.10", 3, "0.30"),
        ("249.99", 1, "249.99"),
    ],
)
def test_total_price_is_exact(nightly, nights, expected):
    dates = DateRange(date(2024, 7, 1), date(2024, 7, 1 + nights))

    total = availability.calculate_total_price(Decimal(nightly), dates)

    assert total.amount == Decimal(expected)


def test_total_price_bound_is_inclusive():
    one_night = DateRange(date(2024, 7, 1), date(2024, 7, 2))

    assert availability.calculate_total_price(Decimal("99999999.99"), one_night).amount == Decimal("99999999.99")
    with pytest.raises(ValidationError) as excinfo:
        availability.calculate_total_price(Decimal("100000000.00"), one_night)
    assert excinfo.value.reason == availability.TOTAL_PRICE_TOO_LARGE


def test_stay_length_is_capped():
    longest = availability.validate_stay_dates(date(2024, 7, 1), date(2025, 7, 1), TODAY)

    assert len(longest) == availability.MAX_STAY_NIGHTS
    with pytest.raises(ValidationError) as excinfo:
        availability.validate_stay_dates(date(2024, 7, 1), date(2025, 7, 2), TODAY)
    assert excinfo.value.reason == availability.STAY_TOO_LONG
