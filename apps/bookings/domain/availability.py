"""
Availability Rules

Pure rules of the booking engine, free of any persistence:

1. Request validation (dates, guest count, capacity), fail fast
2. Overlap detection with half-open date ranges
3. Total price = nightly price x nights, in exact decimals

The persistence side (row lock, overlap query, insert) lives in the
command handlers; this module only decides.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, List

from shared.domain.value_objects import DateRange, Money

from .exceptions import UnavailableError, ValidationError

DATES_REQUIRED = "dates required"
CHECK_IN_IN_PAST = "check-in in past"
CHECKOUT_NOT_AFTER_CHECKIN = "checkout before or equal to checkin"
INVALID_GUEST_COUNT = "invalid guest count"
EXCEEDS_CAPACITY = "exceeds capacity"
ROOM_NOT_AVAILABLE = "room not available for dates"
STAY_TOO_LONG = "stay exceeds maximum length"
TOTAL_PRICE_TOO_LARGE = "total price exceeds limit"

MAX_STAY_NIGHTS = 365
# Largest value of Booking.total_price (max_digits=10, decimal_places=2)
MAX_TOTAL_PRICE = Decimal("99999999.99")


def validate_stay_dates(check_in: date | None, check_out: date | None, today: date) -> DateRange:
    """Validate the requested stay and return it as a DateRange."""
    if check_in is None or check_out is None:
        raise ValidationError(DATES_REQUIRED)
    if check_in < today:
        raise ValidationError(CHECK_IN_IN_PAST)
    if check_out <= check_in:
        raise ValidationError(CHECKOUT_NOT_AFTER_CHECKIN)
    dates = DateRange(check_in, check_out)
    if len(dates) > MAX_STAY_NIGHTS:
        raise ValidationError(STAY_TOO_LONG)
    return dates


def validate_booking_request(
    check_in: date | None,
    check_out: date | None,
    guests: int | None,
    capacity: int,
    today: date,
) -> DateRange:
    """
    Run validation steps in order, failing on the first violation

    Returns the requested DateRange when the request is well formed.
    Availability is checked separately, under the room lock.
    """
    dates = validate_stay_dates(check_in, check_out, today)
    if guests is None or guests < 1:
        raise ValidationError(INVALID_GUEST_COUNT)
    if guests > capacity:
        raise ValidationError(EXCEEDS_CAPACITY)
    return dates


def find_overlapping(existing: Iterable[DateRange], requested: DateRange) -> List[DateRange]:
    """Existing ranges that intersect the requested one ([a, b) semantics)"""
    return [dates for dates in existing if dates.overlaps_with(requested)]


def ensure_available(existing: Iterable[DateRange], requested: DateRange) -> None:
    if find_overlapping(existing, requested):
        raise UnavailableError(ROOM_NOT_AVAILABLE)


def calculate_total_price(nightly_price: Decimal, dates: DateRange, currency: str = 'USD') -> Money:
    """
    Total price for a stay

    nights = check_out - check_in in whole days (at least 1 for a valid range).
    Decimal arithmetic only, so 150.00 x 3 is exactly 450.00.
    Totals that do not fit the stored price column are rejected.
    """
    total = Money(Decimal(nightly_price), currency) * len(dates)
    if total.amount > MAX_TOTAL_PRICE:
        raise ValidationError(TOTAL_PRICE_TOO_LARGE)
    return total
