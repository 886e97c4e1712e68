"""
Common Value Objects

Value objects used across the booking domain:
- Money: Exact decimal monetary amounts with currency
- DateRange: Half-open range of calendar dates (check-in to check-out)
"""

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from shared.domain.base import ValueObject

CENTS = Decimal('0.01')
SUPPORTED_CURRENCIES = ('USD', 'EUR', 'GBP')


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Money value object

    Amounts are always Decimal, never float, and are quantized to cents.
    """
    amount: Decimal
    currency: str = 'USD'

    def __post_init__(self):
        if isinstance(self.amount, float):
            raise TypeError("Money amount must be Decimal or int, not float")
        amount = Decimal(self.amount).quantize(CENTS, rounding=ROUND_HALF_UP)
        object.__setattr__(self, 'amount', amount)
        if amount < 0:
            raise ValueError("Amount cannot be negative")
        if self.currency not in SUPPORTED_CURRENCIES:
            raise ValueError(f"Unsupported currency: {self.currency}")

    def __mul__(self, factor: int | Decimal) -> 'Money':
        """Multiply money by a whole or decimal factor (floats are rejected)"""
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError("Can only multiply Money by int or Decimal")
        return Money(self.amount * factor, self.currency)

    def __str__(self):
        return f"{self.amount:,.2f} {self.currency}"

    def __repr__(self):
        return f"Money({self.amount}, '{self.currency}')"


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a range from start_date (inclusive) to end_date (exclusive).
    Used for stays, availability checks and price calculation.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.start_date >= self.end_date:
            raise ValueError(f"Start date ({self.start_date}) must be before end date ({self.end_date})")

    def overlaps_with(self, other: 'DateRange') -> bool:
        """
        Check if this range overlaps with another

        end_date is exclusive, so ranges that only touch do not overlap:
            - DateRange(10, 15) overlaps with DateRange(14, 20) -> True
            - DateRange(10, 15) overlaps with DateRange(15, 20) -> False
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")

        return (self.start_date < other.end_date and
                self.end_date > other.start_date)

    def contains(self, check_date: date) -> bool:
        return self.start_date <= check_date < self.end_date

    def __len__(self) -> int:
        """Number of nights in the range"""
        return (self.end_date - self.start_date).days

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"
