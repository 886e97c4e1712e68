"""
Booking Domain Events

Events that represent things that have happened in the booking domain.
These are published after successful transaction commits.
"""

from dataclasses import dataclass

from shared.domain.base import DomainEvent
from shared.domain.value_objects import DateRange, Money


@dataclass
class BookingCreated(DomainEvent):
    """
    Event: A new booking was created (status CONFIRMED)

    Triggers:
    - Send confirmation email to guest
    """
    booking_id: int = None
    room_id: int = None
    user_id: int = None
    dates: DateRange = None
    total_price: Money = None


@dataclass
class BookingCancelled(DomainEvent):
    """
    Event: Booking was cancelled by its owner (CONFIRMED -> CANCELLED)

    Triggers:
    - Send cancellation email to guest
    """
    booking_id: int = None
    room_id: int = None
    user_id: int = None
    dates: DateRange = None


@dataclass
class BookingCompleted(DomainEvent):
    """Event: Guest has checked out (CONFIRMED -> COMPLETED)"""
    booking_id: int = None
    room_id: int = None
    user_id: int = None
