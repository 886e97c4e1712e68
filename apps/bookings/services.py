"""Domain services for booking workflows.

Thin entry points used by views, tasks and the admin. Each call builds
its command handler with the ORM repositories and runs it.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore

from shared.domain.value_objects import Money

from .application.command_handlers import (
    CancelBookingCommand,
    CancelBookingHandler,
    CompleteBookingCommand,
    CompleteBookingHandler,
    CreateBookingCommand,
    CreateBookingHandler,
)
from .domain import availability
from .models import Booking
from .repositories import BookingRepository, RoomRepository


def create_booking(
    user,
    room,
    check_in: date | None,
    check_out: date | None,
    guests: int | None,
    special_request: str = "",
) -> Booking:
    """Validate, check availability under the room lock and persist a booking.

    Raises ValidationError, UnavailableError or NotFoundError; nothing is
    persisted when an error is raised.
    """

    handler = CreateBookingHandler(BookingRepository(), RoomRepository())
    return handler.handle(
        CreateBookingCommand(
            user_id=user.pk,
            room_id=room.pk,
            check_in=check_in,
            check_out=check_out,
            guests=guests,
            capacity=room.capacity,
            special_requests=special_request,
        )
    )


def cancel_booking(booking_id: int, requesting_user_id: int) -> Booking:
    """Cancel a CONFIRMED booking owned by the requesting user."""

    handler = CancelBookingHandler(BookingRepository())
    return handler.handle(
        CancelBookingCommand(booking_id=booking_id, requesting_user_id=requesting_user_id)
    )


def complete_booking(booking_id: int) -> Booking:
    handler = CompleteBookingHandler(BookingRepository())
    return handler.handle(CompleteBookingCommand(booking_id=booking_id))


def list_user_bookings(user_id: int) -> List[Booking]:
    """All bookings of the user in every status, newest first."""

    return BookingRepository().find_by_user_order_by_created_desc(user_id)


def get_booking_by_id(booking_id: int) -> Optional[Booking]:
    return BookingRepository().find_by_id(booking_id)


def list_room_bookings(room_id: int) -> List[Booking]:
    return BookingRepository().find_by_room(room_id)


def list_active_bookings() -> List[Booking]:
    return BookingRepository().find_active()


def quote_price(room, check_in: date | None, check_out: date | None) -> Money:
    """Price a stay without booking it; availability is not checked."""

    dates = availability.validate_stay_dates(check_in, check_out, today=timezone.localdate())
    return availability.calculate_total_price(room.price, dates, settings.BOOKING_CURRENCY)
