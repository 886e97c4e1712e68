"""
Booking Command Handlers

These are the use cases for the booking domain.
They orchestrate domain operations within transactions.

Commands:
- CreateBookingCommand: Create a new booking
- CancelBookingCommand: Cancel a booking on behalf of its owner
- CompleteBookingCommand: Complete a booking after check-out
"""

from dataclasses import dataclass
from datetime import date
from typing import Callable
import logging

from django.conf import settings
from django.db import IntegrityError
from django.utils import timezone

from shared.application.uow import DjangoUnitOfWork
from apps.bookings.domain import availability
from apps.bookings.domain.events import BookingCancelled, BookingCompleted, BookingCreated
from apps.bookings.domain.exceptions import (
    AuthorizationError,
    BookingError,
    NotFoundError,
    UnavailableError,
)
from apps.bookings.models import Booking
from apps.bookings.repositories import BookingRepository, RoomRepository

logger = logging.getLogger(__name__)

OVERLAP_CONSTRAINT_NAME = "booking_no_overlapping_confirmed"


# ===== Commands =====

@dataclass
class CreateBookingCommand:
    """
    Command to create a new booking

    This is the primary entry point for creating bookings.
    """
    user_id: int
    room_id: int
    check_in: date | None
    check_out: date | None
    guests: int | None
    capacity: int
    special_requests: str = ''


@dataclass
class CancelBookingCommand:
    """Command to cancel a booking"""
    booking_id: int
    requesting_user_id: int


@dataclass
class CompleteBookingCommand:
    """Command to complete a booking (check out)"""
    booking_id: int


# ===== Command Handlers =====

class CreateBookingHandler:
    """
    Handler for CreateBooking command

    Strategy:
    1. Validate the request (dates, guests, capacity) without touching the database
    2. Start database transaction (atomic)
    3. Lock the room row (SELECT FOR UPDATE), the per-room lock
    4. Query CONFIRMED bookings of the room overlapping the requested dates
    5. Compute total price and insert the booking
    6. Commit transaction, then publish BookingCreated
    7. PostgreSQL EXCLUDE constraint as final safety net
    """

    def __init__(self, booking_repo: BookingRepository, room_repo: RoomRepository,
                 clock: Callable[[], date] | None = None):
        self.booking_repo = booking_repo
        self.room_repo = room_repo
        self.clock = clock or timezone.localdate

    def handle(self, command: CreateBookingCommand) -> Booking:
        """
        Handle booking creation

        Returns: The persisted Booking, including its generated id

        Raises:
            ValidationError: malformed dates, guest count or capacity
            UnavailableError: overlapping CONFIRMED booking exists
            NotFoundError: room disappeared before it could be locked
        """
        logger.info(
            f"Creating booking for room {command.room_id}, "
            f"user {command.user_id}, dates {command.check_in} - {command.check_out}"
        )

        try:
            dates = availability.validate_booking_request(
                command.check_in,
                command.check_out,
                command.guests,
                command.capacity,
                today=self.clock(),
            )
            booking = self._reserve(command, dates)
        except BookingError as exc:
            logger.info(f"Booking rejected for room {command.room_id}: {exc.kind} ({exc.reason})")
            raise

        logger.info(
            f"Booking created successfully: #{booking.pk} "
            f"(room {booking.room_id}, {booking.nights} nights, total {booking.total_price})"
        )
        return booking

    def _reserve(self, command: CreateBookingCommand, dates) -> Booking:
        try:
            with DjangoUnitOfWork() as uow:
                room = self.room_repo.find_room_by_id(command.room_id, lock=True)
                if room is None:
                    raise NotFoundError(f"room {command.room_id} not found")

                existing = self.booking_repo.find_by_room_with_overlap(
                    room.pk, dates.start_date, dates.end_date
                )
                availability.ensure_available((b.date_range for b in existing), dates)

                total_price = availability.calculate_total_price(
                    room.price, dates, settings.BOOKING_CURRENCY
                )
                booking = self.booking_repo.save(Booking(
                    user_id=command.user_id,
                    room=room,
                    check_in=dates.start_date,
                    check_out=dates.end_date,
                    guests=command.guests,
                    total_price=total_price.amount,
                    special_requests=command.special_requests or '',
                    status=Booking.Status.CONFIRMED,
                ))

                uow.add_event(BookingCreated(
                    aggregate_id=booking.pk,
                    booking_id=booking.pk,
                    room_id=room.pk,
                    user_id=command.user_id,
                    dates=dates,
                    total_price=total_price,
                ))
        except IntegrityError as exc:
            if OVERLAP_CONSTRAINT_NAME in str(exc):
                raise UnavailableError(availability.ROOM_NOT_AVAILABLE) from exc
            raise

        return booking


class CancelBookingHandler:
    """Handler for cancelling booking"""

    def __init__(self, booking_repo: BookingRepository):
        self.booking_repo = booking_repo

    def handle(self, command: CancelBookingCommand) -> Booking:
        """Cancel booking; its dates become free for new bookings"""
        logger.info(f"Cancelling booking {command.booking_id} for user {command.requesting_user_id}")

        with DjangoUnitOfWork() as uow:
            booking = self.booking_repo.find_by_id(command.booking_id, lock=True)
            if booking is None:
                raise NotFoundError(f"booking {command.booking_id} not found")

            if booking.user_id != command.requesting_user_id:
                raise AuthorizationError("booking belongs to another user")

            # FSM transition CONFIRMED -> CANCELLED, InvalidStateError otherwise
            booking.mark_cancelled()

            uow.add_event(BookingCancelled(
                aggregate_id=booking.pk,
                booking_id=booking.pk,
                room_id=booking.room_id,
                user_id=booking.user_id,
                dates=booking.date_range,
            ))

        logger.info(f"Booking #{booking.pk} cancelled successfully")
        return booking


class CompleteBookingHandler:
    """Handler for completing booking (check out)"""

    def __init__(self, booking_repo: BookingRepository):
        self.booking_repo = booking_repo

    def handle(self, command: CompleteBookingCommand) -> Booking:
        logger.info(f"Completing booking {command.booking_id}")

        with DjangoUnitOfWork() as uow:
            booking = self.booking_repo.find_by_id(command.booking_id, lock=True)
            if booking is None:
                raise NotFoundError(f"booking {command.booking_id} not found")

            # FSM transition CONFIRMED -> COMPLETED
            booking.mark_completed()

            uow.add_event(BookingCompleted(
                aggregate_id=booking.pk,
                booking_id=booking.pk,
                room_id=booking.room_id,
                user_id=booking.user_id,
            ))

        logger.info(f"Booking #{booking.pk} completed successfully")
        return booking
