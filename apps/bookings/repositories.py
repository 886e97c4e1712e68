"""Persistence collaborators of the booking engine (Django ORM)."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from django.db import transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from apps.hotels.models import Room

from .models import Booking


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


class RoomRepository:
    """Room lookup."""

    def find_room_by_id(self, room_id: int, *, lock: bool = False) -> Optional[Room]:
        """
        Load a room, optionally taking its row lock

        The row lock is the per-room lock that serialises concurrent
        check-then-insert sequences for the same room.
        """
        queryset = Room.objects.filter(pk=room_id)
        if lock:
            return _lock_queryset_if_possible(queryset).first()
        return queryset.select_related("hotel").first()


class BookingRepository:
    """Booking store."""

    def save(self, booking: Booking) -> Booking:
        booking.save()
        return booking

    def find_by_id(self, booking_id: int, *, lock: bool = False) -> Optional[Booking]:
        queryset = Booking.objects.filter(pk=booking_id)
        if lock:
            return _lock_queryset_if_possible(queryset).first()
        return queryset.select_related("room", "room__hotel", "user").first()

    def find_by_room_with_overlap(self, room_id: int, check_in: date, check_out: date) -> List[Booking]:
        """CONFIRMED bookings of the room intersecting [check_in, check_out)."""
        return list(
            Booking.objects.filter(room_id=room_id).confirmed().overlapping(check_in, check_out)
        )

    def find_by_user_order_by_created_desc(self, user_id: int) -> List[Booking]:
        return list(Booking.objects.for_user(user_id).select_related("room", "room__hotel"))

    def find_by_room(self, room_id: int) -> List[Booking]:
        return list(Booking.objects.filter(room_id=room_id).order_by("check_in"))

    def find_active(self) -> List[Booking]:
        return list(Booking.objects.confirmed().order_by("check_in"))

    def find_finished(self, today: date) -> List[int]:
        """Ids of CONFIRMED bookings whose check-out date is today or earlier."""
        return list(
            Booking.objects.confirmed().filter(check_out__lte=today).values_list("id", flat=True)
        )
