"""Hotel listing queries."""

from __future__ import annotations

from datetime import date

from django.db.models import Exists, OuterRef  # type: ignore

from .models import Hotel, Room

TOP_RATED_LIMIT = 10


def top_rated_hotels(limit: int = TOP_RATED_LIMIT):
    return Hotel.objects.filter(rating__isnull=False).order_by("-rating", "name")[:limit]


def available_rooms(hotel: Hotel, check_in: date | None = None, check_out: date | None = None):
    """Rooms of the hotel, limited to rooms free for [check_in, check_out) when both are given.

    A room is free when it has no CONFIRMED booking overlapping the range.
    """

    from apps.bookings.models import Booking  # Local import to prevent circular dependency

    rooms = Room.objects.filter(hotel=hotel).select_related("hotel")
    if check_in is None or check_out is None:
        return rooms

    blocking = Booking.objects.confirmed().overlapping(check_in, check_out).filter(room=OuterRef("pk"))
    return rooms.filter(~Exists(blocking))
