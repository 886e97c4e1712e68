from __future__ import annotations

from datetime import timedelta

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.utils import timezone

from apps.bookings.models import Booking
from apps.hotels.models import Hotel, Room
from apps.users.models import User

pytestmark = pytest.mark.django_db


def test_seed_is_idempotent():
    call_command("seed_hotels")
    hotels = Hotel.objects.count()
    rooms = Room.objects.count()

    call_command("seed_hotels")

    assert hotels > 0
    assert Hotel.objects.count() == hotels
    assert Room.objects.count() == rooms
    assert set(Room.objects.values_list("room_type", flat=True)) == set(Room.RoomType.values)


def test_clear_is_refused_while_bookings_exist():
    call_command("seed_hotels")
    user = User.objects.create_user(email="guest@example.com", password="GuestPass123")
    check_in = timezone.localdate() + timedelta(days=1)
    Booking.objects.create(
        user=user, room=Room.objects.first(), check_in=check_in, check_out=check_in + timedelta(days=1)
    )

    with pytest.raises(CommandError):
        call_command("seed_hotels", "--clear")
