"""Concurrent booking of the same room.

Runs against the file-backed SQLite test database, where BEGIN IMMEDIATE makes
the second writer wait, and against PostgreSQL, where the room row lock and the
exclusion constraint apply.
"""

from __future__ import annotations

import threading
from datetime import timedelta
from decimal import Decimal

import pytest
from django.db import connection
from django.utils import timezone

from apps.bookings import services
from apps.bookings.domain.exceptions import UnavailableError
from apps.bookings.models import Booking
from apps.hotels.models import Hotel, Room
from apps.users.models import User


@pytest.mark.django_db(transaction=True)
def test_concurrent_overlapping_requests_yield_one_booking():
    hotel = Hotel.objects.create(name="Race Hotel", location="Berlin")
    room = Room.objects.create(hotel=hotel, room_number="1", price=Decimal("100.00"), capacity=2)
    users = [
        User.objects.create_user(email=f"racer{i}@example.com", password="RacerPass123") for i in range(2)
    ]
    check_in = timezone.localdate() + timedelta(days=7)
    check_out = check_in + timedelta(days=3)

    barrier = threading.Barrier(len(users))
    outcomes: list[str] = []
    lock = threading.Lock()

    def attempt(user):
        try:
            barrier.wait()
            services.create_booking(user, room, check_in, check_out, 1)
            result = "booked"
        except UnavailableError:
            result = "unavailable"
        finally:
            connection.close()
        with lock:
            outcomes.append(result)

    threads = [threading.Thread(target=attempt, args=(user,)) for user in users]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(outcomes) == ["booked", "unavailable"]
    assert Booking.objects.filter(room=room).confirmed().count() == 1


@pytest.mark.django_db
def test_overlap_exclusion_constraint_is_installed():
    if connection.vendor != "postgresql":
        pytest.skip("exclusion constraints exist only on PostgreSQL")

    with connection.cursor() as cursor:
        constraints = connection.introspection.get_constraints(cursor, Booking._meta.db_table)

    assert "booking_no_overlapping_confirmed" in constraints
