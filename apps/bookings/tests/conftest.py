from __future__ import annotations

from datetime import date
from decimal import Decimal
from unittest import mock

import pytest

from apps.hotels.models import Hotel, Room
from apps.users.models import User

TODAY = date(2024, 6, 1)


@pytest.fixture
def today():
    """Pin the local date so fixed calendar dates stay in the future."""
    with mock.patch("django.utils.timezone.localdate", return_value=TODAY):
        yield TODAY


@pytest.fixture
def guest(db):
    return User.objects.create_user(email="guest@example.com", password="GuestPass123", username="Guest")


@pytest.fixture
def other_guest(db):
    return User.objects.create_user(email="other@example.com", password="OtherPass123")


@pytest.fixture
def hotel(db):
    return Hotel.objects.create(name="Harbour Inn", location="Sydney", rating=Decimal("4.2"))


@pytest.fixture
def room(hotel):
    return Room.objects.create(
        hotel=hotel,
        room_number="101",
        room_type=Room.RoomType.STANDARD,
        price=Decimal("150.00"),
        capacity=2,
    )


@pytest.fixture
def other_room(hotel):
    return Room.objects.create(
        hotel=hotel,
        room_number="102",
        room_type=Room.RoomType.DELUXE,
        price=Decimal("89.99"),
        capacity=3,
    )
