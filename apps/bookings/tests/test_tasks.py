from __future__ import annotations

from datetime import date

import pytest
from django.core import mail

from apps.bookings import services
from apps.bookings.models import Booking
from apps.bookings.tasks import complete_finished_bookings, send_booking_notification

pytestmark = pytest.mark.django_db


def test_complete_finished_bookings(today, guest, room, other_room):
    finished = Booking.objects.create(
        user=guest, room=room, check_in=date(2024, 5, 20), check_out=date(2024, 5, 25), guests=1
    )
    leaving_today = Booking.objects.create(
        user=guest, room=other_room, check_in=date(2024, 5, 28), check_out=today, guests=1
    )
    upcoming = services.create_booking(guest, room, date(2024, 6, 10), date(2024, 6, 12), 1)
    cancelled = Booking.objects.create(
        user=guest,
        room=other_room,
        check_in=date(2024, 5, 1),
        check_out=date(2024, 5, 3),
        guests=1,
        status=Booking.Status.CANCELLED,
    )

    result = complete_finished_bookings()

    assert result == {"completed": 2}
    statuses = dict(Booking.objects.values_list("pk", "status"))
    assert statuses[finished.pk] == Booking.Status.COMPLETED
    assert statuses[leaving_today.pk] == Booking.Status.COMPLETED
    assert statuses[upcoming.pk] == Booking.Status.CONFIRMED
    assert statuses[cancelled.pk] == Booking.Status.CANCELLED
    assert Booking.objects.get(pk=finished.pk).completed_at is not None


def test_complete_finished_bookings_with_nothing_to_do(today):
    assert complete_finished_bookings() == {"completed": 0}


def test_send_booking_notification(today, guest, room):
    booking = services.create_booking(guest, room, date(2024, 6, 10), date(2024, 6, 12), 2)

    assert send_booking_notification(booking.pk, "cancelled") is True

    assert len(mail.outbox) == 1
    message = mail.outbox[0]
    assert message.subject == f"Booking #{booking.pk} cancelled"
    assert "Harbour Inn" in message.body
    assert "2024-06-10 - 2024-06-12 (2 nights)" in message.body


def test_send_booking_notification_for_missing_booking():
    assert send_booking_notification(424242, "created") is False
    assert mail.outbox == []


def test_send_booking_notification_rejects_unknown_event():
    with pytest.raises(ValueError):
        send_booking_notification(1, "teleported")
