"""Celery tasks for the booking domain."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore
from django.conf import settings  # type: ignore
from django.core.mail import send_mail  # type: ignore
from django.utils import timezone  # type: ignore

from .domain.exceptions import BookingError
from .models import Booking
from .repositories import BookingRepository
from .services import complete_booking

logger = logging.getLogger(__name__)

NOTIFICATION_SUBJECTS = {
    "created": "Booking #{id} confirmed",
    "cancelled": "Booking #{id} cancelled",
    "completed": "Thank you for staying with us (booking #{id})",
}


# ============================================================================
# PERIODIC TASKS (scheduled by Celery Beat)
# ============================================================================

@shared_task(name="bookings.complete_finished_bookings")
def complete_finished_bookings() -> dict[str, int]:
    """
    Complete bookings after check-out.

    Every CONFIRMED booking whose check-out date is today or earlier
    becomes COMPLETED. Runs hourly.

    Returns:
        dict: {"completed": number of completed bookings}
    """
    today = timezone.localdate()
    completed_count = 0

    for booking_id in BookingRepository().find_finished(today):
        try:
            complete_booking(booking_id)
        except BookingError as e:
            # Cancelled or completed by someone else since the query ran
            logger.warning(f"Skipping booking {booking_id}: {e.reason}")
            continue
        completed_count += 1

    if completed_count > 0:
        logger.info(f"Completed {completed_count} bookings")

    return {"completed": completed_count}


# ============================================================================
# NOTIFICATIONS
# ============================================================================

@shared_task(name="bookings.send_booking_notification")
def send_booking_notification(booking_id: int, event: str) -> bool:
    """Email the guest about a booking lifecycle event."""
    if event not in NOTIFICATION_SUBJECTS:
        raise ValueError(f"Unknown booking notification event: {event}")

    try:
        booking = Booking.objects.select_related("user", "room", "room__hotel").get(id=booking_id)
    except Booking.DoesNotExist:
        logger.error(f"Booking {booking_id} not found for {event} notification")
        return False

    user = booking.user
    room = booking.room
    message = (
        f"Hello {user.display_name},\n\n"
        f"Hotel: {room.hotel.name}\n"
        f"Room: {room.room_number} ({room.get_room_type_display()})\n"
        f"Dates: {booking.check_in.isoformat()} - {booking.check_out.isoformat()} "
        f"({booking.nights} nights)\n"
        f"Guests: {booking.guests}\n"
        f"Total: {booking.total_price} {settings.BOOKING_CURRENCY}\n"
        f"Status: {booking.get_status_display()}\n"
    )

    send_mail(
        subject=NOTIFICATION_SUBJECTS[event].format(id=booking.pk),
        message=message,
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[user.email],
        fail_silently=False,
    )
    logger.info(f"[NOTIFICATION] Booking {event} email sent: #{booking.pk} to {user.email}")
    return True
