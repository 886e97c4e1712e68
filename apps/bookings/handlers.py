"""Domain event handlers of the booking app.

Handlers run after the booking transaction has committed and only enqueue
background work.
"""

from __future__ import annotations

import logging

from shared.application.message_bus import message_bus

from .domain.events import BookingCancelled, BookingCompleted, BookingCreated

logger = logging.getLogger(__name__)


def notify_booking_created(event: BookingCreated) -> None:
    from .tasks import send_booking_notification

    send_booking_notification.delay(event.booking_id, "created")


def notify_booking_cancelled(event: BookingCancelled) -> None:
    from .tasks import send_booking_notification

    send_booking_notification.delay(event.booking_id, "cancelled")


def notify_booking_completed(event: BookingCompleted) -> None:
    from .tasks import send_booking_notification

    send_booking_notification.delay(event.booking_id, "completed")


def register_handlers() -> None:
    message_bus.register_event_handler(BookingCreated, notify_booking_created)
    message_bus.register_event_handler(BookingCancelled, notify_booking_cancelled)
    message_bus.register_event_handler(BookingCompleted, notify_booking_completed)
    logger.debug("Booking event handlers registered")
