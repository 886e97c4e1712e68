from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


def check_booking_currency() -> None:
    from shared.domain.value_objects import SUPPORTED_CURRENCIES

    if settings.BOOKING_CURRENCY not in SUPPORTED_CURRENCIES:
        raise ImproperlyConfigured(
            f"BOOKING_CURRENCY must be one of {', '.join(SUPPORTED_CURRENCIES)}, "
            f"got {settings.BOOKING_CURRENCY!r}"
        )


class BookingsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.bookings"
    label = "bookings"

    def ready(self) -> None:
        from .handlers import register_handlers

        check_booking_currency()
        register_handlers()
