"""Booking domain models."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import DateRange

from .domain.exceptions import InvalidStateError


class BookingQuerySet(models.QuerySet):
    def confirmed(self):
        return self.filter(status=Booking.Status.CONFIRMED)

    def overlapping(self, check_in: date, check_out: date):
        """Bookings whose [check_in, check_out) intersects the given range."""
        return self.filter(check_in__lt=check_out, check_out__gt=check_in)

    def for_user(self, user_id: int):
        return self.filter(user_id=user_id).order_by("-created_at", "-id")


class Booking(models.Model):
    """A room reservation.

    Created only through the availability-checked creation operation,
    changed only by cancellation or completion, never deleted.
    """

    class Status(models.TextChoices):
        CONFIRMED = "CONFIRMED", _("Confirmed")
        CANCELLED = "CANCELLED", _("Cancelled")
        COMPLETED = "COMPLETED", _("Completed")

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    room = models.ForeignKey(
        "hotels.Room",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    check_in = models.DateField()
    check_out = models.DateField()
    guests = models.PositiveSmallIntegerField(default=1)
    total_price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    special_requests = models.TextField(blank=True)
    status = models.CharField(
        max_length=16,
        choices=Status.choices,
        default=Status.CONFIRMED,
    )
    cancelled_at = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    objects = BookingQuerySet.as_manager()

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(check_out__gt=models.F("check_in")),
                name="booking_valid_dates",
            ),
            models.CheckConstraint(condition=models.Q(guests__gte=1), name="booking_guests_positive"),
            models.CheckConstraint(
                condition=models.Q(total_price__gte=0),
                name="booking_total_price_non_negative",
            ),
        ]
        indexes = [
            models.Index(fields=["room", "check_in", "check_out"], name="booking_room_dates_idx"),
            models.Index(fields=["user", "created_at"], name="booking_user_created_idx"),
            models.Index(fields=["status"], name="booking_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} room {self.room_id} {self.check_in} - {self.check_out} ({self.status})"

    @property
    def date_range(self) -> DateRange:
        return DateRange(self.check_in, self.check_out)

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    @property
    def is_active(self) -> bool:
        return self.status == self.Status.CONFIRMED and self.check_out > timezone.localdate()

    def can_be_cancelled(self) -> bool:
        return self.status == self.Status.CONFIRMED

    def _ensure_confirmed(self, action: str) -> None:
        if self.status != self.Status.CONFIRMED:
            raise InvalidStateError(f"cannot {action} booking in status {self.status}")

    def mark_cancelled(self, now: datetime | None = None) -> None:
        self._ensure_confirmed("cancel")
        self.status = self.Status.CANCELLED
        self.cancelled_at = now or timezone.now()
        self.save(update_fields=["status", "cancelled_at", "updated_at"])

    def mark_completed(self, now: datetime | None = None) -> None:
        self._ensure_confirmed("complete")
        self.status = self.Status.COMPLETED
        self.completed_at = now or timezone.now()
        self.save(update_fields=["status", "completed_at", "updated_at"])
