"""Hotel and room models."""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Hotel(models.Model):
    """A hotel listed on the platform."""

    name = models.CharField(max_length=255)
    location = models.CharField(max_length=255)
    rating = models.DecimalField(
        max_digits=2,
        decimal_places=1,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0.0")), MaxValueValidator(Decimal("5.0"))],
    )
    description = models.TextField(blank=True)
    image_url = models.URLField(max_length=500, blank=True)
    amenities = models.CharField(
        max_length=500,
        blank=True,
        help_text=_("Comma separated list of amenities."),
    )
    starting_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Hotel")
        verbose_name_plural = _("Hotels")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["location"], name="hotel_location_idx"),
            models.Index(fields=["rating"], name="hotel_rating_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.location})"

    @property
    def amenity_list(self) -> list[str]:
        return [item.strip() for item in self.amenities.split(",") if item.strip()]


class Room(models.Model):
    """A bookable room of a hotel."""

    class RoomType(models.TextChoices):
        STANDARD = "STANDARD", _("Standard")
        DELUXE = "DELUXE", _("Deluxe")
        SUITE = "SUITE", _("Suite")
        EXECUTIVE = "EXECUTIVE", _("Executive")
        FAMILY = "FAMILY", _("Family")
        PREMIUM = "PREMIUM", _("Premium")

    hotel = models.ForeignKey(Hotel, on_delete=models.CASCADE, related_name="rooms")
    room_number = models.CharField(max_length=20)
    room_type = models.CharField(max_length=20, choices=RoomType.choices, default=RoomType.STANDARD)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text=_("Nightly rate."),
    )
    capacity = models.PositiveSmallIntegerField(default=2, validators=[MinValueValidator(1)])
    description = models.TextField(blank=True)
    amenities = models.TextField(blank=True)
    image_url = models.URLField(max_length=500, blank=True)
    is_available = models.BooleanField(
        default=True,
        help_text=_("Informational listing flag. Bookings are checked against dates, not this flag."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Room")
        verbose_name_plural = _("Rooms")
        ordering = ["hotel", "room_number"]
        constraints = [
            models.UniqueConstraint(fields=["hotel", "room_number"], name="room_unique_number_per_hotel"),
            models.CheckConstraint(condition=models.Q(price__gte=0), name="room_price_non_negative"),
            models.CheckConstraint(condition=models.Q(capacity__gte=1), name="room_capacity_positive"),
        ]

    def __str__(self) -> str:
        return f"Room {self.room_number} ({self.get_room_type_display()}) at {self.hotel.name}"
