"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Booking


class BookingCreateSerializer(serializers.Serializer):
    """Booking request from a guest.

    Only the shape of the body is checked here; dates, guest count and
    capacity are validated by the booking engine so that the error reasons
    stay the same for every caller.
    """

    room = serializers.IntegerField()
    check_in = serializers.DateField(required=False, allow_null=True)
    check_out = serializers.DateField(required=False, allow_null=True)
    guests = serializers.IntegerField(required=False, allow_null=True)
    special_requests = serializers.CharField(required=False, allow_blank=True, default="")


class BookingSerializer(serializers.ModelSerializer):
    """Booking detail."""

    user_id = serializers.ReadOnlyField(source="user.id")
    room_id = serializers.ReadOnlyField(source="room.id")
    room_number = serializers.ReadOnlyField(source="room.room_number")
    room_type = serializers.ReadOnlyField(source="room.room_type")
    hotel_id = serializers.ReadOnlyField(source="room.hotel_id")
    hotel_name = serializers.ReadOnlyField(source="room.hotel.name")
    nights = serializers.ReadOnlyField()
    can_be_cancelled = serializers.BooleanField(read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "user_id",
            "room_id",
            "room_number",
            "room_type",
            "hotel_id",
            "hotel_name",
            "check_in",
            "check_out",
            "nights",
            "guests",
            "total_price",
            "special_requests",
            "status",
            "can_be_cancelled",
            "cancelled_at",
            "completed_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
