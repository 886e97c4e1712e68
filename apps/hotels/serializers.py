"""Serializers for hotels and rooms."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Hotel, Room


class HotelSerializer(serializers.ModelSerializer):
    amenity_list = serializers.ReadOnlyField()
    room_count = serializers.SerializerMethodField()

    class Meta:
        model = Hotel
        fields = [
            "id",
            "name",
            "location",
            "rating",
            "description",
            "image_url",
            "amenities",
            "amenity_list",
            "starting_price",
            "room_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_room_count(self, obj: Hotel) -> int:  # type: ignore
        return obj.rooms.count()


class RoomSerializer(serializers.ModelSerializer):
    hotel_name = serializers.ReadOnlyField(source="hotel.name")

    class Meta:
        model = Room
        fields = [
            "id",
            "hotel",
            "hotel_name",
            "room_number",
            "room_type",
            "price",
            "capacity",
            "description",
            "amenities",
            "image_url",
            "is_available",
        ]
        read_only_fields = fields


class StayQuerySerializer(serializers.Serializer):
    """Optional stay dates passed in the query string."""

    check_in = serializers.DateField(required=False)
    check_out = serializers.DateField(required=False)

    def validate(self, attrs):  # type: ignore
        check_in = attrs.get("check_in")
        check_out = attrs.get("check_out")
        if check_in and check_out and check_out <= check_in:
            raise serializers.ValidationError("Check-out date must be after check-in date.")
        return attrs


class QuoteSerializer(serializers.Serializer):
    nights = serializers.IntegerField()
    nightly_price = serializers.DecimalField(max_digits=10, decimal_places=2)
    total_price = serializers.DecimalField(max_digits=12, decimal_places=2)
    currency = serializers.CharField()
