"""FilterSet definitions for hotel and room listings."""

from __future__ import annotations

import django_filters  # type: ignore
from django.db.models import Q  # type: ignore

from .models import Hotel, Room


class HotelFilterSet(django_filters.FilterSet):
    """Filters for the hotel list."""

    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    location = django_filters.CharFilter(field_name="location", lookup_expr="icontains")
    min_rating = django_filters.NumberFilter(field_name="rating", lookup_expr="gte")
    # Free-text search across the descriptive fields
    q = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Hotel
        fields = ["name", "location"]

    def filter_search(self, queryset, name, value):  # type: ignore
        value = (value or "").strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(name__icontains=value)
            | Q(location__icontains=value)
            | Q(description__icontains=value)
            | Q(amenities__icontains=value)
        )


class RoomFilterSet(django_filters.FilterSet):
    room_type = django_filters.ChoiceFilter(field_name="room_type", choices=Room.RoomType.choices)
    min_price = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    max_price = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    hotel = django_filters.NumberFilter(field_name="hotel_id", lookup_expr="exact")

    class Meta:
        model = Room
        fields = ["room_type", "hotel"]
