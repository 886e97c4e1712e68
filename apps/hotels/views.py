"""Hotel and room API views (public, read-only)."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from django_filters.utils import translate_validation  # type: ignore
from rest_framework import permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.bookings import services as booking_services

from . import services
from .filters import HotelFilterSet, RoomFilterSet
from .models import Hotel, Room
from .serializers import HotelSerializer, QuoteSerializer, RoomSerializer, StayQuerySerializer


class HotelViewSet(viewsets.ReadOnlyModelViewSet):
    """Hotel catalogue with search, ranking and room availability."""

    queryset = Hotel.objects.all()
    serializer_class = HotelSerializer
    permission_classes = [permissions.AllowAny]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = HotelFilterSet
    ordering_fields = ["rating", "name", "starting_price"]

    @action(detail=False, methods=["get"], url_path="top-rated")
    def top_rated(self, request):  # type: ignore
        serializer = self.get_serializer(services.top_rated_hotels(), many=True)
        return Response(serializer.data)

    @action(detail=False, methods=["get"])
    def stats(self, request):  # type: ignore
        return Response({"total_hotels": Hotel.objects.count()})

    @action(detail=True, methods=["get"])
    def rooms(self, request, pk=None):  # type: ignore
        """Rooms of the hotel, only those free for the stay when both dates are given."""
        hotel = self.get_object()
        stay = StayQuerySerializer(data=request.query_params)
        stay.is_valid(raise_exception=True)
        check_in = stay.validated_data.get("check_in")
        check_out = stay.validated_data.get("check_out")

        rooms = services.available_rooms(hotel, check_in, check_out)
        filterset = RoomFilterSet(request.query_params, queryset=rooms, request=request)
        if not filterset.is_valid():
            raise translate_validation(filterset.errors)
        rooms = filterset.qs

        nights = (check_out - check_in).days if check_in and check_out else None
        return Response(
            {
                "hotel": hotel.pk,
                "check_in": check_in,
                "check_out": check_out,
                "nights": nights,
                "rooms": RoomSerializer(rooms, many=True).data,
            }
        )


class RoomViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Room.objects.select_related("hotel")
    serializer_class = RoomSerializer
    permission_classes = [permissions.AllowAny]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = RoomFilterSet
    ordering_fields = ["price", "capacity", "room_number"]

    @action(detail=True, methods=["get"])
    def quote(self, request, pk=None):  # type: ignore
        """Price a stay in this room without booking it."""
        room = self.get_object()
        stay = StayQuerySerializer(data=request.query_params)
        stay.is_valid(raise_exception=True)
        check_in = stay.validated_data.get("check_in")
        check_out = stay.validated_data.get("check_out")

        total = booking_services.quote_price(room, check_in, check_out)
        data = {
            "nights": (check_out - check_in).days,
            "nightly_price": room.price,
            "total_price": total.amount,
            "currency": total.currency,
        }
        return Response(QuoteSerializer(data).data)
