"""API views for the booking domain."""

from __future__ import annotations

import structlog
from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from . import services
from .domain.exceptions import NotFoundError
from .models import Booking
from .repositories import RoomRepository
from .serializers import BookingCreateSerializer, BookingSerializer

logger = structlog.get_logger(__name__)


class BookingViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Create, list, inspect and cancel the caller's own bookings."""

    queryset = Booking.objects.none()
    serializer_class = BookingSerializer
    permission_classes = [permissions.IsAuthenticated]
    lookup_value_regex = r"\d+"

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return BookingCreateSerializer
        return BookingSerializer

    def get_queryset(self):  # type: ignore
        return Booking.objects.for_user(self.request.user.pk).select_related("room", "room__hotel")

    def get_object(self):  # type: ignore
        booking = services.get_booking_by_id(int(self.kwargs["pk"]))
        # Other users' bookings are reported as missing
        if booking is None or booking.user_id != self.request.user.pk:
            raise NotFoundError(f"booking {self.kwargs['pk']} not found")
        return booking

    def list(self, request, *args, **kwargs):  # type: ignore
        bookings = services.list_user_bookings(request.user.pk)
        page = self.paginate_queryset(bookings)
        if page is not None:
            return self.get_paginated_response(BookingSerializer(page, many=True).data)
        return Response(BookingSerializer(bookings, many=True).data)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        room = RoomRepository().find_room_by_id(data["room"])
        if room is None:
            raise NotFoundError(f"room {data['room']} not found")

        booking = services.create_booking(
            request.user,
            room,
            data.get("check_in"),
            data.get("check_out"),
            data.get("guests"),
            special_request=data.get("special_requests", ""),
        )
        logger.info("booking.created", booking_id=booking.pk, room_id=room.pk, user_id=request.user.pk)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"])
    def cancel(self, request, pk=None):  # type: ignore
        booking = services.cancel_booking(int(pk), request.user.pk)
        logger.info("booking.cancelled", booking_id=booking.pk, user_id=request.user.pk)
        return Response(BookingSerializer(booking).data, status=status.HTTP_200_OK)
