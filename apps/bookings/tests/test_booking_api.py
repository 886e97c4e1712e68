"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.hotels.models import Hotel, Room
from apps.users.models import User


class BookingAPITests(APITestCase):
    """Covers creation, conflicts, listing and cancellation of bookings."""

    def setUp(self) -> None:
        self.guest = User.objects.create_user(email="guest@example.com", password="GuestPass123")
        self.other = User.objects.create_user(email="other@example.com", password="OtherPass123")
        self.hotel = Hotel.objects.create(name="The Savoy", location="London", rating=Decimal("4.8"))
        self.room = Room.objects.create(
            hotel=self.hotel,
            room_number="301",
            room_type=Room.RoomType.SUITE,
            price=Decimal("150.00"),
            capacity=3,
        )
        self.client.force_authenticate(self.guest)
        self.list_url = reverse("booking-list")
        self.start = timezone.localdate() + timedelta(days=10)

    def _payload(self, check_in: date, check_out: date, guests: int = 2) -> dict:
        return {
            "room": self.room.id,
            "check_in": str(check_in),
            "check_out": str(check_out),
            "guests": guests,
        }

    def _book(self, user: User, check_in: date, check_out: date) -> Booking:
        return Booking.objects.create(
            user=user,
            room=self.room,
            check_in=check_in,
            check_out=check_out,
            guests=1,
            total_price=self.room.price * (check_out - check_in).days,
        )

    def test_guest_can_create_booking(self) -> None:
        payload = self._payload(self.start, self.start + timedelta(days=3))
        payload["special_requests"] = "Quiet room please"

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["status"], Booking.Status.CONFIRMED)
        self.assertTrue(response.data["can_be_cancelled"])
        self.assertEqual(response.data["nights"], 3)
        self.assertEqual(Decimal(response.data["total_price"]), Decimal("450.00"))
        booking = Booking.objects.get()
        self.assertEqual(booking.user, self.guest)
        self.assertEqual(booking.special_requests, "Quiet room please")

    def test_prevent_double_booking_on_overlap(self) -> None:
        first = self._payload(self.start, self.start + timedelta(days=2))
        second = self._payload(self.start + timedelta(days=1), self.start + timedelta(days=3))

        first_response = self.client.post(self.list_url, first, format="json")
        self.assertEqual(first_response.status_code, status.HTTP_201_CREATED, first_response.data)

        conflict_response = self.client.post(self.list_url, second, format="json")
        self.assertEqual(conflict_response.status_code, status.HTTP_409_CONFLICT, conflict_response.data)
        self.assertEqual(conflict_response.data["kind"], "unavailable")
        self.assertEqual(conflict_response.data["detail"], "room not available for dates")
        self.assertEqual(Booking.objects.count(), 1)

    def test_invalid_dates_return_validation_error(self) -> None:
        response = self.client.post(self.list_url, self._payload(self.start, self.start), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["kind"], "validation_error")
        self.assertEqual(response.data["detail"], "checkout before or equal to checkin")
        self.assertFalse(Booking.objects.exists())

    def test_missing_dates_return_validation_error(self) -> None:
        response = self.client.post(self.list_url, {"room": self.room.id, "guests": 1}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "dates required")

    def test_capacity_is_enforced(self) -> None:
        payload = self._payload(self.start, self.start + timedelta(days=1), guests=4)

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "exceeds capacity")

    def test_unknown_room_returns_404(self) -> None:
        payload = self._payload(self.start, self.start + timedelta(days=1))
        payload["room"] = 999_999

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["kind"], "not_found")

    def test_anonymous_user_cannot_book(self) -> None:
        self.client.force_authenticate(None)

        response = self.client.post(self.list_url, self._payload(self.start, self.start + timedelta(days=1)))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_returns_own_bookings_newest_first(self) -> None:
        older = self._book(self.guest, self.start, self.start + timedelta(days=1))
        newer = self._book(self.guest, self.start + timedelta(days=5), self.start + timedelta(days=6))
        self._book(self.other, self.start + timedelta(days=2), self.start + timedelta(days=3))

        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item["id"] for item in response.data["results"]], [newer.id, older.id])

    def test_retrieve_hides_other_users_bookings(self) -> None:
        own = self._book(self.guest, self.start, self.start + timedelta(days=1))
        foreign = self._book(self.other, self.start + timedelta(days=2), self.start + timedelta(days=3))

        own_response = self.client.get(reverse("booking-detail", args=[own.id]))
        foreign_response = self.client.get(reverse("booking-detail", args=[foreign.id]))

        self.assertEqual(own_response.status_code, status.HTTP_200_OK)
        self.assertEqual(own_response.data["hotel_name"], "The Savoy")
        self.assertEqual(foreign_response.status_code, status.HTTP_404_NOT_FOUND)

    def test_cancel_booking_frees_dates(self) -> None:
        booking = self._book(self.guest, self.start, self.start + timedelta(days=2))

        response = self.client.post(reverse("booking-cancel", args=[booking.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], Booking.Status.CANCELLED)
        self.assertFalse(response.data["can_be_cancelled"])
        rebook = self.client.post(
            self.list_url, self._payload(self.start, self.start + timedelta(days=2)), format="json"
        )
        self.assertEqual(rebook.status_code, status.HTTP_201_CREATED, rebook.data)

    def test_cancel_twice_returns_conflict(self) -> None:
        booking = self._book(self.guest, self.start, self.start + timedelta(days=2))
        self.client.post(reverse("booking-cancel", args=[booking.id]))

        response = self.client.post(reverse("booking-cancel", args=[booking.id]))

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["kind"], "invalid_state")

    def test_cancel_other_users_booking_is_forbidden(self) -> None:
        booking = self._book(self.other, self.start, self.start + timedelta(days=2))

        response = self.client.post(reverse("booking-cancel", args=[booking.id]))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["kind"], "forbidden")
        booking.refresh_from_db()
        self.assertEqual(booking.status, Booking.Status.CONFIRMED)
