from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand, CommandError  # type: ignore
from django.db import transaction  # type: ignore

from apps.hotels.models import Hotel, Room

HOTELS = [
    ("The Ritz Carlton", "New York", "4.9",
     "Iconic luxury hotel offering unparalleled service in Manhattan",
     "https://images.unsplash.com/photo-1564501049412-61c2a3083791",
     "Spa,Fine Dining,Concierge,Valet,Butler Service"),
    ("Four Seasons Hotel", "Paris", "4.8",
     "Elegant hotel with stunning views of the Eiffel Tower",
     "https://images.unsplash.com/photo-1551882547-ff40c63fe5fa",
     "Michelin Restaurant,Spa,Rooftop Pool,Luxury Suites"),
    ("The Savoy", "London", "4.8",
     "Legendary luxury hotel on the Strand",
     "https://images.unsplash.com/photo-1520250497591-112f2f40a3f4",
     "American Bar,Afternoon Tea,River Views"),
    ("Hilton Times Square", "New York", "4.3",
     "Modern business hotel in the heart of Times Square",
     "https://images.unsplash.com/photo-1542314831-068cd1dbfeeb",
     "Business Center,Meeting Rooms,Concierge"),
    ("Marriott Marquis", "Tokyo", "4.1",
     "Business hotel close to the financial district",
     "https://images.unsplash.com/photo-1566073771259-6a8506099945",
     "Business Center,Gym,Free WiFi"),
    ("Harbour Inn", "Sydney", "3.7",
     "Friendly harbour-side hotel within walking distance of the ferries",
     "https://images.unsplash.com/photo-1590490360182-c33d57733427",
     "Free WiFi,Breakfast,Laundry"),
    ("City Budget Stay", "Berlin", "3.2",
     "Simple rooms for travellers on a budget",
     "https://images.unsplash.com/photo-1631049307264-da0ec9d70304",
     "Free WiFi,24h Reception"),
]

# room number, type, nightly price
ROOMS = [
    ("101", Room.RoomType.STANDARD, "89.99"),
    ("102", Room.RoomType.STANDARD, "89.99"),
    ("103", Room.RoomType.STANDARD, "89.99"),
    ("201", Room.RoomType.DELUXE, "149.99"),
    ("202", Room.RoomType.DELUXE, "149.99"),
    ("301", Room.RoomType.SUITE, "249.99"),
    ("302", Room.RoomType.SUITE, "249.99"),
    ("401", Room.RoomType.EXECUTIVE, "199.99"),
    ("501", Room.RoomType.FAMILY, "179.99"),
    ("601", Room.RoomType.PREMIUM, "299.99"),
]

CAPACITY = {
    Room.RoomType.STANDARD: 2,
    Room.RoomType.DELUXE: 2,
    Room.RoomType.EXECUTIVE: 2,
    Room.RoomType.SUITE: 3,
    Room.RoomType.PREMIUM: 3,
    Room.RoomType.FAMILY: 4,
}

ROOM_AMENITIES = {
    Room.RoomType.STANDARD: "Air Conditioning,TV,Free WiFi,Work Desk",
    Room.RoomType.DELUXE: "Air Conditioning,Smart TV,Free WiFi,Minibar,Coffee Maker",
    Room.RoomType.SUITE: "Air Conditioning,Smart TV,Free WiFi,Minibar,Coffee Maker,Separate Living Area",
    Room.RoomType.EXECUTIVE: "Air Conditioning,Smart TV,Free WiFi,Work Desk,Executive Lounge Access",
    Room.RoomType.FAMILY: "Air Conditioning,TV,Free WiFi,Extra Beds,Family Friendly",
    Room.RoomType.PREMIUM: "Air Conditioning,Smart TV,Free WiFi,Minibar,Coffee Maker,Balcony,Premium Toiletries",
}


def starting_price_for_rating(rating: Decimal) -> Decimal:
    if rating >= Decimal("4.5"):
        return Decimal("300.00")
    if rating >= Decimal("4.0"):
        return Decimal("150.00")
    if rating >= Decimal("3.5"):
        return Decimal("80.00")
    return Decimal("50.00")


class Command(BaseCommand):
    help = "Creates a demo catalogue of hotels with rooms of every type"

    def add_arguments(self, parser):  # type: ignore
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete existing hotels and rooms first (refused while bookings exist).",
        )

    @transaction.atomic
    def handle(self, *args, **options):  # type: ignore
        from apps.bookings.models import Booking

        if options["clear"]:
            if Booking.objects.exists():
                raise CommandError("Cannot clear hotels while bookings exist.")
            Hotel.objects.all().delete()
            self.stdout.write("Existing hotels removed")

        created = 0
        for name, location, rating, description, image_url, amenities in HOTELS:
            hotel, was_created = Hotel.objects.get_or_create(
                name=name,
                defaults={
                    "location": location,
                    "rating": Decimal(rating),
                    "description": description,
                    "image_url": image_url,
                    "amenities": amenities,
                    "starting_price": starting_price_for_rating(Decimal(rating)),
                },
            )
            if not was_created:
                continue
            created += 1
            for room_number, room_type, price in ROOMS:
                Room.objects.create(
                    hotel=hotel,
                    room_number=room_number,
                    room_type=room_type,
                    price=Decimal(price),
                    capacity=CAPACITY[room_type],
                    amenities=ROOM_AMENITIES[room_type],
                    description=f"{room_type.label} room at {hotel.name}",
                )

        self.stdout.write(self.style.SUCCESS(f"Seeded {created} hotels ({Hotel.objects.count()} total)"))
