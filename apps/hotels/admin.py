"""Admin registration for hotels and rooms."""

from __future__ import annotations

from django.contrib import admin

from .models import Hotel, Room


class RoomInline(admin.TabularInline):
    model = Room
    extra = 0
    fields = ("room_number", "room_type", "price", "capacity", "is_available")


@admin.register(Hotel)
class HotelAdmin(admin.ModelAdmin):
    list_display = ("name", "location", "rating", "starting_price", "created_at")
    list_filter = ("location",)
    search_fields = ("name", "location", "description")
    inlines = [RoomInline]


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("room_number", "hotel", "room_type", "price", "capacity", "is_available")
    list_filter = ("room_type", "is_available", "hotel")
    search_fields = ("room_number", "hotel__name")
    list_select_related = ("hotel",)
