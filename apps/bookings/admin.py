"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "room",
        "user",
        "status",
        "check_in",
        "check_out",
        "guests",
        "total_price",
        "created_at",
    )
    list_filter = ("status", "check_in", "check_out", "room__hotel")
    search_fields = ("user__email", "room__room_number", "room__hotel__name")
    list_select_related = ("room", "room__hotel", "user")
    readonly_fields = (
        "total_price",
        "cancelled_at",
        "completed_at",
        "created_at",
        "updated_at",
    )

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False
