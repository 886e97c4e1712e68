"""Startup checks of the bookings app."""

from __future__ import annotations

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from apps.bookings.apps import check_booking_currency


def test_default_currency_is_accepted():
    check_booking_currency()


@override_settings(BOOKING_CURRENCY="EUR")
def test_other_supported_currency_is_accepted():
    check_booking_currency()


@override_settings(BOOKING_CURRENCY="XYZ")
def test_unsupported_currency_fails_at_startup():
    with pytest.raises(ImproperlyConfigured, match="XYZ"):
        check_booking_currency()
