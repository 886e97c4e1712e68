"""Bookings app package.

This app encapsulates the booking domain: the booking model, the
availability and creation engine, cancellation and completion. Bookings
enforce the date overlap rule atomically via a per-room row lock inside a
database transaction and, on PostgreSQL, an exclusion constraint.
"""
