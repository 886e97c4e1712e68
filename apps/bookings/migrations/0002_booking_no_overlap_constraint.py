"""Exclusion constraint rejecting overlapping CONFIRMED bookings of a room.

PostgreSQL only; other engines rely on the room row lock alone. The
``django.contrib.postgres`` imports need psycopg, which is an optional extra,
so they happen after the vendor check.
"""

from django.db import migrations
from django.db.models import Func, Q

CONSTRAINT_NAME = "booking_no_overlapping_confirmed"


def overlap_constraint():
    from django.contrib.postgres.constraints import ExclusionConstraint
    from django.contrib.postgres.fields import DateRangeField, RangeBoundary, RangeOperators

    class DateRange(Func):
        function = "DATERANGE"
        output_field = DateRangeField()

    return ExclusionConstraint(
        name=CONSTRAINT_NAME,
        expressions=[
            (DateRange("check_in", "check_out", RangeBoundary()), RangeOperators.OVERLAPS),
            ("room", RangeOperators.EQUAL),
        ],
        condition=Q(status="CONFIRMED"),
    )


def add_exclusion_constraint(apps, schema_editor):
    if schema_editor.connection.vendor != "postgresql":
        return
    # btree_gist provides the gist operator class for the room id equality
    schema_editor.execute("CREATE EXTENSION IF NOT EXISTS btree_gist")
    schema_editor.add_constraint(apps.get_model("bookings", "Booking"), overlap_constraint())


def drop_exclusion_constraint(apps, schema_editor):
    if schema_editor.connection.vendor != "postgresql":
        return
    schema_editor.remove_constraint(apps.get_model("bookings", "Booking"), overlap_constraint())


class Migration(migrations.Migration):

    dependencies = [
        ("bookings", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(add_exclusion_constraint, drop_exclusion_constraint),
    ]
