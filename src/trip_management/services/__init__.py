"""
Business services for trip management.

This package contains:
- trips.py: AddTrip, GetTripsByStatus and trip lookups
- customers.py: customer creation and the destination join lookup
- bookings.py: BookTrip, CancelBooking, booking aggregates and audit log reads
- reports.py: TripDuration and TripRevenue
- migration.py: programmatic Alembic upgrade
"""

from trip_management.services.bookings import (
    book_trip,
    cancel_booking,
    count_bookings_per_trip,
    get_booking,
    get_booking_logs,
    get_bookings_between,
    get_most_booked_trip,
)
from trip_management.services.customers import add_customer, get_customer, get_customers_by_destination
from trip_management.services.reports import trip_duration, trip_revenue
from trip_management.services.trips import (
    add_trip,
    get_trip,
    get_trips_above_price,
    get_trips_by_status,
    set_trip_status,
)

__all__ = [
    "add_customer",
    "add_trip",
    "book_trip",
    "cancel_booking",
    "count_bookings_per_trip",
    "get_booking",
    "get_booking_logs",
    "get_bookings_between",
    "get_customer",
    "get_customers_by_destination",
    "get_most_booked_trip",
    "get_trip",
    "get_trips_above_price",
    "get_trips_by_status",
    "set_trip_status",
    "trip_duration",
    "trip_revenue",
]
