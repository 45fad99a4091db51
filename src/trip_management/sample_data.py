"""Sample dataset: ten trips, ten customers and one booking per trip.

Rows are inserted directly through the ORM, so the booking triggers fire
the same way they do for any other client.
"""

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from trip_management.db.schemas import Booking, Customer, Trip
from trip_management.models import TripStatus
from trip_management.services.persistence import commit_or_raise

logger = logging.getLogger(__name__)

SAMPLE_TRIPS: list[tuple[str, date, date, Decimal, TripStatus]] = [
    ("Paris", date(2025, 10, 1), date(2025, 10, 10), Decimal("1500.00"), TripStatus.PLANNED),
    ("London", date(2025, 9, 15), date(2025, 9, 20), Decimal("1200.00"), TripStatus.ONGOING),
    ("New York", date(2025, 11, 5), date(2025, 11, 12), Decimal("2000.00"), TripStatus.PLANNED),
    ("Tokyo", date(2025, 12, 1), date(2025, 12, 8), Decimal("1800.00"), TripStatus.PLANNED),
    ("Sydney", date(2025, 10, 20), date(2025, 10, 30), Decimal("2500.00"), TripStatus.ONGOING),
    ("Dubai", date(2025, 9, 25), date(2025, 9, 30), Decimal("1100.00"), TripStatus.PLANNED),
    ("Rome", date(2025, 11, 10), date(2025, 11, 18), Decimal("1400.00"), TripStatus.PLANNED),
    ("Singapore", date(2025, 12, 15), date(2025, 12, 22), Decimal("1600.00"), TripStatus.PLANNED),
    ("Bangkok", date(2025, 9, 28), date(2025, 10, 4), Decimal("900.00"), TripStatus.PLANNED),
    ("Berlin", date(2025, 10, 12), date(2025, 10, 18), Decimal("1300.00"), TripStatus.PLANNED),
]

SAMPLE_CUSTOMERS: list[tuple[str, str, str]] = [
    ("Anmol", "anmol@example.com", "9999999999"),
    ("Kumkum Paglu", "kumkum@example.com", "8888888888"),
    ("Rahul", "rahul@example.com", "7777777777"),
    ("Priya", "priya@example.com", "6666666666"),
    ("Amit", "amit@example.com", "5555555555"),
    ("Sneha", "sneha@example.com", "4444444444"),
    ("Vikram", "vikram@example.com", "3333333333"),
    ("Meera", "meera@example.com", "2222222222"),
    ("Omprakash", "omprakash@example.com", "1111111111"),
    ("Riya", "riya@example.com", "1010101010"),
]

# (trip index, customer index, booking_date, seats); indexes are 1-based like the ids
SAMPLE_BOOKINGS: list[tuple[int, int, date, int]] = [
    (1, 1, date(2025, 9, 5), 2),
    (2, 2, date(2025, 9, 6), 3),
    (3, 3, date(2025, 9, 7), 1),
    (4, 4, date(2025, 9, 8), 2),
    (5, 5, date(2025, 9, 9), 4),
    (6, 6, date(2025, 9, 10), 1),
    (7, 7, date(2025, 9, 11), 2),
    (8, 8, date(2025, 9, 12), 3),
    (9, 9, date(2025, 9, 13), 1),
    (10, 10, date(2025, 9, 14), 2),
]


def load_sample_data(session: Session) -> dict[str, int]:
    trips = [
        Trip(destination=destination, start_date=start, end_date=end, price=price, status=status)
        for destination, start, end, price, status in SAMPLE_TRIPS
    ]
    customers = [Customer(name=name, email=email, phone=phone) for name, email, phone in SAMPLE_CUSTOMERS]
    bookings = [
        Booking(
            trip=trips[trip_index - 1],
            customer=customers[customer_index - 1],
            booking_date=booking_date,
            seats=seats,
        )
        for trip_index, customer_index, booking_date, seats in SAMPLE_BOOKINGS
    ]
    session.add_all(trips + customers + bookings)
    commit_or_raise(session)

    counts = {"trips": len(trips), "customers": len(customers), "bookings": len(bookings)}
    logger.info("Loaded sample data: %s", counts)
    return counts
