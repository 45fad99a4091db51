"""Derived values over trips and bookings: TripDuration and TripRevenue."""

from decimal import Decimal

from sqlalchemy import Numeric, func, select
from sqlalchemy.orm import Session

from trip_management.db.schemas import Booking, Trip

_CENTS = Decimal("0.01")


def trip_duration(session: Session, trip_id: int) -> int | None:
    """Days between start_date and end_date, or None for an unknown trip."""
    row = session.execute(select(Trip.start_date, Trip.end_date).where(Trip.trip_id == trip_id)).first()
    if row is None:
        return None
    return (row.end_date - row.start_date).days


def trip_revenue(session: Session, trip_id: int) -> Decimal | None:
    """Sum of seats * price over the trip's bookings.

    Returns None, not zero, when the trip has no bookings (or does not exist);
    callers decide how to present that.
    """
    revenue = session.scalar(
        select(func.sum(Booking.seats * Trip.price, type_=Numeric(10, 2)))
        .select_from(Booking)
        .join(Trip, Booking.trip_id == Trip.trip_id)
        .where(Trip.trip_id == trip_id)
    )
    if revenue is None:
        return None
    return Decimal(revenue).quantize(_CENTS)
