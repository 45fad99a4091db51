"""Booking store: BookTrip, CancelBooking, booking aggregates and the audit trail."""

import logging
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from trip_management.db.ddl import COMPLETED_TRIP_MESSAGE
from trip_management.db.schemas import Booking, BookingLog, Customer, Trip
from trip_management.errors import BookingRejectedError, ErrorCode, NotFoundError
from trip_management.models import (
    BOOKABLE_STATUSES,
    BookingCreate,
    BookingLogRecord,
    BookingRecord,
    TripBookingCount,
)
from trip_management.services.persistence import commit_or_raise, validate

logger = logging.getLogger(__name__)


def book_trip(session: Session, customer_id: int, trip_id: int, seats: int) -> BookingRecord:
    """Reserve seats on a trip, dated today.

    Runs as a single transaction: the trip row is locked and checked, then
    the booking is inserted. Inside that INSERT the database re-checks the
    trip status and appends the booking_logs row, so either the booking and
    its audit record are both committed or neither is.

    Rejections raise without touching the session, so work the caller has
    pending in it survives; the caller decides whether to commit or roll back.
    On PostgreSQL the trip row lock is held until then.
    """
    data = validate(
        BookingCreate,
        trip_id=trip_id,
        customer_id=customer_id,
        booking_date=date.today(),
        seats=seats,
    )

    trip = session.get(Trip, data.trip_id, with_for_update=True)
    if trip is None:
        raise NotFoundError(f"Trip {data.trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)
    if trip.status not in BOOKABLE_STATUSES:
        status = trip.status.value
        logger.warning("Rejected booking on trip %d: status is %s", data.trip_id, status)
        raise BookingRejectedError(
            f"{COMPLETED_TRIP_MESSAGE} (trip {data.trip_id} is {status})",
            code=ErrorCode.TRIP_COMPLETED,
        )
    if session.get(Customer, data.customer_id) is None:
        raise NotFoundError(f"Customer {data.customer_id} not found", code=ErrorCode.CUSTOMER_NOT_FOUND)

    booking = Booking(**data.model_dump())
    session.add(booking)
    commit_or_raise(session)

    logger.info(
        "Booked %d seat(s) on trip %d for customer %d (booking %d)",
        booking.seats,
        booking.trip_id,
        booking.customer_id,
        booking.booking_id,
    )
    return BookingRecord.model_validate(booking)


def cancel_booking(session: Session, booking_id: int) -> None:
    """Delete one booking. Its booking_logs rows are kept."""
    booking = session.get(Booking, booking_id)
    if booking is None:
        raise NotFoundError(f"Booking {booking_id} not found", code=ErrorCode.BOOKING_NOT_FOUND)

    session.delete(booking)
    commit_or_raise(session)
    logger.info("Cancelled booking %d", booking_id)


def get_booking(session: Session, booking_id: int) -> BookingRecord:
    booking = session.get(Booking, booking_id)
    if booking is None:
        raise NotFoundError(f"Booking {booking_id} not found", code=ErrorCode.BOOKING_NOT_FOUND)
    return BookingRecord.model_validate(booking)


def get_bookings_between(session: Session, start: date, end: date) -> list[BookingRecord]:
    """Bookings whose booking_date lies in [start, end]."""
    stmt = (
        select(Booking)
        .where(Booking.booking_date.between(start, end))
        .order_by(Booking.booking_date, Booking.booking_id)
    )
    return [BookingRecord.model_validate(booking) for booking in session.scalars(stmt)]


def count_bookings_per_trip(session: Session) -> list[TripBookingCount]:
    total = func.count(Booking.booking_id).label("total_bookings")
    stmt = select(Booking.trip_id, total).group_by(Booking.trip_id).order_by(Booking.trip_id)
    return [TripBookingCount(trip_id=row.trip_id, total_bookings=row.total_bookings) for row in session.execute(stmt)]


def get_most_booked_trip(session: Session) -> TripBookingCount | None:
    """Trip with the most bookings; ties go to the lowest trip_id."""
    total = func.count(Booking.booking_id).label("total_bookings")
    stmt = (
        select(Booking.trip_id, total)
        .group_by(Booking.trip_id)
        .order_by(total.desc(), Booking.trip_id)
        .limit(1)
    )
    row = session.execute(stmt).first()
    if row is None:
        return None
    return TripBookingCount(trip_id=row.trip_id, total_bookings=row.total_bookings)


def get_booking_logs(session: Session, booking_id: int | None = None) -> list[BookingLogRecord]:
    stmt = select(BookingLog).order_by(BookingLog.log_id)
    if booking_id is not None:
        stmt = stmt.where(BookingLog.booking_id == booking_id)
    return [BookingLogRecord.model_validate(log) for log in session.scalars(stmt)]
