"""Trip store: AddTrip, GetTripsByStatus and the trip lookups."""

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from trip_management.db.schemas import Trip
from trip_management.errors import ErrorCode, NotFoundError, StatusTransitionError, ValidationError
from trip_management.models import TripCreate, TripRecord, TripStatus, can_transition
from trip_management.services.persistence import commit_or_raise, validate

logger = logging.getLogger(__name__)


def _coerce_status(status: TripStatus | str) -> TripStatus:
    try:
        return TripStatus(status)
    except ValueError as e:
        raise ValidationError(f"Unknown trip status: {status!r}", code=ErrorCode.VALIDATION_ERROR) from e


def add_trip(
    session: Session,
    destination: str,
    start_date: date,
    end_date: date,
    price: Decimal,
    status: TripStatus = TripStatus.PLANNED,
) -> TripRecord:
    data = validate(
        TripCreate,
        destination=destination,
        start_date=start_date,
        end_date=end_date,
        price=price,
        status=status,
    )
    trip = Trip(**data.model_dump())
    session.add(trip)
    commit_or_raise(session)

    logger.info("Added trip %d to %s (%s)", trip.trip_id, trip.destination, trip.status.value)
    return TripRecord.model_validate(trip)


def get_trip(session: Session, trip_id: int) -> TripRecord:
    trip = session.get(Trip, trip_id)
    if trip is None:
        raise NotFoundError(f"Trip {trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)
    return TripRecord.model_validate(trip)


def get_trips_by_status(session: Session, status: TripStatus) -> list[TripRecord]:
    status = _coerce_status(status)
    trips = session.scalars(select(Trip).where(Trip.status == status).order_by(Trip.trip_id))
    return [TripRecord.model_validate(trip) for trip in trips]


def get_trips_above_price(session: Session, threshold: Decimal) -> list[TripRecord]:
    """Trips strictly more expensive than threshold."""
    trips = session.scalars(select(Trip).where(Trip.price > threshold).order_by(Trip.trip_id))
    return [TripRecord.model_validate(trip) for trip in trips]


def set_trip_status(session: Session, trip_id: int, status: TripStatus) -> TripRecord:
    target = _coerce_status(status)
    trip = session.get(Trip, trip_id, with_for_update=True)
    if trip is None:
        raise NotFoundError(f"Trip {trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)

    current = trip.status
    if not can_transition(current, target):
        raise StatusTransitionError(
            f"Trip {trip_id} cannot move from {current.value} to {target.value}",
            code=ErrorCode.INVALID_STATUS_TRANSITION,
        )

    trip.status = target
    commit_or_raise(session)

    logger.info("Trip %d status %s -> %s", trip_id, current.value, target.value)
    return TripRecord.model_validate(trip)
