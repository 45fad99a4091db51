"""
Pydantic models for trip management.
"""

from trip_management.models.booking import BookingCreate, BookingLogRecord, BookingRecord
from trip_management.models.customer import CustomerCreate, CustomerRecord
from trip_management.models.status import ALLOWED_TRANSITIONS, BOOKABLE_STATUSES, TripStatus, can_transition
from trip_management.models.trip import TripBookingCount, TripCreate, TripRecord

__all__ = [
    "ALLOWED_TRANSITIONS",
    "BOOKABLE_STATUSES",
    "BookingCreate",
    "BookingLogRecord",
    "BookingRecord",
    "CustomerCreate",
    "CustomerRecord",
    "TripBookingCount",
    "TripCreate",
    "TripRecord",
    "TripStatus",
    "can_transition",
]
