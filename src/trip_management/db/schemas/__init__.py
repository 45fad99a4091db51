"""
ORM models for the trip management schema.

Importing this package registers every table and the trigger/routine DDL
on Base.metadata, which create_all() and Alembic rely on.
"""

from trip_management.db.ddl import register_ddl
from trip_management.db.schemas.base import Base
from trip_management.db.schemas.booking import Booking
from trip_management.db.schemas.booking_log import BookingLog
from trip_management.db.schemas.customer import Customer
from trip_management.db.schemas.trip import Trip

register_ddl(Base.metadata)

__all__ = ["Base", "Booking", "BookingLog", "Customer", "Trip"]
