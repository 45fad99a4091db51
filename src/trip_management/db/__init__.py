"""
Database ORM models and client for trip management.

Importing this package registers all models on Base.metadata,
which Alembic needs for autogenerate.
"""

from trip_management.db.database import Database, build_database_url
from trip_management.db.schemas import Base, Booking, BookingLog, Customer, Trip

__all__ = ["Base", "Booking", "BookingLog", "Customer", "Database", "Trip", "build_database_url"]
