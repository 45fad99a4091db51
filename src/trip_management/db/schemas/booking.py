"""SQLAlchemy ORM model for the bookings table."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trip_management.db.schemas.base import Base

if TYPE_CHECKING:
    from trip_management.db.schemas.customer import Customer
    from trip_management.db.schemas.trip import Trip


class Booking(Base):
    __tablename__ = "bookings"

    booking_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    trip_id: Mapped[int] = mapped_column(Integer, ForeignKey("trips.trip_id"), nullable=False)
    customer_id: Mapped[int] = mapped_column(Integer, ForeignKey("customers.customer_id"), nullable=False)
    booking_date: Mapped[date] = mapped_column(Date, nullable=False)
    seats: Mapped[int] = mapped_column(Integer, nullable=False)

    trip: Mapped["Trip"] = relationship(back_populates="bookings")
    customer: Mapped["Customer"] = relationship(back_populates="bookings")

    __table_args__ = (
        CheckConstraint("seats > 0", name="chk_bookings_seats"),
        Index("idx_bookings_trip_id", "trip_id"),
        Index("idx_bookings_customer_id", "customer_id"),
        Index("idx_bookings_booking_date", "booking_date"),
        # Ids are never reused, so log rows of cancelled bookings stay unambiguous
        {"sqlite_autoincrement": True},
    )
