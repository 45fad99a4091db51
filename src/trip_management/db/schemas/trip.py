"""SQLAlchemy ORM model for the trips table."""

from datetime import date
from decimal import Decimal

from sqlalchemy import CheckConstraint, Date, Enum, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trip_management.db.schemas.base import Base
from trip_management.models.status import TripStatus


class Trip(Base):
    __tablename__ = "trips"

    trip_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    destination: Mapped[str] = mapped_column(String(50), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[TripStatus] = mapped_column(
        Enum(TripStatus, name="trip_status", create_constraint=True, validate_strings=True),
        nullable=False,
        default=TripStatus.PLANNED,
        server_default=TripStatus.PLANNED.value,
    )

    bookings: Mapped[list["Booking"]] = relationship(back_populates="trip")

    __table_args__ = (
        CheckConstraint("end_date > start_date", name="chk_trips_dates"),
        CheckConstraint("price > 0", name="chk_trips_price"),
        Index("idx_trips_status", "status"),
        Index("idx_trips_destination", "destination"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<Trip(trip_id={self.trip_id}, destination='{self.destination}', status='{self.status}')>"


# Imported last; Trip.bookings refers to Booking by name
from trip_management.db.schemas.booking import Booking  # noqa: E402, F401
