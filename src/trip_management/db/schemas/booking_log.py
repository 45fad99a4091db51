"""SQLAlchemy ORM model for the booking_logs table.

Rows are written only by the after_booking_insert trigger. booking_id has
no foreign key, so log rows outlive cancelled bookings.
"""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from trip_management.db.schemas.base import Base


class BookingLog(Base):
    __tablename__ = "booking_logs"

    log_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    booking_id: Mapped[int] = mapped_column(Integer, nullable=False)
    log_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index("idx_booking_logs_booking_id", "booking_id"),
        {"sqlite_autoincrement": True},
    )
