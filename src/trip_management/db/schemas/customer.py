"""SQLAlchemy ORM model for the customers table."""

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trip_management.db.schemas.base import Base


class Customer(Base):
    __tablename__ = "customers"

    customer_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    # NULL phones are not compared by the unique constraint
    phone: Mapped[str | None] = mapped_column(String(15))

    bookings: Mapped[list["Booking"]] = relationship(back_populates="customer")

    __table_args__ = (
        UniqueConstraint("email", name="uq_customers_email"),
        UniqueConstraint("phone", name="uq_customers_phone"),
        {"sqlite_autoincrement": True},
    )


from trip_management.db.schemas.booking import Booking  # noqa: E402, F401
