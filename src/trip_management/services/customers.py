"""Customer store."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from trip_management.db.schemas import Booking, Customer, Trip
from trip_management.errors import ErrorCode, NotFoundError
from trip_management.models import CustomerCreate, CustomerRecord
from trip_management.services.persistence import commit_or_raise, validate

logger = logging.getLogger(__name__)


def add_customer(session: Session, name: str, email: str, phone: str | None = None) -> CustomerRecord:
    data = validate(CustomerCreate, name=name, email=email, phone=phone)
    customer = Customer(**data.model_dump())
    session.add(customer)
    commit_or_raise(session)

    logger.info("Added customer %d", customer.customer_id)
    return CustomerRecord.model_validate(customer)


def get_customer(session: Session, customer_id: int) -> CustomerRecord:
    customer = session.get(Customer, customer_id)
    if customer is None:
        raise NotFoundError(f"Customer {customer_id} not found", code=ErrorCode.CUSTOMER_NOT_FOUND)
    return CustomerRecord.model_validate(customer)


def get_customers_by_destination(session: Session, destination: str) -> list[CustomerRecord]:
    """Distinct customers holding at least one booking on a trip to destination."""
    stmt = (
        select(Customer)
        .join(Booking, Booking.customer_id == Customer.customer_id)
        .join(Trip, Trip.trip_id == Booking.trip_id)
        .where(Trip.destination == destination)
        .distinct()
        .order_by(Customer.customer_id)
    )
    return [CustomerRecord.model_validate(customer) for customer in session.scalars(stmt)]
