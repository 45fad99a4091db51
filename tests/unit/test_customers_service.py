from datetime import date
from decimal import Decimal

import pytest

from trip_management.errors import ConstraintViolationError, ErrorCode, NotFoundError, ValidationError
from trip_management.services import (
    add_customer,
    add_trip,
    book_trip,
    get_customer,
    get_customers_by_destination,
)


def test_add_customer(session):
    customer = add_customer(session, "Anmol", "anmol@example.com", "9999999999")
    assert customer.customer_id == 1
    assert get_customer(session, customer.customer_id) == customer


def test_add_customer_without_phone(session):
    assert add_customer(session, "Anmol", "anmol@example.com").phone is None


def test_email_too_long(session):
    with pytest.raises(ValidationError):
        add_customer(session, "Anmol", "a" * 95 + "@x.com")


def test_email_and_phone_stored_as_given(session):
    local = add_customer(session, "Ops", "ops@localhost")
    assert get_customer(session, local.customer_id).email == "ops@localhost"

    formatted = add_customer(session, "Ops", "ops@example.com", "+1 555-0100")
    assert get_customer(session, formatted.customer_id).phone == "+1 555-0100"


def test_duplicate_email(session):
    add_customer(session, "Anmol", "anmol@example.com", "9999999999")
    with pytest.raises(ConstraintViolationError) as exc_info:
        add_customer(session, "Someone", "anmol@example.com", "8888888888")
    assert exc_info.value.code == ErrorCode.DUPLICATE_EMAIL

    # Session is usable after the rollback
    assert add_customer(session, "Someone", "someone@example.com").customer_id > 1


def test_duplicate_phone(session):
    add_customer(session, "Anmol", "anmol@example.com", "9999999999")
    with pytest.raises(ConstraintViolationError) as exc_info:
        add_customer(session, "Someone", "someone@example.com", "9999999999")
    assert exc_info.value.code == ErrorCode.DUPLICATE_PHONE


def test_get_customer_not_found(session):
    with pytest.raises(NotFoundError) as exc_info:
        get_customer(session, 7)
    assert exc_info.value.code == ErrorCode.CUSTOMER_NOT_FOUND


class TestCustomersByDestination:
    def test_sample_paris(self, sample_session):
        customers = get_customers_by_destination(sample_session, "Paris")
        assert [c.name for c in customers] == ["Anmol"]

    def test_customer_listed_once(self, sample_session):
        book_trip(sample_session, customer_id=1, trip_id=1, seats=1)
        assert [c.customer_id for c in get_customers_by_destination(sample_session, "Paris")] == [1]

    def test_across_trips_to_same_destination(self, sample_session):
        second_paris = add_trip(sample_session, "Paris", date(2026, 4, 1), date(2026, 4, 5), Decimal("1700.00"))
        book_trip(sample_session, customer_id=3, trip_id=second_paris.trip_id, seats=2)
        assert [c.name for c in get_customers_by_destination(sample_session, "Paris")] == ["Anmol", "Rahul"]

    def test_unknown_destination(self, sample_session):
        assert get_customers_by_destination(sample_session, "Atlantis") == []
