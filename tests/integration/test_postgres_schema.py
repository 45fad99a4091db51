"""Integration tests for the PostgreSQL schema, triggers and stored routines."""

from datetime import date
from decimal import Decimal

import psycopg.errors
import pytest

from trip_management.errors import BookingRejectedError, ErrorCode
from trip_management.models import TripStatus
from trip_management.sample_data import load_sample_data
from trip_management.services import (
    book_trip,
    cancel_booking,
    get_booking_logs,
    get_customers_by_destination,
    get_most_booked_trip,
    set_trip_status,
    trip_duration,
    trip_revenue,
)

# ── Helpers ───────────────────────────────────────────────────────────────────


def _seed(conn) -> None:
    with conn.cursor() as cur:
        cur.execute("CALL add_trip('Paris', '2025-10-01', '2025-10-10', 1500.00)")
        cur.execute("CALL add_trip('Rome', '2025-11-10', '2025-11-18', 1400.00, 'COMPLETED')")
        cur.execute(
            "INSERT INTO customers (name, email, phone) VALUES "
            "('Anmol', 'anmol@example.com', '9999999999'), ('Rahul', 'rahul@example.com', NULL)"
        )
    conn.commit()


def _scalar(conn, sql: str, params: tuple = ()):
    with conn.cursor() as cur:
        cur.execute(sql, params)
        return cur.fetchone()[0]


# ── Schema ────────────────────────────────────────────────────────────────────


@pytest.mark.integration
def test_tables_exist(pg_connection):
    with pg_connection.cursor() as cur:
        cur.execute("""
            SELECT table_name FROM information_schema.tables
            WHERE table_schema = 'public' ORDER BY table_name
        """)
        tables = {row[0] for row in cur.fetchall()}
    assert {"trips", "customers", "bookings", "booking_logs"} <= tables


@pytest.mark.integration
def test_routines_installed(pg_connection):
    with pg_connection.cursor() as cur:
        cur.execute("SELECT proname FROM pg_proc WHERE pronamespace = 'public'::regnamespace")
        routines = {row[0] for row in cur.fetchall()}
    assert {
        "add_trip",
        "get_trips_by_status",
        "book_trip",
        "cancel_booking",
        "trip_duration",
        "trip_revenue",
        "prevent_completed_booking",
        "after_booking_insert",
    } <= routines


@pytest.mark.integration
def test_unknown_status_rejected(pg_connection):
    with pg_connection.cursor() as cur:
        with pytest.raises(psycopg.errors.InvalidTextRepresentation):
            cur.execute("CALL add_trip('Paris', '2025-10-01', '2025-10-10', 1500.00, 'CANCELLED')")
    pg_connection.rollback()


@pytest.mark.integration
def test_trip_check_constraints(pg_connection):
    with pg_connection.cursor() as cur:
        with pytest.raises(psycopg.errors.CheckViolation):
            cur.execute("CALL add_trip('Paris', '2025-10-10', '2025-10-01', 1500.00)")
    pg_connection.rollback()

    with pg_connection.cursor() as cur:
        with pytest.raises(psycopg.errors.CheckViolation):
            cur.execute("CALL add_trip('Paris', '2025-10-01', '2025-10-10', 0)")
    pg_connection.rollback()


@pytest.mark.integration
def test_duplicate_email_rejected(pg_connection):
    _seed(pg_connection)
    with pg_connection.cursor() as cur:
        with pytest.raises(psycopg.errors.UniqueViolation):
            cur.execute("INSERT INTO customers (name, email) VALUES ('Other', 'anmol@example.com')")
    pg_connection.rollback()


# ── Procedures and triggers ───────────────────────────────────────────────────


@pytest.mark.integration
def test_get_trips_by_status(pg_connection):
    _seed(pg_connection)
    with pg_connection.cursor() as cur:
        cur.execute("SELECT destination FROM get_trips_by_status('COMPLETED')")
        assert [row[0] for row in cur.fetchall()] == ["Rome"]


@pytest.mark.integration
def test_book_trip_procedure_logs_booking(pg_connection):
    _seed(pg_connection)
    with pg_connection.cursor() as cur:
        cur.execute("CALL book_trip(1, 1, 2)")
        cur.execute("SELECT booking_id, booking_date, seats FROM bookings")
        booking_id, booking_date, seats = cur.fetchone()
        cur.execute("SELECT booking_id FROM booking_logs")
        logged = [row[0] for row in cur.fetchall()]
    pg_connection.commit()

    assert booking_date == date.today()
    assert seats == 2
    assert logged == [booking_id]


@pytest.mark.integration
def test_book_completed_trip_rejected(pg_connection):
    _seed(pg_connection)
    with pg_connection.cursor() as cur:
        with pytest.raises(psycopg.errors.CheckViolation, match="Cannot book a completed trip"):
            cur.execute("CALL book_trip(1, 2, 2)")
    pg_connection.rollback()

    assert _scalar(pg_connection, "SELECT COUNT(*) FROM bookings") == 0
    assert _scalar(pg_connection, "SELECT COUNT(*) FROM booking_logs") == 0


@pytest.mark.integration
def test_cancel_booking_keeps_log(pg_connection):
    _seed(pg_connection)
    with pg_connection.cursor() as cur:
        cur.execute("CALL book_trip(1, 1, 2)")
        cur.execute("CALL book_trip(2, 1, 1)")
        cur.execute("CALL cancel_booking(1)")
    pg_connection.commit()

    assert _scalar(pg_connection, "SELECT COUNT(*) FROM bookings") == 1
    assert _scalar(pg_connection, "SELECT COUNT(*) FROM booking_logs") == 2


@pytest.mark.integration
def test_duration_and_revenue_functions(pg_connection):
    _seed(pg_connection)
    with pg_connection.cursor() as cur:
        cur.execute("CALL book_trip(1, 1, 2)")
        cur.execute("CALL book_trip(2, 1, 3)")
    pg_connection.commit()

    assert _scalar(pg_connection, "SELECT trip_duration(%s)", (1,)) == 9
    assert _scalar(pg_connection, "SELECT trip_revenue(%s)", (1,)) == Decimal("7500.00")
    assert _scalar(pg_connection, "SELECT trip_revenue(%s)", (2,)) is None
    assert _scalar(pg_connection, "SELECT trip_duration(%s)", (99,)) is None


# ── Services on PostgreSQL ────────────────────────────────────────────────────


@pytest.mark.integration
def test_services_against_postgres(pg_database):
    with pg_database.session() as session:
        load_sample_data(session)

        assert trip_duration(session, 1) == 9
        assert trip_revenue(session, 5) == Decimal("10000.00")
        assert [c.name for c in get_customers_by_destination(session, "Paris")] == ["Anmol"]

        most = get_most_booked_trip(session)
        assert (most.trip_id, most.total_bookings) == (1, 1)

        booking = book_trip(session, customer_id=2, trip_id=1, seats=1)
        assert len(get_booking_logs(session, booking.booking_id)) == 1
        cancel_booking(session, booking.booking_id)
        assert len(get_booking_logs(session, booking.booking_id)) == 1


@pytest.mark.integration
def test_service_rejects_completed_trip_on_postgres(pg_database):
    with pg_database.session() as session:
        load_sample_data(session)
        set_trip_status(session, 3, TripStatus.COMPLETED)

        with pytest.raises(BookingRejectedError) as exc_info:
            book_trip(session, customer_id=1, trip_id=3, seats=1)
        assert exc_info.value.code == ErrorCode.TRIP_COMPLETED
