"""
Triggers and stored routines that live in the database next to the tables.

Booking inserts, whether issued by book_trip() or by any other client, go
through two row-level triggers inside the inserting statement:

    prevent_completed_booking  BEFORE INSERT  aborts when the trip is COMPLETED
    after_booking_insert       AFTER INSERT   appends one booking_logs row

A failing audit insert aborts the booking as well (fail-closed).

PostgreSQL additionally gets the trip_duration / trip_revenue functions and
the add_trip / get_trips_by_status / book_trip / cancel_booking routines for
SQL callers. SQLite has no stored routines; services/ covers those there.

Statements are kept one per string because sqlite3 executes a single
statement per call. DDL() applies %-formatting, so no literal percent signs.
"""

from sqlalchemy import DDL, MetaData, event

COMPLETED_TRIP_MESSAGE = "Cannot book a completed trip"

POSTGRES_ROUTINES: tuple[str, ...] = (
    f"""
    CREATE OR REPLACE FUNCTION prevent_completed_booking() RETURNS trigger
    LANGUAGE plpgsql AS $$
    DECLARE
        current_status trip_status;
    BEGIN
        SELECT status INTO current_status FROM trips WHERE trip_id = NEW.trip_id FOR SHARE;
        IF current_status = 'COMPLETED' THEN
            RAISE EXCEPTION '{COMPLETED_TRIP_MESSAGE}' USING ERRCODE = 'check_violation';
        END IF;
        RETURN NEW;
    END;
    $$
    """,
    "DROP TRIGGER IF EXISTS prevent_completed_booking ON bookings",
    """
    CREATE TRIGGER prevent_completed_booking
    BEFORE INSERT ON bookings
    FOR EACH ROW EXECUTE FUNCTION prevent_completed_booking()
    """,
    """
    CREATE OR REPLACE FUNCTION after_booking_insert() RETURNS trigger
    LANGUAGE plpgsql AS $$
    BEGIN
        INSERT INTO booking_logs (booking_id) VALUES (NEW.booking_id);
        RETURN NEW;
    END;
    $$
    """,
    "DROP TRIGGER IF EXISTS after_booking_insert ON bookings",
    """
    CREATE TRIGGER after_booking_insert
    AFTER INSERT ON bookings
    FOR EACH ROW EXECUTE FUNCTION after_booking_insert()
    """,
    """
    CREATE OR REPLACE FUNCTION trip_duration(t_id INTEGER) RETURNS INTEGER
    LANGUAGE sql STABLE AS $$
        SELECT end_date - start_date FROM trips WHERE trip_id = t_id
    $$
    """,
    """
    CREATE OR REPLACE FUNCTION trip_revenue(t_id INTEGER) RETURNS NUMERIC
    LANGUAGE sql STABLE AS $$
        SELECT SUM(b.seats * t.price)::NUMERIC(10, 2)
        FROM bookings b JOIN trips t ON b.trip_id = t.trip_id
        WHERE t.trip_id = t_id
    $$
    """,
    """
    CREATE OR REPLACE PROCEDURE add_trip(
        p_destination VARCHAR,
        p_start DATE,
        p_end DATE,
        p_price NUMERIC,
        p_status trip_status DEFAULT 'PLANNED'
    )
    LANGUAGE sql AS $$
        INSERT INTO trips (destination, start_date, end_date, price, status)
        VALUES (p_destination, p_start, p_end, p_price, p_status)
    $$
    """,
    """
    CREATE OR REPLACE FUNCTION get_trips_by_status(p_status trip_status) RETURNS SETOF trips
    LANGUAGE sql STABLE AS $$
        SELECT * FROM trips WHERE status = p_status ORDER BY trip_id
    $$
    """,
    """
    CREATE OR REPLACE PROCEDURE book_trip(p_customer INTEGER, p_trip INTEGER, p_seats INTEGER)
    LANGUAGE sql AS $$
        INSERT INTO bookings (trip_id, customer_id, booking_date, seats)
        VALUES (p_trip, p_customer, CURRENT_DATE, p_seats)
    $$
    """,
    """
    CREATE OR REPLACE PROCEDURE cancel_booking(p_booking_id INTEGER)
    LANGUAGE sql AS $$
        DELETE FROM bookings WHERE booking_id = p_booking_id
    $$
    """,
)

# get_trips_by_status depends on the trips row type, so routines go before the tables.
POSTGRES_DROP_ROUTINES: tuple[str, ...] = (
    "DROP PROCEDURE IF EXISTS cancel_booking(INTEGER)",
    "DROP PROCEDURE IF EXISTS book_trip(INTEGER, INTEGER, INTEGER)",
    "DROP FUNCTION IF EXISTS get_trips_by_status(trip_status)",
    "DROP PROCEDURE IF EXISTS add_trip(VARCHAR, DATE, DATE, NUMERIC, trip_status)",
    "DROP FUNCTION IF EXISTS trip_revenue(INTEGER)",
    "DROP FUNCTION IF EXISTS trip_duration(INTEGER)",
    "DROP FUNCTION IF EXISTS after_booking_insert() CASCADE",
    "DROP FUNCTION IF EXISTS prevent_completed_booking() CASCADE",
)

SQLITE_TRIGGERS: tuple[str, ...] = (
    f"""
    CREATE TRIGGER IF NOT EXISTS prevent_completed_booking
    BEFORE INSERT ON bookings
    FOR EACH ROW
    WHEN (SELECT status FROM trips WHERE trip_id = NEW.trip_id) = 'COMPLETED'
    BEGIN
        SELECT RAISE(ABORT, '{COMPLETED_TRIP_MESSAGE}');
    END
    """,
    """
    CREATE TRIGGER IF NOT EXISTS after_booking_insert
    AFTER INSERT ON bookings
    FOR EACH ROW
    BEGIN
        INSERT INTO booking_logs (booking_id) VALUES (NEW.booking_id);
    END
    """,
)


def register_ddl(metadata: MetaData) -> None:
    """Attach triggers and routines to metadata create/drop events."""
    for statement in POSTGRES_ROUTINES:
        event.listen(metadata, "after_create", DDL(statement).execute_if(dialect="postgresql"))
    for statement in POSTGRES_DROP_ROUTINES:
        event.listen(metadata, "before_drop", DDL(statement).execute_if(dialect="postgresql"))
    for statement in SQLITE_TRIGGERS:
        event.listen(metadata, "after_create", DDL(statement).execute_if(dialect="sqlite"))
