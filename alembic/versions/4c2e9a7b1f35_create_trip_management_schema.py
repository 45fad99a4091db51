"""create_trip_management_schema

Revision ID: 4c2e9a7b1f35
Revises:
Create Date: 2025-09-04 10:12:41.208315

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from trip_management.db.ddl import POSTGRES_DROP_ROUTINES, POSTGRES_ROUTINES


# revision identifiers, used by Alembic.
revision: str = '4c2e9a7b1f35'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("CREATE TYPE trip_status AS ENUM ('PLANNED', 'ONGOING', 'COMPLETED')")

    op.execute("""
        CREATE TABLE trips (
            trip_id SERIAL PRIMARY KEY,
            destination VARCHAR(50) NOT NULL,
            start_date DATE NOT NULL,
            end_date DATE NOT NULL,
            price NUMERIC(10, 2) NOT NULL,
            status trip_status NOT NULL DEFAULT 'PLANNED',
            CONSTRAINT chk_trips_dates CHECK (end_date > start_date),
            CONSTRAINT chk_trips_price CHECK (price > 0)
        )
    """)
    op.execute("CREATE INDEX idx_trips_status ON trips (status)")
    op.execute("CREATE INDEX idx_trips_destination ON trips (destination)")

    op.execute("""
        CREATE TABLE customers (
            customer_id SERIAL PRIMARY KEY,
            name VARCHAR(50) NOT NULL,
            email VARCHAR(100) NOT NULL,
            phone VARCHAR(15),
            CONSTRAINT uq_customers_email UNIQUE (email),
            CONSTRAINT uq_customers_phone UNIQUE (phone)
        )
    """)

    # trip_id / customer_id are required references
    op.execute("""
        CREATE TABLE bookings (
            booking_id SERIAL PRIMARY KEY,
            trip_id INTEGER NOT NULL REFERENCES trips (trip_id),
            customer_id INTEGER NOT NULL REFERENCES customers (customer_id),
            booking_date DATE NOT NULL,
            seats INTEGER NOT NULL,
            CONSTRAINT chk_bookings_seats CHECK (seats > 0)
        )
    """)
    op.execute("CREATE INDEX idx_bookings_trip_id ON bookings (trip_id)")
    op.execute("CREATE INDEX idx_bookings_customer_id ON bookings (customer_id)")
    op.execute("CREATE INDEX idx_bookings_booking_date ON bookings (booking_date)")

    # No foreign key on booking_id: log rows outlive cancelled bookings
    op.execute("""
        CREATE TABLE booking_logs (
            log_id SERIAL PRIMARY KEY,
            booking_id INTEGER NOT NULL,
            log_time TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)
    op.execute("CREATE INDEX idx_booking_logs_booking_id ON booking_logs (booking_id)")

    # Triggers, derived-value functions and procedures
    for statement in POSTGRES_ROUTINES:
        op.execute(statement)


def downgrade() -> None:
    """Downgrade schema."""
    for statement in POSTGRES_DROP_ROUTINES:
        op.execute(statement)

    op.execute("DROP TABLE IF EXISTS booking_logs")
    op.execute("DROP TABLE IF EXISTS bookings")
    op.execute("DROP TABLE IF EXISTS customers")
    op.execute("DROP TABLE IF EXISTS trips")
    op.execute("DROP TYPE IF EXISTS trip_status")
