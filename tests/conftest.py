"""Shared test fixtures for trip management."""

import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from trip_management.config import Config  # noqa: E402
from trip_management.db import Database  # noqa: E402
from trip_management.sample_data import load_sample_data  # noqa: E402


@pytest.fixture
def config_factory():
    """Build a Config without touching the environment; in-memory SQLite by default."""

    def _make(**overrides: object) -> Config:
        values: dict[str, object] = {
            "aws_region": "us-east-1",
            "database_url": "sqlite://",
            "db_host": "localhost",
            "db_port": 5432,
            "db_name": "trip_management",
            "db_user": "trip_management",
            "db_password": "localdev",
            "alembic_config": "alembic.ini",
            "alembic_script_location": "alembic",
            "environment": "test",
        }
        values.update(overrides)
        return Config(**values)

    return _make


# SQLite fixtures
@pytest.fixture
def database(config_factory):
    """Fresh in-memory database with tables, constraints and triggers installed."""
    db = Database(config_factory())
    db.connect()
    db.create_schema()
    yield db
    db.disconnect()


@pytest.fixture
def session(database):
    with database.session() as s:
        yield s


@pytest.fixture
def sample_session(session):
    """Session over the sample dataset: trips 1-10, customers 1-10, one booking per trip."""
    load_sample_data(session)
    return session


# PostgreSQL fixtures
@pytest.fixture
def pg_database():
    """Provide a PostgreSQL database with a freshly installed schema."""
    from trip_management.config import get_config

    db = Database(get_config())
    db.connect()
    db.drop_schema()
    db.create_schema()
    yield db

    db.drop_schema()
    db.disconnect()


@pytest.fixture
def pg_connection(pg_database):
    """Provide a raw psycopg connection to the schema installed by pg_database."""
    import psycopg

    url = pg_database.url
    conn = psycopg.connect(
        host=url.host,
        port=url.port,
        dbname=url.database,
        user=url.username,
        password=url.password,
    )
    yield conn

    # Rollback any uncommitted changes
    conn.rollback()
    conn.close()
