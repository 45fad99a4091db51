"""Database client: engine and session management, schema install."""

import json
import logging
from typing import Any

import boto3
from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from trip_management.config import Config
from trip_management.db.schemas import Base
from trip_management.errors import DatabaseError, ErrorCode

logger = logging.getLogger(__name__)


def fetch_secret_credentials(config: Config) -> dict[str, Any]:
    """Read JSON database credentials from Secrets Manager."""
    client = boto3.client("secretsmanager", region_name=config.aws_region)
    secret = client.get_secret_value(SecretId=config.db_secret_arn)
    return json.loads(secret["SecretString"])


def build_database_url(config: Config, credentials: dict[str, Any] | None = None) -> URL:
    """An explicit TRIPS_DATABASE_URL wins; otherwise PostgreSQL from DB_* settings and secret."""
    if config.database_url:
        return make_url(config.database_url)

    creds = credentials or {}
    return URL.create(
        "postgresql+psycopg",
        username=creds.get("username", creds.get("user", config.db_user)),
        password=creds.get("password", config.db_password),
        host=creds.get("host", config.db_host),
        port=int(creds.get("port", config.db_port)),
        database=creds.get("dbname", config.db_name),
    )


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


class Database:
    def __init__(self, config: Config) -> None:
        self._config = config
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None
        self._secret_cache: dict[str, Any] | None = None

    def _get_credentials(self) -> dict[str, Any] | None:
        if not self._config.db_secret_arn:
            return None
        if self._secret_cache is None:
            self._secret_cache = fetch_secret_credentials(self._config)
        return self._secret_cache

    @property
    def url(self) -> URL:
        return build_database_url(self._config, self._get_credentials())

    @property
    def engine(self) -> Engine:
        return self._require_engine()

    def connect(self) -> None:
        url = self.url
        is_sqlite = url.get_backend_name() == "sqlite"

        engine_kwargs: dict[str, Any] = {"echo": self._config.db_echo}
        if is_sqlite:
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                # One shared connection, otherwise every session sees an empty database
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_pre_ping"] = True

        engine = create_engine(url, **engine_kwargs)
        if is_sqlite:
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)

        self._engine = engine
        self._session_factory = sessionmaker(bind=engine, autoflush=False)
        logger.info("Connected to %s", url.render_as_string(hide_password=True))

    def disconnect(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._session_factory = None

    def _require_engine(self) -> Engine:
        """Return the active engine or raise if not connected."""
        if self._engine is None:
            raise DatabaseError(
                "Database is not connected. Call connect() first.",
                code=ErrorCode.DATABASE_UNAVAILABLE,
            )
        return self._engine

    def session(self) -> Session:
        self._require_engine()
        if self._session_factory is None:
            raise DatabaseError(
                "Database has no session factory. Call connect() first.",
                code=ErrorCode.DATABASE_UNAVAILABLE,
            )
        return self._session_factory()

    def create_schema(self) -> None:
        """Create tables, constraints, triggers and (on PostgreSQL) stored routines."""
        Base.metadata.create_all(self._require_engine())

    def drop_schema(self) -> None:
        Base.metadata.drop_all(self._require_engine())

    def health_check(self) -> bool:
        try:
            engine = self._require_engine()
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception:
            logger.warning("Database health check failed", exc_info=True)
            return False

    def __enter__(self) -> "Database":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()
