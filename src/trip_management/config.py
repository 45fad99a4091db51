from os import environ

from pydantic import BaseModel, ConfigDict


def _env_flag(name: str, default: str = "false") -> bool:
    return environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    database_url: str | None = None
    db_host: str
    db_port: int
    db_name: str
    db_user: str
    db_password: str
    db_secret_arn: str | None = None
    db_echo: bool = False
    alembic_config: str
    alembic_script_location: str
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config. Tests only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        database_url=environ.get("TRIPS_DATABASE_URL") or None,
        db_host=environ.get("DB_HOST", "localhost"),
        db_port=int(environ.get("DB_PORT", "5432")),
        db_name=environ.get("DB_NAME", "trip_management"),
        db_user=environ.get("DB_USER", "trip_management"),
        db_password=environ.get("DB_PASSWORD", "localdev"),
        db_secret_arn=environ.get("DB_SECRET_ARN") or None,
        db_echo=_env_flag("DB_ECHO"),
        alembic_config=environ.get("ALEMBIC_CONFIG", "alembic.ini"),
        alembic_script_location=environ.get("ALEMBIC_SCRIPT_LOCATION", "alembic"),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
