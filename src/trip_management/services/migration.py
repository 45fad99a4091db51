"""Run Alembic migrations programmatically."""

import io
import logging

from alembic.config import Config

from alembic import command
from trip_management.config import Config as AppConfig
from trip_management.config import get_config

logger = logging.getLogger(__name__)


def run_migrations(app_config: AppConfig | None = None, revision: str = "head") -> dict[str, str]:
    """Upgrade the configured database to revision and return the captured alembic output."""
    app_config = app_config or get_config()

    cfg = Config(app_config.alembic_config)
    cfg.set_main_option("script_location", app_config.alembic_script_location)

    stderr_buf = io.StringIO()
    stream_handler = logging.StreamHandler(stderr_buf)
    alembic_logger = logging.getLogger("alembic")
    alembic_logger.addHandler(stream_handler)

    try:
        command.upgrade(cfg, revision)
        output = stderr_buf.getvalue()
        logger.info("Migration complete: %s", output)
        return {"status": "success", "output": output}
    except Exception as e:
        logger.error("Migration failed: %s", e)
        raise
    finally:
        alembic_logger.removeHandler(stream_handler)
