import logging
import time
from pathlib import Path

from alembic import command
from alembic.config import Config

log = logging.getLogger("workout_tracker")

SCRIPT_LOCATION = Path(__file__).parent / "alembic"


def alembic_config(database_url: str) -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(SCRIPT_LOCATION))
    cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return cfg


def run_migrations(database_url: str) -> None:
    """Apply all pending migrations up to head."""
    log.info("Running migrations.")
    start = time.perf_counter()
    command.upgrade(alembic_config(database_url), "head")
    log.info("Running migrations done in %.1fms.", (time.perf_counter() - start) * 1000)
