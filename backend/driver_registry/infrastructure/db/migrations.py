from __future__ import annotations

from pathlib import Path

import structlog
from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from sqlalchemy import create_engine, pool
from sqlalchemy.engine import make_url

from driver_registry.core.config import settings

log = structlog.get_logger(__name__)

ALEMBIC_DIR = Path(__file__).resolve().parents[2] / "migrations"  # ships inside the package

# Alembic runs on sync engines; map async drivers onto their sync counterparts.
_SYNC_DRIVERS = {
    "sqlite+aiosqlite": "sqlite",
    "postgresql+asyncpg": "postgresql+psycopg",
}


def sync_database_url(url: str) -> str:
    parsed = make_url(url)
    driver = _SYNC_DRIVERS.get(parsed.drivername)
    if driver is None:
        return url
    return parsed.set(drivername=driver).render_as_string(hide_password=False)


def alembic_config(database_url: str | None = None) -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    # ConfigParser interpolation treats '%' specially
    url = sync_database_url(database_url or settings.database_url)
    cfg.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    return cfg


def run_migrations(database_url: str | None = None) -> None:
    """Upgrade the schema to the latest revision. A database already at head is left untouched."""
    cfg = alembic_config(database_url)
    log.info("migrations.upgrade", target="head", before=current_revision(database_url))
    command.upgrade(cfg, "head")
    log.info("migrations.done", revision=current_revision(database_url))


def current_revision(database_url: str | None = None) -> str | None:
    engine = create_engine(sync_database_url(database_url or settings.database_url), poolclass=pool.NullPool)
    try:
        with engine.connect() as conn:
            return MigrationContext.configure(conn).get_current_revision()
    finally:
        engine.dispose()
