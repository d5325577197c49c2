# --- Alembic env.py (PostgreSQL + psycopg3) ---

from logging.config import fileConfig

from dotenv import load_dotenv
from alembic import context
from sqlalchemy import engine_from_config, pool

# CLI runs from backend/ (alembic.ini prepends it to sys.path); pick up its .env
load_dotenv(".env")

# Import SQLAlchemy Base and models (so Alembic sees metadata)
from driver_registry.core.config import settings
from driver_registry.infrastructure.db.base import Base
from driver_registry.domain.entities import driver  # noqa: F401
from driver_registry.infrastructure.db.migrations import sync_database_url

# Alembic Config
config = context.config

# Only the CLI passes an ini file; programmatic runs keep the app's logging
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def get_url() -> str:
    """Return the sync DB URL for Alembic: the configured option first, then the app settings."""
    return sync_database_url(config.get_main_option("sqlalchemy.url") or settings.database_url)


def run_migrations_offline() -> None:
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        {"sqlalchemy.url": get_url()},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
