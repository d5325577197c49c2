"""Pytest configuration and fixtures."""

import os
import tempfile
from pathlib import Path

import pytest
import pytest_asyncio

# Set test environment variables before importing app modules
DB_PATH = Path(tempfile.gettempdir()) / f"driver_registry_test_{os.getpid()}.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{DB_PATH}"
os.environ.setdefault("DB_CONNECT_ATTEMPTS", "1")
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture(scope="session")
def database_url():
    """Async URL of the throwaway SQLite database."""
    return os.environ["DATABASE_URL"]


@pytest.fixture(scope="session")
def migrated_db(database_url):
    """Fresh database with every migration applied."""
    from driver_registry.infrastructure.db.migrations import run_migrations

    DB_PATH.unlink(missing_ok=True)
    run_migrations(database_url)
    yield database_url
    DB_PATH.unlink(missing_ok=True)


@pytest_asyncio.fixture
async def session(migrated_db):
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

    engine = create_async_engine(migrated_db)
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with maker() as s:
        yield s
    await engine.dispose()


@pytest_asyncio.fixture
async def repo(session):
    """Repository over an empty driver table."""
    from driver_registry.infrastructure.repositories.driver_repo_sql import SQLDriverRepository

    r = SQLDriverRepository(session)
    await r.delete_all()
    return r
