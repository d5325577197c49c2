import logging
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from tenacity import AsyncRetrying, before_sleep_log, stop_after_attempt, wait_exponential
from driver_registry.core.config import settings

log = logging.getLogger("driver_registry.db")

engine = create_async_engine(
    settings.database_url,
    pool_pre_ping=True,
)

SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

async def get_session() -> AsyncSession:
    async with SessionLocal() as session:
        yield session

async def wait_for_database(bind: AsyncEngine | None = None, attempts: int | None = None) -> None:
    """Block until the database answers ``SELECT 1``; re-raise the last error when it never does."""
    bind = bind or engine
    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(attempts or settings.db_connect_attempts),
        wait=wait_exponential(min=0.5, max=4),
        before_sleep=before_sleep_log(log, logging.WARNING),
        reraise=True,
    ):
        with attempt:
            async with bind.connect() as conn:
                await conn.execute(text("SELECT 1"))
