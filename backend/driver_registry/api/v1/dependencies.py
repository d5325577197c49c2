from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from driver_registry.infrastructure.db.session import get_session
from driver_registry.infrastructure.repositories.driver_repo_sql import SQLDriverRepository

def driver_repository(session: AsyncSession = Depends(get_session)) -> SQLDriverRepository:
    return SQLDriverRepository(session)
