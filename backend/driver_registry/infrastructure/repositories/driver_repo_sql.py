from sqlalchemy import select, insert, delete
from sqlalchemy.ext.asyncio import AsyncSession
from driver_registry.domain.entities.driver import FormulaOneDriver
from typing import Sequence, Optional

class SQLDriverRepository:
    """One method per SQL statement; each statement commits on its own."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all_drivers(self) -> Sequence[FormulaOneDriver]:
        res = await self.session.execute(select(FormulaOneDriver).order_by(FormulaOneDriver.driver_number))
        return list(res.scalars().all())

    async def find_by_driver_number(self, driver_number:int) -> Optional[FormulaOneDriver]:
        res = await self.session.execute(select(FormulaOneDriver).where(FormulaOneDriver.driver_number==driver_number))
        return res.scalar_one_or_none()

    async def insert(self, driver:FormulaOneDriver) -> int:
        stmt = insert(FormulaOneDriver.__table__).values(
            driver_number=driver.driver_number, full_name=driver.full_name, team=driver.team
        )
        res = await self.session.execute(stmt)
        await self.session.commit()
        return res.rowcount

    async def delete_all(self) -> int:
        res = await self.session.execute(delete(FormulaOneDriver))
        await self.session.commit()
        return res.rowcount
