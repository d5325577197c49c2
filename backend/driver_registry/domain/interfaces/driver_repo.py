from typing import Protocol, Sequence, Optional
from driver_registry.domain.entities.driver import FormulaOneDriver

class DriverRepository(Protocol):
    async def find_all_drivers(self) -> Sequence[FormulaOneDriver]: ...
    async def find_by_driver_number(self, driver_number:int) -> Optional[FormulaOneDriver]: ...
    async def insert(self, driver:FormulaOneDriver) -> int: ...
    async def delete_all(self) -> int: ...
