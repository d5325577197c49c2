from fastapi import APIRouter, Depends, HTTPException
from driver_registry.api.v1.dependencies import driver_repository
from driver_registry.infrastructure.repositories.driver_repo_sql import SQLDriverRepository
from driver_registry.schemas.driver import DriverOut

router = APIRouter(prefix="/api/v1/drivers", tags=["drivers"])

@router.get("", response_model=list[DriverOut])
async def list_drivers(repo: SQLDriverRepository = Depends(driver_repository)):
    items = await repo.find_all_drivers()
    return [DriverOut.model_validate(i) for i in items]

@router.get("/{driver_number}", response_model=DriverOut)
async def get_driver(driver_number: int, repo: SQLDriverRepository = Depends(driver_repository)):
    obj = await repo.find_by_driver_number(driver_number)
    if obj is None:
        raise HTTPException(status_code=404, detail=f"No driver with number {driver_number}")
    return DriverOut.model_validate(obj)
