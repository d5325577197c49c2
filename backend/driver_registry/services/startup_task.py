from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import structlog

from driver_registry.domain.entities.driver import FormulaOneDriver
from driver_registry.domain.interfaces.driver_repo import DriverRepository

log = structlog.get_logger(__name__)

LOOKUP_DRIVER_NUMBER = 81


def seed_drivers() -> list[FormulaOneDriver]:
    return [
        FormulaOneDriver(driver_number=1, full_name="Max Verstappen", team="Red Bull"),
        FormulaOneDriver(driver_number=81, full_name="Oscar Piastri", team="McLaren"),
        FormulaOneDriver(driver_number=16, full_name="Charles Leclerc", team="Ferrari"),
    ]


@dataclass
class StartupResult:
    deleted: int
    count: int
    found: Optional[FormulaOneDriver]


async def run_startup_task(repo: DriverRepository, echo: Callable[[str], None] = print) -> StartupResult:
    """
    Reset the driver table and report on it:
    delete every row, insert the seed drivers, count them and look one up by number.
    """
    deleted = await repo.delete_all()
    log.info("drivers.deleted", rows=deleted)

    for driver in seed_drivers():
        echo(f"Inserting: {driver!r}")
        await repo.insert(driver)

    count = len(await repo.find_all_drivers())
    echo(f"The database contains {count} drivers")

    echo(f"Finding driver with driver number {LOOKUP_DRIVER_NUMBER}")
    found = await repo.find_by_driver_number(LOOKUP_DRIVER_NUMBER)
    echo(f"Found driver: {found.full_name if found else None}")

    log.info("startup_task.done", count=count, found=found.driver_number if found else None)
    return StartupResult(deleted=deleted, count=count, found=found)
