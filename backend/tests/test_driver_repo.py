"""Tests for the SQL driver repository."""

import pytest
from sqlalchemy.exc import IntegrityError

from driver_registry.domain.entities.driver import FormulaOneDriver


def _driver(number, name, team=None):
    return FormulaOneDriver(driver_number=number, full_name=name, team=team)


class TestInsertAndFind:
    @pytest.mark.asyncio
    async def test_insert_returns_row_count(self, repo):
        assert await repo.insert(_driver(44, "Lewis Hamilton", "Ferrari")) == 1

    @pytest.mark.asyncio
    async def test_find_all_is_ordered_by_number(self, repo):
        await repo.insert(_driver(81, "Oscar Piastri", "McLaren"))
        await repo.insert(_driver(1, "Max Verstappen", "Red Bull"))
        await repo.insert(_driver(16, "Charles Leclerc", "Ferrari"))

        drivers = await repo.find_all_drivers()

        assert [d.driver_number for d in drivers] == [1, 16, 81]
        assert drivers[0].full_name == "Max Verstappen"

    @pytest.mark.asyncio
    async def test_find_all_on_empty_table(self, repo):
        assert await repo.find_all_drivers() == []

    @pytest.mark.asyncio
    async def test_find_by_driver_number(self, repo):
        await repo.insert(_driver(81, "Oscar Piastri", "McLaren"))

        found = await repo.find_by_driver_number(81)

        assert found is not None
        assert found.full_name == "Oscar Piastri"
        assert found.team == "McLaren"

    @pytest.mark.asyncio
    async def test_find_missing_number_returns_none(self, repo):
        await repo.insert(_driver(81, "Oscar Piastri", "McLaren"))
        assert await repo.find_by_driver_number(99) is None

    @pytest.mark.asyncio
    async def test_team_is_optional(self, repo):
        await repo.insert(_driver(4, "Lando Norris"))
        found = await repo.find_by_driver_number(4)
        assert found.team is None

    @pytest.mark.asyncio
    async def test_duplicate_number_raises(self, repo, session):
        await repo.insert(_driver(1, "Max Verstappen", "Red Bull"))

        with pytest.raises(IntegrityError):
            await repo.insert(_driver(1, "Someone Else", "Nobody"))
        await session.rollback()

        assert len(await repo.find_all_drivers()) == 1


class TestDeleteAll:
    @pytest.mark.asyncio
    async def test_delete_all_returns_deleted_count(self, repo):
        await repo.insert(_driver(1, "Max Verstappen", "Red Bull"))
        await repo.insert(_driver(16, "Charles Leclerc", "Ferrari"))

        assert await repo.delete_all() == 2
        assert await repo.find_all_drivers() == []

    @pytest.mark.asyncio
    async def test_delete_all_on_empty_table(self, repo):
        assert await repo.delete_all() == 0

    @pytest.mark.asyncio
    async def test_loaded_driver_is_gone_after_delete(self, repo):
        await repo.insert(_driver(16, "Charles Leclerc", "Ferrari"))
        assert await repo.find_by_driver_number(16) is not None

        await repo.delete_all()

        assert await repo.find_by_driver_number(16) is None
