import asyncio

import pytest

from planet_ai.data.planet_types import PlanetType
from planet_ai.models.events import Sunray
from planet_ai.models.planet_state import PlanetState
from planet_ai.models.rocket_strategy import RocketStrategy
from planet_ai.main import new_planet


@pytest.fixture
def state() -> PlanetState:
    """A fresh type A planet: five empty cells, rockets allowed."""
    return PlanetState(1, PlanetType.A)


@pytest.fixture
def charge():
    """Feed `count` sunrays straight into a planet state's cell bank."""

    def _charge(state: PlanetState, count: int) -> None:
        for _ in range(count):
            state.charge_cell(Sunray())

    return _charge


@pytest.fixture
async def running_planet():
    """Start planet loops on demand; every loop is cancelled at teardown."""
    tasks: list[asyncio.Task] = []

    async def _start(**kwargs):
        kwargs.setdefault("planet_id", 1)
        kwargs.setdefault("rocket_strategy", RocketStrategy.default)
        planet = new_planet(**kwargs)
        tasks.append(asyncio.create_task(planet.run()))
        return planet

    yield _start

    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)
