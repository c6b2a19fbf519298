from planet_ai.models.energy_cell import EnergyCell, EnergyCellBank  # noqa: F401
from planet_ai.models.events import Asteroid, Rocket, Sunray  # noqa: F401
from planet_ai.models.planet_ai import PlanetAI  # noqa: F401
from planet_ai.models.planet_state import PlanetState  # noqa: F401
from planet_ai.models.resource import (  # noqa: F401
    BasicResource,
    BasicResourceType,
    ComplexResource,
    ComplexResourceRequest,
    ComplexResourceType,
)
from planet_ai.models.rocket_strategy import RocketStrategy  # noqa: F401
