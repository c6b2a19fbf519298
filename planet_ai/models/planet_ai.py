from dataclasses import dataclass

from planet_ai.models.resource import BasicResourceType
from planet_ai.models.rocket_strategy import RocketStrategy


@dataclass
class PlanetAI:
    """Decision settings for a planet plus its running flag.

    `basic_resource` is the only basic resource explorers may ask this
    planet to generate.
    """
    rocket_strategy: RocketStrategy = RocketStrategy.default
    basic_resource: BasicResourceType = BasicResourceType.hydrogen
    running: bool = False
