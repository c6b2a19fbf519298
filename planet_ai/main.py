"""Planet construction and process-level setup."""

import asyncio
import logging

from planet_ai.config import Settings, settings
from planet_ai.data.planet_types import PlanetType, validate_rules
from planet_ai.models.planet_ai import PlanetAI
from planet_ai.models.planet_state import PlanetState
from planet_ai.models.resource import BasicResourceType, ComplexResourceType
from planet_ai.models.rocket_strategy import RocketStrategy
from planet_ai.services.planet_loop import Planet
from planet_ai.services.production_service import Combinator, Generator

logger = logging.getLogger(__name__)


def configure_logging(level: str | int = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def new_planet(
    planet_id: int,
    planet_type: PlanetType = PlanetType.A,
    rocket_strategy: RocketStrategy = RocketStrategy.default,
    basic_resource: BasicResourceType = BasicResourceType.hydrogen,
    combination_rules: list[ComplexResourceType] | None = None,
    from_orchestrator: asyncio.Queue | None = None,
    to_orchestrator: asyncio.Queue | None = None,
    from_explorer: asyncio.Queue | None = None,
    to_explorer: asyncio.Queue | None = None,
) -> Planet:
    """Build a planet that generates only `basic_resource`.

    Raises ValueError if the generation or combination rules are not
    allowed for `planet_type`.  `rocket_strategy` also accepts the legacy
    integer codes understood by Settings.  Queues that are not supplied are created
    unbounded.
    """
    planet_type = PlanetType(planet_type)
    generation_rules = [BasicResourceType(basic_resource)]
    combination_rules = [ComplexResourceType(c) for c in (combination_rules or [])]
    validate_rules(planet_type, generation_rules, combination_rules)

    state = PlanetState(planet_id, planet_type)
    ai = PlanetAI(rocket_strategy=RocketStrategy.coerce(rocket_strategy), basic_resource=generation_rules[0])

    planet = Planet(
        state=state,
        ai=ai,
        generator=Generator(generation_rules),
        combinator=Combinator(combination_rules),
        from_orchestrator=from_orchestrator if from_orchestrator is not None else asyncio.Queue(),
        to_orchestrator=to_orchestrator if to_orchestrator is not None else asyncio.Queue(),
        from_explorer=from_explorer if from_explorer is not None else asyncio.Queue(),
        to_explorer=to_explorer if to_explorer is not None else asyncio.Queue(),
    )
    logger.info(
        "Planet %s created: type=%s strategy=%s resource=%s combinations=%s",
        planet_id,
        planet_type.value,
        ai.rocket_strategy.value,
        ai.basic_resource.value,
        [c.value for c in combination_rules],
    )
    return planet


def new_planet_from_settings(config: Settings = settings) -> Planet:
    """Build a planet from PLANET_* environment settings."""
    configure_logging(config.log_level)
    size = config.outbound_queue_size
    return new_planet(
        planet_id=config.planet_id,
        planet_type=config.planet_type,
        rocket_strategy=config.rocket_strategy,
        basic_resource=config.basic_resource,
        combination_rules=config.combination_rules,
        to_orchestrator=asyncio.Queue(maxsize=size),
        to_explorer=asyncio.Queue(maxsize=size),
    )
