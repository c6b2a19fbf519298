"""Request router — turns one inbound message into at most one reply.

A request that is legal but currently refused (no charged cell, wrong
resource type, reserve threshold, no combination recipes) gets no reply at
all.  Callers must read silence as "denied"; there is no way to tell a
policy refusal from temporary unavailability.
"""

from __future__ import annotations

import logging

from planet_ai.models.events import Rocket
from planet_ai.models.planet_ai import PlanetAI
from planet_ai.models.planet_state import PlanetState
from planet_ai.schemas.explorer import (
    AvailableEnergyCellRequest,
    AvailableEnergyCellResponse,
    CombineResourceRequest,
    CombineResourceResponse,
    ExplorerToPlanet,
    GenerateResourceRequest,
    GenerateResourceResponse,
    PlanetToExplorer,
    SupportedCombinationRequest,
    SupportedCombinationResponse,
    SupportedResourceRequest,
    SupportedResourceResponse,
)
from planet_ai.schemas.orchestrator import (
    AsteroidAck,
    AsteroidMsg,
    InternalStateRequest,
    InternalStateResponse,
    OrchestratorToPlanet,
    PlanetToOrchestrator,
    StartPlanetAI,
    StopPlanetAI,
    SunrayAck,
    SunrayMsg,
)
from planet_ai.schemas.state import PlanetStateSnapshot
from planet_ai.services import rocket_policy
from planet_ai.services.production_service import CombinationError, Combinator, Generator

logger = logging.getLogger(__name__)


def build_snapshot(ai: PlanetAI, state: PlanetState) -> PlanetStateSnapshot:
    """Read-only view of the planet, with the emergency reserve hidden."""
    return PlanetStateSnapshot(
        planet_id=state.id(),
        planet_type=state.planet_type,
        energy_cells=rocket_policy.reported_energy_cells(ai.rocket_strategy, state),
        has_rocket=state.has_rocket(),
    )


# ---------------------------------------------------------------------------
# Orchestrator messages
# ---------------------------------------------------------------------------

def handle_orchestrator_msg(
    ai: PlanetAI,
    state: PlanetState,
    generator: Generator,
    combinator: Combinator,
    msg: OrchestratorToPlanet,
) -> PlanetToOrchestrator | None:
    if isinstance(msg, SunrayMsg):
        rocket_policy.on_sunray(ai.rocket_strategy, state, msg.sunray)
        return SunrayAck(planet_id=state.id())

    if isinstance(msg, InternalStateRequest):
        return InternalStateResponse(planet_id=state.id(), planet_state=build_snapshot(ai, state))

    if isinstance(msg, AsteroidMsg):
        rocket = handle_asteroid(ai, state)
        return AsteroidAck(planet_id=state.id(), rocket=rocket)

    if isinstance(msg, StartPlanetAI):
        ai.running = True
        return None

    if isinstance(msg, StopPlanetAI):
        ai.running = False
        return None

    logger.warning("Planet %s: unhandled orchestrator message %r", state.id(), msg)
    return None


def handle_asteroid(ai: PlanetAI, state: PlanetState) -> Rocket | None:
    return rocket_policy.on_asteroid(ai.rocket_strategy, state)


# ---------------------------------------------------------------------------
# Explorer messages
# ---------------------------------------------------------------------------

def handle_explorer_msg(
    ai: PlanetAI,
    state: PlanetState,
    generator: Generator,
    combinator: Combinator,
    msg: ExplorerToPlanet,
) -> PlanetToExplorer | None:
    if isinstance(msg, SupportedResourceRequest):
        return SupportedResourceResponse(resource_list=generator.all_available_recipes())

    if isinstance(msg, SupportedCombinationRequest):
        return SupportedCombinationResponse(combination_list=combinator.all_available_recipes())

    if isinstance(msg, GenerateResourceRequest):
        return _generate_resource(ai, state, generator, msg)

    if isinstance(msg, CombineResourceRequest):
        return _combine_resource(ai, state, combinator, msg)

    if isinstance(msg, AvailableEnergyCellRequest):
        return AvailableEnergyCellResponse(
            available_cells=rocket_policy.reported_charged_cells(ai.rocket_strategy, state)
        )

    logger.warning("Planet %s: unhandled explorer message %r", state.id(), msg)
    return None


def _generate_resource(
    ai: PlanetAI,
    state: PlanetState,
    generator: Generator,
    msg: GenerateResourceRequest,
) -> GenerateResourceResponse | None:
    if not rocket_policy.reserve_allows_spending(ai.rocket_strategy, state):
        logger.debug(
            "Planet %s: explorer %s denied %s, emergency reserve",
            state.id(), msg.explorer_id, msg.resource.value,
        )
        return None

    found = state.full_cell()
    if found is None:
        logger.debug(
            "Planet %s: explorer %s denied %s, no charged cell",
            state.id(), msg.explorer_id, msg.resource.value,
        )
        return None

    if msg.resource != ai.basic_resource:
        logger.debug(
            "Planet %s: explorer %s denied %s, planet only generates %s",
            state.id(), msg.explorer_id, msg.resource.value, ai.basic_resource.value,
        )
        return None

    cell, _ = found
    try:
        resource = generator.make(msg.resource, cell)
    except ValueError as exc:
        logger.warning("Planet %s: generation of %s failed: %s", state.id(), msg.resource.value, exc)
        resource = None
    return GenerateResourceResponse(resource=resource)


def _combine_resource(
    ai: PlanetAI,
    state: PlanetState,
    combinator: Combinator,
    msg: CombineResourceRequest,
) -> CombineResourceResponse | None:
    if not combinator.all_available_recipes():
        logger.debug("Planet %s: explorer %s denied combination, none supported", state.id(), msg.explorer_id)
        return None

    if not rocket_policy.reserve_allows_spending(ai.rocket_strategy, state):
        logger.debug("Planet %s: explorer %s denied combination, emergency reserve", state.id(), msg.explorer_id)
        return None

    found = state.full_cell()
    if found is None:
        logger.debug("Planet %s: explorer %s denied combination, no charged cell", state.id(), msg.explorer_id)
        return None

    cell, _ = found
    try:
        product = combinator.make(msg.msg, cell)
    except CombinationError as exc:
        logger.warning("Planet %s: combination of %s failed: %s", state.id(), msg.msg.target.value, exc.reason)
        return CombineResourceResponse(error=exc.reason, returned_inputs=exc.inputs)
    return CombineResourceResponse(complex_response=product)
