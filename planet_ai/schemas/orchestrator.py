"""Pydantic schemas for messages exchanged with the orchestrator.

Every message carries a literal `kind` so a transport can validate raw
payloads against the `OrchestratorToPlanet` / `PlanetToOrchestrator` unions.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from planet_ai.models.events import Asteroid, Rocket, Sunray
from planet_ai.schemas.state import PlanetStateSnapshot


# ---------------------------------------------------------------------------
# Orchestrator -> Planet
# ---------------------------------------------------------------------------

class SunrayMsg(BaseModel):
    kind: Literal["sunray"] = "sunray"
    sunray: Sunray = Field(default_factory=Sunray)


class AsteroidMsg(BaseModel):
    kind: Literal["asteroid"] = "asteroid"
    asteroid: Asteroid = Field(default_factory=Asteroid)


class InternalStateRequest(BaseModel):
    kind: Literal["internal_state_request"] = "internal_state_request"


class StartPlanetAI(BaseModel):
    kind: Literal["start_planet_ai"] = "start_planet_ai"


class StopPlanetAI(BaseModel):
    kind: Literal["stop_planet_ai"] = "stop_planet_ai"


class KillPlanet(BaseModel):
    kind: Literal["kill_planet"] = "kill_planet"


OrchestratorToPlanet = Annotated[
    Union[SunrayMsg, AsteroidMsg, InternalStateRequest, StartPlanetAI, StopPlanetAI, KillPlanet],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Planet -> Orchestrator
# ---------------------------------------------------------------------------

class SunrayAck(BaseModel):
    kind: Literal["sunray_ack"] = "sunray_ack"
    planet_id: int


class AsteroidAck(BaseModel):
    kind: Literal["asteroid_ack"] = "asteroid_ack"
    planet_id: int
    rocket: Optional[Rocket] = None


class InternalStateResponse(BaseModel):
    kind: Literal["internal_state_response"] = "internal_state_response"
    planet_id: int
    planet_state: PlanetStateSnapshot


class StartPlanetAIResult(BaseModel):
    kind: Literal["start_planet_ai_result"] = "start_planet_ai_result"
    planet_id: int


class StopPlanetAIResult(BaseModel):
    kind: Literal["stop_planet_ai_result"] = "stop_planet_ai_result"
    planet_id: int


class KillPlanetResult(BaseModel):
    kind: Literal["kill_planet_result"] = "kill_planet_result"
    planet_id: int


PlanetToOrchestrator = Annotated[
    Union[
        SunrayAck,
        AsteroidAck,
        InternalStateResponse,
        StartPlanetAIResult,
        StopPlanetAIResult,
        KillPlanetResult,
    ],
    Field(discriminator="kind"),
]
