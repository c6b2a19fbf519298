"""Energy and threat events delivered by the orchestrator, and the rocket they can trigger."""

from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class Sunray(BaseModel):
    """One unit of energy; charges exactly one cell."""

    id: UUID = Field(default_factory=uuid4)

    model_config = {"frozen": True}


class Asteroid(BaseModel):
    id: UUID = Field(default_factory=uuid4)

    model_config = {"frozen": True}


class Rocket(BaseModel):
    """A one-shot defence launched against an incoming asteroid."""

    id: UUID = Field(default_factory=uuid4)

    model_config = {"frozen": True}
