"""Pydantic schema for the read-only planet state snapshot."""

from pydantic import BaseModel, computed_field

from planet_ai.data.planet_types import PlanetType


class PlanetStateSnapshot(BaseModel):
    planet_id: int
    planet_type: PlanetType
    energy_cells: list[bool]
    has_rocket: bool

    @computed_field
    @property
    def charged_cells_count(self) -> int:
        return sum(1 for charged in self.energy_cells if charged)

    model_config = {"frozen": True}
