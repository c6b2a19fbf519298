"""PlanetState — the energy cell bank and rocket slot owned by one planet."""

from __future__ import annotations

from planet_ai.data.planet_types import PlanetType, get_planet_type_rules
from planet_ai.models.energy_cell import EnergyCell, EnergyCellBank
from planet_ai.models.events import Rocket, Sunray


class PlanetState:
    """Mutable state of a single planet.

    Only the planet's own message loop touches this object, so no locking
    is done here.  Cell count and rocket eligibility come from the planet
    type and never change after construction.
    """

    def __init__(self, planet_id: int, planet_type: PlanetType) -> None:
        rules = get_planet_type_rules(planet_type)
        self._id = planet_id
        self._type = rules.planet_type
        self._can_have_rocket = rules.can_have_rocket
        self._bank = EnergyCellBank(rules.energy_cells)
        self._rocket: Rocket | None = None

    def __repr__(self) -> str:
        return (
            f"PlanetState(id={self._id}, type={self._type.value}, "
            f"charged={self.charged_cells_count()}/{self.cells_count()}, "
            f"has_rocket={self.has_rocket()})"
        )

    def id(self) -> int:
        return self._id

    @property
    def planet_type(self) -> PlanetType:
        return self._type

    @property
    def bank(self) -> EnergyCellBank:
        return self._bank

    # ------------------------------------------------------------------
    # Energy cells
    # ------------------------------------------------------------------

    def cells_count(self) -> int:
        return self._bank.count()

    def charged_cells_count(self) -> int:
        return self._bank.charged_count()

    def cell(self, index: int) -> EnergyCell:
        return self._bank.cell(index)

    def full_cell(self) -> tuple[EnergyCell, int] | None:
        return self._bank.full_cell()

    def charge_cell(self, sunray: Sunray) -> Sunray | None:
        """Store the sunray in the first free cell; return it if the bank is full."""
        return self._bank.charge(sunray)

    # ------------------------------------------------------------------
    # Rocket slot
    # ------------------------------------------------------------------

    def can_have_rocket(self) -> bool:
        return self._can_have_rocket

    def has_rocket(self) -> bool:
        return self._rocket is not None

    def build_rocket(self, cell_index: int) -> None:
        """Spend the charge in cell `cell_index` on a new rocket.

        Raises ValueError if this planet type cannot hold rockets, a rocket
        is already built, or the cell is not charged.  Nothing changes when
        the build is refused.
        """
        if not self._can_have_rocket:
            raise ValueError(f"Planet type {self._type.value} cannot have a rocket")
        if self._rocket is not None:
            raise ValueError("Planet already has a rocket")
        try:
            cell = self._bank.cell(cell_index)
        except IndexError as exc:
            raise ValueError(str(exc)) from exc
        if not cell.is_charged():
            raise ValueError(f"Energy cell {cell_index} is not charged")

        cell.discharge()
        self._rocket = Rocket()

    def take_rocket(self) -> Rocket | None:
        """Empty the rocket slot and hand over its rocket, if any."""
        rocket, self._rocket = self._rocket, None
        return rocket
