"""Static rules for each planet type.

Planet types constrain how a planet can be configured:

  A  5 energy cells, rocket allowed,  at most 1 generation rule,  no combinations
  B  1 energy cell,  no rocket,        any generation rules,       at most 1 combination
  C  1 energy cell,  rocket allowed,   at most 1 generation rule,  any combinations
  D  5 energy cells, no rocket,        any generation rules,       no combinations

A limit of None means the type puts no bound on that rule list.
"""

import enum
from dataclasses import dataclass


class PlanetType(str, enum.Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"


@dataclass(frozen=True)
class PlanetTypeRules:
    planet_type: PlanetType
    energy_cells: int
    can_have_rocket: bool
    max_generation_rules: int | None  # None: unbounded
    max_combination_rules: int | None  # None: unbounded


PLANET_TYPE_RULES: dict[PlanetType, PlanetTypeRules] = {
    PlanetType.A: PlanetTypeRules(
        planet_type=PlanetType.A,
        energy_cells=5,
        can_have_rocket=True,
        max_generation_rules=1,
        max_combination_rules=0,
    ),
    PlanetType.B: PlanetTypeRules(
        planet_type=PlanetType.B,
        energy_cells=1,
        can_have_rocket=False,
        max_generation_rules=None,
        max_combination_rules=1,
    ),
    PlanetType.C: PlanetTypeRules(
        planet_type=PlanetType.C,
        energy_cells=1,
        can_have_rocket=True,
        max_generation_rules=1,
        max_combination_rules=None,
    ),
    PlanetType.D: PlanetTypeRules(
        planet_type=PlanetType.D,
        energy_cells=5,
        can_have_rocket=False,
        max_generation_rules=None,
        max_combination_rules=0,
    ),
}


def get_planet_type_rules(planet_type: PlanetType | str) -> PlanetTypeRules:
    """Return the rules for a planet type or raise KeyError."""
    try:
        key = PlanetType(planet_type)
    except ValueError:
        raise KeyError(f"Unknown planet type: '{planet_type}'") from None
    return PLANET_TYPE_RULES[key]


def validate_rules(
    planet_type: PlanetType,
    generation_rules: list,
    combination_rules: list,
) -> None:
    """Raise ValueError if the rule lists break the planet type's limits."""
    rules = get_planet_type_rules(planet_type)

    if not generation_rules:
        raise ValueError(f"Planet type {planet_type.value} needs at least one generation rule")
    if len(set(generation_rules)) != len(generation_rules):
        raise ValueError("Generation rules contain duplicates")
    if len(set(combination_rules)) != len(combination_rules):
        raise ValueError("Combination rules contain duplicates")

    if rules.max_generation_rules is not None and len(generation_rules) > rules.max_generation_rules:
        raise ValueError(
            f"Planet type {planet_type.value} allows at most "
            f"{rules.max_generation_rules} generation rule(s), got {len(generation_rules)}"
        )
    if rules.max_combination_rules is not None and len(combination_rules) > rules.max_combination_rules:
        raise ValueError(
            f"Planet type {planet_type.value} allows at most "
            f"{rules.max_combination_rules} combination rule(s), got {len(combination_rules)}"
        )
