"""Rocket policy — decides when a charged cell is spent on a rocket.

One decision function per trigger:

  on_sunray    the bank is full and a sunray arrives
  on_asteroid  an asteroid arrives and the orchestrator wants a rocket back

Strategy behaviour:

  strategy           sunray, bank full   asteroid, no rocket   asteroid, rocket ready
  disabled           -                   -                     launch
  default            -                   build, launch         launch
  safe               build, recharge     build, launch         launch, rebuild
  emergency_reserve  build, recharge     build, launch         launch, rebuild

emergency_reserve also keeps one charged cell out of every outward report
(see reported_* below).  The reserve exists only in what others are told:
the cell stays usable for rocket construction.
"""

from __future__ import annotations

import logging

from planet_ai.models.events import Rocket, Sunray
from planet_ai.models.planet_state import PlanetState
from planet_ai.models.rocket_strategy import RocketStrategy

logger = logging.getLogger(__name__)

# Charged cells hidden from outward reports under emergency_reserve.
EMERGENCY_RESERVE_CELLS = 1


def _try_build(state: PlanetState, cell_index: int) -> bool:
    try:
        state.build_rocket(cell_index)
    except ValueError as exc:
        logger.debug("Planet %s: rocket not built (%s)", state.id(), exc)
        return False
    logger.info("Planet %s: rocket built from cell %s", state.id(), cell_index)
    return True


def _build_from_first_full_cell(state: PlanetState) -> bool:
    found = state.full_cell()
    if found is None:
        logger.debug("Planet %s: no charged cell to build a rocket from", state.id())
        return False
    _, index = found
    return _try_build(state, index)


# ---------------------------------------------------------------------------
# Triggers
# ---------------------------------------------------------------------------

def on_sunray(strategy: RocketStrategy, state: PlanetState, sunray: Sunray) -> bool:
    """Charge the bank with `sunray`, building a rocket if the bank overflows.

    Under safe and emergency_reserve a sunray that finds every cell charged
    pays for a rocket with the last cell and then recharges that same cell,
    so no energy is lost.  If the rocket cannot be built the sunray is
    dropped.  Returns True when a rocket was built.
    """
    leftover = state.charge_cell(sunray)
    if leftover is None:
        return False

    if strategy == RocketStrategy.disabled or strategy == RocketStrategy.default:
        builds = False
    elif strategy == RocketStrategy.safe or strategy == RocketStrategy.emergency_reserve:
        builds = True
    else:
        raise ValueError(f"Unknown rocket strategy: {strategy!r}")

    if builds:
        cell_index = state.cells_count() - 1
        if _try_build(state, cell_index):
            state.cell(cell_index).charge(leftover)
            return True

    logger.debug("Planet %s: energy bank full, sunray dropped", state.id())
    return False


def on_asteroid(strategy: RocketStrategy, state: PlanetState) -> Rocket | None:
    """Return the rocket to launch against an incoming asteroid, if any.

    Planets that cannot hold rockets never answer with one.  Every strategy
    except disabled builds a missing rocket on the spot from the first
    charged cell.  safe and emergency_reserve rebuild right after launching.
    """
    if not state.can_have_rocket():
        return None

    if strategy == RocketStrategy.disabled:
        build_on_demand, rebuild = False, False
    elif strategy == RocketStrategy.default:
        build_on_demand, rebuild = True, False
    elif strategy == RocketStrategy.safe or strategy == RocketStrategy.emergency_reserve:
        build_on_demand, rebuild = True, True
    else:
        raise ValueError(f"Unknown rocket strategy: {strategy!r}")

    if build_on_demand and not state.has_rocket():
        _build_from_first_full_cell(state)

    rocket = state.take_rocket()
    if rocket is None:
        logger.info("Planet %s: asteroid incoming and no rocket available", state.id())
        return None

    logger.info("Planet %s: rocket launched", state.id())
    if rebuild:
        _build_from_first_full_cell(state)
    return rocket


# ---------------------------------------------------------------------------
# Outward view
# ---------------------------------------------------------------------------

def reported_energy_cells(strategy: RocketStrategy, state: PlanetState) -> list[bool]:
    """Charge flags as shown to the orchestrator and explorers.

    Under emergency_reserve the last charged cell is reported as empty.
    """
    cells = [cell.is_charged() for cell in state.bank]
    if strategy == RocketStrategy.emergency_reserve:
        hidden = 0
        for index in range(len(cells) - 1, -1, -1):
            if hidden == EMERGENCY_RESERVE_CELLS:
                break
            if cells[index]:
                cells[index] = False
                hidden += 1
    return cells


def reported_charged_cells(strategy: RocketStrategy, state: PlanetState) -> int:
    charged = state.charged_cells_count()
    if strategy == RocketStrategy.emergency_reserve:
        return max(0, charged - EMERGENCY_RESERVE_CELLS)
    return charged


def reserve_allows_spending(strategy: RocketStrategy, state: PlanetState) -> bool:
    """False when spending a cell on a resource would eat into the reserve."""
    if strategy == RocketStrategy.emergency_reserve:
        return state.charged_cells_count() > EMERGENCY_RESERVE_CELLS
    return True
