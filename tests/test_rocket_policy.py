"""Tests for the rocket policy.

Covers:
- Sunray with a free cell never builds, for every strategy
- Sunray on a full bank: safe / emergency_reserve build and recharge,
  disabled / default drop the sunray
- Failed overflow build drops the sunray (rocket-less type, rocket present)
- Asteroid: disabled launches only an existing rocket; default builds on
  demand; safe / emergency_reserve build, launch and rebuild
- Emergency reserve masking of reported cells and spending
"""

import pytest

from planet_ai.data.planet_types import PlanetType
from planet_ai.models.events import Rocket, Sunray
from planet_ai.models.planet_state import PlanetState
from planet_ai.models.rocket_strategy import RocketStrategy
from planet_ai.services import rocket_policy

ALL_STRATEGIES = list(RocketStrategy)


class TestSunray:
    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    def test_free_cell_never_builds(self, state: PlanetState, strategy):
        for expected in range(1, 6):
            built = rocket_policy.on_sunray(strategy, state, Sunray())
            assert built is False
            assert state.charged_cells_count() == expected
        assert state.has_rocket() is False

    @pytest.mark.parametrize("strategy", [RocketStrategy.disabled, RocketStrategy.default])
    def test_full_bank_drops_sunray_without_building(self, state: PlanetState, charge, strategy):
        charge(state, 5)

        built = rocket_policy.on_sunray(strategy, state, Sunray())

        assert built is False
        assert state.has_rocket() is False
        assert state.charged_cells_count() == 5

    @pytest.mark.parametrize("strategy", [RocketStrategy.safe, RocketStrategy.emergency_reserve])
    def test_saturating_sunray_builds_once_and_recharges(self, state: PlanetState, strategy):
        for _ in range(5):
            rocket_policy.on_sunray(strategy, state, Sunray())
        before = state.charged_cells_count()

        built = rocket_policy.on_sunray(strategy, state, Sunray())

        assert built is True
        assert state.has_rocket() is True
        assert state.charged_cells_count() == before == 5

    def test_second_overflow_with_rocket_present_is_dropped(self, state: PlanetState, charge):
        charge(state, 5)
        rocket_policy.on_sunray(RocketStrategy.safe, state, Sunray())

        built = rocket_policy.on_sunray(RocketStrategy.safe, state, Sunray())

        assert built is False
        assert state.has_rocket() is True
        assert state.charged_cells_count() == 5

    def test_overflow_on_rocketless_type_drops_sunray(self, charge):
        state = PlanetState(3, PlanetType.B)
        charge(state, 1)

        built = rocket_policy.on_sunray(RocketStrategy.safe, state, Sunray())

        assert built is False
        assert state.has_rocket() is False
        assert state.charged_cells_count() == 1

    def test_single_cell_planet_builds_and_recharges(self, charge):
        state = PlanetState(4, PlanetType.C)
        charge(state, 1)

        assert rocket_policy.on_sunray(RocketStrategy.safe, state, Sunray()) is True
        assert state.has_rocket() is True
        assert state.charged_cells_count() == 1


class TestAsteroid:
    def test_rocketless_type_never_answers(self, charge):
        state = PlanetState(5, PlanetType.D)
        charge(state, 5)
        for strategy in ALL_STRATEGIES:
            assert rocket_policy.on_asteroid(strategy, state) is None
        assert state.charged_cells_count() == 5

    def test_disabled_does_not_build(self, state: PlanetState, charge):
        charge(state, 3)
        assert rocket_policy.on_asteroid(RocketStrategy.disabled, state) is None
        assert state.charged_cells_count() == 3

    def test_disabled_launches_existing_rocket_without_rebuild(self, state: PlanetState, charge):
        charge(state, 3)
        state.build_rocket(0)

        rocket = rocket_policy.on_asteroid(RocketStrategy.disabled, state)

        assert isinstance(rocket, Rocket)
        assert state.has_rocket() is False
        assert state.charged_cells_count() == 2

    def test_default_builds_on_demand_and_launches(self, state: PlanetState, charge):
        charge(state, 2)

        rocket = rocket_policy.on_asteroid(RocketStrategy.default, state)

        assert isinstance(rocket, Rocket)
        assert state.has_rocket() is False
        assert state.charged_cells_count() == 1
        assert state.cell(0).is_charged() is False

    def test_default_without_charge_has_nothing_to_launch(self, state: PlanetState):
        assert rocket_policy.on_asteroid(RocketStrategy.default, state) is None

    @pytest.mark.parametrize("strategy", [RocketStrategy.safe, RocketStrategy.emergency_reserve])
    def test_safe_launches_and_rebuilds(self, state: PlanetState, charge, strategy):
        charge(state, 5)
        rocket_policy.on_sunray(strategy, state, Sunray())
        assert state.has_rocket() is True

        rocket = rocket_policy.on_asteroid(strategy, state)

        assert isinstance(rocket, Rocket)
        assert state.has_rocket() is True
        assert state.charged_cells_count() == 4

    def test_safe_builds_launches_and_rebuilds_from_scratch(self, state: PlanetState, charge):
        charge(state, 2)

        rocket = rocket_policy.on_asteroid(RocketStrategy.safe, state)

        assert rocket is not None
        assert state.has_rocket() is True
        assert state.charged_cells_count() == 0

    def test_safe_rebuild_skipped_when_no_charge_left(self, state: PlanetState, charge):
        charge(state, 1)

        rocket = rocket_policy.on_asteroid(RocketStrategy.safe, state)

        assert rocket is not None
        assert state.has_rocket() is False

    def test_launched_rocket_is_the_built_one(self, state: PlanetState, charge):
        charge(state, 1)
        state.build_rocket(0)
        built_id = state._rocket.id

        rocket = rocket_policy.on_asteroid(RocketStrategy.default, state)

        assert rocket.id == built_id


class TestEmergencyReserve:
    def test_one_charged_cell_is_hidden(self, state: PlanetState, charge):
        charge(state, 1)
        strategy = RocketStrategy.emergency_reserve

        assert rocket_policy.reported_charged_cells(strategy, state) == 0
        assert rocket_policy.reported_energy_cells(strategy, state) == [False] * 5
        assert rocket_policy.reserve_allows_spending(strategy, state) is False

    def test_last_charged_cell_is_the_hidden_one(self, state: PlanetState, charge):
        charge(state, 3)
        strategy = RocketStrategy.emergency_reserve

        assert rocket_policy.reported_charged_cells(strategy, state) == 2
        assert rocket_policy.reported_energy_cells(strategy, state) == [True, True, False, False, False]
        assert rocket_policy.reserve_allows_spending(strategy, state) is True

    def test_empty_bank_reports_zero(self, state: PlanetState):
        strategy = RocketStrategy.emergency_reserve
        assert rocket_policy.reported_charged_cells(strategy, state) == 0
        assert rocket_policy.reserve_allows_spending(strategy, state) is False

    @pytest.mark.parametrize("strategy", [RocketStrategy.disabled, RocketStrategy.default, RocketStrategy.safe])
    def test_other_strategies_report_true_state(self, state: PlanetState, charge, strategy):
        charge(state, 1)
        assert rocket_policy.reported_charged_cells(strategy, state) == 1
        assert rocket_policy.reported_energy_cells(strategy, state) == [True, False, False, False, False]
        assert rocket_policy.reserve_allows_spending(strategy, state) is True

    def test_reserve_cell_still_builds_rocket(self, state: PlanetState, charge):
        charge(state, 1)

        rocket = rocket_policy.on_asteroid(RocketStrategy.emergency_reserve, state)

        assert rocket is not None
        assert state.charged_cells_count() == 0


class TestRocketStrategyCodes:
    @pytest.mark.parametrize(
        "code, expected",
        [
            (0, RocketStrategy.disabled),
            (1, RocketStrategy.safe),
            (2, RocketStrategy.safe),
            (3, RocketStrategy.emergency_reserve),
        ],
    )
    def test_known_codes(self, code, expected):
        assert RocketStrategy.from_code(code) is expected

    def test_unknown_code_raises(self):
        with pytest.raises(ValueError, match="Unknown rocket strategy code"):
            RocketStrategy.from_code(9)
