"""Which creep gets built next."""
from __future__ import annotations

import pytest

from ArenaBot.config import BuildConfig, BuildOrderEntry
from ArenaBot.constants import BodyPart, JobKind
from ArenaBot.controllers.build_strategy import BuildStrategy, count_jobs
from ArenaBot.jobs.fighter import Fighter
from ArenaBot.jobs.hauler import Hauler
from ArenaBot.jobs.registry import JobRegistry

from fakes import FakeCreep, FakeRampart, FakeSource

WORK, CARRY, RANGED = BodyPart.WORK, BodyPart.CARRY, BodyPart.RANGED_ATTACK


def roster(units, *kinds):
    for i, kind in enumerate(kinds):
        units.add_unit(f"u{len(units)}_{i}", kind)
    return units.units


@pytest.fixture
def strategy(world, jobs):
    return BuildStrategy(world, jobs, world.config.build)


class TestOpening:

    def test_first_build_is_cleric(self, strategy, units):
        choice = strategy.get_next_creep_to_build(units.units)
        assert choice.job is JobKind.CLERIC
        assert choice.tier == 1
        assert choice.cost == 500
        assert list(choice.body) == [BodyPart.MOVE, BodyPart.MOVE, RANGED, BodyPart.HEAL]

    def test_then_hauler(self, strategy, units):
        roster(units, JobKind.CLERIC)
        assert strategy.get_next_creep_to_build(units.units).job is JobKind.HAULER

    def test_opening_comes_first_even_when_outmatched(self, strategy, units, world, arena):
        for x in range(5):
            arena.add(FakeCreep(80 + x, 50, my=False, body=(RANGED,)))
        world.refresh()
        roster(units, JobKind.CLERIC)
        assert strategy.get_next_creep_to_build(units.units).job is JobKind.HAULER


class TestEconomy:

    @pytest.mark.parametrize("built, expected", [
        ((), JobKind.MINER),
        ((JobKind.MINER,), JobKind.TUG),
        ((JobKind.MINER, JobKind.TUG), JobKind.MINER),
        ((JobKind.MINER, JobKind.TUG, JobKind.MINER), JobKind.TUG),
        ((JobKind.MINER, JobKind.TUG, JobKind.MINER, JobKind.TUG), JobKind.HAULER),
        ((JobKind.TUG,), JobKind.MINER),
        ((JobKind.MINER, JobKind.MINER), JobKind.TUG),
    ])
    def test_walks_the_economy_list(self, strategy, units, built, expected):
        roster(units, JobKind.CLERIC, JobKind.HAULER, *built)
        assert strategy.get_next_creep_to_build(units.units).job is expected

    def test_fallback_repeats(self, strategy, units):
        roster(units, JobKind.CLERIC, JobKind.HAULER,
               JobKind.MINER, JobKind.TUG, JobKind.MINER, JobKind.TUG,
               JobKind.HAULER, JobKind.HAULER)
        assert strategy.get_next_creep_to_build(units.units).job is JobKind.HAULER

    def test_same_input_same_answer(self, strategy, units):
        units_list = roster(units, JobKind.CLERIC, JobKind.HAULER, JobKind.MINER)
        assert strategy.get_next_creep_to_build(units_list) == strategy.get_next_creep_to_build(units_list)


class TestMilitary:

    @pytest.fixture
    def outmatched(self, world, arena):
        for x in range(3):
            arena.add(FakeCreep(80 + x, 50, my=False, body=(RANGED,)))
        world.refresh()

    def test_archers_first(self, strategy, units, outmatched):
        roster(units, JobKind.CLERIC, JobKind.HAULER)
        assert strategy.get_next_creep_to_build(units.units).job is JobKind.ARCHER

    def test_cleric_after_enough_archers(self, strategy, units, outmatched):
        # One cleric present: (1 + 1) * 3 archers before the next cleric.
        roster(units, JobKind.CLERIC, JobKind.HAULER, *([JobKind.ARCHER] * 5))
        assert strategy.get_next_creep_to_build(units.units).job is JobKind.ARCHER
        roster(units, JobKind.ARCHER)
        assert strategy.get_next_creep_to_build(units.units).job is JobKind.CLERIC

    def test_threshold_is_inclusive(self, world, jobs, units, arena):
        # Own 30 vs enemy 30: ratio 1.0 meets a 1.0 threshold.
        arena.add(FakeCreep(20, 50, body=(RANGED,)))
        arena.add(FakeCreep(80, 50, my=False, body=(RANGED,)))
        world.refresh()
        strategy = BuildStrategy(world, jobs, BuildConfig(strength_threshold=1.0))
        roster(units, JobKind.CLERIC, JobKind.HAULER)
        assert strategy.get_next_creep_to_build(units.units).job is JobKind.MINER


class TestFortifiedMinerResponse:

    @pytest.fixture
    def alert(self, world, arena):
        arena.add(FakeSource(86, 10))
        arena.add(FakeRampart(85, 11, my=False))
        arena.add(FakeCreep(85, 11, my=False, body=(WORK, CARRY)))
        world.refresh()
        assert world.fortified_miner is not None

    def test_fighter_after_opening(self, strategy, units, alert):
        roster(units, JobKind.CLERIC)
        assert strategy.get_next_creep_to_build(units.units).job is JobKind.HAULER
        roster(units, JobKind.HAULER)
        assert strategy.get_next_creep_to_build(units.units).job is JobKind.FIGHTER

    def test_only_one_fighter(self, strategy, units, alert):
        roster(units, JobKind.CLERIC, JobKind.HAULER, JobKind.FIGHTER)
        assert strategy.get_next_creep_to_build(units.units).job is JobKind.MINER


class TestConfiguration:

    def test_custom_tier(self, world, jobs, units):
        config = BuildConfig(initial_build=(BuildOrderEntry(JobKind.FIGHTER, tier=2),))
        choice = BuildStrategy(world, jobs, config).get_next_creep_to_build(units.units)
        assert choice.job is JobKind.FIGHTER
        assert choice.tier == 2
        assert choice.cost == 260

    def test_unregistered_job_is_skipped(self, world, units):
        jobs = JobRegistry()
        jobs.register(Hauler)
        jobs.register(Fighter)
        choice = BuildStrategy(world, jobs, world.config.build).get_next_creep_to_build(units.units)
        assert choice.job is JobKind.HAULER

    def test_count_jobs(self, units):
        counts = count_jobs(roster(units, JobKind.TUG, JobKind.TUG, JobKind.MINER))
        assert counts[JobKind.TUG] == 2
        assert counts[JobKind.MINER] == 1
        assert counts[JobKind.ARCHER] == 0


def test_alert_overrides_strength_without_opening(world, jobs, units, arena):
    """No opening list, no units, outmatched: the alert still wins."""
    arena.add(FakeSource(86, 10))
    arena.add(FakeRampart(85, 11, my=False))
    arena.add(FakeCreep(85, 11, my=False, body=(WORK, CARRY)))
    for x in range(3):
        arena.add(FakeCreep(80 + x, 50, my=False, body=(RANGED,)))
    world.refresh()
    strategy = BuildStrategy(world, jobs, BuildConfig(initial_build=()))
    assert strategy.get_next_creep_to_build(units.units).job is JobKind.FIGHTER
