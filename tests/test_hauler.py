"""Hauler: gather centrally, deliver to the spawn or the win objective."""
from __future__ import annotations

import pytest

from ArenaBot.constants import BodyPart, JobKind
from ArenaBot.jobs.memory import HaulerState

from fakes import FakeConstructionSite, FakeCreep, FakeRampart, FakeSource

HAULER_BODY = (BodyPart.WORK, BodyPart.CARRY, BodyPart.MOVE, BodyPart.MOVE)


def tick(world, units):
    world.refresh()
    units.update_creeps()


@pytest.fixture
def hauler(arena, units):
    def place(x, y, energy=0, win_objective=None):
        creep = arena.add(FakeCreep(x, y, body=HAULER_BODY, energy=energy, capacity=50, obj_id="h"))
        job = units.add_unit("h", JobKind.HAULER, win_objective)
        return creep, job
    return place


class TestGathering:

    def test_walks_to_nearest_central_source(self, world, arena, units, hauler):
        arena.add(FakeSource(35, 10))
        central = arena.add(FakeSource(50, 50))
        arena.add(FakeSource(60, 45))
        creep, _ = hauler(40, 40)
        tick(world, units)
        assert creep.calls("harvest") == [central]
        assert creep.calls("move_to") == [central]

    def test_harvests_in_range(self, world, arena, units, hauler):
        source = arena.add(FakeSource(50, 50))
        creep, _ = hauler(49, 49)
        tick(world, units)
        assert creep.calls("harvest") == [source]
        assert not creep.did("move_to")

    def test_corner_source_when_nothing_central(self, world, arena, units, hauler):
        corner = arena.add(FakeSource(35, 10))
        creep, _ = hauler(40, 40)
        tick(world, units)
        assert creep.calls("harvest") == [corner]

    def test_no_sources(self, world, units, hauler):
        creep, _ = hauler(40, 40)
        tick(world, units)
        assert creep.actions == []


class TestDelivery:

    def test_full_switches_and_delivers_same_tick(self, world, arena, units, hauler):
        arena.add(FakeSource(50, 50))
        creep, job = hauler(40, 40, energy=50)
        tick(world, units)
        assert job.memory.state is HaulerState.HAULING
        assert creep.calls("transfer") == [arena.my_spawn]
        assert creep.calls("move_to") == [arena.my_spawn]
        assert not creep.did("harvest")

    def test_delivers_adjacent(self, world, arena, units, hauler):
        creep, _ = hauler(11, 50, energy=50)
        tick(world, units)
        assert creep.calls("transfer") == [arena.my_spawn]
        assert not creep.did("move_to")

    def test_builds_win_objective_once_a_miner_exists(self, world, arena, units, hauler):
        objective = arena.add(FakeConstructionSite(12, 48))
        creep, _ = hauler(40, 40, energy=50, win_objective=objective)
        units.add_unit("m", JobKind.MINER)
        tick(world, units)
        assert creep.calls("build") == [objective]
        assert creep.calls("move_to") == [objective]
        assert not creep.did("transfer")

    def test_spawn_until_a_miner_exists(self, world, arena, units, hauler):
        objective = arena.add(FakeConstructionSite(12, 48))
        creep, _ = hauler(40, 40, energy=50, win_objective=objective)
        tick(world, units)
        assert creep.calls("transfer") == [arena.my_spawn]

    def test_empty_returns_to_mining_same_tick(self, world, arena, units, hauler):
        source = arena.add(FakeSource(50, 50))
        creep, job = hauler(40, 40)
        job.memory.state = HaulerState.HAULING
        tick(world, units)
        assert job.memory.state is HaulerState.MINING
        assert creep.calls("harvest") == [source]

    def test_partly_full_keeps_hauling(self, world, arena, units, hauler):
        creep, job = hauler(40, 40, energy=20)
        job.memory.state = HaulerState.HAULING
        tick(world, units)
        assert creep.did("transfer")


def test_takes_cover_without_striking(world, arena, units, hauler):
    """Outmatched haulers run for a rampart and do nothing else."""
    arena.add(FakeSource(50, 50))
    shelter = arena.add(FakeRampart(15, 50))
    arena.add(FakeCreep(41, 40, my=False, body=(BodyPart.ATTACK,)))
    creep, _ = hauler(40, 40)
    tick(world, units)
    assert creep.calls("move_to") == [shelter]
    assert not creep.did("harvest")
    assert not creep.did("attack")
