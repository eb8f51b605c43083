"""Spawning: energy, the pending spawn and registering the new creep."""
from __future__ import annotations

import pytest

from ArenaBot.constants import BodyPart, Direction, ErrorCode, JobKind
from ArenaBot.controllers.build_order import BuildOrder, EnergyManager
from ArenaBot.controllers.build_queue import BuildQueue, direction_toward
from ArenaBot.controllers.build_strategy import BuildChoice

from fakes import FakeConstructionSite, FakeExtension, FakeSpawning, pt

TUG = BuildChoice(JobKind.TUG, 1, (BodyPart.MOVE,), 50)
MINER = BuildChoice(JobKind.MINER, 1, (BodyPart.WORK, BodyPart.WORK, BodyPart.CARRY), 250)


@pytest.fixture
def queue(units, world):
    return BuildQueue(units, world)


class TestDirection:

    @pytest.mark.parametrize("target, expected", [
        (pt(10, 9), Direction.TOP),
        (pt(11, 9), Direction.TOP_RIGHT),
        (pt(15, 10), Direction.RIGHT),
        (pt(12, 14), Direction.BOTTOM_RIGHT),
        (pt(10, 11), Direction.BOTTOM),
        (pt(3, 20), Direction.BOTTOM_LEFT),
        (pt(9, 10), Direction.LEFT),
        (pt(9, 9), Direction.TOP_LEFT),
    ])
    def test_direction_toward(self, target, expected):
        assert direction_toward(pt(10, 10), target) is expected

    def test_same_tile(self):
        assert direction_toward(pt(10, 10), pt(10, 10)) is None


class TestTrySpawn:

    def test_spawns_and_records_pending(self, queue, arena):
        assert queue.try_spawn(TUG, 1000)
        assert arena.my_spawn.spawned == [[BodyPart.MOVE]]
        assert queue.pending_spawn.job is JobKind.TUG
        assert queue.pending_spawn.requested_tick == 1

    def test_one_pending_at_a_time(self, queue, arena):
        assert queue.try_spawn(TUG, 1000)
        arena.my_spawn.spawning = None
        assert not queue.try_spawn(TUG, 1000)
        assert len(arena.my_spawn.spawned) == 1

    def test_not_enough_energy(self, queue, arena):
        assert not queue.try_spawn(MINER, 249)
        assert arena.my_spawn.spawned == []
        assert queue.pending_spawn is None

    def test_spawner_busy(self, queue, arena, world):
        arena.my_spawn.spawning = FakeSpawning(None)
        world.refresh()
        assert not queue.try_spawn(TUG, 1000)

    def test_no_spawner(self, queue, arena, world):
        arena.remove(arena.my_spawn)
        world.refresh()
        assert not queue.try_spawn(TUG, 1000)

    def test_refused_spawn_leaves_nothing_pending(self, queue, arena):
        arena.my_spawn.refuse = ErrorCode.NOT_ENOUGH_ENERGY
        assert not queue.try_spawn(TUG, 1000)
        assert queue.pending_spawn is None

    def test_miner_faces_win_objective(self, queue, arena):
        objective = FakeConstructionSite(11, 49)
        assert queue.try_spawn(MINER, 1000, objective)
        assert arena.my_spawn.directions == [[Direction.TOP_RIGHT]]

    def test_other_jobs_keep_default_directions(self, queue, arena):
        assert queue.try_spawn(TUG, 1000, FakeConstructionSite(11, 49))
        assert arena.my_spawn.directions == []


class TestRegisterSpawning:

    def test_registers_spawning_creep(self, queue, arena, world, units):
        queue.try_spawn(MINER, 1000)
        creep = arena.my_spawn.spawning.creep
        world.refresh()

        job = queue.check_and_add_spawning_creep()
        assert job is not None
        assert job.unit_id == creep.id
        assert job.job_kind is JobKind.MINER
        assert units.has_unit(creep.id)
        assert queue.pending_spawn is None
        assert world.has_built_miner

    def test_nothing_pending(self, queue, units):
        assert queue.check_and_add_spawning_creep() is None
        assert len(units) == 0

    def test_stale_pending_is_dropped(self, queue, arena, world, units):
        queue.try_spawn(TUG, 1000)
        arena.my_spawn.finish_spawning()
        world.refresh()
        assert queue.check_and_add_spawning_creep() is None
        assert queue.pending_spawn is None
        assert len(units) == 0

    def test_unknown_id_retries(self, queue, arena, world, units):
        queue.try_spawn(TUG, 1000)
        arena.my_spawn.spawning = FakeSpawning(None)
        world.refresh()
        assert queue.check_and_add_spawning_creep() is None
        assert queue.pending_spawn is not None
        assert len(units) == 0

    def test_never_registers_twice(self, queue, arena, world, units):
        queue.try_spawn(TUG, 1000)
        creep = arena.my_spawn.spawning.creep
        units.add_unit(creep.id, JobKind.TUG)
        world.refresh()
        queue.check_and_add_spawning_creep()
        assert len(units) == 1
        assert queue.pending_spawn is None


class TestEnergy:

    def test_spawn_plus_own_extensions(self, arena, world):
        arena.add(FakeExtension(11, 51, energy=40))
        arena.add(FakeExtension(12, 51, energy=60))
        arena.add(FakeExtension(89, 51, my=False, energy=100))
        world.refresh()
        assert EnergyManager(world).get_total_energy() == 1100

    def test_no_spawn(self, arena, world):
        arena.remove(arena.my_spawn)
        arena.add(FakeExtension(11, 51, energy=40))
        world.refresh()
        assert EnergyManager(world).get_total_energy() == 40


class TestBuildOrder:

    def test_spawn_then_register(self, world, units, jobs, arena):
        order = BuildOrder(world, units, jobs)
        assert order.try_spawn_next_creep()
        assert arena.my_spawn.spawned[0] == [BodyPart.MOVE, BodyPart.MOVE, BodyPart.RANGED_ATTACK, BodyPart.HEAL]

        arena.ticks += 1
        world.refresh()
        order.check_and_add_spawning_creep()
        assert [u.job_kind for u in units.units] == [JobKind.CLERIC]

    def test_waits_for_energy(self, world, units, jobs, arena):
        arena.my_spawn.store.energy = 100
        world.refresh()
        order = BuildOrder(world, units, jobs)
        assert not order.try_spawn_next_creep()
        assert arena.my_spawn.spawned == []
