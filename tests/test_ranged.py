"""Archer and Cleric: targeting, kiting, healing."""
from __future__ import annotations

import pytest

from ArenaBot.combat.ranges import get_range
from ArenaBot.constants import BodyPart, JobKind

from fakes import FakeCreep, FakeRampart, pt

MOVE, RANGED, HEAL, ATTACK = BodyPart.MOVE, BodyPart.RANGED_ATTACK, BodyPart.HEAL, BodyPart.ATTACK


def tick(world, units):
    world.refresh()
    units.update_creeps()


@pytest.fixture
def archer(arena, units):
    def place(x, y):
        creep = arena.add(FakeCreep(x, y, body=(MOVE, RANGED), obj_id="a"))
        units.add_unit("a", JobKind.ARCHER)
        return creep
    return place


@pytest.fixture
def cleric(arena, units):
    def place(x, y, hits=None):
        creep = arena.add(FakeCreep(x, y, body=(MOVE, MOVE, RANGED, HEAL), hits=hits, obj_id="c"))
        units.add_unit("c", JobKind.CLERIC)
        return creep
    return place


class TestArcher:

    def test_kites_when_too_close(self, world, arena, units, archer):
        creep = archer(40, 40)
        enemy = arena.add(FakeCreep(42, 40, my=False, body=(ATTACK,)))
        tick(world, units)
        retreat = creep.moved_to()
        assert get_range(retreat, creep) == 1
        assert get_range(retreat, enemy) == 3
        assert creep.calls("ranged_attack") == [enemy]

    def test_closes_distance(self, world, arena, units, archer):
        creep = archer(40, 40)
        enemy = arena.add(FakeCreep(45, 40, my=False))
        tick(world, units)
        assert creep.calls("move_to") == [enemy]
        assert creep.calls("ranged_attack") == [enemy]

    def test_holds_at_desired_range(self, world, arena, units, archer):
        creep = archer(40, 40)
        enemy = arena.add(FakeCreep(43, 40, my=False))
        tick(world, units)
        assert not creep.did("move_to")
        assert creep.calls("ranged_attack") == [enemy]

    def test_prefers_exposed_target(self, world, arena, units, archer):
        creep = archer(40, 40)
        arena.add(FakeRampart(40, 44, my=False))
        arena.add(FakeCreep(40, 44, my=False))
        exposed = arena.add(FakeCreep(46, 40, my=False))
        tick(world, units)
        assert creep.calls("ranged_attack") == [exposed]

    def test_falls_back_to_dug_in_target(self, world, arena, units, archer):
        creep = archer(40, 40)
        arena.add(FakeRampart(40, 46, my=False))
        dug_in = arena.add(FakeCreep(40, 46, my=False))
        tick(world, units)
        assert creep.calls("ranged_attack") == [dug_in]

    def test_cornered_still_fires(self, world, arena, units, archer):
        creep = archer(0, 0)
        for x, y in ((1, 0), (1, 1), (0, 1)):
            arena.add(FakeCreep(x, y, my=False))
        tick(world, units)
        assert not creep.did("move_to")
        assert len(creep.calls("ranged_attack")) == 1

    def test_sieges_when_enemy_has_no_creeps(self, world, arena, units, archer):
        creep = archer(60, 50)
        tick(world, units)
        assert creep.calls("move_to") == [arena.enemy_spawn]
        assert not creep.did("ranged_attack")

    def test_shoots_spawn_in_range(self, world, arena, units, archer):
        creep = archer(87, 50)
        tick(world, units)
        assert creep.calls("ranged_attack") == [arena.enemy_spawn]
        assert not creep.did("move_to")

    def test_defensive_fire(self, world, arena, units, archer):
        creep = archer(20, 50)
        shelter = arena.add(FakeRampart(15, 50))
        for y in (47, 53):
            arena.add(FakeCreep(22, y, my=False, body=(RANGED,)))
        tick(world, units)
        assert creep.moved_to() == shelter.position
        assert len(creep.calls("ranged_attack")) == 1


class TestCleric:

    def test_heals_self_first(self, world, arena, units, cleric):
        creep = cleric(40, 40, hits=250)
        arena.add(FakeCreep(41, 40, hits=10))
        tick(world, units)
        assert creep.calls("heal") == [creep]
        assert not creep.did("ranged_heal")

    def test_heals_adjacent_ally(self, world, arena, units, cleric):
        creep = cleric(40, 40)
        ally = arena.add(FakeCreep(41, 41, hits=50))
        tick(world, units)
        assert creep.calls("heal") == [ally]

    def test_ranged_heal_within_three(self, world, arena, units, cleric):
        creep = cleric(40, 40)
        ally = arena.add(FakeCreep(43, 40, hits=50))
        tick(world, units)
        assert creep.calls("ranged_heal") == [ally]
        assert not creep.did("heal")

    def test_no_heal_out_of_range(self, world, arena, units, cleric):
        creep = cleric(40, 40)
        arena.add(FakeCreep(45, 40, hits=50))
        tick(world, units)
        assert not creep.did("heal")
        assert not creep.did("ranged_heal")

    def test_moves_to_hurt_ally_before_enemy(self, world, arena, units, cleric):
        creep = cleric(40, 40)
        ally = arena.add(FakeCreep(45, 40, hits=50))
        enemy = arena.add(FakeCreep(50, 40, my=False))
        tick(world, units)
        assert creep.calls("move_to") == [ally]
        assert creep.calls("ranged_attack") == [enemy]

    def test_idle_goes_to_hurt_ally(self, world, arena, units, cleric):
        creep = cleric(40, 40)
        ally = arena.add(FakeCreep(30, 40, hits=50))
        tick(world, units)
        assert creep.calls("move_to") == [ally]

    def test_heals_and_fires_same_tick(self, world, arena, units, cleric):
        creep = cleric(40, 40)
        ally = arena.add(FakeCreep(41, 40, hits=50))
        enemy = arena.add(FakeCreep(45, 40, my=False))
        tick(world, units)
        assert creep.calls("heal") == [ally]
        assert creep.calls("ranged_attack") == [enemy]



class TestRangedIdle:

    def test_overextended_archer_returns_home(self, world, arena, units, archer):
        creep = archer(85, 50)
        arena.add(FakeCreep(98, 10, my=False))
        tick(world, units)
        assert creep.calls("move_to") == [arena.my_spawn]
        assert not creep.did("ranged_attack")

    def test_patrols_when_enemy_beyond_radius(self, world, arena, units, archer):
        creep = archer(50, 31)
        arena.add(FakeCreep(95, 95, my=False))
        tick(world, units)
        assert creep.moved_to() == pt(50, 70)
        assert units.units[0].memory.patrol_index == 1
        assert not creep.did("ranged_attack")

    def test_engages_at_edge_of_radius(self, world, arena, units, archer):
        creep = archer(40, 40)
        enemy = arena.add(FakeCreep(50, 40, my=False))
        tick(world, units)
        assert creep.calls("move_to") == [enemy]
        assert creep.calls("ranged_attack") == [enemy]

    def test_idle_cleric_prefers_hurt_ally(self, world, arena, units, cleric):
        creep = cleric(50, 31)
        ally = arena.add(FakeCreep(45, 31, hits=50))
        arena.add(FakeCreep(95, 95, my=False))
        tick(world, units)
        assert creep.calls("move_to") == [ally]
