"""Shared fixtures: a two-spawn arena, its snapshot and the rosters on top."""
from __future__ import annotations

import pytest

from ArenaBot.config import BotConfig
from ArenaBot.controllers.unit_registry import UnitRegistry
from ArenaBot.jobs.registry import JobRegistry
from ArenaBot.world_state import WorldStateCache

from fakes import FakeArena, FakeSpawn


@pytest.fixture
def arena() -> FakeArena:
    """Own spawn on the left edge, enemy spawn on the right."""
    arena = FakeArena()
    arena.my_spawn = arena.add(FakeSpawn(10, 50, my=True, energy=1000, arena=arena))
    arena.enemy_spawn = arena.add(FakeSpawn(90, 50, my=False, arena=arena))
    return arena


@pytest.fixture
def config() -> BotConfig:
    return BotConfig()


@pytest.fixture
def world(arena, config) -> WorldStateCache:
    world = WorldStateCache(arena, config)
    world.refresh()
    return world


@pytest.fixture
def jobs() -> JobRegistry:
    return JobRegistry.default()


@pytest.fixture
def units(world, jobs) -> UnitRegistry:
    return UnitRegistry(world, jobs)
