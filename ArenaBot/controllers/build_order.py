"""
BuildOrder - the spawn side of the tick, as the host loop sees it.

    build_order.check_and_add_spawning_creep()   # register last spawn
    build_order.try_spawn_next_creep()           # maybe start a new one

It wires BuildStrategy (what), EnergyManager (can we afford it) and
BuildQueue (do it, and track it) together.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from ArenaBot.config import BuildConfig
from ArenaBot.constants import ResourceType
from ArenaBot.controllers.build_queue import BuildQueue
from ArenaBot.controllers.build_strategy import BuildStrategy

if TYPE_CHECKING:
    from ArenaBot.controllers.unit_registry import UnitRegistry
    from ArenaBot.jobs.registry import JobRegistry
    from ArenaBot.world_state import WorldStateCache


class EnergyManager:
    """Spawnable energy: the spawn's store plus every own extension's."""

    def __init__(self, world: "WorldStateCache") -> None:
        self.world = world

    def get_total_energy(self) -> int:
        total = 0
        spawn = self.world.my_spawn
        if spawn is not None and spawn.store is not None:
            total += spawn.store.get_used_capacity(ResourceType.ENERGY)
        for extension in self.world.my_extensions:
            if extension.store is not None:
                total += extension.store.get_used_capacity(ResourceType.ENERGY)
        return total


class BuildOrder:

    def __init__(
        self,
        world: "WorldStateCache",
        registry: "UnitRegistry",
        jobs: "JobRegistry",
        config: Optional[BuildConfig] = None,
        win_objective: Optional[Any] = None,
    ) -> None:
        self.world = world
        self.registry = registry
        self.win_objective = win_objective

        self.energy_manager = EnergyManager(world)
        self.build_queue = BuildQueue(registry, world)
        self.build_strategy = BuildStrategy(world, jobs, config or world.config.build)

    def check_and_add_spawning_creep(self) -> None:
        self.build_queue.check_and_add_spawning_creep(self.win_objective)

    def try_spawn_next_creep(self) -> bool:
        choice = self.build_strategy.get_next_creep_to_build(self.registry.units)
        if choice is None:
            return False
        energy = self.energy_manager.get_total_energy()
        return self.build_queue.try_spawn(choice, energy, self.win_objective)
