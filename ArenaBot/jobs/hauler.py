"""
Hauler - gathers from the central sources and delivers.

States flip on capacity: MINING until full, HAULING until empty. The flip
and the action for the new state happen in the same tick.

Delivery target: the win objective once the team has ever fielded a
miner (extensions then feed spawning), the spawn before that.
"""

from __future__ import annotations

from typing import Any, Optional

from ArenaBot.combat.combat_utils import handle_defensive_retreat
from ArenaBot.combat.ranges import as_point, closest_by_range
from ArenaBot.constants import BodyPart, ErrorCode, JobKind, ResourceType
from ArenaBot.jobs.job import Job
from ArenaBot.jobs.memory import HaulerMemory, HaulerState

WORK, CARRY, MOVE = BodyPart.WORK, BodyPart.CARRY, BodyPart.MOVE


class Hauler(Job):

    KIND = JobKind.HAULER
    TIERS = {
        1: (WORK, CARRY, MOVE, MOVE),
        2: (WORK, CARRY, CARRY, MOVE, MOVE, MOVE),
    }
    MEMORY_CLASS = HaulerMemory

    def execute(self, creep: Any) -> Optional[str]:
        if handle_defensive_retreat(creep, self.world):
            return "defensive, sheltering"

        used = creep.store.get_used_capacity(ResourceType.ENERGY)
        capacity = creep.store.get_capacity(ResourceType.ENERGY)

        memory = self.memory
        if memory.state is HaulerState.MINING and used >= capacity:
            memory.state = HaulerState.HAULING
        elif memory.state is HaulerState.HAULING and used == 0:
            memory.state = HaulerState.MINING

        if memory.state is HaulerState.MINING:
            return self._mine(creep)
        return self._haul(creep)

    def _mine(self, creep: Any) -> Optional[str]:
        topology = self.world.config.topology
        sources = self.world.sources
        central = [s for s in sources if not topology.is_corner_row(as_point(s).y)]
        source = closest_by_range(creep, central or sources)
        if source is None:
            return None
        if creep.harvest(source) == ErrorCode.NOT_IN_RANGE:
            creep.move_to(source)
            return f"to source {source.id}"
        return f"harvest {source.id}"

    def _haul(self, creep: Any) -> Optional[str]:
        if self.world.has_built_miner and self.win_objective is not None:
            if creep.build(self.win_objective) == ErrorCode.NOT_IN_RANGE:
                creep.move_to(self.win_objective)
                return "to win objective"
            return "build win objective"

        spawn = self.world.my_spawn
        if spawn is None:
            return None
        if creep.transfer(spawn, ResourceType.ENERGY) == ErrorCode.NOT_IN_RANGE:
            creep.move_to(spawn)
            return "to spawn"
        return "deliver to spawn"
