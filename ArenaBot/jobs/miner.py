"""
Miner - parks on a corner source and turns it into spawn energy.

A miner has no MOVE parts. It is spawned next to our spawn and the win
objective, gets towed to its source by the tug chain, and never moves
again.

State machine
-------------
  (uninitialised)
      claim the lowest corner source no live miner holds
  MOVING_TO_POSITION
      claim or wait for the tug chain, drive it toward the mining tile
  MINING, stage 1
      harvest until there is enough to build with, place the extension
      ring once, build it
  MINING, stage 2
      harvest, then top up the least full adjacent extension

Before any of that, the very first miner performs the one-off transfer
into the win objective while it still stands next to the spawn.
"""

from __future__ import annotations

from typing import Any, Optional

from ArenaBot.body import count_parts
from ArenaBot.constants import BodyPart, ErrorCode, JobKind, ResourceType
from ArenaBot.jobs.extension_builder import ExtensionBuilder
from ArenaBot.jobs.job import Job
from ArenaBot.jobs.memory import MinerMemory
from ArenaBot.jobs.source_assignment import claim_corner_source, find_mining_position
from ArenaBot.logger import get_logger
from ArenaBot.services.structures import perform_initial_win_objective_transfer
from ArenaBot.services.tug_chain import TugChainCoordinator

log = get_logger()

WORK, CARRY = BodyPart.WORK, BodyPart.CARRY


class Miner(Job):

    KIND = JobKind.MINER
    TIERS = {
        1: (WORK, WORK, CARRY),
        2: (WORK, WORK, WORK, CARRY),
    }
    MEMORY_CLASS = MinerMemory

    # ------------------------------------------------------------------
    # Capacities, from the tier body
    # ------------------------------------------------------------------

    @property
    def total_capacity(self) -> int:
        return count_parts(self.body(), CARRY) * self.world.config.economy.carry_capacity_per_part

    @property
    def mining_production(self) -> int:
        return count_parts(self.body(), WORK) * self.world.config.economy.harvest_per_work_part

    @property
    def building_production(self) -> int:
        return count_parts(self.body(), WORK) * self.world.config.economy.build_per_work_part

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def execute(self, creep: Any) -> Optional[str]:
        world = self.world

        if perform_initial_win_objective_transfer(creep, world, self.win_objective):
            return "initial win objective transfer"

        memory = self.memory
        if not memory.initialized:
            self._initialise()
            if memory.source_id is None:
                return None

        source = next((s for s in world.sources if s.id == memory.source_id), None)
        if source is None:
            if memory.source_id is not None:
                log.warning("Miner %s has no valid source", self.unit_id, tick=world.tick)
            return None

        if memory.is_moving_to_position:
            decision = self._travel(creep, source)
            if decision is not None:
                return decision

        if memory.is_mining:
            used = creep.store.get_used_capacity(ResourceType.ENERGY)
            if memory.stage == 1:
                return self._stage_one(creep, source, used)
            return self._stage_two(creep, source, used)
        return None

    # ------------------------------------------------------------------
    # Setup and travel
    # ------------------------------------------------------------------

    def _initialise(self) -> None:
        world = self.world
        held = [
            u.memory.source_id
            for u in self.registry.units_of(JobKind.MINER)
            if u.unit_id != self.unit_id and world.get_my_creep(u.unit_id) is not None
        ]
        index, source = claim_corner_source(world, held)
        if source is None:
            log.warning("Miner %s could not be assigned a source, no free corner", self.unit_id, tick=world.tick)
            self.memory.initialized = True
            return
        self.memory.initialize(index, source)
        log.info("Miner %s assigned source %s (slot %d)", self.unit_id, source.id, index, tick=world.tick)

    def _travel(self, creep: Any, source: Any) -> Optional[str]:
        """Returns a decision while still travelling, None once arrived."""
        memory = self.memory
        world = self.world

        if memory.target is None:
            position = find_mining_position(source, world)
            if position is None:
                log.warning("Miner %s couldn't find a mining position", self.unit_id, tick=world.tick)
                return "no mining position"
            memory.set_target(position)

        chain = world.tug_chain
        if not memory.is_at_target(creep):
            if chain.is_empty():
                chain.claim(self.unit_id)
                TugChainCoordinator.move_chain(chain, memory.target, world)
                return f"claimed tug chain toward {memory.target}"
            if chain.is_helped(self.unit_id):
                TugChainCoordinator.move_chain(chain, memory.target, world)
                return f"towed toward {memory.target} ({len(chain) - 1} tugs)"
            return "waiting for tug chain"

        memory.transition_to_mining()
        if chain.is_helped(self.unit_id):
            chain.clear()
        log.game_event("MINER", f"{self.unit_id} arrived at mining position {memory.target}", tick=world.tick)
        return None

    # ------------------------------------------------------------------
    # Mining stages
    # ------------------------------------------------------------------

    def _harvest(self, creep: Any, source: Any) -> str:
        if creep.harvest(source) == ErrorCode.NOT_IN_RANGE:
            log.debug("Miner %s not in range of source %s", self.unit_id, source.id, tick=self.world.tick)
        return f"harvest {source.id}"

    def _stage_one(self, creep: Any, source: Any, used: int) -> Optional[str]:
        if used < self.building_production:
            return self._harvest(creep, source)

        builder = ExtensionBuilder(self.world)
        memory = self.memory
        if not memory.extensions_created:
            memory.mark_extensions_created(builder.create_extension_sites(creep, source))

        if builder.build_nearby_construction_sites(creep):
            return "build extension"

        if builder.are_extensions_complete(creep, memory.sites_created):
            memory.transition_to_stage2()
            log.game_event("MINER", f"{self.unit_id} extensions complete, moving to stage 2", tick=self.world.tick)
            return "stage 2"
        return None

    def _stage_two(self, creep: Any, source: Any, used: int) -> Optional[str]:
        economy = self.world.config.economy
        if used < min(economy.miner_top_up_cap, self.total_capacity - self.mining_production):
            return self._harvest(creep, source)
        if ExtensionBuilder(self.world).fill_extensions(creep):
            return "fill extension"
        return None
