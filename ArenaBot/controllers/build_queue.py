"""
BuildQueue - one spawn at a time, from request to registered unit.

Lifecycle of a spawn
--------------------
  try_spawn()                       energy and spawner checked, body sent,
                                    PendingSpawn recorded
  spawn reports a creep in progress check_and_add_spawning_creep()
                                    registers it under the pending job,
                                    then forgets the pending spawn
  spawn idle with a pending spawn   stale: forgotten without registering

Only one PendingSpawn exists at a time; the spawner cannot overlap spawns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from ArenaBot.combat.ranges import as_point
from ArenaBot.constants import DIRECTION_OFFSETS, Direction, JobKind
from ArenaBot.logger import get_logger

if TYPE_CHECKING:
    from ArenaBot.controllers.build_strategy import BuildChoice
    from ArenaBot.controllers.unit_registry import UnitRegistry
    from ArenaBot.jobs.job import Job
    from ArenaBot.world_state import WorldStateCache

log = get_logger()


@dataclass
class PendingSpawn:
    job: JobKind
    tier: int = 1
    requested_tick: int = 0

    def __str__(self) -> str:
        return f"{self.job.value} t{self.tier} (requested tick {self.requested_tick})"


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def direction_toward(origin: Any, target: Any) -> Optional[Direction]:
    """The one-step direction from origin toward target, None if on it."""
    a, b = as_point(origin), as_point(target)
    step = (_sign(b.x - a.x), _sign(b.y - a.y))
    for direction, offset in DIRECTION_OFFSETS.items():
        if (offset.x, offset.y) == step:
            return direction
    return None


class BuildQueue:

    def __init__(self, registry: "UnitRegistry", world: "WorldStateCache") -> None:
        self.registry = registry
        self.world = world
        self.pending_spawn: Optional[PendingSpawn] = None

    # ------------------------------------------------------------------
    # Reconcile
    # ------------------------------------------------------------------

    def check_and_add_spawning_creep(self, win_objective: Optional[Any] = None) -> Optional["Job"]:
        """Register the creep the spawner is producing for our pending spawn."""
        spawn = self.world.my_spawn
        pending = self.pending_spawn

        if pending is None:
            return None

        if spawn is None or not spawn.spawning:
            log.debug("Clearing stale pending spawn %s", pending, tick=self.world.tick)
            self.pending_spawn = None
            return None

        creep = getattr(spawn.spawning, "creep", None)
        creep_id = getattr(creep, "id", None)
        if creep_id is None:
            log.warning("Spawning creep id undefined, retrying next tick", tick=self.world.tick)
            return None

        job = None
        if not self.registry.has_unit(creep_id):
            job = self.registry.add_unit(creep_id, pending.job, win_objective, tier=pending.tier)
        self.pending_spawn = None
        return job

    # ------------------------------------------------------------------
    # Spawn
    # ------------------------------------------------------------------

    def try_spawn(
        self,
        choice: "BuildChoice",
        available_energy: int,
        win_objective: Optional[Any] = None,
    ) -> bool:
        """
        Start spawning ``choice``. False, without side effects, when the
        spawner is missing or busy, a spawn is already pending, or there is
        not enough energy.
        """
        spawn = self.world.my_spawn
        if spawn is None or spawn.spawning:
            return False
        if self.pending_spawn is not None:
            return False
        if available_energy < choice.cost:
            return False

        if choice.job is JobKind.MINER and win_objective is not None:
            # Miners cannot walk; they must appear next to the win objective.
            direction = direction_toward(spawn, win_objective)
            if direction is not None:
                spawn.set_directions([direction])

        result = spawn.spawn_creep(list(choice.body))
        if result is None or result.object is None or result.error:
            log.debug("Spawn of %s refused: %s", choice, getattr(result, "error", None), tick=self.world.tick)
            return False

        self.pending_spawn = PendingSpawn(job=choice.job, tier=choice.tier, requested_tick=self.world.tick)
        log.game_event("SPAWN", f"{choice} with {available_energy} energy available", tick=self.world.tick)
        return True

