"""
UnitRegistry - the live roster.

Owns every Job instance. Units enter through add_unit() when BuildQueue
confirms a spawn, and leave in update_creeps() on the first tick their
creep is gone from the snapshot. Each surviving, fully spawned unit acts
exactly once per tick, in insertion order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from ArenaBot.constants import JobKind
from ArenaBot.jobs.job import Job
from ArenaBot.logger import get_logger

if TYPE_CHECKING:
    from ArenaBot.jobs.registry import JobRegistry
    from ArenaBot.world_state import WorldStateCache

log = get_logger()


class UnitRegistry:

    def __init__(self, world: "WorldStateCache", jobs: "JobRegistry") -> None:
        self.world = world
        self.jobs = jobs
        self.units: List[Job] = []

    # ------------------------------------------------------------------
    # Roster
    # ------------------------------------------------------------------

    def add_unit(
        self,
        unit_id: str,
        kind: Union[JobKind, str],
        win_objective: Optional[Any] = None,
        tier: int = 1,
    ) -> Optional[Job]:
        job = self.jobs.create(kind, unit_id, self, win_objective, self.world, tier=tier)
        if job is None:
            return None
        self.units.append(job)
        if job.job_kind is JobKind.MINER:
            self.world.mark_miner_built()
        log.game_event("REGISTER", f"{job.job_name} t{job.tier} {unit_id}", tick=self.world.tick)
        return job

    def has_unit(self, unit_id: str) -> bool:
        return any(u.unit_id == unit_id for u in self.units)

    def units_of(self, kind: JobKind) -> List[Job]:
        return [u for u in self.units if u.job_kind is kind]

    def counts(self) -> Dict[JobKind, int]:
        counts = {kind: 0 for kind in JobKind}
        for unit in self.units:
            counts[unit.job_kind] += 1
        return counts

    def __len__(self) -> int:
        return len(self.units)

    # ------------------------------------------------------------------
    # Per-tick
    # ------------------------------------------------------------------

    def update_creeps(self) -> None:
        """Drop dead units, then let every live, spawned unit act once."""
        survivors: List[Job] = []
        for unit in self.units:
            creep = self.world.get_my_creep(unit.unit_id)
            if creep is None or not creep.exists:
                log.game_event("DIED", f"{unit.job_name} {unit.unit_id}", tick=self.world.tick)
                continue
            survivors.append(unit)
            if creep.spawning:
                continue
            unit.act()
        self.units = survivors
