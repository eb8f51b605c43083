"""
JobRegistry - JobKind to Job class.

The set of jobs is closed, so the registry is just a lookup table built
once at startup with ``JobRegistry.default()`` and handed to whatever
needs to turn a job kind into a body or a live Job.

    registry = JobRegistry.default()
    registry.get(JobKind.MINER).tier_cost(1)   # 250
    registry.get("paladin")                    # warning, None
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Type, Union

from ArenaBot.constants import JobKind
from ArenaBot.jobs.archer import Archer
from ArenaBot.jobs.cleric import Cleric
from ArenaBot.jobs.fighter import Fighter
from ArenaBot.jobs.hauler import Hauler
from ArenaBot.jobs.job import Job
from ArenaBot.jobs.miner import Miner
from ArenaBot.jobs.tug import Tug
from ArenaBot.logger import get_logger

if TYPE_CHECKING:
    from ArenaBot.controllers.unit_registry import UnitRegistry
    from ArenaBot.world_state import WorldStateCache

log = get_logger()

DEFAULT_JOBS = (Fighter, Archer, Hauler, Miner, Cleric, Tug)


class JobRegistry:

    def __init__(self) -> None:
        self._jobs: Dict[JobKind, Type[Job]] = {}

    @classmethod
    def default(cls) -> "JobRegistry":
        registry = cls()
        for job_class in DEFAULT_JOBS:
            registry.register(job_class)
        return registry

    def register(self, job_class: Type[Job]) -> None:
        """Add or replace the class for its KIND."""
        self._jobs[job_class.KIND] = job_class

    def get(self, kind: Union[JobKind, str]) -> Optional[Type[Job]]:
        try:
            job_kind = JobKind(kind)
        except ValueError:
            log.warning("Unknown job type '%s'", kind)
            return None
        job_class = self._jobs.get(job_kind)
        if job_class is None:
            log.warning("Job type '%s' is not registered", job_kind.value)
        return job_class

    def create(
        self,
        kind: Union[JobKind, str],
        unit_id: str,
        registry: "UnitRegistry",
        win_objective: Optional[Any],
        world: "WorldStateCache",
        tier: int = 1,
    ) -> Optional[Job]:
        job_class = self.get(kind)
        if job_class is None:
            return None
        return job_class(unit_id, registry, win_objective, world, tier=tier)

    def __contains__(self, kind: object) -> bool:
        return kind in self._jobs

    def summary(self) -> str:
        """Human-readable listing for the startup log."""
        lines = []
        for kind, job_class in self._jobs.items():
            tiers = ", ".join(
                f"t{tier}={job_class.tier_cost(tier)}" for tier in sorted(job_class.TIERS)
            )
            lines.append(f"  {kind.value}: {job_class.__name__} [{tiers}]")
        return "\n".join(lines) if lines else "  (empty)"
