"""
BuildStrategy - what to spawn next.

Phases, first match wins
------------------------
  1    Opening        walk ``initial_build``; build the first entry whose
                      job is short of its expected count so far
  1.5  Alert          fortified enemy miner and no fighter yet: fighter
  2a   Economy        strength ratio >= threshold: walk ``economy_build``
                      the same way, then ``fallback_job`` forever
  2b   Military       otherwise archers and clerics at archers_per_cleric:1

"Expected count so far" for list position i is how many times that job
appears in positions 0..i. With [miner, tug, miner, tug] and one miner
alive, position 0 is satisfied, position 1 asks for a tug.

Pure over (unit counts, world snapshot): the same input always gives the
same answer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterable, Optional, Sequence, Tuple

from ArenaBot.config import BuildConfig, BuildOrderEntry
from ArenaBot.constants import BodyPart, JobKind
from ArenaBot.logger import get_logger

if TYPE_CHECKING:
    from ArenaBot.jobs.job import Job
    from ArenaBot.jobs.registry import JobRegistry
    from ArenaBot.world_state import WorldStateCache

log = get_logger()


@dataclass(frozen=True)
class BuildChoice:
    job: JobKind
    tier: int
    body: Tuple[BodyPart, ...]
    cost: int

    def __str__(self) -> str:
        return f"{self.job.value} t{self.tier} (cost {self.cost})"


def count_jobs(units: Iterable["Job"]) -> Dict[JobKind, int]:
    counts = {kind: 0 for kind in JobKind}
    for unit in units:
        counts[unit.job_kind] += 1
    return counts


class BuildStrategy:

    def __init__(self, world: "WorldStateCache", jobs: "JobRegistry", config: BuildConfig) -> None:
        self.world = world
        self.jobs = jobs
        self.config = config
        self._last_choice: Optional[BuildChoice] = None

    def get_next_creep_to_build(self, units: Iterable["Job"]) -> Optional[BuildChoice]:
        choice = self._decide(count_jobs(units))
        if choice != self._last_choice:
            log.info("Next build: %s", choice, tick=self.world.tick)
            self._last_choice = choice
        return choice

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def _decide(self, counts: Dict[JobKind, int]) -> Optional[BuildChoice]:
        config = self.config

        choice = self._first_missing(config.initial_build, counts)
        if choice is not None:
            return choice

        if self.world.fortified_miner is not None and counts[JobKind.FIGHTER] == 0:
            return self._choice(config.fortified_miner_response)

        ratio = self.world.team_strengths().ratio
        if ratio >= config.strength_threshold:
            choice = self._first_missing(config.economy_build, counts)
            if choice is not None:
                return choice
            return self._choice(config.fallback_job)

        desired_archers = (counts[JobKind.CLERIC] + 1) * config.archers_per_cleric
        if counts[JobKind.ARCHER] < desired_archers:
            return self._choice(BuildOrderEntry(JobKind.ARCHER))
        return self._choice(BuildOrderEntry(JobKind.CLERIC))

    def _first_missing(
        self,
        entries: Sequence[BuildOrderEntry],
        counts: Dict[JobKind, int],
    ) -> Optional[BuildChoice]:
        for i, entry in enumerate(entries):
            expected = sum(1 for e in entries[: i + 1] if e.job == entry.job)
            if counts.get(entry.job, 0) < expected:
                choice = self._choice(entry)
                if choice is not None:
                    return choice
        return None

    def _choice(self, entry: BuildOrderEntry) -> Optional[BuildChoice]:
        job_class = self.jobs.get(entry.job)
        if job_class is None:
            return None
        tier = entry.tier if entry.tier in job_class.TIERS else 1
        return BuildChoice(
            job=job_class.KIND,
            tier=tier,
            body=tuple(job_class.tier_body(entry.tier)),
            cost=job_class.tier_cost(entry.tier),
        )
