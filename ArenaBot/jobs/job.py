"""
Job - what a unit is for.

Every live unit is one Job instance. The job holds the unit's id, its tier,
its typed memory and references to the shared world; the behaviour for one
tick lives in ``execute()``.

Subclass and define:
  - KIND          JobKind tag
  - TIERS         {tier: body}; tier 1 is required
  - MEMORY_CLASS  memory record type, JobMemory if the job keeps nothing
  - execute()     one tick of behaviour for a live, non-spawning creep;
                  return a short decision label for the log, or None

Cost is never stored. It is always summed from the body so the two can
never disagree.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Dict, List, Optional, Tuple, Type

from ArenaBot.body import body_cost
from ArenaBot.constants import BodyPart, JobKind
from ArenaBot.jobs.memory import JobMemory
from ArenaBot.logger import get_logger

if TYPE_CHECKING:
    from ArenaBot.controllers.unit_registry import UnitRegistry
    from ArenaBot.world_state import WorldStateCache

log = get_logger()


class Job(ABC):

    KIND: ClassVar[JobKind]
    TIERS: ClassVar[Dict[int, Tuple[BodyPart, ...]]] = {}
    MEMORY_CLASS: ClassVar[Type[JobMemory]] = JobMemory

    def __init__(
        self,
        unit_id: str,
        registry: "UnitRegistry",
        win_objective: Optional[Any],
        world: "WorldStateCache",
        tier: int = 1,
    ) -> None:
        if not self.TIERS:
            raise TypeError(f"{type(self).__name__} defines no body tiers")
        self.unit_id = unit_id
        self.registry = registry
        self.win_objective = win_objective
        self.world = world
        self.tier = tier if tier in self.TIERS else 1
        self.memory = self.MEMORY_CLASS()

    # ------------------------------------------------------------------
    # Descriptor
    # ------------------------------------------------------------------

    @property
    def job_kind(self) -> JobKind:
        return self.KIND

    @property
    def job_name(self) -> str:
        return self.KIND.value

    @classmethod
    def tier_body(cls, tier: int = 1) -> List[BodyPart]:
        body = cls.TIERS.get(tier)
        if body is None:
            log.warning("%s has no tier %s, using tier 1", cls.__name__, tier)
            body = cls.TIERS[1]
        return list(body)

    @classmethod
    def tier_cost(cls, tier: int = 1) -> int:
        return body_cost(cls.tier_body(tier))

    def body(self) -> List[BodyPart]:
        return self.tier_body(self.tier)

    def cost(self) -> int:
        return self.tier_cost(self.tier)

    # ------------------------------------------------------------------
    # Per-tick
    # ------------------------------------------------------------------

    @property
    def creep(self) -> Optional[Any]:
        return self.world.get_my_creep(self.unit_id)

    def act(self) -> None:
        """Run one tick. A creep missing from this tick's snapshot skips its turn."""
        creep = self.creep
        if creep is None:
            return
        decision = self.execute(creep)
        if decision:
            log.job(self.job_name, self.unit_id, decision, tick=self.world.tick)

    @abstractmethod
    def execute(self, creep: Any) -> Optional[str]:
        """One tick of job behaviour for ``creep``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.unit_id}, t{self.tier})"
