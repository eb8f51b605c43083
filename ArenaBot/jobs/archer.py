from __future__ import annotations

from typing import Any, List, Optional

from ArenaBot.constants import BodyPart, JobKind
from ArenaBot.jobs.ranged import RangedJob

MOVE, RANGED_ATTACK = BodyPart.MOVE, BodyPart.RANGED_ATTACK


class Archer(RangedJob):
    """Pure ranged damage. No healing."""

    KIND = JobKind.ARCHER
    TIERS = {
        1: (MOVE, RANGED_ATTACK),
        2: (MOVE, MOVE, RANGED_ATTACK, RANGED_ATTACK),
    }

    def should_heal_during_idle(self) -> bool:
        return False

    def perform_healing(self, creep: Any, damaged: List[Any]) -> Optional[str]:
        return None
