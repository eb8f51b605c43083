"""
Cleric - ranged support that heals before it shoots.

Healing priority: itself when damaged, otherwise the nearest damaged ally,
adjacent with heal() or up to range 3 with ranged_heal(). Out of range,
nothing is healed this tick; the movement rules bring it closer.
"""

from __future__ import annotations

from typing import Any, List, Optional

from ArenaBot.combat.ranges import closest_by_range, is_in_heal_range, is_in_ranged_heal_range
from ArenaBot.constants import BodyPart, JobKind
from ArenaBot.jobs.ranged import RangedJob

MOVE, RANGED_ATTACK, HEAL = BodyPart.MOVE, BodyPart.RANGED_ATTACK, BodyPart.HEAL


class Cleric(RangedJob):

    KIND = JobKind.CLERIC
    TIERS = {
        1: (MOVE, MOVE, RANGED_ATTACK, HEAL),
        2: (MOVE, MOVE, MOVE, RANGED_ATTACK, HEAL, HEAL),
    }

    def should_heal_during_idle(self) -> bool:
        return True

    def perform_healing(self, creep: Any, damaged: List[Any]) -> Optional[str]:
        if creep.hits < creep.hits_max:
            creep.heal(creep)
            return "heal self"

        allies = [c for c in damaged if c.id != creep.id]
        ally = closest_by_range(creep, allies)
        if ally is None:
            return None
        if is_in_heal_range(creep, ally):
            creep.heal(ally)
            return f"heal {ally.id}"
        if is_in_ranged_heal_range(creep, ally):
            creep.ranged_heal(ally)
            return f"ranged heal {ally.id}"
        return None
