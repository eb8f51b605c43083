"""
Tug - a MOVE-only helper that tows immobile creeps.

With no chain active it waits by our spawn, where new miners appear.
Otherwise it walks to the chain's last member and joins once adjacent.
A joined tug does nothing itself: the helped creep drives the whole chain.
"""

from __future__ import annotations

from typing import Any, Optional

from ArenaBot.combat.ranges import as_point, is_adjacent
from ArenaBot.constants import BodyPart, JobKind
from ArenaBot.jobs.job import Job

MOVE = BodyPart.MOVE


class Tug(Job):

    KIND = JobKind.TUG
    TIERS = {
        1: (MOVE,),
        2: (MOVE, MOVE),
    }

    def execute(self, creep: Any) -> Optional[str]:
        chain = self.world.tug_chain

        if chain.is_empty():
            spawn = self.world.my_spawn
            if spawn is not None:
                creep.move_to(spawn)
            return None

        if self.unit_id in chain:
            return None

        last = self.world.get_my_creep(chain.last)
        if last is None:
            # Pruned on the next refresh.
            return None

        if is_adjacent(creep, last):
            if chain.join(self.unit_id, as_point(creep), as_point(last)):
                return f"joined chain behind {last.id} ({len(chain)} long)"
            return None

        creep.move_to(last)
        return f"to chain end {last.id}"
