"""
Fighter - melee.

Priority each tick:
  1. Defensive posture   outmatched and we own ramparts: take cover,
                         still hitting anything adjacent
  2. Engage              nearest exposed enemy within the engagement radius
  3. Fortified miner     attack through the rampart it is dug in on
  4. Idle                patrol the centre band, or come home when
                         overextended
  5. Siege               the enemy has no creeps left: go for its spawn
"""

from __future__ import annotations

from typing import Any, Optional

from ArenaBot.combat.combat_utils import (
    filter_enemies_by_rampart_status,
    handle_defensive_retreat,
    idle_in_field,
    siege_enemy_spawn,
)
from ArenaBot.combat.ranges import closest_by_range, in_range
from ArenaBot.constants import BodyPart, ErrorCode, JobKind
from ArenaBot.jobs.job import Job
from ArenaBot.jobs.memory import CombatMemory

MOVE, ATTACK = BodyPart.MOVE, BodyPart.ATTACK


class Fighter(Job):

    KIND = JobKind.FIGHTER
    TIERS = {
        1: (MOVE, ATTACK),
        2: (MOVE, MOVE, ATTACK, ATTACK),
    }
    MEMORY_CLASS = CombatMemory

    def execute(self, creep: Any) -> Optional[str]:
        world = self.world

        if handle_defensive_retreat(creep, world, strike=creep.attack, strike_range=1):
            return "defensive, holding rampart"

        exposed = filter_enemies_by_rampart_status(world.enemy_creeps, world.enemy_ramparts).exposed
        nearby = in_range(creep, exposed, world.config.combat.engagement_radius)
        target = closest_by_range(creep, nearby)
        if target is not None:
            return self._strike(creep, target)

        alert = world.fortified_miner
        if alert is not None:
            return self._strike(creep, alert.rampart, label="break fortified miner")

        decision = idle_in_field(creep, world, self.memory)
        if decision is not None:
            return decision
        return siege_enemy_spawn(creep, world, melee=True)

    @staticmethod
    def _strike(creep: Any, target: Any, label: str = "engage") -> str:
        if creep.attack(target) == ErrorCode.NOT_IN_RANGE:
            creep.move_to(target)
            return f"{label}: closing on {target.id}"
        return f"{label}: attack {target.id}"
