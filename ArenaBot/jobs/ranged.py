"""
RangedJob - shared behaviour for units that fight at range.

Archer and Cleric differ only in the two hooks below; everything else
(targeting, kiting, closing in, idling) is common.

Per tick, in order:
  1. perform_healing()    hook, Cleric heals here; runs before combat
  2. Defensive posture    same rule as melee, auto-firing at range 3
  3. Targeting            among enemies inside the engagement radius,
                          nearest off ramparts, else nearest on one
  4. Movement             kite if a threat is inside the desired range,
                          else close the distance (clerics close on hurt
                          allies first)
  5. Ranged attack        always fired at the chosen target, independent
                          of what movement did
  6. Idle                 nothing in the radius: hurt allies first for
                          clerics, then patrol the centre band or come
                          home when overextended; with no enemy creeps
                          left, siege the enemy spawn
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, List, Optional

from ArenaBot.combat.combat_utils import (
    filter_enemies_by_rampart_status,
    handle_defensive_retreat,
    idle_in_field,
    siege_enemy_spawn,
)
from ArenaBot.combat.kiting import KitingBehavior
from ArenaBot.combat.ranges import closest_by_range, get_range, in_range
from ArenaBot.constants import RANGED_ATTACK_RANGE
from ArenaBot.jobs.job import Job
from ArenaBot.jobs.memory import CombatMemory


class RangedJob(Job):

    MEMORY_CLASS = CombatMemory

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def should_heal_during_idle(self) -> bool:
        """True if damaged allies pull this unit before enemies do."""

    @abstractmethod
    def perform_healing(self, creep: Any, damaged: List[Any]) -> Optional[str]:
        """Heal for this tick. ``damaged`` includes the creep itself."""

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def execute(self, creep: Any) -> Optional[str]:
        world = self.world
        damaged = [c for c in world.my_creeps if c.hits < c.hits_max]
        decisions = []

        heal = self.perform_healing(creep, damaged)
        if heal:
            decisions.append(heal)

        if handle_defensive_retreat(creep, world, strike=creep.ranged_attack, strike_range=RANGED_ATTACK_RANGE):
            decisions.append("defensive, holding rampart")
            return "; ".join(decisions)

        enemies = world.enemy_creeps
        nearby = in_range(creep, enemies, world.config.combat.ranged_engagement_radius)
        if nearby:
            decisions.append(self._fight(creep, nearby, enemies, damaged))
        else:
            decisions.append(self.idle(creep, damaged))
        return "; ".join(d for d in decisions if d)

    def _fight(self, creep: Any, candidates: List[Any], enemies: List[Any], damaged: List[Any]) -> str:
        desired = self.world.config.combat.desired_range

        split = filter_enemies_by_rampart_status(candidates, self.world.ramparts)
        target = closest_by_range(creep, split.exposed) or closest_by_range(creep, split.on_ramparts)
        distance = get_range(creep, target)
        threats_near = in_range(creep, enemies, RANGED_ATTACK_RANGE)

        if threats_near and distance < desired:
            retreat = KitingBehavior(self.world).find_best_retreat_position(creep, enemies)
            if retreat is not None:
                creep.move_to(retreat)
                movement = f"kite -> {retreat}"
            else:
                movement = "cornered"
        else:
            movement = self._close_in(creep, target, distance, damaged)

        creep.ranged_attack(target)
        return f"{movement}, fire at {target.id}"

    def _close_in(self, creep: Any, target: Any, distance: int, damaged: List[Any]) -> str:
        if self.should_heal_during_idle():
            allies = [c for c in damaged if c.id != creep.id]
            if allies:
                ally = closest_by_range(creep, allies)
                if get_range(creep, ally) > 1:
                    creep.move_to(ally)
                    return f"close on hurt ally {ally.id}"
                return f"stay with hurt ally {ally.id}"
        if distance > self.world.config.combat.desired_range:
            creep.move_to(target)
            return f"close on {target.id}"
        return "hold range"

    def idle(self, creep: Any, damaged: List[Any]) -> Optional[str]:
        """No enemy within the engagement radius, or none left at all."""
        if self.should_heal_during_idle():
            allies = [c for c in damaged if c.id != creep.id]
            if allies:
                ally = closest_by_range(creep, allies)
                creep.move_to(ally)
                return f"idle, go to hurt ally {ally.id}"
        decision = idle_in_field(creep, self.world, self.memory)
        if decision is not None:
            return decision
        return siege_enemy_spawn(creep, self.world, melee=False)
