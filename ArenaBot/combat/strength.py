"""
Combat strength estimation.

A creep's worth is read straight off its body:

    ATTACK         30 damage per hit, melee only
    RANGED_ATTACK  10 damage per hit, range 1-3
    HEAL           12 per tick adjacent, less at range

Observed matchups tune the weights (see CombatConfig):

  1. One ranged unit kites up to three melee units   -> ranged x3
  2. Ranged + heal is about two ranged units         -> heal x2.0 on ranged
  3. Two melee beat one melee + heal                 -> heal x0.5 on melee

The classification is by dominant capability, checked in that order:
ranged, then melee, then pure support. A body with none of the three
scores 0 (miners, haulers, tugs).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ArenaBot.body import count_parts
from ArenaBot.config import CombatConfig
from ArenaBot.constants import BodyPart


@dataclass(frozen=True)
class StrengthComparison:
    my_strength: float
    enemy_strength: float
    my_count: int
    enemy_count: int

    @property
    def advantage(self) -> float:
        return self.my_strength - self.enemy_strength

    @property
    def ratio(self) -> float:
        """Own / enemy. Infinite when the enemy fields nothing that fights."""
        if self.enemy_strength > 0:
            return self.my_strength / self.enemy_strength
        return math.inf

    @property
    def assessment(self) -> str:
        if self.advantage > 0:
            return "favorable"
        if self.advantage < 0:
            return "unfavorable"
        return "even"


def creep_strength(creep: Any, config: CombatConfig) -> float:
    body = getattr(creep, "body", None)
    if not body:
        return 0.0

    attack = count_parts(body, BodyPart.ATTACK)
    ranged = count_parts(body, BodyPart.RANGED_ATTACK)
    heal = count_parts(body, BodyPart.HEAL)

    if ranged > 0:
        strength = ranged * config.ranged_attack_power * config.ranged_advantage
        if heal > 0:
            strength += heal * config.heal_power * config.ranged_heal_multiplier
        return float(strength)
    if attack > 0:
        strength = attack * config.attack_power
        if heal > 0:
            strength += heal * config.heal_power * config.melee_heal_multiplier
        return float(strength)
    if heal > 0:
        return float(heal * config.heal_power * config.support_heal_multiplier)
    return 0.0


def team_strength(creeps: Iterable[Any], config: CombatConfig) -> float:
    return sum(creep_strength(c, config) for c in creeps)


def compare_team_strengths(
    my_creeps: list,
    enemy_creeps: list,
    config: CombatConfig,
) -> StrengthComparison:
    return StrengthComparison(
        my_strength=team_strength(my_creeps, config),
        enemy_strength=team_strength(enemy_creeps, config),
        my_count=len(my_creeps),
        enemy_count=len(enemy_creeps),
    )


def creep_breakdown(creep: Any, config: CombatConfig) -> Optional[dict]:
    """Per-creep capability summary for the log."""
    body = getattr(creep, "body", None)
    if body is None:
        return None

    attack = count_parts(body, BodyPart.ATTACK)
    ranged = count_parts(body, BodyPart.RANGED_ATTACK)
    heal = count_parts(body, BodyPart.HEAL)
    if ranged > 0:
        role = "ranged"
    elif attack > 0:
        role = "melee"
    else:
        role = "support"

    return {
        "id": creep.id,
        "attack": attack,
        "ranged_attack": ranged,
        "heal": heal,
        "strength": creep_strength(creep, config),
        "role": role,
    }
