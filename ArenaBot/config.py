"""
Bot configuration tables.

All tunable behaviour lives here as frozen dataclasses. One ``BotConfig``
is built at startup and handed by reference to every component. Nothing
reads a module-level setting at decision time, so a test (or a tuning run)
can swap in its own table without monkeypatching.

    config = BotConfig(
        build=BuildConfig(strength_threshold=1.0),
        combat=CombatConfig(support_heal_multiplier=0.25),
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ArenaBot.constants import JobKind


# ── Build order ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class BuildOrderEntry:
    """One slot in a build list: which job, at which tier."""
    job: JobKind
    tier: int = 1


@dataclass(frozen=True)
class BuildConfig:
    """
    Spawn decision tuning.

    strength_threshold:
        own/enemy strength ratio at or above which the economy list is
        followed. At 80% of the enemy we can afford to invest; below it
        the army comes first.
    archers_per_cleric:
        Military composition. One healer for every three ranged attackers.
    initial_build:
        Fixed opening, always executed first regardless of any other state.
    economy_build:
        Followed in order while strong enough. Miners cannot walk, so each
        one is paired with a tug to tow it to its corner source.
    fallback_job:
        Built indefinitely once the economy list is satisfied.
    """
    strength_threshold: float = 0.8
    archers_per_cleric: int = 3
    initial_build: Tuple[BuildOrderEntry, ...] = (
        BuildOrderEntry(JobKind.CLERIC),
        BuildOrderEntry(JobKind.HAULER),
    )
    economy_build: Tuple[BuildOrderEntry, ...] = (
        BuildOrderEntry(JobKind.MINER),
        BuildOrderEntry(JobKind.TUG),
        BuildOrderEntry(JobKind.MINER),
        BuildOrderEntry(JobKind.TUG),
    )
    fallback_job: BuildOrderEntry = BuildOrderEntry(JobKind.HAULER)
    fortified_miner_response: BuildOrderEntry = BuildOrderEntry(JobKind.FIGHTER)


# ── Combat ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CombatConfig:
    """
    Strength estimation and engagement tuning.

    Multipliers are empirical:
      ranged_advantage         one ranged unit kites up to three melee units
      ranged_heal_multiplier   ranged + heal is worth about two ranged units
      melee_heal_multiplier    two melee units beat one melee + heal
      support_heal_multiplier  healing-only units; observed values range
                               from 1.0 down to 0.25, so it stays tunable
    """
    attack_power: int = 30
    ranged_attack_power: int = 10
    heal_power: int = 12

    ranged_advantage: float = 3
    ranged_heal_multiplier: float = 2.0
    melee_heal_multiplier: float = 0.5
    support_heal_multiplier: float = 1.0

    # Below this own/enemy ratio, combat units fall back to own ramparts.
    defensive_threshold: float = 0.7

    # Melee units only chase enemies this close (Chebyshev).
    engagement_radius: int = 5

    # Ranged units kite anything closer than this.
    desired_range: int = 3

    # Ranged units only fight enemies this close; beyond it they patrol or
    # pull back home like melee units do.
    ranged_engagement_radius: int = 10


# ── Map ───────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class MapTopology:
    """
    Arena layout. Maps are square with sources in the corners and a
    central band; corner sources belong to miners, central ones to haulers.
    """
    arena_size: int = 100
    corner_top_threshold: int = 30
    corner_bottom_threshold: int = 70
    extensions_per_miner: int = 5
    fortified_miner_radius: int = 2

    @property
    def center(self) -> int:
        return self.arena_size // 2

    def is_corner_row(self, y: float) -> bool:
        return y < self.corner_top_threshold or y > self.corner_bottom_threshold


# ── Economy ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class EconomyConfig:
    carry_capacity_per_part: int = 50
    harvest_per_work_part: int = 2
    build_per_work_part: int = 5
    # Stage-2 miners top up extensions once they carry this much.
    miner_top_up_cap: int = 100


# ── Aggregate ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class BotConfig:
    build: BuildConfig = field(default_factory=BuildConfig)
    combat: CombatConfig = field(default_factory=CombatConfig)
    topology: MapTopology = field(default_factory=MapTopology)
    economy: EconomyConfig = field(default_factory=EconomyConfig)

    # How often (in ticks) the host loop dumps the strength comparison.
    strength_log_interval: int = 50
