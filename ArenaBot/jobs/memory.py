"""
Typed per-unit memory.

Each job owns one memory record, created with the job and never shared.
The record type is picked by the job class (``Job.MEMORY_CLASS``), so a
miner can only ever hold miner state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional

from sc2.position import Point2

from ArenaBot.combat.ranges import as_point, same_tile


@dataclass
class JobMemory:
    """Jobs with nothing to remember (tugs) use this as is."""


# ---------------------------------------------------------------------------
# Miner
# ---------------------------------------------------------------------------

class MinerState(Enum):
    MOVING_TO_POSITION = auto()   # towed by the tug chain toward its tile
    MINING             = auto()   # on its tile, working through the stages


@dataclass
class MinerMemory(JobMemory):
    """
    Stage 1 builds extensions around the mining tile, stage 2 keeps them
    topped up. ``sites_created`` is how many construction sites the
    one-off placement actually managed to create.
    """
    initialized: bool = False
    index: Optional[int] = None
    source_id: Optional[str] = None
    target: Optional[Point2] = None
    state: MinerState = MinerState.MOVING_TO_POSITION
    stage: int = 1
    extensions_created: bool = False
    sites_created: int = 0

    def initialize(self, index: int, source: Any) -> None:
        self.index = index
        self.source_id = source.id
        self.target = None
        self.state = MinerState.MOVING_TO_POSITION
        self.stage = 1
        self.extensions_created = False
        self.sites_created = 0
        self.initialized = True

    @property
    def is_moving_to_position(self) -> bool:
        return self.state is MinerState.MOVING_TO_POSITION

    @property
    def is_mining(self) -> bool:
        return self.state is MinerState.MINING

    def set_target(self, position: Point2) -> None:
        self.target = as_point(position)

    def is_at_target(self, creep: Any) -> bool:
        return self.target is not None and same_tile(creep, self.target)

    def transition_to_mining(self) -> None:
        self.state = MinerState.MINING

    def transition_to_stage2(self) -> None:
        self.stage = 2

    def mark_extensions_created(self, count: int) -> None:
        self.extensions_created = True
        self.sites_created = count


# ---------------------------------------------------------------------------
# Hauler
# ---------------------------------------------------------------------------

class HaulerState(Enum):
    MINING  = auto()
    HAULING = auto()


@dataclass
class HaulerMemory(JobMemory):
    state: HaulerState = HaulerState.MINING


# ---------------------------------------------------------------------------
# Combat
# ---------------------------------------------------------------------------

@dataclass
class CombatMemory(JobMemory):
    # Which centre-band waypoint the unit is heading for while idle.
    patrol_index: int = 0
