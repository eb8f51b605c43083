"""
WorldStateCache - one consistent snapshot of the arena per tick.

Every component reads the world through this cache instead of querying the
arena directly. refresh() is called exactly once at the top of each tick
and does every entity query in one pass; after that all reads are plain
attribute lookups and every consumer sees the same values for the rest of
the tick.

What lives here
---------------
  Snapshot (rebuilt each refresh)
    tick, spawns, creeps (own / enemy / all), ramparts (own / enemy),
    own extensions, sources, own construction sites, walls, area effects,
    occupied tiles, obstacle tiles, fortified-miner alert.

  Static (built on the first refresh)
    terrain grid, numpy int8 indexed [y, x].

  Sticky (survives refreshes, one writer each)
    has_built_miner              set by UnitRegistry via mark_miner_built()
    win_objective_transfer_done  set by the first miner via
                                 mark_win_objective_transfer_done()
    tug_chain                    mutated by Miner / Tug jobs, pruned here

Missing entities are never an error: absent kinds give empty lists and a
missing spawn is None.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Set

import numpy as np
from sc2.position import Point2

from ArenaBot.arena import EntityKind
from ArenaBot.body import has_part
from ArenaBot.combat.ranges import as_point, get_range
from ArenaBot.combat.strength import StrengthComparison, compare_team_strengths
from ArenaBot.config import BotConfig, MapTopology
from ArenaBot.constants import EFFECT_SLOWDOWN, BodyPart, Terrain
from ArenaBot.logger import get_logger
from ArenaBot.services.tug_chain import TugChain

if TYPE_CHECKING:
    from ArenaBot.arena import Arena

log = get_logger()


# ---------------------------------------------------------------------------
# Fortified miner alert
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FortifiedMiner:
    """An enemy harvester dug in on its own rampart next to a corner source."""
    creep: Any
    rampart: Any
    source: Any


def detect_fortified_miner(
    enemy_creeps: List[Any],
    enemy_ramparts: List[Any],
    sources: List[Any],
    topology: MapTopology,
) -> Optional[FortifiedMiner]:
    """
    First enemy creep with WORK parts that stands on an enemy rampart within
    ``fortified_miner_radius`` of a corner source, or None.

    Only the first match is returned; the alert has a single consumer.
    """
    corner_sources = [s for s in sources if topology.is_corner_row(as_point(s).y)]
    if not corner_sources or not enemy_ramparts:
        return None

    rampart_at = {as_point(r): r for r in enemy_ramparts}

    for creep in enemy_creeps:
        if not has_part(creep.body, BodyPart.WORK):
            continue
        rampart = rampart_at.get(as_point(creep))
        if rampart is None:
            continue
        for source in corner_sources:
            if get_range(creep, source) <= topology.fortified_miner_radius:
                return FortifiedMiner(creep=creep, rampart=rampart, source=source)
    return None


# ---------------------------------------------------------------------------
# WorldStateCache
# ---------------------------------------------------------------------------

class WorldStateCache:

    def __init__(self, arena: "Arena", config: Optional[BotConfig] = None) -> None:
        self.arena = arena
        self.config = config or BotConfig()

        self.tick: int = 0

        self.my_spawn: Optional[Any] = None
        self.enemy_spawn: Optional[Any] = None

        self.all_creeps: List[Any] = []
        self.my_creeps: List[Any] = []
        self.enemy_creeps: List[Any] = []

        self.ramparts: List[Any] = []
        self.my_ramparts: List[Any] = []
        self.enemy_ramparts: List[Any] = []
        self.my_extensions: List[Any] = []
        self.sources: List[Any] = []
        self.my_construction_sites: List[Any] = []
        self.walls: List[Any] = []
        self.area_effects: List[Any] = []

        self.occupied: Set[Point2] = set()
        self.obstacles: Set[Point2] = set()
        self.slowdown_tiles: Set[Point2] = set()

        self.fortified_miner: Optional[FortifiedMiner] = None

        self.has_built_miner: bool = False
        self.win_objective_transfer_done: bool = False
        self.tug_chain = TugChain()

        self._terrain: Optional[np.ndarray] = None
        self._my_creeps_by_id: Dict[str, Any] = {}
        self._strength: Optional[StrengthComparison] = None

    # ------------------------------------------------------------------
    # Refresh
    # ------------------------------------------------------------------

    def refresh(self) -> None:
        """Query the arena once. Call exactly once per tick, before anything else."""
        arena = self.arena
        self.tick = arena.get_ticks()

        if self._terrain is None:
            self._terrain = self._build_terrain_grid()

        self.all_creeps = [c for c in arena.get_objects_by_kind(EntityKind.CREEP) if c.exists]
        self.my_creeps = [c for c in self.all_creeps if c.my]
        self.enemy_creeps = [c for c in self.all_creeps if not c.my]
        self._my_creeps_by_id = {c.id: c for c in self.my_creeps}

        spawns = arena.get_objects_by_kind(EntityKind.SPAWN)
        self.my_spawn = next((s for s in spawns if s.my), None)
        self.enemy_spawn = next((s for s in spawns if not s.my), None)

        self.ramparts = list(arena.get_objects_by_kind(EntityKind.RAMPART))
        self.my_ramparts = [r for r in self.ramparts if r.my]
        self.enemy_ramparts = [r for r in self.ramparts if not r.my]

        self.my_extensions = [e for e in arena.get_objects_by_kind(EntityKind.EXTENSION) if e.my]
        self.sources = list(arena.get_objects_by_kind(EntityKind.SOURCE))
        self.my_construction_sites = [
            s for s in arena.get_objects_by_kind(EntityKind.CONSTRUCTION_SITE) if s.my
        ]
        self.walls = list(arena.get_objects_by_kind(EntityKind.WALL))
        self.area_effects = list(arena.get_objects_by_kind(EntityKind.AREA_EFFECT))

        self.occupied = {as_point(c) for c in self.all_creeps}
        self.obstacles = {as_point(w) for w in self.walls}
        self.obstacles.update(as_point(r) for r in self.enemy_ramparts)
        self.slowdown_tiles = {
            as_point(e) for e in self.area_effects if e.effect == EFFECT_SLOWDOWN
        }

        self._strength = None

        previous_alert = self.fortified_miner
        self.fortified_miner = detect_fortified_miner(
            self.enemy_creeps, self.enemy_ramparts, self.sources, self.config.topology,
        )
        if self.fortified_miner is not None and previous_alert is None:
            log.game_event(
                "ALERT",
                f"fortified miner {self.fortified_miner.creep.id} at "
                f"{as_point(self.fortified_miner.creep)}",
                tick=self.tick,
            )

        self.tug_chain.prune(self._my_creeps_by_id)

    def _build_terrain_grid(self) -> np.ndarray:
        size = self.config.topology.arena_size
        grid = np.zeros((size, size), dtype=np.int8)
        for y in range(size):
            for x in range(size):
                grid[y, x] = self.arena.get_terrain_at(Point2((x, y)))
        return grid

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_my_creep(self, unit_id: str) -> Optional[Any]:
        return self._my_creeps_by_id.get(unit_id)

    def is_occupied(self, position: Point2) -> bool:
        return as_point(position) in self.occupied

    def terrain_at(self, position: Point2) -> Terrain:
        """Terrain code at a tile. Off-map tiles read as walls."""
        pos = as_point(position)
        x, y = int(pos.x), int(pos.y)
        size = self.config.topology.arena_size
        if self._terrain is None or not (0 <= x < size and 0 <= y < size):
            return Terrain.WALL
        return Terrain(int(self._terrain[y, x]))

    def team_strengths(self) -> StrengthComparison:
        """Own vs enemy strength, computed at most once per refresh."""
        if self._strength is None:
            self._strength = compare_team_strengths(
                self.my_creeps, self.enemy_creeps, self.config.combat,
            )
        return self._strength

    # ------------------------------------------------------------------
    # Sticky flags
    # ------------------------------------------------------------------

    def mark_miner_built(self) -> None:
        if not self.has_built_miner:
            log.game_event("ECONOMY", "first miner fielded, haulers now feed the win objective", tick=self.tick)
        self.has_built_miner = True

    def mark_win_objective_transfer_done(self) -> None:
        self.win_objective_transfer_done = True
