"""
KitingBehavior - one-step retreat for ranged units.

Greedy and re-evaluated every tick: a poor step this tick is corrected by
the next one, so there is no path search here.

Tile choice among valid neighbours
----------------------------------
  1. maximise the Chebyshev distance to the closest threat
  2. tie: prefer tiles that are neither swamp nor under a slowdown effect
  3. tie: maximise squared Euclidean distance to the nearest threat
  4. tie: first in clockwise order from top
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from sc2.position import Point2

from ArenaBot.combat.ranges import closest_by_range, get_range, squared_distance
from ArenaBot.combat.terrain import TerrainAnalyzer

if TYPE_CHECKING:
    from ArenaBot.world_state import WorldStateCache


class KitingBehavior:

    def __init__(self, world: "WorldStateCache", terrain: Optional[TerrainAnalyzer] = None) -> None:
        self.world = world
        self.terrain = terrain or TerrainAnalyzer(world)

    @staticmethod
    def find_nearest_enemy(position: Point2, enemies: Sequence[Any]) -> Optional[Any]:
        return closest_by_range(position, enemies)

    def find_best_retreat_position(self, unit: Any, threats: Sequence[Any]) -> Optional[Point2]:
        if not threats:
            return None

        candidates = self.terrain.valid_adjacent_positions(unit)
        if not candidates:
            return None

        scored = [(pos, min(get_range(pos, t) for t in threats)) for pos in candidates]
        best_distance = max(d for _, d in scored)
        best: List[Point2] = [pos for pos, d in scored if d == best_distance]
        if len(best) == 1:
            return best[0]

        fast = [pos for pos in best if not self.terrain.is_slow(pos)]
        if fast:
            best = fast
        if len(best) == 1:
            return best[0]

        furthest = best[0]
        furthest_sq = squared_distance(furthest, self.find_nearest_enemy(furthest, threats))
        for pos in best[1:]:
            sq = squared_distance(pos, self.find_nearest_enemy(pos, threats))
            if sq > furthest_sq:
                furthest, furthest_sq = pos, sq
        return furthest
