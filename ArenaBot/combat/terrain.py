"""
TerrainAnalyzer - tile predicates over the cached snapshot.

All lookups are O(1): terrain from the numpy grid, creeps and obstacle
structures from the position sets the cache builds on refresh.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

from sc2.position import Point2

from ArenaBot.combat.ranges import as_point
from ArenaBot.constants import DIRECTION_OFFSETS, Terrain

if TYPE_CHECKING:
    from ArenaBot.world_state import WorldStateCache


class TerrainAnalyzer:

    def __init__(self, world: "WorldStateCache") -> None:
        self.world = world

    def is_valid_position(self, pos: Point2) -> bool:
        """Inside the arena: 0 <= x, y < size."""
        size = self.world.config.topology.arena_size
        return 0 <= pos.x < size and 0 <= pos.y < size

    def is_wall(self, pos: Point2) -> bool:
        return self.world.terrain_at(pos) == Terrain.WALL

    def is_swamp(self, pos: Point2) -> bool:
        return self.world.terrain_at(pos) == Terrain.SWAMP

    def has_creep(self, pos: Point2) -> bool:
        return self.world.is_occupied(pos)

    def has_obstacle(self, pos: Point2) -> bool:
        """Wall structure or enemy rampart on the tile."""
        return pos in self.world.obstacles

    def has_slowdown(self, pos: Point2) -> bool:
        return pos in self.world.slowdown_tiles

    def is_slow(self, pos: Point2) -> bool:
        return self.is_swamp(pos) or self.has_slowdown(pos)

    def is_buildable(self, pos: Point2) -> bool:
        return self.is_valid_position(pos) and not self.is_wall(pos)

    def valid_adjacent_positions(self, unit: Any) -> List[Point2]:
        """The walkable, free 8-neighbours of a unit, clockwise from top."""
        origin = as_point(unit)
        valid = []
        for offset in DIRECTION_OFFSETS.values():
            pos = origin.offset(offset)
            if not self.is_valid_position(pos):
                continue
            if self.is_wall(pos):
                continue
            if self.has_creep(pos):
                continue
            if self.has_obstacle(pos):
                continue
            valid.append(pos)
        return valid
