"""
Corner source assignment for miners.

Two corner sources per team are reserved for miners, one in the top band
and one in the bottom band, each the one nearest our own side of the map.
Each miner claims the lowest slot whose source no other live miner holds,
so a replacement miner takes over the corner a dead one left behind:

    slot 0  -> top corner source     (y < corner_top_threshold)
    slot 1  -> bottom corner source  (y > corner_bottom_threshold)
    neither free -> nothing
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, List, Optional, Tuple

from sc2.position import Point2

from ArenaBot.combat.ranges import as_point
from ArenaBot.combat.terrain import TerrainAnalyzer
from ArenaBot.constants import DIRECTION_OFFSETS, Direction

if TYPE_CHECKING:
    from ArenaBot.world_state import WorldStateCache

CARDINALS = (Direction.TOP, Direction.RIGHT, Direction.BOTTOM, Direction.LEFT)
CORNER_SLOTS = (0, 1)


def team_side(world: "WorldStateCache") -> str:
    """'left' or 'right', from where our spawn sits. No spawn reads as left."""
    if world.my_spawn is None:
        return "left"
    return "left" if as_point(world.my_spawn).x < world.config.topology.center else "right"


def assign_source(index: int, world: "WorldStateCache") -> Optional[Any]:
    sources = sorted(world.sources, key=lambda s: as_point(s).y)
    if len(sources) < 2:
        return None

    topology = world.config.topology
    if index == 0:
        band: List[Any] = [s for s in sources if as_point(s).y < topology.corner_top_threshold]
    elif index == 1:
        band = [s for s in sources if as_point(s).y > topology.corner_bottom_threshold]
    else:
        return None
    if not band:
        return None

    if team_side(world) == "left":
        return min(band, key=lambda s: as_point(s).x)
    return max(band, key=lambda s: as_point(s).x)


def claim_corner_source(world: "WorldStateCache", held: Iterable[Any]) -> Tuple[Optional[int], Optional[Any]]:
    """Lowest free corner slot and its source, or (None, None) when both are held."""
    held = set(held)
    for slot in CORNER_SLOTS:
        source = assign_source(slot, world)
        if source is not None and source.id not in held:
            return slot, source
    return None, None


def find_mining_position(source: Any, world: "WorldStateCache") -> Optional[Point2]:
    """
    The tile next to the source the miner should stand on: a cardinal
    neighbour facing the map centre and our side, falling back to any
    cardinal neighbour that is on the map and not a wall.
    """
    terrain = TerrainAnalyzer(world)
    origin = as_point(source)
    horizontal = Direction.RIGHT if team_side(world) == "left" else Direction.LEFT
    vertical = Direction.BOTTOM if origin.y < world.config.topology.center else Direction.TOP

    for direction in (horizontal, vertical) + CARDINALS:
        pos = origin.offset(DIRECTION_OFFSETS[direction])
        if terrain.is_buildable(pos):
            return pos
    return None
