"""
ExtensionBuilder - the extension ring a miner builds around itself.

A miner standing on its tile places up to ``extensions_per_miner``
construction sites in the surrounding 8 tiles (never on the source, never
on a wall), builds them with its own harvest, and then keeps them full.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from sc2.position import Point2

from ArenaBot.arena import EntityKind
from ArenaBot.combat.ranges import as_point, closest_by_range, is_adjacent, same_tile
from ArenaBot.combat.terrain import TerrainAnalyzer
from ArenaBot.constants import DIRECTION_OFFSETS, ErrorCode, ResourceType
from ArenaBot.logger import get_logger

if TYPE_CHECKING:
    from ArenaBot.world_state import WorldStateCache

log = get_logger()


class ExtensionBuilder:

    def __init__(self, world: "WorldStateCache") -> None:
        self.world = world
        self.terrain = TerrainAnalyzer(world)

    @property
    def limit(self) -> int:
        return self.world.config.topology.extensions_per_miner

    def extension_positions(self, creep: Any, source: Optional[Any]) -> List[Point2]:
        origin = as_point(creep)
        positions = []
        for offset in DIRECTION_OFFSETS.values():
            pos = origin.offset(offset)
            if not self.terrain.is_valid_position(pos):
                continue
            if source is not None and same_tile(pos, source):
                continue
            positions.append(pos)
        return positions

    def create_extension_sites(self, creep: Any, source: Optional[Any]) -> int:
        """Place the construction sites once. Returns how many were created."""
        created = 0
        for pos in self.extension_positions(creep, source):
            if created >= self.limit:
                break
            if self.terrain.is_wall(pos):
                continue
            result = self.world.arena.create_construction_site(pos, EntityKind.EXTENSION)
            if result.object is not None:
                created += 1
            else:
                log.debug("Extension site at %s refused: %s", pos, result.error, tick=self.world.tick)

        if created < self.limit:
            log.info("Miner %s could only place %d extension sites", creep.id, created, tick=self.world.tick)
        return created

    def build_nearby_construction_sites(self, creep: Any) -> bool:
        """Build the nearest adjacent own site. False when none is left."""
        nearby = [s for s in self.world.my_construction_sites if is_adjacent(creep, s)]
        target = closest_by_range(creep, nearby)
        if target is None:
            return False
        if creep.build(target) == ErrorCode.NOT_IN_RANGE:
            log.debug("Miner %s not in range of site %s", creep.id, target.id, tick=self.world.tick)
        return True

    def adjacent_extensions(self, creep: Any) -> List[Any]:
        return [e for e in self.world.my_extensions if is_adjacent(creep, e)]

    def are_extensions_complete(self, creep: Any, sites_created: int) -> bool:
        """
        Every site has turned into an extension: none left under
        construction around the miner, and at least as many extensions as
        sites were placed (and always at least one, since sites placed
        this tick are not in the snapshot yet).
        """
        if any(is_adjacent(creep, s) for s in self.world.my_construction_sites):
            return False
        required = max(1, min(sites_created, self.limit))
        return len(self.adjacent_extensions(creep)) >= required

    def fill_extensions(self, creep: Any, resource: ResourceType = ResourceType.ENERGY) -> bool:
        """Top up the least full adjacent extension that still has room."""
        least_full = None
        least_energy = None
        for ext in self.adjacent_extensions(creep):
            energy = ext.store.get_used_capacity(resource)
            if energy >= ext.store.get_capacity(resource):
                continue
            if least_energy is None or energy < least_energy:
                least_full, least_energy = ext, energy

        if least_full is None:
            return False
        if creep.transfer(least_full, resource) == ErrorCode.NOT_IN_RANGE:
            log.debug("Miner %s not in range of extension %s", creep.id, least_full.id, tick=self.world.tick)
        return True
