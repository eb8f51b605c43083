"""
Combat helpers shared by every job that can find itself in a fight.

  filter_enemies_by_rampart_status   split targets by whether they are dug in
  handle_defensive_retreat           fall back to own ramparts when outmatched
  idle_in_field                      centre patrol / pull back when overextended
  siege_enemy_spawn                  last resort once the enemy has no creeps
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Sequence, Tuple

from sc2.position import Point2

from ArenaBot.combat.ranges import as_point, closest_by_range, get_range, in_range, same_tile
from ArenaBot.constants import DIRECTION_OFFSETS, RANGED_ATTACK_RANGE, ErrorCode

if TYPE_CHECKING:
    from ArenaBot.world_state import WorldStateCache


# ---------------------------------------------------------------------------
# Targeting
# ---------------------------------------------------------------------------

@dataclass
class RampartSplit:
    exposed: List[Any]
    on_ramparts: List[Any]


def filter_enemies_by_rampart_status(enemies: Sequence[Any], ramparts: Sequence[Any]) -> RampartSplit:
    rampart_tiles = {as_point(r) for r in ramparts}
    split = RampartSplit(exposed=[], on_ramparts=[])
    for enemy in enemies:
        if as_point(enemy) in rampart_tiles:
            split.on_ramparts.append(enemy)
        else:
            split.exposed.append(enemy)
    return split


# ---------------------------------------------------------------------------
# Defensive posture
# ---------------------------------------------------------------------------

def handle_defensive_retreat(
    creep: Any,
    world: "WorldStateCache",
    strike: Optional[Callable[[Any], Any]] = None,
    strike_range: int = 1,
) -> bool:
    """
    If the strength ratio is under the defensive threshold and we own any
    rampart, walk to the nearest free one (or hold the one we are on).

    ``strike`` is the creep's attack primitive; it is fired at the nearest
    enemy within ``strike_range`` whatever the movement does. Haulers pass
    None and just take cover.

    Returns True when the creep is in defensive posture this tick and the
    caller should skip its normal behaviour.
    """
    if not world.my_ramparts:
        return False
    if world.team_strengths().ratio >= world.config.combat.defensive_threshold:
        return False

    here = as_point(creep)
    standing_on = next((r for r in world.my_ramparts if same_tile(r, here)), None)
    if standing_on is None:
        free = [r for r in world.my_ramparts if not world.is_occupied(as_point(r))]
        shelter = closest_by_range(creep, free) or closest_by_range(creep, world.my_ramparts)
        creep.move_to(shelter)

    if strike is not None:
        target = closest_by_range(creep, in_range(creep, world.enemy_creeps, strike_range))
        if target is not None:
            strike(target)
    return True


# ---------------------------------------------------------------------------
# Idle movement
# ---------------------------------------------------------------------------

def patrol_waypoints(world: "WorldStateCache") -> Tuple[Point2, Point2]:
    topology = world.config.topology
    return (
        Point2((topology.center, topology.corner_top_threshold)),
        Point2((topology.center, topology.corner_bottom_threshold)),
    )


def is_overextended(creep: Any, world: "WorldStateCache") -> bool:
    """True when the creep stands in the enemy's outer third of the map."""
    if world.my_spawn is None:
        return False
    size = world.config.topology.arena_size
    x = as_point(creep).x
    if as_point(world.my_spawn).x < world.config.topology.center:
        return x >= size * 2 / 3
    return x < size / 3


def patrol_center(creep: Any, world: "WorldStateCache", memory: Any) -> Point2:
    """Walk between the two centre-band waypoints, flipping on arrival."""
    waypoints = patrol_waypoints(world)
    waypoint = waypoints[memory.patrol_index % len(waypoints)]
    if get_range(creep, waypoint) <= 1:
        memory.patrol_index = (memory.patrol_index + 1) % len(waypoints)
        waypoint = waypoints[memory.patrol_index]
    creep.move_to(waypoint)
    return waypoint


def idle_in_field(creep: Any, world: "WorldStateCache", memory: Any) -> Optional[str]:
    """
    Shared idle rule while enemy creeps exist somewhere on the map: pull
    back to our spawn when overextended, otherwise patrol the centre band.

    Returns a short decision label, or None when the enemy has no creeps at
    all and the caller should go for the spawn instead.
    """
    if not world.enemy_creeps:
        return None
    if is_overextended(creep, world) and world.my_spawn is not None:
        creep.move_to(world.my_spawn)
        return "overextended, returning home"
    waypoint = patrol_center(creep, world, memory)
    return f"patrol -> {waypoint}"


# ---------------------------------------------------------------------------
# Siege
# ---------------------------------------------------------------------------

def edge_ramparts(ramparts: Sequence[Any]) -> List[Any]:
    """Ramparts with at least one neighbouring tile not covered by a rampart."""
    tiles = {as_point(r) for r in ramparts}
    return [
        r for r in ramparts
        if any(as_point(r).offset(o) not in tiles for o in DIRECTION_OFFSETS.values())
    ]


def siege_enemy_spawn(creep: Any, world: "WorldStateCache", melee: bool = True) -> Optional[str]:
    """
    Go for the enemy spawn.

    Melee units hit the spawn directly, or the edge rampart nearest to it
    when the spawn cannot be reached, and otherwise walk to the spawn.
    Ranged units shoot the spawn once within range and walk to it before.
    """
    spawn = world.enemy_spawn
    if spawn is None:
        return None

    if not melee:
        if get_range(creep, spawn) <= RANGED_ATTACK_RANGE:
            creep.ranged_attack(spawn)
            return f"shoot spawn {spawn.id}"
        creep.move_to(spawn)
        return f"advance on spawn {spawn.id}"

    if creep.attack(spawn) != ErrorCode.NOT_IN_RANGE:
        return f"attack spawn {spawn.id}"

    edges = edge_ramparts(world.enemy_ramparts)
    if edges:
        rampart = closest_by_range(spawn, edges)
        if creep.attack(rampart) == ErrorCode.NOT_IN_RANGE:
            creep.move_to(rampart)
        return f"breach rampart {rampart.id}"

    creep.move_to(spawn)
    return f"advance on spawn {spawn.id}"
