"""Structure helpers that are not tied to a single job."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from ArenaBot.combat.ranges import is_adjacent
from ArenaBot.constants import ErrorCode, ResourceType
from ArenaBot.logger import get_logger

if TYPE_CHECKING:
    from ArenaBot.world_state import WorldStateCache

log = get_logger()


def perform_initial_win_objective_transfer(
    creep: Any,
    world: "WorldStateCache",
    win_objective: Optional[Any],
) -> bool:
    """
    One-off kick-start of the win objective, done by the first miner.

    Miners are spawned facing the win objective, so the first one stands
    next to both it and the spawn: it withdraws from the spawn when empty
    and then builds the win objective once. Returns True while the creep
    spent its tick on this.
    """
    if world.win_objective_transfer_done or win_objective is None:
        return False
    spawn = world.my_spawn
    if spawn is None:
        return False
    if not (is_adjacent(creep, spawn) and is_adjacent(creep, win_objective)):
        return False

    if creep.store.get_used_capacity(ResourceType.ENERGY) == 0:
        result = creep.withdraw(spawn, ResourceType.ENERGY)
        if result != ErrorCode.OK:
            log.debug("Initial withdraw by %s refused: %s", creep.id, result, tick=world.tick)
            return False
        return True

    result = creep.build(win_objective)
    if result != ErrorCode.OK:
        log.debug("Initial build by %s refused: %s", creep.id, result, tick=world.tick)
        return False

    world.mark_win_objective_transfer_done()
    log.game_event("ECONOMY", f"initial transfer to win objective by {creep.id}", tick=world.tick)
    return True
