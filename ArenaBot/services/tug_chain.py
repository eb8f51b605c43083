"""
Tug chain - towing immobile creeps with pull().

A miner is spawned without MOVE parts, so it cannot walk to its corner
source by itself. Tugs (MOVE-only creeps) form a chain behind it:

    index 0       the creep being helped
    index 1..n    helpers, each adjacent to the one before when it joined

Chain lifecycle
---------------
  EMPTY    → a miner that still needs to travel claims it (index 0)
  FORMING  → tugs walk to the last member and join once adjacent
  MOVING   → the helped creep drives move_chain() every tick until it
             stands on its target; then the chain is cleared

Only one creep may own the chain at a time. Other miners wait until it is
empty again.

The pull linkage does not persist in the host: every link must be
re-issued every tick the chain is active, so move_chain() is idempotent
and meant to be called from the helped creep's act() each tick.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional

from sc2.position import Point2

from ArenaBot.combat.ranges import as_point, get_range, same_tile
from ArenaBot.constants import ADJACENT_RANGE, Direction, DIRECTION_OFFSETS
from ArenaBot.logger import get_logger

if TYPE_CHECKING:
    from ArenaBot.world_state import WorldStateCache

log = get_logger()


class TugChain:
    """Ordered creep ids. Mutated only through the methods below."""

    def __init__(self) -> None:
        self._members: List[str] = []

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._members))

    def __contains__(self, unit_id: object) -> bool:
        return unit_id in self._members

    def __repr__(self) -> str:
        return f"TugChain({self._members})"

    @property
    def members(self) -> List[str]:
        return list(self._members)

    @property
    def head(self) -> Optional[str]:
        return self._members[0] if self._members else None

    @property
    def last(self) -> Optional[str]:
        return self._members[-1] if self._members else None

    def is_empty(self) -> bool:
        return not self._members

    def is_helped(self, unit_id: str) -> bool:
        return self.head == unit_id

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def claim(self, unit_id: str) -> bool:
        """Become the helped creep. Only succeeds on an empty chain."""
        if self._members:
            return self._members[0] == unit_id
        self._members.append(unit_id)
        return True

    def join(self, unit_id: str, position: Point2, last_position: Point2) -> bool:
        """
        Append a helper. Refused unless it stands within one tile of the
        current last member, or if it is already in the chain.
        """
        if not self._members or unit_id in self._members:
            return False
        if get_range(position, last_position) > ADJACENT_RANGE:
            return False
        self._members.append(unit_id)
        return True

    def clear(self) -> None:
        self._members.clear()

    def prune(self, alive_ids: Iterable[str]) -> None:
        """
        Drop dead links. A dead head ends the chain outright. A dead helper
        cuts the chain there, since everyone behind it is no longer
        adjacent to a live predecessor; they re-join on their own.
        """
        if not self._members:
            return
        alive = set(alive_ids)
        if self._members[0] not in alive:
            log.debug("Tug chain head %s gone, clearing %s", self._members[0], self._members)
            self._members.clear()
            return
        for index, unit_id in enumerate(self._members):
            if unit_id not in alive:
                log.debug("Tug chain cut at %s (index %d)", unit_id, index)
                del self._members[index:]
                return


class TugChainCoordinator:
    """Drives one tick of chain movement."""

    @staticmethod
    def move_chain(chain: TugChain, target, world: "WorldStateCache") -> bool:
        """
        Move the whole chain one tick toward ``target``.

        Returns False when the chain is empty or any member cannot be
        found this tick; nothing is issued in that case.
        """
        if chain.is_empty():
            return False

        creeps = [world.get_my_creep(unit_id) for unit_id in chain]
        if any(c is None or not c.exists for c in creeps):
            return False

        target_pos = as_point(target)
        head = creeps[0]
        arrived = same_tile(head, target_pos)
        if arrived:
            # Step off by one so the head finishes on its real tile.
            head.move_to(target_pos.offset(DIRECTION_OFFSETS[Direction.TOP]))
        else:
            head.move_to(target_pos)

        for index in range(1, len(creeps)):
            creeps[index].pull(creeps[index - 1])
            creeps[index].move_to(creeps[index - 1])

        if arrived:
            log.game_event(
                "CHAIN",
                f"{head.id} arrived at {target_pos}, releasing {len(creeps) - 1} tug(s)",
                tick=world.tick,
            )
            chain.clear()
        return True
