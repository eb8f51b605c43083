"""
Arena - the narrow interface the bot consumes from the host simulation.

Nothing in here is implemented by the bot. The host arena owns the grid,
pathing, collision, spawning and the action primitives; these Protocols
just pin down the exact surface the decision code is allowed to touch, so
that everything else can be driven by an in-memory fake in tests.

Conventions
-----------
- Every position is an ``sc2.position.Point2`` on the integer grid.
- Range between two things is Chebyshev (max of |dx|, |dy|).
- Every action primitive returns an ``ErrorCode``. Refusals such as
  NOT_IN_RANGE are normal results, never exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Protocol, Sequence

from sc2.position import Point2

from ArenaBot.constants import BodyPart, Direction, ErrorCode, ResourceType


# ---------------------------------------------------------------------------
# Queryable kinds
# ---------------------------------------------------------------------------

class EntityKind(str, Enum):
    CREEP             = "creep"
    SPAWN             = "spawn"
    RAMPART           = "rampart"
    EXTENSION         = "extension"
    WALL              = "wall"
    SOURCE            = "source"
    CONSTRUCTION_SITE = "construction_site"
    AREA_EFFECT       = "area_effect"


# ---------------------------------------------------------------------------
# Plain value types handed back by the host
# ---------------------------------------------------------------------------

@dataclass
class BodyPartState:
    """One body part of a creep and its remaining hit points (0 = broken)."""
    type: BodyPart
    hits: int = 100


@dataclass
class ActionResult:
    """Returned by calls that may create an object (spawn, construction)."""
    object: Optional[Any] = None
    error: Optional[ErrorCode] = None


# ---------------------------------------------------------------------------
# Entity protocols
# ---------------------------------------------------------------------------

class Store(Protocol):
    def get_used_capacity(self, resource: Optional[ResourceType] = None) -> int: ...
    def get_free_capacity(self, resource: Optional[ResourceType] = None) -> int: ...
    def get_capacity(self, resource: Optional[ResourceType] = None) -> int: ...


class Positioned(Protocol):
    id: str
    position: Point2
    exists: bool


class Owned(Positioned, Protocol):
    my: Optional[bool]


class Creep(Owned, Protocol):
    body: List[BodyPartState]
    hits: int
    hits_max: int
    spawning: bool
    store: Store
    fatigue: int

    def move_to(self, target: Any) -> ErrorCode: ...
    def attack(self, target: Any) -> ErrorCode: ...
    def ranged_attack(self, target: Any) -> ErrorCode: ...
    def heal(self, target: Any) -> ErrorCode: ...
    def ranged_heal(self, target: Any) -> ErrorCode: ...
    def harvest(self, target: Any) -> ErrorCode: ...
    def build(self, target: Any) -> ErrorCode: ...
    def transfer(self, target: Any, resource: ResourceType, amount: Optional[int] = None) -> ErrorCode: ...
    def withdraw(self, target: Any, resource: ResourceType, amount: Optional[int] = None) -> ErrorCode: ...
    def pull(self, target: Any) -> ErrorCode: ...


class SpawningInfo(Protocol):
    creep: Optional[Creep]


class Spawn(Owned, Protocol):
    store: Store
    spawning: Optional[SpawningInfo]

    def spawn_creep(self, body: Sequence[BodyPart]) -> ActionResult: ...
    def set_directions(self, directions: Sequence[Direction]) -> ErrorCode: ...


class Rampart(Owned, Protocol):
    pass


class Extension(Owned, Protocol):
    store: Store


class Wall(Positioned, Protocol):
    pass


class Source(Positioned, Protocol):
    energy: int
    energy_capacity: int


class ConstructionSite(Owned, Protocol):
    progress: int
    progress_total: int
    structure: Optional[Any]


class AreaEffect(Positioned, Protocol):
    effect: str


# ---------------------------------------------------------------------------
# The arena itself
# ---------------------------------------------------------------------------

class Arena(Protocol):
    def get_objects_by_kind(self, kind: EntityKind) -> List[Any]: ...
    def get_terrain_at(self, position: Point2) -> int: ...
    def create_construction_site(self, position: Point2, kind: EntityKind) -> ActionResult: ...
    def get_ticks(self) -> int: ...
