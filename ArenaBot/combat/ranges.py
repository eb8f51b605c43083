"""
Range and adjacency predicates.

Range on the arena grid is Chebyshev: a diagonal step costs the same as a
straight one, so "range 1" is the full 8-neighbourhood.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, TypeVar

from sc2.position import Point2

from ArenaBot.constants import ADJACENT_RANGE, HEAL_RANGE, RANGED_HEAL_RANGE

T = TypeVar("T")


def as_point(obj: Any) -> Point2:
    """Accept a Point2 or anything with a ``position``."""
    pos = getattr(obj, "position", obj)
    return pos if isinstance(pos, Point2) else Point2(pos)


def get_range(a: Any, b: Any) -> int:
    pa, pb = as_point(a), as_point(b)
    return int(max(abs(pa.x - pb.x), abs(pa.y - pb.y)))


def squared_distance(a: Any, b: Any) -> float:
    pa, pb = as_point(a), as_point(b)
    return (pa.x - pb.x) ** 2 + (pa.y - pb.y) ** 2


def is_adjacent(a: Any, b: Any) -> bool:
    return get_range(a, b) <= ADJACENT_RANGE


def is_in_heal_range(a: Any, b: Any) -> bool:
    return get_range(a, b) <= HEAL_RANGE


def is_in_ranged_heal_range(a: Any, b: Any) -> bool:
    return get_range(a, b) <= RANGED_HEAL_RANGE


def same_tile(a: Any, b: Any) -> bool:
    pa, pb = as_point(a), as_point(b)
    return pa.x == pb.x and pa.y == pb.y


def closest_by_range(origin: Any, candidates: Iterable[T]) -> Optional[T]:
    """Nearest candidate by Chebyshev range; the first one wins a tie."""
    best: Optional[T] = None
    best_range = None
    for candidate in candidates:
        r = get_range(origin, candidate)
        if best_range is None or r < best_range:
            best, best_range = candidate, r
    return best


def in_range(origin: Any, candidates: Iterable[T], max_range: int) -> list[T]:
    return [c for c in candidates if get_range(origin, c) <= max_range]
