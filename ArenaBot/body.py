"""
Body composition helpers.

A body is an ordered list of ``BodyPart`` for spawning, or a list of
``BodyPartState`` (part + hits) on a live creep. Every helper here accepts
either form so strength and capacity maths run the same on a planned body
and on a creep in the field.
"""

from __future__ import annotations

from typing import Iterable, Union

from ArenaBot.constants import BODY_PART_COSTS, BodyPart
from ArenaBot.logger import get_logger

log = get_logger()

PartLike = Union[BodyPart, str, object]


def part_type(part: PartLike) -> object:
    """Return the part kind whether given a bare part or a live part state."""
    return getattr(part, "type", part)


def part_cost(part: PartLike) -> int:
    kind = part_type(part)
    try:
        return BODY_PART_COSTS[BodyPart(kind)]
    except (ValueError, KeyError):
        log.warning("Unknown body part %r costs 0", kind)
        return 0


def body_cost(body: Iterable[PartLike]) -> int:
    """Energy cost of a body. Always derived from the parts, never stored."""
    return sum(part_cost(p) for p in body)


def count_parts(body: Iterable[PartLike], part: BodyPart) -> int:
    return sum(1 for p in body if part_type(p) == part)


def has_part(body: Iterable[PartLike], part: BodyPart) -> bool:
    return any(part_type(p) == part for p in body)
