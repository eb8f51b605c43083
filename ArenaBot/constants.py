"""
Arena game-API constants.

Everything here mirrors a value defined by the host arena: body part
kinds and their energy cost, action result codes, terrain codes, spawn
direction codes and effect names. Tunable bot behaviour lives in
``ArenaBot.config`` instead; nothing in this file should ever need to be
changed to alter how the bot plays.
"""

from __future__ import annotations

from enum import Enum, IntEnum

from sc2.position import Point2


# ── Body parts ────────────────────────────────────────────────────────────────

class BodyPart(str, Enum):
    MOVE          = "move"
    WORK          = "work"
    CARRY         = "carry"
    ATTACK        = "attack"
    RANGED_ATTACK = "ranged_attack"
    HEAL          = "heal"
    TOUGH         = "tough"


BODY_PART_COSTS: dict[BodyPart, int] = {
    BodyPart.MOVE:          50,
    BodyPart.WORK:          100,
    BodyPart.CARRY:         50,
    BodyPart.ATTACK:        80,
    BodyPart.RANGED_ATTACK: 150,
    BodyPart.HEAL:          250,
    BodyPart.TOUGH:         10,
}


# ── Jobs ──────────────────────────────────────────────────────────────────────

class JobKind(str, Enum):
    """The closed set of jobs a unit can hold."""
    FIGHTER = "fighter"
    ARCHER  = "archer"
    HAULER  = "hauler"
    MINER   = "miner"
    CLERIC  = "cleric"
    TUG     = "tug"


# ── Action results ────────────────────────────────────────────────────────────

class ErrorCode(IntEnum):
    OK                  = 0
    NOT_OWNER           = -1
    NO_PATH             = -2
    BUSY                = -4
    NOT_FOUND           = -5
    NOT_ENOUGH_ENERGY   = -6
    INVALID_TARGET      = -7
    FULL                = -8
    NOT_IN_RANGE        = -9
    INVALID_ARGS        = -10
    TIRED               = -11
    NO_BODYPART         = -12


# ── Resources, terrain, effects ───────────────────────────────────────────────

class ResourceType(str, Enum):
    ENERGY = "energy"


class Terrain(IntEnum):
    PLAIN = 0
    WALL  = 1
    SWAMP = 2


EFFECT_SLOWDOWN: str = "slowdown"


# ── Directions ────────────────────────────────────────────────────────────────

class Direction(IntEnum):
    TOP          = 1
    TOP_RIGHT    = 2
    RIGHT        = 3
    BOTTOM_RIGHT = 4
    BOTTOM       = 5
    BOTTOM_LEFT  = 6
    LEFT         = 7
    TOP_LEFT     = 8


# Clockwise from TOP. Iteration order matters: every neighbour scan in the
# bot walks this table, so ties always resolve the same way.
DIRECTION_OFFSETS: dict[Direction, Point2] = {
    Direction.TOP:          Point2((0, -1)),
    Direction.TOP_RIGHT:    Point2((1, -1)),
    Direction.RIGHT:        Point2((1, 0)),
    Direction.BOTTOM_RIGHT: Point2((1, 1)),
    Direction.BOTTOM:       Point2((0, 1)),
    Direction.BOTTOM_LEFT:  Point2((-1, 1)),
    Direction.LEFT:         Point2((-1, 0)),
    Direction.TOP_LEFT:     Point2((-1, -1)),
}


# ── Ranges ────────────────────────────────────────────────────────────────────

ADJACENT_RANGE: int      = 1
HEAL_RANGE: int          = 1
RANGED_HEAL_RANGE: int   = 3
RANGED_ATTACK_RANGE: int = 3
