"""
ArenaBot.controllers - spawning and the live unit roster.

Public API
----------
    from ArenaBot.controllers import (
        BuildOrder,
        BuildQueue,
        BuildStrategy,
        EnergyManager,
        UnitRegistry,
    )
"""

from ArenaBot.controllers.build_order import BuildOrder, EnergyManager
from ArenaBot.controllers.build_queue import BuildQueue, PendingSpawn
from ArenaBot.controllers.build_strategy import BuildChoice, BuildStrategy
from ArenaBot.controllers.unit_registry import UnitRegistry

__all__ = [
    "BuildChoice",
    "BuildOrder",
    "BuildQueue",
    "BuildStrategy",
    "EnergyManager",
    "PendingSpawn",
    "UnitRegistry",
]
