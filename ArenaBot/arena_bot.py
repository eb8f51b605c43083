"""
ArenaBot - the per-tick decision loop.

The host harness owns the real game loop and calls us once per tick:

    bot = ArenaBot(arena)
    bot.on_start()          # first tick only
    bot.step()              # every tick

One tick, always in this order:
  1. refresh the world snapshot (exactly once)
  2. register whatever the spawner started last tick
  3. maybe start a new spawn
  4. let every live unit act once

Every strength_log_interval ticks the team strength comparison and a
per-creep capability breakdown go to the debug log.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from ArenaBot.combat.strength import creep_breakdown
from ArenaBot.config import BotConfig
from ArenaBot.controllers.build_order import BuildOrder
from ArenaBot.controllers.unit_registry import UnitRegistry
from ArenaBot.jobs.registry import JobRegistry
from ArenaBot.logger import get_logger
from ArenaBot.world_state import WorldStateCache

if TYPE_CHECKING:
    from ArenaBot.arena import Arena

log = get_logger()


class ArenaBot:

    def __init__(self, arena: "Arena", config: Optional[BotConfig] = None) -> None:
        log.info("=" * 50)
        log.info("ARENA BOT INITIALIZING")
        log.info("=" * 50)

        self.config = config or BotConfig()
        self.world = WorldStateCache(arena, self.config)
        self.jobs = JobRegistry.default()
        self.units = UnitRegistry(self.world, self.jobs)
        self.build_order = BuildOrder(self.world, self.units, self.jobs, self.config.build)

        self.win_objective: Optional[Any] = None
        self.started = False

    def on_start(self) -> None:
        """Take the first snapshot and find the win objective."""
        self.world.refresh()
        self.win_objective = next(iter(self.world.my_construction_sites), None)
        self.build_order.win_objective = self.win_objective
        self.started = True

        if self.win_objective is None:
            log.warning("No win objective found; haulers will feed the spawn", tick=self.world.tick)
        log.game_event(
            "GAME_START",
            f"spawn={getattr(self.world.my_spawn, 'id', None)} "
            f"win_objective={getattr(self.win_objective, 'id', None)}",
            tick=self.world.tick,
        )
        log.info("Job registry:\n%s", self.jobs.summary(), tick=self.world.tick)

    def step(self) -> None:
        """Run one full tick."""
        if not self.started:
            self.on_start()
        else:
            self.world.refresh()

        self.build_order.check_and_add_spawning_creep()
        self.build_order.try_spawn_next_creep()
        self.units.update_creeps()

        if self.world.tick % self.config.strength_log_interval == 0:
            log.strength(self.world.team_strengths(), tick=self.world.tick)
            self._log_breakdowns()

    def _log_breakdowns(self) -> None:
        for creep in self.world.my_creeps:
            breakdown = creep_breakdown(creep, self.config.combat)
            if breakdown is None:
                continue
            log.debug(
                "Creep %s | %-7s attack=%d ranged=%d heal=%d strength=%.1f",
                breakdown["id"],
                breakdown["role"],
                breakdown["attack"],
                breakdown["ranged_attack"],
                breakdown["heal"],
                breakdown["strength"],
                tick=self.world.tick,
            )
