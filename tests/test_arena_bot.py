"""End-to-end ticks through the orchestrator."""
from __future__ import annotations

import logging

from ArenaBot import ArenaBot, BotConfig
from ArenaBot.config import BuildConfig
from ArenaBot.constants import BodyPart, JobKind

from fakes import FakeConstructionSite, FakeCreep


def advance(bot, arena, ticks=1):
    for _ in range(ticks):
        arena.ticks += 1
        bot.step()


class TestStartup:

    def test_first_step_finds_win_objective(self, arena):
        objective = arena.add(FakeConstructionSite(12, 48))
        bot = ArenaBot(arena)
        bot.step()
        assert bot.started
        assert bot.win_objective is objective
        assert bot.build_order.win_objective is objective

    def test_runs_without_win_objective(self, arena):
        bot = ArenaBot(arena)
        bot.step()
        assert bot.win_objective is None
        assert len(arena.my_spawn.spawned) == 1


class TestLoop:

    def test_spawn_register_act(self, arena):
        bot = ArenaBot(arena)
        bot.step()
        assert bot.build_order.build_queue.pending_spawn.job is JobKind.CLERIC

        advance(bot, arena)
        assert [u.job_kind for u in bot.units.units] == [JobKind.CLERIC]
        cleric = arena.my_spawn.spawning.creep
        assert cleric.actions == []

        arena.my_spawn.finish_spawning()
        advance(bot, arena)
        # No enemy creeps: the cleric heads for the enemy spawn.
        assert cleric.calls("move_to") == [arena.enemy_spawn]
        assert bot.build_order.build_queue.pending_spawn.job is JobKind.HAULER

    def test_dead_units_leave_the_roster(self, arena):
        bot = ArenaBot(arena)
        bot.step()
        advance(bot, arena)
        creep = arena.my_spawn.spawning.creep
        arena.my_spawn.finish_spawning()
        arena.remove(creep)
        advance(bot, arena)
        assert len(bot.units) == 0

    def test_opening_then_economy(self, arena):
        bot = ArenaBot(arena)
        bot.step()
        for _ in range(6):
            advance(bot, arena)
            arena.my_spawn.finish_spawning()
            advance(bot, arena)
        built = [u.job_kind for u in bot.units.units]
        assert built[:4] == [JobKind.CLERIC, JobKind.HAULER, JobKind.MINER, JobKind.TUG]

    def test_strength_logged_on_interval(self, arena, caplog):
        caplog.set_level(logging.DEBUG, logger="arenabot")
        arena.add(FakeCreep(30, 30, body=(BodyPart.MOVE, BodyPart.RANGED_ATTACK), obj_id="x"))
        bot = ArenaBot(arena, BotConfig(strength_log_interval=2))
        bot.step()
        advance(bot, arena, ticks=3)
        assert bot.world.tick == 4
        assert any(m.startswith("Strength |") for m in caplog.messages)
        breakdowns = [m for m in caplog.messages if m.startswith("Creep x |")]
        assert breakdowns
        assert "ranged" in breakdowns[-1]
        assert "strength=30.0" in breakdowns[-1]

    def test_custom_opening(self, arena):
        config = BotConfig(build=BuildConfig(initial_build=()))
        bot = ArenaBot(arena, config)
        bot.step()
        assert bot.build_order.build_queue.pending_spawn.job is JobKind.MINER
