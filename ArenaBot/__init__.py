"""
ArenaBot - a per-tick decision engine for an arena of autonomous creeps.

Public API
----------
    from ArenaBot import ArenaBot, BotConfig

    bot = ArenaBot(arena, BotConfig())
    bot.step()
"""

from ArenaBot.arena_bot import ArenaBot
from ArenaBot.config import BotConfig

__all__ = ["ArenaBot", "BotConfig"]
