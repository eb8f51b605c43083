"""
ArenaBot.jobs - what each unit does every tick.

Public API
----------
    from ArenaBot.jobs import JobRegistry, Job, RangedJob
    from ArenaBot.jobs import Fighter, Archer, Cleric, Hauler, Miner, Tug
"""

from ArenaBot.jobs.job import Job
from ArenaBot.jobs.ranged import RangedJob
from ArenaBot.jobs.fighter import Fighter
from ArenaBot.jobs.archer import Archer
from ArenaBot.jobs.cleric import Cleric
from ArenaBot.jobs.hauler import Hauler
from ArenaBot.jobs.miner import Miner
from ArenaBot.jobs.tug import Tug
from ArenaBot.jobs.registry import JobRegistry

__all__ = [
    "Job",
    "RangedJob",
    "Fighter",
    "Archer",
    "Cleric",
    "Hauler",
    "Miner",
    "Tug",
    "JobRegistry",
]
