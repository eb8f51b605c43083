"""
ArenaBot.combat - geometry, strength and positioning for fights.

Public API
----------
    from ArenaBot.combat import (
        KitingBehavior,
        TerrainAnalyzer,
        StrengthComparison,
        compare_team_strengths,
        creep_strength,
    )
"""

from ArenaBot.combat.kiting import KitingBehavior
from ArenaBot.combat.strength import (
    StrengthComparison,
    compare_team_strengths,
    creep_breakdown,
    creep_strength,
    team_strength,
)
from ArenaBot.combat.terrain import TerrainAnalyzer

__all__ = [
    "KitingBehavior",
    "TerrainAnalyzer",
    "StrengthComparison",
    "compare_team_strengths",
    "creep_breakdown",
    "creep_strength",
    "team_strength",
]
