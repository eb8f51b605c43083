"""
ArenaBot.services - coordination shared between jobs.

Public API
----------
    from ArenaBot.services import TugChain, TugChainCoordinator
    from ArenaBot.services.structures import perform_initial_win_objective_transfer
"""

from ArenaBot.services.tug_chain import TugChain, TugChainCoordinator

__all__ = ["TugChain", "TugChainCoordinator"]
