"""
Computer-controlled players.
"""

from .base import BaseBot, BotAction, apply_bot_action
from .greedy import GreedyBot, best_suit

__all__ = ["BaseBot", "BotAction", "GreedyBot", "apply_bot_action", "best_suit"]
