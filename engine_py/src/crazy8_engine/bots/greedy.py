"""
Greedy bot implementation.
"""

from typing import Dict, Optional, Sequence

from .base import BaseBot, BotAction
from ..constants import AI_SUIT_PRIORITY
from ..models import Card, GameState, Suit


def best_suit(cards: Sequence[Card]) -> Suit:
    """
    Suit held most often among the given cards.

    Ties go to the suit listed first in AI_SUIT_PRIORITY.
    """
    counts: Dict[Suit, int] = {suit: 0 for suit in AI_SUIT_PRIORITY}
    for card in cards:
        counts[card.suit] += 1
    return max(AI_SUIT_PRIORITY, key=lambda suit: counts[suit])


class GreedyBot(BaseBot):
    """
    Greedy bot with a fixed, deterministic strategy.

    Strategy:
    - Draw when nothing is playable
    - Play the first legal non-8 card in hand order
    - Keep 8s for when nothing else fits
    - After an 8, name the suit most held in the rest of the hand
    """

    def choose_action(self, state: GameState) -> Optional[BotAction]:
        """Choose the action for the current state."""
        if not self.is_my_turn(state):
            return None

        valid_plays = self.get_valid_plays(state)
        if not valid_plays:
            return BotAction.draw()

        card = next((c for c in valid_plays if not c.is_wild), valid_plays[0])
        if not card.is_wild:
            return BotAction.play(card.id)

        remaining = [c for c in self.get_player_hand(state) if c.id != card.id]
        return BotAction.play(card.id, best_suit(remaining))
