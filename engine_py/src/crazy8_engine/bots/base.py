"""
Base bot interface and utilities.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..engine import ActionResult, draw_card, play_card
from ..models import Card, GameState, Suit, STATUS_PLAYING
from ..validate import playable_cards


class BotAction:
    """Represents a bot action."""

    def __init__(self, action_type: str, **kwargs):
        self.type = action_type
        self.data = kwargs

    @classmethod
    def play(cls, card_id: str, suit: Optional[Suit] = None) -> 'BotAction':
        """Create a play action."""
        return cls('play', card_id=card_id, suit=suit)

    @classmethod
    def draw(cls) -> 'BotAction':
        """Create a draw action."""
        return cls('draw')

    def __repr__(self):
        return f"BotAction({self.type!r}, {self.data!r})"


class BaseBot(ABC):
    """Abstract base class for bot players."""

    def __init__(self, player_index: int):
        self.player_index = player_index

    @abstractmethod
    def choose_action(self, state: GameState) -> Optional[BotAction]:
        """
        Choose an action based on the current game state.

        Args:
            state: Current game state

        Returns:
            BotAction to take, or None if no action needed
        """
        pass

    def get_player_hand(self, state: GameState) -> List[Card]:
        """Get this bot's current hand."""
        if 0 <= self.player_index < len(state.players):
            return state.players[self.player_index].hand
        return []

    def is_my_turn(self, state: GameState) -> bool:
        """Check if it's this bot's turn to act."""
        player = state.current_player
        return (
            state.status == STATUS_PLAYING and
            state.current_turn_index == self.player_index and
            player is not None and
            not player.is_human
        )

    def get_valid_plays(self, state: GameState) -> List[Card]:
        """Cards this bot may legally play, in hand order."""
        return playable_cards(self.get_player_hand(state), state.top_card, state.current_suit)


def apply_bot_action(state: GameState, player_index: int, action: BotAction) -> ActionResult:
    """Run a bot action through the engine."""
    if action.type == 'play':
        return play_card(state, player_index, action.data['card_id'], action.data.get('suit'))
    return draw_card(state, player_index)
