"""
Move legality and action precondition checks.
"""

from typing import List, Optional, Sequence

from .errors import (
    GAME_OVER, ILLEGAL_MOVE, NOT_YOUR_TURN, OWNERSHIP_MISMATCH, SUIT_PENDING,
    ACTION_NOT_ALLOWED,
)
from .models import (
    Card, GameState, Suit, STATUS_PLAYING, STATUS_WAITING_FOR_SUIT,
)


class ValidationResult:
    """Result of an action precondition check."""

    def __init__(
        self,
        valid: bool,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        card: Optional[Card] = None
    ):
        self.valid = valid
        self.error_code = error_code
        self.error_message = error_message
        self.card = card

    @classmethod
    def success(cls, card: Optional[Card] = None) -> 'ValidationResult':
        """Create a successful validation result."""
        return cls(valid=True, card=card)

    @classmethod
    def error(cls, error_code: str, error_message: str) -> 'ValidationResult':
        """Create an error validation result."""
        return cls(valid=False, error_code=error_code, error_message=error_message)


def is_valid_move(card: Card, top_card: Optional[Card], active_suit: Optional[Suit]) -> bool:
    """
    Check whether a card may be played onto the discard pile.

    An 8 is always playable. Otherwise the card must match the active wild
    suit (or the top card's suit when no wild suit is active) or the top
    card's rank.
    """
    if card.is_wild:
        return True
    if top_card is None:
        return False
    target_suit = active_suit or top_card.suit
    return card.suit == target_suit or card.rank == top_card.rank


def playable_cards(hand: Sequence[Card], top_card: Optional[Card],
                   active_suit: Optional[Suit]) -> List[Card]:
    """Legal cards of a hand, in hand order."""
    return [card for card in hand if is_valid_move(card, top_card, active_suit)]


def has_playable_card(hand: Sequence[Card], top_card: Optional[Card],
                      active_suit: Optional[Suit]) -> bool:
    return any(is_valid_move(card, top_card, active_suit) for card in hand)


def _validate_turn(state: GameState, player_index: int) -> Optional[ValidationResult]:
    if state.is_over:
        return ValidationResult.error(GAME_OVER, "Game is already over")
    if state.status == STATUS_WAITING_FOR_SUIT:
        return ValidationResult.error(SUIT_PENDING, "A suit must be chosen for the pending 8")
    if state.status != STATUS_PLAYING:
        return ValidationResult.error(ACTION_NOT_ALLOWED, "No game in progress")
    if player_index != state.current_turn_index:
        return ValidationResult.error(NOT_YOUR_TURN, "Not your turn")
    return None


def validate_play(state: GameState, player_index: int, card_id: str) -> ValidationResult:
    """
    Validate a play action.

    Args:
        state: Current game state
        player_index: Seat of the acting player
        card_id: ID of the card being played

    Returns:
        ValidationResult holding the resolved card on success
    """
    turn_error = _validate_turn(state, player_index)
    if turn_error:
        return turn_error

    card = state.players[player_index].find_card(card_id)
    if card is None:
        return ValidationResult.error(OWNERSHIP_MISMATCH, f"Card {card_id} is not in hand")

    if not is_valid_move(card, state.top_card, state.current_suit):
        return ValidationResult.error(ILLEGAL_MOVE, f"Card {card_id} cannot be played now")

    return ValidationResult.success(card)


def validate_draw(state: GameState, player_index: int) -> ValidationResult:
    """Validate a draw action. An empty deck is not an error."""
    turn_error = _validate_turn(state, player_index)
    if turn_error:
        return turn_error
    return ValidationResult.success()
