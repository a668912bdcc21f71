"""
State serialization and sanitization utilities.
"""

from typing import Any, Dict, Optional

from .constants import SUIT_SYMBOLS
from .models import Card, GameState, Player, STATUS_PLAYING
from .stats import GameStats
from .validate import is_valid_move


def card_to_dict(card: Optional[Card]) -> Optional[Dict[str, Any]]:
    if card is None:
        return None
    return {
        "id": card.id,
        "suit": card.suit,
        "rank": card.rank,
        "symbol": SUIT_SYMBOLS[card.suit],
    }


def _serialize_player(player: Player, show_hand: bool) -> Dict[str, Any]:
    sanitized_player = {
        "id": player.id,
        "name": player.name,
        "is_human": player.is_human,
        "hand_count": len(player.hand),
    }
    if show_hand:
        sanitized_player["hand"] = [card_to_dict(card) for card in player.hand]
    return sanitized_player


def sanitize_state(state: GameState, reveal_all: bool = False) -> Dict[str, Any]:
    """
    Sanitize game state for transmission to the client.

    Args:
        state: Game state to sanitize
        reveal_all: Include AI hands as well as the human's

    Returns:
        Sanitized state dictionary safe for JSON transmission
    """
    current = state.current_player
    top_card = state.top_card
    human_turn = (
        state.status == STATUS_PLAYING and current is not None and current.is_human
    )

    playable_ids = []
    if human_turn:
        playable_ids = [
            card.id for card in current.hand
            if is_valid_move(card, top_card, state.current_suit)
        ]

    return {
        "version": state.version,
        "status": state.status,
        "current_turn_index": state.current_turn_index,
        "current_suit": state.current_suit,
        "last_action": state.last_action,
        "winner_id": state.winner_id,
        "card_back_url": state.card_back_url,
        "deck_count": len(state.deck),
        "discard_count": len(state.discard_pile),
        "top_card": card_to_dict(top_card),
        "pending_wild": card_to_dict(state.pending_wild),
        "players": [
            _serialize_player(player, show_hand=reveal_all or player.is_human)
            for player in state.players
        ],
        "can_play": bool(playable_ids),
        "playable_card_ids": playable_ids,
    }


def serialize_stats(stats: GameStats) -> Dict[str, int]:
    return stats.model_dump()
