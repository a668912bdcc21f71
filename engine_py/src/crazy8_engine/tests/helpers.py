"""
Builders for hand-crafted game states used across the tests.
"""

from typing import List, Optional

from crazy8_engine.models import Card, GameState, Player, STATUS_PLAYING


def card(suit: str, rank: str) -> Card:
    return Card(id=f"{suit}-{rank}", suit=suit, rank=rank)


def make_state(
    hands: List[List[Card]],
    top: Card,
    deck: Optional[List[Card]] = None,
    current_suit: Optional[str] = None,
    turn: int = 0
) -> GameState:
    """Human in seat 0, AI players in the remaining seats."""
    players = [
        Player(id=i, name="You" if i == 0 else f"Bot {i} (AI)", is_human=(i == 0), hand=list(hand))
        for i, hand in enumerate(hands)
    ]
    return GameState(
        deck=list(deck or []),
        discard_pile=[top],
        players=players,
        current_turn_index=turn,
        status=STATUS_PLAYING,
        current_suit=current_suit,
    )
