"""
Deck construction, shuffling, dealing and hand ordering.
"""

import random
from typing import List, Optional, Sequence, Tuple, TypeVar

from .constants import HAND_SIZE, HAND_SORT_SUIT_ORDER, RANKS, SUITS
from .models import Card

T = TypeVar('T')


def create_deck() -> List[Card]:
    """Create a standard 52-card deck in fixed suit/rank order."""
    deck = []
    for suit in SUITS:
        for rank in RANKS:
            deck.append(Card(id=f"{suit}-{rank}", suit=suit, rank=rank))
    return deck


def shuffle(sequence: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """
    Return a uniformly shuffled copy of a sequence (Fisher-Yates).

    Args:
        sequence: Items to shuffle; left untouched
        rng: Optional random source, e.g. ``random.Random(seed)`` for
            deterministic shuffles

    Returns:
        New list holding the same items in random order
    """
    rng = rng or random
    items = list(sequence)
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def deal_hands(deck: List[Card], player_count: int,
               hand_size: int = HAND_SIZE) -> Tuple[List[List[Card]], List[Card]]:
    """
    Deal consecutive blocks of cards off the front of the deck.

    Args:
        deck: Shuffled deck
        player_count: Number of hands to deal
        hand_size: Cards per hand

    Returns:
        Tuple of (hands in seat order, remaining deck)
    """
    hands = []
    for seat in range(player_count):
        start = seat * hand_size
        hands.append(deck[start:start + hand_size])
    return hands, deck[player_count * hand_size:]


def pick_seed_card(deck: List[Card]) -> Tuple[Card, List[Card]]:
    """
    Take the first non-8 card of the deck to start the discard pile.

    Falls back to the first card when every remaining card is an 8.

    Returns:
        Tuple of (seed card, remaining deck)
    """
    index = next((i for i, card in enumerate(deck) if not card.is_wild), 0)
    remaining = deck[:index] + deck[index + 1:]
    return deck[index], remaining


def _hand_sort_key(card: Card) -> Tuple[int, int, int]:
    return (
        1 if card.is_wild else 0,
        HAND_SORT_SUIT_ORDER[card.suit],
        RANKS.index(card.rank),
    )


def sort_hand(hand: Sequence[Card]) -> List[Card]:
    """Sort a hand for display: suit then rank, with every 8 on the right."""
    return sorted(hand, key=_hand_sort_key)
