"""Game models and data structures"""

from dataclasses import dataclass, field
from typing import List, Literal, Optional

Suit = Literal['hearts', 'diamonds', 'clubs', 'spades']
Rank = Literal['A', '2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K']

WILD_RANK = '8'

# Session statuses
STATUS_SETUP = 'setup'
STATUS_PLAYING = 'playing'
STATUS_WAITING_FOR_SUIT = 'waiting_for_suit'
STATUS_WON = 'won'
STATUS_LOST = 'lost'

TERMINAL_STATUSES = (STATUS_WON, STATUS_LOST)


@dataclass(frozen=True)
class Card:
    id: str
    suit: Suit
    rank: Rank

    @property
    def is_wild(self) -> bool:
        return self.rank == WILD_RANK


@dataclass
class Player:
    id: int
    name: str
    is_human: bool = False
    hand: List[Card] = field(default_factory=list)

    def find_card(self, card_id: str) -> Optional[Card]:
        for card in self.hand:
            if card.id == card_id:
                return card
        return None


@dataclass
class GameState:
    deck: List[Card] = field(default_factory=list)  # drawn from the end
    discard_pile: List[Card] = field(default_factory=list)
    players: List[Player] = field(default_factory=list)
    current_turn_index: int = 0
    status: str = STATUS_SETUP  # setup|playing|waiting_for_suit|won|lost
    current_suit: Optional[Suit] = None  # set when an 8 was just played
    last_action: str = ''
    winner_id: Optional[int] = None
    card_back_url: str = ''
    pending_wild: Optional[Card] = None  # 8 held aside while a suit is chosen
    version: int = 0

    @property
    def top_card(self) -> Optional[Card]:
        return self.discard_pile[-1] if self.discard_pile else None

    @property
    def current_player(self) -> Optional[Player]:
        if 0 <= self.current_turn_index < len(self.players):
            return self.players[self.current_turn_index]
        return None

    @property
    def is_over(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def all_cards(self) -> List[Card]:
        """Every card in the session, wherever it currently sits."""
        cards = list(self.deck) + list(self.discard_pile)
        for player in self.players:
            cards.extend(player.hand)
        return cards

    def increment_version(self):
        self.version += 1
