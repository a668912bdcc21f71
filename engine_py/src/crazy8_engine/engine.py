"""
Turn engine: reducer-style transitions over GameState.

Every transition takes the current state and returns an ActionResult. A
rejected action hands back the untouched input state; an accepted one
returns a fresh deep copy with the version bumped.
"""

import copy
import logging
import random
from typing import Optional

from .constants import (
    CARD_BACKS, FAMOUS_NAMES, MSG_CHOOSE_SUIT, MSG_DECK_EMPTY, MSG_GAME_STARTED,
    MSG_WELCOME, SUIT_LABELS, SUITS, format_card,
)
from .errors import ACTION_NOT_ALLOWED, GameError, INVALID_SUIT, NO_PENDING_WILD
from .models import (
    Card, GameState, Player, Suit, STATUS_LOST, STATUS_PLAYING, STATUS_SETUP,
    STATUS_WAITING_FOR_SUIT, STATUS_WON,
)
from .rules import GameConfig, default_config
from .shuffle import create_deck, deal_hands, pick_seed_card, shuffle, sort_hand
from .validate import validate_draw, validate_play

logger = logging.getLogger(__name__)


class ActionResult:
    """Outcome of an engine transition."""

    def __init__(
        self,
        success: bool,
        state: GameState,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None
    ):
        self.success = success
        self.state = state
        self.error_code = error_code
        self.error_message = error_message

    @classmethod
    def ok(cls, state: GameState) -> 'ActionResult':
        return cls(True, state)

    @classmethod
    def rejected(cls, state: GameState, error_code: str, error_message: str) -> 'ActionResult':
        logger.debug(f"Action rejected [{error_code}]: {error_message}")
        return cls(False, state, error_code, error_message)


def initial_state() -> GameState:
    """Empty pre-game snapshot."""
    return GameState(status=STATUS_SETUP, last_action=MSG_WELCOME)


def create_game(
    player_count: int = 2,
    config: Optional[GameConfig] = None,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None
) -> ActionResult:
    """
    Set up a new session: shuffle, deal and flip the first discard.

    Args:
        player_count: Total players, the human included
        config: Rule configuration (defaults to default_config)
        seed: Optional seed for a deterministic deal
        rng: Optional random source; takes precedence over seed

    Returns:
        ActionResult with a fresh `playing` state
    """
    config = config or default_config
    if rng is None:
        rng = random.Random(seed) if seed is not None else random.Random()

    try:
        config.require_player_count(player_count)
    except GameError as e:
        return ActionResult.rejected(initial_state(), e.code, e.message)

    deck = shuffle(create_deck(), rng)
    ai_names = shuffle(FAMOUS_NAMES, rng)
    card_back = CARD_BACKS[rng.randrange(len(CARD_BACKS))]

    hands, deck = deal_hands(deck, player_count, config.hand_size)
    players = [Player(id=0, name=config.human_name, is_human=True, hand=sort_hand(hands[0]))]
    for i in range(1, player_count):
        players.append(Player(id=i, name=f"{ai_names[i - 1]} (AI)", is_human=False, hand=hands[i]))

    seed_card, deck = pick_seed_card(deck)

    state = GameState(
        deck=deck,
        discard_pile=[seed_card],
        players=players,
        current_turn_index=0,
        status=STATUS_PLAYING,
        current_suit=None,
        last_action=MSG_GAME_STARTED,
        winner_id=None,
        card_back_url=card_back['url'],
    )
    logger.info(f"New game: {player_count} players, seed card {format_card(seed_card)}")
    return ActionResult.ok(state)


def _next_index(state: GameState, player_index: int) -> int:
    return (player_index + 1) % len(state.players)


def _commit_play(state: GameState, player_index: int, card: Card, suit: Optional[Suit]) -> GameState:
    """Move a card from hand to discard pile and resolve win or next turn."""
    new_state = copy.deepcopy(state)
    player = new_state.players[player_index]
    new_suit = suit if card.is_wild else None

    player.hand = [c for c in player.hand if c.id != card.id]
    new_state.discard_pile.append(card)
    new_state.current_suit = new_suit
    new_state.pending_wild = None

    action = f"{player.name} played {format_card(card)}"
    if new_suit:
        action += f" (suit changed to {SUIT_LABELS[new_suit]})"
    new_state.last_action = action

    if not player.hand:
        new_state.status = STATUS_WON if player.is_human else STATUS_LOST
        new_state.winner_id = player.id
        new_state.current_turn_index = player_index
        logger.info(f"{player.name} emptied their hand, status {new_state.status}")
    else:
        new_state.status = STATUS_PLAYING
        new_state.current_turn_index = _next_index(new_state, player_index)

    new_state.increment_version()
    return new_state


def play_card(state: GameState, player_index: int, card_id: str,
              suit: Optional[Suit] = None) -> ActionResult:
    """
    Play a card from a player's hand.

    An 8 played without a suit is held aside and the state moves to
    `waiting_for_suit` until `select_suit` or `cancel_wild` is called.
    """
    validation = validate_play(state, player_index, card_id)
    if not validation.valid:
        return ActionResult.rejected(state, validation.error_code, validation.error_message)

    card = validation.card
    if suit is not None and suit not in SUITS:
        return ActionResult.rejected(state, INVALID_SUIT, f"Unknown suit: {suit}")

    if card.is_wild and suit is None:
        new_state = copy.deepcopy(state)
        new_state.status = STATUS_WAITING_FOR_SUIT
        new_state.pending_wild = card
        new_state.last_action = MSG_CHOOSE_SUIT
        new_state.increment_version()
        return ActionResult.ok(new_state)

    return ActionResult.ok(_commit_play(state, player_index, card, suit))


def select_suit(state: GameState, suit: Suit) -> ActionResult:
    """Commit the pending 8 with the chosen suit."""
    if state.status != STATUS_WAITING_FOR_SUIT or state.pending_wild is None:
        return ActionResult.rejected(state, NO_PENDING_WILD, "No 8 is waiting for a suit")
    if suit not in SUITS:
        return ActionResult.rejected(state, INVALID_SUIT, f"Unknown suit: {suit}")

    return ActionResult.ok(
        _commit_play(state, state.current_turn_index, state.pending_wild, suit)
    )


def cancel_wild(state: GameState) -> ActionResult:
    """Put the pending 8 back; the card stays in hand and the turn does not move."""
    if state.status != STATUS_WAITING_FOR_SUIT:
        return ActionResult.rejected(state, NO_PENDING_WILD, "No 8 is waiting for a suit")

    new_state = copy.deepcopy(state)
    new_state.status = STATUS_PLAYING
    new_state.pending_wild = None
    new_state.increment_version()
    return ActionResult.ok(new_state)


def draw_card(state: GameState, player_index: int) -> ActionResult:
    """
    Draw the top card of the deck and pass the turn.

    With an empty deck nothing is drawn and the turn is simply skipped.
    """
    validation = validate_draw(state, player_index)
    if not validation.valid:
        return ActionResult.rejected(state, validation.error_code, validation.error_message)

    new_state = copy.deepcopy(state)
    player = new_state.players[player_index]

    if not new_state.deck:
        new_state.last_action = MSG_DECK_EMPTY
    else:
        drawn = new_state.deck.pop()
        hand = player.hand + [drawn]
        player.hand = sort_hand(hand) if player.is_human else hand
        new_state.last_action = f"{player.name} drew a card."

    new_state.current_turn_index = _next_index(new_state, player_index)
    new_state.increment_version()
    return ActionResult.ok(new_state)


def return_to_setup(state: GameState) -> ActionResult:
    """Leave the current session and go back to player-count selection."""
    if state.status == STATUS_SETUP:
        return ActionResult.rejected(state, ACTION_NOT_ALLOWED, "Already in setup")

    new_state = copy.deepcopy(state)
    new_state.status = STATUS_SETUP
    new_state.pending_wild = None
    new_state.increment_version()
    return ActionResult.ok(new_state)
