"""
Tests for the turn engine.
"""

import random

import pytest

from crazy8_engine.engine import (
    cancel_wild, create_game, draw_card, initial_state, play_card, return_to_setup,
    select_suit,
)
from crazy8_engine.models import (
    STATUS_LOST, STATUS_PLAYING, STATUS_SETUP, STATUS_WAITING_FOR_SUIT, STATUS_WON,
)
from crazy8_engine.shuffle import create_deck
from crazy8_engine.validate import playable_cards
from helpers import card, make_state

ALL_IDS = sorted(c.id for c in create_deck())


def assert_conserved(state):
    assert sorted(c.id for c in state.all_cards()) == ALL_IDS


def test_initial_state():
    state = initial_state()
    assert state.status == STATUS_SETUP
    assert state.players == []
    assert state.top_card is None


@pytest.mark.parametrize("player_count", [2, 3, 4])
def test_create_game_deals(player_count):
    result = create_game(player_count, seed=player_count)
    assert result.success
    state = result.state

    assert state.status == STATUS_PLAYING
    assert state.current_turn_index == 0
    assert state.current_suit is None
    assert len(state.players) == player_count
    assert all(len(p.hand) == 8 for p in state.players)
    assert len(state.discard_pile) == 1
    assert len(state.deck) == 52 - 8 * player_count - 1
    assert_conserved(state)

    assert state.players[0].is_human
    assert all(not p.is_human for p in state.players[1:])
    assert all(p.name.endswith("(AI)") for p in state.players[1:])
    assert state.card_back_url


def test_two_player_game_leaves_35_cards():
    state = create_game(2).state
    assert len(state.deck) == 35


def test_seed_discard_is_never_an_eight():
    for seed in range(200):
        state = create_game(4, seed=seed).state
        assert state.top_card.rank != "8"


def test_create_game_is_deterministic_for_seed():
    a = create_game(3, seed=99).state
    b = create_game(3, seed=99).state
    assert [c.id for c in a.deck] == [c.id for c in b.deck]
    assert [p.name for p in a.players] == [p.name for p in b.players]


def test_create_game_rejects_bad_player_count():
    result = create_game(5)
    assert not result.success
    assert result.error_code == "INVALID_PLAYER_COUNT"
    assert result.state.status == STATUS_SETUP


def test_play_moves_card_and_advances_turn():
    state = make_state(
        [[card("diamonds", "K"), card("spades", "3")], [card("clubs", "4"), card("hearts", "2")]],
        top=card("diamonds", "5"),
    )

    result = play_card(state, 0, "diamonds-K")

    assert result.success
    new = result.state
    assert [c.id for c in new.players[0].hand] == ["spades-3"]
    assert new.top_card.id == "diamonds-K"
    assert new.current_turn_index == 1
    assert new.version == state.version + 1
    assert new.last_action == "You played ♦K"
    # input snapshot untouched
    assert len(state.players[0].hand) == 2


def test_invalid_play_is_a_no_op():
    state = make_state(
        [[card("spades", "3")], [card("clubs", "4")]],
        top=card("diamonds", "5"),
    )

    result = play_card(state, 0, "spades-3")

    assert not result.success
    assert result.error_code == "ILLEGAL_MOVE"
    assert result.state is state


def test_out_of_turn_play_is_ignored():
    state = make_state(
        [[card("diamonds", "3")], [card("diamonds", "4")]],
        top=card("diamonds", "5"),
    )
    result = play_card(state, 1, "diamonds-4")
    assert not result.success
    assert result.error_code == "NOT_YOUR_TURN"
    assert result.state is state


def test_wild_two_phase_commit():
    state = make_state(
        [[card("hearts", "8"), card("spades", "3")], [card("clubs", "4")]],
        top=card("diamonds", "5"),
    )

    pending = play_card(state, 0, "hearts-8")
    assert pending.success
    assert pending.state.status == STATUS_WAITING_FOR_SUIT
    assert pending.state.pending_wild.id == "hearts-8"
    assert len(pending.state.players[0].hand) == 2
    assert pending.state.current_turn_index == 0
    assert draw_card(pending.state, 0).error_code == "SUIT_PENDING"

    committed = select_suit(pending.state, "spades")
    assert committed.success
    new = committed.state
    assert new.status == STATUS_PLAYING
    assert new.current_suit == "spades"
    assert new.top_card.id == "hearts-8"
    assert new.pending_wild is None
    assert [c.id for c in new.players[0].hand] == ["spades-3"]
    assert new.current_turn_index == 1
    assert new.last_action == "You played ♥8 (suit changed to Spades)"


def test_cancel_wild_keeps_card_and_turn():
    state = make_state(
        [[card("hearts", "8"), card("spades", "3")], [card("clubs", "4")]],
        top=card("diamonds", "5"),
    )
    pending = play_card(state, 0, "hearts-8").state

    result = cancel_wild(pending)

    assert result.success
    assert result.state.status == STATUS_PLAYING
    assert result.state.pending_wild is None
    assert result.state.current_turn_index == 0
    assert [c.id for c in result.state.players[0].hand] == ["hearts-8", "spades-3"]
    assert result.state.top_card.id == "diamonds-5"


def test_select_suit_without_pending_wild_is_rejected():
    state = make_state([[card("hearts", "3")], [card("clubs", "4")]], top=card("diamonds", "5"))
    assert select_suit(state, "hearts").error_code == "NO_PENDING_WILD"
    assert cancel_wild(state).error_code == "NO_PENDING_WILD"


def test_wild_play_with_suit_commits_directly():
    state = make_state(
        [[card("clubs", "3")], [card("hearts", "8"), card("clubs", "9")]],
        top=card("diamonds", "5"),
        turn=1,
    )

    result = play_card(state, 1, "hearts-8", "clubs")

    assert result.success
    assert result.state.current_suit == "clubs"
    assert result.state.current_turn_index == 0


def test_wild_suit_lasts_one_play():
    state = make_state(
        [[card("spades", "3"), card("spades", "4")], [card("spades", "9"), card("clubs", "2")]],
        top=card("hearts", "8"),
        current_suit="spades",
    )

    after = play_card(state, 0, "spades-3").state
    assert after.current_suit is None

    # the override is gone: clubs-2 does not match spades-3
    assert not play_card(after, 1, "clubs-2").success
    assert play_card(after, 1, "spades-9").success


def test_suit_ignored_for_non_wild_play():
    state = make_state(
        [[card("diamonds", "3"), card("spades", "4")], [card("clubs", "2")]],
        top=card("diamonds", "5"),
    )
    result = play_card(state, 0, "diamonds-3", "clubs")
    assert result.state.current_suit is None


def test_human_emptying_hand_wins():
    state = make_state(
        [[card("diamonds", "3")], [card("clubs", "2")]],
        top=card("diamonds", "5"),
    )

    result = play_card(state, 0, "diamonds-3")

    assert result.state.status == STATUS_WON
    assert result.state.winner_id == 0
    assert result.state.current_turn_index == 0

    after = draw_card(result.state, 0)
    assert not after.success
    assert after.error_code == "GAME_OVER"


def test_ai_emptying_hand_loses():
    state = make_state(
        [[card("spades", "3")], [card("clubs", "8")]],
        top=card("diamonds", "5"),
        turn=1,
    )

    result = play_card(state, 1, "clubs-8", "hearts")

    assert result.state.status == STATUS_LOST
    assert result.state.winner_id == 1
    assert not play_card(result.state, 0, "spades-3").success


def test_draw_moves_top_of_deck_and_sorts_human_hand():
    state = make_state(
        [[card("diamonds", "3")], [card("clubs", "2")]],
        top=card("hearts", "5"),
        deck=[card("clubs", "K"), card("spades", "A")],
    )

    result = draw_card(state, 0)

    new = result.state
    assert result.success
    assert [c.id for c in new.players[0].hand] == ["spades-A", "diamonds-3"]
    assert len(new.deck) == 1
    assert new.current_turn_index == 1
    assert new.last_action == "You drew a card."


def test_ai_draw_appends_unsorted():
    state = make_state(
        [[card("diamonds", "3")], [card("clubs", "2")]],
        top=card("hearts", "5"),
        deck=[card("spades", "A")],
        turn=1,
    )
    new = draw_card(state, 1).state
    assert [c.id for c in new.players[1].hand] == ["clubs-2", "spades-A"]
    assert new.current_turn_index == 0


def test_draw_with_empty_deck_skips_turn():
    state = make_state(
        [[card("diamonds", "3")], [card("clubs", "2")], [card("clubs", "3")]],
        top=card("hearts", "5"),
        current_suit="clubs",
        turn=2,
    )

    result = draw_card(state, 2)

    assert result.success
    assert result.state.current_turn_index == 0
    assert len(result.state.players[2].hand) == 1
    assert result.state.current_suit == "clubs"
    assert result.state.last_action == "Draw pile is empty, turn skipped."


def test_return_to_setup():
    state = create_game(2, seed=3).state
    result = return_to_setup(state)
    assert result.state.status == STATUS_SETUP
    assert not return_to_setup(result.state).success


def test_full_game_conserves_cards():
    """Drive every seat with a simple policy and check conservation each step."""
    for seed in range(10):
        rng = random.Random(seed)
        state = create_game(3, seed=seed).state
        for _ in range(500):
            if state.is_over:
                break
            index = state.current_turn_index
            options = playable_cards(state.players[index].hand, state.top_card, state.current_suit)
            if options:
                chosen = rng.choice(options)
                suit = rng.choice(["hearts", "diamonds", "clubs", "spades"]) if chosen.is_wild else None
                before = len(state.players[index].hand)
                result = play_card(state, index, chosen.id, suit)
                assert result.success
                assert len(result.state.players[index].hand) == before - 1
                assert result.state.top_card.id == chosen.id
            else:
                result = draw_card(state, index)
                assert result.success
            state = result.state
            assert_conserved(state)

        if state.is_over:
            winner = state.players[state.winner_id]
            assert winner.hand == []
            assert state.status == (STATUS_WON if winner.is_human else STATUS_LOST)
