"""Game constants and display helpers"""

from typing import Dict, List

from .models import Rank, Suit

SUITS: List[Suit] = ['hearts', 'diamonds', 'clubs', 'spades']
RANKS: List[Rank] = ['A', '2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K']

HAND_SIZE = 8

# Display order of the human hand (8s always go last)
HAND_SORT_SUIT_ORDER: Dict[Suit, int] = {
    'spades': 0,
    'hearts': 1,
    'clubs': 2,
    'diamonds': 3,
}

# AI wild-suit tie-break: earlier suit wins a tie
AI_SUIT_PRIORITY: List[Suit] = ['spades', 'clubs', 'diamonds', 'hearts']

SUIT_SYMBOLS: Dict[Suit, str] = {
    'hearts': '♥',
    'diamonds': '♦',
    'clubs': '♣',
    'spades': '♠',
}

SUIT_LABELS: Dict[Suit, str] = {
    'hearts': 'Hearts',
    'diamonds': 'Diamonds',
    'clubs': 'Clubs',
    'spades': 'Spades',
}

HUMAN_NAME = 'You'

FAMOUS_NAMES = [
    'Einstein', 'Newton', 'Da Vinci', 'Curie', 'Tesla',
    'Shakespeare', 'Beethoven', 'Mozart', 'Van Gogh', 'Picasso',
    'Socrates', 'Plato', 'Aristotle', 'Confucius', 'Laozi',
    'Li Bai', 'Du Fu', 'Su Shi', 'Lu Xun', 'Eileen Chang',
    'Jobs', 'Musk', 'Gates', 'Zuckerberg', 'Turing',
    'Audrey Hepburn', 'Marilyn Monroe', 'Chaplin', 'Bruce Lee', 'Jackie Chan',
]

CARD_BACKS = [
    {'name': 'Marine', 'url': 'https://picsum.photos/seed/starcraft-marine-classic/400/600'},
    {'name': 'Dragoon', 'url': 'https://picsum.photos/seed/starcraft-dragoon-classic/400/600'},
    {'name': 'Hydralisk', 'url': 'https://picsum.photos/seed/starcraft-hydralisk-classic/400/600'},
]

DEFEAT_REMARKS = [
    "Hmm, was the AI peeking at your cards just now?",
    "Win some, lose some. Deal again!",
    "The AI got a little luckier this time.",
    "So close! Your hand is warming up.",
    "The AI says: well played, I'll go easy next time.",
    "Cards are like life: sometimes you draw a bad hand.",
]

# Action messages
MSG_WELCOME = "Welcome to Crazy Eights!"
MSG_GAME_STARTED = "Game started! Your turn."
MSG_DECK_EMPTY = "Draw pile is empty, turn skipped."
MSG_CHOOSE_SUIT = "Choose a suit for your 8."

# Persisted stats
STATS_NAMESPACE = 'crazy8_stats'


def format_card(card) -> str:
    return f"{SUIT_SYMBOLS[card.suit]}{card.rank}"
