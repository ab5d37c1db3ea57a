"""Commune engine: cards, bets, commune evaluation, and bet probabilities."""

from .cards import Card, Rank, Suit, cards_with_rank, cards_with_suit, full_deck
from .deck import Deck, Hand
from .errors import (
    BetTooLow,
    CallWithNoBet,
    CommuneError,
    GameError,
    GameOver,
    InvalidArguments,
    InvalidInput,
    NotEnoughCards,
)
from .evaluator import Commune, contains
from .game import GameEngine
from .hand_value import (
    FourOfAKind,
    FullHouse,
    HandValue,
    HighCard,
    OnePair,
    Straight,
    ThreeOfAKind,
    TwoPair,
    describe,
)
from .models import Bet, Call, GameConfig, NewGame, Player, RoundResult
from .parser import format_hand_value, parse_hand_value
from .probability import (
    best_bets,
    calculate_probabilities,
    cumulative_probability,
    falling_factorial,
    get_needed_cards,
    probability_of,
)

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "cards_with_rank",
    "cards_with_suit",
    "full_deck",
    "Deck",
    "Hand",
    "BetTooLow",
    "CallWithNoBet",
    "CommuneError",
    "GameError",
    "GameOver",
    "InvalidArguments",
    "InvalidInput",
    "NotEnoughCards",
    "Commune",
    "contains",
    "GameEngine",
    "FourOfAKind",
    "FullHouse",
    "HandValue",
    "HighCard",
    "OnePair",
    "Straight",
    "ThreeOfAKind",
    "TwoPair",
    "describe",
    "Bet",
    "Call",
    "GameConfig",
    "NewGame",
    "Player",
    "RoundResult",
    "format_hand_value",
    "parse_hand_value",
    "best_bets",
    "calculate_probabilities",
    "cumulative_probability",
    "falling_factorial",
    "get_needed_cards",
    "probability_of",
]
