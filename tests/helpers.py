from __future__ import annotations

from typing import List

from core.cards import Card, Rank, Suit
from core.deck import Hand
from core.game import GameEngine
from core.models import GameConfig

SUIT_LETTERS = {"c": Suit.CLUBS, "s": Suit.SPADES, "h": Suit.HEARTS, "d": Suit.DIAMONDS}


def card(label: str) -> Card:
    """Build a card from a rank token and a suit letter, e.g. "10s" or "Qh"."""
    rank = Rank.parse(label[:-1])
    assert rank is not None, f"bad rank in {label}"
    return Card(SUIT_LETTERS[label[-1]], rank)


def cards(*labels: str) -> List[Card]:
    return [card(label) for label in labels]


def hand(*labels: str) -> Hand:
    return Hand(cards(*labels))


def create_engine(*, players: int = 3, max_penalties: int = 3, seed: int = 42) -> GameEngine:
    """Instantiate an engine with a game already dealt."""
    engine = GameEngine(GameConfig(players=players, max_penalties=max_penalties, seed=seed))
    engine.new_game()
    return engine


def set_hands(engine: GameEngine, *hands: Hand) -> None:
    """Replace the dealt hands so a round resolves predictably."""
    for player, new_hand in zip(engine.players, hands):
        player.hand = new_hand
