from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Tuple

from .cards import Card, Rank, cards_with_rank
from .deck import Hand
from .hand_value import (
    FourOfAKind,
    FullHouse,
    HandValue,
    HighCard,
    OnePair,
    Straight,
    ThreeOfAKind,
    TwoPair,
)


@dataclass(frozen=True)
class Commune:
    """Read-only pool of visible cards that bets are checked against."""

    cards: Tuple[Card, ...]

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        object.__setattr__(self, "cards", tuple(cards))

    @classmethod
    def from_hands(cls, *hands: Hand) -> "Commune":
        return cls(card for hand in hands for card in hand.cards)

    @property
    def card_set(self) -> FrozenSet[Card]:
        return frozenset(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def contains(self, value: HandValue) -> bool:
        return contains(self, value)


def contains(commune: Commune, value: HandValue) -> bool:
    """Return True when the pooled cards make the claimed category."""
    pool = commune.card_set
    if isinstance(value, HighCard):
        return _holds_rank(pool, value.rank, 1)
    if isinstance(value, OnePair):
        return _holds_rank(pool, value.rank, 2)
    if isinstance(value, TwoPair):
        return _holds_rank(pool, value.top_rank, 2) and _holds_rank(pool, value.bottom_rank, 2)
    if isinstance(value, ThreeOfAKind):
        return _holds_rank(pool, value.rank, 3)
    if isinstance(value, Straight):
        return _holds_straight(pool, value.rank)
    if isinstance(value, FullHouse):
        return contains(commune, ThreeOfAKind(value.triple)) and contains(commune, OnePair(value.pair))
    if isinstance(value, FourOfAKind):
        return _holds_rank(pool, value.rank, 4)
    raise TypeError(f"Unknown hand value: {value!r}")


def _holds_rank(pool: FrozenSet[Card], rank: Rank, count: int) -> bool:
    # Check the four concrete cards so several ranks can be tested against one pool.
    present = sum(1 for card in cards_with_rank(rank) if card in pool)
    return present >= count


def _holds_straight(pool: FrozenSet[Card], top_rank: Rank) -> bool:
    if top_rank < Rank.SIX:
        return False
    for value in range(top_rank - 4, top_rank + 1):
        if not any(card in pool for card in cards_with_rank(Rank(value))):
            return False
    return True
