from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Iterator, List, Optional


class Suit(Enum):
    CLUBS = "♣"
    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"

    def __str__(self) -> str:
        return self.value


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def token(self) -> str:
        return _RANK_TOKENS[self]

    def __str__(self) -> str:
        return self.token

    def __format__(self, format_spec: str) -> str:
        # IntEnum would otherwise format as the bare integer.
        return format(self.token, format_spec)

    @classmethod
    def from_int(cls, value: int) -> Optional["Rank"]:
        """Map 2..14 to a rank; anything else has no rank."""
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def parse(cls, token: str) -> Optional["Rank"]:
        return _TOKEN_RANKS.get(token)


_RANK_TOKENS: Dict[Rank, str] = {
    rank: (str(int(rank)) if rank <= Rank.TEN else rank.name[0]) for rank in Rank
}
_TOKEN_RANKS: Dict[str, Rank] = {token: rank for rank, token in _RANK_TOKENS.items()}


@dataclass(frozen=True)
class Card:
    # Equality and hashing use suit and rank; ordering looks at rank only.
    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit!r}")
        if not isinstance(self.rank, Rank):
            raise ValueError(f"Invalid rank: {self.rank!r}")

    @property
    def label(self) -> str:
        return f"{self.rank.token}{self.suit.value}"

    def __str__(self) -> str:
        return self.label

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank


def cards_with_rank(rank: Rank) -> Iterator[Card]:
    for suit in Suit:
        yield Card(suit, rank)


def cards_with_suit(suit: Suit) -> Iterator[Card]:
    for rank in Rank:
        yield Card(suit, rank)


def full_deck() -> List[Card]:
    """The 52-card universe, ordered by rank then suit."""
    return [card for rank in Rank for card in cards_with_rank(rank)]
