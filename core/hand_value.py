from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import ClassVar, List, Tuple

from .cards import Rank
from .errors import InvalidArguments

# Bet categories, weakest first. Every value is frozen; two values compare by
# category and then by the ranks they carry, which is how competing bets are
# ordered at the table.


class HandValue:
    category: ClassVar[int]
    name: ClassVar[str]

    def ranks(self) -> Tuple[Rank, ...]:
        raise NotImplementedError

    def sort_key(self) -> Tuple[int, Tuple[Rank, ...]]:
        return (self.category, self.ranks())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandValue):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, HandValue):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, HandValue):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, HandValue):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    @staticmethod
    def all_possible() -> List["HandValue"]:
        """All 299 bets, including straights that can never be made (top below Six)."""
        values: List[HandValue] = []
        values.extend(HighCard(rank) for rank in Rank)
        values.extend(OnePair(rank) for rank in Rank)
        values.extend(TwoPair.all_possible())
        values.extend(ThreeOfAKind(rank) for rank in Rank)
        values.extend(Straight(rank) for rank in Rank)
        values.extend(FullHouse.all_possible())
        values.extend(FourOfAKind(rank) for rank in Rank)
        return values


@dataclass(frozen=True)
class _SingleRank(HandValue):
    rank: Rank

    def ranks(self) -> Tuple[Rank, ...]:
        return (self.rank,)


@dataclass(frozen=True)
class HighCard(_SingleRank):
    category: ClassVar[int] = 0
    name: ClassVar[str] = "High Card"
    copies: ClassVar[int] = 1


@dataclass(frozen=True)
class OnePair(_SingleRank):
    category: ClassVar[int] = 1
    name: ClassVar[str] = "One Pair"
    copies: ClassVar[int] = 2


@dataclass(frozen=True)
class TwoPair(HandValue):
    """Two distinct ranks, stored highest first whatever order they were given in."""

    category: ClassVar[int] = 2
    name: ClassVar[str] = "Two Pair"

    top_rank: Rank
    bottom_rank: Rank

    def __post_init__(self) -> None:
        if self.top_rank == self.bottom_rank:
            raise InvalidArguments(f"Two pair needs two different ranks, got {self.top_rank} twice")
        if self.top_rank < self.bottom_rank:
            top, bottom = self.bottom_rank, self.top_rank
            object.__setattr__(self, "top_rank", top)
            object.__setattr__(self, "bottom_rank", bottom)

    def ranks(self) -> Tuple[Rank, ...]:
        return (self.top_rank, self.bottom_rank)

    @classmethod
    def all_possible(cls) -> List["TwoPair"]:
        return [cls(top, bottom) for top in Rank for bottom in Rank if bottom < top]


@dataclass(frozen=True)
class ThreeOfAKind(_SingleRank):
    category: ClassVar[int] = 3
    name: ClassVar[str] = "Three of a Kind"
    copies: ClassVar[int] = 3


@dataclass(frozen=True)
class Straight(_SingleRank):
    """Five consecutive ranks ending at ``rank``. There is no Ace-low straight."""

    category: ClassVar[int] = 4
    name: ClassVar[str] = "Straight"

    def run(self) -> List[Rank]:
        if self.rank < Rank.SIX:
            return []
        return [Rank(value) for value in range(self.rank - 4, self.rank + 1)]


@dataclass(frozen=True)
class FullHouse(HandValue):
    category: ClassVar[int] = 5
    name: ClassVar[str] = "Full House"

    triple: Rank
    pair: Rank

    def __post_init__(self) -> None:
        if self.triple == self.pair:
            raise InvalidArguments(f"Full house needs two different ranks, got {self.triple} twice")

    def ranks(self) -> Tuple[Rank, ...]:
        return (self.triple, self.pair)

    @classmethod
    def all_possible(cls) -> List["FullHouse"]:
        # Order matters: three kings and two fives is not three fives and two kings.
        return [cls(triple, pair) for triple, pair in itertools.permutations(Rank, 2)]


@dataclass(frozen=True)
class FourOfAKind(_SingleRank):
    category: ClassVar[int] = 6
    name: ClassVar[str] = "Four of a Kind"
    copies: ClassVar[int] = 4


RANK_COUNT_VALUES = (HighCard, OnePair, ThreeOfAKind, FourOfAKind)


def describe(value: HandValue) -> str:
    if isinstance(value, TwoPair):
        return f"{value.name} ({value.top_rank} and {value.bottom_rank})"
    if isinstance(value, FullHouse):
        return f"{value.name} ({value.triple} over {value.pair})"
    if isinstance(value, Straight):
        return f"{value.name} (to {value.rank})"
    if isinstance(value, _SingleRank):
        return f"{value.name} ({value.rank})"
    raise TypeError(f"Unknown hand value: {value!r}")
