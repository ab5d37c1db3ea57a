from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .cards import Card
from .deck import Hand
from .hand_value import HandValue

MIN_PLAYERS = 2
MAX_PLAYERS = 10


@dataclass
class GameConfig:
    players: int = 3
    max_penalties: int = 3
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if not MIN_PLAYERS <= self.players <= MAX_PLAYERS:
            raise ValueError(f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {self.players}")
        if self.max_penalties < 1:
            raise ValueError(f"max_penalties must be at least 1, got {self.max_penalties}")


@dataclass
class Player:
    name: int
    hand: Hand = field(default_factory=Hand.empty)
    penalties: int = 0
    max_penalties: int = 3

    @property
    def is_out(self) -> bool:
        return self.penalties >= self.max_penalties

    @property
    def cards_due(self) -> int:
        # Every penalty costs one extra card next round.
        return self.penalties + 1


@dataclass(frozen=True)
class NewGame:
    players: int


@dataclass(frozen=True)
class Bet:
    value: HandValue


@dataclass(frozen=True)
class Call:
    pass


GameMove = Union[NewGame, Bet, Call]


@dataclass(frozen=True)
class RoundResult:
    bet: HandValue
    bettor: int
    caller: int
    bet_held: bool
    penalized: int
    commune: Tuple[Card, ...]
    eliminated: bool = False
    game_over: bool = False
    winner: Optional[int] = None
