from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .cards import Card, full_deck
from .errors import NotEnoughCards

LOGGER = logging.getLogger("commune.deck")


@dataclass
class Hand:
    cards: List[Card] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "Hand":
        return cls()

    def __len__(self) -> int:
        return len(self.cards)


class Deck:
    """Cards not yet dealt. Dealing shrinks the deck; nothing is ever returned to it."""

    def __init__(self, cards: List[Card]) -> None:
        self.cards = cards

    @classmethod
    def standard(cls, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> "Deck":
        # Shuffle with an injected source so tests can pin the permutation.
        if rng is None:
            rng = random.Random(seed)
        cards = full_deck()
        rng.shuffle(cards)
        return cls(cards)

    def __len__(self) -> int:
        return len(self.cards)

    def deal(self, count: int) -> Hand:
        if count < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {count}")
        if count > len(self.cards):
            raise NotEnoughCards(count, len(self.cards))
        split = len(self.cards) - count
        dealt = self.cards[split:]
        del self.cards[split:]
        LOGGER.debug("Dealt %d cards, %d remaining", count, len(self.cards))
        return Hand(dealt)
