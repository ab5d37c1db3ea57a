"""Likelihood that a bet will hold once unseen cards are revealed.

For a private hand and a number ``m`` of cards that will be revealed, every
bet is reduced to its minimal needed card sets: the smallest sets of cards,
not already held, that would make the bet true. A needed set of size ``k``
lands entirely among the revealed cards with probability
``P(m, k) / P(remaining, k)`` where ``P`` is the falling factorial and
``remaining`` counts every card outside the hand. The sets are treated as
independent events, so when two needed sets share cards the result overstates
the exact value.
"""

from __future__ import annotations

import itertools
import math
from typing import List, Optional, Sequence, Tuple

from .cards import Card, Rank, cards_with_rank, full_deck
from .deck import Hand
from .evaluator import Commune, contains
from .hand_value import (
    RANK_COUNT_VALUES,
    FourOfAKind,
    FullHouse,
    HandValue,
    HighCard,
    OnePair,
    Straight,
    ThreeOfAKind,
    TwoPair,
)

DECK_SIZE = len(full_deck())

NeededSet = Tuple[Card, ...]

_RANK_COUNT_BETS = {1: HighCard, 2: OnePair, 3: ThreeOfAKind, 4: FourOfAKind}


def falling_factorial(n: int, k: int) -> int:
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    if k > n:
        return 0
    return math.perm(n, k)


def cumulative_probability(p: float, n: int, k: int) -> float:
    """Binomial upper tail: probability of at least ``k`` successes in ``n`` trials."""
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"p must be within [0, 1], got {p}")
    if k <= 0:
        return 1.0
    if k > n:
        return 0.0
    return sum(math.comb(n, i) * p**i * (1.0 - p) ** (n - i) for i in range(k, n + 1))


def needed_for_rank(hand: Hand, rank: Rank, size: int) -> List[NeededSet]:
    """Minimal sets of extra cards that bring ``rank`` up to ``size`` copies.

    Returns ``[()]`` when the hand already holds enough copies.
    """
    bet = _RANK_COUNT_BETS[size](rank)
    held = set(hand.cards)
    candidates = [card for card in cards_with_rank(rank) if card not in held]
    for extra in range(len(candidates) + 1):
        found = [
            combo
            for combo in itertools.combinations(candidates, extra)
            if contains(Commune(hand.cards + list(combo)), bet)
        ]
        if found:
            return found
    return []


def get_needed_cards(hand: Hand, value: HandValue) -> Optional[List[NeededSet]]:
    """Minimal needed card sets for ``value``.

    An empty list means the bet already holds. ``None`` means no cards can
    ever make it hold (straights topped below Six).
    """
    if isinstance(value, RANK_COUNT_VALUES):
        groups = [needed_for_rank(hand, value.rank, value.copies)]
    elif isinstance(value, TwoPair):
        groups = [needed_for_rank(hand, value.top_rank, 2), needed_for_rank(hand, value.bottom_rank, 2)]
    elif isinstance(value, FullHouse):
        groups = [needed_for_rank(hand, value.triple, 3), needed_for_rank(hand, value.pair, 2)]
    elif isinstance(value, Straight):
        run = value.run()
        if not run:
            return None
        groups = [needed_for_rank(hand, rank, 1) for rank in run]
    else:
        raise TypeError(f"Unknown hand value: {value!r}")

    needed = [tuple(itertools.chain.from_iterable(parts)) for parts in itertools.product(*groups)]
    if needed == [()]:
        return []
    return needed


def set_probability(size: int, other_cards_in_play: int, total_remaining: int) -> float:
    denominator = falling_factorial(total_remaining, size)
    if denominator == 0:
        return 0.0
    return min(1.0, falling_factorial(other_cards_in_play, size) / denominator)


def probability_of(hand: Hand, value: HandValue, other_cards_in_play: int) -> float:
    needed = get_needed_cards(hand, value)
    if needed is None:
        return 0.0
    if not needed:
        return 1.0

    total_remaining = DECK_SIZE - len(hand.cards)
    none_hit = 1.0
    for needed_set in needed:
        none_hit *= 1.0 - set_probability(len(needed_set), other_cards_in_play, total_remaining)
    return 1.0 - none_hit


def calculate_probabilities(hand: Hand, other_cards_in_play: int) -> List[Tuple[HandValue, float]]:
    if other_cards_in_play < 0:
        raise ValueError(f"other_cards_in_play must be non-negative, got {other_cards_in_play}")
    return [(value, probability_of(hand, value, other_cards_in_play)) for value in HandValue.all_possible()]


def best_bets(hand: Hand, other_cards_in_play: int, limit: int = 5) -> List[Tuple[HandValue, float]]:
    """Most likely bets first; among equally likely bets the stronger one leads."""
    ranked: Sequence[Tuple[HandValue, float]] = sorted(
        calculate_probabilities(hand, other_cards_in_play),
        key=lambda item: (item[1], item[0].sort_key()),
        reverse=True,
    )
    return list(ranked[:limit])
