from __future__ import annotations

from typing import Callable, Dict, Sequence

from .cards import Rank
from .errors import InvalidInput
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

# Bet text is "<keyword> <rank> [<rank>]", e.g. "quad A" or "fullhouse Q 9".

SINGLE_RANK_KEYWORDS: Dict[str, Callable[[Rank], HandValue]] = {
    "high": HighCard,
    "pair": OnePair,
    "triple": ThreeOfAKind,
    "straight": Straight,
    "quad": FourOfAKind,
}

TWO_RANK_KEYWORDS: Dict[str, Callable[[Rank, Rank], HandValue]] = {
    "twopair": TwoPair,
    "fullhouse": FullHouse,
}

KEYWORDS = tuple(SINGLE_RANK_KEYWORDS) + tuple(TWO_RANK_KEYWORDS)


def parse_rank(token: str) -> Rank:
    rank = Rank.parse(token.strip().upper())
    if rank is None:
        raise InvalidInput(f"Unknown rank: {token!r}")
    return rank


def parse_hand_value(text: str) -> HandValue:
    tokens = text.split()
    if not tokens:
        raise InvalidInput("Empty bet")
    keyword, rank_tokens = tokens[0].lower(), tokens[1:]

    if keyword in SINGLE_RANK_KEYWORDS:
        _expect_ranks(keyword, rank_tokens, 1)
        return SINGLE_RANK_KEYWORDS[keyword](parse_rank(rank_tokens[0]))
    if keyword in TWO_RANK_KEYWORDS:
        _expect_ranks(keyword, rank_tokens, 2)
        first, second = (parse_rank(token) for token in rank_tokens)
        return TWO_RANK_KEYWORDS[keyword](first, second)
    raise InvalidInput(f"Unknown bet {keyword!r}; expected one of {', '.join(KEYWORDS)}")


def _expect_ranks(keyword: str, tokens: Sequence[str], count: int) -> None:
    if len(tokens) != count:
        noun = "rank" if count == 1 else "ranks"
        raise InvalidInput(f"'{keyword}' takes exactly {count} {noun}, got {len(tokens)}")


def format_hand_value(value: HandValue) -> str:
    """Bet text that parses back to ``value``."""
    if isinstance(value, TwoPair):
        return f"twopair {value.top_rank} {value.bottom_rank}"
    if isinstance(value, FullHouse):
        return f"fullhouse {value.triple} {value.pair}"
    for keyword, variant in SINGLE_RANK_KEYWORDS.items():
        if type(value) is variant:
            return f"{keyword} {value.ranks()[0]}"
    raise TypeError(f"Unknown hand value: {value!r}")
