from __future__ import annotations

from typing import List, Sequence

from .cards import Card, Rank

CARD_BORDER = "+-----+"


def render_card_lines(card: Card) -> List[str]:
    # "10" is two characters wide, so it eats the padding space.
    gap = "" if card.rank == Rank.TEN else " "
    return [
        CARD_BORDER,
        f"|{card.rank}{gap}{card.suit}  |",
        f"|  {card.suit}  |",
        f"|  {card.suit}{gap}{card.rank}|",
        CARD_BORDER,
    ]


def render_card(card: Card) -> str:
    return "\n".join(render_card_lines(card))


def render_cards(cards: Sequence[Card]) -> str:
    if not cards:
        return "(no cards)"
    columns = [render_card_lines(card) for card in cards]
    return "\n".join(" ".join(row) for row in zip(*columns))
