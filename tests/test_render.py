from core.cards import Card, Rank, Suit
from core.render import render_card, render_cards

from .helpers import cards


def test_render_single_card():
    assert render_card(Card(Suit.HEARTS, Rank.QUEEN)) == "\n".join(
        [
            "+-----+",
            "|Q ♥  |",
            "|  ♥  |",
            "|  ♥ Q|",
            "+-----+",
        ]
    )


def test_ten_uses_the_padding_space():
    lines = render_card(Card(Suit.CLUBS, Rank.TEN)).split("\n")
    assert lines[1] == "|10♣  |"
    assert lines[3] == "|  ♣10|"
    assert len({len(line) for line in lines}) == 1


def test_render_cards_side_by_side():
    output = render_cards(cards("As", "10d")).split("\n")
    assert len(output) == 5
    assert output[0] == "+-----+ +-----+"
    assert output[1] == "|A ♠  | |10♦  |"


def test_render_empty_hand():
    assert render_cards([]) == "(no cards)"
