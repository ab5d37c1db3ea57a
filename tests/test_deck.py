import random

import pytest

from core.cards import full_deck
from core.deck import Deck, Hand
from core.errors import NotEnoughCards


@pytest.mark.parametrize("count", [0, 1, 5, 26, 51, 52])
def test_deal_partitions_the_universe(count):
    deck = Deck.standard(seed=count)
    original = list(deck.cards)
    dealt = deck.deal(count)

    assert len(dealt) == count
    assert len(deck) == 52 - count
    assert dealt.cards == original[len(original) - count :]
    combined = dealt.cards + deck.cards
    assert len(set(combined)) == 52
    assert set(combined) == set(full_deck())


def test_standard_deck_is_a_shuffled_permutation():
    deck = Deck.standard(seed=7)
    assert len(deck) == 52
    assert set(deck.cards) == set(full_deck())
    assert deck.cards != full_deck()


def test_seed_and_injected_rng_pin_the_permutation():
    assert Deck.standard(seed=99).cards == Deck.standard(seed=99).cards
    assert Deck.standard(rng=random.Random(5)).cards == Deck.standard(seed=5).cards


def test_deal_raises_when_deck_exhausted():
    deck = Deck.standard(seed=1)
    deck.deal(50)
    with pytest.raises(NotEnoughCards, match="Not enough cards"):
        deck.deal(3)
    # Failed deals leave the deck alone.
    assert len(deck) == 2


def test_second_deal_past_52_fails():
    deck = Deck.standard(seed=3)
    deck.deal(30)
    with pytest.raises(ValueError, match="Not enough cards"):
        deck.deal(23)


def test_negative_deal_rejected():
    with pytest.raises(ValueError, match="negative"):
        Deck.standard(seed=0).deal(-1)


def test_repeated_deals_never_repeat_cards():
    deck = Deck.standard(seed=11)
    seen = []
    for size in (1, 2, 3, 4, 5, 6, 7, 8, 9, 7):
        seen.extend(deck.deal(size).cards)
    assert len(seen) == 52
    assert len(set(seen)) == 52
    assert len(deck) == 0


def test_empty_hand():
    empty = Hand.empty()
    assert len(empty) == 0
    assert empty.cards == []
