import pytest

from core.cards import Rank
from core.errors import InvalidArguments
from core.hand_value import (
    FourOfAKind,
    FullHouse,
    HandValue,
    HighCard,
    OnePair,
    Straight,
    ThreeOfAKind,
    TwoPair,
    describe,
)


def test_two_pair_is_canonical_regardless_of_argument_order():
    a = TwoPair(Rank.NINE, Rank.KING)
    b = TwoPair(Rank.KING, Rank.NINE)
    assert a == b
    assert hash(a) == hash(b)
    assert a.top_rank is Rank.KING
    assert a.bottom_rank is Rank.NINE


@pytest.mark.parametrize("rank", list(Rank))
def test_equal_ranks_rejected(rank):
    with pytest.raises(InvalidArguments):
        TwoPair(rank, rank)
    with pytest.raises(InvalidArguments):
        FullHouse(rank, rank)


def test_full_house_keeps_roles():
    kings_full = FullHouse(Rank.KING, Rank.FIVE)
    fives_full = FullHouse(Rank.FIVE, Rank.KING)
    assert kings_full != fives_full
    assert kings_full.triple is Rank.KING
    assert kings_full.pair is Rank.FIVE


def test_two_pair_enumeration():
    values = TwoPair.all_possible()
    assert len(values) == 78
    assert len(set(values)) == 78
    assert all(value.top_rank > value.bottom_rank for value in values)


def test_full_house_enumeration():
    values = FullHouse.all_possible()
    assert len(values) == 156
    assert len(set(values)) == 156


def test_all_possible_has_299_values_every_call():
    first = HandValue.all_possible()
    second = HandValue.all_possible()
    assert len(first) == 299
    assert first == second
    assert len(set(first)) == 299
    # Straights that can never be made are still listed.
    assert Straight(Rank.TWO) in first
    assert sum(isinstance(value, Straight) for value in first) == 13


def test_values_order_by_category_then_ranks():
    assert HighCard(Rank.ACE) < OnePair(Rank.TWO)
    assert OnePair(Rank.ACE) < TwoPair(Rank.THREE, Rank.TWO)
    assert TwoPair(Rank.ACE, Rank.KING) < ThreeOfAKind(Rank.TWO)
    assert ThreeOfAKind(Rank.ACE) < Straight(Rank.SIX)
    assert Straight(Rank.ACE) < FullHouse(Rank.TWO, Rank.THREE)
    assert FullHouse(Rank.ACE, Rank.KING) < FourOfAKind(Rank.TWO)

    assert OnePair(Rank.NINE) < OnePair(Rank.TEN)
    assert TwoPair(Rank.KING, Rank.TWO) < TwoPair(Rank.KING, Rank.THREE)
    assert FullHouse(Rank.THREE, Rank.ACE) < FullHouse(Rank.FOUR, Rank.TWO)
    assert OnePair(Rank.NINE) <= OnePair(Rank.NINE)


def test_all_possible_is_sorted():
    values = HandValue.all_possible()
    assert values == sorted(values)


def test_same_ranks_in_different_categories_are_not_equal():
    assert HighCard(Rank.FIVE) != OnePair(Rank.FIVE)
    assert len({HighCard(Rank.FIVE), OnePair(Rank.FIVE), FourOfAKind(Rank.FIVE)}) == 3


def test_describe():
    assert describe(FullHouse(Rank.QUEEN, Rank.NINE)) == "Full House (Q over 9)"
    assert describe(TwoPair(Rank.TWO, Rank.TEN)) == "Two Pair (10 and 2)"
    assert describe(Straight(Rank.JACK)) == "Straight (to J)"
    assert describe(FourOfAKind(Rank.ACE)) == "Four of a Kind (A)"
