from collections import Counter

import pytest

from klondike.cards import DECK, Card, Color, PhysicalCard, Rank, Suit, make_deck


def test_deck_has_52_distinct_cards():
    assert len(DECK) == 52
    assert len(set(DECK)) == 52
    assert [c.suit for c in DECK[::13]] == [Suit.SPADES, Suit.CLUBS, Suit.HEARTS, Suit.DIAMONDS]


def test_make_deck_shuffles_without_losing_cards():
    import random

    deck = make_deck(shuffle=True, rng=random.Random(3))
    assert Counter(deck) == Counter(DECK)
    assert deck != list(DECK)


@pytest.mark.parametrize(
    "suit, color",
    [
        (Suit.SPADES, Color.BLACK),
        (Suit.CLUBS, Color.BLACK),
        (Suit.DIAMONDS, Color.RED),
        (Suit.HEARTS, Color.RED),
    ],
)
def test_suit_color(suit, color):
    assert suit.color is color
    assert Card(Rank.SEVEN, suit).color is color


def test_rank_successor_and_predecessor():
    assert Rank.ACE.predecessor is None
    assert Rank.KING.successor is None
    assert Rank.ACE.successor is Rank.TWO
    assert Rank.KING.predecessor is Rank.QUEEN
    for rank in list(Rank)[1:-1]:
        assert rank.successor.predecessor is rank


@pytest.mark.parametrize(
    "card, text",
    [
        (Card(Rank.ACE, Suit.SPADES), "A♠"),
        (Card(Rank.TEN, Suit.HEARTS), "10♥"),
        (Card(Rank.QUEEN, Suit.DIAMONDS), "Q♦"),
        (Card(Rank.SEVEN, Suit.CLUBS), "7♣"),
    ],
)
def test_card_str(card, text):
    assert str(card) == text


def test_move_to_records_previous_position_and_new_token():
    pc = PhysicalCard(Card(Rank.FIVE, Suit.CLUBS), 10, 20)
    token = pc.remount
    pc.move_to(50, 60)
    assert pc.position == (50, 60)
    assert (pc.prev_x, pc.prev_y) == (10, 20)
    assert pc.remount != token


def test_set_position_keeps_token():
    pc = PhysicalCard(Card(Rank.FIVE, Suit.CLUBS), 10, 20)
    token = pc.remount
    pc.set_position(30, 40)
    assert (pc.prev_x, pc.prev_y) == (30, 40)
    assert pc.remount == token


def test_within_bounds_uses_card_size():
    pc = PhysicalCard(Card(Rank.TWO, Suit.HEARTS), 100, 100, size=(50, 70))
    assert pc.within_bounds(100, 100)
    assert pc.within_bounds(149, 169)
    assert not pc.within_bounds(150, 120)
    assert not pc.within_bounds(99, 120)
