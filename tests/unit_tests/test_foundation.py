import pytest

from klondike.cards import Card, PhysicalCard, Rank, Suit
from klondike.common import Layout
from klondike.piles.base import PileId
from klondike.piles.foundation import Foundation

LAYOUT = Layout()


def _pc(rank, suit):
    return PhysicalCard(Card(rank, suit), size=(LAYOUT.card_w, LAYOUT.card_h))


def _foundation():
    return Foundation(PileId.FOUNDATION_1, 370, 10, LAYOUT)


def test_builds_up_from_ace_in_one_suit():
    f = _foundation()
    assert not f.accept(380, 20, [_pc(Rank.TWO, Suit.SPADES)])
    assert len(f) == 0
    assert f.accept(380, 20, [_pc(Rank.ACE, Suit.SPADES)])
    assert f.accept(380, 20, [_pc(Rank.TWO, Suit.SPADES)])
    assert not f.accept(380, 20, [_pc(Rank.TWO, Suit.HEARTS)])
    assert [pc.card for pc in f.cards] == [Card(Rank.ACE, Suit.SPADES), Card(Rank.TWO, Suit.SPADES)]


def test_suit_is_set_by_first_ace():
    f = _foundation()
    assert f.accept(380, 20, [_pc(Rank.ACE, Suit.HEARTS)])
    assert not f.can_accept([Card(Rank.TWO, Suit.DIAMONDS)])
    assert f.can_accept([Card(Rank.TWO, Suit.HEARTS)])


def test_rejects_multi_card_runs():
    f = _foundation()
    assert not f.can_accept([Card(Rank.ACE, Suit.CLUBS), Card(Rank.TWO, Suit.CLUBS)])
    assert not f.can_accept([])


def test_nothing_goes_on_a_king():
    f = _foundation()
    for rank in Rank:
        assert f.accept(380, 20, [_pc(rank, Suit.CLUBS)])
    assert len(f) == 13
    assert not f.can_accept([Card(Rank.ACE, Suit.CLUBS)])


def test_accepted_card_lands_on_anchor_from_drop_point():
    f = _foundation()
    pc = _pc(Rank.ACE, Suit.DIAMONDS)
    pc.visible = False
    token = pc.remount
    assert f.accept(400, 50, [pc])
    assert pc.position == (370, 10)
    assert (pc.prev_x, pc.prev_y) == LAYOUT.grab_offset(400, 50)
    assert pc.visible
    assert pc.remount != token


@pytest.mark.parametrize("point, expected", [((380, 20), 1), ((10, 10), 0)])
def test_only_top_card_is_liftable(point, expected):
    f = _foundation()
    f.accept(380, 20, [_pc(Rank.ACE, Suit.SPADES)])
    f.accept(380, 20, [_pc(Rank.TWO, Suit.SPADES)])
    assert f.how_many_liftable(*point) == expected
    assert [c.rank for c in f.peek(5)] == [Rank.TWO]


def test_empty_foundation_lifts_nothing():
    f = _foundation()
    assert f.how_many_liftable(380, 20) == 0
    assert f.take(1) == []


def test_take_pops_top():
    f = _foundation()
    f.accept(380, 20, [_pc(Rank.ACE, Suit.SPADES)])
    f.accept(380, 20, [_pc(Rank.TWO, Suit.SPADES)])
    taken = f.take(3)
    assert [pc.card.rank for pc in taken] == [Rank.TWO]
    assert len(f) == 1


def test_drop_bounds_are_the_anchor():
    f = _foundation()
    assert f.within_drop_bounds(371, 11)
    assert not f.within_drop_bounds(360, 11)
