from __future__ import annotations

import logging
from typing import List, Sequence

from klondike.cards import Card, PhysicalCard, Rank
from klondike.common import Layout
from klondike.piles.base import CardSink, CardSource, Pile, PileId

log = logging.getLogger(__name__)


class Foundation(Pile, CardSource, CardSink):
    """Builds up Ace..King in one suit, one card at a time.

    The suit is whatever the Ace placed first is.
    """

    def __init__(self, pid: PileId, x: int, y: int, layout: Layout):
        super().__init__(pid, x, y, layout)

    # Source
    def how_many_liftable(self, x: int, y: int) -> int:
        top = self.top
        if top is not None and top.within_bounds(x, y):
            return 1
        return 0

    def borrow(self, count: int) -> List[PhysicalCard]:
        if count > 0 and self.cards:
            return [self.cards[-1]]
        return []

    def take(self, count: int) -> List[PhysicalCard]:
        if count > 0 and self.cards:
            return [self.cards.pop()]
        return []

    # Sink
    def within_drop_bounds(self, x: int, y: int) -> bool:
        return self.anchor_bounds().contains(x, y)

    def can_accept(self, cards: Sequence[Card]) -> bool:
        if len(cards) != 1:
            return False
        card = cards[0]
        top = self.top
        if top is None:
            return card.rank is Rank.ACE
        return top.card.suit == card.suit and top.card.rank.successor == card.rank

    def accept(self, x: int, y: int, cards: List[PhysicalCard]) -> bool:
        if not self.can_accept([pc.card for pc in cards]):
            log.debug("%s rejected %s", self.pid.value, [str(pc.card) for pc in cards])
            return False
        pc = cards[0]
        pc.set_xy(self.x, self.y)
        pc.slide_from(*self.layout.grab_offset(x, y))
        pc.face_up = True
        pc.visible = True
        self.cards.append(pc)
        return True
