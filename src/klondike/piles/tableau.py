from __future__ import annotations

import logging
from typing import List, Sequence

from klondike.cards import Card, PhysicalCard, Rank
from klondike.common import Bounds, Layout
from klondike.piles.base import CardSink, CardSource, Pile, PileId

log = logging.getLogger(__name__)


class Tableau(Pile, CardSource, CardSink):
    """
    Column of overlapping cards building down in alternating colors.
    - Face-down cards always form a prefix of ``cards``; the face-up run sits on top.
    - Any face-up card can be grabbed, taking every card above it along.
    - Only a King (or a run starting with one) may fill an empty column.
    """

    def __init__(self, pid: PileId, x: int, y: int, layout: Layout):
        super().__init__(pid, x, y, layout)

    @classmethod
    def from_cards(cls, pid: PileId, x: int, y: int, layout: Layout, cards: List[PhysicalCard]) -> "Tableau":
        tableau = cls(pid, x, y, layout)
        tableau.cards = list(cards)
        last = len(tableau.cards) - 1
        for i, pc in enumerate(tableau.cards):
            pc.set_position(*tableau.slot_position(i))
            pc.face_up = i == last
        return tableau

    def slot_position(self, index: int):
        return self.x, self.y + index * self.layout.stacked_y_stride

    def face_up_cards(self) -> List[PhysicalCard]:
        run: List[PhysicalCard] = []
        for pc in reversed(self.cards):
            if not pc.face_up:
                break
            run.append(pc)
        run.reverse()
        return run

    # Source
    def how_many_liftable(self, x: int, y: int) -> int:
        for depth, pc in enumerate(reversed(self.cards)):
            if pc.within_bounds(x, y):
                # The top-most card under the pointer decides.
                return depth + 1 if pc.face_up else 0
        return 0

    def borrow(self, count: int) -> List[PhysicalCard]:
        if count <= 0:
            return []
        return self.face_up_cards()[-count:]

    def take(self, count: int) -> List[PhysicalCard]:
        taken: List[PhysicalCard] = []
        while len(taken) < count and self.cards and self.cards[-1].face_up:
            taken.append(self.cards.pop())
        taken.reverse()
        top = self.top
        if taken and top is not None and not top.face_up:
            top.face_up = True
            log.debug("%s turned over %s", self.pid.value, top.card)
        return taken

    # Sink
    def within_drop_bounds(self, x: int, y: int) -> bool:
        top_x, top_y = self.slot_position(max(len(self.cards) - 1, 0))
        return Bounds(top_x, top_y, self.layout.card_w, self.layout.card_h).contains(x, y)

    def can_accept(self, cards: Sequence[Card]) -> bool:
        if not cards:
            return False
        bottom = cards[0]
        top = self.top
        if top is None:
            return bottom.rank is Rank.KING
        if not top.face_up:
            return False
        return top.card.rank.predecessor == bottom.rank and top.card.color != bottom.color

    def accept(self, x: int, y: int, cards: List[PhysicalCard]) -> bool:
        if not self.can_accept([pc.card for pc in cards]):
            log.debug("%s rejected %s", self.pid.value, [str(pc.card) for pc in cards])
            return False
        release_x, release_y = self.layout.grab_offset(x, y)
        for i, pc in enumerate(cards):
            pc.set_xy(*self.slot_position(len(self.cards)))
            pc.slide_from(release_x, release_y + i * self.layout.stacked_y_stride)
            pc.face_up = True
            pc.visible = True
            self.cards.append(pc)
        return True
