from __future__ import annotations

import logging
from typing import List

from klondike.cards import PhysicalCard
from klondike.common import Layout
from klondike.piles.base import CardSource, Pile, PileId

log = logging.getLogger(__name__)

# Number of discard cards fanned out to the right of the discard anchor.
FAN_WIDTH = 3


class Stock(Pile):
    """Face-down draw pile. Only ever touched through ``StockDiscard.advance``."""

    def __init__(self, x: int, y: int, layout: Layout):
        super().__init__(PileId.STOCK, x, y, layout)

    @classmethod
    def from_cards(cls, x: int, y: int, layout: Layout, cards: List[PhysicalCard]) -> "Stock":
        stock = cls(x, y, layout)
        for pc in cards:
            pc.set_position(stock.x, stock.y)
            pc.face_up = False
        stock.cards = list(cards)
        return stock

    def take_cards(self, count: int) -> List[PhysicalCard]:
        """Pop up to ``count`` cards, first popped first."""
        cards: List[PhysicalCard] = []
        for _ in range(count):
            if not self.cards:
                break
            cards.append(self.cards.pop())
        return cards

    def deposit_cards(self, cards: List[PhysicalCard]) -> None:
        last = len(cards) - 1
        for i, pc in enumerate(cards):
            # Only the card that ends up on top gets to animate back.
            if i == last:
                pc.move_to(self.x, self.y)
            else:
                pc.set_position(self.x, self.y)
            pc.face_up = False
            pc.visible = True
        self.cards.extend(cards)

    def within_bounds(self, x: int, y: int) -> bool:
        return self.anchor_bounds().contains(x, y)


class Discard(Pile, CardSource):
    """Face-up cards drawn from the stock; only the top card can be lifted."""

    def __init__(self, x: int, y: int, layout: Layout):
        super().__init__(PileId.DISCARD, x, y, layout)

    def fan_position(self, depth: int):
        """Position of the card ``depth`` places below the top (0 = top)."""
        n = min(len(self.cards), FAN_WIDTH)
        offset = FAN_WIDTH - 1 - depth if depth < n else 0
        return self.x + offset * self.layout.stacked_x_stride, self.y

    def _relayout(self) -> None:
        for depth, pc in enumerate(reversed(self.cards)):
            pos = self.fan_position(depth)
            if depth < FAN_WIDTH:
                if pc.position != pos:
                    pc.move_to(*pos)
            elif pc.position != pos:
                pc.set_position(*pos)

    def add_cards(self, cards: List[PhysicalCard]) -> None:
        for pc in cards:
            pc.face_up = True
            pc.visible = True
        self.cards.extend(cards)
        self._relayout()

    def take_all(self) -> List[PhysicalCard]:
        cards, self.cards = self.cards, []
        return cards

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
        if count <= 0 or not self.cards:
            return []
        taken = [self.cards.pop()]
        self._relayout()
        return taken


class StockDiscard:
    """The stock and its discard, advanced together by clicks on the stock."""

    def __init__(self, stock: Stock, discard: Discard, draw_count: int = 3):
        self.stock = stock
        self.discard = discard
        self.draw_count = draw_count

    @classmethod
    def from_cards(cls, layout: Layout, cards: List[PhysicalCard], draw_count: int = 3) -> "StockDiscard":
        sx, sy = layout.stock_anchor()
        dx, dy = layout.discard_anchor()
        return cls(Stock.from_cards(sx, sy, layout, cards), Discard(dx, dy, layout), draw_count=draw_count)

    def handle_click(self, x: int, y: int) -> bool:
        if self.stock.within_bounds(x, y):
            self.advance()
            return True
        return False

    def advance(self) -> None:
        cards = self.stock.take_cards(self.draw_count)
        if cards:
            self.discard.add_cards(cards)
            log.debug("dealt %s to discard", [str(pc.card) for pc in cards])
            return
        recycled = self.discard.take_all()
        recycled.reverse()
        self.stock.deposit_cards(recycled)
        log.debug("recycled %d discard cards into stock", len(recycled))
