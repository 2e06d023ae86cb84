"""Pile identifiers and the Source / Sink contract every pile speaks.

The controller never touches a pile's list directly; it only goes through
``CardSource`` (lift cards off) and ``CardSink`` (drop cards on), addressing
piles by ``PileId``.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Sequence, Tuple

from klondike.cards import Card, PhysicalCard
from klondike.common import Bounds, Layout


class PileId(Enum):
    STOCK = "stock"
    DISCARD = "discard"
    FOUNDATION_1 = "foundation_1"
    FOUNDATION_2 = "foundation_2"
    FOUNDATION_3 = "foundation_3"
    FOUNDATION_4 = "foundation_4"
    TABLEAU_1 = "tableau_1"
    TABLEAU_2 = "tableau_2"
    TABLEAU_3 = "tableau_3"
    TABLEAU_4 = "tableau_4"
    TABLEAU_5 = "tableau_5"
    TABLEAU_6 = "tableau_6"
    TABLEAU_7 = "tableau_7"

    @classmethod
    def foundation(cls, index: int) -> "PileId":
        return cls(f"foundation_{index + 1}")

    @classmethod
    def tableau(cls, index: int) -> "PileId":
        return cls(f"tableau_{index + 1}")


FOUNDATION_IDS: Tuple[PileId, ...] = tuple(PileId.foundation(i) for i in range(4))
TABLEAU_IDS: Tuple[PileId, ...] = tuple(PileId.tableau(i) for i in range(7))

# Query order decides which pile wins when hit zones overlap.
SOURCE_ORDER: Tuple[PileId, ...] = (PileId.DISCARD,) + FOUNDATION_IDS + TABLEAU_IDS
SINK_ORDER: Tuple[PileId, ...] = FOUNDATION_IDS + TABLEAU_IDS


class Pile:
    """Ordered cards, top of the pile at the end of ``cards``."""

    def __init__(self, pid: PileId, x: int, y: int, layout: Layout):
        self.pid = pid
        self.x, self.y = x, y
        self.layout = layout
        self.cards: List[PhysicalCard] = []

    def __len__(self):
        return len(self.cards)

    def __repr__(self):
        return f"{type(self).__name__}({self.pid.value}, {self.cards!r})"

    @property
    def top(self):
        return self.cards[-1] if self.cards else None

    def anchor_bounds(self) -> Bounds:
        return self.layout.card_bounds(self.x, self.y)

    def identities(self) -> List[Card]:
        return [pc.card for pc in self.cards]


class CardSource:
    """Pile that cards can be lifted from."""

    pid: PileId

    def how_many_liftable(self, x: int, y: int) -> int:
        """Number of cards a press at (x, y) would pick up; 0 for a miss."""
        raise NotImplementedError

    def borrow(self, count: int) -> List[PhysicalCard]:
        """Top ``count`` liftable cards, top-most last, left in place."""
        raise NotImplementedError

    def take(self, count: int) -> List[PhysicalCard]:
        """Remove and return the top ``count`` liftable cards."""
        raise NotImplementedError

    def peek(self, count: int) -> List[Card]:
        return [pc.card for pc in self.borrow(count)]

    def set_visible(self, count: int, visible: bool) -> None:
        for pc in self.borrow(count):
            pc.visible = visible

    def set_release_location(self, x: int, y: int, count: int) -> None:
        stride = self.layout.stacked_y_stride
        for i, pc in enumerate(self.borrow(count)):
            pc.slide_from(x, y + i * stride)

    def set_mouse_release_location(self, x: int, y: int, count: int) -> None:
        x, y = self.layout.grab_offset(x, y)
        self.set_release_location(x, y, count)


class CardSink:
    """Pile that cards can be dropped onto."""

    pid: PileId

    def within_drop_bounds(self, x: int, y: int) -> bool:
        raise NotImplementedError

    def can_accept(self, cards: Sequence[Card]) -> bool:
        raise NotImplementedError

    def accept(self, x: int, y: int, cards: List[PhysicalCard]) -> bool:
        """Place ``cards`` if legal. Returns False, leaving the pile untouched, otherwise."""
        raise NotImplementedError
