"""Game controller: owns every pile and turns pointer intents into moves.

The controller is a two-state machine. While idle, a press either advances
the stock or lifts a run off the first source that reports something
liftable under the pointer. While holding, moves only drag the run, and the
release either drops it on the first sink that will take it or lets it snap
back into its origin pile.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional, Tuple, Union

from klondike import common as C
from klondike.cards import Card, PhysicalCard, make_deck
from klondike.piles.base import (
    FOUNDATION_IDS,
    SINK_ORDER,
    SOURCE_ORDER,
    TABLEAU_IDS,
    CardSink,
    CardSource,
    Pile,
    PileId,
)
from klondike.piles.foundation import Foundation
from klondike.piles.stock_discard import StockDiscard
from klondike.piles.tableau import Tableau
from klondike.view_model import CardView, SlotView, TableView

log = logging.getLogger(__name__)


class HeldCard:
    """The run currently being dragged.

    The cards themselves stay in their origin pile, hidden, until the
    release decides where they go; this only records what was lifted.
    """

    def __init__(self, cards: Tuple[Card, ...], source: PileId, x: int, y: int, origin: Tuple[int, int]):
        self.cards = cards
        self.source = source
        self.x, self.y = x, y
        self.prev_pos: Optional[Tuple[int, int]] = origin
        self.origin = origin

    @classmethod
    def lift(cls, source: CardSource, count: int, mouse_x: int, mouse_y: int, layout: C.Layout) -> "HeldCard":
        run = source.borrow(count)
        x, y = layout.grab_offset(mouse_x, mouse_y)
        return cls(tuple(pc.card for pc in run), source.pid, x, y, run[0].position)

    def __len__(self):
        return len(self.cards)

    def set_position(self, x: int, y: int) -> None:
        self.prev_pos = (self.x, self.y)
        self.x, self.y = x, y


def deal(
    layout: C.Layout,
    rng: Optional[random.Random] = None,
    draw_count: int = 3,
) -> Tuple[StockDiscard, List[Foundation], List[Tableau]]:
    """Shuffle a fresh deck and lay out a new game.

    Tableau i (1-based) receives i cards with only the last one face-up;
    the remaining 24 cards form the face-down stock.
    """
    size = (layout.card_w, layout.card_h)
    stock_cards = [PhysicalCard(card, size=size) for card in make_deck(shuffle=True, rng=rng)]

    tableaus: List[Tableau] = []
    for i, pid in enumerate(TABLEAU_IDS):
        cards, stock_cards = stock_cards[: i + 1], stock_cards[i + 1:]
        x, y = layout.tableau_anchor(i)
        tableaus.append(Tableau.from_cards(pid, x, y, layout, cards))

    foundations = [Foundation(pid, *layout.foundation_anchor(i), layout) for i, pid in enumerate(FOUNDATION_IDS)]
    stock_discard = StockDiscard.from_cards(layout, stock_cards, draw_count=draw_count)
    return stock_discard, foundations, tableaus


class GameController:
    def __init__(
        self,
        layout: Optional[C.Layout] = None,
        draw_count: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        self.layout = layout or C.current_layout()
        if draw_count is None:
            draw_count = C.get_current_settings()["draw_count"]
        self.draw_count = draw_count
        self.held: Optional[HeldCard] = None
        self.new_game(rng)

    # ---------- Setup ----------
    def new_game(self, rng: Optional[random.Random] = None) -> None:
        self.stock_discard, self.foundations, self.tableaus = deal(self.layout, rng, self.draw_count)
        self.held = None
        self._piles: Dict[PileId, Pile] = {
            PileId.STOCK: self.stock_discard.stock,
            PileId.DISCARD: self.stock_discard.discard,
        }
        for pile in self.foundations + self.tableaus:
            self._piles[pile.pid] = pile
        log.debug("new game dealt, %d cards in stock", len(self.stock_discard.stock))

    # ---------- Registry ----------
    def pile(self, pid: PileId) -> Pile:
        return self._piles[pid]

    def source(self, pid: PileId) -> Union[Pile, CardSource]:
        pile = self._piles[pid]
        assert isinstance(pile, CardSource), f"{pid.value} is not a card source"
        return pile

    def sink(self, pid: PileId) -> Union[Pile, CardSink]:
        pile = self._piles[pid]
        assert isinstance(pile, CardSink), f"{pid.value} is not a card sink"
        return pile

    def piles(self) -> List[Pile]:
        return list(self._piles.values())

    # ---------- Pointer intents ----------
    def pointer_down(self, x: int, y: int) -> bool:
        if self.held is not None:
            return False
        if self.stock_discard.handle_click(x, y):
            return True
        for pid in SOURCE_ORDER:
            source = self.source(pid)
            count = source.how_many_liftable(x, y)
            if count:
                self.held = HeldCard.lift(source, count, x, y, self.layout)
                source.set_visible(count, False)
                log.debug("picked up %s from %s", [str(c) for c in self.held.cards], pid.value)
                return True
        return False

    def pointer_move(self, x: int, y: int) -> bool:
        if self.held is None:
            return False
        self.held.set_position(*self.layout.grab_offset(x, y))
        return True

    def pointer_up(self, x: int, y: int) -> bool:
        held = self.held
        if held is None:
            return False
        self.held = None
        source = self.source(held.source)
        for pid in SINK_ORDER:
            sink = self.sink(pid)
            if sink.within_drop_bounds(x, y) and sink.can_accept(held.cards):
                run = source.take(len(held))
                assert tuple(pc.card for pc in run) == held.cards, "held run no longer on top of its source"
                placed = sink.accept(x, y, run)
                assert placed, f"{pid.value} refused a run it said it could accept"
                log.debug("moved %s from %s to %s", [str(c) for c in held.cards], held.source.value, pid.value)
                return True
        source.set_visible(len(held), True)
        source.set_mouse_release_location(x, y, len(held))
        log.debug("returned %s to %s", [str(c) for c in held.cards], held.source.value)
        return True

    # ---------- Queries ----------
    def all_cards(self) -> List[Card]:
        cards: List[Card] = []
        for pile in self._piles.values():
            cards.extend(pile.identities())
        return cards

    def is_won(self) -> bool:
        return all(len(f) == 13 for f in self.foundations)

    def visual_state(self) -> TableView:
        slots = tuple(SlotView(pile.pid.value, pile.x, pile.y) for pile in self._piles.values())
        draw_order = self.foundations + self.tableaus + [self.stock_discard.stock, self.stock_discard.discard]
        cards = tuple(CardView.of(pc) for pile in draw_order for pc in pile.cards)
        held: Tuple[CardView, ...] = ()
        if self.held is not None:
            stride = self.layout.stacked_y_stride
            from_x, from_y = self.held.prev_pos or (self.held.x, self.held.y)
            held = tuple(
                CardView(
                    card=card,
                    x=self.held.x,
                    y=self.held.y + i * stride,
                    prev_x=from_x,
                    prev_y=from_y + i * stride,
                    visible=True,
                    remount=f"held-{i}",
                )
                for i, card in enumerate(self.held.cards)
            )
        return TableView(self.layout.card_w, self.layout.card_h, slots, cards, held)
