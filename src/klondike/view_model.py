from dataclasses import dataclass
from typing import Optional, Tuple

from klondike.cards import Card, PhysicalCard


@dataclass(frozen=True)
class CardView:
    card: Optional[Card]  # None while face-down
    x: int
    y: int
    prev_x: int
    prev_y: int
    visible: bool
    remount: str

    @property
    def face_up(self) -> bool:
        return self.card is not None

    @classmethod
    def of(cls, pc: PhysicalCard) -> "CardView":
        return cls(
            card=pc.card if pc.face_up else None,
            x=pc.x,
            y=pc.y,
            prev_x=pc.prev_x,
            prev_y=pc.prev_y,
            visible=pc.visible,
            remount=pc.remount,
        )


@dataclass(frozen=True)
class SlotView:
    pile: str
    x: int
    y: int


@dataclass(frozen=True)
class TableView:
    card_w: int
    card_h: int
    slots: Tuple[SlotView, ...]
    cards: Tuple[CardView, ...]
    held: Tuple[CardView, ...]
