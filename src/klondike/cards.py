"""Card identities and the physical cards that move around the table.

``Card`` is the immutable (rank, suit) identity; ``PhysicalCard`` is one of
the 52 mutable instances that piles own, carrying its position, face state,
visibility and a remount token for the presentation layer.
"""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

from klondike.common import Bounds


class Color(str, Enum):
    RED = "red"
    BLACK = "black"


class Suit(IntEnum):
    SPADES = 0
    CLUBS = 1
    HEARTS = 2
    DIAMONDS = 3

    @property
    def color(self) -> Color:
        if self in (Suit.DIAMONDS, Suit.HEARTS):
            return Color.RED
        return Color.BLACK

    @property
    def symbol(self) -> str:
        return {
            Suit.SPADES: "♠",
            Suit.CLUBS: "♣",
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
        }[self]


class Rank(IntEnum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def successor(self) -> Optional["Rank"]:
        if self is Rank.KING:
            return None
        return Rank(self + 1)

    @property
    def predecessor(self) -> Optional["Rank"]:
        if self is Rank.ACE:
            return None
        return Rank(self - 1)

    @property
    def label(self) -> str:
        return {Rank.ACE: "A", Rank.JACK: "J", Rank.QUEEN: "Q", Rank.KING: "K"}.get(self, str(int(self)))


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    @property
    def color(self) -> Color:
        return self.suit.color

    def __str__(self) -> str:
        return f"{self.rank.label}{self.suit.symbol}"


# Suit order Spades, Clubs, Hearts, Diamonds; Ace..King within each suit.
DECK: Tuple[Card, ...] = tuple(Card(rank, suit) for suit in Suit for rank in Rank)


def make_deck(shuffle: bool = True, rng: Optional[random.Random] = None) -> List[Card]:
    d = list(DECK)
    if shuffle:
        (rng or random).shuffle(d)
    return d


_remount_tokens = itertools.count(1)


def _next_remount_token() -> str:
    return f"card-{next(_remount_tokens)}"


class PhysicalCard:
    """A Card placed on the table.

    ``prev_x``/``prev_y`` hold where the card is coming from; presentation
    animates from there to ``x``/``y``. ``move_to`` also issues a fresh
    remount token so the presentation treats the card as a new element.
    """

    __slots__ = ("card", "x", "y", "prev_x", "prev_y", "face_up", "visible", "remount", "_size")

    def __init__(self, card: Card, x: int = 0, y: int = 0, size: Tuple[int, int] = (100, 140)):
        self.card = card
        self.x, self.y = x, y
        self.prev_x, self.prev_y = x, y
        self.face_up = True
        self.visible = True
        self.remount = _next_remount_token()
        self._size = size

    def __repr__(self):
        return f"{self.card}{'↑' if self.face_up else '↓'}@({self.x},{self.y})"

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def size(self) -> Tuple[int, int]:
        return self._size

    def set_prev_loc(self, x: int, y: int) -> None:
        self.prev_x, self.prev_y = x, y

    def set_xy(self, x: int, y: int) -> None:
        self.x, self.y = x, y

    def set_position(self, x: int, y: int) -> None:
        """Place without animation."""
        self.set_prev_loc(x, y)
        self.set_xy(x, y)

    def move_to(self, x: int, y: int) -> None:
        """Relocate, animating from the current position."""
        self.set_prev_loc(self.x, self.y)
        self.set_xy(x, y)
        self.remount = _next_remount_token()

    def slide_from(self, x: int, y: int) -> None:
        """Animate from (x, y) to where the card already is."""
        self.set_prev_loc(x, y)
        self.remount = _next_remount_token()

    def within_bounds(self, x: int, y: int) -> bool:
        w, h = self._size
        return Bounds(self.x, self.y, w, h).contains(x, y)
