# common.py - shared settings, table geometry and logging for the Klondike engine
import os
import json
import logging
import sys
from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

# Defaults (may be overridden by persisted settings)
_DEFAULT_SETTINGS = {
    "card_size": "Medium",   # Small | Medium | Large
    "draw_count": 3,         # 1 | 3
    "log_level": "WARNING",
}

_CURRENT_SETTINGS = dict(_DEFAULT_SETTINGS)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def _settings_dir() -> str:
    # Prefer %APPDATA% on Windows, else ~/.klondike_engine
    base = os.environ.get("APPDATA")
    if base:
        return os.path.join(base, "KlondikeEngine")
    return os.path.join(os.path.expanduser("~"), ".klondike_engine")

def _settings_path() -> str:
    return os.path.join(_settings_dir(), "settings.json")

def get_current_settings():
    return dict(_CURRENT_SETTINGS)

def _coerce_draw_count(value) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        return _DEFAULT_SETTINGS["draw_count"]
    return n if n in (1, 3) else _DEFAULT_SETTINGS["draw_count"]

def load_settings(path: Optional[str] = None):
    global _CURRENT_SETTINGS
    try:
        with open(path or _settings_path(), "r", encoding="utf-8") as f:
            data = json.load(f)
            if isinstance(data, dict):
                _CURRENT_SETTINGS.update({
                    "card_size": str(data.get("card_size", _CURRENT_SETTINGS["card_size"])),
                    "draw_count": _coerce_draw_count(data.get("draw_count", _CURRENT_SETTINGS["draw_count"])),
                    "log_level": str(data.get("log_level", _CURRENT_SETTINGS["log_level"])),
                })
    except Exception:
        pass
    return get_current_settings()

def save_settings(new_values: dict, path: Optional[str] = None):
    # Merge and write to disk
    global _CURRENT_SETTINGS
    _CURRENT_SETTINGS.update({
        k: new_values[k] for k in ("card_size", "draw_count", "log_level") if k in new_values
    })
    _CURRENT_SETTINGS["draw_count"] = _coerce_draw_count(_CURRENT_SETTINGS["draw_count"])
    target = path or _settings_path()
    try:
        os.makedirs(os.path.dirname(target), exist_ok=True)
        with open(target, "w", encoding="utf-8") as f:
            json.dump(_CURRENT_SETTINGS, f, indent=2)
    except Exception:
        pass

def apply_env_overrides():
    """Let KLONDIKE_* environment variables win over the settings file."""
    size = os.environ.get("KLONDIKE_CARD_SIZE", "").strip().capitalize()
    if size in ("Small", "Medium", "Large"):
        _CURRENT_SETTINGS["card_size"] = size
    draw = os.environ.get("KLONDIKE_DRAW_COUNT", "").strip()
    if draw:
        _CURRENT_SETTINGS["draw_count"] = _coerce_draw_count(draw)
    level = os.environ.get("KLONDIKE_LOG_LEVEL", "").strip().upper()
    if level:
        _CURRENT_SETTINGS["log_level"] = level
    return get_current_settings()

def _size_to_dims(size_name: str) -> Tuple[int, int]:
    size_name = (size_name or "Medium").capitalize()
    if size_name == "Small":
        return 75, 105
    if size_name == "Large":
        return 150, 210
    return 100, 140

def setup_logging(level: str = "WARNING") -> None:
    """Configure root logging once for the application."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


# ---------- Geometry ----------
SCREEN_W, SCREEN_H = 1280, 800
GREEN_TABLE = (2, 100, 40)
TABLE_BG = GREEN_TABLE

CARD_RADIUS = 10


class Bounds(pygame.Rect):
    """Card-sized hit-test rectangle anchored at a pile or card position."""

    def contains(self, x: int, y: int) -> bool:
        return bool(self.collidepoint(x, y))


@dataclass(frozen=True)
class Layout:
    """Pixel geometry of the table.

    Only offsets needed for hit-testing and stacking live here; anything
    purely decorative belongs to the presentation layer.
    """

    card_w: int = 100
    card_h: int = 140
    padding: int = 10
    gap: int = 20
    stacked_x_stride: int = 28
    stacked_y_stride: int = 36

    @classmethod
    def for_card_size(cls, size_name: str) -> "Layout":
        w, h = _size_to_dims(size_name)
        return cls(card_w=w, card_h=h, stacked_x_stride=w * 28 // 100, stacked_y_stride=h * 26 // 100)

    @property
    def card_x_stride(self) -> int:
        return self.card_w + self.gap

    @property
    def card_y_stride(self) -> int:
        return self.card_h + self.gap

    def stock_anchor(self) -> Tuple[int, int]:
        return self.padding, self.padding

    def discard_anchor(self) -> Tuple[int, int]:
        return self.padding + self.card_x_stride, self.padding

    def foundation_anchor(self, index: int) -> Tuple[int, int]:
        return self.padding + (3 + index) * self.card_x_stride, self.padding

    def tableau_anchor(self, index: int) -> Tuple[int, int]:
        return self.padding + index * self.card_x_stride, self.padding + self.card_y_stride

    def card_bounds(self, x: int, y: int) -> Bounds:
        return Bounds(x, y, self.card_w, self.card_h)

    def grab_offset(self, mouse_x: int, mouse_y: int) -> Tuple[int, int]:
        """Top-left of a card held centred under the pointer."""
        return mouse_x - self.card_w // 2, mouse_y - self.card_h // 2


def current_layout() -> Layout:
    return Layout.for_card_size(_CURRENT_SETTINGS.get("card_size", "Medium"))


# Load any persisted settings now
load_settings()
