# render.py - pygame drawing of the table view
import pygame

from klondike import common as C
from klondike.cards import Card, Color, Suit
from klondike.view_model import CardView, SlotView, TableView

# Colors
BLACK = (20, 20, 20)
WHITE = (245, 245, 245)
RED = (200, 20, 20)
BACK_BLUE = (34, 96, 200)
LIGHT = (220, 220, 220)

# Fonts are initialized via setup_fonts() AFTER pygame.init()
FONT_NAME = None
FONT_UI = None
FONT_CORNER_RANK = None
FONT_CORNER_SUIT = None

def setup_fonts():
    global FONT_NAME, FONT_UI, FONT_CORNER_RANK, FONT_CORNER_SUIT
    FONT_NAME = pygame.font.get_default_font()
    FONT_UI = pygame.font.SysFont(FONT_NAME, 26, bold=True)
    FONT_CORNER_RANK = pygame.font.SysFont(FONT_NAME, 28, bold=True)
    # Suit glyphs need a Unicode-capable font
    try:
        FONT_CORNER_SUIT = pygame.font.SysFont("Segoe UI Symbol", 26, bold=True)
    except Exception:
        FONT_CORNER_SUIT = pygame.font.SysFont(FONT_NAME, 26, bold=True)

_card_face_cache = {}   # (card, size) -> Surface
_card_back_cache = {}   # size -> Surface

def invalidate_card_caches():
    _card_face_cache.clear()
    _card_back_cache.clear()

def draw_suit_shape(surface, center, suit, color, size=42):
    x, y = center
    if suit is Suit.DIAMONDS:
        half = size//2
        points = [(x, y - half), (x + half, y), (x, y + half), (x - half, y)]
        pygame.draw.polygon(surface, color, points)
    elif suit is Suit.HEARTS:
        r = size//3
        pygame.draw.circle(surface, color, (x - r, y - r), r)
        pygame.draw.circle(surface, color, (x + r, y - r), r)
        tri = [(x - 2*r, y - r), (x + 2*r, y - r), (x, y + 2*r)]
        pygame.draw.polygon(surface, color, tri)
    elif suit is Suit.SPADES:
        r = size//3
        pygame.draw.circle(surface, color, (x - r, y), r)
        pygame.draw.circle(surface, color, (x + r, y), r)
        tri = [(x - 2*r, y), (x + 2*r, y), (x, y - 2*r)]
        pygame.draw.polygon(surface, color, tri)
        stem_w = max(6, size//6)
        pygame.draw.rect(surface, color, (x - stem_w//2, y + r, stem_w, size//2))
    else:  # clubs
        r = size//3
        pygame.draw.circle(surface, color, (x, y - r), r)
        pygame.draw.circle(surface, color, (x - r, y + r//3), r)
        pygame.draw.circle(surface, color, (x + r, y + r//3), r)
        stem_w = max(6, size//6)
        pygame.draw.rect(surface, color, (x - stem_w//2, y + r, stem_w, size//2))

def get_face_surface(card: Card, size):
    key = (card, size)
    if key in _card_face_cache:
        return _card_face_cache[key]
    w, h = size
    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    pygame.draw.rect(surf, WHITE, (0,0,w,h), border_radius=C.CARD_RADIUS)
    pygame.draw.rect(surf, BLACK, (0,0,w,h), width=3, border_radius=C.CARD_RADIUS)
    color = RED if card.color is Color.RED else BLACK
    margin = 8
    rtxt = FONT_CORNER_RANK.render(card.rank.label, True, color)
    stxt = FONT_CORNER_SUIT.render(card.suit.symbol, True, color)
    surf.blit(rtxt, (margin, margin))
    surf.blit(stxt, (margin, margin + rtxt.get_height() - 2))
    draw_suit_shape(surf, (w//2, h//2), card.suit, color, size=max(18, w // 2))
    _card_face_cache[key] = surf
    return surf

def get_back_surface(size):
    if size in _card_back_cache:
        return _card_back_cache[size]
    w, h = size
    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    pygame.draw.rect(surf, WHITE, (0,0,w,h), border_radius=C.CARD_RADIUS)
    pygame.draw.rect(surf, BLACK, (0,0,w,h), width=3, border_radius=C.CARD_RADIUS)
    inset = 8
    inner_rect = pygame.Rect(inset, inset, w-2*inset, h-2*inset)
    pygame.draw.rect(surf, BACK_BLUE, inner_rect, border_radius=8)
    for i in range(-h, w, 12):
        pygame.draw.line(surf, LIGHT, (i, 8), (i+h, h-8), 1)
    _card_back_cache[size] = surf
    return surf

def draw_slot(screen, slot: SlotView, size):
    pygame.draw.rect(
        screen,
        (255, 255, 255, 40),
        (slot.x, slot.y, size[0], size[1]),
        border_radius=C.CARD_RADIUS,
        width=2,
    )

def draw_card(screen, view: CardView, size):
    if not view.visible:
        return
    surf = get_face_surface(view.card, size) if view.face_up else get_back_surface(size)
    screen.blit(surf, (view.x, view.y))

def draw_table(screen, table: TableView):
    size = (table.card_w, table.card_h)
    screen.fill(C.TABLE_BG)
    for slot in table.slots:
        draw_slot(screen, slot, size)
    for view in table.cards:
        draw_card(screen, view, size)
    for view in table.held:
        draw_card(screen, view, size)
