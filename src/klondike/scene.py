# scene.py - pygame scene wrapping the game controller
import logging

import pygame

from klondike import render as R
from klondike.controller import GameController

log = logging.getLogger(__name__)


class Scene:
    def __init__(self, app):
        self.app = app
        self.next_scene = None
        self.quit_requested = False
    def handle_event(self, e): pass
    def update(self, dt): pass
    def draw(self, screen): pass


class KlondikeScene(Scene):
    """Feeds left-button mouse events to the controller and draws its view."""

    def __init__(self, app, controller=None):
        super().__init__(app)
        self.controller = controller or GameController()
        self.message = ""

    def handle_event(self, e):
        ctl = self.controller
        if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
            ctl.pointer_down(*e.pos)
        elif e.type == pygame.MOUSEMOTION:
            ctl.pointer_move(*e.pos)
        elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
            if ctl.pointer_up(*e.pos) and ctl.is_won():
                self.message = "You won! Press N for a new game."
                log.info("game won")
        elif e.type == pygame.KEYDOWN:
            if e.key == pygame.K_n:
                ctl.new_game()
                self.message = ""
            elif e.key == pygame.K_ESCAPE:
                self.quit_requested = True

    def draw(self, screen):
        R.draw_table(screen, self.controller.visual_state())
        if self.message:
            msg = R.FONT_UI.render(self.message, True, (255, 255, 180))
            w, h = screen.get_size()
            screen.blit(msg, (w//2 - msg.get_width()//2, h - 40))
