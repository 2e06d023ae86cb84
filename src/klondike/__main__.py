# __main__.py - entry point
import logging
import os

import pygame

from klondike import common as C
from klondike import render as R
from klondike.scene import KlondikeScene

log = logging.getLogger(__name__)

def _initial_window_size():
    info = pygame.display.Info()
    # Keep a safety margin so the window never hides under taskbar
    margin_w, margin_h = 120, 140
    w = min(C.SCREEN_W, max(640, info.current_w - margin_w))
    h = min(C.SCREEN_H, max(480, info.current_h - margin_h))
    return w, h

def main():
    settings = C.apply_env_overrides()
    C.setup_logging(settings["log_level"])

    # Center window and init
    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.init()

    w, h = _initial_window_size()
    C.SCREEN_W, C.SCREEN_H = w, h
    screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
    pygame.display.set_caption("Klondike")
    R.setup_fonts()
    clock = pygame.time.Clock()
    log.info("starting with %s cards, draw %d", settings["card_size"], settings["draw_count"])

    scene = KlondikeScene(app=None)
    running = True
    while running:
        dt = clock.tick(60) / 1000.0
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
                continue
            if e.type == pygame.VIDEORESIZE:
                C.SCREEN_W, C.SCREEN_H = e.size
                screen = pygame.display.set_mode((C.SCREEN_W, C.SCREEN_H), pygame.RESIZABLE)
                continue
            scene.handle_event(e)
        if scene.quit_requested:
            running = False
        if scene.next_scene is not None:
            scene = scene.next_scene
        scene.update(dt)
        scene.draw(screen)
        pygame.display.flip()
    pygame.quit()

if __name__ == "__main__":
    main()
