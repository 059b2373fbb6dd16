import logging
import sys

import pygame

from tetris_audio import Audio
from tetris_config import CONFIG, LANGUAGE_KEY, setup_logging
from tetris_i18n import Translator
from tetris_input import KeyboardControls, PointerControls
from tetris_layout import compute_dims
from tetris_overlay import Overlay
from tetris_render import RenderAssets
from tetris_rng import PieceGenerator
from tetris_session import GameSession, State
from tetris_storage import JsonStore
from tetris_theme import get_theme

logger = logging.getLogger(__name__)


def create_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode(dims.size, flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode(dims.size, flags)


def main():
    setup_logging()
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN,
                              pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION])

    dims = compute_dims()
    screen = create_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont(None, 48)
    clock = pygame.time.Clock()

    store = JsonStore()
    tr = Translator(store.load_preference(LANGUAGE_KEY))
    audio = Audio(store)
    session = GameSession(store=store, audio=audio,
                          generator=PieceGenerator(CONFIG["PIECE_SEED"]),
                          clock=pygame.time.get_ticks)

    render = None
    def apply_theme(theme):
        render.set_theme(theme)
    overlay = Overlay(session, audio, tr, store, on_theme=apply_theme)
    render = RenderAssets(dims, font, get_theme(overlay.theme_name))

    keyboard = KeyboardControls(session)
    # Touches reach us as SDL's emulated mouse events, so one channel covers both.
    pointer = PointerControls(session, dims.cell)

    logger.info("Started, store at %s", store.path)
    while True:
        clock.tick(CONFIG["FPS"])
        now = pygame.time.get_ticks()

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                if session.state == State.PLAYING and e.key == pygame.K_ESCAPE:
                    session.pause(); continue
                if keyboard.handle_key(e.key):
                    continue
                if overlay.active:
                    overlay.handle_key(e.key)
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if overlay.active:
                    overlay.handle_click(e.pos)
                elif dims.preview.inflate(12, 12).collidepoint(e.pos):
                    session.swap()
                elif dims.board.collidepoint(e.pos):
                    pointer.begin(e.pos[0], e.pos[1], now)
            elif e.type == pygame.MOUSEMOTION and pointer.active:
                pointer.move(e.pos[0], e.pos[1])
            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1 and pointer.active:
                pointer.end(e.pos[0], e.pos[1], now)

        session.tick(now)

        render.draw_game(screen, session, tr, now)
        overlay.draw(screen, font, big_font, render.theme)
        pygame.display.flip()


if __name__ == '__main__':
    main()
