
"""Menu screens drawn over the board for every non-PLAYING state"""
import logging
from typing import Callable, List, Tuple

import pygame

from tetris_config import CONFIG, LANGUAGE_KEY, THEME_KEY
from tetris_i18n import TRANSLATIONS
from tetris_session import State
from tetris_theme import THEMES, resolve_theme_name, theme_names

logger = logging.getLogger(__name__)


def _cycle(options: List[str], current: str, step: int) -> str:
    i = options.index(current) if current in options else 0
    return options[(i + step) % len(options)]


class Overlay:
    """
    Keyboard (up/down, left/right, enter) and mouse driven menu.

    Each state has its own item list; an item is (label_key, action).
    Actions receive a step of +1/-1 so option items can cycle both ways.
    """
    def __init__(self, session, audio, tr, store, on_theme: Callable[[dict], None]):
        self.session = session
        self.audio = audio
        self.tr = tr
        self.store = store
        self.on_theme = on_theme
        self.theme_name = self._load_theme_name()
        self.index = 0
        self._state = None
        self._rects: List[pygame.Rect] = []

    @property
    def active(self) -> bool:
        return self.session.state != State.PLAYING

    def _load_theme_name(self) -> str:
        return resolve_theme_name(self.store.load_preference(THEME_KEY, CONFIG["DEFAULT_THEME"]))

    # ---------- items ----------
    def items(self) -> List[Tuple[str, Callable[[int], None]]]:
        s = self.session
        state = s.state
        if state == State.MENU:
            return [
                ("start", lambda _: s.start_game()),
                ("high_scores", lambda _: s.show_high_scores()),
                ("theme", self.change_theme),
                ("language", self.change_language),
                ("dynamic_speed", lambda _: s.set_dynamic_speed(not s.dynamic_speed)),
                ("music", lambda _: self.audio.toggle_music_mute()),
                ("sfx", lambda _: self.audio.toggle_sfx_mute()),
            ]
        if state == State.PAUSED:
            return [
                ("resume", lambda _: s.resume()),
                ("restart", lambda _: s.restart()),
                ("main_menu", lambda _: s.go_to_menu()),
                ("music", lambda _: self.audio.toggle_music_mute()),
                ("sfx", lambda _: self.audio.toggle_sfx_mute()),
            ]
        if state == State.GAMEOVER:
            return [
                ("continue", lambda _: s.continue_after_game_over()),
                ("restart", lambda _: s.restart()),
                ("main_menu", lambda _: s.go_to_menu()),
            ]
        if state == State.HIGH_SCORES:
            return [("back", lambda _: s.back_to_menu())]
        return []

    def item_text(self, key: str) -> str:
        tr = self.tr
        if key == "theme":
            return f"{tr('theme')}: {THEMES[self.theme_name]['name']}"
        if key == "language":
            return f"{tr('language')}: {self.tr.lang.upper()}"
        if key == "dynamic_speed":
            return f"{tr('dynamic_speed')}: {tr('on') if self.session.dynamic_speed else tr('off')}"
        if key == "music":
            return f"{tr('music')}: {tr('off') if self.audio.music_muted else tr('on')}"
        if key == "sfx":
            return f"{tr('sfx')}: {tr('off') if self.audio.sfx_muted else tr('on')}"
        return tr(key)

    def change_theme(self, step: int):
        self.theme_name = _cycle(theme_names(), self.theme_name, step)
        self.store.save_preference(THEME_KEY, self.theme_name)
        self.on_theme(THEMES[self.theme_name])

    def change_language(self, step: int):
        lang = self.tr.set_language(_cycle(list(TRANSLATIONS), self.tr.lang, step))
        self.store.save_preference(LANGUAGE_KEY, lang)

    def activate(self, index: int, step: int = 1):
        items = self.items()
        if not 0 <= index < len(items):
            return
        self.audio.button_click()
        key, action = items[index]
        logger.debug("Menu action %s in %s", key, self.session.state.value)
        action(step)

    # ---------- events ----------
    def _sync(self):
        if self.session.state != self._state:
            self._state = self.session.state
            self.index = 0

    def handle_key(self, key: int) -> bool:
        self._sync()
        n = len(self.items())
        if not n:
            return False
        if key == pygame.K_UP:
            self.index = (self.index - 1) % n
        elif key == pygame.K_DOWN:
            self.index = (self.index + 1) % n
        elif key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE, pygame.K_RIGHT):
            self.activate(self.index, 1)
        elif key == pygame.K_LEFT:
            self.activate(self.index, -1)
        elif key == pygame.K_ESCAPE and self.session.state == State.HIGH_SCORES:
            self.activate(0)
        else:
            return False
        return True

    def handle_click(self, pos) -> bool:
        self._sync()
        for i, rect in enumerate(self._rects):
            if rect.collidepoint(pos):
                self.index = i
                self.activate(i)
                return True
        return False

    # ---------- drawing ----------
    def draw(self, screen, font, big_font, theme: dict):
        if not self.active:
            return
        self._sync()
        w, h = screen.get_size()
        shade = pygame.Surface((w, h), pygame.SRCALPHA)
        shade.fill((*theme["body_bg"], 215))
        screen.blit(shade, (0, 0))

        s, tr = self.session, self.tr
        title_key = {
            State.MENU: "title", State.PAUSED: "paused",
            State.GAMEOVER: "game_over", State.HIGH_SCORES: "high_scores",
        }[s.state]
        title = big_font.render(tr(title_key), True, theme["accent"])
        screen.blit(title, title.get_rect(center=(w // 2, 70)))

        y = 120
        for line, color in self._info_lines(theme):
            surf = font.render(line, True, color)
            screen.blit(surf, surf.get_rect(center=(w // 2, y)))
            y += 26

        y = max(y + 20, 200)
        self._rects = []
        for i, (key, _) in enumerate(self.items()):
            color = theme["accent"] if i == self.index else theme["text"]
            surf = font.render(self.item_text(key), True, color)
            rect = surf.get_rect(center=(w // 2, y))
            screen.blit(surf, rect)
            self._rects.append(rect.inflate(20, 8))
            y += 34

    def _info_lines(self, theme) -> List[Tuple[str, tuple]]:
        s, tr = self.session, self.tr
        if s.state == State.GAMEOVER and s.last_summary:
            lines = [
                (f"{tr('score')}: {s.last_summary.score}", theme["text"]),
                (f"{tr('best')}: {s.last_summary.best}", theme["text_dim"]),
            ]
            if s.last_summary.is_new_high:
                lines.append((tr("new_high_score"), theme["accent"]))
            return lines
        if s.state == State.HIGH_SCORES:
            scores = s.high_scores.scores
            if not scores:
                return [(tr("no_scores"), theme["text_dim"])]
            return [(f"{i}. {score}", theme["text"]) for i, score in enumerate(scores, 1)]
        if s.state == State.PAUSED:
            return [(f"{tr('score')}: {s.score}   {tr('level')}: {s.level}", theme["text_dim"])]
        return []
