
"""Sound effects and background music (pygame.mixer)"""
import logging
import os
from typing import Dict, Optional

import pygame

from tetris_config import CONFIG, MUSIC_MUTE_KEY, SFX_MUTE_KEY

logger = logging.getLogger(__name__)

SOUND_FILES = {
    "line_clear": "line_clear.wav",
    "tetris_clear": "tetris_clear.wav",
    "game_over": "game_over.wav",
    "new_high_score": "new_high_score.wav",
    "button_click": "button_click.wav",
}
MUSIC_FILE = "music.ogg"


class SilentAudio:
    """Fire-and-forget notifications; this base does nothing."""
    music_muted = False
    sfx_muted = False

    def line_clear(self): self.play("line_clear")
    def tetris_clear(self): self.play("tetris_clear")
    def game_over(self): self.play("game_over")
    def new_high_score(self): self.play("new_high_score")
    def button_click(self): self.play("button_click")

    def play(self, name: str): pass
    def play_music(self): pass
    def pause_music(self): pass
    def stop_music(self): pass

    def toggle_music_mute(self) -> bool:
        self.music_muted = not self.music_muted
        return self.music_muted

    def toggle_sfx_mute(self) -> bool:
        self.sfx_muted = not self.sfx_muted
        return self.sfx_muted


class Audio(SilentAudio):
    def __init__(self, store=None, assets_dir: Optional[str] = None):
        self.store = store
        self.dir = os.path.join(assets_dir or CONFIG["ASSETS_DIR"], "sounds")
        self.sounds: Dict[str, Optional[pygame.mixer.Sound]] = {}
        self.music_loaded = False
        self.music_paused = False
        self.music_muted = bool(store.load_preference(MUSIC_MUTE_KEY, False)) if store else False
        self.sfx_muted = bool(store.load_preference(SFX_MUTE_KEY, False)) if store else False
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            self.enabled = True
        except pygame.error as e:
            logger.warning("Audio disabled, mixer init failed: %s", e)
            self.enabled = False
            return
        for name, fname in SOUND_FILES.items():
            self.sounds[name] = self._load(fname)
        try:
            pygame.mixer.music.load(os.path.join(self.dir, MUSIC_FILE))
            self.music_loaded = True
        except (pygame.error, FileNotFoundError) as e:
            logger.warning("Background music unavailable: %s", e)

    def _load(self, fname: str) -> Optional[pygame.mixer.Sound]:
        try:
            return pygame.mixer.Sound(os.path.join(self.dir, fname))
        except (pygame.error, FileNotFoundError) as e:
            logger.warning("Sound %s unavailable: %s", fname, e)
            return None

    def play(self, name: str):
        if self.sfx_muted or not self.enabled:
            return
        snd = self.sounds.get(name)
        if snd is None:
            logger.debug("play: no sound loaded for %s", name)
            return
        snd.stop()
        snd.play()

    def play_music(self):
        if not self.music_loaded:
            return
        pygame.mixer.music.set_volume(0.0 if self.music_muted else 1.0)
        try:
            if self.music_paused:
                pygame.mixer.music.unpause()
            elif not pygame.mixer.music.get_busy():
                pygame.mixer.music.play(-1)
        except pygame.error as e:
            logger.warning("Music could not be played: %s", e)
        self.music_paused = False

    def pause_music(self):
        if self.music_loaded and pygame.mixer.music.get_busy():
            pygame.mixer.music.pause()
            self.music_paused = True

    def stop_music(self):
        if self.music_loaded:
            pygame.mixer.music.stop()
        self.music_paused = False

    def toggle_music_mute(self) -> bool:
        muted = super().toggle_music_mute()
        if self.music_loaded:
            pygame.mixer.music.set_volume(0.0 if muted else 1.0)
        if self.store:
            self.store.save_preference(MUSIC_MUTE_KEY, muted)
        return muted

    def toggle_sfx_mute(self) -> bool:
        muted = super().toggle_sfx_mute()
        if self.store:
            self.store.save_preference(SFX_MUTE_KEY, muted)
        return muted
