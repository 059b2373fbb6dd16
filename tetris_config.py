
"""Tunables, board size, storage keys and logging setup"""
import logging
import os

COLS, ROWS = 10, 20

CONFIG = {
    "BLOCK_SIZE": 30,
    "FPS": 60,
    "LOCK_DELAY_MS": 200,
    "ORIGINAL_DROP_INTERVAL": 1000,
    "MIN_DROP_INTERVAL": 100,
    "DROP_INTERVAL_REDUCTION_PER_LEVEL": 65,
    "BASE_POINTS_TO_LEVEL_UP": 2000,
    "MAX_GAME_LEVEL": 15,
    "MAX_HIGH_SCORES": 5,
    "DYNAMIC_SPEED": True,
    "DEFAULT_THEME": "classicDark",
    "DEFAULT_LANGUAGE": "es",
    "PIECE_SEED": None,
    "STORE_PATH": os.environ.get("TETRIS_STORE_PATH",
                                 os.path.join(os.path.expanduser("~"), ".tetris", "tetris.json")),
    "ASSETS_DIR": os.environ.get("TETRIS_ASSETS_DIR",
                                 os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")),
    "LOG_LEVEL": os.environ.get("TETRIS_LOG_LEVEL", "INFO"),
}

BASE_POINTS_LINE_CLEAR = {1: 100, 2: 220, 3: 350, 4: 500}

# Preference keys in the JSON store
HIGH_SCORES_KEY = "high_scores"
THEME_KEY = "theme"
LANGUAGE_KEY = "language"
MUSIC_MUTE_KEY = "music_muted"
SFX_MUTE_KEY = "sfx_muted"
DYNAMIC_SPEED_KEY = "dynamic_speed"


def setup_logging(level=None):
    level = level or CONFIG["LOG_LEVEL"]
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
