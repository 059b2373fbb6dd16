
"""Colour themes"""
import logging
from typing import Dict, Tuple

from tetris_config import CONFIG

logger = logging.getLogger(__name__)

Color = Tuple[int,int,int]

FALLBACK_COLOR: Color = (136, 136, 136)
FALLBACK_GHOST = (200, 200, 200, 50)

THEMES: Dict[str, dict] = {
    "classicDark": {
        "name": "Classic Dark",
        "body_bg": (30, 41, 59),
        "board_bg": (15, 23, 42),
        "board_border": (71, 85, 105),
        "grid": (51, 65, 85),
        "panel_bg": (51, 65, 85),
        "text": (226, 232, 240),
        "text_dim": (148, 163, 184),
        "accent": (245, 158, 11),
        "ghost": (226, 232, 240, 64),
        "pieces": {
            "I": (6, 182, 212),
            "O": (250, 204, 21),
            "T": (139, 92, 246),
            "S": (34, 197, 94),
            "Z": (239, 68, 68),
            "J": (59, 130, 246),
            "L": (249, 115, 22),
        },
    },
    "neonPulse": {
        "name": "Neon Pulse",
        "body_bg": (13, 13, 13),
        "board_bg": (5, 5, 5),
        "board_border": (0, 255, 255),
        "grid": (34, 34, 34),
        "panel_bg": (25, 25, 25),
        "text": (240, 240, 240),
        "text_dim": (160, 160, 160),
        "accent": (255, 0, 255),
        "ghost": (200, 200, 255, 64),
        "pieces": {
            "I": (0, 255, 255),
            "O": (255, 255, 0),
            "T": (255, 0, 255),
            "S": (0, 255, 0),
            "Z": (255, 51, 0),
            "J": (51, 51, 255),
            "L": (255, 153, 0),
        },
    },
    "arcticLight": {
        "name": "Arctic Light",
        "body_bg": (224, 231, 255),
        "board_bg": (203, 213, 225),
        "board_border": (148, 163, 184),
        "grid": (168, 178, 194),
        "panel_bg": (226, 232, 240),
        "text": (44, 62, 80),
        "text_dim": (90, 106, 122),
        "accent": (59, 130, 246),
        "ghost": (44, 62, 80, 50),
        "pieces": {
            "I": (14, 165, 233),
            "O": (234, 179, 8),
            "T": (168, 85, 247),
            "S": (16, 185, 129),
            "Z": (244, 63, 94),
            "J": (37, 99, 235),
            "L": (234, 88, 12),
        },
    },
}


def theme_names():
    return list(THEMES)


def resolve_theme_name(name: str) -> str:
    if name not in THEMES:
        logger.warning("Theme %r not found, using %s", name, CONFIG["DEFAULT_THEME"])
        return CONFIG["DEFAULT_THEME"]
    return name


def get_theme(name: str) -> dict:
    return THEMES[resolve_theme_name(name)]


def piece_color(theme: dict, t: str) -> Color:
    color = theme.get("pieces", {}).get(t)
    if color is None:
        logger.warning("No colour for piece %r in theme %s", t, theme.get("name", "?"))
        return FALLBACK_COLOR
    return color


def ghost_color(theme: dict):
    return theme.get("ghost", FALLBACK_GHOST)


def lighten(color: Color, percent: int) -> Color:
    return tuple(min(255, int(v + (255 - v) * percent / 100)) for v in color[:3])


def darken(color: Color, percent: int) -> Color:
    return tuple(max(0, int(v * (100 - percent) / 100)) for v in color[:3])
