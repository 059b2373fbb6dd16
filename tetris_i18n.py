
"""UI strings, English and Spanish"""
import logging
from typing import Optional

from tetris_config import CONFIG

logger = logging.getLogger(__name__)

TRANSLATIONS = {
    "en": {
        "title": "Tetris",
        "start": "Start Game",
        "high_scores": "High Scores",
        "resume": "Resume",
        "restart": "Restart",
        "main_menu": "Main Menu",
        "continue": "Continue",
        "back": "Back",
        "paused": "Paused",
        "game_over": "Game Over",
        "score": "Score",
        "level": "Level",
        "next": "Next",
        "best": "Best",
        "new_high_score": "New high score!",
        "no_scores": "No scores yet.",
        "theme": "Theme",
        "language": "Language",
        "dynamic_speed": "Dynamic speed",
        "music": "Music",
        "sfx": "Sound effects",
        "on": "On",
        "off": "Off",
        "swap_hint": "C / click Next: swap",
    },
    "es": {
        "title": "Tetris",
        "start": "Empezar",
        "high_scores": "Puntuaciones",
        "resume": "Continuar",
        "restart": "Reiniciar",
        "main_menu": "Menú principal",
        "continue": "Seguir jugando",
        "back": "Volver",
        "paused": "Pausa",
        "game_over": "Fin del juego",
        "score": "Puntos",
        "level": "Nivel",
        "next": "Siguiente",
        "best": "Récord",
        "new_high_score": "¡Nuevo récord!",
        "no_scores": "Aún no hay puntuaciones.",
        "theme": "Tema",
        "language": "Idioma",
        "dynamic_speed": "Velocidad dinámica",
        "music": "Música",
        "sfx": "Efectos",
        "on": "Sí",
        "off": "No",
        "swap_hint": "C / clic en Siguiente: cambiar",
    },
}


class Translator:
    def __init__(self, lang: Optional[str] = None):
        self.lang = CONFIG["DEFAULT_LANGUAGE"]
        self.set_language(lang or self.lang)

    def set_language(self, lang: str) -> str:
        if lang not in TRANSLATIONS:
            logger.warning("Language %r not found, using %s", lang, CONFIG["DEFAULT_LANGUAGE"])
            lang = CONFIG["DEFAULT_LANGUAGE"]
        self.lang = lang
        return lang

    def __call__(self, key: str) -> str:
        text = TRANSLATIONS[self.lang].get(key)
        if text is None:
            text = TRANSLATIONS["en"].get(key, key)
        return text
