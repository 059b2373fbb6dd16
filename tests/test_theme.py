import logging

import pytest

from tetris_i18n import TRANSLATIONS, Translator
from tetris_piece import SHAPES
from tetris_theme import (FALLBACK_COLOR, THEMES, darken, get_theme, ghost_color, lighten,
                          piece_color, resolve_theme_name, theme_names)


def test_unknown_theme_falls_back_to_default(caplog):
    with caplog.at_level(logging.WARNING):
        theme = get_theme("vaporwave")
    assert theme is THEMES["classicDark"]
    assert "vaporwave" in caplog.text


@pytest.mark.parametrize("name", theme_names())
def test_every_theme_colours_every_piece(name):
    theme = get_theme(name)
    for t in SHAPES:
        assert piece_color(theme, t) != FALLBACK_COLOR
    assert len(ghost_color(theme)) == 4


def test_missing_piece_colour_uses_grey():
    assert piece_color(THEMES["neonPulse"], "Q") == FALLBACK_COLOR


def test_lighten_and_darken():
    assert lighten((0, 0, 0), 50) == (127, 127, 127)
    assert lighten((250, 250, 250), 100) == (255, 255, 255)
    assert darken((200, 100, 50), 50) == (100, 50, 25)


def test_translator_defaults_to_spanish():
    tr = Translator()
    assert tr.lang == "es"
    assert tr("start") == "Empezar"


def test_translator_unknown_language_falls_back(caplog):
    tr = Translator("en")
    with caplog.at_level(logging.WARNING):
        assert tr.set_language("fr") == "es"
    assert "fr" in caplog.text


def test_translator_key_fallbacks(monkeypatch):
    monkeypatch.setitem(TRANSLATIONS["en"], "only_en", "English only")
    tr = Translator("es")
    assert tr("only_en") == "English only"
    assert tr("missing_key") == "missing_key"


def test_languages_share_keys():
    assert set(TRANSLATIONS["en"]) == set(TRANSLATIONS["es"])


def test_resolve_theme_name(caplog):
    assert resolve_theme_name("neonPulse") == "neonPulse"
    with caplog.at_level(logging.WARNING):
        assert resolve_theme_name("gone") == "classicDark"
    assert "gone" in caplog.text
