"""
font_manager.py: one font dict per language.

The pixel font (constants.FONT_PATH) has no Cyrillic glyphs, so Russian
switches to a system sans that does. Without either, pygame's built-in font
is used at double size to roughly match the pixel font's metrics.
"""
from __future__ import annotations

import os
import pygame
from .constants import FONT_PATH
from .locale import get_lang

# role → pixel size at the pixel font's scale
_SIZES = {
    "title": 32,   # mode select heading, result overlay
    "btn":   16,   # buttons, damage numbers, "VS."
    "body":  12,   # score bar, subtitle
    "small": 10,   # card names, status line, hints
}

_CYRILLIC_FAMILIES = ("dejavusans", "freesans", "liberationsans", "arial", "segoeui")

_cache: dict[str, dict[str, pygame.font.Font]] = {}


def _font_path_for(lang: str) -> str | None:
    if lang == "ru":
        for family in _CYRILLIC_FAMILIES:
            path = pygame.font.match_font(family)
            if path:
                return path
        print("[warn] no Cyrillic system font found, using fallback")
        return None
    if not os.path.exists(FONT_PATH):
        print(f"[warn] font not found at {FONT_PATH}, using fallback")
        return None
    return FONT_PATH


def _load(path: str | None, size: int) -> pygame.font.Font:
    if path:
        try:
            return pygame.font.Font(path, size)
        except (OSError, pygame.error) as e:
            print(f"[warn] font '{path}' failed to load: {e}")
    return pygame.font.Font(None, size * 2)


def get_fonts() -> dict[str, pygame.font.Font]:
    lang = get_lang()
    if lang not in _cache:
        if not pygame.font.get_init():
            pygame.font.init()
        path = _font_path_for(lang)
        _cache[lang] = {role: _load(path, size) for role, size in _SIZES.items()}
    return _cache[lang]


def invalidate_cache() -> None:
    """Drop loaded fonts; the next get_fonts() reloads for the current language."""
    _cache.clear()
