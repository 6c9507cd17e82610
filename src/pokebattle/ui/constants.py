from __future__ import annotations

# ── window ────────────────────────────────────────────────────────────────────
WIDTH  = 1280
HEIGHT = 720
FPS    = 60
TITLE  = "Pokémon Card Duel"

# ── palette ───────────────────────────────────────────────────────────────────
BG         = (14,  16,  30)    # night-arena blue-black
BG2        = (24,  28,  48)    # slightly lighter for panels

ACCENT      = (255, 204, 0)    # electric yellow, primary accent
ACCENT_DARK = (150, 110, 0)    # dimmed accent for hover fill
ACCENT_GLOW = (255, 230, 110)  # lighter for glow edge

RED        = (220, 50,  60)    # secondary accent, losses and rejects
BLUE       = (60,  110, 200)   # mid blue for borders/dividers
BLUE_DIM   = (30,  45,  85)    # dark blue for subtle elements

TEXT_MAIN  = (240, 240, 250)
TEXT_DIM   = (120, 130, 160)

# ── card colours ─────────────────────────────────────────────────────────────
CARD_BG     = (250, 240, 200)  # pale yellow face
CARD_BACK   = (40,  60,  140)  # deep blue back
CARD_BORDER = (200, 160, 30)
CARD_TEXT   = (30,  30,  40)
CARD_DAMAGE = (200, 40,  50)

# ── layout ────────────────────────────────────────────────────────────────────
BTN_W      = 420
BTN_H      = 52
BTN_GAP    = 16
BTN_RADIUS = 4

CARD_W     = 110
CARD_H     = 150
MINI_W     = 64    # played-cards log strip
MINI_H     = 88

# ── pacing (frames) ───────────────────────────────────────────────────────────
BOT_DELAY    = 45   # computer "thinking" before it plays
ROUND_DELAY  = 90   # revealed cards stay up before the next round

import os as _os
FONT_PATH = _os.path.join(_os.path.dirname(__file__), "assets", "fonts", "PressStart2P.ttf")
