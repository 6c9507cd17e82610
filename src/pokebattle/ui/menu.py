from __future__ import annotations

import math
import pygame
from .constants import (
    WIDTH, HEIGHT,
    BG, ACCENT, ACCENT_GLOW, TEXT_MAIN, TEXT_DIM,
    BTN_H, BTN_GAP,
)
from .font_manager import get_fonts, invalidate_cache
from .locale import get_lang, set_lang, t as _t
from .widgets import Button

_LANGS = ("en", "ru", "ro")

# menu action → locale key; order is the on-screen order
_ENTRIES = [
    ("human",    "menu.human_vs_computer"),
    ("computer", "menu.computer_vs_computer"),
    ("quit",     "menu.quit"),
]

# number keys mirror the console menu
_KEY_ACTIONS = {
    pygame.K_1:    "human",
    pygame.K_KP1:  "human",
    pygame.K_2:    "computer",
    pygame.K_KP2:  "computer",
}


class ModeSelectScreen:
    """
    Game mode selection. Returns: 'human' | 'computer' | 'quit' | None
    """

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.tick   = 0
        self._vignette = _make_vignette()
        self._build_buttons()

    def _build_buttons(self) -> None:
        fonts   = get_fonts()
        cx      = WIDTH // 2
        total_h = len(_ENTRIES) * BTN_H + (len(_ENTRIES) - 1) * BTN_GAP
        start_y = HEIGHT // 2 - total_h // 2 + 60

        self.buttons: list[tuple[Button, str]] = []
        for i, (action, key) in enumerate(_ENTRIES):
            y   = start_y + i * (BTN_H + BTN_GAP)
            btn = Button(cx, y, f"{i + 1}. {_t(key)}" if action != "quit" else _t(key),
                         font=fonts["btn"])
            self.buttons.append((btn, action))

    # ── public ───────────────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event) -> str | None:
        if event.type == pygame.QUIT:
            return "quit"
        if event.type == pygame.KEYDOWN:
            if event.key in _KEY_ACTIONS:
                return _KEY_ACTIONS[event.key]
            if event.key == pygame.K_ESCAPE:
                return "quit"
            if event.key == pygame.K_l:
                self.cycle_language()
                return None
        for btn, action in self.buttons:
            if btn.handle_event(event):
                return action
        return None

    def cycle_language(self) -> None:
        nxt = _LANGS[(_LANGS.index(get_lang()) + 1) % len(_LANGS)]
        set_lang(nxt)
        invalidate_cache()
        self._build_buttons()

    def update(self) -> None:
        self.tick += 1
        mouse = pygame.mouse.get_pos()
        for btn, _ in self.buttons:
            btn.update(mouse)

    def draw(self, surface: pygame.Surface | None = None) -> None:
        target = surface if surface is not None else self.screen
        target.fill(BG)
        _draw_bg_grid(target)
        target.blit(self._vignette, (0, 0))
        self._draw_title(target)
        for btn, _ in self.buttons:
            btn.draw(target)
        self._draw_footer(target)

    # ── visual helpers ────────────────────────────────────────────────────────

    def _draw_title(self, target: pygame.Surface) -> None:
        fonts = get_fonts()
        pulse = abs(math.sin(self.tick * 0.03)) * 6
        title = fonts["title"].render(_t("menu.title"), False, TEXT_MAIN)
        tx    = WIDTH // 2 - title.get_width() // 2
        ty    = HEIGHT // 4 - 30 + int(pulse)

        glow = fonts["title"].render(_t("menu.title"), False, ACCENT_GLOW)
        glow.set_alpha(60)
        target.blit(glow, (tx - 3, ty))
        target.blit(glow, (tx + 3, ty))
        target.blit(title, (tx, ty))

        uy = ty + title.get_height() + 10
        pygame.draw.rect(target, ACCENT, (tx, uy, title.get_width(), 3))

        sub = fonts["body"].render(_t("menu.subtitle"), False, TEXT_DIM)
        target.blit(sub, (WIDTH // 2 - sub.get_width() // 2, uy + 14))

    def _draw_footer(self, target: pygame.Surface) -> None:
        small = get_fonts()["small"]
        hint  = small.render(f"[L] {get_lang().upper()}", False, TEXT_DIM)
        target.blit(hint, (12, HEIGHT - hint.get_height() - 10))


def _draw_bg_grid(target: pygame.Surface) -> None:
    grid_col = (24, 30, 56)
    for x in range(0, WIDTH, 40):
        pygame.draw.line(target, grid_col, (x, 0), (x, HEIGHT))
    for y in range(0, HEIGHT, 40):
        pygame.draw.line(target, grid_col, (0, y), (WIDTH, y))


def _make_vignette() -> pygame.Surface:
    surf   = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    cx, cy = WIDTH // 2, HEIGHT // 2
    max_r  = int(math.hypot(cx, cy))
    for i in range(24, 0, -1):
        ratio = i / 24
        alpha = int((ratio ** 1.6) * 200)
        pygame.draw.circle(surf, (0, 0, 0, alpha), (cx, cy), int(max_r * ratio))
    return surf
