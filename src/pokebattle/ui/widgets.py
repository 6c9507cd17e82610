from __future__ import annotations

import pygame
from ..core.card import Card
from .constants import (
    ACCENT, ACCENT_DARK, ACCENT_GLOW, BLUE, BLUE_DIM, TEXT_MAIN,
    CARD_BG, CARD_BACK, CARD_BORDER, CARD_TEXT, CARD_DAMAGE,
    CARD_W, CARD_H, BTN_W, BTN_H, BTN_RADIUS,
)
from .font_manager import get_fonts
from .locale import get_lang, t as _t
from . import audio

_CARD_RADIUS = 6


class Button:
    def __init__(
        self,
        x: int, y: int,
        text: str,
        w: int = BTN_W,
        h: int = BTN_H,
        font: pygame.font.Font | None = None,
    ) -> None:
        self.rect    = pygame.Rect(0, 0, w, h)
        self.rect.centerx = x
        self.rect.y  = y
        self.text    = text
        self.font    = font
        self.hovered = False
        self.enabled = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """True when a left click lands on an enabled button."""
        if not self.enabled:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 \
                and self.rect.collidepoint(event.pos):
            audio.play("menu_click")
            return True
        return False

    def update(self, mouse_pos: tuple) -> None:
        self.hovered = self.enabled and self.rect.collidepoint(mouse_pos)

    def draw(self, surface: pygame.Surface) -> None:
        r    = self.rect
        face = pygame.Surface(r.size, pygame.SRCALPHA)
        lit  = self.hovered

        pygame.draw.rect(face, ACCENT_DARK if lit else BLUE_DIM, face.get_rect(),
                         border_radius=BTN_RADIUS)
        pygame.draw.rect(face, ACCENT_GLOW if lit else ACCENT, face.get_rect(),
                         width=3 if lit else 2, border_radius=BTN_RADIUS)

        if self.font:
            label = self.font.render(self.text, False, ACCENT_GLOW if lit else TEXT_MAIN)
            face.blit(label, label.get_rect(center=face.get_rect().center))

        if not self.enabled:
            face.set_alpha(90)
        elif lit:
            halo = pygame.Surface((r.w + 12, r.h + 12), pygame.SRCALPHA)
            pygame.draw.rect(halo, (*ACCENT, 40), halo.get_rect(),
                             border_radius=BTN_RADIUS + 4)
            surface.blit(halo, (r.x - 6, r.y - 6))

        surface.blit(face, r.topleft)


# ── card faces ────────────────────────────────────────────────────────────────
# Rendered once per (kind, card, size, language) and reused every frame.

_card_cache: dict[tuple, pygame.Surface] = {}


def card_face(card: Card, w: int = CARD_W, h: int = CARD_H) -> pygame.Surface:
    """Face-up card: name on top, damage in the middle, "DMG" label at full size."""
    key = ("face", card.name, card.strength, w, h, get_lang())
    if key in _card_cache:
        return _card_cache[key]

    fonts     = get_fonts()
    name_font = fonts["small"]
    dmg_font  = fonts["btn"] if w >= CARD_W else fonts["small"]

    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    pygame.draw.rect(surf, CARD_BG, (0, 0, w, h), border_radius=_CARD_RADIUS)
    pygame.draw.rect(surf, CARD_BORDER, (0, 0, w, h), width=2, border_radius=_CARD_RADIUS)

    name = name_font.render(card.name, False, CARD_TEXT)
    if name.get_width() > w - 8:
        name = pygame.transform.scale(name, (w - 8, name.get_height()))
    surf.blit(name, (w // 2 - name.get_width() // 2, 8))

    dmg = dmg_font.render(str(card.strength), False, CARD_DAMAGE)
    surf.blit(dmg, dmg.get_rect(center=(w // 2, h // 2)))

    if w >= CARD_W:
        lbl = name_font.render(_t("game.damage"), False, CARD_TEXT)
        surf.blit(lbl, (w // 2 - lbl.get_width() // 2, h - lbl.get_height() - 10))

    _card_cache[key] = surf
    return surf


def card_back(w: int = CARD_W, h: int = CARD_H) -> pygame.Surface:
    key = ("back", w, h)
    if key in _card_cache:
        return _card_cache[key]

    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    pygame.draw.rect(surf, CARD_BACK, (0, 0, w, h), border_radius=_CARD_RADIUS)
    pygame.draw.rect(surf, BLUE, (0, 0, w, h), width=2, border_radius=_CARD_RADIUS)
    # ball emblem
    cx, cy = w // 2, h // 2
    r      = min(w, h) // 4
    pygame.draw.circle(surf, ACCENT_DARK, (cx, cy), r, width=3)
    pygame.draw.line(surf, ACCENT_DARK, (cx - r, cy), (cx + r, cy), 3)

    _card_cache[key] = surf
    return surf


def hidden_card() -> pygame.Surface:
    """A played card before the reveal: "POKEMON" over "??"."""
    key = ("hidden", get_lang())
    if key in _card_cache:
        return _card_cache[key]

    fonts = get_fonts()
    surf  = card_back().copy()
    lbl   = fonts["small"].render(_t("game.hidden_label"), False, TEXT_MAIN)
    surf.blit(lbl, (CARD_W // 2 - lbl.get_width() // 2, 10))
    q     = fonts["btn"].render("??", False, ACCENT_GLOW)
    surf.blit(q, (CARD_W // 2 - q.get_width() // 2, CARD_H - q.get_height() - 12))

    _card_cache[key] = surf
    return surf
