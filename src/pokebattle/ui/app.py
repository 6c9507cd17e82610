from __future__ import annotations

import sys
import os
import pygame

os.environ.setdefault('SDL_VIDEO_WINDOW_POS', '100,100')

from .constants import WIDTH, HEIGHT, FPS, TITLE, BG
from .game_screen import GameScreen
from .menu import ModeSelectScreen
from . import audio


def run(seed: int | None = None) -> None:
    pygame.init()
    pygame.display.set_caption(TITLE)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock  = pygame.time.Clock()

    screen.fill(BG)
    pygame.display.flip()

    audio.init()
    audio.play_music("menu")

    menu        = ModeSelectScreen(screen)
    game_screen = None
    current     = "menu"

    def quit_game() -> None:
        audio.stop_music()
        pygame.quit()
        sys.exit()

    def start_duel(human: bool) -> None:
        nonlocal game_screen, current
        game_screen = GameScreen(screen, human=human, seed=seed)
        current     = "game"
        audio.set_muffled(False)
        audio.play_music("duel")

    def back_to_menu() -> None:
        nonlocal game_screen, current
        game_screen = None
        current     = "menu"
        audio.set_muffled(False)
        audio.play_music("menu")

    while True:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_game()

            if event.type == pygame.KEYDOWN and event.key == pygame.K_m:
                state = "on" if audio.toggle_sfx() else "off"
                print(f"[audio] sound effects {state}")
                continue

            # ── Mode select ───────────────────────────────────────────────
            if current == "menu":
                action = menu.handle_event(event)
                if action == "quit":
                    quit_game()
                elif action == "human":
                    start_duel(human=True)
                elif action == "computer":
                    start_duel(human=False)

            # ── Duel ──────────────────────────────────────────────────────
            elif current == "game":
                action = game_screen.handle_event(event)
                if action == "quit":
                    quit_game()
                elif action == "back":
                    back_to_menu()

        audio.update()

        if current == "game":
            game_screen.update()
            game_screen.draw()
        else:
            menu.update()
            menu.draw()

        pygame.display.flip()
