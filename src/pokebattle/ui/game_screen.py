from __future__ import annotations

import math
import pygame
from ..core.card import Card
from ..core.match import Match, Outcome, RevealMode
from ..core.player import PEEK_CHOICE
from ..main import COMPUTER_VS_COMPUTER, HUMAN_VS_COMPUTER, build_match
from . import audio
from .constants import (
    WIDTH, HEIGHT,
    BG, BG2, ACCENT, ACCENT_GLOW, BLUE, BLUE_DIM, RED,
    TEXT_MAIN, TEXT_DIM,
    CARD_W, CARD_H, MINI_W, MINI_H,
    BOT_DELAY, ROUND_DELAY,
)
from .font_manager import get_fonts
from .locale import t as _t
from .widgets import Button, card_back, card_face, hidden_card

S_CHOOSE       = "choose"          # human picks a card (or peeks)
S_BOT_THINKING = "bot_thinking"
S_HIDDEN       = "hidden"          # both cards down, waiting for enter
S_REVEALED     = "revealed"
S_GAME_OVER    = "game_over"

# game-over result, from player one's side
R_WIN  = "win"
R_LOSS = "loss"
R_TIE  = "tie"

_SLOT_Y   = 230
_LOG_Y    = 404
_HAND_Y   = HEIGHT - CARD_H - 20
_FEED_LINES = 4          # match output shown bottom-left
_FEED_W     = 420


# ── GameScreen ────────────────────────────────────────────────────────────────

class GameScreen:
    def __init__(self, screen, human: bool, seed: int | None = None):
        self.screen = screen
        self.human  = human
        self.tick   = 0

        self._messages: list[str] = []
        choice     = HUMAN_VS_COMPUTER if human else COMPUTER_VS_COMPUTER
        self.match: Match = build_match(choice, seed=seed, write=self._log)
        self.match.deal()

        self._state       = None
        self._message     = ""
        self._card_one    = None
        self._card_two    = None
        self._log_shown: list[Card] = []
        self._peeking     = False
        self._bot_timer   = 0
        self._round_timer = 0
        self._hover: dict[int, float] = {}

        self._result       = None
        self._result_tick  = 0

        fonts = get_fonts()
        self._peek_btn = Button(WIDTH - 120, HEIGHT // 2 - 40, _t("game.peek"),
                                w=160, h=44, font=fonts["small"])

        self._start_round()

    @property
    def state(self) -> str:
        return self._state

    @property
    def peeking(self) -> bool:
        return self._peeking

    @property
    def messages(self) -> list[str]:
        return list(self._messages)

    def recent_messages(self) -> list[str]:
        """The tail of the match output, as drawn in the message feed."""
        return self._messages[-_FEED_LINES:]

    @property
    def result(self) -> str | None:
        return self._result

    def _log(self, line: str) -> None:
        if line.strip():
            self._messages.append(line.strip())

    # ── position helpers ─────────────────────────────────────────────────────

    def hand_rect(self, idx: int, total: int) -> pygame.Rect:
        gap     = 16
        total_w = total * CARD_W + (total - 1) * gap
        sx      = WIDTH // 2 - total_w // 2
        return pygame.Rect(sx + idx * (CARD_W + gap), _HAND_Y, CARD_W, CARD_H)

    def peek_rect(self) -> pygame.Rect:
        return self._peek_btn.rect.copy()

    def _opponent_rect(self, idx: int, total: int) -> pygame.Rect:
        gap     = 10
        total_w = total * CARD_W + (total - 1) * gap
        sx      = WIDTH // 2 - total_w // 2
        return pygame.Rect(sx + idx * (CARD_W + gap), 20, CARD_W, CARD_H)

    def _slot_rect(self, which: int) -> pygame.Rect:
        offset = 40 + CARD_W
        x      = WIDTH // 2 - offset if which == 0 else WIDTH // 2 + offset - CARD_W
        return pygame.Rect(x, _SLOT_Y, CARD_W, CARD_H)

    # ── round management ─────────────────────────────────────────────────────

    def _start_round(self):
        self._card_one = None
        self._card_two = None
        self._peeking  = False
        self._log_shown = list(self.match.played)
        if self.human:
            self._set(S_CHOOSE, _t("game.choose"))
        else:
            self._queue_bot()

    def _set(self, state, msg=""):
        self._state   = state
        self._message = msg

    def _queue_bot(self):
        self._bot_timer = BOT_DELAY
        self._set(S_BOT_THINKING, "")

    def _bot_play(self):
        m = self.match
        if self._card_one is None:
            self._card_one = m.player_one.select_card(m.player_two)
        self._card_two = m.player_two.select_card(m.player_one)
        audio.play("card_place")
        if m.mode is RevealMode.STAGED:
            self._set(S_HIDDEN, _t("game.reveal"))
        else:
            self._reveal()

    def _reveal(self):
        m = self.match
        self._log_shown = list(m.played)
        outcome = m.resolve(self._card_one, self._card_two)
        audio.play("card_flip")

        if outcome is Outcome.TIE:
            msg = _t("game.round_tie")
        else:
            winner = m.player_one if outcome is Outcome.PLAYER_ONE else m.player_two
            msg = f"{winner.name.upper()} {_t('game.round_win')}"
            if self.human:
                audio.play("round_win" if outcome is Outcome.PLAYER_ONE else "round_loss")
        self._round_timer = ROUND_DELAY
        self._set(S_REVEALED, msg)

    def _after_round(self):
        if self.match.is_over():
            self._trigger_game_over()
        else:
            self._start_round()

    def _trigger_game_over(self):
        final = self.match.end_game()
        if final.outcome is Outcome.PLAYER_ONE:
            self._result = R_WIN
        elif final.outcome is Outcome.PLAYER_TWO:
            self._result = R_LOSS
        else:
            self._result = R_TIE
        self._result_tick = 0
        audio.set_muffled(True)
        if self.human:
            audio.play("win" if self._result == R_WIN else "loss")
        self._set(S_GAME_OVER, "")

    # ── events ────────────────────────────────────────────────────────────────

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            return "quit"
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE or self._state == S_GAME_OVER:
                return "back"
            if event.key in (pygame.K_RETURN, pygame.K_SPACE, pygame.K_KP_ENTER):
                self._on_confirm()
            elif self._state == S_CHOOSE and pygame.K_1 <= event.key <= pygame.K_9:
                self._choose_number(event.key - pygame.K_0)
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._state == S_GAME_OVER:
                return "back"
            if self._state == S_CHOOSE and self._peek_btn.handle_event(event):
                self._peek()
                return None
            self._on_click(event.pos)
        return None

    def _on_confirm(self):
        if self._state == S_HIDDEN:
            self._reveal()
        elif self._state == S_REVEALED:
            self._after_round()

    def _choose_number(self, number: int):
        """Keyboard play, same rules as the console prompt: 5 peeks first."""
        if number == PEEK_CHOICE:
            self._peek()
        elif 1 <= number <= self.match.player_one.card_count():
            self._play_human(number - 1)
        else:
            audio.play("card_reject")

    def _on_click(self, pos):
        if self._state == S_CHOOSE:
            idx = self._card_at_pos(pos)
            if idx is not None:
                self._play_human(idx)
        elif self._state in (S_HIDDEN, S_REVEALED):
            self._on_confirm()

    def _peek(self):
        self._peeking = True
        audio.play("peek")

    def _play_human(self, idx: int):
        self._card_one = self.match.player_one.play_card(idx)
        self._peeking  = False
        self._hover.clear()
        audio.play("card_place")
        self._queue_bot()

    # ── update ────────────────────────────────────────────────────────────────

    def update(self):
        self.tick += 1
        mouse = pygame.mouse.get_pos()
        self._peek_btn.enabled = self._state == S_CHOOSE and not self._peeking
        self._peek_btn.update(mouse)

        if self._state == S_CHOOSE:
            hand = self.match.player_one.hand
            for i in range(len(hand)):
                target = 14.0 if self.hand_rect(i, len(hand)).collidepoint(mouse) else 0.0
                cur    = self._hover.get(i, 0.0)
                self._hover[i] = cur + (target - cur) * 0.3

        if self._state == S_BOT_THINKING:
            self._bot_timer -= 1
            if self._bot_timer <= 0:
                self._bot_play()
        elif self._state == S_REVEALED:
            self._round_timer -= 1
            if self._round_timer <= 0:
                self._after_round()
        elif self._state == S_GAME_OVER:
            self._result_tick += 1

    # ── draw ──────────────────────────────────────────────────────────────────

    def draw(self, surface=None):
        t = surface if surface is not None else self.screen
        t.fill(BG)
        self._draw_bg_grid(t)
        self._draw_opponent_hand(t)
        self._draw_score_bar(t)
        self._draw_deck(t)
        self._draw_slots(t)
        self._draw_played_log(t)
        self._draw_status(t)
        self._draw_message_feed(t)
        self._draw_player_hand(t)
        if self.human and self._state == S_CHOOSE:
            self._peek_btn.draw(t)
        if self._state == S_GAME_OVER:
            self._draw_result_screen(t)

    def _draw_bg_grid(self, t):
        for x in range(0, WIDTH, 40):
            pygame.draw.line(t, (24, 30, 56), (x, 0), (x, HEIGHT))
        for y in range(0, HEIGHT, 40):
            pygame.draw.line(t, (24, 30, 56), (0, y), (WIDTH, y))

    def _draw_opponent_hand(self, t):
        hand = self.match.player_two.hand
        for i, card in enumerate(hand):
            r = self._opponent_rect(i, len(hand))
            if self._peeking:
                t.blit(card_face(card), r.topleft)
            else:
                t.blit(card_back(), r.topleft)

    def _draw_score_bar(self, t):
        f   = get_fonts()["body"]
        m   = self.match
        one = f.render(f"{m.player_one.name.upper()}  {m.player_one.score}", False, ACCENT)
        two = f.render(f"{m.player_two.name.upper()}  {m.player_two.score}", False, TEXT_MAIN)
        t.blit(one, (self._slot_rect(0).centerx - one.get_width() // 2, _SLOT_Y - 34))
        t.blit(two, (self._slot_rect(1).centerx - two.get_width() // 2, _SLOT_Y - 34))

    def _draw_deck(self, t):
        remaining = self.match.deck.remaining()
        x, y      = 80, _SLOT_Y
        for i in range(min(4, remaining)):
            t.blit(card_back(), (x + i * 2, y - i * 2))
        if remaining == 0:
            pygame.draw.rect(t, BLUE_DIM, (x, y, CARD_W, CARD_H), width=1, border_radius=6)
        f   = get_fonts()["small"]
        cnt = f.render(f"{_t('game.deck')}: {remaining}", False, TEXT_DIM)
        t.blit(cnt, (x + CARD_W // 2 - cnt.get_width() // 2, y + CARD_H + 8))

    def _draw_slots(self, t):
        revealed = self._state in (S_REVEALED, S_GAME_OVER)
        for which, card in ((0, self._card_one), (1, self._card_two)):
            r = self._slot_rect(which)
            if card is None:
                pygame.draw.rect(t, BLUE_DIM, r, width=2, border_radius=6)
            elif revealed:
                t.blit(card_face(card), r.topleft)
            else:
                t.blit(hidden_card(), r.topleft)

        vs = get_fonts()["btn"].render(_t("game.vs"), False, ACCENT)
        t.blit(vs, (WIDTH // 2 - vs.get_width() // 2,
                    _SLOT_Y + CARD_H // 2 - vs.get_height() // 2))

    def _draw_played_log(self, t):
        cards = self._log_shown
        f     = get_fonts()["small"]
        lbl   = f.render(_t("game.played"), False, TEXT_DIM)
        gap   = 6
        total_w = len(cards) * MINI_W + max(0, len(cards) - 1) * gap
        sx    = WIDTH // 2 - total_w // 2
        t.blit(lbl, (40, _LOG_Y + MINI_H // 2 - lbl.get_height() // 2))
        for i, card in enumerate(cards):
            t.blit(card_face(card, MINI_W, MINI_H), (sx + i * (MINI_W + gap), _LOG_Y))

    def _draw_status(self, t):
        if not self._message and self._state != S_BOT_THINKING:
            return
        f     = get_fonts()["small"]
        label = self._message
        col   = ACCENT_GLOW if self._state == S_REVEALED else TEXT_DIM
        if self._state == S_BOT_THINKING:
            label = _t("game.thinking") + "." * (int(self.tick / 15) % 4)
        elif self._state == S_HIDDEN:
            col = tuple(int(c * (0.6 + 0.4 * abs(math.sin(self.tick * 0.05)))) for c in ACCENT)
        msg = f.render(label, False, col)
        t.blit(msg, (WIDTH // 2 - msg.get_width() // 2, _LOG_Y + MINI_H + 14))

    def _draw_message_feed(self, t):
        f = get_fonts()["small"]
        y = _HAND_Y + 20
        for line in self.recent_messages():
            s = f.render(line, False, TEXT_DIM)
            if s.get_width() > _FEED_W:
                s = pygame.transform.scale(s, (_FEED_W, s.get_height()))
            t.blit(s, (20, y))
            y += s.get_height() + 8

    def _draw_player_hand(self, t):
        hand       = self.match.player_one.hand
        actionable = self._state == S_CHOOSE
        for i, card in enumerate(hand):
            rect = self.hand_rect(i, len(hand))
            lift = int(self._hover.get(i, 0.0)) if actionable else 0
            if self.human:
                surf = card_face(card)
            else:
                # computer vs computer: both hands stay face-down
                surf = card_back()
            if lift > 2:
                surf = surf.copy()
                pygame.draw.rect(surf, ACCENT_GLOW, (0, 0, CARD_W, CARD_H),
                                 width=3, border_radius=6)
            t.blit(surf, (rect.x, rect.y - lift))
            if actionable:
                f   = get_fonts()["small"]
                num = f.render(str(i + 1), False, TEXT_DIM)
                t.blit(num, (rect.centerx - num.get_width() // 2, rect.y - lift - 16))

    def _draw_result_screen(self, t):
        f_title = get_fonts()["title"]
        f_btn   = get_fonts()["btn"]
        f_sm    = get_fonts()["small"]
        m       = self.match
        final   = m.result()
        tick    = self._result_tick

        ov = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        ov.fill((0, 0, 0, 200))
        t.blit(ov, (0, 0))

        cx, cy  = WIDTH // 2, HEIGHT // 2
        fade_in = min(1.0, tick / 40)

        if self.human:
            title_str, title_col = {
                R_WIN:  (_t("result.victory"), ACCENT),
                R_LOSS: (_t("result.defeat"),  RED),
                R_TIE:  (_t("result.draw"),    BLUE),
            }[self._result]
        else:
            title_str, title_col = _t("result.final_scores"), ACCENT
        sub_str = (_t("result.tie") if final.winner is None
                   else f"{final.winner.upper()} {_t('result.wins')}")

        title_s = f_title.render(title_str, False, title_col)
        title_s.set_alpha(int(255 * fade_in))
        t.blit(title_s, (cx - title_s.get_width() // 2, cy - 140))

        sub_s = f_btn.render(sub_str, False, TEXT_MAIN)
        sub_s.set_alpha(int(230 * fade_in))
        t.blit(sub_s, (cx - sub_s.get_width() // 2, cy - 140 + title_s.get_height() + 14))

        lines = [
            (final.player_one.upper(), str(final.score_one)),
            (final.player_two.upper(), str(final.score_two)),
            (_t("result.rounds"),      str(final.rounds)),
        ]
        panel_w, panel_h = 360, len(lines) * 24 + 16
        px, py = cx - panel_w // 2, cy - 30
        panel = pygame.Surface((panel_w, panel_h), pygame.SRCALPHA)
        panel.fill((*BG2, 220))
        pygame.draw.rect(panel, BLUE, panel.get_rect(), width=1, border_radius=4)
        t.blit(panel, (px, py))
        for i, (label, val) in enumerate(lines):
            sy = py + 8 + i * 24
            t.blit(f_sm.render(label, False, TEXT_DIM), (px + 12, sy))
            val_s = f_sm.render(val, False, TEXT_MAIN)
            t.blit(val_s, (px + panel_w - val_s.get_width() - 12, sy))

        if tick > 50:
            blink = abs(math.sin(tick * 0.05))
            prompt_s = f_sm.render(_t("result.press_any_key"), False, TEXT_DIM)
            prompt_s.set_alpha(int(200 * blink))
            t.blit(prompt_s, (cx - prompt_s.get_width() // 2, py + panel_h + 24))

    # ── hit testing ───────────────────────────────────────────────────────────

    def _card_at_pos(self, pos) -> int | None:
        hand = self.match.player_one.hand
        for i in reversed(range(len(hand))):
            if self.hand_rect(i, len(hand)).collidepoint(pos):
                return i
        return None
