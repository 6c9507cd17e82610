from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .board import render_board
from .card import Card
from .deck import Deck
from .player import AutomatedPlayer, Player

HAND_SIZE      = 3
POINTS_PER_WIN = 5
REVEAL_PROMPT  = "Press enter to reveal the cards..."


class RevealMode(Enum):
    IMMEDIATE = "immediate"   # computer vs computer
    STAGED    = "staged"      # hidden board, wait for enter, then reveal


class MatchState(Enum):
    DEALING           = "dealing"
    ROUND_IN_PROGRESS = "round_in_progress"
    GAME_OVER         = "game_over"


class Outcome(Enum):
    PLAYER_ONE = "player_one"
    PLAYER_TWO = "player_two"
    TIE        = "tie"


def resolve_round(card_one: Card, card_two: Card) -> Outcome:
    """Higher damage takes the round; equal damage is a tie."""
    if card_one.beats(card_two):
        return Outcome.PLAYER_ONE
    if card_two.beats(card_one):
        return Outcome.PLAYER_TWO
    return Outcome.TIE


def final_outcome(score_one: int, score_two: int) -> Outcome:
    if score_one > score_two:
        return Outcome.PLAYER_ONE
    if score_two > score_one:
        return Outcome.PLAYER_TWO
    return Outcome.TIE


@dataclass(frozen=True, slots=True)
class MatchResult:
    player_one: str
    player_two: str
    score_one: int
    score_two: int
    outcome: Outcome
    rounds: int

    @property
    def winner(self) -> Optional[str]:
        if self.outcome is Outcome.PLAYER_ONE:
            return self.player_one
        if self.outcome is Outcome.PLAYER_TWO:
            return self.player_two
        return None


# ── Match ────────────────────────────────────────────────────────────────────

@dataclass
class Match:
    player_one: Player
    player_two: Player
    mode: RevealMode = RevealMode.IMMEDIATE
    seed: Optional[int] = None
    deck: Optional[Deck] = None
    played: List[Card] = field(default_factory=list)
    state: MatchState = MatchState.DEALING
    rounds_played: int = 0
    write: Callable[[str], None] = field(default=print, repr=False)
    pause: Callable[[str], object] = field(default=input, repr=False)

    def __post_init__(self) -> None:
        # one generator for the shuffle and every computer player without its own,
        # so a seed replays the whole match
        rng = random.Random(self.seed)
        if self.deck is None:
            self.deck = Deck.new_shuffled(rng=rng)
        for player in (self.player_one, self.player_two):
            if isinstance(player, AutomatedPlayer) and player.rng is None:
                player.rng = rng

    # ── setup ────────────────────────────────────────────────────────────────

    def deal(self) -> None:
        """Deal HAND_SIZE cards each, alternating player one and player two."""
        if self.state is not MatchState.DEALING:
            raise ValueError(f"Cannot deal in state {self.state.value}")
        for _ in range(HAND_SIZE):
            self.player_one.draw(self.deck)
            self.player_two.draw(self.deck)
        self.state = MatchState.ROUND_IN_PROGRESS
        self._check_game_over()

    # ── round helpers ────────────────────────────────────────────────────────

    def is_over(self) -> bool:
        return self.state is MatchState.GAME_OVER

    def select_plays(self) -> Tuple[Card, Card]:
        self.write(self.player_one.show_hand())
        card_one = self.player_one.select_card(self.player_two)
        card_two = self.player_two.select_card(self.player_one)
        return card_one, card_two

    def board(self, card_one: Card, card_two: Card, reveal: bool) -> List[str]:
        return render_board(self.player_one, self.player_two, self.played,
                            self.deck.remaining(), card_one, card_two, reveal)

    def show_board(self, card_one: Card, card_two: Card, reveal: bool) -> None:
        for line in self.board(card_one, card_two, reveal):
            self.write(line)

    def resolve(self, card_one: Card, card_two: Card) -> Outcome:
        """
        Settle a round whose two cards have already left the hands: log the
        cards, award points, report scores, refill hands while the deck lasts
        and move to GAME_OVER once a hand runs dry.
        """
        if self.state is not MatchState.ROUND_IN_PROGRESS:
            raise ValueError(f"Cannot resolve a round in state {self.state.value}")

        self.played.append(card_one)
        self.played.append(card_two)

        outcome = resolve_round(card_one, card_two)
        if outcome is Outcome.PLAYER_ONE:
            self.player_one.add_points(POINTS_PER_WIN)
            self.write(f"{self.player_one.name} wins the round and gets {POINTS_PER_WIN} points.")
        elif outcome is Outcome.PLAYER_TWO:
            self.player_two.add_points(POINTS_PER_WIN)
            self.write(f"{self.player_two.name} wins the round and gets {POINTS_PER_WIN} points.")
        else:
            self.write("Round is a tie, no points awarded.")

        self.write(f"Scores -> {self._scores()}")
        self.write("\n")
        self.rounds_played += 1

        if self.deck.remaining() > 0:
            self.player_one.draw(self.deck)
            self.player_two.draw(self.deck)

        self._check_game_over()
        return outcome

    def _check_game_over(self) -> None:
        if not self.player_one.has_cards() or not self.player_two.has_cards():
            self.state = MatchState.GAME_OVER

    def _scores(self) -> str:
        return (f"{self.player_one.name}: {self.player_one.score}, "
                f"{self.player_two.name}: {self.player_two.score}")

    # ── round ────────────────────────────────────────────────────────────────

    def play_round(self) -> Outcome:
        card_one, card_two = self.select_plays()

        if self.mode is RevealMode.STAGED:
            self.show_board(card_one, card_two, reveal=False)
            self.pause(REVEAL_PROMPT)

        self.show_board(card_one, card_two, reveal=True)
        return self.resolve(card_one, card_two)

    # ── full game ────────────────────────────────────────────────────────────

    def play(self) -> MatchResult:
        """Run the match from the deal to the final scores."""
        if self.state is MatchState.DEALING:
            self.deal()
        while not self.is_over():
            self.play_round()
        return self.end_game()

    def result(self) -> MatchResult:
        return MatchResult(
            player_one=self.player_one.name,
            player_two=self.player_two.name,
            score_one=self.player_one.score,
            score_two=self.player_two.score,
            outcome=final_outcome(self.player_one.score, self.player_two.score),
            rounds=self.rounds_played,
        )

    def end_game(self) -> MatchResult:
        result = self.result()
        self.write("Game Over!")
        self.write(f"Final Scores -> {self._scores()}")
        if result.winner is None:
            self.write("The game is a tie!")
        else:
            self.write(f"{result.winner} wins the game!")
        return result
