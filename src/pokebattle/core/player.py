from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .card import Card, show_cards

# Typing this at the card prompt shows the opponent's hand instead of playing.
# Fixed value, checked before the index range.
PEEK_CHOICE = 5


@dataclass(slots=True)
class Player(ABC):
    name: str
    hand: List[Card] = field(default_factory=list)
    score: int = 0

    def draw(self, deck) -> Card:
        card = deck.draw()
        self.hand.append(card)
        return card

    def play_card(self, index: int) -> Card:
        """Remove and return the card at a 0-based hand index."""
        if index < 0 or index >= len(self.hand):
            raise IndexError(f"No card at index {index} in {self.name}'s hand")
        return self.hand.pop(index)

    @abstractmethod
    def select_card(self, opponent: Player) -> Card:
        """Take one card out of the hand for this round."""

    def add_points(self, points: int) -> None:
        self.score += points

    def has_cards(self) -> bool:
        return len(self.hand) > 0

    def card_count(self) -> int:
        return len(self.hand)

    def show_hand(self) -> str:
        return f"{self.name}'s hand: {show_cards(self.hand)}"

    def __str__(self) -> str:
        return f"{self.name}({len(self.hand)}): {show_cards(self.hand)}"


@dataclass(slots=True)
class InteractivePlayer(Player):
    """A human choosing cards by typing their 1-based position."""
    read: Callable[[str], str] = field(default=input, repr=False)
    write: Callable[[str], None] = field(default=print, repr=False)

    def select_card(self, opponent: Player) -> Card:
        if not self.hand:
            raise IndexError(f"{self.name} has no cards to play")
        while True:
            raw = self.read(f"Choose a card to play (1-{len(self.hand)}): ").strip()
            choice = int(raw) if raw.isdecimal() else None
            if choice == PEEK_CHOICE:
                self.write(opponent.show_hand())
            elif choice is not None and 1 <= choice <= len(self.hand):
                return self.play_card(choice - 1)
            else:
                self.write("Invalid choice, please try again.")


@dataclass(slots=True)
class AutomatedPlayer(Player):
    """
    Plays a uniformly random card from its hand. Left without an rng, it takes
    the match's generator when seated, or a fresh unseeded one on first play.
    """
    rng: Optional[random.Random] = field(default=None, repr=False)

    def select_card(self, opponent: Player) -> Card:
        if not self.hand:
            raise IndexError(f"{self.name} has no cards to play")
        if self.rng is None:
            self.rng = random.Random()
        return self.play_card(self.rng.randrange(len(self.hand)))
