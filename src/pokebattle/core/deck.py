from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .card import Card, EMPTY_CARD

# Fixed 10-card set: (name, damage)
CATALOGUE: Tuple[Tuple[str, int], ...] = (
    ("Pikachu",   100),
    ("Charizard", 60),
    ("Bulbasaur", 50),
    ("Squirtle",  50),
    ("Tauros",    80),
    ("Magmar",    70),
    ("Eevee",     60),
    ("Snorlax",   65),
    ("Dragonite", 75),
    ("Arcanine",  90),
)


@dataclass(slots=True)
class Deck:
    cards: List[Card]

    @classmethod
    def new_shuffled(cls, *, seed: Optional[int] = None,
                     rng: Optional[random.Random] = None) -> Deck:
        # without a seed or rng, random.Random() seeds itself from system entropy
        rng = rng if rng is not None else random.Random(seed)
        all_cards: List[Card] = [Card(name=n, strength=s) for n, s in CATALOGUE]
        rng.shuffle(all_cards)
        return cls(cards=all_cards)

    def draw(self) -> Card:
        """Take the top card (end of the list). An empty deck yields EMPTY_CARD."""
        if not self.cards:
            return EMPTY_CARD
        return self.cards.pop()

    def remaining(self) -> int:
        return len(self.cards)

    def peek_cards(self) -> Tuple[Card, ...]:
        return tuple(self.cards)
