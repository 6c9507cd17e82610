from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

# Inner width of the boxed card face, between the two "|" borders
BOX_WIDTH = 21
_EDGE = " +" + "-" * BOX_WIDTH + "+"


def show_cards(cards: Iterable[Card]) -> str:
    """Return the one-line form of every card, separated by spaces."""
    return " ".join(c.show() for c in cards)


def hidden_box_lines() -> List[str]:
    """Placeholder box for a card that has been played but not revealed."""
    return [
        _EDGE,
        " |       POKEMON       |",
        " |" + " " * BOX_WIDTH + "|",
        " |   Damage Points: ?? |",
        _EDGE,
    ]


@dataclass(frozen=True, slots=True, order=True)
class Card:
    # only damage takes part in comparisons
    name: str = field(compare=False)
    strength: int

    def beats(self, other: Card) -> bool:
        return self.strength > other.strength

    def is_empty(self) -> bool:
        """True for the sentinel handed out by an exhausted deck."""
        return self.name == "" and self.strength == 0

    def show(self) -> str:
        return f"{self.name} (Damage: {self.strength})"

    def box_lines(self) -> List[str]:
        return [
            _EDGE,
            f" | {self.name:<19} |",
            " |" + " " * BOX_WIDTH + "|",
            f" |   Damage Points: {self.strength:<3}    |",
            _EDGE,
        ]

    def __str__(self) -> str:
        return self.show()

    def __repr__(self) -> str:
        return f"Card({self.name!r}, {self.strength})"


EMPTY_CARD = Card(name="", strength=0)
