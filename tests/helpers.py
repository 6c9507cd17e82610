from dataclasses import dataclass

from pokebattle.core.card import Card
from pokebattle.core.deck import Deck
from pokebattle.core.player import Player


def scripted(*answers):
    """
    Stand-in for input(): hands out answers in order and records every prompt.
    Raises EOFError once the script runs out, like a closed stdin.
    """
    prompts = []
    it = iter(answers)

    def read(prompt=""):
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read, prompts


def fixed_deck(*strengths):
    """Deck whose cards come off in the order given (the first argument is drawn first)."""
    cards = [Card(f"Mon{i}", s) for i, s in enumerate(strengths)]
    return Deck(cards=list(reversed(cards)))


@dataclass(slots=True)
class FirstCardPlayer(Player):
    """Always plays the leftmost card."""

    def select_card(self, opponent):
        return self.play_card(0)
