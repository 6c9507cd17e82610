from __future__ import annotations

from typing import List, Sequence

from .card import Card, hidden_box_lines, show_cards
from .player import Player

RULE = "=" * 44
FACE_DOWN = "[#]"


def render_board(player_one: Player, player_two: Player, played: Sequence[Card],
                 remaining: int, card_one: Card, card_two: Card,
                 reveal: bool) -> List[str]:
    """
    Build the board block shown each round, top to bottom: opponent's hand
    face-down, played cards, player one's hand, deck count, then both plays
    (boxed when revealed, "??" boxes otherwise).
    """
    lines = [
        RULE,
        f"{player_two.name}'s Cards: ",
        " ".join([FACE_DOWN] * player_two.card_count()),
        RULE,
        f"Played Cards: {show_cards(played)}",
        RULE,
        f"{player_one.name}'s Cards: {show_cards(player_one.hand)}",
        RULE,
        f"Cards Remaining in Deck: {remaining}",
        f"{player_one.name} plays: ",
    ]
    lines += card_one.box_lines() if reveal else hidden_box_lines()
    lines.append(" vs. ")
    lines.append(f"{player_two.name} plays: ")
    lines += card_two.box_lines() if reveal else hidden_box_lines()
    lines.append("")
    return lines
