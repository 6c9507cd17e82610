from __future__ import annotations

import argparse
import random
from typing import Callable, List, Optional

from pokebattle.core.deck import Deck
from pokebattle.core.match import Match, RevealMode
from pokebattle.core.player import AutomatedPlayer, InteractivePlayer

MENU = [
    "Select Game Mode:",
    "1. Human vs Computer",
    "2. Computer vs Computer",
]
HUMAN_VS_COMPUTER    = 1
COMPUTER_VS_COMPUTER = 2


def build_match(choice: Optional[int], *, seed: Optional[int] = None,
                read: Callable[[str], str] = input,
                write: Callable[[str], None] = print) -> Optional[Match]:
    """Set up the players and deck for a menu choice, or None if it is not on the menu."""
    # one generator feeds the shuffle and every computer player, so a seed replays a whole match
    rng  = random.Random(seed)
    deck = Deck.new_shuffled(rng=rng)

    if choice == HUMAN_VS_COMPUTER:
        player_one = InteractivePlayer("Player 1", read=read, write=write)
        player_two = AutomatedPlayer("Computer", rng=rng)
        mode       = RevealMode.STAGED
    elif choice == COMPUTER_VS_COMPUTER:
        player_one = AutomatedPlayer("Computer 1", rng=rng)
        player_two = AutomatedPlayer("Computer 2", rng=rng)
        mode       = RevealMode.IMMEDIATE
    else:
        return None

    return Match(player_one, player_two, mode=mode, deck=deck,
                 write=write, pause=read)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pokebattle",
                                     description="Pokémon card duel in the terminal.")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed the shuffle and computer players to replay a match")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, *,
         read: Callable[[str], str] = input,
         write: Callable[[str], None] = print) -> int:
    args = _parse_args(argv)
    try:
        for line in MENU:
            write(line)
        raw = read("Enter your choice: ").strip()
        choice = int(raw) if raw.isdecimal() else None

        match = build_match(choice, seed=args.seed, read=read, write=write)
        if match is None:
            write("Invalid choice.")
            return 0
        match.play()
    except (EOFError, KeyboardInterrupt):
        write("\nInput closed, leaving the game.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
