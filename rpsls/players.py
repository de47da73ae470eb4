"""Player implementations."""

import random
from typing import Optional

from .actions import HandParser
from .display import pretty_hand, RESET, BOLD, RED, CYAN
from .game.engine import HANDS, random_hand
from .models.game import Hand


class RandomPlayer:
    """Computer opponent that picks uniformly at random."""

    def __init__(self, name: str = "Computer", rng: Optional[random.Random] = None):
        self.name = name
        self.rng = rng if rng is not None else random.Random()

    def get_hand(self) -> Hand:
        """Draw a hand from this player's random source."""
        return random_hand(self.rng)


class HumanPlayer:
    """Interactive human player."""

    def __init__(self, name: str = "You"):
        self.name = name
        self.parser = HandParser()

    def get_hand(self) -> Optional[Hand]:
        """Get a hand from the terminal. Returns None to quit."""
        print()
        for i, hand in enumerate(HANDS, start=1):
            print(f"  {CYAN}[{i}]{RESET} {pretty_hand(hand)}")
        print(f"  {CYAN}[Q]{RESET} Quit")
        print()

        while True:
            try:
                inp = input(f"  {BOLD}Your hand:{RESET} ")
            except (EOFError, KeyboardInterrupt):
                return None

            if not inp.strip():
                continue

            choice = self.parser.parse(inp)
            if choice.action_type == "quit":
                return None
            if choice.action_type == "hand":
                return choice.hand

            print(f"  {RED}{choice.error_message}{RESET}")
