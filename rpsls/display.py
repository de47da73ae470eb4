"""Terminal display helpers."""

from .game.engine import HANDS, beats
from .models.game import Hand, Outcome

HAND_SYMBOLS = {
    Hand.ROCK: "✊",
    Hand.PAPER: "✋",
    Hand.SCISSORS: "✌",
    Hand.LIZARD: "🦎",
    Hand.SPOCK: "🖖",
}

# ANSI colors
RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
BLUE = "\033[94m"
CYAN = "\033[96m"
DIM = "\033[2m"

OUTCOME_COLORS = {
    Outcome.WIN: GREEN,
    Outcome.LOSE: RED,
    Outcome.DRAW: YELLOW,
}


def pretty_hand(hand: Hand) -> str:
    """Hand name with its symbol."""
    return f"{HAND_SYMBOLS[hand]} {hand.value}"


def format_outcome(outcome: Outcome) -> str:
    """Colored outcome label."""
    return f"{BOLD}{OUTCOME_COLORS[outcome]}{outcome.value.capitalize()}{RESET}"


def format_rules() -> str:
    """Dominance table, one hand per line, in enumeration order."""
    lines = []
    for hand in HANDS:
        # Enumeration order, not set order
        beaten = [h.value for h in HANDS if h in beats(hand)]
        lines.append(f"{hand.value:<9} beats {', '.join(beaten)}")
    return "\n".join(lines)
