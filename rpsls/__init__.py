"""Rock-paper-scissors-lizard-spock hand engine."""

from .game import HAND_NAMES, HANDS, BEATS, beats, play, play_round, random_hand
from .models import Hand, Outcome, RoundResult

__all__ = [
    "BEATS",
    "HAND_NAMES",
    "HANDS",
    "Hand",
    "Outcome",
    "RoundResult",
    "beats",
    "play",
    "play_round",
    "random_hand",
]
