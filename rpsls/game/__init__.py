"""Game engine components."""

from .engine import (
    BEATS,
    HAND_NAMES,
    HANDS,
    beats,
    play,
    play_round,
    random_hand,
)

__all__ = [
    "BEATS",
    "HAND_NAMES",
    "HANDS",
    "beats",
    "play",
    "play_round",
    "random_hand",
]
