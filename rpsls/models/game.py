"""Hand and outcome models."""

from enum import Enum
from pydantic import BaseModel


class Hand(str, Enum):
    """Playable hand. The value is the display name."""

    ROCK = "Rock"
    PAPER = "Paper"
    SCISSORS = "Scissors"
    LIZARD = "Lizard"
    SPOCK = "Spock"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        """Parse hand from a name or unambiguous prefix like 'rock' or 'sp'."""
        text = s.strip().lower()
        if not text:
            raise ValueError(f"Invalid hand string: {s!r}")

        matches = [hand for hand in cls if hand.value.lower().startswith(text)]
        if len(matches) == 1:
            return matches[0]
        if len(matches) > 1:
            names = ", ".join(hand.value for hand in matches)
            raise ValueError(f"Ambiguous hand string: {s!r} (could be {names})")
        raise ValueError(f"Invalid hand string: {s!r}")


class Outcome(str, Enum):
    """Result of a hand from the first player's perspective."""

    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


class RoundResult(BaseModel):
    """Two hands and how they resolved."""

    own: Hand
    other: Hand
    outcome: Outcome

    def __str__(self) -> str:
        return f"{self.own} vs {self.other}: {self.outcome.value.capitalize()}"
