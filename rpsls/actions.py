"""Hand choice parsing."""

import re
from dataclasses import dataclass
from typing import Optional

from .game.engine import HANDS
from .models.game import Hand


@dataclass
class ParsedChoice:
    """Parsed player input."""
    action_type: str  # hand, quit, error
    hand: Optional[Hand] = None
    error_message: Optional[str] = None  # For error actions

    def __str__(self):
        if self.action_type == "error":
            return f"Error: {self.error_message or 'Unknown error'}"
        if self.action_type == "hand" and self.hand is not None:
            return self.hand.value
        return self.action_type


class HandParser:
    """Parse a hand choice typed by a player."""

    RE_QUIT = re.compile(r'^(q|quit|exit)$', re.IGNORECASE)
    RE_INDEX = re.compile(r'^(\d+)$')

    def parse(self, text: str) -> ParsedChoice:
        """Parse a hand name, prefix, 1-based index, or quit command."""
        text = text.strip()
        if not text:
            return ParsedChoice("error", error_message="No hand given")

        if self.RE_QUIT.match(text):
            return ParsedChoice("quit")

        match = self.RE_INDEX.match(text)
        if match:
            index = int(match.group(1))
            if 1 <= index <= len(HANDS):
                return ParsedChoice("hand", HANDS[index - 1])
            return ParsedChoice("error", error_message=f"Pick a number from 1 to {len(HANDS)}")

        try:
            return ParsedChoice("hand", Hand.from_string(text))
        except ValueError as e:
            return ParsedChoice("error", error_message=str(e))
