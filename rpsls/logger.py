"""Pretty round logging."""

import os
from datetime import datetime
from typing import Optional

from .models.game import RoundResult


class RoundLogger:
    """Logs resolved rounds to a session file in a pretty format."""

    def __init__(self, log_dir: str = "logs"):
        """
        Initialize the round logger.

        Args:
            log_dir: Directory to store log files
        """
        self.log_dir = log_dir
        self.session_file: Optional[str] = None

        # Create logs directory if needed
        os.makedirs(log_dir, exist_ok=True)

        # Create session log file
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.session_file = os.path.join(log_dir, f"rpsls_session_{timestamp}.log")

    def _pad_line(self, content: str, width: int = 58, edge: str = "║") -> str:
        """Pad content to fit in a box line."""
        padding = max(0, width - len(content))
        return f"{edge}{content}" + " " * padding + edge

    def log_round(self, round_num: int, player_name: str, opponent_name: str, result: RoundResult):
        """Append one resolved round to the log file."""
        timestamp = datetime.now().isoformat()
        lines = [
            "╔" + "═" * 58 + "╗",
            self._pad_line(f"  ROUND #{round_num:>4}  │  {timestamp[:19]}"),
            "╟" + "─" * 58 + "╢",
            self._pad_line(f"  {player_name[:12]:<12}: {result.own.value}"),
            self._pad_line(f"  {opponent_name[:12]:<12}: {result.other.value}"),
            "╟" + "─" * 58 + "╢",
            self._pad_line(f"  Result: {result.outcome.value.upper()}"),
            "╚" + "═" * 58 + "╝",
            "",
        ]

        with open(self.session_file, "a", encoding="utf-8") as f:
            f.write("\n".join(lines))
            f.write("\n")

    def log_session_start(self, player_name: str, opponent_name: str, seed: Optional[int] = None):
        """Log session start info."""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        seed_str = "random" if seed is None else str(seed)
        lines = [
            "┌" + "─" * 58 + "┐",
            self._pad_line(" " * 14 + "ROCK PAPER SCISSORS LIZARD SPOCK", edge="│"),
            "├" + "─" * 58 + "┤",
            self._pad_line(f"  Started: {timestamp}", edge="│"),
            self._pad_line(f"  Player: {player_name}", edge="│"),
            self._pad_line(f"  Opponent: {opponent_name}", edge="│"),
            self._pad_line(f"  Seed: {seed_str}", edge="│"),
            "└" + "─" * 58 + "┘",
            "",
        ]

        with open(self.session_file, "w", encoding="utf-8") as f:
            f.write("\n".join(lines))
            f.write("\n")

    def log_session_end(self, rounds_played: int):
        """Log session end summary."""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        lines = [
            "┌" + "─" * 58 + "┐",
            self._pad_line(f"  Ended: {timestamp}", edge="│"),
            self._pad_line(f"  Rounds Played: {rounds_played}", edge="│"),
            "└" + "─" * 58 + "┘",
            "",
        ]

        with open(self.session_file, "a", encoding="utf-8") as f:
            f.write("\n".join(lines))
            f.write("\n")

        print(f"\n  📝 Round log saved to: {self.session_file}")
