"""
Interactive rock-paper-scissors-lizard-spock against a random opponent.

Usage:
    # Play rounds until you quit
    rpsls-play

    # Play a single round without prompting
    rpsls-play --hand spock

    # Three rounds against a seeded opponent, logged to logs/
    rpsls-play --rounds 3 --seed 42 --log

    # Show the hands or the rules
    rpsls-play --list
    rpsls-play --rules
"""
import argparse
import random
import sys
from typing import Optional

from .config import settings
from .display import pretty_hand, format_outcome, format_rules, RESET, BOLD, CYAN
from .game.engine import HAND_NAMES, play_round
from .logger import RoundLogger
from .models.game import Hand, RoundResult
from .players import HumanPlayer, RandomPlayer


def _hand_arg(value: str) -> Hand:
    try:
        return Hand.from_string(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play rock-paper-scissors-lizard-spock")
    parser.add_argument("--hand", type=_hand_arg,
                       help="Play one round with this hand and exit")
    parser.add_argument("--rounds", "-n", type=int, default=0,
                       help="Number of rounds to play (default: until you quit)")
    parser.add_argument("--name", default=settings.player_name,
                       help=f"Your name (default: {settings.player_name})")
    parser.add_argument("--opponent", default=settings.opponent_name,
                       help=f"Opponent name (default: {settings.opponent_name})")
    parser.add_argument("--seed", type=int, default=settings.seed,
                       help="Seed for the opponent's random source")
    parser.add_argument("--log", action="store_true", default=settings.log_rounds,
                       help="Write each round to a session log file")
    parser.add_argument("--log-dir", default=settings.log_dir,
                       help=f"Directory for session logs (default: {settings.log_dir})")
    parser.add_argument("--list", action="store_true",
                       help="List the hand names and exit")
    parser.add_argument("--rules", action="store_true",
                       help="Show which hand beats which and exit")
    return parser.parse_args(argv)


def show_round(result: RoundResult, player_name: str, opponent_name: str):
    """Print one resolved round."""
    print()
    print(f"  {BOLD}{player_name}:{RESET} {pretty_hand(result.own)}")
    print(f"  {BOLD}{opponent_name}:{RESET} {pretty_hand(result.other)}")
    print(f"  {format_outcome(result.outcome)}")


def play_rounds(
    human: HumanPlayer,
    opponent: RandomPlayer,
    rounds: int = 0,
    logger: Optional[RoundLogger] = None,
) -> int:
    """Play independent rounds until quit or `rounds` are done. Returns rounds played."""
    played = 0
    while rounds <= 0 or played < rounds:
        own = human.get_hand()
        if own is None:
            break

        result = play_round(own, opponent.get_hand())
        played += 1
        show_round(result, human.name, opponent.name)
        if logger:
            logger.log_round(played, human.name, opponent.name, result)

    return played


def main(argv=None):
    args = parse_args(argv)

    if args.list:
        for name in HAND_NAMES:
            print(name)
        return 0

    if args.rules:
        print(format_rules())
        return 0

    opponent = RandomPlayer(args.opponent, random.Random(args.seed))

    logger = None
    if args.log:
        logger = RoundLogger(args.log_dir)
        logger.log_session_start(args.name, args.opponent, args.seed)

    if args.hand is not None:
        result = play_round(args.hand, opponent.get_hand())
        show_round(result, args.name, opponent.name)
        if logger:
            logger.log_round(1, args.name, opponent.name, result)
            logger.log_session_end(1)
        return 0

    print()
    print(f"{BOLD}{'='*60}{RESET}")
    print(f"{BOLD}{CYAN}  ROCK PAPER SCISSORS LIZARD SPOCK: {args.name} vs {args.opponent}{RESET}")
    print(f"{BOLD}{'='*60}{RESET}")

    played = play_rounds(HumanPlayer(args.name), opponent, args.rounds, logger)

    print()
    print(f"  Rounds played: {played}")
    if logger:
        logger.log_session_end(played)

    return 0


if __name__ == "__main__":
    sys.exit(main())
