"""Rock-paper-scissors-lizard-spock rules."""

import random

from ..models.game import Hand, Outcome, RoundResult


HANDS: tuple[Hand, ...] = tuple(Hand)
HAND_NAMES: tuple[str, ...] = tuple(hand.value for hand in HANDS)

# Each hand beats exactly two others
BEATS: dict[Hand, frozenset[Hand]] = {
    Hand.ROCK: frozenset({Hand.LIZARD, Hand.SCISSORS}),
    Hand.PAPER: frozenset({Hand.SPOCK, Hand.ROCK}),
    Hand.SCISSORS: frozenset({Hand.PAPER, Hand.LIZARD}),
    Hand.LIZARD: frozenset({Hand.SPOCK, Hand.PAPER}),
    Hand.SPOCK: frozenset({Hand.ROCK, Hand.SCISSORS}),
}


def beats(hand: Hand) -> frozenset[Hand]:
    """Hands defeated by `hand`."""
    return BEATS[hand]


def play(own: Hand, other: Hand) -> Outcome:
    """Resolve `own` against `other`."""
    if other in beats(own):
        return Outcome.WIN
    if own in beats(other):
        return Outcome.LOSE
    return Outcome.DRAW


def play_round(own: Hand, other: Hand) -> RoundResult:
    """Resolve two hands into a RoundResult."""
    return RoundResult(own=own, other=other, outcome=play(own, other))


def random_hand(rng: random.Random) -> Hand:
    """Pick a hand uniformly using the caller's random source."""
    return rng.choice(HANDS)
