"""Root conftest for path setup and shared fixtures.

This file is loaded first by pytest and ensures the project root
is on sys.path before any test modules are imported.
"""

import sys
from pathlib import Path

# Add project root to path IMMEDIATELY
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import random

import pytest

from rpsls.models.game import Hand, Outcome, RoundResult


# =============================================================================
# Random Source Fixtures
# =============================================================================


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


# =============================================================================
# Result Fixtures
# =============================================================================


@pytest.fixture
def sample_round_result() -> RoundResult:
    """Rock crushing scissors."""
    return RoundResult(own=Hand.ROCK, other=Hand.SCISSORS, outcome=Outcome.WIN)


@pytest.fixture
def log_dir(tmp_path) -> Path:
    """Temporary directory for session logs."""
    return tmp_path / "logs"


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence of lines.

    Raises EOFError once the lines run out, like a closed terminal.
    """

    def _feed(*lines):
        remaining = list(lines)

        def fake_input(prompt=""):
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed
