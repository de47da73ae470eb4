"""Pydantic models for hands and results."""

from .game import (
    Hand,
    Outcome,
    RoundResult,
)

__all__ = [
    "Hand",
    "Outcome",
    "RoundResult",
]
