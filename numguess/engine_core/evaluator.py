"""
Guess Evaluator - Three-way comparison of a guess against the target.
"""

from __future__ import annotations
from enum import Enum


class GuessOutcome(Enum):
    """How a guess relates to the target."""
    TOO_LOW = -1
    CORRECT = 0
    TOO_HIGH = 1


def evaluate_guess(guess: int, target: int) -> int:
    """
    Compare a guess to the target.

    Returns 0 if equal, a positive value if the guess is too high,
    a negative value if it is too low.
    """
    if guess == target:
        return 0
    elif guess > target:
        return 1
    else:
        return -1


def classify_guess(guess: int, target: int) -> GuessOutcome:
    """Same comparison as evaluate_guess, as a GuessOutcome."""
    return GuessOutcome(evaluate_guess(guess, target))
