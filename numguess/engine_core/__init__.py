"""
Engine Core - Rules, target selection and guess evaluation.

The engine is the pure part of the game:
1. Holds the fixed game rules (the guessing range)
2. Picks a secret target from an explicit random source
3. Compares guesses against the target
"""

from .rules import GameRules, DEFAULT_RULES
from .picker import RandomPicker, RandomSource
from .evaluator import GuessOutcome, evaluate_guess, classify_guess

__all__ = [
    "GameRules",
    "DEFAULT_RULES",
    "RandomPicker",
    "RandomSource",
    "GuessOutcome",
    "evaluate_guess",
    "classify_guess",
]
