"""
Random Picker - Draws the secret target for a session.

The random source is passed in explicitly rather than using the
module-level generator, so a session can be made deterministic
with a seeded random.Random.
"""

from __future__ import annotations
import random
from typing import Protocol

from .rules import GameRules, DEFAULT_RULES


class RandomSource(Protocol):
    """Anything that can draw an inclusive random integer."""

    def randint(self, a: int, b: int) -> int:
        ...


class RandomPicker:
    """
    Picks targets uniformly from the rules' range.

    Usage:
        picker = RandomPicker(rng=random.Random(42))
        target = picker.pick()
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        rules: GameRules = DEFAULT_RULES,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.rules = rules

    def pick(self) -> int:
        """Draw one target in [rules.minimum, rules.maximum]."""
        return self.rng.randint(self.rules.minimum, self.rules.maximum)
